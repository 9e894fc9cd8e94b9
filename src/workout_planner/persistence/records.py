"""Persisted mirror of the workout tree, as SQLAlchemy models.

One table per runtime node. Each row carries a stable id and its position
among siblings (``order_index``; storage order is meaningless). Parents own
their children through ``cascade="all, delete-orphan"`` relationships and
the foreign keys cascade on delete, so removing a session removes its whole
subtree. The ``back_populates`` parent references are for lookup only.

Tagged unions are flattened: a Goal becomes ``(goal_type, goal_value,
goal_unit_symbol)`` and an Alert becomes ``(alert_type, alert_value_one,
alert_value_two, alert_unit_symbol)``. Enum fields hold raw codes.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Boolean, DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship
from sqlalchemy.types import TypeDecorator


def new_record_id() -> str:
    return str(uuid.uuid4())


class UtcDateTime(TypeDecorator):
    """Timestamps stored as naive UTC and read back as aware UTC.

    A single offset keeps ``ORDER BY`` on the column chronological. Naive
    input is taken to be UTC already.
    """

    impl = DateTime
    cache_ok = True

    def process_bind_param(self, value: Optional[datetime], dialect) -> Optional[datetime]:
        if value is None:
            return None
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value

    def process_result_value(self, value: Optional[datetime], dialect) -> Optional[datetime]:
        if value is None:
            return None
        return value.replace(tzinfo=timezone.utc)


class Base(DeclarativeBase):
    pass


class PersistedSession(Base):
    __tablename__ = "sessions"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_record_id)
    display_name: Mapped[str] = mapped_column(String, nullable=False)
    date_created: Mapped[datetime] = mapped_column(UtcDateTime, nullable=False, index=True)
    is_prebuilt: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, index=True)

    activity_groups: Mapped[list["PersistedActivityGroup"]] = relationship(
        back_populates="session", cascade="all, delete-orphan", passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"PersistedSession(id={self.id!r}, display_name={self.display_name!r})"


class PersistedActivityGroup(Base):
    __tablename__ = "activity_groups"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_record_id)
    session_id: Mapped[str] = mapped_column(
        ForeignKey("sessions.id", ondelete="CASCADE"), nullable=False, index=True,
    )
    order_index: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    activity_code: Mapped[int] = mapped_column(Integer, nullable=False)
    location_code: Mapped[int] = mapped_column(Integer, nullable=False)
    display_name: Mapped[Optional[str]] = mapped_column(String, nullable=True)

    session: Mapped[PersistedSession] = relationship(
        back_populates="activity_groups", lazy="joined",
    )
    workouts: Mapped[list["PersistedWorkout"]] = relationship(
        back_populates="activity_group", cascade="all, delete-orphan", passive_deletes=True,
    )


class PersistedWorkout(Base):
    __tablename__ = "workouts"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_record_id)
    group_id: Mapped[str] = mapped_column(
        ForeignKey("activity_groups.id", ondelete="CASCADE"), nullable=False, index=True,
    )
    order_index: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    iterations: Mapped[Optional[int]] = mapped_column(Integer, nullable=True, default=1)
    workout_type: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    display_name: Mapped[Optional[str]] = mapped_column(String, nullable=True)

    activity_group: Mapped[PersistedActivityGroup] = relationship(
        back_populates="workouts", lazy="joined",
    )
    exercises: Mapped[list["PersistedExercise"]] = relationship(
        back_populates="workout", cascade="all, delete-orphan", passive_deletes=True,
    )
    rest_periods: Mapped[list["PersistedRest"]] = relationship(
        back_populates="workout", cascade="all, delete-orphan", passive_deletes=True,
    )


class PersistedExercise(Base):
    __tablename__ = "exercises"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_record_id)
    workout_id: Mapped[str] = mapped_column(
        ForeignKey("workouts.id", ondelete="CASCADE"), nullable=False, index=True,
    )
    order_index: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    movement_code: Mapped[int] = mapped_column(Integer, nullable=False)
    goal_type: Mapped[Optional[str]] = mapped_column(String, nullable=True, default="open")
    goal_value: Mapped[Optional[float]] = mapped_column(Float, nullable=True, default=0.0)
    goal_unit_symbol: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    alert_type: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    alert_value_one: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    alert_value_two: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    alert_unit_symbol: Mapped[Optional[str]] = mapped_column(String, nullable=True)

    workout: Mapped[PersistedWorkout] = relationship(back_populates="exercises", lazy="joined")


class PersistedRest(Base):
    __tablename__ = "rest_periods"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_record_id)
    workout_id: Mapped[str] = mapped_column(
        ForeignKey("workouts.id", ondelete="CASCADE"), nullable=False, index=True,
    )
    order_index: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    display_name: Mapped[str] = mapped_column(String, nullable=False, default="Rest")
    goal_type: Mapped[Optional[str]] = mapped_column(String, nullable=True, default="open")
    goal_value: Mapped[Optional[float]] = mapped_column(Float, nullable=True, default=0.0)
    goal_unit_symbol: Mapped[Optional[str]] = mapped_column(String, nullable=True)

    workout: Mapped[PersistedWorkout] = relationship(back_populates="rest_periods", lazy="joined")
