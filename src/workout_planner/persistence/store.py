"""SQLite store for persisted workout sessions, on SQLAlchemy.

The schema comes from the models in :mod:`workout_planner.persistence.records`.
Children reference their parent with ``ON DELETE CASCADE`` (foreign keys
are switched on per connection), so deleting a session removes its whole
subtree.

Every unit of work runs in one ORM transaction that opens with
``BEGIN IMMEDIATE``: a session is written completely or not at all, and
concurrent writers (threads or processes) are serialised by SQLite's write
lock. Loaded trees are returned detached with every level populated.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from sqlalchemy import create_engine, event, func, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload, sessionmaker

from workout_planner.exceptions import StoreError
from workout_planner.persistence.records import (
    Base,
    PersistedActivityGroup,
    PersistedSession,
    PersistedWorkout,
)

logger = logging.getLogger(__name__)

_BUSY_TIMEOUT_S = 30.0
IN_MEMORY = ":memory:"

_WHOLE_TREE = (
    selectinload(PersistedSession.activity_groups)
    .selectinload(PersistedActivityGroup.workouts)
    .selectinload(PersistedWorkout.exercises),
    selectinload(PersistedSession.activity_groups)
    .selectinload(PersistedActivityGroup.workouts)
    .selectinload(PersistedWorkout.rest_periods),
)


def _on_connect(dbapi_connection, connection_record) -> None:
    # Leave BEGIN to the "begin" hook below instead of the driver
    dbapi_connection.isolation_level = None
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys = ON")
    cursor.close()


def _on_begin(conn) -> None:
    conn.exec_driver_sql("BEGIN IMMEDIATE")


def create_store_engine(db_path: Path | str) -> Engine:
    """Engine for a SQLite file (or ``":memory:"``) with FK and locking hooks.

    An in-memory database lives on one connection per thread, so it is only
    shared by calls made from the thread that created it.
    """
    url = "sqlite://" if str(db_path) == IN_MEMORY else f"sqlite:///{Path(db_path)}"
    engine = create_engine(
        url,
        connect_args={"check_same_thread": False, "timeout": _BUSY_TIMEOUT_S},
    )
    event.listen(engine, "connect", _on_connect)
    event.listen(engine, "begin", _on_begin)
    return engine


class SessionStore:
    """SQLite-backed store of persisted session trees.

    Usage::

        store = SessionStore("workouts.db")
        store.save(session_to_persisted(session))
        records = store.fetch_all()

    All SQLAlchemy failures surface as :class:`StoreError`.
    """

    def __init__(self, db_path: Path | str = "workouts.db") -> None:
        self.db_path = db_path if str(db_path) == IN_MEMORY else Path(db_path)
        self.engine = create_store_engine(db_path)
        self._sessions = sessionmaker(bind=self.engine, expire_on_commit=False)
        try:
            Base.metadata.create_all(self.engine)
        except SQLAlchemyError as exc:
            raise StoreError(f"Cannot open store at {self.db_path}: {exc}") from exc

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        """Run several store calls atomically under one write lock.

        Pass the yielded session to ``insert``, ``remove`` and
        ``has_prebuilt`` to make them part of the transaction. The
        transaction commits on exit and rolls back on any exception.
        """
        try:
            with self._sessions.begin() as session:
                yield session
        except SQLAlchemyError as exc:
            logger.warning("Rolled back store transaction: %s", exc)
            raise StoreError(f"Store operation failed: {exc}") from exc

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def save(self, record: PersistedSession) -> None:
        """Insert a full session tree atomically."""
        with self.transaction() as session:
            self.insert(session, record)
        logger.info("Saved session %s (%r)", record.id, record.display_name)

    def replace(self, record: PersistedSession) -> bool:
        """Replace the stored tree with the same id. Returns True if one existed."""
        with self.transaction() as session:
            existed = self.remove(session, record.id)
            self.insert(session, record)
        logger.info("Replaced session %s (existed=%s)", record.id, existed)
        return existed

    def delete(self, session_id: str) -> bool:
        """Delete a session and, by cascade, all of its descendants."""
        with self.transaction() as session:
            deleted = self.remove(session, session_id)
        if deleted:
            logger.info("Deleted session %s", session_id)
        return deleted

    @staticmethod
    def insert(session: Session, record: PersistedSession) -> None:
        """Add *record* and its subtree to an open transaction and flush it."""
        session.add(record)
        session.flush()

    @staticmethod
    def remove(session: Session, session_id: str) -> bool:
        """Delete one session inside an open transaction; children cascade."""
        record = session.get(PersistedSession, session_id)
        if record is None:
            return False
        session.delete(record)
        session.flush()
        return True

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def has_prebuilt(self, session: Optional[Session] = None) -> bool:
        """Return True if any stored session is marked prebuilt."""
        query = select(PersistedSession.id).where(PersistedSession.is_prebuilt.is_(True)).limit(1)
        if session is not None:
            return session.scalar(query) is not None
        with self.transaction() as read_session:
            return read_session.scalar(query) is not None

    def count(self, prebuilt: Optional[bool] = None) -> int:
        """Count stored sessions, optionally only (non-)prebuilt ones."""
        query = select(func.count()).select_from(PersistedSession)
        if prebuilt is not None:
            query = query.where(PersistedSession.is_prebuilt.is_(prebuilt))
        with self.transaction() as session:
            return int(session.scalar(query))

    def fetch(self, session_id: str) -> Optional[PersistedSession]:
        """Load one session tree, or None if it does not exist."""
        query = select(PersistedSession).where(PersistedSession.id == session_id).options(*_WHOLE_TREE)
        with self.transaction() as session:
            return session.scalars(query).one_or_none()

    def fetch_all(self, prebuilt: Optional[bool] = None) -> list[PersistedSession]:
        """Load every session tree, newest first."""
        query = (
            select(PersistedSession)
            .options(*_WHOLE_TREE)
            .order_by(PersistedSession.date_created.desc())
        )
        if prebuilt is not None:
            query = query.where(PersistedSession.is_prebuilt.is_(prebuilt))
        with self.transaction() as session:
            return list(session.scalars(query))
