"""WorkoutManager — loads, stores and edits authored sessions."""

from __future__ import annotations

import logging
import uuid

from workout_planner.exceptions import SessionNotFoundError
from workout_planner.lowering.validation import session_warnings
from workout_planner.models.session import ActivitySession
from workout_planner.persistence.mapping import session_to_persisted, session_to_runtime
from workout_planner.persistence.store import SessionStore

logger = logging.getLogger(__name__)


class WorkoutManager:
    """Keeps runtime sessions in sync with a SessionStore.

    Sessions are split into ``activity_sessions`` and
    ``mind_and_body_sessions`` (every group yoga, pilates, flexibility or
    mind and body), each newest first. Edits replace a whole session tree.

    Usage::

        manager = WorkoutManager(SessionStore("workouts.db"))
        manager.load()
        manager.add(session)
    """

    def __init__(self, store: SessionStore) -> None:
        self.store = store
        self.activity_sessions: list[ActivitySession] = []
        self.mind_and_body_sessions: list[ActivitySession] = []

    @property
    def sessions(self) -> list[ActivitySession]:
        return self.activity_sessions + self.mind_and_body_sessions

    def load(self) -> None:
        """Reload every session from the store."""
        regular: list[ActivitySession] = []
        mind_body: list[ActivitySession] = []
        for record in self.store.fetch_all():
            session = session_to_runtime(record)
            if session.is_mind_and_body:
                mind_body.append(session)
            else:
                regular.append(session)

        self.activity_sessions = regular
        self.mind_and_body_sessions = mind_body
        logger.debug(
            "Loaded %d activity and %d mind & body sessions",
            len(regular),
            len(mind_body),
        )

    def get(self, session_id: uuid.UUID) -> ActivitySession:
        record = self.store.fetch(str(session_id))
        if record is None:
            raise SessionNotFoundError(session_id)
        return session_to_runtime(record)

    def find_by_name(self, display_name: str) -> ActivitySession | None:
        """Return the newest loaded session with *display_name*, if any."""
        matches = [s for s in self.sessions if s.display_name == display_name]
        if not matches:
            return None
        return max(matches, key=lambda s: s.date_created)

    def add(self, session: ActivitySession) -> list[str]:
        """Persist a new session and refresh.

        Returns:
            Interleaving warnings for the session's workouts (not fatal).
        """
        warnings = session_warnings(session)
        for warning in warnings:
            logger.warning("Session %r: %s", session.display_name, warning)

        self.store.save(session_to_persisted(session))
        self.load()
        return warnings

    def replace(self, session: ActivitySession) -> list[str]:
        """Replace the stored session with the same id by *session*.

        Raises:
            SessionNotFoundError: No stored session has ``session.id``.
        """
        if self.store.fetch(str(session.id)) is None:
            raise SessionNotFoundError(session.id)

        warnings = session_warnings(session)
        for warning in warnings:
            logger.warning("Session %r: %s", session.display_name, warning)

        self.store.replace(session_to_persisted(session))
        self.load()
        return warnings

    def delete(self, session_id: uuid.UUID) -> None:
        """Delete a session and its subtree.

        Raises:
            SessionNotFoundError: No stored session has *session_id*.
        """
        if not self.store.delete(str(session_id)):
            raise SessionNotFoundError(session_id)
        self.load()
