"""Persistence — SQLite-backed session store and its record mapping."""

from workout_planner.persistence.mapping import session_to_persisted, session_to_runtime
from workout_planner.persistence.records import PersistedSession
from workout_planner.persistence.seeding import default_sessions, seed_default_sessions
from workout_planner.persistence.store import SessionStore

__all__ = [
    "PersistedSession",
    "SessionStore",
    "default_sessions",
    "seed_default_sessions",
    "session_to_persisted",
    "session_to_runtime",
]
