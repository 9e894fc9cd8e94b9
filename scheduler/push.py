"""Push CLI — seed the session store and push sessions to Garmin Connect.

Usage:
    python -m scheduler.push --seed
    python -m scheduler.push --list
    python -m scheduler.push --show "Mixed Cardio"
    python -m scheduler.push --session "Mixed Cardio" --date 2026-10-20T07:00 [--dry-run]
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime, timedelta

from garmin_client import GarminClient, GarminClientError, GarminWorkoutScheduler
from workout_planner.description import describe_session
from workout_planner.exceptions import WorkoutPlannerError
from workout_planner.persistence import SessionStore, seed_default_sessions
from workout_planner.serialization import to_garmin_json_string
from workout_planner.services import (
    InMemoryWorkoutScheduler,
    LoggingNotifier,
    SessionScheduler,
    WorkoutManager,
)

from scheduler import config

logger = logging.getLogger(__name__)


def _list_sessions(manager: WorkoutManager) -> None:
    for title, sessions in (
        ("Activity sessions", manager.activity_sessions),
        ("Mind & body sessions", manager.mind_and_body_sessions),
    ):
        print(f"{title}:")
        if not sessions:
            print("  (none)")
        for session in sessions:
            marker = " [built-in]" if session.is_prebuilt else ""
            groups = ", ".join(group.title for group in session.activity_groups)
            print(f"  {session.display_name}{marker} - {groups}")


def _parse_start(value: str) -> datetime:
    try:
        return datetime.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not an ISO date/time: {value!r}") from exc


def push_session(
    manager: WorkoutManager,
    name: str,
    start: datetime,
    dry_run: bool = False,
) -> int:
    """Schedule the newest session called *name*. Returns a process exit code."""
    session = manager.find_by_name(name)
    if session is None:
        logger.error("No session named %r", name)
        return 1

    spacing = timedelta(minutes=config.SPACING_MIN)
    if dry_run:
        backend = InMemoryWorkoutScheduler()
    else:
        client = GarminClient(
            email=config.GARMIN_EMAIL,
            password=config.GARMIN_PASSWORD,
            token_dir=config.TOKEN_DIR,
            prompt_mfa=lambda: input("Garmin MFA code: "),
        )
        backend = GarminWorkoutScheduler(client)

    scheduled = SessionScheduler(backend, LoggingNotifier(), spacing).schedule_session(session, start)

    if dry_run:
        for entry in scheduled:
            print(f"# {entry.date.isoformat()}")
            print(to_garmin_json_string(entry.plan.workout))

    logger.info("Scheduled %d workout(s) for %r", len(scheduled), session.display_name)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Workout planner push CLI")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--seed", action="store_true", help="Seed built-in sessions into the store")
    group.add_argument("--list", action="store_true", help="List stored sessions")
    group.add_argument("--show", metavar="NAME", help="Print a session description")
    group.add_argument("--session", metavar="NAME", help="Session to schedule")
    parser.add_argument("--date", type=_parse_start, help="Start date/time (ISO 8601)")
    parser.add_argument(
        "--dry-run", action="store_true", help="Print Garmin JSON instead of uploading",
    )
    args = parser.parse_args(argv)

    if args.session and args.date is None:
        parser.error("--session requires --date")

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        store = SessionStore(config.STORE_PATH)
        manager = WorkoutManager(store)

        if args.seed:
            inserted = seed_default_sessions(store)
            print(f"Seeded {inserted} session(s) into {config.STORE_PATH}")
            return 0

        manager.load()
        if args.list:
            _list_sessions(manager)
            return 0
        if args.show:
            session = manager.find_by_name(args.show)
            if session is None:
                logger.error("No session named %r", args.show)
                return 1
            print(describe_session(session))
            return 0

        return push_session(manager, args.session, args.date, dry_run=args.dry_run)
    except (WorkoutPlannerError, GarminClientError) as exc:
        logger.error("%s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
