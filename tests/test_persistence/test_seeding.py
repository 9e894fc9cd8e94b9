"""Tests for built-in sessions and seeding."""

from __future__ import annotations

import threading

import pytest

from workout_planner.lowering.validation import ensure_schedulable, session_warnings
from workout_planner.models.enums import ActivityType
from workout_planner.persistence.mapping import session_to_runtime
from workout_planner.persistence.seeding import default_sessions, seed_default_sessions
from workout_planner.persistence.store import SessionStore


class TestDefaultSessions:
    def test_names(self):
        names = [s.display_name for s in default_sessions()]
        assert names == ["Upper Body", "Lower Body", "Mixed Cardio", "Yoga Flow"]

    def test_all_marked_prebuilt(self):
        assert all(s.is_prebuilt for s in default_sessions())

    def test_fresh_ids_each_call(self):
        first, second = default_sessions(), default_sessions()
        assert {s.id for s in first}.isdisjoint({s.id for s in second})

    @pytest.mark.parametrize("index", range(4))
    def test_schedulable(self, index):
        ensure_schedulable(default_sessions()[index])

    def test_interleaving_is_clean(self):
        for session in default_sessions():
            assert session_warnings(session) == []

    def test_mixed_cardio_groups(self):
        mixed = default_sessions()[2]
        assert [g.activity for g in mixed.activity_groups] == [
            ActivityType.CYCLING,
            ActivityType.RUNNING,
            ActivityType.JUMP_ROPE,
        ]

    def test_only_yoga_is_mind_and_body(self):
        assert [s.is_mind_and_body for s in default_sessions()] == [False, False, False, True]


class TestSeedDefaultSessions:
    def test_seeds_once(self, store):
        assert seed_default_sessions(store) == 4
        assert seed_default_sessions(store) == 0
        assert store.count(prebuilt=True) == 4

    def test_seeded_sessions_reload(self, store):
        seed_default_sessions(store)
        names = {session_to_runtime(r).display_name for r in store.fetch_all()}
        assert names == {"Upper Body", "Lower Body", "Mixed Cardio", "Yoga Flow"}

    def test_skips_when_any_prebuilt_present(self, store):
        seed_default_sessions(store)
        store.delete(store.fetch_all()[0].id)
        assert seed_default_sessions(store) == 0
        assert store.count() == 3

    def test_concurrent_seeding_inserts_one_set(self, tmp_path):
        db_path = tmp_path / "shared.db"
        SessionStore(db_path)
        results: list[int] = []

        def worker():
            results.append(seed_default_sessions(SessionStore(db_path)))

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert sorted(results) == [0, 0, 0, 4]
        assert SessionStore(db_path).count(prebuilt=True) == 4
