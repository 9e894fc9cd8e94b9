"""Tests for plain-text workout and session descriptions."""

from __future__ import annotations

from workout_planner.description import describe_session, describe_workout
from workout_planner.models.movement import Movement
from workout_planner.models.session import Exercise, Workout


class TestDescribeWorkout:
    def test_leg_day_workout(self, leg_day):
        text = describe_workout(leg_day.workouts[0])
        lines = text.splitlines()
        assert lines[0] == "Workout"
        assert lines[1] == "   Sets: 3"
        assert lines[2] == "   Target Metrics: Power, Stability, Strength"
        assert lines[3] == "   Target Muscles: Glutes, Quadriceps"
        assert lines[4] == "   Exercises:"
        assert lines[5] == "     • Barbell Back Squat - Goal: No goal"
        assert lines[6] == "       Rest: Rest (0:30)"

    def test_single_set_omits_sets_line(self):
        text = describe_workout(Workout(exercises=(Exercise(Movement.RUN),)))
        assert "Sets:" not in text

    def test_alert_rendered(self, brick_session):
        text = describe_workout(brick_session.workouts[1])
        assert "• Cycling - Goal: 20.0 km - Alert: HR 140-160 BPM" in text
        assert "Rest: Spin easy (2:00)" in text

    def test_extra_rests_not_rendered(self):
        from workout_planner.models.session import Rest

        workout = Workout(exercises=(Exercise(Movement.RUN),), rest_periods=(Rest(), Rest("Extra")))
        assert "Extra" not in describe_workout(workout)

    def test_stable_output(self, brick_session):
        workout = brick_session.workouts[1]
        assert describe_workout(workout) == describe_workout(workout)


class TestDescribeSession:
    def test_banner_and_numbering(self, brick_session):
        text = describe_session(brick_session)
        assert text.startswith("=== BRICK ===\n")
        assert "Bike (Outdoor)" in text
        assert "Running (Outdoor)" in text
        assert "1.1. Warmup" in text
        assert "1.2. Aerobic Endurance Workout" in text
        assert "2.1. Transition run" in text

    def test_session_tags(self, leg_day):
        text = describe_session(leg_day)
        assert "Target Muscles: Glutes, Quadriceps" in text
