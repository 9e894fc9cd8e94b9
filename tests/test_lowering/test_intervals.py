"""Tests for interval lowering."""

from __future__ import annotations

import logging

from workout_planner.lowering.intervals import lower_group, lower_session, lower_workout
from workout_planner.models.alert import HeartRateZoneAlert
from workout_planner.models.enums import ActivityType, SessionLocation, StepPurpose
from workout_planner.models.goal import OpenGoal, TimeGoal
from workout_planner.models.interval import IntervalStep
from workout_planner.models.movement import Movement
from workout_planner.models.session import ActivityGroup, Exercise, Rest, Workout


def _purposes(block):
    return [step.purpose for step in block.steps]


def _names(block):
    return [step.display_name for step in block.steps]


W, R = StepPurpose.WORK, StepPurpose.RECOVERY


class TestLowerWorkout:
    def test_three_exercises_one_rest(self):
        workout = Workout(
            exercises=(
                Exercise(Movement.PULL_UPS),
                Exercise(Movement.CHIN_UPS),
                Exercise(Movement.CHEST_DIPS),
            ),
            rest_periods=(Rest(goal=TimeGoal(30)),),
        )
        block = lower_workout(workout)
        assert _purposes(block) == [W, R, W, W]
        assert _names(block) == ["Pull Ups", "Rest", "Chin Ups", "Chest Dips"]

    def test_two_exercises_two_rests(self):
        workout = Workout(
            exercises=(Exercise(Movement.PULL_UPS), Exercise(Movement.CHIN_UPS)),
            rest_periods=(Rest(goal=TimeGoal(30)), Rest("Walk", TimeGoal(60))),
        )
        block = lower_workout(workout)
        assert _purposes(block) == [W, R, W, R]
        assert block.steps[3] == IntervalStep(R, TimeGoal(60), "Walk")

    def test_extra_rests_dropped(self, caplog):
        workout = Workout(
            exercises=(Exercise(Movement.RUN),),
            rest_periods=(Rest(), Rest(), Rest()),
        )
        with caplog.at_level(logging.DEBUG, logger="workout_planner.lowering.intervals"):
            block = lower_workout(workout)
        assert _purposes(block) == [W, R]
        assert "Dropped 2 rest period(s)" in caplog.text

    def test_no_exercises_gives_empty_block(self):
        block = lower_workout(Workout(rest_periods=(Rest(),)))
        assert block.steps == ()

    def test_carries_goal_alert_and_iterations(self):
        alert = HeartRateZoneAlert(zone=4)
        workout = Workout(
            exercises=(Exercise(Movement.JUMP_ROPE, TimeGoal(90), alert),),
            iterations=5,
        )
        block = lower_workout(workout)
        assert block.iterations == 5
        assert block.steps[0].goal == TimeGoal(90)
        assert block.steps[0].alert == alert

    def test_rest_steps_have_no_alert(self):
        workout = Workout(exercises=(Exercise(Movement.RUN),), rest_periods=(Rest(),))
        assert lower_workout(workout).steps[1].alert is None

    def test_deterministic(self, brick_session):
        for workout in brick_session.workouts:
            assert lower_workout(workout) == lower_workout(workout)


class TestLowerGroup:
    def test_name_uses_group_title(self, brick_session):
        plan = lower_group(brick_session.activity_groups[0], "Brick")
        assert plan.display_name == "Brick - Bike"
        assert plan.activity == ActivityType.CYCLING
        assert plan.location == SessionLocation.OUTDOOR
        assert len(plan.blocks) == 2

    def test_name_falls_back_to_activity(self, brick_session):
        plan = lower_group(brick_session.activity_groups[1], "Brick")
        assert plan.display_name == "Brick - Running"


class TestLowerSession:
    def test_one_unit_per_group_in_order(self, brick_session):
        plans = lower_session(brick_session)
        assert [p.activity for p in plans] == [ActivityType.CYCLING, ActivityType.RUNNING]

    def test_leg_day(self, leg_day):
        plans = lower_session(leg_day)
        assert len(plans) == 1
        (block,) = plans[0].blocks
        assert block.iterations == 3
        assert block.steps == (
            IntervalStep(W, OpenGoal(), "Barbell Back Squat"),
            IntervalStep(R, TimeGoal(30), "Rest"),
        )

    def test_empty_group_lowers_to_no_blocks(self):
        group = ActivityGroup(activity=ActivityType.RUNNING, location=SessionLocation.OUTDOOR)
        assert lower_group(group, "S").blocks == ()
