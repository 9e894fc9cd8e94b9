"""Workout planner — compose, store, lower and schedule multi-activity sessions."""
