"""Command-line entry points for the workout planner."""
