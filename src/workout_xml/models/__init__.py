"""Data models for workout-xml."""

from .exercise import EXERCISE_FIELDS, Exercise, ExerciseField, Regimen

__all__ = [
    "EXERCISE_FIELDS",
    "Exercise",
    "ExerciseField",
    "Regimen",
]
