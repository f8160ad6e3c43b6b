"""Pytest configuration and fixtures."""

import pytest

from workout_xml.db import RegimenRepository
from workout_xml.models.exercise import Exercise, Regimen


@pytest.fixture
def regimen_path(tmp_path):
    """Path to a regimen file in a temporary directory."""
    return tmp_path / "Workout.xml"


@pytest.fixture
def repository(regimen_path):
    """Repository writing to a temporary regimen file."""
    return RegimenRepository(regimen_path)


@pytest.fixture
def squat():
    return Exercise(name="Squat", body_part="Legs", sets="3", reps="10", weight="135")


@pytest.fixture
def curl():
    return Exercise(name="Curl", body_part="Arms", sets="3", reps="12", weight="25")


@pytest.fixture
def sample_regimen(squat, curl):
    """Regimen with a leg and an arm exercise."""
    return Regimen(exercises=[squat, curl])
