"""Root conftest for all tests.

Shared builders for exercises and client profiles.
"""

import itertools
from collections.abc import Callable

import pytest

from fittrain.exercises.models import Exercise
from fittrain.profiles.models import ClientProfile

_ids = itertools.count(1)


def build_exercise(**overrides) -> Exercise:
    """Build an exercise with neutral defaults (bodyweight strength, beginner)."""
    exercise_id = overrides.pop("id", next(_ids))
    fields = {
        "id": exercise_id,
        "name": f"Exercise {exercise_id}",
        "category": "strength",
        "muscle_group": "Chest",
        "secondary_muscle_groups": [],
        "equipment": "None",
        "difficulty": "Beginner",
        "description": "",
        "instructions": "",
    }
    fields.update(overrides)
    return Exercise(**fields)


@pytest.fixture
def exercise_factory() -> Callable[..., Exercise]:
    return build_exercise


@pytest.fixture
def empty_profile() -> ClientProfile:
    return ClientProfile(id=1)


@pytest.fixture
def exercise_library() -> list[Exercise]:
    """A small mixed library covering every workout section."""
    return [
        build_exercise(id=1, name="Push-Up", category="Strength", muscle_group="Chest", equipment="None", difficulty="Beginner"),
        build_exercise(id=2, name="Dumbbell Row", category="Strength", muscle_group="Back", equipment="Dumbbells", difficulty="Beginner"),
        build_exercise(id=3, name="Barbell Squat", category="Strength", muscle_group="Legs", equipment="Barbell", difficulty="Intermediate"),
        build_exercise(id=4, name="Deadlift", category="Strength", muscle_group="Lower Back", equipment="Barbell", difficulty="Advanced"),
        build_exercise(id=5, name="Goblet Squat", category="Hypertrophy", muscle_group="Legs", equipment="Dumbbell", difficulty="Beginner"),
        build_exercise(id=6, name="Kettlebell Swing", category="Functional", muscle_group="Glutes", equipment="Kettlebell", difficulty="Intermediate"),
        build_exercise(id=7, name="Overhead Press", category="Strength", muscle_group="Shoulders", equipment="Barbell", difficulty="Intermediate"),
        build_exercise(id=8, name="Jumping Jacks", category="Cardio", muscle_group="Full Body", equipment="None", difficulty="Beginner"),
        build_exercise(id=9, name="Burpees", category="HIIT", muscle_group="Full Body", equipment="Bodyweight", difficulty="Intermediate"),
        build_exercise(id=10, name="Box Jump", category="Plyometric", muscle_group="Legs", equipment="Box", difficulty="Advanced"),
        build_exercise(id=11, name="Hamstring Stretch", category="Flexibility", muscle_group="Hamstrings", equipment="None", difficulty="Beginner"),
        build_exercise(id=12, name="Hip Circles", category="Mobility", muscle_group="Hips", equipment="None", difficulty="Beginner"),
        build_exercise(id=13, name="Rowing Machine", category="Cardio", muscle_group="Full Body", equipment="Machine", difficulty="Intermediate"),
        build_exercise(id=14, name="Cable Fly", category="Hypertrophy", muscle_group="Chest", equipment="Cable", difficulty="Intermediate"),
    ]
