"""Tests for the daily workout composer.

Tests enforce that:
- Sections draw from the right category pools
- The day-offset rotation varies selections by weekday, deterministically
- Section tags are appended after ranking
- Degenerate input gives empty sections, never an error
"""

import pytest

from fittrain.profiles.models import ClientProfile
from fittrain.recommendations.calendar import today_index
from fittrain.recommendations.daily import (
    ROLE_SPECS,
    build_role_pool,
    compose_daily_workout,
    group_by_category,
    rotate_select,
)
from fittrain.recommendations.types import DailyWorkout, Recommendation, WorkoutRole


def _ids(recommendations: list[Recommendation]) -> list:
    return [rec.exercise.id for rec in recommendations]


@pytest.fixture
def strength_pool(exercise_factory):
    """Twelve equally scored strength exercises, enough for a full main band."""
    return [exercise_factory(id=100 + i, name=f"Strength {i}", category="Strength") for i in range(1, 13)]


def test_sections_draw_from_category_pools(exercise_library, empty_profile):
    """Test section membership for an unconstrained client on Sunday."""
    workout = compose_daily_workout(exercise_library, empty_profile, 0)

    assert _ids(workout.warmup) == [11, 12]
    assert _ids(workout.main) == [1, 2, 3, 4]
    assert _ids(workout.finisher) == [8]
    assert _ids(workout.cooldown) == [11, 12]


def test_warmup_pool_includes_beginner_cardio_only(exercise_library):
    grouped = group_by_category(exercise_library)
    warmup_spec = next(spec for spec in ROLE_SPECS if spec.role == WorkoutRole.WARMUP)

    pool = build_role_pool(warmup_spec, grouped)

    assert [e.id for e in pool] == [11, 12, 8]


def test_pools_group_categories_case_insensitively(exercise_factory):
    grouped = group_by_category([exercise_factory(category="HIIT"), exercise_factory(category=" hiit ")])
    assert list(grouped) == ["hiit"]
    assert len(grouped["hiit"]) == 2


def test_main_section_rotates_with_day(exercise_library, empty_profile):
    monday = compose_daily_workout(exercise_library, empty_profile, 1)
    assert _ids(monday.main) == [4, 7, 5, 14]


def test_different_days_give_different_main_items(strength_pool, empty_profile):
    """Test day variety when the band is larger than the desired count."""
    monday = compose_daily_workout(strength_pool, empty_profile, 1)
    tuesday = compose_daily_workout(strength_pool, empty_profile, 2)

    assert _ids(monday.main) == [104, 105, 106, 107]
    assert _ids(tuesday.main) == [107, 108, 109, 110]
    assert _ids(monday.main) != _ids(tuesday.main)


def test_same_day_is_deterministic(exercise_library):
    profile = ClientProfile(goals=["muscle_building"], equipment_access=["dumbbell", "barbell"])
    first = compose_daily_workout(exercise_library, profile, 3)
    second = compose_daily_workout(exercise_library, profile, 3)
    assert first == second


def test_day_index_wraps_around(strength_pool, empty_profile):
    assert compose_daily_workout(strength_pool, empty_profile, 8) == compose_daily_workout(strength_pool, empty_profile, 1)


def test_defaults_to_today(strength_pool, empty_profile):
    expected = compose_daily_workout(strength_pool, empty_profile, today_index())
    assert compose_daily_workout(strength_pool, empty_profile) == expected


def test_top_band_prefers_higher_scores(exercise_factory, strength_pool):
    """Test that only the top 3x band is eligible for selection."""
    profile = ClientProfile(goals=["weight_loss"])
    functional = [exercise_factory(id=200 + i, category="Functional") for i in range(5)]
    exercises = strength_pool + functional

    # Functional scores 8, strength 0: band = 5 functional + first 7 strength
    assert _ids(compose_daily_workout(exercises, profile, 0).main) == [200, 201, 202, 203]
    assert _ids(compose_daily_workout(exercises, profile, 1).main) == [203, 204, 101, 102]

    selected = set()
    for day in range(7):
        selected.update(_ids(compose_daily_workout(exercises, profile, day).main))
    assert selected.isdisjoint({108, 109, 110, 111, 112})


def test_section_tags(exercise_library):
    profile = ClientProfile(goals=["strength", "muscle_building"])
    workout = compose_daily_workout(exercise_library, profile, 0)

    assert workout.warmup[0].tags == ["Warm-up", "Prepare your body"]
    assert workout.main[0].tags == ["Main workout", "Start with this", "Strength focus", "Muscle builder"]
    assert workout.main[1].tags == ["Main workout", "Strength focus", "Muscle builder"]
    assert workout.finisher[0].tags == ["Workout finisher", "Push yourself"]
    assert workout.cooldown[0].tags == ["Cooldown", "Recovery"]


def test_exercise_can_appear_in_warmup_and_cooldown(exercise_library, empty_profile):
    workout = compose_daily_workout(exercise_library, empty_profile, 0)
    shared = set(_ids(workout.warmup)) & set(_ids(workout.cooldown))
    assert shared == {11, 12}
    assert workout.warmup[0].tags != workout.cooldown[0].tags


def test_empty_role_pool_gives_empty_section(strength_pool, empty_profile):
    workout = compose_daily_workout(strength_pool, empty_profile, 0)
    assert workout.warmup == []
    assert workout.finisher == []
    assert workout.cooldown == []
    assert len(workout.main) == 4


def test_empty_library_gives_empty_workout(empty_profile):
    workout = compose_daily_workout([], empty_profile, 2)
    assert workout == DailyWorkout()
    assert workout.is_empty


def test_knee_pain_excluded_on_every_day(exercise_library):
    profile = ClientProfile(health_conditions=["knee_pain"])
    for day in range(7):
        workout = compose_daily_workout(exercise_library, profile, day)
        for _, recs in workout.sections():
            assert all(rec.exercise.name != "Barbell Squat" for rec in recs)
            assert all(rec.exercise.category_key != "plyometric" for rec in recs)


# ---------------------------------------------------------------------------
# Rotation
# ---------------------------------------------------------------------------


@pytest.fixture
def ranked(exercise_factory):
    return [Recommendation(exercise=exercise_factory(id=i), score=100 - i) for i in range(20)]


@pytest.mark.parametrize(
    ("day", "expected"),
    [
        (0, [0, 1, 2, 3]),
        (1, [3, 4, 5, 6]),
        (3, [9, 10, 11, 0]),
        (4, [0, 1, 2, 3]),
    ],
)
def test_rotate_select_over_band(ranked, day, expected):
    """Test index = (i + day * 3) % band_size over a band of 12."""
    assert _ids(rotate_select(ranked, 4, day)) == expected


def test_rotate_select_band_smaller_than_count(ranked):
    selected = rotate_select(ranked[:3], 4, 5)
    assert sorted(_ids(selected)) == [0, 1, 2]


def test_rotate_select_empty():
    assert rotate_select([], 2, 3) == []
