"""Daily Workout Composer.

Builds one day's workout in four sections (warm-up, main, finisher,
cooldown) from the exercises that suit a client.

Selection is deterministic. Each section's pool is ranked, the top band
(BAND_MULTIPLIER x desired count) is kept, and items are picked from the
band with a day-offset rotation:

    index = (i + day_of_week * DAY_OFFSET) % band_size

so different weekdays surface different items from the same band without
randomness or stored state.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from loguru import logger

from fittrain.exercises.models import Exercise
from fittrain.profiles.models import ClientProfile
from fittrain.recommendations.calendar import today_index
from fittrain.recommendations.rules import filter_suitable
from fittrain.recommendations.scorer import rank, score_exercises
from fittrain.recommendations.types import DailyWorkout, Recommendation, WorkoutRole

BAND_MULTIPLIER = 3
DAY_OFFSET = 3


@dataclass(frozen=True)
class RoleSpec:
    """How one workout section is filled.

    Attributes:
        role: Workout section
        categories: Lower-case exercise categories feeding the section, in pool order
        count: Number of exercises to select
        beginner_cardio: Whether beginner-difficulty cardio also feeds the section
    """

    role: WorkoutRole
    categories: tuple[str, ...]
    count: int
    beginner_cardio: bool = False


ROLE_SPECS: tuple[RoleSpec, ...] = (
    RoleSpec(WorkoutRole.WARMUP, ("flexibility", "mobility"), count=2, beginner_cardio=True),
    RoleSpec(WorkoutRole.MAIN, ("strength", "hypertrophy", "functional"), count=4),
    RoleSpec(WorkoutRole.FINISHER, ("cardio", "hiit", "plyometric"), count=1),
    RoleSpec(WorkoutRole.COOLDOWN, ("flexibility", "mobility"), count=2),
)


def _warmup_tags(position: int, profile: ClientProfile) -> list[str]:
    return ["Warm-up", "Prepare your body"]


def _main_tags(position: int, profile: ClientProfile) -> list[str]:
    tags = ["Main workout"]
    if position == 0:
        tags.append("Start with this")
    if profile.has_goal("strength"):
        tags.append("Strength focus")
    if profile.has_goal("muscle_building"):
        tags.append("Muscle builder")
    return tags


def _finisher_tags(position: int, profile: ClientProfile) -> list[str]:
    return ["Workout finisher", "Push yourself"]


def _cooldown_tags(position: int, profile: ClientProfile) -> list[str]:
    return ["Cooldown", "Recovery"]


ROLE_TAGS: dict[WorkoutRole, Callable[[int, ClientProfile], list[str]]] = {
    WorkoutRole.WARMUP: _warmup_tags,
    WorkoutRole.MAIN: _main_tags,
    WorkoutRole.FINISHER: _finisher_tags,
    WorkoutRole.COOLDOWN: _cooldown_tags,
}


def group_by_category(exercises: Sequence[Exercise]) -> dict[str, list[Exercise]]:
    """Group exercises by lower-cased category, keeping input order."""
    grouped: dict[str, list[Exercise]] = {}
    for exercise in exercises:
        grouped.setdefault(exercise.category_key, []).append(exercise)
    return grouped


def build_role_pool(spec: RoleSpec, grouped: dict[str, list[Exercise]]) -> list[Exercise]:
    """Collect the exercises feeding one section.

    Pools may overlap across roles: a flexibility exercise can feed both
    the warm-up and the cooldown.
    """
    pool: list[Exercise] = []
    for category in spec.categories:
        pool.extend(grouped.get(category, []))
    if spec.beginner_cardio:
        pool.extend(e for e in grouped.get("cardio", []) if e.difficulty_key == "beginner")
    return pool


def rotate_select(ranked: Sequence[Recommendation], count: int, day_of_week: int) -> list[Recommendation]:
    """Pick `count` items from the top band with the day-offset rotation.

    Args:
        ranked: Recommendations, best first
        count: Number of items wanted
        day_of_week: Weekday index (0 = Sunday)

    Returns:
        Up to `count` distinct recommendations from the top band
    """
    band = list(ranked[: min(count * BAND_MULTIPLIER, len(ranked))])
    if not band:
        return []

    offset = day_of_week * DAY_OFFSET
    return [band[(i + offset) % len(band)] for i in range(min(count, len(band)))]


def _compose_section(
    spec: RoleSpec,
    pool: Sequence[Exercise],
    profile: ClientProfile,
    day_of_week: int,
) -> list[Recommendation]:
    if not pool:
        return []

    ranked = rank(score_exercises(pool, profile))
    selected = rotate_select(ranked, spec.count, day_of_week)
    tag_for = ROLE_TAGS[spec.role]
    return [rec.with_tags(*tag_for(position, profile)) for position, rec in enumerate(selected)]


def compose_daily_workout(
    exercises: Sequence[Exercise],
    profile: ClientProfile,
    day_of_week: int | None = None,
) -> DailyWorkout:
    """Compose one day's workout for a client.

    Args:
        exercises: Full exercise library
        profile: Client profile; missing fields mean no restriction
        day_of_week: Weekday index, 0 = Sunday (defaults to today). Values
            outside 0-6 are reduced modulo 7 before the rotation, so 8
            selects exactly what 1 does. The offset is never computed from
            an unreduced day.

    Returns:
        DailyWorkout with warm-up, main, finisher and cooldown sections.
        Sections with no suitable exercises are empty.
    """
    if day_of_week is None:
        day_of_week = today_index()
    day_of_week %= 7

    suitable = filter_suitable(exercises, profile)
    grouped = group_by_category(suitable)

    sections: dict[str, list[Recommendation]] = {}
    for spec in ROLE_SPECS:
        pool = build_role_pool(spec, grouped)
        sections[spec.role.value] = _compose_section(spec, pool, profile, day_of_week)

    logger.debug(
        "compose_daily_workout: composed",
        client_id=profile.id,
        day_of_week=day_of_week,
        suitable=len(suitable),
        selected={role: [rec.exercise.id for rec in recs] for role, recs in sections.items()},
    )
    return DailyWorkout(**sections)
