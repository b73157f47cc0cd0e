"""Weekly Plan Composer.

Maps a client's preferred training days to weekday indices and composes
one daily workout per training day. Day-to-day variety comes from the
daily composer's day-offset rotation.
"""

from collections.abc import Sequence

from loguru import logger

from fittrain.exercises.models import Exercise
from fittrain.profiles.models import ClientProfile
from fittrain.recommendations.calendar import weekday_index
from fittrain.recommendations.daily import compose_daily_workout
from fittrain.recommendations.types import WeeklyPlan
from fittrain.recommendations.vocabulary import DEFAULT_TRAINING_DAYS


def resolve_training_days(profile: ClientProfile) -> list[int]:
    """Resolve the weekday indices a client trains on.

    Rules:
    - Preferred day names map to 0-6 case-insensitively; unknown names are dropped
    - Repeated names are kept here and collapse in the plan mapping
    - No preferred days defaults to Monday, Wednesday, Friday
    - A training frequency smaller than the day count truncates the list,
      keeping the original order

    Args:
        profile: Client profile

    Returns:
        Weekday indices in preference order
    """
    if profile.preferred_training_days:
        days: list[int] = []
        unknown: list[str] = []
        for name in profile.preferred_training_days:
            index = weekday_index(name)
            if index is None:
                unknown.append(name)
            else:
                days.append(index)
        if unknown:
            logger.warning(
                "resolve_training_days: dropped unrecognised day names",
                client_id=profile.id,
                unknown_days=unknown,
            )
    else:
        days = list(DEFAULT_TRAINING_DAYS)

    frequency = profile.training_frequency
    if frequency is not None and len(days) > frequency:
        days = days[:frequency]

    return days


def compose_weekly_plan(exercises: Sequence[Exercise], profile: ClientProfile) -> WeeklyPlan:
    """Compose a week of workouts for a client.

    Args:
        exercises: Full exercise library
        profile: Client profile; missing fields mean no restriction

    Returns:
        Mapping of weekday index (0 = Sunday) to that day's workout, in
        preference order. Callers relying on a day count should check the
        number of entries: unrecognised day names are dropped.
    """
    plan: WeeklyPlan = {}
    for day in resolve_training_days(profile):
        plan[day] = compose_daily_workout(exercises, profile, day)

    logger.debug(
        "compose_weekly_plan: composed",
        client_id=profile.id,
        training_days=list(plan),
    )
    return plan
