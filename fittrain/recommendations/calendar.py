"""Weekday helpers.

Weekday indices follow the 0 = Sunday ... 6 = Saturday convention used by
every plan and workout in this package. `datetime.date.weekday()` counts
from Monday, so conversions go through today_index().
"""

from collections.abc import Mapping
from datetime import date, timedelta

from fittrain.recommendations.vocabulary import WEEKDAY_INDEX, WEEKDAY_NAMES


def today_index(today: date | None = None) -> int:
    """Weekday index of `today` (defaults to the current date)."""
    today = today or date.today()
    return (today.weekday() + 1) % 7


def weekday_index(name: str) -> int | None:
    """Map a weekday name to its index, case-insensitively. None if unknown."""
    return WEEKDAY_INDEX.get(name.strip().lower())


def weekday_name(day_index: int) -> str:
    return WEEKDAY_NAMES[day_index % 7]


def date_for_weekday(day_index: int, today: date | None = None) -> date:
    """Date of a weekday within the current Sunday-start week."""
    today = today or date.today()
    return today + timedelta(days=(day_index % 7) - today_index(today))


def default_plan_day(plan: Mapping[int, object], today: date | None = None) -> int | None:
    """Day to show first for a weekly plan.

    Returns:
        Today's index when today is a training day, otherwise the first
        planned day, or None for an empty plan
    """
    if not plan:
        return None
    current = today_index(today)
    if current in plan:
        return current
    return next(iter(plan))
