"""Recommendation output schemas.

All schemas are frozen dataclasses. The engine builds fresh instances on
every call and never mutates them; tags added after ranking produce a new
Recommendation via with_tags().
"""

from dataclasses import dataclass, field, replace
from enum import StrEnum

from fittrain.exercises.models import Exercise


class WorkoutRole(StrEnum):
    """Section of a daily workout."""

    WARMUP = "warmup"
    MAIN = "main"
    FINISHER = "finisher"
    COOLDOWN = "cooldown"


@dataclass(frozen=True)
class Recommendation:
    """A scored exercise for one client.

    Attributes:
        exercise: The recommended exercise
        score: Sum of every positive rule score
        match_reasons: Descriptions of the rules that scored, deduplicated, in rule order
        tags: Presentational labels for the UI (not derived from scores)
    """

    exercise: Exercise
    score: int
    match_reasons: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)

    def with_tags(self, *tags: str) -> "Recommendation":
        return replace(self, tags=[*self.tags, *tags])


@dataclass(frozen=True)
class DailyWorkout:
    """One day's structured workout.

    Empty sections mean no suitable exercise existed for that role; the
    caller renders no section for them.
    """

    warmup: list[Recommendation] = field(default_factory=list)
    main: list[Recommendation] = field(default_factory=list)
    finisher: list[Recommendation] = field(default_factory=list)
    cooldown: list[Recommendation] = field(default_factory=list)

    def section(self, role: WorkoutRole) -> list[Recommendation]:
        return getattr(self, role.value)

    def sections(self) -> list[tuple[WorkoutRole, list[Recommendation]]]:
        """Sections in workout order."""
        return [(role, self.section(role)) for role in WorkoutRole]

    @property
    def is_empty(self) -> bool:
        return not any(recs for _, recs in self.sections())


# Weekday index (0 = Sunday) -> that day's workout
WeeklyPlan = dict[int, DailyWorkout]
