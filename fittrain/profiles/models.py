"""Client profile used to personalise recommendations.

Every field is optional. A missing constraint means "no restriction",
never an error. Tag lists are normalised on the way in (trimmed,
lower-cased, blanks dropped) so rules can compare them directly.
"""

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class FitnessLevel(StrEnum):
    """Client fitness level."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class TrainingLocation(StrEnum):
    """Where the client trains."""

    HOME = "home"
    GYM = "gym"
    OUTDOORS = "outdoors"


class ClientProfile(BaseModel):
    """Best-effort client profile consumed by the recommendation engine."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    id: int | str | None = Field(default=None, description="Client profile identifier")
    user_id: int | str | None = Field(default=None, description="Owning user identifier")
    age: int | None = Field(default=None, description="Age in years", ge=1, le=120)
    height: float | None = Field(default=None, description="Height in centimetres", gt=0)
    weight: float | None = Field(default=None, description="Weight in kilograms", gt=0)
    fitness_level: FitnessLevel | None = Field(default=None, description="Fitness level, None = unconstrained")
    goals: list[str] = Field(default_factory=list, description="Goal tags, e.g. weight_loss")
    health_conditions: list[str] = Field(default_factory=list, description="Health-condition tags, e.g. back_pain")
    preferred_training_days: list[str] = Field(default_factory=list, description="Weekday names")
    preferred_exercise_types: list[str] = Field(default_factory=list, description="Preferred exercise-type tags")
    equipment_access: list[str] = Field(default_factory=list, description="Available equipment tags")
    training_location: TrainingLocation | None = Field(default=None, description="Training location")
    training_frequency: int | None = Field(default=None, description="Maximum training days per week", ge=1)
    trainer_id: int | str | None = None
    created_at: str | None = None
    updated_at: str | None = None

    @field_validator("fitness_level", "training_location", mode="before")
    @classmethod
    def normalize_choice(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip().lower()
            return value or None
        return value

    @field_validator(
        "goals",
        "health_conditions",
        "preferred_training_days",
        "preferred_exercise_types",
        "equipment_access",
        mode="before",
    )
    @classmethod
    def normalize_tags(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            value = [value]
        if isinstance(value, (list, tuple, set)):
            return [tag.strip().lower() for tag in value if isinstance(tag, str) and tag.strip()]
        return value

    @field_validator("training_frequency", mode="before")
    @classmethod
    def normalize_frequency(cls, value: Any) -> Any:
        # Stored profiles use 0 for "not set"
        if value == 0 or value == "0":
            return None
        return value

    def has_goal(self, goal: str) -> bool:
        return goal in self.goals
