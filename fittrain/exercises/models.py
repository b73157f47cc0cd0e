"""Exercise library record.

Exercises are supplied by the host application (see store.py) and are
never mutated by the recommendation engine. Field names follow Python
conventions; the stored JSON shape uses camelCase and is accepted via
aliases.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Exercise(BaseModel):
    """A single exercise from the library.

    Attributes:
        id: Exercise identifier (unique within a library)
        name: Display name, also matched by health-condition exclusions
        category: Free-form category (strength, cardio, flexibility, ...)
        muscle_group: Primary muscle group
        secondary_muscle_groups: Ordered secondary muscle groups
        equipment: Free-text equipment descriptor (matched by keyword)
        difficulty: Difficulty label (Beginner, Intermediate, Advanced or a synonym)
        description: Free-text description
        instructions: Free-text instructions
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    id: int | str
    name: str
    category: str = ""
    muscle_group: str = ""
    secondary_muscle_groups: list[str] = Field(default_factory=list)
    equipment: str = ""
    difficulty: str = ""
    description: str = ""
    instructions: str = ""

    # Stored alongside the record, not used for matching
    video_url: str | None = None
    image_url: str | None = None
    source: str | None = None
    is_public: bool = True
    is_template: bool = False
    tags: list[str] = Field(default_factory=list)
    created_at: str | None = None
    updated_at: str | None = None

    @property
    def category_key(self) -> str:
        """Category canonicalized for matching."""
        return self.category.strip().lower()

    @property
    def equipment_key(self) -> str:
        return self.equipment.strip().lower()

    @property
    def difficulty_key(self) -> str:
        return self.difficulty.strip().lower()

    @property
    def name_key(self) -> str:
        return self.name.lower()
