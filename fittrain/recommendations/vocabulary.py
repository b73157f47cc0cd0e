"""Keyword tables for exercise matching.

Single source of truth for every keyword the rule set and the workout
composers match against. Rules import from here, nowhere else.

All keys and keywords are lower case. Exercise fields are lower-cased
before comparison (see Exercise.*_key).
"""

from fittrain.profiles.models import FitnessLevel

# Difficulty labels accepted for each fitness level
DIFFICULTY_SYNONYMS: dict[FitnessLevel, frozenset[str]] = {
    FitnessLevel.BEGINNER: frozenset({"beginner", "easy", "novice"}),
    FitnessLevel.INTERMEDIATE: frozenset({"intermediate", "moderate"}),
    FitnessLevel.ADVANCED: frozenset({"advanced", "hard", "expert"}),
}

# Difficulty levels a client may be given. Advanced clients are absent:
# they accept any difficulty, including unrecognised labels.
ALLOWED_LEVELS: dict[FitnessLevel, tuple[FitnessLevel, ...]] = {
    FitnessLevel.BEGINNER: (FitnessLevel.BEGINNER,),
    FitnessLevel.INTERMEDIATE: (FitnessLevel.BEGINNER, FitnessLevel.INTERMEDIATE),
}

# Score for (client level, exercise level) pairs; missing pairs score 0
LEVEL_MATCH_SCORES: dict[tuple[FitnessLevel, FitnessLevel], int] = {
    (FitnessLevel.BEGINNER, FitnessLevel.BEGINNER): 10,
    (FitnessLevel.INTERMEDIATE, FitnessLevel.INTERMEDIATE): 10,
    (FitnessLevel.INTERMEDIATE, FitnessLevel.BEGINNER): 5,
    (FitnessLevel.ADVANCED, FitnessLevel.ADVANCED): 10,
    (FitnessLevel.ADVANCED, FitnessLevel.INTERMEDIATE): 5,
    (FitnessLevel.ADVANCED, FitnessLevel.BEGINNER): 2,
}

# Equipment descriptors that mean "no equipment"
BODYWEIGHT_EXACT: frozenset[str] = frozenset({"none", "bodyweight"})
BODYWEIGHT_KEYWORDS: tuple[str, ...] = ("none", "bodyweight")

# Location equipment allowances
HOME_EQUIPMENT_KEYWORDS: tuple[str, ...] = ("dumbbell", "resistance band", "kettlebell")
GYM_EQUIPMENT_KEYWORDS: tuple[str, ...] = ("machine", "barbell", "cable")
OUTDOOR_EQUIPMENT_KEYWORDS: tuple[str, ...] = ("bodyweight",)

# Client goal -> exercise categories it favours
GOAL_CATEGORIES: dict[str, frozenset[str]] = {
    "weight_loss": frozenset({"cardio", "hiit", "functional", "plyometric"}),
    "muscle_building": frozenset({"strength", "hypertrophy"}),
    "strength": frozenset({"strength", "power"}),
    "endurance": frozenset({"cardio", "endurance"}),
    "flexibility": frozenset({"flexibility", "mobility"}),
    "general_fitness": frozenset({"functional", "cardio", "strength", "balance"}),
    "rehabilitation": frozenset({"rehabilitation", "flexibility", "balance"}),
}
GOAL_MATCH_POINTS = 8
GOAL_STRENGTH_BONUS_GOALS: frozenset[str] = frozenset({"muscle_building", "strength"})
GOAL_STRENGTH_BONUS = 2
GOAL_CARDIO_WEIGHT_LOSS_BONUS = 3
GOAL_SCORE_CAP = 15

# Preferred exercise type -> exercise categories
PREFERRED_TYPE_CATEGORIES: dict[str, frozenset[str]] = {
    "cardio": frozenset({"cardio", "hiit"}),
    "strength": frozenset({"strength", "hypertrophy", "power"}),
    "flexibility": frozenset({"flexibility", "mobility", "yoga"}),
    "functional": frozenset({"functional", "balance", "core"}),
    "sport_specific": frozenset({"sport_specific", "plyometric"}),
    "group_classes": frozenset({"cardio", "functional", "hiit"}),
}
PREFERRED_TYPE_POINTS = 8
PREFERRED_TYPE_SCORE_CAP = 10

# Health condition exclusions
BACK_PAIN_MUSCLE = "lower back"
BACK_PAIN_NAME_KEYWORDS: tuple[str, ...] = ("deadlift", "good morning", "back extension")
KNEE_PAIN_NAME_KEYWORDS: tuple[str, ...] = ("jump", "lunge", "squat")
KNEE_PAIN_CATEGORIES: frozenset[str] = frozenset({"plyometric"})
SHOULDER_PAIN_NAME_KEYWORDS: tuple[str, ...] = ("overhead press", "shoulder press", "military press")
SHOULDER_PAIN_MUSCLE = "shoulders"
SHOULDER_PAIN_INSTRUCTION_KEYWORD = "overhead"

# Weekday names -> index (0 = Sunday)
WEEKDAY_INDEX: dict[str, int] = {
    "sunday": 0,
    "monday": 1,
    "tuesday": 2,
    "wednesday": 3,
    "thursday": 4,
    "friday": 5,
    "saturday": 6,
}
WEEKDAY_NAMES: tuple[str, ...] = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")
DEFAULT_TRAINING_DAYS: tuple[int, ...] = (1, 3, 5)  # Mon, Wed, Fri
