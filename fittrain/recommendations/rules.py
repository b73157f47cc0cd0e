"""Recommendation rule set.

Each rule pairs a hard filter (failing it removes the exercise) with a
soft score (a non-negative contribution to the ranking). Rules are pure
functions of (exercise, profile); the set is a fixed tuple of value
objects evaluated in order.

An exercise is eligible only if every rule's filter passes. Its total is
the sum of the rule scores that are > 0, and each of those rules
contributes its description as a match reason.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from fittrain.exercises.models import Exercise
from fittrain.profiles.models import ClientProfile, FitnessLevel, TrainingLocation
from fittrain.recommendations.vocabulary import (
    ALLOWED_LEVELS,
    BACK_PAIN_MUSCLE,
    BACK_PAIN_NAME_KEYWORDS,
    BODYWEIGHT_EXACT,
    BODYWEIGHT_KEYWORDS,
    DIFFICULTY_SYNONYMS,
    GOAL_CARDIO_WEIGHT_LOSS_BONUS,
    GOAL_CATEGORIES,
    GOAL_MATCH_POINTS,
    GOAL_SCORE_CAP,
    GOAL_STRENGTH_BONUS,
    GOAL_STRENGTH_BONUS_GOALS,
    GYM_EQUIPMENT_KEYWORDS,
    HOME_EQUIPMENT_KEYWORDS,
    KNEE_PAIN_CATEGORIES,
    KNEE_PAIN_NAME_KEYWORDS,
    LEVEL_MATCH_SCORES,
    OUTDOOR_EQUIPMENT_KEYWORDS,
    PREFERRED_TYPE_CATEGORIES,
    PREFERRED_TYPE_POINTS,
    PREFERRED_TYPE_SCORE_CAP,
    SHOULDER_PAIN_INSTRUCTION_KEYWORD,
    SHOULDER_PAIN_MUSCLE,
    SHOULDER_PAIN_NAME_KEYWORDS,
)


@dataclass(frozen=True)
class RecommendationRule:
    """A named filter + score heuristic.

    Attributes:
        name: Stable rule identifier
        description: Human-readable reason shown when the rule scores
        filter: Hard exclusion predicate, False removes the exercise
        score: Non-negative contribution to the exercise's total
    """

    name: str
    description: str
    filter: Callable[[Exercise, ClientProfile], bool]
    score: Callable[[Exercise, ClientProfile], int]


def _always(exercise: Exercise, profile: ClientProfile) -> bool:
    return True


def _never_scores(exercise: Exercise, profile: ClientProfile) -> int:
    return 0


# ---------------------------------------------------------------------------
# Equipment helpers
# ---------------------------------------------------------------------------


def is_bodyweight(exercise: Exercise) -> bool:
    """True when the equipment text mentions no equipment or bodyweight."""
    equipment = exercise.equipment_key
    return equipment in BODYWEIGHT_EXACT or any(keyword in equipment for keyword in BODYWEIGHT_KEYWORDS)


def is_equipment_free(exercise: Exercise) -> bool:
    """True only for the bare "None" / "Bodyweight" descriptors."""
    return exercise.equipment_key in BODYWEIGHT_EXACT


def exercise_level(exercise: Exercise) -> FitnessLevel | None:
    """Map an exercise's difficulty label to a fitness level via synonyms."""
    difficulty = exercise.difficulty_key
    for level, synonyms in DIFFICULTY_SYNONYMS.items():
        if difficulty in synonyms:
            return level
    return None


# ---------------------------------------------------------------------------
# 1. Fitness level
# ---------------------------------------------------------------------------


def _fitness_level_filter(exercise: Exercise, profile: ClientProfile) -> bool:
    if profile.fitness_level is None:
        return True
    allowed = ALLOWED_LEVELS.get(profile.fitness_level)
    if allowed is None:
        return True
    return exercise_level(exercise) in allowed


def _fitness_level_score(exercise: Exercise, profile: ClientProfile) -> int:
    if profile.fitness_level is None:
        return 0
    level = exercise_level(exercise)
    if level is None:
        return 0
    return LEVEL_MATCH_SCORES.get((profile.fitness_level, level), 0)


# ---------------------------------------------------------------------------
# 2. Equipment availability
# ---------------------------------------------------------------------------


def _equipment_filter(exercise: Exercise, profile: ClientProfile) -> bool:
    if not profile.equipment_access:
        return True
    if is_bodyweight(exercise):
        return True
    equipment = exercise.equipment_key
    return any(tag in equipment for tag in profile.equipment_access)


def _equipment_score(exercise: Exercise, profile: ClientProfile) -> int:
    if not profile.equipment_access:
        return 0
    if is_bodyweight(exercise):
        return 8
    equipment = exercise.equipment_key
    if any(tag == equipment for tag in profile.equipment_access):
        return 10
    if any(tag in equipment for tag in profile.equipment_access):
        return 7
    return 0


# ---------------------------------------------------------------------------
# 3. Goals
# ---------------------------------------------------------------------------


def _goal_score(exercise: Exercise, profile: ClientProfile) -> int:
    if not profile.goals:
        return 0

    category = exercise.category_key
    score = 0
    for goal in profile.goals:
        if category in GOAL_CATEGORIES.get(goal, ()):
            score += GOAL_MATCH_POINTS
        if goal in GOAL_STRENGTH_BONUS_GOALS:
            score += GOAL_STRENGTH_BONUS
        if goal == "weight_loss" and category == "cardio":
            score += GOAL_CARDIO_WEIGHT_LOSS_BONUS

    return min(score, GOAL_SCORE_CAP)


# ---------------------------------------------------------------------------
# 4. Training location
# ---------------------------------------------------------------------------


def _fits_home(exercise: Exercise) -> bool:
    equipment = exercise.equipment_key
    return is_equipment_free(exercise) or any(keyword in equipment for keyword in HOME_EQUIPMENT_KEYWORDS)


def _fits_outdoors(exercise: Exercise) -> bool:
    equipment = exercise.equipment_key
    return is_equipment_free(exercise) or any(keyword in equipment for keyword in OUTDOOR_EQUIPMENT_KEYWORDS)


def _location_filter(exercise: Exercise, profile: ClientProfile) -> bool:
    if profile.training_location == TrainingLocation.HOME:
        return _fits_home(exercise)
    if profile.training_location == TrainingLocation.OUTDOORS:
        return _fits_outdoors(exercise)
    return True


def _location_score(exercise: Exercise, profile: ClientProfile) -> int:
    location = profile.training_location
    equipment = exercise.equipment_key

    if location == TrainingLocation.HOME:
        if is_equipment_free(exercise):
            return 10
        if any(keyword in equipment for keyword in HOME_EQUIPMENT_KEYWORDS):
            return 8
        return 0

    if location == TrainingLocation.GYM:
        return 10 if any(keyword in equipment for keyword in GYM_EQUIPMENT_KEYWORDS) else 0

    if location == TrainingLocation.OUTDOORS:
        return 10 if _fits_outdoors(exercise) else 0

    return 0


# ---------------------------------------------------------------------------
# 5. Health conditions
# ---------------------------------------------------------------------------


def _aggravates_back(exercise: Exercise) -> bool:
    if exercise.muscle_group.strip().lower() == BACK_PAIN_MUSCLE:
        return True
    if any(muscle.strip().lower() == BACK_PAIN_MUSCLE for muscle in exercise.secondary_muscle_groups):
        return True
    return any(keyword in exercise.name_key for keyword in BACK_PAIN_NAME_KEYWORDS)


def _aggravates_knee(exercise: Exercise) -> bool:
    if exercise.category_key in KNEE_PAIN_CATEGORIES:
        return True
    return any(keyword in exercise.name_key for keyword in KNEE_PAIN_NAME_KEYWORDS)


def _aggravates_shoulder(exercise: Exercise) -> bool:
    if any(keyword in exercise.name_key for keyword in SHOULDER_PAIN_NAME_KEYWORDS):
        return True
    return (
        exercise.muscle_group.strip().lower() == SHOULDER_PAIN_MUSCLE
        and SHOULDER_PAIN_INSTRUCTION_KEYWORD in exercise.instructions.lower()
    )


# Conditions not listed here are ignored
HEALTH_CONDITION_EXCLUSIONS: dict[str, Callable[[Exercise], bool]] = {
    "back_pain": _aggravates_back,
    "knee_pain": _aggravates_knee,
    "shoulder_pain": _aggravates_shoulder,
}


def _health_conditions_filter(exercise: Exercise, profile: ClientProfile) -> bool:
    for condition in profile.health_conditions:
        excludes = HEALTH_CONDITION_EXCLUSIONS.get(condition)
        if excludes is not None and excludes(exercise):
            return False
    return True


# ---------------------------------------------------------------------------
# 6. Preferred exercise types
# ---------------------------------------------------------------------------


def _preferred_types_score(exercise: Exercise, profile: ClientProfile) -> int:
    if not profile.preferred_exercise_types:
        return 0

    category = exercise.category_key
    score = sum(
        PREFERRED_TYPE_POINTS
        for preferred in profile.preferred_exercise_types
        if category in PREFERRED_TYPE_CATEGORIES.get(preferred, ())
    )
    return min(score, PREFERRED_TYPE_SCORE_CAP)


RECOMMENDATION_RULES: tuple[RecommendationRule, ...] = (
    RecommendationRule(
        name="fitnessLevelMatch",
        description="Matches exercise difficulty with client fitness level",
        filter=_fitness_level_filter,
        score=_fitness_level_score,
    ),
    RecommendationRule(
        name="equipmentAvailability",
        description="Matches exercise equipment with client equipment access",
        filter=_equipment_filter,
        score=_equipment_score,
    ),
    RecommendationRule(
        name="goalMatch",
        description="Matches exercise category and muscle groups with client goals",
        filter=_always,
        score=_goal_score,
    ),
    RecommendationRule(
        name="locationMatch",
        description="Matches exercise with client training location",
        filter=_location_filter,
        score=_location_score,
    ),
    RecommendationRule(
        name="healthConditionsConsideration",
        description="Considers client health conditions when recommending exercises",
        filter=_health_conditions_filter,
        score=_never_scores,
    ),
    RecommendationRule(
        name="preferredExerciseTypes",
        description="Matches exercise category with client preferred exercise types",
        filter=_always,
        score=_preferred_types_score,
    ),
)


def passes_filters(
    exercise: Exercise,
    profile: ClientProfile,
    rules: Sequence[RecommendationRule] = RECOMMENDATION_RULES,
) -> bool:
    """Check an exercise against every rule's hard filter."""
    return all(rule.filter(exercise, profile) for rule in rules)


def filter_suitable(
    exercises: Sequence[Exercise],
    profile: ClientProfile,
    rules: Sequence[RecommendationRule] = RECOMMENDATION_RULES,
) -> list[Exercise]:
    """Keep exercises that pass every filter, in input order."""
    return [exercise for exercise in exercises if passes_filters(exercise, profile, rules)]


def evaluate_scores(
    exercise: Exercise,
    profile: ClientProfile,
    rules: Sequence[RecommendationRule] = RECOMMENDATION_RULES,
) -> tuple[int, list[str]]:
    """Sum positive rule scores and collect their reasons.

    Returns:
        Tuple of (total score, deduplicated reasons in rule order)
    """
    total = 0
    reasons: list[str] = []
    for rule in rules:
        rule_score = rule.score(exercise, profile)
        if rule_score > 0:
            total += rule_score
            if rule.description not in reasons:
                reasons.append(rule.description)
    return total, reasons
