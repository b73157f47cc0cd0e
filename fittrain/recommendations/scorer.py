"""Recommendation Scorer.

Filters the exercise library against one client profile, scores what is
left with the rule set, and returns the top N by score.

Ties keep input order (Python's sort is stable). That order comes from
the exercise source and is not a contract callers should rely on.
"""

from collections.abc import Sequence

from loguru import logger

from fittrain.config.settings import settings
from fittrain.exercises.models import Exercise
from fittrain.profiles.models import ClientProfile, FitnessLevel
from fittrain.recommendations.rules import (
    RECOMMENDATION_RULES,
    RecommendationRule,
    evaluate_scores,
    filter_suitable,
    is_equipment_free,
)
from fittrain.recommendations.types import Recommendation

# Client level -> (exact difficulty label, tag)
_LEVEL_TAGS: dict[FitnessLevel, tuple[str, str]] = {
    FitnessLevel.BEGINNER: ("beginner", "Perfect for beginners"),
    FitnessLevel.INTERMEDIATE: ("intermediate", "Great for your level"),
    FitnessLevel.ADVANCED: ("advanced", "Challenge yourself"),
}


def build_recommendation_tags(exercise: Exercise, profile: ClientProfile) -> list[str]:
    """Derive presentational tags from a profile/exercise comparison.

    Tags are independent of rule scores. At most one tag is added per
    group (fitness level, equipment, goal).
    """
    tags: list[str] = []

    if profile.fitness_level is not None:
        label, tag = _LEVEL_TAGS[profile.fitness_level]
        if exercise.difficulty_key == label:
            tags.append(tag)

    if profile.equipment_access:
        if is_equipment_free(exercise):
            tags.append("No equipment needed")
        elif any(tag in exercise.equipment_key for tag in profile.equipment_access):
            tags.append("Uses your available equipment")

    if profile.goals:
        category = exercise.category_key
        if profile.has_goal("weight_loss") and category == "cardio":
            tags.append("Great for weight loss")
        elif profile.has_goal("muscle_building") and category in ("strength", "hypertrophy"):
            tags.append("Builds muscle")
        elif profile.has_goal("strength") and category == "strength":
            tags.append("Increases strength")

    return tags


def score_exercises(
    exercises: Sequence[Exercise],
    profile: ClientProfile,
    rules: Sequence[RecommendationRule] = RECOMMENDATION_RULES,
) -> list[Recommendation]:
    """Score exercises without filtering, tagging, or ranking.

    Args:
        exercises: Exercises already known to pass the filters
        profile: Client profile
        rules: Rule set to score with

    Returns:
        One untagged Recommendation per exercise, in input order
    """
    recommendations = []
    for exercise in exercises:
        total, reasons = evaluate_scores(exercise, profile, rules)
        recommendations.append(Recommendation(exercise=exercise, score=total, match_reasons=reasons))
    return recommendations


def rank(recommendations: Sequence[Recommendation]) -> list[Recommendation]:
    """Sort by score, highest first; ties keep input order."""
    return sorted(recommendations, key=lambda rec: rec.score, reverse=True)


def score_recommendations(
    exercises: Sequence[Exercise],
    profile: ClientProfile,
    count: int | None = None,
) -> list[Recommendation]:
    """Rank the exercises that suit a client.

    Args:
        exercises: Full exercise library
        profile: Client profile; missing fields mean no restriction
        count: Maximum number of results (defaults to the configured count)

    Returns:
        At most `count` recommendations, best first. Empty when nothing
        passes the filters.
    """
    limit = settings.default_recommendation_count if count is None else max(count, 0)

    suitable = filter_suitable(exercises, profile)
    if not suitable:
        logger.debug(
            "score_recommendations: no suitable exercises",
            client_id=profile.id,
            library_size=len(exercises),
        )
        return []

    scored = [
        Recommendation(
            exercise=rec.exercise,
            score=rec.score,
            match_reasons=rec.match_reasons,
            tags=build_recommendation_tags(rec.exercise, profile),
        )
        for rec in score_exercises(suitable, profile)
    ]
    top = rank(scored)[:limit]

    logger.debug(
        "score_recommendations: ranked",
        client_id=profile.id,
        library_size=len(exercises),
        suitable=len(suitable),
        returned=len(top),
    )
    return top
