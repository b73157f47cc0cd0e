"""Recommendation feedback.

Likes and dislikes are logged for later analysis. They are not fed back
into scoring: the next call to the scorer ranks exactly as before.
"""

from collections.abc import Sequence
from enum import StrEnum

from loguru import logger

from fittrain.recommendations.types import Recommendation


class FeedbackKind(StrEnum):
    """Client reaction to a recommendation."""

    LIKE = "like"
    DISLIKE = "dislike"


def apply_feedback(
    recommendations: Sequence[Recommendation],
    exercise_id: int | str,
    kind: FeedbackKind,
    client_id: int | str | None = None,
) -> list[Recommendation]:
    """Record feedback on a recommended exercise.

    Args:
        recommendations: Recommendations currently shown
        exercise_id: Exercise the feedback is about
        kind: Like or dislike
        client_id: Client giving the feedback (for the log only)

    Returns:
        A new list: unchanged for a like, without the exercise for a dislike
    """
    if not any(rec.exercise.id == exercise_id for rec in recommendations):
        logger.debug(
            "apply_feedback: exercise not among recommendations",
            client_id=client_id,
            exercise_id=exercise_id,
            kind=kind.value,
        )
        return list(recommendations)

    logger.info(
        "Recommendation feedback",
        client_id=client_id,
        exercise_id=exercise_id,
        kind=kind.value,
    )

    if kind == FeedbackKind.DISLIKE:
        return [rec for rec in recommendations if rec.exercise.id != exercise_id]
    return list(recommendations)
