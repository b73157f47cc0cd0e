"""Exercise recommendation engine.

This module provides:
- A fixed rule set (filter + score per rule) over exercise/profile pairs
- Ranked recommendations for a client
- A structured daily workout with day-to-day variety
- A weekly plan over the client's training days

Every function here is pure: no I/O, no retained state, no randomness.
"""

from fittrain.recommendations.calendar import date_for_weekday, default_plan_day, today_index, weekday_name
from fittrain.recommendations.daily import compose_daily_workout
from fittrain.recommendations.feedback import FeedbackKind, apply_feedback
from fittrain.recommendations.rules import RECOMMENDATION_RULES, RecommendationRule
from fittrain.recommendations.scorer import score_recommendations
from fittrain.recommendations.types import DailyWorkout, Recommendation, WeeklyPlan, WorkoutRole
from fittrain.recommendations.weekly import compose_weekly_plan, resolve_training_days

__all__ = [
    "RECOMMENDATION_RULES",
    "DailyWorkout",
    "FeedbackKind",
    "Recommendation",
    "RecommendationRule",
    "WeeklyPlan",
    "WorkoutRole",
    "apply_feedback",
    "compose_daily_workout",
    "compose_weekly_plan",
    "date_for_weekday",
    "default_plan_day",
    "resolve_training_days",
    "score_recommendations",
    "today_index",
    "weekday_name",
]
