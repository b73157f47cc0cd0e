"""Exercise library records and sources."""

from fittrain.exercises.errors import ExerciseLibraryError
from fittrain.exercises.models import Exercise
from fittrain.exercises.store import ExerciseSource, InMemoryExerciseStore, JsonExerciseStore

__all__ = [
    "Exercise",
    "ExerciseLibraryError",
    "ExerciseSource",
    "InMemoryExerciseStore",
    "JsonExerciseStore",
]
