"""Exercise sources.

The recommendation engine consumes a flat list of exercises and performs
no I/O. These adapters are the host-side collaborators that produce that
list: an in-memory store for callers that already hold records, and a
read-only JSON library in the stored camelCase shape.
"""

import json
from pathlib import Path
from typing import Protocol

from loguru import logger
from pydantic import TypeAdapter, ValidationError

from fittrain.exercises.errors import ExerciseLibraryError
from fittrain.exercises.models import Exercise

_EXERCISE_LIST = TypeAdapter(list[Exercise])


class ExerciseSource(Protocol):
    """Anything that can list the exercise library."""

    def list_exercises(self) -> list[Exercise]: ...


class InMemoryExerciseStore:
    """Exercise source backed by a list held in memory."""

    def __init__(self, exercises: list[Exercise] | None = None):
        self._exercises = list(exercises or [])

    def list_exercises(self) -> list[Exercise]:
        return list(self._exercises)


class JsonExerciseStore:
    """Read-only exercise source backed by a JSON array on disk.

    The file is read on every call so edits made by the host application
    are picked up without restarting.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def list_exercises(self) -> list[Exercise]:
        """Load and validate every exercise in the library file.

        Returns:
            Exercises in file order

        Raises:
            ExerciseLibraryError: If the file is missing or unreadable, is not a
                UTF-8 JSON array, or contains records that do not match the exercise shape
        """
        if not self.path.is_file():
            raise ExerciseLibraryError("LIBRARY_NOT_FOUND", [str(self.path)])

        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except UnicodeDecodeError as e:
            logger.bind(path=str(self.path), error=str(e)).warning("Exercise library is not valid UTF-8")
            raise ExerciseLibraryError(
                "LIBRARY_INVALID_JSON", [f"{self.path}: not valid UTF-8 ({e.reason} at byte {e.start})"]
            ) from e
        except OSError as e:
            logger.bind(path=str(self.path), error=str(e)).warning("Exercise library could not be read")
            raise ExerciseLibraryError("LIBRARY_UNREADABLE", [f"{self.path}: {e.strerror or e}"]) from e
        except json.JSONDecodeError as e:
            logger.bind(path=str(self.path), error=str(e)).warning("Exercise library is not valid JSON")
            raise ExerciseLibraryError("LIBRARY_INVALID_JSON", [f"{self.path}: {e.msg} (line {e.lineno})"]) from e

        if not isinstance(raw, list):
            raise ExerciseLibraryError(
                "LIBRARY_INVALID_JSON",
                [f"{self.path}: expected a JSON array, got {type(raw).__name__}"],
            )

        try:
            exercises = _EXERCISE_LIST.validate_python(raw)
        except ValidationError as e:
            details = [f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()]
            logger.bind(path=str(self.path), error_count=e.error_count()).warning("Exercise library has invalid records")
            raise ExerciseLibraryError("LIBRARY_INVALID_RECORD", details) from e

        logger.bind(path=str(self.path), count=len(exercises)).debug("Loaded exercise library")
        return exercises
