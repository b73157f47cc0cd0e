"""Exercise library error types.

Standard error codes:
- LIBRARY_NOT_FOUND: The library file does not exist
- LIBRARY_UNREADABLE: The library file exists but cannot be read (permissions, I/O)
- LIBRARY_INVALID_JSON: The library file is not UTF-8 JSON or not a JSON array
- LIBRARY_INVALID_RECORD: One or more records do not match the exercise shape
"""


class ExerciseLibraryError(RuntimeError):
    """Raised when an exercise library cannot be loaded.

    Attributes:
        code: Error code (e.g., "LIBRARY_NOT_FOUND", "LIBRARY_INVALID_JSON")
        details: List of error detail strings
    """

    def __init__(self, code: str, details: list[str]):
        self.code = code
        self.details = details
        super().__init__(f"{code}: {details}")
