"""Grid-system specific exceptions."""

from typing import Optional


class GridSystemError(Exception):
    """Base grid system error."""
    def __init__(self, message: str, original_exception: Optional[Exception] = None):
        super().__init__(message)
        self.original_exception = original_exception


class DegenerateInputError(GridSystemError, ValueError):
    """Raised when a coordinate is NaN or infinite."""
    pass


class CoverageLimitError(GridSystemError, RuntimeError):
    """Raised when a bounds coverage grows past its cell cap."""
    pass


class InvalidFaceError(AssertionError):
    """A cube face index outside 0-5. Indicates a bug, not bad input."""

    def __init__(self, face):
        super().__init__(f"Invalid face: {face!r}")
        self.face = face
