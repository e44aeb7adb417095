"""
Errors raised while loading catalog files.

Both error kinds are fatal: they abort the whole multi-file load and no
records are returned. A single field that fails to convert is not an error.
"""

from pathlib import Path


class AthygError(Exception):
    """Base class for catalog loading errors."""


class InvalidPathError(AthygError, FileNotFoundError):
    """A catalog path does not exist or cannot be opened."""

    def __init__(self, path: Path | str, reason: str | None = None) -> None:
        self.path = Path(path)
        self.reason = reason
        msg = f"Invalid catalog path: {self.path}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)


class ArityMismatchError(AthygError, ValueError):
    """A data line has fewer fields than its schema version declares."""

    def __init__(
        self,
        expected: int,
        actual: int,
        path: Path | str | None = None,
        line_number: int | None = None,
    ) -> None:
        self.expected = expected
        self.actual = actual
        self.path = Path(path) if path is not None else None
        self.line_number = line_number

        msg = f"Expected {expected} fields, got {actual}"
        if self.path is not None:
            location = str(self.path)
            if line_number is not None:
                location = f"{location}:{line_number}"
            msg = f"{msg} ({location})"
        super().__init__(msg)

    def with_location(self, path: Path | str, line_number: int) -> "ArityMismatchError":
        """Return a copy of this error annotated with file and line."""
        return ArityMismatchError(self.expected, self.actual, path, line_number)
