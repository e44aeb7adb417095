"""
Text sources that supply catalog file contents.
"""

from pathlib import Path
from typing import Protocol, runtime_checkable

from athyg.errors import InvalidPathError


@runtime_checkable
class TextSource(Protocol):
    """Supplies the full text content of a catalog file."""

    def read_text(self, path: Path) -> str:
        """
        Return the whole content of the file at path.

        Raises:
            InvalidPathError: If the path does not reference a readable file.
        """
        ...


class FileTextSource:
    """Reads catalog files from the local filesystem."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def read_text(self, path: Path) -> str:
        """Read a file, mapping missing or unreadable paths to InvalidPathError."""
        if not path.exists():
            raise InvalidPathError(path, "does not exist")
        if not path.is_file():
            raise InvalidPathError(path, "not a file")

        # newline="" keeps line terminators intact; tokenizer.iter_lines handles CRLF.
        try:
            with path.open(encoding=self.encoding, newline="") as f:
                return f.read()
        except OSError as e:
            raise InvalidPathError(path, e.strerror or str(e)) from e
        except UnicodeDecodeError as e:
            raise InvalidPathError(path, f"not valid {self.encoding} text") from e


class MemoryTextSource:
    """Serves catalog contents from a mapping of path to text."""

    def __init__(self, contents: dict[Path | str, str]) -> None:
        self._contents = {Path(k): v for k, v in contents.items()}

    def read_text(self, path: Path) -> str:
        """Return the stored text for path."""
        try:
            return self._contents[Path(path)]
        except KeyError:
            raise InvalidPathError(path, "not in memory source") from None
