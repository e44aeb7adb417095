"""
Line and field splitting for delimited catalog text.

Splitting is deliberately naive: one delimiter character, no quoting, no
escaping and no collapsing of adjacent delimiters.
"""

from collections.abc import Iterator


def split(line: str, delimiter: str = ",", capacity: int = 0) -> list[str]:
    """
    Split a line into its ordered fields.

    Every delimiter occurrence is a boundary, so adjacent delimiters yield
    empty fields and a trailing delimiter yields a trailing empty field. The
    last field is always included even when it is not delimited.

    Args:
        line: One line of text, without its line terminator.
        delimiter: Single separator character.
        capacity: Expected number of fields. Only a sizing hint; it never
            changes the result.

    Returns:
        List of fields in line order.

    Raises:
        ValueError: If delimiter is not exactly one character.
    """
    if len(delimiter) != 1:
        msg = f"Delimiter must be a single character, got: {delimiter!r}"
        raise ValueError(msg)

    # str.split sizes its own result; capacity is accepted for API parity only.
    return line.split(delimiter)


def iter_lines(text: str) -> Iterator[str]:
    """
    Yield the lines of a text blob as a line reader would.

    Lines are separated by ``"\\n"`` and a single trailing ``"\\r"`` is
    removed from each. A final line terminator does not start another
    line, but an empty line between two terminators is yielded as ``""``.
    """
    if not text:
        return

    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()

    for line in lines:
        yield line[:-1] if line.endswith("\r") else line
