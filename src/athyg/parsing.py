"""
Token to optional value conversion.

Each column kind has exactly one conversion rule. Conversions never raise:
a token that cannot be converted becomes ``None`` (absent).

Numeric conversions consume the longest valid numeric prefix of a token and
discard the rest, so ``"42xyz"`` converts to ``42``. Catalog rows that carry
such values have always been accepted this way, and tightening the rule
would silently change which rows load.
"""

import re
from collections.abc import Callable
from enum import Enum
from typing import Any

from athyg.utils.logging import get_logger

log = get_logger(__name__)


class ValueKind(str, Enum):
    """Value kind of a catalog column."""

    INTEGER = "integer"
    DECIMAL = "decimal"
    CHARACTER = "character"
    BOOLEAN = "boolean"
    TEXT = "text"


# Leading whitespace, optional sign, at least one digit.
_INTEGER_PREFIX = re.compile(r"\s*[+-]?\d+", re.ASCII)

# Leading whitespace, optional sign, then a decimal number with optional
# fraction and exponent, or one of the special literals.
_DECIMAL_PREFIX = re.compile(
    r"""
    \s*
    [+-]?
    (?:
        (?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?
      | infinity
      | inf
      | nan
    )
    """,
    re.VERBOSE | re.IGNORECASE | re.ASCII,
)

TRUE_LITERALS: frozenset[str] = frozenset({"true", "True", "TRUE", "T", "1"})


# Identifiers are unsigned 64-bit, as read by strtoull.
UINT64_MAX = 2**64 - 1


def parse_integer(token: str) -> int | None:
    """
    Convert the leading base-10 integer of a token to an unsigned 64-bit value.

    A negative value wraps modulo 2**64 and a magnitude beyond the 64-bit
    range saturates to ``UINT64_MAX``, so ``"-5"`` is ``2**64 - 5``.

    Args:
        token: Raw field text.

    Returns:
        The integer, or None if the token has no leading digits.
    """
    match = _INTEGER_PREFIX.match(token)
    if match is None:
        return None
    value = int(match.group())
    if abs(value) > UINT64_MAX:
        return UINT64_MAX
    return value % (UINT64_MAX + 1)


def parse_decimal(token: str) -> float | None:
    """
    Convert the leading decimal number of a token.

    Args:
        token: Raw field text.

    Returns:
        The number, or None if the token has no leading number.
    """
    match = _DECIMAL_PREFIX.match(token)
    if match is None:
        return None
    return float(match.group())


def parse_character(token: str) -> str | None:
    """Return the first character of a token, or None if it is empty."""
    return token[0] if token else None


def parse_boolean(token: str) -> bool:
    """Return True for the accepted truthy literals, False otherwise."""
    return token in TRUE_LITERALS


def parse_text(token: str) -> str:
    """Return the token unchanged."""
    return token


PARSERS: dict[ValueKind, Callable[[str], Any]] = {
    ValueKind.INTEGER: parse_integer,
    ValueKind.DECIMAL: parse_decimal,
    ValueKind.CHARACTER: parse_character,
    ValueKind.BOOLEAN: parse_boolean,
    ValueKind.TEXT: parse_text,
}

_missing = set(ValueKind) - PARSERS.keys()
if _missing:
    msg = f"No parser registered for: {sorted(kind.value for kind in _missing)}"
    raise RuntimeError(msg)


def parse(kind: ValueKind, token: str) -> Any:
    """
    Convert a token according to a column kind.

    Args:
        kind: Column value kind.
        token: Raw field text.

    Returns:
        The converted value, or None if absent.
    """
    try:
        return PARSERS[kind](token)
    except (ValueError, OverflowError) as e:
        log.debug("Field conversion failed", kind=kind.value, token=token, error=str(e))
        return None
