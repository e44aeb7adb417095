"""
Record construction from tokenized lines.

A record is either fully built or not at all: short lines raise
ArityMismatchError, long lines are truncated to the schema's column count.
"""

from collections.abc import Sequence
from typing import Any

from athyg.errors import ArityMismatchError
from athyg.parsing import parse
from athyg.schemas.registry import CatalogSchema, SchemaRegistry, SchemaVersion


class RecordBuilder:
    """Builds immutable records of one schema version."""

    def __init__(self, schema: CatalogSchema) -> None:
        """
        Initialize record builder.

        Args:
            schema: Catalog schema providing column kinds and record type.
        """
        self.schema = schema
        self._expected = schema.expected_count
        self._kinds = tuple(column.kind for column in schema.columns)
        self._record_type = schema.record_type

    @classmethod
    def for_version(cls, version: SchemaVersion | str) -> "RecordBuilder":
        """Create a builder for a registered schema version."""
        return cls(SchemaRegistry.get(version))

    def build(self, tokens: Sequence[str]) -> Any:
        """
        Build one record from a line's tokens.

        Tokens beyond the schema's column count are dropped.

        Args:
            tokens: Fields of one data line, in order.

        Returns:
            A record of the schema's record type.

        Raises:
            ArityMismatchError: If fewer tokens than columns were given.
        """
        if len(tokens) > self._expected:
            tokens = tokens[: self._expected]

        if len(tokens) != self._expected:
            raise ArityMismatchError(expected=self._expected, actual=len(tokens))

        values = [parse(kind, token) for kind, token in zip(self._kinds, tokens, strict=True)]
        return self._record_type(*values)


def build_record(schema: CatalogSchema | SchemaVersion | str, tokens: Sequence[str]) -> Any:
    """
    Build one record of the given schema from tokens.

    Args:
        schema: CatalogSchema, or a version to look up in the registry.
        tokens: Fields of one data line, in order.

    Returns:
        The built record.

    Raises:
        ArityMismatchError: If fewer tokens than columns were given.
    """
    if not isinstance(schema, CatalogSchema):
        schema = SchemaRegistry.get(schema)
    return RecordBuilder(schema).build(tokens)
