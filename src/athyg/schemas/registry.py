"""
Schema registry for the supported catalog versions.

Provides centralized access to each version's column table and record type.
"""

from dataclasses import dataclass, fields
from enum import Enum
from typing import ClassVar

from athyg.schemas.columns import V1_COLUMNS, V2_COLUMNS, V3_COLUMNS, Column
from athyg.schemas.records import StarV1, StarV2, StarV3


class SchemaVersion(str, Enum):
    """ATHYG dataset version."""

    V1 = "v1"
    V2 = "v2"
    V3 = "v3"

    @classmethod
    def coerce(cls, value: "SchemaVersion | str") -> "SchemaVersion":
        """
        Resolve a version from an enum member or its name/value.

        Args:
            value: SchemaVersion, or a string such as "v3" or "V3".

        Returns:
            The matching SchemaVersion.

        Raises:
            KeyError: If the value names no known version.
        """
        if isinstance(value, SchemaVersion):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            available = ", ".join(v.value for v in cls)
            msg = f"Unknown schema version '{value}'. Available: {available}"
            raise KeyError(msg) from None


@dataclass(frozen=True)
class CatalogSchema:
    """Column layout and record type of one catalog version."""

    version: SchemaVersion
    columns: tuple[Column, ...]
    record_type: type
    description: str

    @property
    def expected_count(self) -> int:
        """Exact number of fields a data line must provide."""
        return len(self.columns)

    @property
    def column_names(self) -> tuple[str, ...]:
        """Column names in positional order."""
        return tuple(column.name for column in self.columns)


class SchemaRegistry:
    """
    Centralized registry for all catalog schemas.

    Entries are process-wide constants and are never derived from input.
    """

    _version = "1.0.0"

    _schemas: ClassVar[dict[SchemaVersion, CatalogSchema]] = {
        SchemaVersion.V1: CatalogSchema(
            version=SchemaVersion.V1,
            columns=V1_COLUMNS,
            record_type=StarV1,
            description="ATHYG v1: identifiers, position, distance, magnitude",
        ),
        SchemaVersion.V2: CatalogSchema(
            version=SchemaVersion.V2,
            columns=V2_COLUMNS,
            record_type=StarV2,
            description="ATHYG v2: v1 plus radial velocity, proper motion, space velocity",
        ),
        SchemaVersion.V3: CatalogSchema(
            version=SchemaVersion.V3,
            columns=V3_COLUMNS,
            record_type=StarV3,
            description="ATHYG v3: v2 plus colour index (ci)",
        ),
    }

    @classmethod
    def registry_version(cls) -> str:
        """Get the registry version."""
        return cls._version

    @classmethod
    def get(cls, version: SchemaVersion | str) -> CatalogSchema:
        """
        Get a schema by version.

        Args:
            version: SchemaVersion or its string value.

        Returns:
            The CatalogSchema for that version.

        Raises:
            KeyError: If the version is unknown.
        """
        return cls._schemas[SchemaVersion.coerce(version)]

    @classmethod
    def list_versions(cls) -> list[SchemaVersion]:
        """List all registered versions."""
        return list(cls._schemas.keys())


def _check_record_shapes() -> None:
    """Ensure each record type declares exactly its column table's fields."""
    for schema in SchemaRegistry._schemas.values():
        field_names = tuple(f.name for f in fields(schema.record_type))
        if field_names != schema.column_names:
            msg = (
                f"{schema.record_type.__name__} fields do not match "
                f"{schema.version.value} columns"
            )
            raise RuntimeError(msg)


_check_record_shapes()
