"""
Catalog schema definitions.

Column tables, record types and the registry tying them to versions.
"""

from athyg.schemas.builder import RecordBuilder, build_record
from athyg.schemas.columns import V1_COLUMNS, V2_COLUMNS, V3_COLUMNS, Column
from athyg.schemas.records import StarRecord, StarV1, StarV2, StarV3
from athyg.schemas.registry import CatalogSchema, SchemaRegistry, SchemaVersion

__all__ = [
    "V1_COLUMNS",
    "V2_COLUMNS",
    "V3_COLUMNS",
    "CatalogSchema",
    "Column",
    "RecordBuilder",
    "SchemaRegistry",
    "SchemaVersion",
    "StarRecord",
    "StarV1",
    "StarV2",
    "StarV3",
    "build_record",
]
