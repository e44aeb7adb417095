"""
athyg: Deserialization of ATHYG star catalog files.

Loads comma-delimited AT-HYG catalog files of a caller-selected version
(v1, v2 or v3) into immutable, nullable-aware star records.
"""

from importlib.metadata import version

from athyg.errors import ArityMismatchError, AthygError, InvalidPathError
from athyg.ingestion import CatalogLoader, load
from athyg.schemas import SchemaRegistry, SchemaVersion, StarV1, StarV2, StarV3

__version__ = version("athyg")

__all__ = [
    "ArityMismatchError",
    "AthygError",
    "CatalogLoader",
    "InvalidPathError",
    "SchemaRegistry",
    "SchemaVersion",
    "StarV1",
    "StarV2",
    "StarV3",
    "__version__",
    "load",
]
