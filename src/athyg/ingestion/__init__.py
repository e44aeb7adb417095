"""
Catalog ingestion layer.

All catalog file loading happens through this module.
"""

from athyg.ingestion.loader import CatalogLoader, load
from athyg.ingestion.reporter import ConsoleProgressReporter, NullReporter, ProgressReporter
from athyg.ingestion.sources import FileTextSource, MemoryTextSource, TextSource

__all__ = [
    "CatalogLoader",
    "ConsoleProgressReporter",
    "FileTextSource",
    "MemoryTextSource",
    "NullReporter",
    "ProgressReporter",
    "TextSource",
    "load",
]
