"""
Catalog file loading.

Reads one or more catalog files of a single version and returns their
records concatenated in file order, each file in line order. Any invalid
path or malformed line aborts the whole load; a partial result is never
returned.
"""

from collections.abc import Iterable
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Any

from athyg.config.settings import LoaderConfig
from athyg.errors import ArityMismatchError
from athyg.ingestion.reporter import NullReporter, ProgressReporter
from athyg.ingestion.sources import FileTextSource, TextSource
from athyg.schemas.builder import RecordBuilder
from athyg.schemas.registry import SchemaRegistry, SchemaVersion
from athyg.tokenizer import iter_lines, split
from athyg.utils.logging import get_logger, log_context

log = get_logger(__name__)


class CatalogLoader:
    """
    Loads catalog files of one schema version.

    The loader itself holds no per-load state, so one instance can be used
    for any number of loads.
    """

    def __init__(
        self,
        version: SchemaVersion | str,
        config: LoaderConfig | None = None,
        reporter: ProgressReporter | None = None,
        source: TextSource | None = None,
    ) -> None:
        """
        Initialize catalog loader.

        Args:
            version: Schema version every file conforms to.
            config: Parsing and scheduling options.
            reporter: Progress reporter (defaults to no output).
            source: Supplier of file contents (defaults to the filesystem).
        """
        self.config = config or LoaderConfig()
        self.schema = SchemaRegistry.get(version)
        self.reporter = reporter or NullReporter()
        self.source = source or FileTextSource(encoding=self.config.encoding)
        self._builder = RecordBuilder(self.schema)

    @property
    def version(self) -> SchemaVersion:
        """Schema version produced by this loader."""
        return self.schema.version

    def load(self, paths: Iterable[Path | str]) -> list[Any]:
        """
        Load and concatenate records from all paths.

        Args:
            paths: Catalog files, in the order their records should appear.

        Returns:
            Records of all files in file order, each file in line order.

        Raises:
            InvalidPathError: If any path cannot be read.
            ArityMismatchError: If any data line is too short.
            TypeError: If paths is a single path instead of a collection.
        """
        if isinstance(paths, (str, Path)):
            msg = f"paths must be a collection of paths, not a single {type(paths).__name__}"
            raise TypeError(msg)

        path_list = [Path(p) for p in paths]

        log.info(
            "Loading catalog",
            schema=self.version.value,
            files=len(path_list),
            workers=self.config.max_workers,
        )

        if self.config.max_workers > 1 and len(path_list) > 1:
            records = self._load_parallel(path_list)
        else:
            records = self._load_sequential(path_list)

        log.info("Catalog loaded", schema=self.version.value, records=len(records))
        return records

    def load_file(self, path: Path | str) -> list[Any]:
        """
        Load the records of a single file.

        Args:
            path: Catalog file.

        Returns:
            Records in line order.
        """
        path = Path(path)
        with log_context(path=str(path), schema=self.version.value):
            text = self.source.read_text(path)
            records = self.parse_text(text, path=path)
            log.debug("Parsed catalog file", records=len(records))
        return records

    def parse_text(self, text: str, path: Path | None = None) -> list[Any]:
        """
        Parse the content of one catalog file.

        The first line is the header and is skipped whatever it contains.

        Args:
            text: Full file content.
            path: Source path, used in error messages.

        Returns:
            Records in line order.

        Raises:
            ArityMismatchError: If a data line is too short.
        """
        lines = iter_lines(text)
        next(lines, None)

        delimiter = self.config.delimiter
        capacity = self.schema.expected_count
        records: list[Any] = []

        # Data lines start on file line 2.
        for line_number, line in enumerate(lines, start=2):
            tokens = split(line, delimiter, capacity)
            try:
                records.append(self._builder.build(tokens))
            except ArityMismatchError as e:
                log.error(
                    "Field count mismatch",
                    line=line_number,
                    expected=e.expected,
                    actual=e.actual,
                )
                raise e.with_location(path or "<text>", line_number) from None

        return records

    def _load_sequential(self, paths: list[Path]) -> list[Any]:
        """Load files one after another."""
        result: list[Any] = []
        for path in paths:
            self.reporter.file_started(path)
            records = self.load_file(path)
            self.reporter.file_finished(path, len(records))
            result.extend(records)
        return result

    def _load_parallel(self, paths: list[Path]) -> list[Any]:
        """
        Load files on a thread pool.

        Results are merged in file-list order regardless of completion order.
        The first failure cancels pending files and is raised before any
        record is returned. Progress is reported in file order once every
        file has been parsed.
        """
        log.info("Loading files in parallel", workers=self.config.max_workers)

        per_file: dict[int, list[Any]] = {}

        with ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
            futures: dict[Future[list[Any]], int] = {
                executor.submit(self.load_file, path): index
                for index, path in enumerate(paths)
            }

            for future in as_completed(futures):
                index = futures[future]
                try:
                    per_file[index] = future.result()
                except Exception as e:
                    log.error("Failed to load file", path=str(paths[index]), error=str(e))
                    executor.shutdown(wait=True, cancel_futures=True)
                    raise

        result: list[Any] = []
        for index, path in enumerate(paths):
            records = per_file[index]
            self.reporter.file_started(path)
            self.reporter.file_finished(path, len(records))
            result.extend(records)
        return result


def load(
    version: SchemaVersion | str,
    paths: Iterable[Path | str],
    *,
    config: LoaderConfig | None = None,
    reporter: ProgressReporter | None = None,
    source: TextSource | None = None,
) -> list[Any]:
    """
    Load catalog files of one version.

    Args:
        version: Schema version of every file (v1, v2 or v3).
        paths: Catalog files, in order.
        config: Parsing and scheduling options.
        reporter: Progress reporter.
        source: Supplier of file contents.

    Returns:
        Records of all files in file order, each file in line order.

    Raises:
        InvalidPathError: If any path cannot be read.
        ArityMismatchError: If any data line is too short.
        TypeError: If paths is a single path instead of a collection.
    """
    loader = CatalogLoader(version, config=config, reporter=reporter, source=source)
    return loader.load(paths)
