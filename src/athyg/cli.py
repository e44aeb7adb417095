"""Command-line interface for loading ATHYG catalog files."""

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Annotated, Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from athyg.schemas.registry import SchemaVersion

if TYPE_CHECKING:
    from athyg.config.settings import LoaderConfig

app = typer.Typer(
    name="athyg",
    help="Load and inspect ATHYG star catalog files.",
    no_args_is_help=True,
)

console = Console()


@app.callback()
def main(
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Log level (DEBUG, INFO, WARNING, ERROR)."),
    ] = "WARNING",
    json_logs: Annotated[
        bool,
        typer.Option("--json-logs", help="Emit logs as JSON lines on stderr."),
    ] = False,
) -> None:
    """Load and inspect ATHYG star catalog files."""
    from athyg.utils.logging import configure_logging

    configure_logging(level=log_level, json_output=json_logs)


def _run_load(
    version: SchemaVersion,
    files: Sequence[Path],
    loader_config: "LoaderConfig",
    output: Path | None,
    validate: bool,
    quiet: bool,
) -> None:
    """Load files, print a summary and optionally export; exit 1 on failure."""
    import pandera.errors

    from athyg.errors import AthygError
    from athyg.export import records_to_dataframe, validate_dataframe, write_csv
    from athyg.ingestion import ConsoleProgressReporter, NullReporter, load

    reporter = NullReporter() if quiet else ConsoleProgressReporter(console)

    try:
        records = load(version, files, config=loader_config, reporter=reporter)
    except AthygError as e:
        console.print(f"\n[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    try:
        df = records_to_dataframe(records, version)
    except (TypeError, ValueError, OverflowError) as e:
        console.print(f"[red]Error: could not build table: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    if validate:
        try:
            validate_dataframe(df, version)
        except pandera.errors.SchemaError as e:
            console.print(f"[red]Validation failed: {escape(str(e))}[/red]")
            raise typer.Exit(code=1) from e
        console.print("[green]Schema validation passed[/green]")

    if not quiet:
        _print_summary(version, files, len(records), df)

    if output is not None:
        write_csv(records, version, output, delimiter=loader_config.delimiter)
        console.print(f"\n[green]Saved to: {output}[/green]")


def _print_summary(version: SchemaVersion, files: Sequence[Path], n_records: int, df: Any) -> None:
    """Print record totals and per-column present counts."""
    console.print()
    table = Table(title=f"ATHYG {version.value} Load Results")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Files", str(len(files)))
    table.add_row("Records", str(n_records))
    table.add_row("Columns", str(len(df.columns)))
    console.print(table)

    console.print("\n[blue]Present values per column:[/blue]")
    for col in df.columns:
        present = int(df[col].notna().sum())
        console.print(f"  {col}: {present}/{n_records}")


@app.command("load")
def load_command(
    files: Annotated[
        list[Path],
        typer.Argument(help="Catalog files, in load order."),
    ],
    schema: Annotated[
        SchemaVersion,
        typer.Option(
            "--schema", "-s", case_sensitive=False, help="Catalog version of all files."
        ),
    ] = SchemaVersion.V3,
    workers: Annotated[
        int,
        typer.Option("--workers", "-w", min=1, max=64, help="Files parsed concurrently."),
    ] = 1,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the loaded records to this CSV file."),
    ] = None,
    validate: Annotated[
        bool,
        typer.Option("--validate", help="Validate loaded values against the Pandera schema."),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Suppress progress and summary output."),
    ] = False,
) -> None:
    """Load catalog files and summarize the records."""
    from athyg.config.settings import LoaderConfig

    _run_load(schema, files, LoaderConfig(max_workers=workers), output, validate, quiet)


@app.command()
def run(
    config: Annotated[
        Path,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration YAML file.",
            exists=True,
            dir_okay=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the loaded records to this CSV file."),
    ] = None,
    validate: Annotated[
        bool,
        typer.Option("--validate", help="Validate loaded values against the Pandera schema."),
    ] = False,
) -> None:
    """Load the catalog files listed in a configuration file."""
    from athyg.config.loader import load_config
    from athyg.utils.logging import configure_logging

    try:
        catalog_config = load_config(config)
    except ValueError as e:
        console.print(f"[red]Invalid configuration: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    configure_logging(
        level=catalog_config.logging.level,
        json_output=catalog_config.logging.json_output,
    )

    console.print(f"[blue]Loading configuration from {config}[/blue]")
    _run_load(
        catalog_config.version,
        catalog_config.resolved_files(),
        catalog_config.loader,
        output,
        validate,
        quiet=False,
    )


@app.command()
def schema(
    version: Annotated[
        SchemaVersion,
        typer.Argument(case_sensitive=False, help="Catalog version to describe."),
    ],
) -> None:
    """Show the column table of a catalog version."""
    from athyg.schemas.registry import SchemaRegistry

    catalog_schema = SchemaRegistry.get(version)

    table = Table(title=f"ATHYG {version.value} ({catalog_schema.expected_count} columns)")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Column", style="cyan")
    table.add_column("Kind", style="green")

    for position, column in enumerate(catalog_schema.columns, start=1):
        table.add_row(str(position), column.name, column.kind.value)

    console.print(table)
    console.print(f"[dim]{catalog_schema.description}[/dim]")


@app.command()
def version() -> None:
    """Show version information."""
    from athyg import __version__

    console.print(f"athyg version {__version__}")


if __name__ == "__main__":
    app()
