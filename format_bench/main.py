from __future__ import annotations

import sys
from typing import List, Optional

import typer

from format_bench.config import get_settings
from format_bench.errors import FormatBenchError
from format_bench.orchestrator import available_formats, run_benchmarks
from format_bench.reporter import print_results
from format_bench.utils.logging import configure_logging, get_logger

app = typer.Typer(help="Serialization format benchmark CLI (Parquet, CSV, JSON).")
log = get_logger(__name__)


def _run(
    records: Optional[int] = None,
    formats: Optional[List[str]] = None,
    output_dir: Optional[str] = None,
    persist: Optional[bool] = None,
) -> None:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)

    try:
        results = run_benchmarks(
            num_records=records,
            formats=formats or None,
            output_dir=output_dir,
            persist=persist,
            progress=typer.echo,
        )
    except FormatBenchError as exc:
        log.error("Benchmark aborted", extra={"error": str(exc)})
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    except ValueError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2) from exc

    print_results(results)


@app.callback(invoke_without_command=True)
def default(ctx: typer.Context) -> None:
    """
    Run the full benchmark with configured defaults when no command is given.
    """
    if ctx.invoked_subcommand is None:
        _run()


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"records={settings.benchmark_records} batch={settings.benchmark_batch_size} "
        f"compression={settings.parquet_compression} output_dir={settings.output_dir} "
        f"persist={settings.persist_results} results_dir={settings.results_dir}"
    )


@app.command("formats")
def list_formats() -> None:
    """
    List available formats in run order.
    """
    typer.echo("Available formats: " + ", ".join(available_formats()))


@app.command()
def run(
    records: Optional[int] = typer.Option(
        None,
        "--records",
        "-n",
        min=0,
        help="Override number of records to generate (default from settings).",
    ),
    format_names: Optional[List[str]] = typer.Option(
        None,
        "--format",
        "-f",
        help="Format to run (parquet, csv, json); repeat for several. Default: all.",
    ),
    output_dir: Optional[str] = typer.Option(
        None,
        "--output-dir",
        "-o",
        help="Existing directory for the benchmark files (default from settings).",
    ),
    persist: Optional[bool] = typer.Option(
        None,
        "--persist/--no-persist",
        help="Write a JSON summary to the results directory (default from settings).",
    ),
) -> None:
    """
    Generate the dataset, benchmark each format, and print the results table.
    """
    _run(
        records=records,
        formats=format_names,
        output_dir=output_dir,
        persist=persist,
    )


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
