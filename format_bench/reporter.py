from __future__ import annotations

from typing import List, Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from format_bench.adapters.abstract import FormatResult

_NANOSECOND = 1
_MICROSECOND = 1_000 * _NANOSECOND
_MILLISECOND = 1_000 * _MICROSECOND
_SECOND = 1_000 * _MILLISECOND
_MINUTE = 60 * _SECOND
_HOUR = 60 * _MINUTE


def _trim(value: float, decimals: int) -> str:
    text = f"{value:.{decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_duration(seconds: float) -> str:
    """
    Render a duration the way a stopwatch would read it.

    Examples: ``0s``, ``250ns``, ``12.5µs``, ``1.5ms``, ``2.25s``, ``1m30s``,
    ``1h2m3s``. Precision is kept down to the nanosecond.
    """
    total_ns = round(seconds * _SECOND)
    if total_ns == 0:
        return "0s"
    sign = "-" if total_ns < 0 else ""
    ns = abs(total_ns)

    if ns < _MICROSECOND:
        return f"{sign}{ns}ns"
    if ns < _MILLISECOND:
        return f"{sign}{_trim(ns / _MICROSECOND, 3)}µs"
    if ns < _SECOND:
        return f"{sign}{_trim(ns / _MILLISECOND, 6)}ms"

    hours, remainder = divmod(ns, _HOUR)
    minutes, remainder = divmod(remainder, _MINUTE)
    secs = f"{_trim(remainder / _SECOND, 9)}s"
    if hours:
        return f"{sign}{hours}h{minutes}m{secs}"
    if minutes:
        return f"{sign}{minutes}m{secs}"
    return f"{sign}{secs}"


def build_table(results: Sequence[FormatResult]) -> Table:
    """
    Build the comparison table: one row per measurement, one column per format.
    """
    records = results[0].get("records", 0) if results else 0
    table = Table(
        title="Serialization Format Benchmark",
        box=box.ROUNDED,
        caption=f"{records:,} records per format",
    )

    table.add_column("Operation", style="cyan", no_wrap=True)
    for res in results:
        table.add_column(res.get("label", res.get("format", "Unknown")), justify="right")

    table.add_row(
        "Write Time", *(format_duration(res.get("write_seconds", 0.0)) for res in results)
    )
    table.add_row("Read Time", *(format_duration(res.get("read_seconds", 0.0)) for res in results))
    table.add_row("File Size", *(str(res.get("file_size_bytes", 0)) for res in results))
    return table


def print_results(results: List[FormatResult], console: Optional[Console] = None) -> None:
    """
    Render benchmark results as a rich table.
    """
    console = console or Console()

    if not results:
        console.print("[yellow]No results to display.[/yellow]")
        return

    console.print(build_table(results))


__all__ = ["build_table", "format_duration", "print_results"]
