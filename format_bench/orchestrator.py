"""
Orchestrator for running format benchmarks, profiling execution, and persisting results.

Usage (example from CLI):
    from format_bench.orchestrator import run_benchmarks

    results = run_benchmarks(num_records=100_000, formats=["parquet", "csv"])
    print(results)

Formats always run one after another in the order parquet, csv, json against
the same in-memory dataset. The first failure aborts the whole run.

When persistence is enabled, outputs are saved to `results/` by default:
- `results/latest.json` (last run)
- `results/run-<timestamp>.json` (timestamped archive)
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from format_bench.adapters.abstract import FormatAdapter, FormatResult
from format_bench.adapters.csv import CsvAdapter
from format_bench.adapters.json import JsonAdapter
from format_bench.adapters.parquet import ParquetAdapter
from format_bench.config import get_settings
from format_bench.domain.generator import generate_dataset
from format_bench.domain.models import Record
from format_bench.utils.logging import get_logger
from format_bench.utils.profiler import profile_block

log = get_logger(__name__)

ProgressCallback = Callable[[str], None]


def _round_float(value: float, decimals: int = 2) -> float:
    """Round a float to specified decimal places for human-readable output."""
    return round(value, decimals)


def _adapter_factories() -> Dict[str, Callable[[], FormatAdapter]]:
    """Registry of available adapters, in run order."""
    return {
        "parquet": lambda: ParquetAdapter(),
        "csv": lambda: CsvAdapter(),
        "json": lambda: JsonAdapter(),
    }


def available_formats() -> List[str]:
    """List available format tags in the order they are benchmarked."""
    return list(_adapter_factories().keys())


def _resolve_formats(names: Optional[Iterable[str]]) -> List[str]:
    """Validate requested tags and put them in run order."""
    order = available_formats()
    requested = list(names) if names is not None else ["all"]
    if not requested or requested == ["all"]:
        return order
    unknown = [name for name in requested if name not in order]
    if unknown:
        raise ValueError(f"Unknown format '{unknown[0]}'. Available: {', '.join(order)}")
    return [name for name in order if name in requested]


def _resolve_adapter(name: str) -> FormatAdapter:
    factories = _adapter_factories()
    if name not in factories:
        raise ValueError(f"Unknown format '{name}'. Available: {', '.join(factories)}")
    return factories[name]()


def _persist_results(payload: dict, results_dir: Path) -> None:
    results_dir.mkdir(parents=True, exist_ok=True)
    latest_path = results_dir / "latest.json"
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    archive_path = results_dir / f"run-{timestamp}.json"

    with latest_path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, sort_keys=True)
    with archive_path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, sort_keys=True)

    log.info("Results persisted", extra={"latest": str(latest_path), "archive": str(archive_path)})


def benchmark_format(
    adapter: FormatAdapter, dataset: Sequence[Record], output_dir: Path
) -> FormatResult:
    """
    Run one adapter's write, size and read cycle against `dataset`.

    Errors from the adapter are logged and re-raised unchanged.
    """
    path = output_dir / adapter.filename
    log.info(f"[FORMAT START] {adapter.name}", extra={"format": adapter.name, "path": str(path)})

    with profile_block(adapter.name) as stats:
        try:
            write_seconds = adapter.write(dataset, path)
            file_size = adapter.file_size(path)
            records, read_seconds = adapter.read(path)
        except Exception:
            log.exception(f"[FORMAT FAILED] {adapter.name}", extra={"format": adapter.name})
            raise
        records_read = len(records)
        del records

    result = FormatResult(
        format=adapter.name,
        label=adapter.label,
        path=str(path),
        records=len(dataset),
        records_read=records_read,
        write_seconds=write_seconds,
        read_seconds=read_seconds,
        file_size_bytes=file_size,
        peak_rss_bytes=stats.peak_rss_bytes,
        cpu_percent=_round_float(stats.cpu_percent, 1) if stats.cpu_percent is not None else None,
    )
    log.info(
        f"[FORMAT SUCCESS] {adapter.name}",
        extra={
            "format": adapter.name,
            "records": result["records"],
            "records_read": records_read,
            "write_seconds": write_seconds,
            "read_seconds": read_seconds,
            "file_size_bytes": file_size,
        },
    )
    return result


def run_benchmarks(
    num_records: Optional[int] = None,
    formats: Optional[Iterable[str]] = None,
    output_dir: Path | str | None = None,
    persist: Optional[bool] = None,
    results_dir: Path | str | None = None,
    progress: Optional[ProgressCallback] = None,
) -> List[FormatResult]:
    """
    Generate one dataset and benchmark each requested format against it.

    Parameters
    ----------
    num_records : int | None
        Dataset size. Defaults to settings.benchmark_records.
    formats : iterable[str] | None
        Format tags to run. If None or ["all"], runs every available format.
        Requested formats still run in the canonical order.
    output_dir : Path | str | None
        Existing directory that receives the benchmark files.
    persist : bool | None
        Whether to write a JSON summary to `results_dir`.
    results_dir : Path | str | None
        Directory to store JSON artifacts.
    progress : callable | None
        Receives the human-facing progress lines.

    Returns
    -------
    List[FormatResult]
        One result per format, in run order.

    Raises
    ------
    FormatBenchError
        On the first adapter failure; later formats are not attempted.
    """
    settings = get_settings()
    effective_records = settings.benchmark_records if num_records is None else num_records
    target_dir = Path(output_dir if output_dir is not None else settings.output_dir)
    should_persist = settings.persist_results if persist is None else persist
    names = _resolve_formats(formats)
    notify = progress or (lambda message: None)

    notify(f"Generating {effective_records} records...")
    log.info("Generating dataset", extra={"records": effective_records})
    dataset = generate_dataset(effective_records)

    notify("Running benchmarks...")
    results: List[FormatResult] = []
    for index, name in enumerate(names, start=1):
        log.info(f"{'=' * 60}")
        log.info(f"[FORMAT {index}/{len(names)}] {name.upper()}", extra={"format": name})
        log.info(f"{'=' * 60}")
        adapter = _resolve_adapter(name)
        results.append(benchmark_format(adapter, dataset, target_dir))

    if should_persist:
        payload = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "records": effective_records,
            "formats": names,
            "results": results,
        }
        _persist_results(payload, Path(results_dir or settings.results_dir))

    log.info(
        f"[ORCHESTRATOR COMPLETE] All {len(names)} format(s) benchmarked successfully",
        extra={"formats": names, "records": effective_records},
    )
    return results


__all__ = [
    "available_formats",
    "benchmark_format",
    "run_benchmarks",
]
