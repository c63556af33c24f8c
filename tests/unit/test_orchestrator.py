from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Callable, Dict, List, Sequence

import pytest

from format_bench import orchestrator
from format_bench.adapters import CsvAdapter, JsonAdapter, ParquetAdapter
from format_bench.domain import Record
from format_bench.errors import FormatError, Operation
from format_bench.orchestrator import available_formats, run_benchmarks

DEFAULT_RECORDS = 40


class _ExplodingAdapter(CsvAdapter):
    """CSV adapter whose write always fails."""

    def _write(self, dataset: Sequence[Record], path: Path) -> None:
        raise OSError("disk on fire")


def _tracking_factories(calls: List[str]) -> Callable[[], Dict[str, Callable[[], Any]]]:
    def make(name: str, factory: Callable[[], Any]) -> Callable[[], Any]:
        def build() -> Any:
            calls.append(name)
            return factory()

        return build

    def factories() -> Dict[str, Callable[[], Any]]:
        return {
            "parquet": make("parquet", ParquetAdapter),
            "csv": make("csv", _ExplodingAdapter),
            "json": make("json", JsonAdapter),
        }

    return factories


def test_available_formats_in_run_order() -> None:
    assert available_formats() == ["parquet", "csv", "json"]


def test_run_benchmarks_returns_one_result_per_format(tmp_path: Path) -> None:
    results = run_benchmarks(num_records=DEFAULT_RECORDS, output_dir=tmp_path, persist=False)

    assert [r["format"] for r in results] == ["parquet", "csv", "json"]
    assert [r["label"] for r in results] == ["Parquet", "CSV", "JSON"]
    for result in results:
        path = Path(result["path"])
        assert path.parent == tmp_path
        assert result["records"] == DEFAULT_RECORDS
        assert result["records_read"] == DEFAULT_RECORDS
        assert result["file_size_bytes"] == os.path.getsize(path)
        assert result["write_seconds"] >= 0
        assert result["read_seconds"] >= 0


def test_run_benchmarks_keeps_canonical_order_for_subset(tmp_path: Path) -> None:
    results = run_benchmarks(
        num_records=3, formats=["json", "parquet"], output_dir=tmp_path, persist=False
    )

    assert [r["format"] for r in results] == ["parquet", "json"]
    assert not (tmp_path / "people.csv").exists()


def test_run_benchmarks_rejects_unknown_format(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="Unknown format 'xml'"):
        run_benchmarks(num_records=1, formats=["xml"], output_dir=tmp_path, persist=False)


def test_run_benchmarks_reports_progress(tmp_path: Path) -> None:
    messages: List[str] = []

    run_benchmarks(num_records=5, output_dir=tmp_path, persist=False, progress=messages.append)

    assert messages == ["Generating 5 records...", "Running benchmarks..."]


def test_run_benchmarks_zero_records(tmp_path: Path) -> None:
    results = run_benchmarks(num_records=0, output_dir=tmp_path, persist=False)

    assert all(r["records_read"] == 0 for r in results)
    assert (tmp_path / "people.json").read_bytes() == b"[]"


def test_first_failure_aborts_remaining_formats(tmp_path: Path, monkeypatch) -> None:
    calls: List[str] = []
    monkeypatch.setattr(orchestrator, "_adapter_factories", _tracking_factories(calls))

    with pytest.raises(FormatError) as excinfo:
        run_benchmarks(num_records=5, output_dir=tmp_path, persist=False)

    assert calls == ["parquet", "csv"]
    assert excinfo.value.operation is Operation.WRITE
    assert excinfo.value.format_name == "csv"
    assert not (tmp_path / "people.json").exists()


def test_persist_writes_latest_and_archive(tmp_path: Path) -> None:
    results_dir = tmp_path / "results"

    results = run_benchmarks(
        num_records=2, output_dir=tmp_path, persist=True, results_dir=results_dir
    )

    latest = json.loads((results_dir / "latest.json").read_text(encoding="utf-8"))
    archives = list(results_dir.glob("run-*.json"))
    assert len(archives) == 1
    assert latest["records"] == 2
    assert latest["formats"] == ["parquet", "csv", "json"]
    assert [r["file_size_bytes"] for r in latest["results"]] == [
        r["file_size_bytes"] for r in results
    ]


def test_settings_drive_defaults(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("BENCHMARK_RECORDS", "4")
    monkeypatch.setenv("BENCHMARK_OUTPUT_DIR", str(tmp_path))
    orchestrator.get_settings.cache_clear()

    results = run_benchmarks()

    assert all(r["records"] == 4 for r in results)
    assert (tmp_path / "people.parquet").exists()
    assert not (tmp_path / "results").exists()
