"""
Pytest configuration for the format benchmark.

Provides fixtures for:
- Settings isolation (no leaking env overrides or cached settings)
- Small deterministic datasets
- One instance of every format adapter
"""

from __future__ import annotations

from typing import Generator, List

import pytest

from format_bench.adapters import CsvAdapter, JsonAdapter, ParquetAdapter
from format_bench.adapters.abstract import AbstractFormatAdapter
from format_bench.config import get_settings
from format_bench.domain import Record, generate_dataset

_SETTINGS_ENV_VARS = (
    "APP_ENV",
    "LOG_LEVEL",
    "LOG_JSON",
    "BENCHMARK_RECORDS",
    "BENCHMARK_BATCH_SIZE",
    "PARQUET_COMPRESSION",
    "BENCHMARK_OUTPUT_DIR",
    "BENCHMARK_RESULTS_DIR",
    "PERSIST_RESULTS",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """
    Start every test from default settings.
    """
    for name in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def small_dataset() -> List[Record]:
    return generate_dataset(25)


@pytest.fixture
def sparse_email_dataset() -> List[Record]:
    """
    Three records where the middle one has no email.
    """
    base = generate_dataset(3)
    emails = ["a@x.com", "", "c@x.com"]
    return [record.model_copy(update={"email": email}) for record, email in zip(base, emails)]


@pytest.fixture(params=["parquet", "csv", "json"])
def adapter(request: pytest.FixtureRequest) -> AbstractFormatAdapter:
    """
    Every format adapter; parquet uses a tiny batch size to exercise batching.
    """
    if request.param == "parquet":
        return ParquetAdapter(batch_size=7)
    if request.param == "csv":
        return CsvAdapter()
    return JsonAdapter()
