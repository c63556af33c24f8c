"""
Adapters package for the format benchmark.

Re-exports the adapter contract and the concrete Parquet, CSV and JSON
adapters so downstream code can import from `format_bench.adapters` directly.
"""

from format_bench.adapters.abstract import (
    AbstractFormatAdapter,
    FormatAdapter,
    FormatResult,
)
from format_bench.adapters.csv import CsvAdapter
from format_bench.adapters.json import JsonAdapter
from format_bench.adapters.parquet import ParquetAdapter

__all__ = [
    # Abstracts
    "AbstractFormatAdapter",
    "FormatAdapter",
    "FormatResult",
    # Concrete adapters
    "CsvAdapter",
    "JsonAdapter",
    "ParquetAdapter",
]
