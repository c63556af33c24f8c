"""
Format Bench - write/read throughput and file size of serialization formats.

This package benchmarks three ways of persisting the same synthetic tabular
dataset:

- Parquet (columnar binary, via pyarrow)
- CSV (standard library csv)
- JSON (single array, via pydantic)

Each format runs a timed write, a size check and a timed read against one
in-memory dataset; the results are rendered as a comparison table.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from format_bench.adapters.abstract import (
    AbstractFormatAdapter,
    FormatAdapter,
    FormatResult,
)
from format_bench.config import Settings, get_settings
from format_bench.domain import Record, generate_dataset
from format_bench.errors import FormatBenchError, FormatError, Operation, ParseError
from format_bench.orchestrator import available_formats, run_benchmarks
from format_bench.utils.logging import configure_logging, get_logger
from format_bench.utils.profiler import ProfileStats, profile_block

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "Record",
    "generate_dataset",
    # Orchestration
    "available_formats",
    "run_benchmarks",
    # Adapter abstractions
    "FormatAdapter",
    "AbstractFormatAdapter",
    "FormatResult",
    # Errors
    "FormatBenchError",
    "FormatError",
    "Operation",
    "ParseError",
    # Logging
    "configure_logging",
    "get_logger",
    # Profiling
    "ProfileStats",
    "profile_block",
]
