"""
Profiling utilities for the format benchmark.

`profile_block` wraps one format's write/size/read cycle and records:
- Wall-clock time (perf_counter)
- CPU usage (psutil)
- RSS high-water mark seen at the block boundaries (psutil)

Everything runs on the calling thread.

Usage:
    from format_bench.utils.profiler import profile_block

    with profile_block("parquet") as stats:
        adapter.write(dataset, path)

    print(stats.duration_seconds, stats.peak_rss_bytes)
"""

from __future__ import annotations

import contextlib
import time
from dataclasses import dataclass, field
from typing import Any, Generator, Optional

import psutil


@dataclass
class ProfileStats:
    """
    Container for profiling measurements.
    """

    label: str
    start_ts: float = field(default=0.0)
    end_ts: float = field(default=0.0)
    duration_seconds: float = field(default=0.0)
    peak_rss_bytes: Optional[int] = field(default=None)
    cpu_percent: Optional[float] = field(default=None)
    extra: dict[str, Any] = field(default_factory=dict)


def _current_rss(process: psutil.Process) -> Optional[int]:
    try:
        return process.memory_info().rss
    except psutil.Error:
        return None


@contextlib.contextmanager
def profile_block(label: str) -> Generator[ProfileStats, None, None]:
    """
    Context manager to profile a block of code.

    Parameters
    ----------
    label : str
        Human-friendly label for the profiled block.

    Notes
    -----
    The stats object is only complete after the block exits. Exceptions raised
    inside the block propagate unchanged; the stats are still finalized.
    """
    stats = ProfileStats(label=label)
    process = psutil.Process()

    # CPU percent needs a priming call
    process.cpu_percent(interval=None)
    rss_start = _current_rss(process)

    stats.start_ts = time.perf_counter()
    try:
        yield stats
    finally:
        stats.end_ts = time.perf_counter()
        stats.duration_seconds = stats.end_ts - stats.start_ts

        samples = [rss for rss in (rss_start, _current_rss(process)) if rss]
        stats.peak_rss_bytes = max(samples) if samples else None
        stats.cpu_percent = process.cpu_percent(interval=None)


__all__ = ["ProfileStats", "profile_block"]
