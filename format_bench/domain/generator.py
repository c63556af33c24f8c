"""
Deterministic synthetic dataset generation.

Record `i` is a pure function of `i`, so two runs with the same count produce
identical datasets. The whole dataset is built eagerly in memory.
"""

from __future__ import annotations

from typing import List

from format_bench.domain.models import Record


def make_record(i: int) -> Record:
    """Build the record at index `i`."""
    score = i % 1000
    return Record(
        name=f"Person_{i}",
        age=i % 100,
        email=f"person{i}@example.com",
        score1=score,
        score2=score,
        score3=score,
        score4=score,
        score5=score,
        balance=i * 1.5,
        expenditure=i * 2.5,
    )


def generate_dataset(n: int) -> List[Record]:
    """
    Generate `n` records, indexed 0 through n - 1.

    Raises
    ------
    ValueError
        If `n` is negative.
    """
    if n < 0:
        raise ValueError(f"record count must be non-negative, got {n}")
    return [make_record(i) for i in range(n)]


__all__ = ["generate_dataset", "make_record"]
