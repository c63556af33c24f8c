"""
Domain package for the format benchmark.

Exports the record model and the dataset generator. Keep this package focused
on data definitions; encoding belongs to `format_bench.adapters`.
"""

from format_bench.domain.generator import generate_dataset, make_record
from format_bench.domain.models import RECORD_FIELDS, Record

__all__ = [
    "RECORD_FIELDS",
    "Record",
    "generate_dataset",
    "make_record",
]
