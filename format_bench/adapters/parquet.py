"""
Parquet adapter backed by pyarrow.

The schema mirrors `Record` column for column. `email` is the only nullable
column: an empty address is stored as null and restored as "" on read.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Sequence

import pyarrow as pa
import pyarrow.parquet as pq

from format_bench.adapters.abstract import AbstractFormatAdapter
from format_bench.config import get_settings
from format_bench.domain.models import Record
from format_bench.errors import Operation

SCHEMA = pa.schema(
    [
        pa.field("name", pa.string(), nullable=False),
        pa.field("age", pa.int32(), nullable=False),
        pa.field("email", pa.string(), nullable=True),
        pa.field("score1", pa.int32(), nullable=False),
        pa.field("score2", pa.int32(), nullable=False),
        pa.field("score3", pa.int32(), nullable=False),
        pa.field("score4", pa.int32(), nullable=False),
        pa.field("score5", pa.int32(), nullable=False),
        pa.field("balance", pa.float64(), nullable=False),
        pa.field("expenditure", pa.float64(), nullable=False),
    ]
)


def _empty_columns() -> Dict[str, list]:
    return {name: [] for name in SCHEMA.names}


def _to_batch(columns: Dict[str, list]) -> pa.RecordBatch:
    columns["email"] = [email or None for email in columns["email"]]
    return pa.RecordBatch.from_pydict(columns, schema=SCHEMA)


class ParquetAdapter(AbstractFormatAdapter):
    """
    Row-by-row append into column buffers, flushed as record batches.

    Each full buffer of `batch_size` rows becomes one record batch handed to
    `pyarrow.parquet.ParquetWriter`; reads pull batches back with
    `ParquetFile.iter_batches` until the file is exhausted.
    """

    name: str = "parquet"
    label: str = "Parquet"
    filename: str = "people.parquet"
    description: str = "Columnar binary via pyarrow.parquet, typed schema."
    decode_errors = (ValueError, pa.ArrowException)

    def __init__(
        self,
        batch_size: Optional[int] = None,
        compression: Optional[str] = None,
    ) -> None:
        settings = get_settings()
        self.batch_size = batch_size or settings.benchmark_batch_size
        self.compression = compression or settings.parquet_compression

    def _write(self, dataset: Sequence[Record], path: Path) -> None:
        with self._step(Operation.CREATE, path):
            writer = pq.ParquetWriter(str(path), SCHEMA, compression=self.compression)

        with self._step(Operation.CLOSE, path), writer, self._step(Operation.WRITE, path):
            columns = _empty_columns()
            pending = 0
            for record in dataset:
                for field_name, value in record:
                    columns[field_name].append(value)
                pending += 1
                if pending == self.batch_size:
                    writer.write_batch(_to_batch(columns))
                    columns = _empty_columns()
                    pending = 0
            if pending:
                writer.write_batch(_to_batch(columns))

    def _read(self, path: Path) -> List[Record]:
        with self._step(Operation.OPEN, path):
            handle = path.open("rb")

        records: List[Record] = []
        with handle:
            parquet_file = pq.ParquetFile(handle)
            for batch in parquet_file.iter_batches(batch_size=self.batch_size):
                for row in batch.to_pylist():
                    row["email"] = row["email"] or ""
                    records.append(Record(**row))
        return records


__all__ = ["SCHEMA", "ParquetAdapter"]
