"""
CSV adapter on top of the standard library csv module.

Columns are positional and must match CSV_HEADER exactly. Floats are written
with `repr`, Python's shortest representation that parses back to the same
value, so a CSV round trip is lossless.
"""

from __future__ import annotations

import csv
import math
import re
from pathlib import Path
from typing import List, Sequence

from format_bench.adapters.abstract import AbstractFormatAdapter
from format_bench.domain.models import Record
from format_bench.errors import Operation, ParseError

CSV_HEADER = (
    "Name",
    "Age",
    "Email",
    "Score1",
    "Score2",
    "Score3",
    "Score4",
    "Score5",
    "Balance",
    "Expenditure",
)


def _to_row(record: Record) -> List[str]:
    return [
        record.name,
        str(record.age),
        record.email,
        str(record.score1),
        str(record.score2),
        str(record.score3),
        str(record.score4),
        str(record.score5),
        repr(record.balance),
        repr(record.expenditure),
    ]


_INTEGER = re.compile(r"-?[0-9]+")
_DECIMAL = re.compile(r"-?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?")


def _parse_int(column: str, text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"{column}: invalid integer {text!r}")
    return int(text)


def _parse_float(column: str, text: str) -> float:
    # float() alone would also take "nan", "inf", "1_0" and padded text
    if not _DECIMAL.fullmatch(text):
        raise ValueError(f"{column}: invalid number {text!r}")
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"{column}: number out of range {text!r}")
    return value


def _from_row(row: List[str]) -> Record:
    return Record(
        name=row[0],
        age=_parse_int("Age", row[1]),
        email=row[2],
        score1=_parse_int("Score1", row[3]),
        score2=_parse_int("Score2", row[4]),
        score3=_parse_int("Score3", row[5]),
        score4=_parse_int("Score4", row[6]),
        score5=_parse_int("Score5", row[7]),
        balance=_parse_float("Balance", row[8]),
        expenditure=_parse_float("Expenditure", row[9]),
    )


class CsvAdapter(AbstractFormatAdapter):
    """Header row plus one text row per record."""

    name: str = "csv"
    label: str = "CSV"
    filename: str = "people.csv"
    description: str = "Comma-separated text via the csv module."
    decode_errors = (ValueError, csv.Error)

    def _write(self, dataset: Sequence[Record], path: Path) -> None:
        with self._step(Operation.CREATE, path):
            handle = path.open("w", newline="", encoding="utf-8")

        with self._step(Operation.CLOSE, path), handle, self._step(Operation.WRITE, path):
            writer = csv.writer(handle)
            writer.writerow(CSV_HEADER)
            writer.writerows(_to_row(record) for record in dataset)
            handle.flush()

    def _read(self, path: Path) -> List[Record]:
        with self._step(Operation.OPEN, path):
            handle = path.open("r", newline="", encoding="utf-8")

        records: List[Record] = []
        with handle:
            reader = csv.reader(handle)
            header = next(reader, None)
            if header is None:
                raise ParseError(self.name, path, "missing header row")
            if tuple(header) != CSV_HEADER:
                raise ParseError(self.name, path, f"unexpected header {header!r}")

            for row in reader:
                if len(row) != len(CSV_HEADER):
                    raise ParseError(
                        self.name,
                        path,
                        f"line {reader.line_num}: expected {len(CSV_HEADER)} columns, "
                        f"got {len(row)}",
                    )
                try:
                    records.append(_from_row(row))
                except ValueError as exc:
                    raise ParseError(self.name, path, f"line {reader.line_num}: {exc}") from exc
        return records


__all__ = ["CSV_HEADER", "CsvAdapter"]
