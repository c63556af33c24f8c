"""
JSON adapter: the whole dataset as a single array of objects.

Encoding and decoding go through a pydantic TypeAdapter, so keys are the
lower-case Record field names and a read fails unless the document is an
array of objects matching the schema. Validation is strict: a string, bool
or fractional number in an integer field is rejected.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence

from pydantic import TypeAdapter

from format_bench.adapters.abstract import AbstractFormatAdapter
from format_bench.domain.models import Record
from format_bench.errors import Operation

_DATASET_ADAPTER = TypeAdapter(List[Record])


class JsonAdapter(AbstractFormatAdapter):
    """One write of the encoded array; one in-memory parse on read."""

    name: str = "json"
    label: str = "JSON"
    filename: str = "people.json"
    description: str = "Single JSON array via pydantic."

    def _write(self, dataset: Sequence[Record], path: Path) -> None:
        payload = _DATASET_ADAPTER.dump_json(list(dataset))

        with self._step(Operation.CREATE, path):
            handle = path.open("wb")

        with self._step(Operation.CLOSE, path), handle, self._step(Operation.WRITE, path):
            handle.write(payload)
            handle.flush()

    def _read(self, path: Path) -> List[Record]:
        with self._step(Operation.OPEN, path):
            handle = path.open("rb")

        with handle:
            payload = handle.read()
        return _DATASET_ADAPTER.validate_json(payload, strict=True)


__all__ = ["JsonAdapter"]
