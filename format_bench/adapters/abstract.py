"""
Adapter interfaces and result contracts for the format benchmark.

Concrete adapters (Parquet, CSV, JSON) implement the FormatAdapter protocol
and return timings in seconds. The orchestrator packs those timings into a
FormatResult TypedDict so reporting and persistence never depend on a
particular format.
"""

from __future__ import annotations

import abc
import contextlib
import os
import time
from pathlib import Path
from typing import (
    Iterator,
    List,
    Optional,
    Protocol,
    Sequence,
    Tuple,
    Type,
    TypedDict,
    Union,
    runtime_checkable,
)

from format_bench.domain.models import Record
from format_bench.errors import FormatBenchError, FormatError, Operation, ParseError

PathLike = Union[str, "os.PathLike[str]"]

_DECODE_OPERATIONS = frozenset({Operation.OPEN, Operation.READ, Operation.PARSE})


class FormatResult(TypedDict, total=False):
    """
    Metrics for one format's write/size/read cycle.

    The timing and size fields are always present; profiler fields may be
    None when the platform does not expose them.
    """

    format: str
    label: str
    path: str
    records: int
    records_read: int
    write_seconds: float
    read_seconds: float
    file_size_bytes: int
    peak_rss_bytes: Optional[int]
    cpu_percent: Optional[float]


@runtime_checkable
class FormatAdapter(Protocol):
    """
    Common interface all format adapters must implement.

    Attributes
    ----------
    name : str
        Short machine-friendly tag used to select the adapter.
    label : str
        Column heading in the results table.
    filename : str
        File name written inside the output directory.
    description : str
        Human-friendly summary of the encoding.
    """

    name: str
    label: str
    filename: str
    description: str

    def write(self, dataset: Sequence[Record], path: PathLike) -> float:
        """
        Serialize the whole dataset to `path`, replacing any existing file.

        Returns
        -------
        float
            Wall-clock seconds for create, write, flush and close.
        """
        ...

    def read(self, path: PathLike) -> Tuple[List[Record], float]:
        """
        Decode every record in `path`.

        Returns
        -------
        tuple[list[Record], float]
            The decoded records and wall-clock seconds for open, read and close.
        """
        ...

    def file_size(self, path: PathLike) -> int:
        """Size in bytes of the file at `path`."""
        ...


class AbstractFormatAdapter(abc.ABC):
    """
    Base class handling timing and error translation.

    Subclasses set the descriptive attributes, list the exceptions their
    library raises for bad data in `decode_errors`, and implement `_write`
    and `_read`. Any `OSError` or decode error escaping those methods is
    re-raised as `FormatError` / `ParseError`.
    """

    name: str
    label: str
    filename: str
    description: str
    decode_errors: Tuple[Type[BaseException], ...] = (ValueError,)

    def write(self, dataset: Sequence[Record], path: PathLike) -> float:
        target = Path(path)
        start = time.perf_counter()
        with self._step(Operation.WRITE, target):
            self._write(dataset, target)
        return time.perf_counter() - start

    def read(self, path: PathLike) -> Tuple[List[Record], float]:
        source = Path(path)
        start = time.perf_counter()
        with self._step(Operation.READ, source):
            records = self._read(source)
        return records, time.perf_counter() - start

    def file_size(self, path: PathLike) -> int:
        with self._step(Operation.STAT, Path(path)):
            return os.stat(path).st_size

    @contextlib.contextmanager
    def _step(self, operation: Operation, path: Path) -> Iterator[None]:
        """Translate library failures inside the block into benchmark errors."""
        try:
            yield
        except FormatBenchError:
            raise
        except OSError as exc:
            raise FormatError(self.name, operation, path, exc) from exc
        except self.decode_errors as exc:
            if operation in _DECODE_OPERATIONS:
                raise ParseError(self.name, path, exc) from exc
            raise FormatError(self.name, operation, path, exc) from exc

    @abc.abstractmethod
    def _write(self, dataset: Sequence[Record], path: Path) -> None:  # pragma: no cover
        raise NotImplementedError

    @abc.abstractmethod
    def _read(self, path: Path) -> List[Record]:  # pragma: no cover
        raise NotImplementedError


__all__ = [
    "AbstractFormatAdapter",
    "FormatAdapter",
    "FormatResult",
]
