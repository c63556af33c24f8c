"""
Error types raised by format adapters.

Adapters never terminate the process themselves: every I/O or decoding
failure is raised as a `FormatError` (or its `ParseError` subclass) carrying
the format, the failing operation and the underlying cause. The CLI is the
only place that turns these into a non-zero exit status.
"""

from __future__ import annotations

import enum
from pathlib import Path
from typing import Union


class Operation(str, enum.Enum):
    """The step of a write/read cycle that failed."""

    CREATE = "create"
    WRITE = "write"
    CLOSE = "close"
    STAT = "stat"
    OPEN = "open"
    READ = "read"
    PARSE = "parse"

    def __str__(self) -> str:
        return self.value


class FormatBenchError(Exception):
    """Base class for all benchmark failures."""


class FormatError(FormatBenchError):
    """An I/O or serialization failure in a format adapter."""

    def __init__(
        self,
        format_name: str,
        operation: Operation,
        path: Union[str, Path],
        cause: Union[BaseException, str],
    ) -> None:
        self.format_name = format_name
        self.operation = Operation(operation)
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"{format_name} {self.operation} failed for {self.path}: {cause}")


class ParseError(FormatError):
    """Malformed input encountered while decoding a file."""

    def __init__(
        self,
        format_name: str,
        path: Union[str, Path],
        cause: Union[BaseException, str],
        operation: Operation = Operation.PARSE,
    ) -> None:
        super().__init__(format_name, operation, path, cause)


__all__ = ["FormatBenchError", "FormatError", "Operation", "ParseError"]
