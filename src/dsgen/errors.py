"""
Exception hierarchy for dsgen.

Every failure the engine reports on purpose derives from DsgenError so the
CLI can turn it into a one-line message and a non-zero exit status. Failures
are fatal: nothing here is retried or clamped.
"""

from __future__ import annotations


def _restore_error(cls, args, state):
    error = cls.__new__(cls)
    error.args = args
    error.__dict__.update(state)
    return error


class DsgenError(Exception):
    """Base class for all dsgen errors."""

    def __reduce__(self):
        # Subclass __init__ signatures differ from args, so unpickle from state
        return (_restore_error, (self.__class__, self.args, self.__dict__))


class DistributionError(DsgenError):
    """Raised when a distribution resource is missing or malformed."""

    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(f"Distribution '{name}' failed to load: {reason}")


class DistributionLookupError(DsgenError):
    """Raised for an unknown (distribution, field) pair or an index out of range."""

    def __init__(self, name: str, field: str | None = None, index: int | None = None):
        self.name = name
        self.field = field
        self.index = index
        message = f"Invalid distribution lookup '{name}'"
        if field is not None:
            message += f" field '{field}'"
        if index is not None:
            message += f" index {index}"
        super().__init__(message)


class InvalidScaleError(DsgenError):
    """Raised when a scale factor is not positive, not a number, or too large."""

    def __init__(self, scale: float, reason: str):
        self.scale = scale
        super().__init__(f"Invalid scale factor {scale!r}: {reason}")


class StreamOverflowError(DsgenError):
    """Raised when a stream seek exceeds the signed 64-bit step range."""

    def __init__(self, column: str, steps: int):
        self.column = column
        self.steps = steps
        super().__init__(f"Seek of {steps} steps on stream '{column}' overflows 64-bit range")


class UnsupportedTableError(DsgenError):
    """Raised when a table has no registered row generator or is unknown."""

    def __init__(self, table: str, available: list[str] | None = None):
        self.table = table
        self.available = available or []
        message = f"No row generator for table '{table}'"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)


class ChunkGenerationError(DsgenError):
    """Raised when a chunk fails; the table's output is discarded."""

    def __init__(self, table: str, chunk_id: int, start_row: int, cause: BaseException):
        self.table = table
        self.chunk_id = chunk_id
        self.start_row = start_row
        self.cause = cause
        super().__init__(
            f"Chunk {chunk_id} of '{table}' (from row {start_row}) failed: {cause}"
        )


class ConfigError(DsgenError):
    """Raised for invalid configuration values or files."""

    pass


class OutputError(DsgenError):
    """Raised when an output file cannot be written safely."""

    pass
