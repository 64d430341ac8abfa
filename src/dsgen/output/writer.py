"""
TableWriter - buffered, ordered writer for one ``<table>.dat`` file.

Chunks may finish out of order when generated in parallel. The writer holds
early chunks until every chunk before them has been written, so the file is
always in row order. Output goes to a temporary file that replaces the target
only on a clean close; an aborted table leaves no partial file behind.

Usage:
    with TableWriter(output_dir, "date_dim") as writer:
        writer.write_chunk(1, text_for_rows_5001_to_10000)
        writer.write_chunk(0, text_for_rows_1_to_5000)

    stats = writer.get_stats()
"""

from __future__ import annotations

import io
import logging
import os
from pathlib import Path
from typing import Any, Iterable, TextIO

from ..errors import OutputError

logger = logging.getLogger(__name__)

DATA_SUFFIX = ".dat"
TEMP_SUFFIX = ".tmp"


class TableWriter:
    """
    Streaming writer for one table's data file.

    Attributes:
        output_path: Final path of the data file
        buffer_size_bytes: Buffer flush threshold in bytes
    """

    def __init__(
        self,
        output_dir: Path | str,
        table: str,
        buffer_size_mb: float = 10.0,
        overwrite: bool = True,
    ) -> None:
        """
        Initialize a writer.

        Args:
            output_dir: Directory for the data file
            table: Table name; the file is ``<table>.dat``
            buffer_size_mb: Buffer size in megabytes before flush
            overwrite: Replace an existing data file

        Raises:
            OutputError: If the file exists and overwrite is False
        """
        self.table = table
        self.output_path = Path(output_dir) / f"{table}{DATA_SUFFIX}"
        self.buffer_size_bytes = int(buffer_size_mb * 1024 * 1024)
        if self.output_path.exists() and not overwrite:
            raise OutputError(f"{self.output_path} already exists (use overwrite to replace it)")

        self._temp_path = self.output_path.with_name(self.output_path.name + TEMP_SUFFIX)

        # Buffer for accumulating output
        self._buffer = io.StringIO()
        self._buffer_bytes = 0

        # File handle (opened on first flush)
        self._file: TextIO | None = None
        self._total_bytes_written = 0
        self._row_count = 0

        # Chunks that arrived before their predecessors
        self._pending: dict[int, str] = {}
        self._next_chunk = 0

        self._closed = False

    def _ensure_file_open(self) -> None:
        """Ensure the temporary file is open."""
        if self._file is None:
            self.output_path.parent.mkdir(parents=True, exist_ok=True)
            # LF endings regardless of platform
            self._file = open(self._temp_path, "w", encoding="ascii", newline="\n")

    def _flush_buffer(self) -> None:
        """Flush buffer to disk."""
        if self._buffer_bytes > 0:
            self._ensure_file_open()
            content = self._buffer.getvalue()
            self._file.write(content)
            self._total_bytes_written += self._buffer_bytes
            self._buffer = io.StringIO()
            self._buffer_bytes = 0

    def _write(self, text: str) -> None:
        """Write text to buffer, flushing if needed."""
        if self._closed:
            raise OutputError(f"Writer for '{self.table}' is closed")
        self._buffer.write(text)
        self._buffer_bytes += len(text)
        self._row_count += text.count("\n")

        if self._buffer_bytes >= self.buffer_size_bytes:
            self._flush_buffer()

    def write_lines(self, lines: Iterable[str]) -> None:
        """Append formatted lines directly (serial generation)."""
        for line in lines:
            self._write(line)

    def write_chunk(self, chunk_id: int, text: str) -> None:
        """
        Accept a chunk's formatted text, writing it once all earlier chunks are in.

        Args:
            chunk_id: 0-based position of the chunk in the table
            text: Formatted lines of the chunk

        Raises:
            OutputError: If the chunk was already written or is pending
        """
        if chunk_id < self._next_chunk or chunk_id in self._pending:
            raise OutputError(f"Chunk {chunk_id} of '{self.table}' written twice")
        self._pending[chunk_id] = text
        while self._next_chunk in self._pending:
            self._write(self._pending.pop(self._next_chunk))
            self._next_chunk += 1

    @property
    def pending_chunks(self) -> list[int]:
        return sorted(self._pending)

    def get_stats(self) -> dict[str, Any]:
        """Return writer statistics."""
        return {
            "output_path": str(self.output_path),
            "total_bytes_written": self._total_bytes_written,
            "buffer_bytes": self._buffer_bytes,
            "row_count": self._row_count,
            "chunks_written": self._next_chunk,
            "chunks_pending": len(self._pending),
        }

    def flush(self) -> None:
        """Force flush buffer to disk."""
        self._flush_buffer()

    def close(self) -> None:
        """
        Flush, close and move the finished file into place.

        Raises:
            OutputError: If chunks are still waiting for a predecessor
        """
        if self._closed:
            return
        if self._pending:
            missing = self._next_chunk
            self.abort()
            raise OutputError(f"'{self.table}' closed while waiting for chunk {missing}")

        self._ensure_file_open()
        self._flush_buffer()
        self._file.close()
        self._file = None
        os.replace(self._temp_path, self.output_path)
        self._closed = True
        logger.info(
            "Wrote '%s' rows=%d bytes=%d", self.output_path, self._row_count, self._total_bytes_written
        )

    def abort(self) -> None:
        """Discard everything written so far."""
        if self._file is not None:
            self._file.close()
            self._file = None
        if self._temp_path.exists():
            self._temp_path.unlink()
        self._buffer = io.StringIO()
        self._buffer_bytes = 0
        self._pending.clear()
        self._closed = True
        logger.warning("Discarded partial output for '%s'", self.table)

    def __enter__(self) -> "TableWriter":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Close on success, abort on error."""
        if exc_type is None:
            self.close()
        else:
            self.abort()
