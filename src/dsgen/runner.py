"""
Chunked table generation.

A table's rows [1, N] are split into contiguous chunks. Each chunk builds its
own context, seeks every stream to the chunk's first row, and generates
sequentially, so any split produces the same bytes as a single pass. Chunks
run in-process or on a ProcessPoolExecutor; results are written in chunk
order. The first failing chunk cancels the rest and nothing is kept for the
table.

Usage:
    result = generate_table("date_dim", scale=1, output_dir=Path("out"), parallelism=4)
    lines = generate_range("ship_mode", scale=1, start_row=5, end_row=10)
"""

from __future__ import annotations

import concurrent.futures
import logging
import math
import time
from dataclasses import dataclass
from pathlib import Path

from .errors import ChunkGenerationError, DsgenError
from .generators import GenerationContext, create_generator
from .output import TableWriter, format_row
from .tables import get_table

logger = logging.getLogger(__name__)

# Upper bound on rows held in memory per chunk
DEFAULT_CHUNK_ROWS = 50_000


@dataclass(frozen=True)
class ChunkTask:
    """Rows [start_row, end_row) of one table; row numbers are 1-based."""

    table: str
    chunk_id: int
    start_row: int
    end_row: int
    scale: float

    @property
    def rows(self) -> int:
        return self.end_row - self.start_row


@dataclass(frozen=True)
class TableResult:
    """Outcome of generating one table."""

    table: str
    rows: int
    chunks: int
    elapsed: float
    output_path: Path | None = None


def plan_chunks(
    table: str,
    scale: float,
    total_rows: int,
    parallelism: int = 1,
    max_chunk_rows: int = DEFAULT_CHUNK_ROWS,
) -> list[ChunkTask]:
    """
    Split rows 1..total_rows into contiguous chunks.

    At least ``parallelism`` chunks are planned (when there are enough rows)
    and no chunk exceeds ``max_chunk_rows``.
    """
    if total_rows <= 0:
        return []
    count = max(parallelism, math.ceil(total_rows / max_chunk_rows))
    count = min(count, total_rows)
    base, extra = divmod(total_rows, count)

    tasks = []
    start = 1
    for chunk_id in range(count):
        size = base + (1 if chunk_id < extra else 0)
        tasks.append(ChunkTask(table, chunk_id, start, start + size, scale))
        start += size
    return tasks


def _render_rows(table: str, scale: float, start_row: int, end_row: int) -> list[str]:
    spec = get_table(table)
    context = GenerationContext.create(spec, scale)
    generator = create_generator(spec.name, context)
    generator.skip_rows(start_row)

    lines = []
    for row_number in range(start_row, end_row):
        row = generator.generate_row(row_number)
        lines.append(format_row(row, spec.columns))
        generator.consume_remaining_seeds()
    return lines


def generate_chunk(task: ChunkTask) -> str:
    """Generate one chunk and return its formatted text (runs in workers)."""
    return "".join(_render_rows(task.table, task.scale, task.start_row, task.end_row))


def generate_range(
    table: str,
    scale: float,
    start_row: int = 1,
    end_row: int | None = None,
) -> list[str]:
    """
    Formatted lines for rows [start_row, end_row) of a table.

    Args:
        table: Table name
        scale: Scale factor
        start_row: First row, 1-based
        end_row: One past the last row; defaults to the table's row count + 1
    """
    total = get_table(table).row_count(scale)
    if end_row is None:
        end_row = total + 1
    if start_row < 1 or end_row > total + 1 or start_row > end_row:
        raise ValueError(f"Row range [{start_row}, {end_row}) outside 1..{total} for '{table}'")
    return _render_rows(table, scale, start_row, end_row)


def _run_serial(tasks: list[ChunkTask], writer: TableWriter) -> None:
    for task in tasks:
        try:
            text = generate_chunk(task)
        except Exception as e:
            raise ChunkGenerationError(task.table, task.chunk_id, task.start_row, e) from e
        writer.write_chunk(task.chunk_id, text)


def _run_parallel(tasks: list[ChunkTask], writer: TableWriter, parallelism: int) -> None:
    with concurrent.futures.ProcessPoolExecutor(max_workers=parallelism) as executor:
        inflight = {executor.submit(generate_chunk, task): task for task in tasks}
        try:
            for future in concurrent.futures.as_completed(inflight):
                task = inflight[future]
                try:
                    text = future.result()
                except Exception as e:
                    raise ChunkGenerationError(task.table, task.chunk_id, task.start_row, e) from e
                writer.write_chunk(task.chunk_id, text)
        except BaseException:
            for future in inflight:
                future.cancel()
            raise


def generate_table(
    table: str,
    scale: float,
    output_dir: Path | str,
    parallelism: int = 1,
    overwrite: bool = True,
    buffer_size_mb: float = 10.0,
    max_chunk_rows: int = DEFAULT_CHUNK_ROWS,
) -> TableResult:
    """
    Generate a whole table into ``<output_dir>/<table>.dat``.

    Raises:
        UnsupportedTableError: If the table has no generator
        InvalidScaleError: If the scale factor is invalid
        ChunkGenerationError: If any chunk fails; no file is left behind
    """
    spec = get_table(table)
    table = spec.name
    # Fail on unsupported tables and bad scales before touching the filesystem
    create_generator(table, GenerationContext.create(spec, scale))
    total_rows = spec.row_count(scale)
    tasks = plan_chunks(table, scale, total_rows, parallelism, max_chunk_rows)

    start = time.time()
    logger.info(
        "Generating '%s' (%s) rows=%d chunks=%d parallelism=%d",
        table, spec.abbreviation, total_rows, len(tasks), parallelism,
    )
    with TableWriter(output_dir, table, buffer_size_mb=buffer_size_mb, overwrite=overwrite) as writer:
        if parallelism > 1 and len(tasks) > 1:
            _run_parallel(tasks, writer, parallelism)
        else:
            _run_serial(tasks, writer)
    elapsed = time.time() - start

    return TableResult(table, total_rows, len(tasks), elapsed, writer.output_path)


def generate_tables(
    tables: list[str],
    scale: float,
    output_dir: Path | str,
    parallelism: int = 1,
    overwrite: bool = True,
    buffer_size_mb: float = 10.0,
) -> list[TableResult]:
    """Generate several tables in order; stops at the first failure."""
    results = []
    for table in tables:
        try:
            results.append(
                generate_table(
                    table,
                    scale,
                    output_dir,
                    parallelism=parallelism,
                    overwrite=overwrite,
                    buffer_size_mb=buffer_size_mb,
                )
            )
        except DsgenError:
            logger.error("Generation of '%s' failed", table)
            raise
    return results
