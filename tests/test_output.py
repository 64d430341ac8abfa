"""
Tests for row formatting and the table writer.
"""

import pytest

from dsgen.errors import OutputError
from dsgen.generators import Row
from dsgen.output import TableWriter, format_row, format_value
from dsgen.tables import Column, ColumnType
from dsgen.types import Date, Decimal

COLUMNS = (
    Column("sk", ColumnType.IDENTIFIER),
    Column("flag", ColumnType.BOOLEAN),
    Column("price", ColumnType.DECIMAL, 2),
    Column("day", ColumnType.DATE),
    Column("name", ColumnType.CHAR, 5),
)


class TestFormatValue:
    """Tests for per-type rendering."""

    def test_identifier(self):
        assert format_value(42, COLUMNS[0]) == "42"

    def test_missing_identifier_is_empty(self):
        assert format_value(-1, COLUMNS[0]) == ""

    def test_boolean(self):
        assert format_value(True, COLUMNS[1]) == "Y"
        assert format_value(False, COLUMNS[1]) == "N"

    def test_decimal_truncates_to_column_precision(self):
        assert format_value(Decimal(12349, 3), COLUMNS[2]) == "12.34"

    def test_date_and_julian(self):
        assert format_value(Date(1900, 1, 2), COLUMNS[3]) == "1900-01-02"
        assert format_value(2415022, COLUMNS[3]) == "1900-01-02"
        assert format_value(Date(1900, 1, 2), Column("j", ColumnType.JULIAN)) == "2415022"

    def test_varchar_truncated_to_width(self):
        assert format_value("Hawaii/Alaska", Column("n", ColumnType.VARCHAR, 6)) == "Hawaii"

    def test_text_truncated_to_width(self):
        assert format_value("Wednesday", COLUMNS[4]) == "Wedne"

    def test_none_is_empty(self):
        assert format_value(None, COLUMNS[4]) == ""


class TestFormatRow:
    """Tests for whole-line rendering."""

    def test_trailing_delimiter_and_newline(self):
        row = Row("t", (1, True, Decimal(150, 2), Date(2000, 1, 1), "abc"))
        assert format_row(row, COLUMNS) == "1|Y|1.50|2000-01-01|abc|\n"

    def test_null_bitmap_blanks_columns(self):
        row = Row("t", (1, True, Decimal(150, 2), Date(2000, 1, 1), "abc"), null_bitmap=0b10110)
        assert format_row(row, COLUMNS) == "1|||2000-01-01||\n"

    def test_no_quoting(self):
        row = Row("t", (1, False, Decimal(0, 2), Date(2000, 1, 1), 'a"b'))
        assert format_row(row, COLUMNS).endswith('|a"b|\n')

    def test_arity_mismatch(self):
        with pytest.raises(ValueError):
            format_row(Row("t", (1, True)), COLUMNS)


class TestTableWriter:
    """Tests for TableWriter."""

    def test_writes_lines(self, tmp_path):
        with TableWriter(tmp_path, "sample") as writer:
            writer.write_lines(["a|\n", "b|\n"])
        assert (tmp_path / "sample.dat").read_bytes() == b"a|\nb|\n"
        assert writer.get_stats()["row_count"] == 2

    def test_out_of_order_chunks_written_in_order(self, tmp_path):
        with TableWriter(tmp_path, "sample") as writer:
            writer.write_chunk(2, "c|\n")
            writer.write_chunk(0, "a|\n")
            assert writer.pending_chunks == [2]
            writer.write_chunk(1, "b|\n")
            assert writer.pending_chunks == []
        assert (tmp_path / "sample.dat").read_text() == "a|\nb|\nc|\n"

    def test_duplicate_chunk(self, tmp_path):
        writer = TableWriter(tmp_path, "sample")
        writer.write_chunk(0, "a|\n")
        with pytest.raises(OutputError):
            writer.write_chunk(0, "a|\n")
        writer.abort()

    def test_close_with_missing_chunk_discards_output(self, tmp_path):
        writer = TableWriter(tmp_path, "sample")
        writer.write_chunk(0, "a|\n")
        writer.write_chunk(2, "c|\n")
        with pytest.raises(OutputError, match="chunk 1"):
            writer.close()
        assert list(tmp_path.iterdir()) == []

    def test_exception_aborts(self, tmp_path):
        with pytest.raises(RuntimeError):
            with TableWriter(tmp_path, "sample", buffer_size_mb=0.000001) as writer:
                writer.write_lines(["a|\n"] * 10)
                raise RuntimeError("boom")
        assert list(tmp_path.iterdir()) == []

    def test_small_buffer_flushes_early(self, tmp_path):
        with TableWriter(tmp_path, "sample", buffer_size_mb=0.000001) as writer:
            writer.write_lines(["a|\n"] * 10)
            assert writer.get_stats()["total_bytes_written"] > 0
        assert (tmp_path / "sample.dat").read_text() == "a|\n" * 10

    def test_refuses_to_overwrite(self, tmp_path):
        (tmp_path / "sample.dat").write_text("old\n")
        with pytest.raises(OutputError, match="already exists"):
            TableWriter(tmp_path, "sample", overwrite=False)
        assert (tmp_path / "sample.dat").read_text() == "old\n"

    def test_overwrite_replaces_file(self, tmp_path):
        (tmp_path / "sample.dat").write_text("old\n")
        with TableWriter(tmp_path, "sample") as writer:
            writer.write_lines(["new|\n"])
        assert (tmp_path / "sample.dat").read_text() == "new|\n"

    def test_empty_table_creates_empty_file(self, tmp_path):
        with TableWriter(tmp_path, "sample"):
            pass
        assert (tmp_path / "sample.dat").read_bytes() == b""

    def test_write_after_close(self, tmp_path):
        writer = TableWriter(tmp_path, "sample")
        writer.close()
        with pytest.raises(OutputError):
            writer.write_lines(["a|\n"])
