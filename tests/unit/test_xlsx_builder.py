"""Tests for the XLSX content builder."""

import io

from openpyxl import load_workbook

from dummyfile.core.formats import ZIP_SIGNATURE
from dummyfile.services.xlsx_builder import MAX_COLUMNS, MIN_COLUMNS, XlsxBuilder

TARGET = 200 * 1024


class TestXlsxBuilder:
    """Tests for XlsxBuilder."""

    def test_build_lands_between_safety_fraction_and_target(self):
        """Encoded workbook fills at least 90% of the target without exceeding it."""
        data = XlsxBuilder(TARGET).build()

        assert 0.9 * TARGET <= len(data) <= TARGET
        assert data.startswith(ZIP_SIGNATURE)

    def test_build_is_readable_by_openpyxl(self):
        """Encoded workbook has a header row and filler rows."""
        builder = XlsxBuilder(TARGET)
        data = builder.build()

        workbook = load_workbook(io.BytesIO(data), read_only=True)
        sheet = workbook["Data"]
        rows = list(sheet.iter_rows(values_only=True))

        assert rows[0] == tuple(f"Column {c + 1}" for c in range(builder.columns))
        assert len(rows) == 1 + builder.stats.batches * builder.rows_per_batch
        assert rows[1][0].endswith("_R1_C0")

    def test_cells_are_unique(self):
        """Every filler cell holds different text."""
        builder = XlsxBuilder(TARGET)
        builder.build()

        values = [
            cell.value
            for row in builder.sheet.iter_rows(min_row=2)
            for cell in row
        ]

        assert len(values) == len(set(values))

    def test_column_count_is_clamped(self):
        """Column count stays within bounds for tiny and huge targets."""
        assert XlsxBuilder(1024).columns == MIN_COLUMNS
        assert XlsxBuilder(10 * 1024 * 1024 * 1024).columns == MAX_COLUMNS
