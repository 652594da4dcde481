"""XLSX content builder using openpyxl."""

import io

from openpyxl import Workbook

from dummyfile.services.filler import (
    FillPlan,
    FormatBuilder,
    batch_chars,
    filler_text,
)

MIN_COLUMNS = 5
MAX_COLUMNS = 15
MAX_CELL_CHARS = 1000


class XlsxBuilder(FormatBuilder):
    """Spreadsheet of unique string cells, grown a block of rows at a time."""

    label = "XLSX"

    def __init__(self, target_size: int, plan: FillPlan | None = None) -> None:
        super().__init__(target_size, plan)
        self.workbook = Workbook()
        self.sheet = self.workbook.active
        self.sheet.title = "Data"

        self.columns = min(MAX_COLUMNS, max(MIN_COLUMNS, target_size // 100_000))
        self.cell_chars = max(32, min(MAX_CELL_CHARS, target_size // 2000))
        chars = batch_chars(target_size, minimum=self.cell_chars, maximum=500_000)
        self.rows_per_batch = max(1, chars // (self.columns * self.cell_chars))

        self.sheet.append([f"Column {col + 1}" for col in range(self.columns)])

    def add_batch(self, index: int) -> None:
        for i in range(self.rows_per_batch):
            row = index * self.rows_per_batch + i + 1
            self.sheet.append(
                [
                    filler_text(self.label, row, self.cell_chars) + f"_R{row}_C{col}"
                    for col in range(self.columns)
                ]
            )

    def encode(self) -> bytes:
        buffer = io.BytesIO()
        self.workbook.save(buffer)
        return buffer.getvalue()
