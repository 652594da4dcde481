"""PDF content builder using the reportlab canvas.

Lines are kept in memory and the whole document is re-rendered on every
probe, since a reportlab canvas can only be serialized once.
"""

import io

from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from dummyfile.services.filler import (
    FillPlan,
    FormatBuilder,
    batch_chars,
    filler_text,
    unique_token,
)

LINE_CHARS = 90
FONT_NAME = "Helvetica"
FONT_SIZE = 7
LEADING = 9
MARGIN = 36


class PdfBuilder(FormatBuilder):
    """PDF of unique text lines laid out over US letter pages."""

    label = "PDF"

    def __init__(self, target_size: int, plan: FillPlan | None = None) -> None:
        super().__init__(target_size, plan)
        self.title = f"Dummy PDF {unique_token()}"
        self.lines: list[str] = [self.title]
        chars = batch_chars(target_size, minimum=LINE_CHARS, maximum=1_000_000)
        self.lines_per_batch = max(1, chars // LINE_CHARS)

        _, height = letter
        self.lines_per_page = int((height - 2 * MARGIN) / LEADING)

    def add_batch(self, index: int) -> None:
        start = index * self.lines_per_batch
        self.lines.extend(
            filler_text(self.label, start + i, LINE_CHARS)
            for i in range(self.lines_per_batch)
        )

    def encode(self) -> bytes:
        buffer = io.BytesIO()
        pdf = canvas.Canvas(buffer, pagesize=letter)
        pdf.setTitle(self.title)
        _, height = letter

        for start in range(0, len(self.lines), self.lines_per_page):
            text = pdf.beginText(MARGIN, height - MARGIN)
            text.setFont(FONT_NAME, FONT_SIZE, leading=LEADING)
            for line in self.lines[start : start + self.lines_per_page]:
                text.textLine(line)
            pdf.drawText(text)
            pdf.showPage()

        pdf.save()
        return buffer.getvalue()
