"""DOCX content builder using python-docx."""

import io
import math

from docx import Document

from dummyfile.services.filler import (
    FillPlan,
    FormatBuilder,
    batch_chars,
    filler_text,
    unique_token,
)

# Longest single paragraph; larger batches are split across paragraphs
MAX_PARAGRAPH_CHARS = 20_000


class DocxBuilder(FormatBuilder):
    """Word document of unique filler paragraphs."""

    label = "DOCX"

    def __init__(self, target_size: int, plan: FillPlan | None = None) -> None:
        super().__init__(target_size, plan)
        self.document = Document()
        token = unique_token()
        self.document.core_properties.title = f"Dummy document {token}"
        self.document.add_heading(f"Dummy document {token}", level=1)

        chars = batch_chars(target_size, minimum=200, maximum=10 * MAX_PARAGRAPH_CHARS)
        self.paragraphs_per_batch = math.ceil(chars / MAX_PARAGRAPH_CHARS)
        self.paragraph_chars = math.ceil(chars / self.paragraphs_per_batch)

    def add_batch(self, index: int) -> None:
        for i in range(self.paragraphs_per_batch):
            paragraph_index = index * self.paragraphs_per_batch + i
            self.document.add_paragraph(
                filler_text(self.label, paragraph_index, self.paragraph_chars)
            )

    def encode(self) -> bytes:
        buffer = io.BytesIO()
        self.document.save(buffer)
        return buffer.getvalue()
