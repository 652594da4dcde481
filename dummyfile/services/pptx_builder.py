"""PPTX content builder using python-pptx."""

import io

from pptx import Presentation
from pptx.util import Inches

from dummyfile.services.filler import (
    FillPlan,
    FormatBuilder,
    batch_chars,
    filler_text,
)

# "Blank" in the default template
BLANK_LAYOUT_INDEX = 6


class PptxBuilder(FormatBuilder):
    """Slideshow with one slide of unique text per batch."""

    label = "PPTX"

    def __init__(self, target_size: int, plan: FillPlan | None = None) -> None:
        super().__init__(target_size, plan)
        self.presentation = Presentation()
        self.layout = self.presentation.slide_layouts[BLANK_LAYOUT_INDEX]
        self.slide_chars = batch_chars(target_size, minimum=2000, maximum=200_000)

    def add_batch(self, index: int) -> None:
        slide = self.presentation.slides.add_slide(self.layout)
        textbox = slide.shapes.add_textbox(
            Inches(0.3), Inches(0.3), Inches(9.4), Inches(6.9)
        )
        text_frame = textbox.text_frame
        text_frame.word_wrap = True
        text_frame.text = filler_text(f"Slide_{index}", index, self.slide_chars)

    def encode(self) -> bytes:
        buffer = io.BytesIO()
        self.presentation.save(buffer)
        return buffer.getvalue()
