"""Content builders and the dummy file generator."""

from .docx_builder import DocxBuilder
from .filler import FillPlan, FillStats, FormatBuilder, fill_to_size
from .generator import DummyFileGenerator, WrittenFile
from .jpg_builder import JpgBuilder
from .pdf_builder import PdfBuilder
from .pptx_builder import PptxBuilder
from .xlsx_builder import XlsxBuilder

__all__ = [
    "DocxBuilder",
    "DummyFileGenerator",
    "FillPlan",
    "FillStats",
    "FormatBuilder",
    "JpgBuilder",
    "PdfBuilder",
    "PptxBuilder",
    "WrittenFile",
    "XlsxBuilder",
    "fill_to_size",
]
