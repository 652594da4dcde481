"""Tests for the DOCX content builder."""

import io

from docx import Document

from dummyfile.core.formats import ZIP_SIGNATURE
from dummyfile.services.docx_builder import MAX_PARAGRAPH_CHARS, DocxBuilder

TARGET = 200 * 1024


class TestDocxBuilder:
    """Tests for DocxBuilder."""

    def test_build_lands_between_safety_fraction_and_target(self):
        """Encoded document fills at least 90% of the target without exceeding it."""
        data = DocxBuilder(TARGET).build()

        assert 0.9 * TARGET <= len(data) <= TARGET

    def test_build_is_a_zip_container(self):
        """Encoded document starts with the ZIP signature."""
        data = DocxBuilder(TARGET).build()

        assert data.startswith(ZIP_SIGNATURE)

    def test_build_is_readable_by_python_docx(self):
        """Encoded document opens with a heading and filler paragraphs."""
        data = DocxBuilder(TARGET).build()

        document = Document(io.BytesIO(data))
        texts = [p.text for p in document.paragraphs]

        assert texts[0].startswith("Dummy document ")
        assert len(texts) > 1
        assert all(t.startswith("DOCX_") for t in texts[1:])

    def test_paragraphs_are_unique(self):
        """No two filler paragraphs repeat."""
        builder = DocxBuilder(TARGET)
        builder.build()

        texts = [p.text for p in builder.document.paragraphs[1:]]

        assert len(texts) == len(set(texts))

    def test_large_batches_are_split_into_paragraphs(self):
        """Batches larger than one paragraph use several paragraphs."""
        builder = DocxBuilder(100 * 1024 * 1024)

        assert builder.paragraphs_per_batch > 1
        assert builder.paragraph_chars <= MAX_PARAGRAPH_CHARS

    def test_small_target_returns_bare_container(self):
        """Targets below the empty document size add no filler."""
        builder = DocxBuilder(1000)

        data = builder.build()

        assert len(data) > 1000
        assert builder.stats.batches == 0
