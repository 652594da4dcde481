"""Tests for filler synthesis and the size-fitting loop."""

import pytest

from dummyfile.services.filler import (
    FillPlan,
    FormatBuilder,
    batch_chars,
    fill_to_size,
    filler_text,
    unique_token,
)


class LinearContent:
    """Fake document whose encoded size grows by a fixed step per batch."""

    def __init__(self, baseline: int, step: int) -> None:
        self.baseline = baseline
        self.step = step
        self.batches: list[int] = []
        self.measurements = 0

    def add_batch(self, index: int) -> None:
        self.batches.append(index)

    def measure(self) -> int:
        self.measurements += 1
        return self.baseline + self.step * len(self.batches)


class FakeBuilder(FormatBuilder):
    """Builder encoding one byte per batch on top of a fixed header."""

    label = "FAKE"

    def __init__(self, target_size: int, plan: FillPlan | None = None) -> None:
        super().__init__(target_size, plan)
        self.content = bytearray(b"HEADER")
        self.encodes = 0

    def add_batch(self, index: int) -> None:
        self.content += b"x" * 10

    def encode(self) -> bytes:
        self.encodes += 1
        return bytes(self.content)


class TestUniqueToken:
    """Tests for unique_token."""

    def test_default_length(self):
        """Tokens are eight hex characters by default."""
        token = unique_token()

        assert len(token) == 8
        int(token, 16)

    def test_tokens_differ(self):
        """Consecutive tokens are different."""
        assert unique_token(16) != unique_token(16)


class TestFillerText:
    """Tests for filler_text."""

    @pytest.mark.parametrize("length", [0, 1, 49, 50, 1000, 20_000])
    def test_exact_length(self, length: int):
        """Filler text has exactly the requested length."""
        assert len(filler_text("DOCX", 3, length)) == length

    def test_contains_label_and_index(self):
        """Units carry the label and index."""
        text = filler_text("XLSX", 7, 200)

        assert text.startswith("XLSX_7_0_")

    def test_text_is_unique_per_call(self):
        """Identical parameters produce different text."""
        assert filler_text("PDF", 1, 500) != filler_text("PDF", 1, 500)


class TestBatchChars:
    """Tests for batch_chars."""

    def test_scales_with_target(self):
        """Batches are a hundredth of the target."""
        assert batch_chars(1_000_000, minimum=10, maximum=100_000) == 10_000

    def test_clamps_to_minimum(self):
        """Small targets use the minimum batch."""
        assert batch_chars(100, minimum=200, maximum=100_000) == 200

    def test_clamps_to_maximum(self):
        """Huge targets use the maximum batch."""
        assert batch_chars(10**12, minimum=200, maximum=100_000) == 100_000


class TestFillToSize:
    """Tests for the adaptive fill loop."""

    def test_stops_between_safety_fraction_and_target(self):
        """The loop stops once a probe reaches the safety fraction."""
        content = LinearContent(baseline=100, step=10)

        stats = fill_to_size(
            content.add_batch, content.measure, 1000, FillPlan(safety_fraction=0.9)
        )

        assert 900 <= stats.estimated_size <= 1000
        assert stats.estimated_size == content.measure()

    def test_probe_schedule(self):
        """Probe intervals grow by the growth ratio and finish at the aim."""
        content = LinearContent(baseline=100, step=10)

        stats = fill_to_size(
            content.add_batch, content.measure, 1000, FillPlan(safety_fraction=0.9)
        )

        # 1, 3, 12, 48 batches, then 21 more to reach the 950 byte aim
        assert stats.batches == 85
        assert stats.probes == 6
        assert stats.estimated_size == 950

    def test_batch_indexes_are_sequential(self):
        """add_batch receives consecutive zero-based indexes."""
        content = LinearContent(baseline=0, step=5)

        stats = fill_to_size(content.add_batch, content.measure, 500, FillPlan())

        assert content.batches == list(range(stats.batches))

    def test_no_batches_when_baseline_reaches_limit(self):
        """A container already at the safety fraction gets no filler."""
        content = LinearContent(baseline=950, step=10)

        stats = fill_to_size(content.add_batch, content.measure, 1000, FillPlan())

        assert stats.batches == 0
        assert stats.probes == 1
        assert stats.estimated_size == 950

    def test_oversized_baseline_is_reported(self):
        """A container larger than the target is measured, not grown."""
        content = LinearContent(baseline=5000, step=10)

        stats = fill_to_size(content.add_batch, content.measure, 1000, FillPlan())

        assert stats.batches == 0
        assert stats.estimated_size == 5000

    def test_max_batches_guard(self):
        """Content that does not grow stops at max_batches."""
        content = LinearContent(baseline=100, step=0)

        stats = fill_to_size(
            content.add_batch, content.measure, 1000, FillPlan(max_batches=5)
        )

        assert stats.batches == 5
        assert stats.estimated_size == 100

    def test_zero_target(self):
        """A zero target adds nothing."""
        content = LinearContent(baseline=0, step=10)

        stats = fill_to_size(content.add_batch, content.measure, 0, FillPlan())

        assert stats.batches == 0


class TestFormatBuilder:
    """Tests for the FormatBuilder base class."""

    def test_build_returns_final_encoding(self):
        """build returns the encoding of the filled content."""
        builder = FakeBuilder(1000)

        data = builder.build()

        assert data == bytes(builder.content)
        assert 900 <= len(data) <= 1000

    def test_build_reuses_last_probe(self):
        """The last probe's encoding is returned without encoding again."""
        builder = FakeBuilder(1000)

        builder.build()

        assert builder.encodes == builder.stats.probes

    def test_build_records_stats(self):
        """Fill statistics are kept on the builder."""
        builder = FakeBuilder(1000)

        builder.build()

        assert builder.stats.batches > 0
        assert builder.stats.estimated_size == len(builder.content)
