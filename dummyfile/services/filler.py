"""Filler content synthesis and the size-fitting strategy.

Every format builder grows its document in batches of unique filler
content and periodically re-encodes it to measure the real size. The
strategy stops once a probe shows the encoding has reached the safety
fraction of the target, leaving the remainder to be padded.

Probing is adaptive: after each measurement the average growth per batch
is used to schedule the next probe at the midpoint between the safety
fraction and the target. The interval is capped at a multiple of the
batches added so far, so the final jump relies on an estimate averaged
over a sizeable share of the content. The number of full encodes grows
with the logarithm of the target size.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from uuid import uuid4

from dummyfile.core.logging import get_logger

logger = get_logger(__name__)

# Share of the target one batch of raw filler text may take up
BATCH_DIVISOR = 100


def unique_token(length: int = 8) -> str:
    """Return a random hex token (a UUID4 prefix)."""
    return uuid4().hex[:length]


def filler_text(label: str, index: int, length: int) -> str:
    """
    Build exactly ``length`` characters of unique filler text.

    Each unit carries a full UUID4 so content differs between runs with
    identical parameters and does not compress away.

    Args:
        label: Format label, e.g. "DOCX"
        index: Batch or element index embedded in every unit
        length: Number of characters to return
    """
    parts: list[str] = []
    size = 0
    item = 0
    while size < length:
        part = f"{label}_{index}_{item}_{uuid4().hex}_FillerText "
        parts.append(part)
        size += len(part)
        item += 1
    return "".join(parts)[:length]


def batch_chars(target_size: int, minimum: int, maximum: int) -> int:
    """Raw filler characters per batch for a target size, clamped."""
    return max(minimum, min(maximum, target_size // BATCH_DIVISOR))


@dataclass
class FillPlan:
    """Tunable parameters of the size-fitting loop."""

    safety_fraction: float = 0.9
    initial_batches: int = 1
    # Next probe interval is at most this multiple of the batches added so far
    max_growth_ratio: int = 3
    max_batches: int = 100_000


@dataclass
class FillStats:
    """Outcome of a size-fitting run."""

    batches: int = 0
    probes: int = 0
    estimated_size: int = 0


def fill_to_size(
    add_batch: Callable[[int], None],
    measure: Callable[[], int],
    target_size: int,
    plan: FillPlan,
) -> FillStats:
    """
    Add content batches until a probe reaches the safety fraction.

    Args:
        add_batch: Appends one batch; receives the zero-based batch index
        measure: Encodes the current content and returns its size
        target_size: Requested size in bytes
        plan: Safety fraction, first probe interval and batch limit

    Returns:
        FillStats with the number of batches, probes and last measured size
    """
    limit = int(target_size * plan.safety_fraction)
    aim = limit + (target_size - limit) // 2

    stats = FillStats(estimated_size=measure(), probes=1)
    baseline = stats.estimated_size
    pending = plan.initial_batches

    while stats.estimated_size < limit and stats.batches < plan.max_batches:
        pending = max(1, min(pending, plan.max_batches - stats.batches))
        for _ in range(pending):
            add_batch(stats.batches)
            stats.batches += 1

        stats.estimated_size = measure()
        stats.probes += 1

        growth = (stats.estimated_size - baseline) / stats.batches
        if growth <= 0:
            pending = plan.initial_batches
            continue
        pending = min(
            int((aim - stats.estimated_size) / growth),
            plan.max_growth_ratio * stats.batches,
        )

    return stats


class FormatBuilder(ABC):
    """Base class for per-format content builders.

    Subclasses add one batch of filler per ``add_batch`` call and
    serialize the whole document in ``encode``. Encoder errors from the
    underlying libraries propagate unchanged.
    """

    label: str = "DUMMY"

    def __init__(self, target_size: int, plan: FillPlan | None = None) -> None:
        self.target_size = target_size
        self.plan = plan or FillPlan()
        self.stats = FillStats()
        self._encoded: bytes | None = None

    @abstractmethod
    def add_batch(self, index: int) -> None:
        """Append one batch of unique filler content."""
        pass

    @abstractmethod
    def encode(self) -> bytes:
        """Serialize the current content."""
        pass

    def measure(self) -> int:
        """Size of the current content once encoded."""
        self._encoded = self.encode()
        return len(self._encoded)

    def build(self) -> bytes:
        """Fill the document close to the target size and encode it."""
        self.stats = fill_to_size(
            self.add_batch, self.measure, self.target_size, self.plan
        )
        logger.debug(
            "content_filled",
            format=self.label,
            target_size=self.target_size,
            batches=self.stats.batches,
            probes=self.stats.probes,
            estimated_size=self.stats.estimated_size,
        )
        # The loop always ends on a probe of the final content
        return self._encoded if self._encoded is not None else self.encode()
