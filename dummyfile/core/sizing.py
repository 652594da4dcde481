"""Exact-size normalization of encoded content.

Encoded documents rarely come out at the requested byte count. The
normalizer pads short content with trailing NUL bytes, which conforming
ZIP, PDF and JPEG readers ignore after the container trailer. Oversized
content is handled by a single, explicit OversizePolicy:

- KEEP_OVERSIZED returns the content unchanged. The file stays valid but
  is larger than requested.
- TRUNCATE cuts the content to the target length. The size is exact but
  the trailing structures (ZIP central directory, PDF xref table, JPEG
  EOI marker) are lost, so the result is usually not readable.
"""

import re
from dataclasses import dataclass
from enum import Enum

import structlog

from dummyfile.core.exceptions import InvalidTargetSizeError
from dummyfile.core.logging import get_logger

logger = get_logger(__name__)


class OversizePolicy(str, Enum):
    """What to do with encoded content larger than the target size."""

    KEEP_OVERSIZED = "keep-oversized"
    TRUNCATE = "truncate"


class SizeAction(str, Enum):
    """Action the normalizer applied to the encoded content."""

    UNCHANGED = "unchanged"
    PADDED = "padded"
    KEPT_OVERSIZED = "kept_oversized"
    TRUNCATED = "truncated"


@dataclass(frozen=True)
class SizedContent:
    """Normalized content together with what was done to it."""

    data: bytes
    target_size: int
    encoded_size: int
    action: SizeAction

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def exceeds_target(self) -> bool:
        return len(self.data) > self.target_size

    @property
    def padding(self) -> int:
        """Number of NUL bytes appended after the encoded content."""
        return max(0, len(self.data) - self.encoded_size)

    @property
    def warning(self) -> str | None:
        """Human readable warning when the exact-size contract was bent."""
        if self.action is SizeAction.KEPT_OVERSIZED:
            return (
                f"Content is {self.encoded_size} bytes, exceeding target of "
                f"{self.target_size} bytes; kept oversized to keep the file valid"
            )
        if self.action is SizeAction.TRUNCATED:
            return (
                f"Content truncated from {self.encoded_size} to "
                f"{self.target_size} bytes; the file is likely corrupt"
            )
        return None


def validate_target_size(target_size: int) -> int:
    """Return target_size if it is a usable byte count.

    Raises:
        InvalidTargetSizeError: If the value is not a non-negative integer
    """
    if isinstance(target_size, bool) or not isinstance(target_size, int):
        raise InvalidTargetSizeError(
            f"Target size must be an integer, got {target_size!r}", target_size
        )
    if target_size < 0:
        raise InvalidTargetSizeError(
            f"Target size must be >= 0, got {target_size}", target_size
        )
    return target_size


def make_exact_size(
    data: bytes,
    target_size: int,
    policy: OversizePolicy = OversizePolicy.KEEP_OVERSIZED,
    log: structlog.stdlib.BoundLogger | None = None,
) -> SizedContent:
    """
    Pad or (depending on policy) truncate data to target_size bytes.

    Bytes [0, min(len(data), target_size)) are always preserved verbatim.

    Args:
        data: Encoded content
        target_size: Requested length in bytes
        policy: Handling of content longer than target_size
        log: Logger for size warnings (defaults to the module logger)

    Returns:
        SizedContent describing the normalized bytes

    Raises:
        InvalidTargetSizeError: If target_size is negative
    """
    validate_target_size(target_size)
    log = log or logger
    encoded_size = len(data)

    if encoded_size == target_size:
        return SizedContent(bytes(data), target_size, encoded_size, SizeAction.UNCHANGED)

    if encoded_size < target_size:
        # bytes(n) is zero-filled
        padded = bytes(data) + bytes(target_size - encoded_size)
        log.debug(
            "content_padded",
            encoded_size=encoded_size,
            target_size=target_size,
            padding=target_size - encoded_size,
        )
        return SizedContent(padded, target_size, encoded_size, SizeAction.PADDED)

    if policy is OversizePolicy.TRUNCATE:
        result = SizedContent(
            bytes(data[:target_size]), target_size, encoded_size, SizeAction.TRUNCATED
        )
        log.warning(
            "content_truncated",
            encoded_size=encoded_size,
            target_size=target_size,
            message=result.warning,
        )
        return result

    result = SizedContent(bytes(data), target_size, encoded_size, SizeAction.KEPT_OVERSIZED)
    log.warning(
        "content_oversized_kept",
        encoded_size=encoded_size,
        target_size=target_size,
        message=result.warning,
    )
    return result


# Size units are binary multiples: "1MB" == "1MiB" == 1048576 bytes
_SIZE_UNITS = {
    "": 1,
    "b": 1,
    "k": 1024,
    "kb": 1024,
    "kib": 1024,
    "m": 1024**2,
    "mb": 1024**2,
    "mib": 1024**2,
    "g": 1024**3,
    "gb": 1024**3,
    "gib": 1024**3,
}

_SIZE_PATTERN = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*([a-zA-Z]*)\s*$")


def parse_size(value: str | int) -> int:
    """
    Parse a human size string such as ``"10MiB"`` or ``"1.5 GB"`` into bytes.

    Args:
        value: Plain byte count or number with a unit suffix

    Returns:
        Size in bytes

    Raises:
        InvalidTargetSizeError: If the value cannot be parsed
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return validate_target_size(value)

    match = _SIZE_PATTERN.match(str(value))
    if not match:
        raise InvalidTargetSizeError(f"Cannot parse size: {value!r}", value)

    number, unit = match.groups()
    multiplier = _SIZE_UNITS.get(unit.lower())
    if multiplier is None:
        raise InvalidTargetSizeError(f"Unknown size unit in {value!r}", value)

    return int(float(number) * multiplier)
