"""JPG content builder using Pillow.

A solid white square with a blue text watermark. Its side comes from
``sqrt(target / BYTES_PER_PIXEL_ESTIMATE)``; flat images compress far
below that estimate, so the encoded file lands well under the target and
is padded. Very small targets get a 1x1 pixel image.
"""

import io
import math

from PIL import Image, ImageDraw

from dummyfile.core.logging import get_logger
from dummyfile.services.filler import FillStats, unique_token

logger = get_logger(__name__)

BYTES_PER_PIXEL_ESTIMATE = 3
MIN_DIMENSION = 64
MAX_DIMENSION = 4096
# Below this target only the 1x1 fallback is attempted
MIN_RENDER_TARGET = 4096
DEFAULT_QUALITY = 50


class JpgBuilder:
    """Watermarked JPEG sized from the target byte count.

    Images are not grown in batches like documents; the side length is
    derived from the target and halved until the encoding fits.
    """

    label = "JPG"

    def __init__(self, target_size: int, quality: int = DEFAULT_QUALITY) -> None:
        self.target_size = target_size
        self.quality = quality
        self.stats = FillStats()
        self.token = unique_token()
        self.dimension = self.initial_dimension(target_size)

    @staticmethod
    def initial_dimension(target_size: int) -> int:
        """Side length in pixels for a target size (1 for tiny targets)."""
        if target_size < MIN_RENDER_TARGET:
            return 1
        dimension = int(math.sqrt(target_size / BYTES_PER_PIXEL_ESTIMATE))
        return max(MIN_DIMENSION, min(dimension, MAX_DIMENSION))

    def render(self, dimension: int) -> Image.Image:
        image = Image.new("RGB", (dimension, dimension), "white")
        if dimension >= MIN_DIMENSION:
            draw = ImageDraw.Draw(image)
            draw.text((10, 10), f"Test Image {self.token}", fill="blue")
        return image

    def encode(self) -> bytes:
        buffer = io.BytesIO()
        self.render(self.dimension).save(
            buffer,
            format="JPEG",
            quality=self.quality,
            optimize=True,
            comment=f"dummyfile {self.token}",
        )
        return buffer.getvalue()

    def build(self) -> bytes:
        """Encode, halving the side until the image fits the target."""
        data = self.encode()
        self.stats.probes = 1
        while len(data) > self.target_size and self.dimension > MIN_DIMENSION:
            self.dimension = max(MIN_DIMENSION, self.dimension // 2)
            data = self.encode()
            self.stats.probes += 1

        if len(data) > self.target_size and self.dimension > 1:
            self.dimension = 1
            data = self.encode()
            self.stats.probes += 1

        self.stats.estimated_size = len(data)
        logger.debug(
            "content_filled",
            format=self.label,
            target_size=self.target_size,
            dimension=self.dimension,
            probes=self.stats.probes,
            estimated_size=self.stats.estimated_size,
        )
        return data
