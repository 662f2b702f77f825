"""Color analysis for downloaded brand images."""

from dataclasses import dataclass

import numpy as np
from PIL import Image

from ..classifier.thresholds import MONOCHROME_COLOR_THRESHOLD
from ..logging import get_logger

logger = get_logger(__name__)

# Images are downsampled before counting colors
ANALYSIS_SIZE = (128, 128)


@dataclass(frozen=True)
class ColorStats:
    color_count: int             # Distinct opaque colors
    is_monochrome: bool          # At most MONOCHROME_COLOR_THRESHOLD colors
    has_solid_background: bool   # All four corners share one opaque color


def analyze_colors(image: Image.Image) -> ColorStats:
    """
    Count the distinct opaque colors of an image and inspect its corners.

    Fully transparent pixels are ignored, so a single-color glyph on a
    transparent canvas counts as one color.
    """
    rgba = image.convert('RGBA')
    rgba.thumbnail(ANALYSIS_SIZE)
    pixels = np.asarray(rgba, dtype=np.uint8)

    opaque = pixels[pixels[..., 3] > 0]
    if opaque.size:
        packed = (
            opaque[:, 0].astype(np.uint32) << 16
            | opaque[:, 1].astype(np.uint32) << 8
            | opaque[:, 2].astype(np.uint32)
        )
        color_count = int(np.unique(packed).size)
    else:
        color_count = 0

    corners = np.stack([pixels[0, 0], pixels[0, -1], pixels[-1, 0], pixels[-1, -1]])
    has_solid_background = bool(corners[0, 3] > 0 and (corners == corners[0]).all())

    stats = ColorStats(
        color_count=color_count,
        is_monochrome=color_count <= MONOCHROME_COLOR_THRESHOLD,
        has_solid_background=has_solid_background,
    )
    logger.debug(f"Color stats: {stats}")
    return stats
