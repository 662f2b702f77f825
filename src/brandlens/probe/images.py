"""
Descriptor probing for images downloaded during a crawl.

Reads an image from disk and fills in what the page markup could not tell
us: pixel dimensions, source type, color statistics and a perceptual hash.
"""

from pathlib import Path
from typing import List, Optional, Sequence

from PIL import Image, UnidentifiedImageError

from ..classifier.descriptor import ImageDescriptor
from ..classifier.taxonomy import PageType, SourceType
from ..dedup.hash import HashComputationError, compute_phash
from ..logging import get_logger
from .colors import analyze_colors

logger = get_logger(__name__)


class ProbeError(Exception):
    """Raised when an image file cannot be probed."""


def probe_image(
    path: Path,
    url: Optional[str] = None,
    alt: Optional[str] = None,
    brand_name: Optional[str] = None,
    page_type: Optional[PageType] = None,
) -> ImageDescriptor:
    """
    Build an ImageDescriptor from a local image file.

    SVG files are not rasterized; their dimensions stay unknown.

    Args:
        path: Image file on disk
        url: Original URL of the image; defaults to the file URI
        alt: Alt text captured by the crawler
        brand_name: Brand being crawled
        page_type: Type of page the image came from

    Returns:
        ImageDescriptor with dimensions and pixel signals filled in

    Raises:
        ProbeError: If the file is missing or not a readable image
    """
    path = Path(path)
    if not path.is_file():
        raise ProbeError(f"Image file not found: {path}")

    url = url or path.resolve().as_uri()

    if path.suffix.lower() == ".svg":
        logger.debug(f"Skipping rasterization for SVG {path}")
        return ImageDescriptor(
            url=url, alt=alt, source_type=SourceType.SVG,
            brand_name=brand_name, page_type=page_type,
        )

    try:
        with Image.open(path) as img:
            img.load()
            width, height = img.size
            stats = analyze_colors(img)
            try:
                phash = compute_phash(img)
            except HashComputationError as exc:
                logger.warning(f"No perceptual hash for {path}: {exc}")
                phash = None
    except (UnidentifiedImageError, OSError) as exc:
        raise ProbeError(f"Failed to read image {path}: {exc}") from exc

    logger.debug(f"Probed {path}: {width}x{height}, {stats.color_count} colors")
    return ImageDescriptor(
        url=url,
        alt=alt,
        width=width,
        height=height,
        source_type=SourceType.RASTER,
        brand_name=brand_name,
        page_type=page_type,
        color_count=stats.color_count,
        is_monochrome=stats.is_monochrome,
        has_solid_background=stats.has_solid_background,
        phash=phash,
    )


def probe_images(paths: Sequence[Path], **context) -> List[ImageDescriptor]:
    """Probe several files, skipping the ones that cannot be read."""
    descriptors = []
    for path in paths:
        try:
            descriptors.append(probe_image(path, **context))
        except ProbeError as exc:
            logger.warning(str(exc))
    return descriptors
