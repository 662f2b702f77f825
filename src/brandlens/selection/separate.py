"""
Brand Guide batch separation.

Partitions a priority-sorted list of classified images into the buckets the
Brand Guide renders: a capped set of logos, a capped gallery of brand
imagery, and the excluded icons and badges.
"""

from dataclasses import dataclass, field
from typing import List, Sequence

from ..classifier.model import ClassificationResult
from ..classifier.taxonomy import EXCLUDED_ROLES, ImageRole
from ..logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class BrandGuideSelection:
    """Buckets produced by ``separate_logos_and_brand_images``."""
    logos: List[ClassificationResult] = field(default_factory=list)
    brand_images: List[ClassificationResult] = field(default_factory=list)
    icons: List[ClassificationResult] = field(default_factory=list)
    excluded: List[ClassificationResult] = field(default_factory=list)
    dropped: int = 0    # Brand-image candidates beyond the cap

    @property
    def brand_image_candidates(self) -> int:
        """Total brand imagery found, for "showing N of M" displays."""
        return len(self.brand_images) + self.dropped


def separate_logos_and_brand_images(
    classified: Sequence[ClassificationResult],
    max_logos: int = 2,
    max_brand_images: int = 15,
) -> BrandGuideSelection:
    """
    Separate classified images into logos and brand images.

    The input order is kept; callers sort by display priority beforehand.
    Logos beyond ``max_logos`` move into the brand images rather than being
    dropped; they bypass ``max_brand_images`` but still take up room for the
    images after them. Other display roles fill the brand images up to the
    cap and the rest are dropped.

    Args:
        classified: Classification results, highest priority first
        max_logos: Maximum number of logos
        max_brand_images: Maximum number of non-logo brand images

    Returns:
        BrandGuideSelection with logos, brand_images, icons and excluded
    """
    logos: List[ClassificationResult] = []
    brand_images: List[ClassificationResult] = []
    icons: List[ClassificationResult] = []
    excluded: List[ClassificationResult] = []
    dropped = 0

    for image in classified:
        if image.role is ImageRole.LOGO:
            if len(logos) < max_logos:
                logos.append(image)
            else:
                brand_images.append(image)
        elif image.role in EXCLUDED_ROLES:
            if image.role is ImageRole.ICON:
                icons.append(image)
            excluded.append(image)
        elif len(brand_images) < max_brand_images:
            brand_images.append(image)
        else:
            dropped += 1

    logger.debug(
        f"Separated {len(classified)} images: {len(logos)} logos, {len(brand_images)} brand images, "
        f"{len(excluded)} excluded, {dropped} over cap"
    )
    return BrandGuideSelection(
        logos=logos,
        brand_images=brand_images,
        icons=icons,
        excluded=excluded,
        dropped=dropped,
    )
