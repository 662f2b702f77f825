"""BRANDLENS – classify images crawled from a brand's website for the Brand Guide."""

from .classifier import (
    ClassificationResult,
    ImageClassifier,
    ImageDescriptor,
    ImageRole,
    classify_image,
    classify_images,
)
from .selection import (
    BrandGuideSelection,
    apply_role_override,
    build_brand_guide,
    separate_logos_and_brand_images,
)

__all__ = [
    "BrandGuideSelection",
    "ClassificationResult",
    "ImageClassifier",
    "ImageDescriptor",
    "ImageRole",
    "apply_role_override",
    "build_brand_guide",
    "classify_image",
    "classify_images",
    "separate_logos_and_brand_images",
]
