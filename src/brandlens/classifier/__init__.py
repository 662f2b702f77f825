"""
BRANDLENS image classifier

Heuristic, multi-signal classification of crawled website images into
logos, brand imagery and excluded icons/badges.
"""

from .descriptor import ClassificationSignals, DescriptorError, ImageDescriptor
from .model import (
    ClassificationResult,
    DebugInfo,
    ImageClassifier,
    classify_image,
    classify_images,
    get_classification_summary,
    log_classification,
)
from .signals import (
    calculate_brand_match_score,
    categorize_size_category,
    extract_filename,
    matches_patterns,
)
from .taxonomy import (
    ImageCategory,
    ImageRole,
    PageType,
    SizeCategory,
    SourceType,
    coerce_role,
    role_to_category,
    should_display_in_brand_guide,
)

__all__ = [
    "ClassificationResult",
    "ClassificationSignals",
    "DebugInfo",
    "DescriptorError",
    "ImageCategory",
    "ImageClassifier",
    "ImageDescriptor",
    "ImageRole",
    "PageType",
    "SizeCategory",
    "SourceType",
    "calculate_brand_match_score",
    "categorize_size_category",
    "classify_image",
    "classify_images",
    "coerce_role",
    "extract_filename",
    "get_classification_summary",
    "log_classification",
    "matches_patterns",
    "role_to_category",
    "should_display_in_brand_guide",
]
