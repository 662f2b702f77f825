"""Brand Guide selection: separation, overrides and the end-to-end pipeline."""

from .separate import BrandGuideSelection, separate_logos_and_brand_images
from .overrides import apply_role_override
from .pipeline import build_brand_guide

__all__ = [
    "BrandGuideSelection",
    "apply_role_override",
    "build_brand_guide",
    "separate_logos_and_brand_images",
]
