"""
Role taxonomy for crawled brand images.

Roles decide how an image is used in the Brand Guide: logos are shown as
marks, brand imagery fills the gallery, and the excluded roles never display.
"""

from enum import Enum
from typing import Dict, Union


class ImageRole(Enum):
    """Semantic label assigned to a crawled image."""
    LOGO = "logo"                    # Primary brand logo (max 2 per brand)
    BRAND_IMAGE = "brand_image"      # Rich brand photos: lifestyle, product shots
    HERO = "hero"                    # Large hero/banner images
    TEAM = "team"                    # Team/staff photos
    PRODUCT = "product"              # Product/service images
    ICON = "icon"                    # Small UI icons and illustrations
    SOCIAL_ICON = "social_icon"      # Social media icons
    PLATFORM_LOGO = "platform_logo"  # "Powered by Squarespace" style badges
    PARTNER_LOGO = "partner_logo"    # Partner/vendor/association badges
    BACKGROUND = "background"        # Background textures/patterns
    OTHER = "other"                  # Unclassified images


class ImageCategory(Enum):
    """Storage grouping derived from the role."""
    LOGOS = "logos"
    IMAGES = "images"
    ICONS = "icons"


class SizeCategory(Enum):
    TINY = "tiny"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    HERO = "hero"


class SourceType(Enum):
    SVG = "svg"
    RASTER = "raster"
    UNKNOWN = "unknown"


class PageType(Enum):
    MAIN = "main"
    TEAM = "team"
    ABOUT = "about"
    OTHER = "other"


EXCLUDED_ROLES = frozenset({
    ImageRole.ICON,
    ImageRole.SOCIAL_ICON,
    ImageRole.PLATFORM_LOGO,
    ImageRole.PARTNER_LOGO,
})

LOGO_ROLES = frozenset({ImageRole.LOGO})

BRAND_IMAGE_ROLES = frozenset({
    ImageRole.BRAND_IMAGE,
    ImageRole.HERO,
    ImageRole.TEAM,
    ImageRole.PRODUCT,
    ImageRole.BACKGROUND,
    ImageRole.OTHER,
})

# Roles emitted by the previous generation of the site crawler
LEGACY_ROLE_MAP: Dict[str, ImageRole] = {
    "logo": ImageRole.LOGO,
    "hero": ImageRole.HERO,
    "photo": ImageRole.BRAND_IMAGE,
    "team": ImageRole.TEAM,
    "subject": ImageRole.PRODUCT,
    "social_icon": ImageRole.SOCIAL_ICON,
    "platform_logo": ImageRole.PLATFORM_LOGO,
    "partner_logo": ImageRole.PARTNER_LOGO,
    "ui_icon": ImageRole.ICON,
    "other": ImageRole.OTHER,
}


def role_to_category(role: ImageRole) -> ImageCategory:
    """Map a role to its storage category."""
    if role in LOGO_ROLES:
        return ImageCategory.LOGOS
    if role in EXCLUDED_ROLES:
        return ImageCategory.ICONS
    return ImageCategory.IMAGES


def should_display_in_brand_guide(role: ImageRole) -> bool:
    return role not in EXCLUDED_ROLES


def coerce_role(value: Union[ImageRole, str]) -> ImageRole:
    """
    Resolve a role from an enum member, a role name, or a legacy crawler role.

    Args:
        value: ImageRole, canonical role string ("brand_image") or legacy
            crawler role ("photo", "ui_icon")

    Returns:
        Matching ImageRole

    Raises:
        ValueError: If the name is not a known role
    """
    if isinstance(value, ImageRole):
        return value

    name = value.strip().lower()
    try:
        return ImageRole(name)
    except ValueError:
        pass

    if name in LEGACY_ROLE_MAP:
        return LEGACY_ROLE_MAP[name]

    raise ValueError(f"Unknown image role: {value!r}")
