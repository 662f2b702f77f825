"""
Signal extraction for crawled images.

Turns a raw ImageDescriptor into normalized, reusable facts: filename, size
bucket, brand-name match and pattern matches. Nothing here raises on sparse
or malformed input.
"""

import re
from typing import List, Optional, Sequence
from urllib.parse import urlsplit

from .descriptor import ClassificationSignals, ImageDescriptor
from .taxonomy import SizeCategory
from . import thresholds

_WHITESPACE = re.compile(r"\s+")


def extract_filename(url: str) -> str:
    """
    Return the last path segment of an absolute URL, lower-cased.

    Relative URLs and anything that fails to parse yield an empty string.
    """
    try:
        parts = urlsplit(url)
    except (TypeError, ValueError, AttributeError):
        return ""
    if not parts.scheme:
        return ""
    return parts.path.split("/")[-1].lower()


def categorize_size_category(width: Optional[int], height: Optional[int]) -> SizeCategory:
    """Bucket an image by its dimensions; unknown size counts as medium."""
    if not width or not height:
        return SizeCategory.MEDIUM

    area = width * height
    max_dim = max(width, height)

    if area < thresholds.MAX_ICON_AREA:
        return SizeCategory.TINY
    if max_dim < thresholds.MIN_BRAND_IMAGE_SIZE:
        return SizeCategory.SMALL
    if area < thresholds.MIN_HERO_AREA:
        return SizeCategory.MEDIUM
    if max_dim >= thresholds.MIN_HERO_SIZE:
        return SizeCategory.HERO
    return SizeCategory.LARGE


def _brand_name_forms(brand_name: str) -> List[str]:
    lower = brand_name.lower()
    return [lower, _WHITESPACE.sub("", lower), _WHITESPACE.sub("-", lower)]


def calculate_brand_match_score(descriptor: ImageDescriptor, brand_name: Optional[str]) -> int:
    """
    Score how strongly the image metadata references the brand (0-2).

    One point for the brand name in the alt text, one for the brand name in
    the filename or URL. Each check accepts the raw, no-space and hyphenated
    forms of the name.
    """
    if not brand_name or not brand_name.strip():
        return 0

    forms = _brand_name_forms(brand_name)
    alt_lower = (descriptor.alt or "").lower()
    filename = extract_filename(descriptor.url)
    url_lower = descriptor.url.lower()

    score = 0
    if any(form in alt_lower for form in forms):
        score += 1
    if any(form in filename or form in url_lower for form in forms):
        score += 1
    return score


def matches_patterns(
    patterns: Sequence[str],
    url: Optional[str] = None,
    filename: Optional[str] = None,
    alt: Optional[str] = None,
) -> List[str]:
    """
    Return the patterns found in any of the given fields.

    Matching is a case-insensitive substring test. Fields left as None are
    not searched, so callers choose which of url/filename/alt a pattern list
    applies to.
    """
    haystacks = [value.lower() for value in (url, filename, alt) if value]
    if not haystacks:
        return []
    return [pattern for pattern in patterns if any(pattern in text for text in haystacks)]


def build_signals(descriptor: ImageDescriptor) -> ClassificationSignals:
    """Compute the signal projection for a descriptor."""
    width, height = descriptor.width, descriptor.height
    known = bool(width) and bool(height)

    return ClassificationSignals(
        url=descriptor.url,
        filename=extract_filename(descriptor.url),
        width=width,
        height=height,
        area=width * height if known else None,
        aspect_ratio=width / height if known else None,
        alt=descriptor.alt,
        brand_match_score=calculate_brand_match_score(descriptor, descriptor.brand_name),
        in_header_or_nav=descriptor.in_header_or_nav,
        in_footer=descriptor.in_footer,
        in_hero_or_above_fold=descriptor.in_hero_or_above_fold,
        in_affiliate_or_partner_section=descriptor.in_affiliate_or_partner_section,
        offset_top=descriptor.offset_top,
        page_type=descriptor.page_type,
        source_type=descriptor.source_type,
        parent_classes=tuple(descriptor.parent_classes),
        parent_ids=tuple(descriptor.parent_ids),
        color_count=descriptor.color_count,
        is_monochrome=descriptor.is_monochrome,
        has_solid_background=descriptor.has_solid_background,
        phash=descriptor.phash,
    )
