"""
Heuristic detectors for crawled brand images.

Each detector looks at one family of signals (names, size, placement) and
reports whether it fires along with the reasons it found. Detectors never
decide the final role on their own; the ordered rule chain in ``rules``
does that.
"""

from dataclasses import dataclass
from typing import List, Tuple

from .descriptor import ClassificationSignals
from .signals import categorize_size_category, matches_patterns
from .taxonomy import PageType, SizeCategory, SourceType
from . import thresholds


@dataclass(frozen=True)
class DetectorCheck:
    """Outcome of a detector: whether it fired and why."""
    matched: bool
    reasons: Tuple[str, ...] = ()
    confidence: float = 0.0


def social_icon_matches(signals: ClassificationSignals) -> List[str]:
    """Social platform names found in url, filename or alt."""
    return matches_patterns(
        thresholds.SOCIAL_PLATFORM_PATTERNS,
        url=signals.url, filename=signals.filename, alt=signals.alt,
    )


def detect_social_icon(signals: ClassificationSignals) -> DetectorCheck:
    matches = social_icon_matches(signals)
    return DetectorCheck(
        matched=bool(matches),
        reasons=tuple(f"social:{pattern}" for pattern in matches[:1]),
    )


def detect_platform_logo(signals: ClassificationSignals) -> DetectorCheck:
    """
    Detect site-builder badges such as "Powered by Squarespace".

    Requires both a vendor name and a logo-like token. Large images are never
    badges: a 1920px photo served from a vendor CDN is brand content.
    """
    vendor_matches = matches_patterns(
        thresholds.PLATFORM_VENDOR_PATTERNS,
        url=signals.url, filename=signals.filename, alt=signals.alt,
    )
    if not vendor_matches:
        return DetectorCheck(matched=False)

    logoish_matches = matches_patterns(
        thresholds.LOGOISH_PATTERNS,
        url=signals.url, filename=signals.filename, alt=signals.alt,
    )
    if not logoish_matches:
        return DetectorCheck(matched=False)

    is_large = signals.has_dimensions() and (
        signals.width > thresholds.MAX_PLATFORM_BADGE_SIZE
        or signals.height > thresholds.MAX_PLATFORM_BADGE_SIZE
    )
    if is_large:
        return DetectorCheck(matched=False, reasons=("large_vendor_image",))

    return DetectorCheck(
        matched=True,
        reasons=(f"vendor:{vendor_matches[0]}", f"logoish:{logoish_matches[0]}"),
    )


def detect_partner_logo(signals: ClassificationSignals) -> DetectorCheck:
    """Detect partner, sponsor and association badges."""
    # Explicit section placement wins regardless of size
    if signals.in_affiliate_or_partner_section:
        return DetectorCheck(matched=True, reasons=("partner_section",))

    matches = matches_patterns(
        thresholds.PARTNER_SECTION_PATTERNS,
        url=signals.url, filename=signals.filename, alt=signals.alt,
    )
    if not matches:
        return DetectorCheck(matched=False)

    is_small = signals.has_dimensions() and signals.max_dimension < thresholds.MAX_PARTNER_BADGE_SIZE
    if not is_small:
        return DetectorCheck(matched=False)

    return DetectorCheck(matched=True, reasons=(f"partner:{matches[0]}",))


def detect_icon(signals: ClassificationSignals) -> DetectorCheck:
    """
    Detect generic UI icons.

    Fires on any of: tiny area, an icon-pack path in the URL, a generic icon
    name on a non-large image, or a small square without a "logo" token.
    """
    reasons: List[str] = []
    size_category = categorize_size_category(signals.width, signals.height)

    if size_category is SizeCategory.TINY:
        reasons.append("tiny_size")

    icon_pack_matches = matches_patterns(thresholds.ICON_PACK_PATTERNS, url=signals.url)
    if icon_pack_matches:
        reasons.append(f"icon_path:{icon_pack_matches[0]}")

    generic_matches = matches_patterns(
        thresholds.GENERIC_ICON_PATTERNS, filename=signals.filename, alt=signals.alt,
    )
    if generic_matches and size_category not in (SizeCategory.LARGE, SizeCategory.HERO):
        reasons.append(f"icon_pattern:{generic_matches[0]}")

    if (
        signals.has_dimensions()
        and signals.width == signals.height
        and signals.width < thresholds.MAX_SMALL_SQUARE_SIZE
    ):
        alt_lower = (signals.alt or "").lower()
        if "logo" not in signals.filename and "logo" not in alt_lower:
            reasons.append("small_square")

    return DetectorCheck(matched=bool(reasons), reasons=tuple(reasons))


def is_oversized_for_logo(signals: ClassificationSignals) -> bool:
    if not signals.has_dimensions():
        return False
    return (
        signals.max_dimension > thresholds.MAX_LOGO_SIZE
        or signals.area > thresholds.MAX_LOGO_AREA
    )


def detect_logo(signals: ClassificationSignals) -> DetectorCheck:
    """
    Score logo evidence additively.

    Confidence is the rounded sum of the weights in ``thresholds``, clamped
    to [0, 1]. The image counts as a logo at LOGO_MIN_CONFIDENCE or above.
    """
    reasons: List[str] = []
    confidence = 0.0
    alt_lower = (signals.alt or "").lower()
    url_lower = signals.url.lower()

    if "logo" in signals.filename:
        reasons.append("filename_logo")
        confidence += thresholds.LOGO_WEIGHT_FILENAME
    if "logo" in alt_lower:
        reasons.append("alt_logo")
        confidence += thresholds.LOGO_WEIGHT_ALT
    if "/logo" in url_lower:
        reasons.append("path_logo")
        confidence += thresholds.LOGO_WEIGHT_PATH

    if signals.brand_match_score >= 1:
        reasons.append("brand_match")
        confidence += thresholds.LOGO_WEIGHT_BRAND_MATCH * signals.brand_match_score

    if signals.in_header_or_nav:
        reasons.append("in_header_nav")
        confidence += thresholds.LOGO_WEIGHT_HEADER

    if signals.has_dimensions():
        max_dim = signals.max_dimension
        if thresholds.MIN_LOGO_SIZE <= max_dim <= thresholds.MAX_LOGO_SIZE:
            reasons.append("logo_size_range")
            confidence += thresholds.LOGO_WEIGHT_SIZE_RANGE
        if is_oversized_for_logo(signals):
            reasons.append("oversized")
            confidence -= thresholds.LOGO_PENALTY_OVERSIZED

    keyword_matches = matches_patterns(
        thresholds.LOGO_KEYWORD_PATTERNS, filename=signals.filename, alt=signals.alt,
    )
    if keyword_matches:
        reasons.append(f"keyword:{keyword_matches[0]}")
        confidence += thresholds.LOGO_WEIGHT_KEYWORD

    if signals.source_type is SourceType.SVG:
        reasons.append("svg_source")
        confidence += thresholds.LOGO_WEIGHT_SVG

    confidence = min(max(round(confidence, thresholds.CONFIDENCE_PRECISION), 0.0), 1.0)
    return DetectorCheck(
        matched=confidence >= thresholds.LOGO_MIN_CONFIDENCE,
        reasons=tuple(reasons),
        confidence=confidence,
    )


def is_likely_hero(signals: ClassificationSignals) -> bool:
    """Large, wide-banner or explicitly above-the-fold images."""
    if not signals.has_dimensions():
        return False
    if signals.area >= thresholds.MIN_HERO_AREA:
        return True
    if signals.width >= thresholds.MIN_HERO_WIDTH:
        return True
    return signals.in_hero_or_above_fold


def team_matches(signals: ClassificationSignals) -> List[str]:
    """Team keywords in alt or filename, only on team/about pages."""
    if signals.page_type not in (PageType.TEAM, PageType.ABOUT):
        return []
    return matches_patterns(thresholds.TEAM_PATTERNS, filename=signals.filename, alt=signals.alt)


def product_matches(signals: ClassificationSignals) -> List[str]:
    return matches_patterns(thresholds.PRODUCT_PATTERNS, filename=signals.filename, alt=signals.alt)
