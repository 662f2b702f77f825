"""Display-priority and debug sub-scores for classified images."""

from .descriptor import ClassificationSignals
from .taxonomy import ImageRole
from . import thresholds


def calculate_display_priority(role: ImageRole, signals: ClassificationSignals) -> int:
    """
    Rank an image for Brand Guide presentation.

    Base priority comes from the role (excluded roles start at 0); larger
    images and header or above-the-fold placement add bonuses.
    """
    priority = thresholds.ROLE_BASE_PRIORITY.get(role.value, 0)

    if signals.has_dimensions():
        priority += int(min(signals.area / thresholds.AREA_PRIORITY_DIVISOR,
                            thresholds.MAX_AREA_PRIORITY_BONUS))

    if signals.in_header_or_nav:
        priority += thresholds.HEADER_PRIORITY_BONUS
    if signals.in_hero_or_above_fold:
        priority += thresholds.ABOVE_FOLD_PRIORITY_BONUS

    return priority


def location_score(signals: ClassificationSignals) -> int:
    return (4 if signals.in_header_or_nav else 0) + (2 if signals.in_hero_or_above_fold else 0)


def content_score(signals: ClassificationSignals, matched_patterns) -> int:
    return signals.brand_match_score + (1 if matched_patterns else 0)
