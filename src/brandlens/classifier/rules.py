"""
Ordered rule chain that assigns a role to a crawled image.

Exclusion rules run first and short-circuit: once one matches no positive
rule is consulted. Positive rules follow in priority order and the last one
always matches, so every image gets a role.
"""

from dataclasses import dataclass
from functools import cached_property
from typing import Callable, List, Optional, Sequence, Tuple

from .descriptor import ClassificationSignals
from .heuristics import (
    DetectorCheck,
    detect_icon,
    detect_logo,
    detect_partner_logo,
    detect_platform_logo,
    detect_social_icon,
    is_likely_hero,
    is_oversized_for_logo,
    product_matches,
    team_matches,
)
from .signals import categorize_size_category
from .taxonomy import ImageRole, SizeCategory
from . import thresholds


@dataclass(frozen=True)
class Verdict:
    """Role decision produced by a rule, with its debug trace."""
    role: ImageRole
    confidence: float
    rule: str
    matched_patterns: Tuple[str, ...] = ()
    negative_signals: Tuple[str, ...] = ()


class RuleContext:
    """Per-image view shared by the rules; detector results are computed once."""

    def __init__(self, signals: ClassificationSignals):
        self.signals = signals

    @cached_property
    def size_category(self) -> SizeCategory:
        return categorize_size_category(self.signals.width, self.signals.height)

    @cached_property
    def social_check(self) -> DetectorCheck:
        return detect_social_icon(self.signals)

    @cached_property
    def platform_check(self) -> DetectorCheck:
        return detect_platform_logo(self.signals)

    @cached_property
    def partner_check(self) -> DetectorCheck:
        return detect_partner_logo(self.signals)

    @cached_property
    def icon_check(self) -> DetectorCheck:
        return detect_icon(self.signals)

    @cached_property
    def logo_check(self) -> DetectorCheck:
        return detect_logo(self.signals)

    @property
    def logo_overrides_icon(self) -> bool:
        logo = self.logo_check
        return logo.matched and logo.confidence >= thresholds.LOGO_OVERRIDES_ICON_CONFIDENCE


@dataclass(frozen=True)
class Rule:
    """A named (predicate, builder) pair evaluated in chain order."""
    name: str
    predicate: Callable[[RuleContext], bool]
    build: Callable[[RuleContext], Verdict]


def _fixed(rule: str, role: ImageRole, confidence: float,
           patterns: Callable[[RuleContext], Sequence[str]] = lambda ctx: ()) -> Callable[[RuleContext], Verdict]:
    def build(ctx: RuleContext) -> Verdict:
        return Verdict(role=role, confidence=confidence, rule=rule,
                       matched_patterns=tuple(patterns(ctx)))
    return build


def _build_logo(ctx: RuleContext) -> Verdict:
    patterns: List[str] = []
    negatives: List[str] = []

    if ctx.icon_check.matched:
        # Icon-like naming lost to stronger logo evidence
        patterns.extend(ctx.icon_check.reasons)
        negatives.append("icon_but_logo_signals")
    patterns.extend(ctx.logo_check.reasons)

    if is_oversized_for_logo(ctx.signals):
        # An oversized "logo.png" is brand content, not a usable mark
        negatives.append("oversized_for_logo")
        if is_likely_hero(ctx.signals):
            return Verdict(ImageRole.HERO, thresholds.OVERSIZED_LOGO_HERO_CONFIDENCE, "logo",
                           tuple(patterns), tuple(negatives))
        return Verdict(ImageRole.BRAND_IMAGE, thresholds.OVERSIZED_LOGO_BRAND_CONFIDENCE, "logo",
                       tuple(patterns), tuple(negatives))

    return Verdict(ImageRole.LOGO, ctx.logo_check.confidence, "logo",
                   tuple(patterns), tuple(negatives))


EXCLUSION_RULES: List[Rule] = [
    Rule(
        "social_icon",
        lambda ctx: ctx.social_check.matched,
        _fixed("social_icon", ImageRole.SOCIAL_ICON, thresholds.SOCIAL_ICON_CONFIDENCE,
               lambda ctx: ctx.social_check.reasons),
    ),
    Rule(
        "platform_logo",
        lambda ctx: ctx.platform_check.matched,
        _fixed("platform_logo", ImageRole.PLATFORM_LOGO, thresholds.PLATFORM_LOGO_CONFIDENCE,
               lambda ctx: ctx.platform_check.reasons),
    ),
    Rule(
        "partner_logo",
        lambda ctx: ctx.partner_check.matched,
        _fixed("partner_logo", ImageRole.PARTNER_LOGO, thresholds.PARTNER_LOGO_CONFIDENCE,
               lambda ctx: ctx.partner_check.reasons),
    ),
    Rule(
        "icon",
        lambda ctx: ctx.icon_check.matched and not ctx.logo_overrides_icon,
        _fixed("icon", ImageRole.ICON, thresholds.ICON_CONFIDENCE,
               lambda ctx: ctx.icon_check.reasons),
    ),
]

POSITIVE_RULES: List[Rule] = [
    Rule("logo", lambda ctx: ctx.logo_check.matched, _build_logo),
    Rule(
        "hero",
        lambda ctx: is_likely_hero(ctx.signals),
        _fixed("hero", ImageRole.HERO, thresholds.HERO_CONFIDENCE, lambda ctx: ("hero_size",)),
    ),
    Rule(
        "team",
        lambda ctx: bool(team_matches(ctx.signals)),
        _fixed("team", ImageRole.TEAM, thresholds.TEAM_CONFIDENCE,
               lambda ctx: (f"team:{team_matches(ctx.signals)[0]}",)),
    ),
    Rule(
        "product",
        lambda ctx: bool(product_matches(ctx.signals)),
        _fixed("product", ImageRole.PRODUCT, thresholds.PRODUCT_CONFIDENCE,
               lambda ctx: (f"product:{product_matches(ctx.signals)[0]}",)),
    ),
    Rule(
        "brand_image",
        lambda ctx: ctx.size_category in (SizeCategory.MEDIUM, SizeCategory.LARGE, SizeCategory.HERO),
        _fixed("brand_image", ImageRole.BRAND_IMAGE, thresholds.BRAND_IMAGE_CONFIDENCE),
    ),
    Rule(
        "other",
        lambda ctx: True,
        _fixed("other", ImageRole.OTHER, thresholds.OTHER_CONFIDENCE),
    ),
]

CLASSIFICATION_RULES: List[Rule] = EXCLUSION_RULES + POSITIVE_RULES


def evaluate_rules(ctx: RuleContext, rules: Optional[Sequence[Rule]] = None) -> Optional[Verdict]:
    """Return the verdict of the first matching rule, or None if none match."""
    for rule in CLASSIFICATION_RULES if rules is None else rules:
        if rule.predicate(ctx):
            return rule.build(ctx)
    return None
