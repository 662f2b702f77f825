"""
Classification entry points for crawled brand images.

This module turns descriptors into ClassificationResults by running the
signal extraction, the ordered rule chain and the priority scorer. It is the
single source of truth for image roles; everything here is a pure function
of its input.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..logging import get_logger
from .descriptor import ClassificationSignals, ImageDescriptor
from .rules import RuleContext, Verdict, evaluate_rules
from .scoring import calculate_display_priority, content_score, location_score
from .signals import build_signals
from .taxonomy import (
    ImageCategory,
    ImageRole,
    SizeCategory,
    SourceType,
    role_to_category,
    should_display_in_brand_guide,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class DebugInfo:
    """Explainability trace; never influences the classification."""
    matched_patterns: Tuple[str, ...]
    size_category: SizeCategory
    location_score: int
    content_score: int
    negative_signals: Tuple[str, ...]
    rule: str = ""


@dataclass(frozen=True)
class ClassificationResult:
    """Role assignment for one crawled image."""
    url: str
    role: ImageRole
    category: ImageCategory
    confidence: float            # 0.0 to 1.0
    signals: ClassificationSignals
    should_display: bool         # Whether the Brand Guide shows it
    display_priority: int        # Higher = show first
    alt: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    filename: str = ""
    source_type: SourceType = SourceType.UNKNOWN
    debug_info: Optional[DebugInfo] = None
    user_overridden: bool = False
    original_role: Optional[ImageRole] = None

    def is_excluded(self) -> bool:
        return not self.should_display

    @property
    def size_label(self) -> str:
        if self.width and self.height:
            return f"{self.width}x{self.height}"
        return "unknown"


def _build_result(signals: ClassificationSignals, verdict: Verdict, size_category: SizeCategory) -> ClassificationResult:
    role = verdict.role
    return ClassificationResult(
        url=signals.url,
        role=role,
        category=role_to_category(role),
        confidence=verdict.confidence,
        signals=signals,
        should_display=should_display_in_brand_guide(role),
        display_priority=calculate_display_priority(role, signals),
        alt=signals.alt,
        width=signals.width,
        height=signals.height,
        filename=signals.filename,
        source_type=signals.source_type,
        debug_info=DebugInfo(
            matched_patterns=verdict.matched_patterns,
            size_category=size_category,
            location_score=location_score(signals),
            content_score=content_score(signals, verdict.matched_patterns),
            negative_signals=verdict.negative_signals,
            rule=verdict.rule,
        ),
    )


def classify_image(descriptor: ImageDescriptor) -> ClassificationResult:
    """
    Classify one image into a role.

    Never raises for sparse input: missing dimensions, alt text or placement
    flags only remove their signal contributions.

    Args:
        descriptor: Crawled image with a non-empty url

    Returns:
        ClassificationResult with role, category, confidence and priority
    """
    signals = build_signals(descriptor)
    ctx = RuleContext(signals)
    verdict = evaluate_rules(ctx)
    return _build_result(signals, verdict, ctx.size_category)


def classify_images(descriptors: Iterable[ImageDescriptor]) -> List[ClassificationResult]:
    """Classify a batch and sort by display priority, highest first (stable)."""
    results = [classify_image(descriptor) for descriptor in descriptors]
    return sorted(results, key=lambda result: result.display_priority, reverse=True)


def log_classification(result: ClassificationResult, log: Optional[logging.Logger] = None) -> None:
    """Emit a one-line trace of a classification result at INFO level."""
    log = log or logger
    debug = result.debug_info
    log.info(
        f"[ImageClassifier] {result.url[:60]} role={result.role.value} "
        f"category={result.category.value} confidence={result.confidence:.2f} "
        f"display={result.should_display} priority={result.display_priority} "
        f"size={result.size_label} "
        f"patterns={list(debug.matched_patterns) if debug else []} "
        f"negative={list(debug.negative_signals) if debug else []}"
    )


class ImageClassifier:
    """
    Batch classifier with an injected debug trace.

    The debug flag and logger only control logging; results are identical
    with tracing on or off.
    """

    def __init__(self, debug: bool = False, log: Optional[logging.Logger] = None):
        self.debug = debug
        self.log = log or logger

    def classify(self, descriptor: ImageDescriptor) -> ClassificationResult:
        result = classify_image(descriptor)
        if self.debug:
            log_classification(result, self.log)
        return result

    def classify_batch(self, descriptors: Iterable[ImageDescriptor]) -> List[ClassificationResult]:
        """Classify and sort a batch, tracing each image when debug is on."""
        results = [self.classify(descriptor) for descriptor in descriptors]
        results.sort(key=lambda result: result.display_priority, reverse=True)

        displayed = sum(1 for r in results if r.should_display)
        logger.debug(f"Batch classification complete: {displayed}/{len(results)} displayable")
        return results


def get_classification_summary(results: List[ClassificationResult]) -> Dict[str, Any]:
    """Generate summary statistics from classification results."""
    if not results:
        return {"total": 0, "displayed": 0, "excluded": 0}

    total = len(results)
    displayed = sum(1 for r in results if r.should_display)

    roles: Dict[str, int] = {}
    for result in results:
        roles[result.role.value] = roles.get(result.role.value, 0) + 1

    categories: Dict[str, int] = {}
    for result in results:
        categories[result.category.value] = categories.get(result.category.value, 0) + 1

    return {
        "total": total,
        "displayed": displayed,
        "excluded": total - displayed,
        "average_confidence": sum(r.confidence for r in results) / total,
        "roles": roles,
        "categories": categories,
    }
