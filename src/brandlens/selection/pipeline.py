"""Classify, deduplicate and separate a crawl's images in one call."""

from typing import Dict, Iterable, Optional, Union

from ..classifier.descriptor import ImageDescriptor
from ..classifier.model import ImageClassifier
from ..classifier.taxonomy import ImageRole
from ..config import Settings
from ..dedup.model import deduplicate_results
from ..logging import get_logger
from .overrides import apply_role_override
from .separate import BrandGuideSelection, separate_logos_and_brand_images

logger = get_logger(__name__)


def build_brand_guide(
    descriptors: Iterable[ImageDescriptor],
    settings: Optional[Settings] = None,
    classifier: Optional[ImageClassifier] = None,
    overrides: Optional[Dict[str, Union[ImageRole, str]]] = None,
    dedup: bool = True,
) -> BrandGuideSelection:
    """
    Build the Brand Guide buckets for a set of crawled images.

    Args:
        descriptors: Images found on the crawled site
        settings: Caps and dedup threshold; defaults to ``Settings()``
        classifier: Classifier to use; one honoring ``settings.debug_classification``
            is created when omitted
        overrides: User role overrides keyed by image url
        dedup: Whether to drop duplicate images before separation

    Returns:
        BrandGuideSelection for the images
    """
    settings = settings or Settings()
    classifier = classifier or ImageClassifier(debug=settings.debug_classification)

    results = classifier.classify_batch(descriptors)

    if overrides:
        results = [
            apply_role_override(result, overrides[result.url]) if result.url in overrides else result
            for result in results
        ]
        results.sort(key=lambda result: result.display_priority, reverse=True)

    if dedup:
        before = len(results)
        results = deduplicate_results(results, threshold=settings.dedup_threshold)
        logger.debug(f"Deduplication kept {len(results)}/{before} images")

    return separate_logos_and_brand_images(
        results,
        max_logos=settings.max_logos,
        max_brand_images=settings.max_brand_images,
    )
