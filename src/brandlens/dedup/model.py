"""Public API for deduplicating classified images."""

from collections import defaultdict
from typing import Dict, List, Sequence, Tuple

import imagehash

from ..classifier.model import ClassificationResult
from ..logging import get_logger
from .cluster import cluster_duplicates
from .hash import HashComputationError, parse_phash
from .urls import deduplicate_by_url

logger = get_logger(__name__)


def deduplicate_results(
    results: Sequence[ClassificationResult],
    threshold: int = 8,
) -> List[ClassificationResult]:
    """
    Remove duplicate images from a priority-sorted result list.

    Exact URL duplicates go first. Results that carry a perceptual hash are
    then clustered, and only the earliest (highest priority) member of each
    cluster survives. Results without a hash are never dropped by the
    perceptual pass.

    Args:
        results: Classified images, sorted by display priority
        threshold: Maximum hamming distance for considering images duplicates

    Returns:
        Deduplicated results in their original order
    """
    unique = deduplicate_by_url(results)

    image_hashes: Dict[str, imagehash.ImageHash] = {}
    for result in unique:
        if not result.signals.phash:
            continue
        try:
            image_hashes[result.url] = parse_phash(result.signals.phash)
        except HashComputationError as exc:
            logger.warning(f"Ignoring phash for {result.url}: {exc}")

    # Hashes of different sizes are never compared with each other
    by_shape: Dict[Tuple[int, ...], Dict[str, imagehash.ImageHash]] = defaultdict(dict)
    for url, image_hash in image_hashes.items():
        by_shape[image_hash.hash.shape][url] = image_hash

    duplicates = set()
    for same_size in by_shape.values():
        if len(same_size) < 2:
            continue
        for group in cluster_duplicates(same_size, threshold):
            duplicates.update(url for url in group.urls if url != group.canonical_url)

    if duplicates:
        logger.info(f"Dropped {len(duplicates)} near-duplicate images")
    return [result for result in unique if result.url not in duplicates]
