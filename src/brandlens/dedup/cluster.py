"""Clustering logic for grouping near-duplicate images."""

from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, List

import imagehash

from .hash import hamming_distance
from ..logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class DedupGroup:
    """A group of duplicate images with a canonical representative."""
    group_id: str
    urls: List[str]
    canonical_url: str


def cluster_duplicates(
    image_hashes: Dict[str, imagehash.ImageHash],
    threshold: int = 8
) -> List[DedupGroup]:
    """
    Group images into duplicate clusters using single-link clustering.

    Args:
        image_hashes: Mapping of url -> pHash, in priority order
        threshold: Maximum hamming distance for considering images duplicates

    Returns:
        List of DedupGroup objects; the canonical member of each group is the
        earliest url in ``image_hashes``
    """
    if not image_hashes:
        return []

    image_items = list(image_hashes.items())
    n = len(image_items)

    # Union-Find data structure for clustering
    parent = list(range(n))

    def find(x: int) -> int:
        if parent[x] != x:
            parent[x] = find(parent[x])
        return parent[x]

    def union(x: int, y: int) -> None:
        px, py = find(x), find(y)
        if px != py:
            # Lower index stays root so the canonical member is the first seen
            parent[max(px, py)] = min(px, py)

    for i in range(n):
        for j in range(i + 1, n):
            url_i, hash_i = image_items[i]
            url_j, hash_j = image_items[j]

            distance = hamming_distance(hash_i, hash_j)
            if distance <= threshold:
                union(i, j)
                logger.debug(f"Grouped {url_i} and {url_j} (distance: {distance})")

    clusters: Dict[int, List[int]] = defaultdict(list)
    for i in range(n):
        clusters[find(i)].append(i)

    groups = []
    for group_counter, root in enumerate(sorted(r for r, members in clusters.items() if len(members) > 1), start=1):
        members = clusters[root]
        group_id = f"dup_{group_counter:03d}"
        groups.append(DedupGroup(
            group_id=group_id,
            urls=[image_items[i][0] for i in members],
            canonical_url=image_items[root][0],
        ))
        logger.info(f"Created dedup group {group_id} with {len(members)} images, canonical: {image_items[root][0]}")

    return groups
