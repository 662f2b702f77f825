"""Duplicate removal for crawled brand images."""

from .model import deduplicate_results
from .cluster import cluster_duplicates, DedupGroup
from .hash import HashComputationError, compute_phash, hamming_distance, parse_phash
from .urls import deduplicate_by_url, normalize_image_url

__all__ = [
    "deduplicate_results",
    "deduplicate_by_url",
    "normalize_image_url",
    "DedupGroup",
    "HashComputationError",
    "cluster_duplicates",
    "compute_phash",
    "hamming_distance",
    "parse_phash",
]
