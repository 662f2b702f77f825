"""Perceptual hash computation for near-duplicate brand images."""

from PIL import Image
import imagehash

from ..logging import get_logger

logger = get_logger(__name__)


class HashComputationError(Exception):
    """Raised when hash computation fails."""


def compute_phash(image: Image.Image) -> str:
    """
    Compute the perceptual hash of a loaded image.

    Args:
        image: PIL image in any mode

    Returns:
        Hex-encoded pHash

    Raises:
        HashComputationError: If the hash cannot be computed
    """
    try:
        # Convert to RGB for consistent hashing across palette/alpha modes
        if image.mode != 'RGB':
            image = image.convert('RGB')
        return str(imagehash.phash(image))
    except Exception as exc:
        raise HashComputationError(f"Failed to compute phash: {exc}") from exc


def parse_phash(value: str) -> imagehash.ImageHash:
    """Decode a hex pHash produced by ``compute_phash``."""
    try:
        return imagehash.hex_to_hash(value)
    except (TypeError, ValueError) as exc:
        raise HashComputationError(f"Invalid phash {value!r}: {exc}") from exc


def hamming_distance(a: imagehash.ImageHash, b: imagehash.ImageHash) -> int:
    """
    Number of differing bits between two perceptual hashes.

    Raises:
        HashComputationError: If the hashes were computed at different sizes
    """
    if a.hash.shape != b.hash.shape:
        raise HashComputationError(
            f"Cannot compare hashes of shape {a.hash.shape} and {b.hash.shape}"
        )
    return a - b
