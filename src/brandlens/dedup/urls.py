"""URL normalization and exact-URL deduplication for crawled images."""

from typing import List, Optional, Sequence
from urllib.parse import urldefrag, urljoin, urlsplit

from ..classifier.model import ClassificationResult
from ..logging import get_logger

logger = get_logger(__name__)


def normalize_image_url(src: Optional[str], base_url: Optional[str] = None) -> Optional[str]:
    """
    Resolve an image source found on a page into an absolute URL.

    Args:
        src: Raw ``src``/``srcset`` entry or CSS url()
        base_url: URL of the page the image was found on

    Returns:
        Absolute URL, the unchanged data or file URI, or None when the source is
        empty or cannot be resolved
    """
    if not src or not src.strip():
        return None
    src = src.strip()

    lowered = src.lower()
    if lowered.startswith(("http://", "https://", "data:", "file:")):
        return src
    if not base_url:
        return None

    try:
        base = urlsplit(base_url)
        if src.startswith("//"):
            return f"{base.scheme}:{src}"
        return urljoin(base_url, src)
    except ValueError as exc:
        logger.debug(f"Could not resolve image source {src!r} against {base_url!r}: {exc}")
        return None


def url_key(url: str) -> str:
    """
    Identity key for an image URL: fragment stripped.

    Data URIs are returned as is; a "#" inside inline SVG is content, not a
    fragment.
    """
    if url[:5].lower() == "data:":
        return url
    return urldefrag(url)[0]


def deduplicate_by_url(results: Sequence[ClassificationResult]) -> List[ClassificationResult]:
    """Keep the first result for each URL, preserving order."""
    seen = set()
    unique: List[ClassificationResult] = []
    for result in results:
        key = url_key(result.url)
        if key in seen:
            logger.debug(f"Dropping duplicate URL {result.url}")
            continue
        seen.add(key)
        unique.append(result)
    return unique
