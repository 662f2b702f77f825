"""
Input descriptors and derived signals for image classification.

An ImageDescriptor is what the site crawler knows about one image on a page.
ClassificationSignals is the read-only projection the rules work from.
"""

import re
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional, Tuple

from ..logging import get_logger
from .taxonomy import PageType, SourceType

logger = get_logger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


class DescriptorError(Exception):
    """Raised when a serialized descriptor cannot be turned into an ImageDescriptor."""


@dataclass(frozen=True)
class ImageDescriptor:
    """One image found on a crawled page."""
    url: str                                        # Source URL or data URI
    alt: Optional[str] = None                       # HTML alt text
    width: Optional[int] = None                     # Pixel width, None when unknown
    height: Optional[int] = None                    # Pixel height, None when unknown

    # Placement on the page
    in_header_or_nav: bool = False
    in_footer: bool = False
    in_hero_or_above_fold: bool = False
    in_affiliate_or_partner_section: bool = False
    offset_top: Optional[int] = None

    source_type: SourceType = SourceType.UNKNOWN
    parent_classes: Tuple[str, ...] = ()
    parent_ids: Tuple[str, ...] = ()

    # Brand context
    brand_name: Optional[str] = None
    page_type: Optional[PageType] = None

    # Role assigned by the previous crawler, kept for traceability
    legacy_role: Optional[str] = None

    # Pixel signals filled in by the probe
    color_count: Optional[int] = None
    is_monochrome: Optional[bool] = None
    has_solid_background: Optional[bool] = None
    phash: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ImageDescriptor":
        """
        Build a descriptor from crawler JSON.

        Accepts both camelCase keys (``inHeaderOrNav``) and snake_case keys
        (``in_header_or_nav``). Unknown keys are ignored.

        Raises:
            DescriptorError: If ``url`` is missing or a field has the wrong shape
        """
        if not isinstance(data, dict):
            raise DescriptorError(f"Descriptor must be an object, got {type(data).__name__}")

        known = {f.name for f in fields(cls)}
        values: Dict[str, Any] = {}
        for key, value in data.items():
            name = _CAMEL_BOUNDARY.sub("_", key).lower()
            if name not in known:
                logger.debug(f"Ignoring unknown descriptor key: {key}")
                continue
            values[name] = value

        url = values.get("url")
        if not isinstance(url, str) or not url:
            raise DescriptorError("Descriptor is missing a non-empty 'url'")

        try:
            if values.get("source_type") is not None:
                values["source_type"] = _parse_source_type(values["source_type"])
            if values.get("page_type") is not None:
                values["page_type"] = PageType(str(values["page_type"]).lower())
            for name in ("width", "height", "offset_top", "color_count"):
                if values.get(name) is not None:
                    values[name] = int(values[name])
            for name in ("parent_classes", "parent_ids"):
                if values.get(name) is not None:
                    values[name] = tuple(str(item) for item in values[name])
            for name in ("in_header_or_nav", "in_footer", "in_hero_or_above_fold",
                         "in_affiliate_or_partner_section"):
                if values.get(name) is not None:
                    values[name] = _parse_flag(values[name])
        except (TypeError, ValueError) as exc:
            raise DescriptorError(f"Invalid descriptor for {url}: {exc}") from exc

        return cls(**{k: v for k, v in values.items() if v is not None})


_TRUE_STRINGS = ("1", "true", "yes", "on")
_FALSE_STRINGS = ("0", "false", "no", "off", "")


def _parse_flag(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
    raise ValueError(f"expected a boolean, got {value!r}")


def _parse_source_type(value: Any) -> SourceType:
    if isinstance(value, SourceType):
        return value
    try:
        return SourceType(str(value).lower())
    except ValueError:
        return SourceType.UNKNOWN


@dataclass(frozen=True)
class ClassificationSignals:
    """Normalized facts computed once per descriptor."""
    url: str
    filename: str
    width: Optional[int] = None
    height: Optional[int] = None
    area: Optional[int] = None
    aspect_ratio: Optional[float] = None
    alt: Optional[str] = None
    brand_match_score: int = 0

    in_header_or_nav: bool = False
    in_footer: bool = False
    in_hero_or_above_fold: bool = False
    in_affiliate_or_partner_section: bool = False
    offset_top: Optional[int] = None

    page_type: Optional[PageType] = None
    source_type: SourceType = SourceType.UNKNOWN
    parent_classes: Tuple[str, ...] = field(default_factory=tuple)
    parent_ids: Tuple[str, ...] = field(default_factory=tuple)

    color_count: Optional[int] = None
    is_monochrome: Optional[bool] = None
    has_solid_background: Optional[bool] = None
    phash: Optional[str] = None

    def has_dimensions(self) -> bool:
        return bool(self.width) and bool(self.height)

    @property
    def max_dimension(self) -> Optional[int]:
        if not self.has_dimensions():
            return None
        return max(self.width, self.height)
