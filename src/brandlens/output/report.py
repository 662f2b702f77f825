"""
JSON report generation for Brand Guide selections.

Serializes classification results and selections into plain dictionaries
so the Brand Guide API (or a human) can consume them.
"""

import json
from dataclasses import asdict
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..classifier.descriptor import ImageDescriptor
from ..classifier.model import ClassificationResult, get_classification_summary
from ..logging import get_logger
from ..selection.separate import BrandGuideSelection

logger = get_logger(__name__)

REPORT_VERSION = "1.0"


def _plain(value: Any) -> Any:
    """Convert enums and tuples inside asdict() output to JSON types."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


def descriptor_to_dict(descriptor: ImageDescriptor) -> Dict[str, Any]:
    """Serialize a descriptor, leaving out unset fields."""
    data = _plain(asdict(descriptor))
    return {key: value for key, value in data.items() if value not in (None, (), [])}


def result_to_dict(result: ClassificationResult, include_signals: bool = False) -> Dict[str, Any]:
    """Serialize one classification result."""
    data = _plain(asdict(result))
    if not include_signals:
        data.pop("signals", None)
    return data


def selection_to_dict(
    selection: BrandGuideSelection,
    include_signals: bool = False,
) -> Dict[str, Any]:
    """Serialize a BrandGuideSelection with summary statistics."""
    everything: List[ClassificationResult] = (
        selection.logos + selection.brand_images + selection.excluded
    )
    return {
        "version": REPORT_VERSION,
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "summary": {
            **get_classification_summary(everything),
            "logos": len(selection.logos),
            "brand_images": len(selection.brand_images),
            "brand_image_candidates": selection.brand_image_candidates,
            "dropped": selection.dropped,
        },
        "logos": [result_to_dict(r, include_signals) for r in selection.logos],
        "brand_images": [result_to_dict(r, include_signals) for r in selection.brand_images],
        "icons": [result_to_dict(r, include_signals) for r in selection.icons],
        "excluded": [result_to_dict(r, include_signals) for r in selection.excluded],
    }


def write_report_json(report: Any, output_path: Optional[Path]) -> str:
    """
    Render a report as JSON and optionally write it to disk.

    Returns:
        The JSON text
    """
    text = json.dumps(report, indent=2, ensure_ascii=False)
    if output_path is not None:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(text, encoding="utf-8")
        logger.info(f"Report written to {output_path}")
    return text
