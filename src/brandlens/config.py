import os
from dataclasses import dataclass


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        return default


@dataclass
class Settings:
    max_logos: int = 2
    max_brand_images: int = 15
    dedup_threshold: int = 8
    debug_classification: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from BRANDLENS_* environment variables."""
        return cls(
            max_logos=_env_int("BRANDLENS_MAX_LOGOS", cls.max_logos),
            max_brand_images=_env_int("BRANDLENS_MAX_BRAND_IMAGES", cls.max_brand_images),
            dedup_threshold=_env_int("BRANDLENS_DEDUP_THRESHOLD", cls.dedup_threshold),
            debug_classification=_env_flag("BRANDLENS_DEBUG_CLASSIFICATION"),
        )
