"""Probing of downloaded images into classifier descriptors."""

from .colors import ColorStats, analyze_colors
from .images import ProbeError, probe_image, probe_images

__all__ = ["ColorStats", "ProbeError", "analyze_colors", "probe_image", "probe_images"]
