# src/platformer/scaling.py
import math

from .config import SCALE_REF_HEIGHT


def proportional_size(size: float, viewport_height: float) -> float:
    """Shrink a nominal size for short viewports; taller ones keep it as-is."""
    if viewport_height < SCALE_REF_HEIGHT:
        return math.ceil(size * viewport_height / SCALE_REF_HEIGHT)
    return size
