# renderer/tone_mapping.py
import math
import numpy as np
from core.interval import Interval
from core.vector import Color

# Keeps 8-bit channels strictly below 256 after scaling
INTENSITY = Interval(0.000, 0.999)

def linear_to_gamma(linear_component: float) -> float:
    """Gamma 2 transform for a single channel."""
    if linear_component > 0:
        return math.sqrt(linear_component)
    return 0.0

def color_to_bytes(pixel_sum: Color, samples_per_pixel: int):
    """
    Convert an accumulated linear pixel color into an (r, g, b) triple of
    integers in [0, 255].
    """
    r = linear_to_gamma(pixel_sum.x / samples_per_pixel)
    g = linear_to_gamma(pixel_sum.y / samples_per_pixel)
    b = linear_to_gamma(pixel_sum.z / samples_per_pixel)
    return (int(256 * INTENSITY.clamp(r)),
            int(256 * INTENSITY.clamp(g)),
            int(256 * INTENSITY.clamp(b)))

def to_8bit(accumulated: np.ndarray, samples_per_pixel: int) -> np.ndarray:
    """
    Vectorised version of color_to_bytes for a whole (height, width, 3)
    accumulation buffer. Returns a uint8 array of the same shape.
    """
    averaged = accumulated / samples_per_pixel
    # Non-positive (and NaN) channels map to 0 as in linear_to_gamma
    gamma = np.sqrt(np.where(averaged > 0, averaged, 0.0))
    clamped = gamma.clip(INTENSITY.min, INTENSITY.max)
    return (256 * clamped).astype(np.uint8)
