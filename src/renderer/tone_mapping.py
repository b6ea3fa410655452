# renderer/tone_mapping.py
import math
from typing import Tuple
from core.interval import Interval
from core.vector import Vector3

# Upper bound keeps int(256 * c) at or below 255
INTENSITY = Interval(0.000, 0.999)

def linear_to_gamma(linear_component: float) -> float:
    """
    Gamma 2 transform; non-positive input maps to 0.
    """
    if linear_component > 0:
        return math.sqrt(linear_component)
    return 0.0

def to_rgb8(pixel_color: Vector3) -> Tuple[int, int, int]:
    """
    Convert a linear radiance color to gamma-corrected 8-bit channels.
    """
    r = linear_to_gamma(pixel_color.x)
    g = linear_to_gamma(pixel_color.y)
    b = linear_to_gamma(pixel_color.z)

    return (int(256 * INTENSITY.clamp(r)),
            int(256 * INTENSITY.clamp(g)),
            int(256 * INTENSITY.clamp(b)))
