import numpy as np
from numpy import ndarray as NDArray

from .conversions.to_hsv import np_rgba_to_hsva, rgba_to_hsva
from .conversions.to_rgb import hsva_to_rgba, np_hsva_to_rgba
from .types.color_types import HSVA, RGBA, RGBALike
from .types.format_type import HUE_MAX, HUE_SHIFT_COMPLEMENTARY


def shift_hue(hue: float, degrees: float) -> float:
    """Rotate a hue, wrapping the result back into [0, 360) once in either direction."""
    hue = hue + degrees
    if hue >= HUE_MAX:
        hue -= HUE_MAX
    if hue < 0.0:
        hue += HUE_MAX
    return hue

def complementary(color: RGBALike) -> RGBA:
    """
    Return the complementary color: the same saturation and value with the
    hue rotated by 180 degrees. Alpha passes through unchanged.
    """
    h, s, v, a = rgba_to_hsva(color)
    return hsva_to_rgba(HSVA(shift_hue(h, HUE_SHIFT_COMPLEMENTARY), s, v, a))

def np_complementary(color: NDArray) -> NDArray:
    """Vectorized: complementary colors for an array shaped (..., 3) or (..., 4)."""
    hsva = np_rgba_to_hsva(color)
    hue = hsva[..., 0] + HUE_SHIFT_COMPLEMENTARY
    hue = np.where(hue >= HUE_MAX, hue - HUE_MAX, hue)
    hue = np.where(hue < 0.0, hue + HUE_MAX, hue)
    hsva[..., 0] = hue
    return np_hsva_to_rgba(hsva)
