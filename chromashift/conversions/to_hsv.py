import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import HSVA, RGBALike, element_to_array
from ..types.format_type import HUE_MAX, PERCENT_MAX, RGB_MAX
from ..utils.default import alpha_or_default
from ..utils.extremum import max_with_index, min_with_index
from ..validation import RGB_CHANNELS, np_split_channels, validate_rgba


def rgba_to_hsva(color: RGBALike) -> HSVA:
    """
    Convert RGBA to HSVA.

    Saturation is relative to value (``diff / max``), unlike HSL saturation.

    Returns:
        HSVA: (hue [0, 360), saturation [0, 100], value [0, 100], alpha)
    """
    rgba = validate_rgba(color)
    a = alpha_or_default(rgba.a)
    r, g, b = (c / RGB_MAX for c in rgba[:3])

    max_c, max_index = max_with_index((r, g, b))
    min_c, _ = min_with_index((r, g, b))
    value = max_c

    if max_c == min_c:
        return HSVA(0.0, 0.0, value * PERCENT_MAX, a)

    diff = max_c - min_c
    saturation = diff / value

    if max_index == 0:
        hue = (g - b) / diff
    elif max_index == 1:
        hue = 2.0 + (b - r) / diff
    else:
        hue = 4.0 + (r - g) / diff

    hue *= 60.0
    if hue < 0.0:
        hue += HUE_MAX

    return HSVA(hue, saturation * PERCENT_MAX, value * PERCENT_MAX, a)

def np_rgba_to_hsva(color: NDArray) -> NDArray:
    """
    Vectorized: Convert RGBA to HSVA.

    Args:
        color: array-like of shape (..., 3) or (..., 4)

    Returns:
        hsva: array of shape (..., 4): (hue, saturation %, value %, alpha)
    """
    (r, g, b), alpha = np_split_channels(element_to_array(color), "rgba", "rgb", RGB_CHANNELS)
    r, g, b = r / RGB_MAX, g / RGB_MAX, b / RGB_MAX

    rgb = np.stack([r, g, b], axis=-1)
    max_index = np.argmax(rgb, axis=-1)
    value = np.max(rgb, axis=-1)
    diff = value - np.min(rgb, axis=-1)
    achromatic = diff == 0

    safe_diff = np.where(achromatic, 1.0, diff)
    safe_value = np.where(achromatic, 1.0, value)
    saturation = np.where(achromatic, 0.0, diff / safe_value)

    hue = np.select(
        [max_index == 0, max_index == 1],
        [(g - b) / safe_diff, 2.0 + (b - r) / safe_diff],
        4.0 + (r - g) / safe_diff,
    ) * 60.0
    hue = np.where(hue < 0.0, hue + HUE_MAX, hue)
    hue = np.where(achromatic, 0.0, hue)

    return np.stack([hue, saturation * PERCENT_MAX, value * PERCENT_MAX, alpha], axis=-1)
