import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import HSLA, RGBALike, element_to_array
from ..types.format_type import HUE_MAX, PERCENT_MAX, RGB_MAX
from ..utils.default import alpha_or_default
from ..utils.extremum import max_with_index, min_with_index
from ..utils.num_utils import clamp01, np_clamp01
from ..validation import RGB_CHANNELS, np_split_channels, validate_rgba

## RGBA to HSLA conversions

def rgba_to_hsla(color: RGBALike) -> HSLA:
    """
    Convert RGBA to HSLA.

    Args:
        color: (r, g, b[, a]) with r, g, b in [0, 255] and a in [0, 1]

    Returns:
        HSLA: (hue [0, 360), saturation [0, 100], lightness [0, 100], alpha)
    """
    rgba = validate_rgba(color)
    a = alpha_or_default(rgba.a)
    r, g, b = (c / RGB_MAX for c in rgba[:3])

    max_c, max_index = max_with_index((r, g, b))
    min_c, _ = min_with_index((r, g, b))

    lightness = (max_c + min_c) / 2.0
    if max_c == min_c:
        return HSLA(0.0, 0.0, lightness * PERCENT_MAX, a)

    chroma = max_c - min_c
    saturation = clamp01(chroma / (1.0 - abs(2.0 * lightness - 1.0)))

    if max_index == 0:
        hue = (g - b) / chroma + (6.0 if g < b else 0.0)
    elif max_index == 1:
        hue = (b - r) / chroma + 2.0
    else:
        hue = (r - g) / chroma + 4.0

    hue *= 60.0
    if hue < 0.0:
        hue += HUE_MAX

    return HSLA(hue, saturation * PERCENT_MAX, lightness * PERCENT_MAX, a)

def np_rgba_to_hsla(color: NDArray) -> NDArray:
    """
    Vectorized: Convert RGBA to HSLA.

    Args:
        color: array-like of shape (..., 3) or (..., 4)

    Returns:
        hsla: array of shape (..., 4): (hue, saturation %, lightness %, alpha)
    """
    (r, g, b), alpha = np_split_channels(element_to_array(color), "rgba", "rgb", RGB_CHANNELS)
    r, g, b = r / RGB_MAX, g / RGB_MAX, b / RGB_MAX

    rgb = np.stack([r, g, b], axis=-1)
    max_index = np.argmax(rgb, axis=-1)  # first maximum wins on ties
    max_c = np.max(rgb, axis=-1)
    min_c = np.min(rgb, axis=-1)

    lightness = (max_c + min_c) / 2.0
    chroma = max_c - min_c
    achromatic = chroma == 0

    safe_chroma = np.where(achromatic, 1.0, chroma)
    safe_denom = np.where(achromatic, 1.0, 1.0 - np.abs(2.0 * lightness - 1.0))
    saturation = np.where(achromatic, 0.0, np_clamp01(chroma / safe_denom))

    hue = np.select(
        [max_index == 0, max_index == 1],
        [
            (g - b) / safe_chroma + np.where(g < b, 6.0, 0.0),
            (b - r) / safe_chroma + 2.0,
        ],
        (r - g) / safe_chroma + 4.0,
    ) * 60.0
    hue = np.where(hue < 0.0, hue + HUE_MAX, hue)
    hue = np.where(achromatic, 0.0, hue)

    return np.stack([hue, saturation * PERCENT_MAX, lightness * PERCENT_MAX, alpha], axis=-1)
