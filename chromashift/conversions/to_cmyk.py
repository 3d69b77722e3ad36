import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import CMYKA, RGBALike, element_to_array
from ..types.format_type import PERCENT_MAX, RGB_MAX
from ..utils.default import alpha_or_default
from ..utils.extremum import max_with_index
from ..utils.num_utils import clamp01, np_clamp01
from ..validation import RGB_CHANNELS, np_split_channels, validate_rgba


def rgba_to_cmyka(color: RGBALike) -> CMYKA:
    """
    Convert RGBA to CMYKA.

    Pure black (K == 100) yields C == M == Y == 0 rather than dividing by zero.

    Returns:
        CMYKA: (cyan, magenta, yellow, key) in [0, 100], plus alpha
    """
    rgba = validate_rgba(color)
    a = alpha_or_default(rgba.a)
    r, g, b = (c / RGB_MAX for c in rgba[:3])

    max_c, _ = max_with_index((r, g, b))
    k = 1.0 - max_c
    if k == 1.0:
        return CMYKA(0.0, 0.0, 0.0, PERCENT_MAX, a)

    c = clamp01((1.0 - r - k) / (1.0 - k))
    m = clamp01((1.0 - g - k) / (1.0 - k))
    y = clamp01((1.0 - b - k) / (1.0 - k))

    return CMYKA(c * PERCENT_MAX, m * PERCENT_MAX, y * PERCENT_MAX, k * PERCENT_MAX, a)

def np_rgba_to_cmyka(color: NDArray) -> NDArray:
    """
    Vectorized: Convert RGBA to CMYKA.

    Args:
        color: array-like of shape (..., 3) or (..., 4)

    Returns:
        cmyka: array of shape (..., 5): (c %, m %, y %, k %, alpha)
    """
    (r, g, b), alpha = np_split_channels(element_to_array(color), "rgba", "rgb", RGB_CHANNELS)
    r, g, b = r / RGB_MAX, g / RGB_MAX, b / RGB_MAX

    k = 1.0 - np.maximum(np.maximum(r, g), b)
    black = k == 1.0
    safe_denom = np.where(black, 1.0, 1.0 - k)

    c = np.where(black, 0.0, np_clamp01((1.0 - r - k) / safe_denom))
    m = np.where(black, 0.0, np_clamp01((1.0 - g - k) / safe_denom))
    y = np.where(black, 0.0, np_clamp01((1.0 - b - k) / safe_denom))

    return np.stack([c * PERCENT_MAX, m * PERCENT_MAX, y * PERCENT_MAX, k * PERCENT_MAX, alpha], axis=-1)
