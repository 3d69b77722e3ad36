"""
Reverse conversions: HSLA, HSVA and CMYKA back to RGBA.

RGB channels are truncated toward zero, not rounded. Zero saturation in HSL
and HSV returns white whatever the lightness or value; an
``AchromaticShortcutWarning`` is emitted when that white is not the exact
answer.
"""
import math
import warnings

import numpy as np
from numpy import ndarray as NDArray

from ..errors import AchromaticShortcutWarning
from ..types.color_types import RGBA, CMYKALike, HSLALike, HSVALike, element_to_array
from ..types.format_type import HUE_MAX, PERCENT_MAX, RGB_MAX
from ..utils.default import alpha_or_default
from ..validation import (
    CMYK_CHANNELS, HSL_CHANNELS, HSV_CHANNELS,
    np_split_channels, validate_cmyka, validate_hsla, validate_hsva,
)


def _warn_achromatic(space: str, level_name: str, stacklevel: int = 3) -> None:
    warnings.warn(
        f"{space} with zero saturation and {level_name} below 100 maps to white",
        AchromaticShortcutWarning,
        stacklevel=stacklevel,
    )

def _white(alpha: float) -> RGBA:
    return RGBA(RGB_MAX, RGB_MAX, RGB_MAX, alpha)

def _to_channel(x: float) -> int:
    return int(x * RGB_MAX)

## HSLA to RGBA conversions

def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0.0:
        t += 1.0
    if t > 1.0:
        t -= 1.0
    if t < 1.0 / 6.0:
        return p + (q - p) * 6.0 * t
    if t < 1.0 / 2.0:
        return q
    if t < 2.0 / 3.0:
        return p + (q - p) * (2.0 / 3.0 - t) * 6.0
    return p

def hsla_to_rgba(color: HSLALike) -> RGBA:
    """
    Convert HSLA to RGBA.

    Args:
        color: (h, s, l[, a]) with h in [0, 360], s and l in [0, 100], a in [0, 1]

    Returns:
        RGBA with channels truncated to integers in [0, 255]
    """
    hsla = validate_hsla(color)
    a = alpha_or_default(hsla.a)
    h, s, l = hsla.h / HUE_MAX, hsla.s / PERCENT_MAX, hsla.l / PERCENT_MAX

    if s == 0.0:
        if l < 1.0:
            _warn_achromatic("hsl", "lightness")
        return _white(a)

    q = l * (1.0 + s) if l < 0.5 else l + s - l * s
    p = 2.0 * l - q

    r = _hue_to_channel(p, q, h + 1.0 / 3.0)
    g = _hue_to_channel(p, q, h)
    b = _hue_to_channel(p, q, h - 1.0 / 3.0)

    return RGBA(_to_channel(r), _to_channel(g), _to_channel(b), a)

def _np_hue_to_channel(p: NDArray, q: NDArray, t: NDArray) -> NDArray:
    t = np.where(t < 0.0, t + 1.0, t)
    t = np.where(t > 1.0, t - 1.0, t)
    return np.select(
        [t < 1.0 / 6.0, t < 1.0 / 2.0, t < 2.0 / 3.0],
        [p + (q - p) * 6.0 * t, q, p + (q - p) * (2.0 / 3.0 - t) * 6.0],
        p,
    )

def np_hsla_to_rgba(color: NDArray) -> NDArray:
    """
    Vectorized: Convert HSLA to RGBA.

    Args:
        color: array-like of shape (..., 3) or (..., 4)

    Returns:
        rgba: float array of shape (..., 4) with integer-valued r, g, b
    """
    (h, s, l), alpha = np_split_channels(element_to_array(color), "hsla", "hsl", HSL_CHANNELS)
    h, s, l = h / HUE_MAX, s / PERCENT_MAX, l / PERCENT_MAX

    achromatic = s == 0.0
    if np.any(achromatic & (l < 1.0)):
        _warn_achromatic("hsl", "lightness")

    q = np.where(l < 0.5, l * (1.0 + s), l + s - l * s)
    p = 2.0 * l - q

    rgb = np.stack([
        _np_hue_to_channel(p, q, h + 1.0 / 3.0),
        _np_hue_to_channel(p, q, h),
        _np_hue_to_channel(p, q, h - 1.0 / 3.0),
    ], axis=-1)
    rgb = np.where(achromatic[..., None], 1.0, rgb)

    return np.concatenate([np.trunc(rgb * RGB_MAX), alpha[..., None]], axis=-1)

## HSVA to RGBA conversions

def hsva_to_rgba(color: HSVALike) -> RGBA:
    """
    Convert HSVA to RGBA.

    Args:
        color: (h, s, v[, a]) with h in [0, 360], s and v in [0, 100], a in [0, 1]

    Returns:
        RGBA with channels truncated to integers in [0, 255]
    """
    hsva = validate_hsva(color)
    a = alpha_or_default(hsva.a)
    h, s, v = hsva.h / HUE_MAX, hsva.s / PERCENT_MAX, hsva.v / PERCENT_MAX

    if s == 0.0:
        if v < 1.0:
            _warn_achromatic("hsv", "value")
        return _white(a)

    i = math.floor(h * 6.0)
    f = h * 6.0 - i
    p = v * (1.0 - s)
    q = v * (1.0 - f * s)
    t = v * (1.0 - (1.0 - f) * s)

    sectors = (
        (v, t, p),
        (q, v, p),
        (p, v, t),
        (p, q, v),
        (t, p, v),
        (v, p, q),
    )
    r, g, b = sectors[i % 6]

    return RGBA(_to_channel(r), _to_channel(g), _to_channel(b), a)

def np_hsva_to_rgba(color: NDArray) -> NDArray:
    """
    Vectorized: Convert HSVA to RGBA.

    Args:
        color: array-like of shape (..., 3) or (..., 4)

    Returns:
        rgba: float array of shape (..., 4) with integer-valued r, g, b
    """
    (h, s, v), alpha = np_split_channels(element_to_array(color), "hsva", "hsv", HSV_CHANNELS)
    h, s, v = h / HUE_MAX, s / PERCENT_MAX, v / PERCENT_MAX

    achromatic = s == 0.0
    if np.any(achromatic & (v < 1.0)):
        _warn_achromatic("hsv", "value")

    i = np.floor(h * 6.0)
    f = h * 6.0 - i
    p = v * (1.0 - s)
    q = v * (1.0 - f * s)
    t = v * (1.0 - (1.0 - f) * s)
    sector = i.astype(int) % 6

    masks = [sector == n for n in range(5)]
    r = np.select(masks, [v, q, p, p, t], v)
    g = np.select(masks, [t, v, v, q, p], p)
    b = np.select(masks, [p, p, t, v, v], q)

    rgb = np.stack([r, g, b], axis=-1)
    rgb = np.where(achromatic[..., None], 1.0, rgb)

    return np.concatenate([np.trunc(rgb * RGB_MAX), alpha[..., None]], axis=-1)

## CMYKA to RGBA conversions

def cmyka_to_rgba(color: CMYKALike) -> RGBA:
    """
    Convert CMYKA to RGBA.

    Args:
        color: (c, m, y, k[, a]) with c, m, y, k in [0, 100] and a in [0, 1]

    Returns:
        RGBA with channels truncated to integers in [0, 255]
    """
    cmyka = validate_cmyka(color)
    a = alpha_or_default(cmyka.a)
    c, m, y, k = (x / PERCENT_MAX for x in cmyka[:4])

    r = (1.0 - c) * (1.0 - k)
    g = (1.0 - m) * (1.0 - k)
    b = (1.0 - y) * (1.0 - k)

    return RGBA(_to_channel(r), _to_channel(g), _to_channel(b), a)

def np_cmyka_to_rgba(color: NDArray) -> NDArray:
    """
    Vectorized: Convert CMYKA to RGBA.

    Args:
        color: array-like of shape (..., 4) or (..., 5)

    Returns:
        rgba: float array of shape (..., 4) with integer-valued r, g, b
    """
    (c, m, y, k), alpha = np_split_channels(element_to_array(color), "cmyka", "cmyk", CMYK_CHANNELS)
    c, m, y, k = c / PERCENT_MAX, m / PERCENT_MAX, y / PERCENT_MAX, k / PERCENT_MAX

    rgb = np.stack([(1.0 - c) * (1.0 - k), (1.0 - m) * (1.0 - k), (1.0 - y) * (1.0 - k)], axis=-1)

    return np.concatenate([np.trunc(rgb * RGB_MAX), alpha[..., None]], axis=-1)
