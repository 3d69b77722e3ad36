"""
Range checks shared by every conversion.

All intervals are closed at both ends. A hue of exactly 360.0 is accepted and
behaves like 0.0 in the reverse conversions. NaN and non-numeric values fail
every check.
"""
from numbers import Integral, Real
from typing import Sequence

import numpy as np

from .errors import InvalidInput
from .types.color_types import (
    CMYKA, HSLA, HSVA, RGBA,
    CMYKALike, HSLALike, HSVALike, RGBALike,
    as_record,
)
from .types.format_type import Domain, domain_bounds


def _in_domain(value, domain: Domain) -> bool:
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    lo, hi = domain_bounds[domain]
    return lo <= value <= hi

def check_rgb(value) -> bool:
    if not isinstance(value, Integral):
        return False
    return _in_domain(value, Domain.RGB)

def check_alpha(value) -> bool:
    return _in_domain(value, Domain.ALPHA)

def check_hue(value) -> bool:
    return _in_domain(value, Domain.HUE)

def check_percentage(value) -> bool:
    return _in_domain(value, Domain.PERCENTAGE)


_checks = {
    Domain.RGB: check_rgb,
    Domain.ALPHA: check_alpha,
    Domain.HUE: check_hue,
    Domain.PERCENTAGE: check_percentage,
}


def require(value, domain: Domain, kind: str, component: str) -> None:
    """Raise InvalidInput unless ``value`` lies within ``domain``."""
    if not _checks[domain](value):
        raise InvalidInput(kind, component, value)


RGB_CHANNELS = (("r", Domain.RGB), ("g", Domain.RGB), ("b", Domain.RGB))
HSL_CHANNELS = (("h", Domain.HUE), ("s", Domain.PERCENTAGE), ("l", Domain.PERCENTAGE))
HSV_CHANNELS = (("h", Domain.HUE), ("s", Domain.PERCENTAGE), ("v", Domain.PERCENTAGE))
CMYK_CHANNELS = tuple((name, Domain.PERCENTAGE) for name in ("c", "m", "y", "k"))


def _validate(color, space: str, kind: str, channels):
    # channels first, then alpha
    record = as_record(color, space)
    for name, domain in channels:
        require(getattr(record, name), domain, kind, name)
    if record.a is not None:
        require(record.a, Domain.ALPHA, "alpha", "a")
    return record


def validate_rgba(color: RGBALike) -> RGBA:
    """
    Validate an RGBA color and return it as a record.

    The alpha stays ``None`` when omitted so callers can tell an absent
    alpha from an explicit one.
    """
    return _validate(color, "rgba", "rgb", RGB_CHANNELS)


def validate_hsla(color: HSLALike) -> HSLA:
    return _validate(color, "hsla", "hsl", HSL_CHANNELS)


def validate_hsva(color: HSVALike) -> HSVA:
    return _validate(color, "hsva", "hsv", HSV_CHANNELS)


def validate_cmyka(color: CMYKALike) -> CMYKA:
    return _validate(color, "cmyka", "cmyk", CMYK_CHANNELS)


## Array validation

def np_check_domain(values: np.ndarray, domain: Domain) -> np.ndarray:
    """Vectorized: boolean mask of elements inside ``domain`` (NaN is outside)."""
    lo, hi = domain_bounds[domain]
    return (values >= lo) & (values <= hi)


def np_require(values: np.ndarray, domain: Domain, kind: str, component: str) -> None:
    """Vectorized: raise InvalidInput naming the first out-of-range element."""
    mask = np_check_domain(values, domain)
    if domain == Domain.RGB:
        mask &= values == np.trunc(values)
    if not mask.all():
        bad = values[~mask].flat[0]
        raise InvalidInput(kind, component, float(bad))


def np_split_channels(
    color: np.ndarray,
    space: str,
    kind: str,
    components: Sequence[tuple[str, Domain]],
) -> tuple[list[np.ndarray], np.ndarray]:
    """
    Validate and split an array shaped ``(..., n)`` or ``(..., n + 1)``.

    Args:
        color: Float array of colors
        space: Color space name used in shape errors
        kind: Component family used in InvalidInput messages ("rgb", "hsl", ...)
        components: ``(name, domain)`` for each non-alpha channel, in order

    Returns:
        List of channel arrays and the alpha array (ones when omitted)
    """
    n = len(components)
    if color.ndim == 0 or color.shape[-1] not in (n, n + 1):
        raise ValueError(
            f"{space} expects last dimension to be {n} or {n + 1}, got shape {color.shape}"
        )
    channels = []
    for i, (name, domain) in enumerate(components):
        channel = color[..., i]
        np_require(channel, domain, kind, name)
        channels.append(channel)
    if color.shape[-1] == n + 1:
        alpha = color[..., n]
        np_require(alpha, Domain.ALPHA, "alpha", "a")
    else:
        alpha = np.ones(color.shape[:-1])
    return channels, alpha
