from typing import Callable, Dict, cast

from ..types.color_types import RGBA, ColorElement, ColorSpace, COLOR_SPACES, as_record
from .hex import hex_to_rgba, rgba_to_hex
from .to_cmyk import rgba_to_cmyka
from .to_hsl import rgba_to_hsla
from .to_hsv import rgba_to_hsva
from .to_rgb import cmyka_to_rgba, hsla_to_rgba, hsva_to_rgba

# Every conversion goes through RGBA
TO_RGBA: Dict[str, Callable[..., RGBA]] = {
    "hsla": hsla_to_rgba,
    "hsva": hsva_to_rgba,
    "cmyka": cmyka_to_rgba,
}

FROM_RGBA: Dict[str, Callable[..., ColorElement]] = {
    "hsla": rgba_to_hsla,
    "hsva": rgba_to_hsva,
    "cmyka": rgba_to_cmyka,
}


def _check_space(space: str) -> ColorSpace:
    space = space.lower()
    if space not in COLOR_SPACES:
        raise ValueError(f"Unknown space: {space}")
    return cast(ColorSpace, space)

def convert(
    color: ColorElement,
    from_space: ColorSpace,
    to_space: ColorSpace,
    alpha_first: bool = False,
) -> ColorElement:
    """
    Convert a color between any two of hex, RGBA, HSLA, HSVA and CMYKA.

    Args:
        color: Hex string or component tuple in ``from_space``
        from_space: Source space
        to_space: Target space
        alpha_first: Byte order for 8 digit hex input and hex output with alpha

    Returns:
        Hex string or named record in ``to_space``
    """
    fs, ts = _check_space(from_space), _check_space(to_space)
    if fs == ts:
        return color  # No conversion needed

    if fs == "hex":
        rgba = hex_to_rgba(cast(str, color), alpha_first)
    elif fs == "rgba":
        rgba = as_record(color, "rgba")
    else:
        rgba = TO_RGBA[fs](color)

    if ts == "hex":
        return rgba_to_hex(rgba, alpha_first)
    if ts == "rgba":
        return rgba
    return FROM_RGBA[ts](rgba)
