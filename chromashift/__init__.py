"""Chromashift: color conversions between hex, RGBA, HSLA, HSVA and CMYKA."""

from .types.color_types import RGBA, HSLA, HSVA, CMYKA
from .errors import (
    ChromashiftError,
    InvalidInput,
    InvalidFormat,
    AchromaticShortcutWarning,
)
from .validation import check_rgb, check_alpha, check_hue, check_percentage
from .conversions import (
    hex_to_rgba,
    rgba_to_hex,
    rgba_to_hsla,
    hsla_to_rgba,
    rgba_to_hsva,
    hsva_to_rgba,
    rgba_to_cmyka,
    cmyka_to_rgba,
    np_rgba_to_hsla,
    np_hsla_to_rgba,
    np_rgba_to_hsva,
    np_hsva_to_rgba,
    np_rgba_to_cmyka,
    np_cmyka_to_rgba,
    convert,
)
from .harmony import complementary, np_complementary

__version__ = "1.0.0"

__all__ = [
    # records
    "RGBA",
    "HSLA",
    "HSVA",
    "CMYKA",
    # errors
    "ChromashiftError",
    "InvalidInput",
    "InvalidFormat",
    "AchromaticShortcutWarning",
    # validators
    "check_rgb",
    "check_alpha",
    "check_hue",
    "check_percentage",
    # conversions
    "hex_to_rgba",
    "rgba_to_hex",
    "rgba_to_hsla",
    "hsla_to_rgba",
    "rgba_to_hsva",
    "hsva_to_rgba",
    "rgba_to_cmyka",
    "cmyka_to_rgba",
    "np_rgba_to_hsla",
    "np_hsla_to_rgba",
    "np_rgba_to_hsva",
    "np_hsva_to_rgba",
    "np_rgba_to_cmyka",
    "np_cmyka_to_rgba",
    "convert",
    # harmony
    "complementary",
    "np_complementary",
    "__version__",
]
