"""
Chromashift Color Space Conversions
===================================

Conversions between hex strings, RGBA, HSLA, HSVA and CMYKA, with scalar
functions for single colors and vectorized (numpy) twins for batches.

Conversion Functions
-------------------

Hex ↔ RGBA:
    hex_to_rgba(hex_str, alpha_first=False)
        Parse ``#RRGGBB``, ``#RRGGBBAA`` or ``#AARRGGBB``
    rgba_to_hex(color, alpha_first=False)
        Format as lowercase hex, with the alpha byte when alpha is given

RGBA → HSLA / HSVA / CMYKA:
    rgba_to_hsla(color), np_rgba_to_hsla(color)
    rgba_to_hsva(color), np_rgba_to_hsva(color)
    rgba_to_cmyka(color), np_rgba_to_cmyka(color)

HSLA / HSVA / CMYKA → RGBA:
    hsla_to_rgba(color), np_hsla_to_rgba(color)
    hsva_to_rgba(color), np_hsva_to_rgba(color)
    cmyka_to_rgba(color), np_cmyka_to_rgba(color)

High-Level API
-------------
    convert(color, from_space, to_space, alpha_first=False)
        Universal converter routed through RGBA

Ranges
------
    r, g, b: integers 0-255
    a: 0.0-1.0 (defaults to 1.0 when omitted)
    h: degrees 0-360
    s, l, v, c, m, y, k: percent 0-100

Examples
--------
>>> from chromashift.conversions import rgba_to_hsla, hsla_to_rgba
>>> rgba_to_hsla((255, 0, 0))
HSLA(h=0.0, s=100.0, l=50.0, a=1.0)
>>> hsla_to_rgba((120.0, 100.0, 50.0, 0.5))
RGBA(r=0, g=255, b=0, a=0.5)
"""

from .hex import hex_to_rgba, rgba_to_hex

from .to_hsl import rgba_to_hsla, np_rgba_to_hsla
from .to_hsv import rgba_to_hsva, np_rgba_to_hsva
from .to_cmyk import rgba_to_cmyka, np_rgba_to_cmyka

from .to_rgb import (
    hsla_to_rgba,
    hsva_to_rgba,
    cmyka_to_rgba,
    np_hsla_to_rgba,
    np_hsva_to_rgba,
    np_cmyka_to_rgba,
)

from .wrapper import convert

__all__ = [
    # Hex
    'hex_to_rgba',
    'rgba_to_hex',

    # RGBA → others
    'rgba_to_hsla',
    'rgba_to_hsva',
    'rgba_to_cmyka',
    'np_rgba_to_hsla',
    'np_rgba_to_hsva',
    'np_rgba_to_cmyka',

    # others → RGBA
    'hsla_to_rgba',
    'hsva_to_rgba',
    'cmyka_to_rgba',
    'np_hsla_to_rgba',
    'np_hsva_to_rgba',
    'np_cmyka_to_rgba',

    # High-level API
    'convert',
]
