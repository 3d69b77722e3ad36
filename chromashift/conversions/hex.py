import re

from ..errors import InvalidFormat
from ..types.color_types import RGBA, RGBALike
from ..types.format_type import RGB_MAX
from ..validation import validate_rgba

# int(s, 16) tolerates signs, underscores, whitespace and "0x"; digits only here
HEX_DIGITS_RE = re.compile(r"[0-9a-fA-F]{6}|[0-9a-fA-F]{8}")


def hex_to_rgba(hex_str: str, alpha_first: bool = False) -> RGBA:
    """
    Parse a 6 or 8 digit hex string into RGBA.

    Args:
        hex_str: ``RRGGBB`` or 8 digits with an alpha byte, optional leading ``#``
        alpha_first: Read 8 digit strings as ``AARRGGBB`` instead of ``RRGGBBAA``

    Returns:
        RGBA with alpha normalized to [0, 1] (1.0 for the 6 digit form)
    """
    if not isinstance(hex_str, str):
        raise InvalidFormat(hex_str)
    digits = hex_str[1:] if hex_str.startswith("#") else hex_str
    if not HEX_DIGITS_RE.fullmatch(digits):
        raise InvalidFormat(hex_str)

    num = int(digits, 16)
    if len(digits) == 6:
        return RGBA((num >> 16) & 0xFF, (num >> 8) & 0xFF, num & 0xFF, 1.0)

    if alpha_first:
        a = (num >> 24) & 0xFF
        r, g, b = (num >> 16) & 0xFF, (num >> 8) & 0xFF, num & 0xFF
    else:
        r, g, b = (num >> 24) & 0xFF, (num >> 16) & 0xFF, (num >> 8) & 0xFF
        a = num & 0xFF
    return RGBA(r, g, b, a / RGB_MAX)


def _byte_to_hex(n: int) -> str:
    return format(n, "02x")


def rgba_to_hex(color: RGBALike, alpha_first: bool = False) -> str:
    """
    Format RGBA as a lowercase hex string.

    Without alpha the result is ``#rrggbb``. With alpha the byte is
    ``round(a * 255)`` and placed first or last according to ``alpha_first``.
    """
    rgba = validate_rgba(color)
    rgb = "".join(_byte_to_hex(int(c)) for c in rgba[:3])
    if rgba.a is None:
        return f"#{rgb}"

    alpha = _byte_to_hex(round(rgba.a * RGB_MAX))
    if alpha_first:
        return f"#{alpha}{rgb}"
    return f"#{rgb}{alpha}"
