"""Print one sample result for every conversion.

Run directly with:
    python -m chromashift
"""
from .conversions import (
    cmyka_to_rgba,
    hex_to_rgba,
    hsla_to_rgba,
    hsva_to_rgba,
    rgba_to_cmyka,
    rgba_to_hex,
    rgba_to_hsla,
    rgba_to_hsva,
)
from .harmony import complementary
from .types.color_types import CMYKA, HSLA, HSVA, RGBA


def main() -> None:
    rgba = RGBA(134, 131, 213, 0.94)
    print("rgba to hex:", rgba_to_hex(rgba, alpha_first=False))
    print("rgba to hsla:", tuple(rgba_to_hsla(rgba)))
    print("rgba to hsva:", tuple(rgba_to_hsva(rgba)))
    print("rgba to cmyka:", tuple(rgba_to_cmyka(rgba)))

    print("hex to rgba:", tuple(hex_to_rgba("8683D5f0", alpha_first=False)))
    print("hsla to rgba:", tuple(hsla_to_rgba(HSLA(242.0, 49.0, 67.0, 0.94))))
    print("hsva to rgba:", tuple(hsva_to_rgba(HSVA(242.0, 39.0, 83.0, 0.94))))
    print("cmyka to rgba:", tuple(cmyka_to_rgba(CMYKA(47.0, 0.0, 16.0, 0.0, 0.94))))

    print("complementary:", tuple(complementary(RGBA(87, 60, 250, 1.0))))


if __name__ == "__main__":
    main()
