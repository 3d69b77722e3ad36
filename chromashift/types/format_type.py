# No dependencies
from enum import Enum


class Domain(str, Enum):
    RGB = "rgb"
    ALPHA = "alpha"
    HUE = "hue"
    PERCENTAGE = "percentage"


RGB_MAX = 255
ALPHA_MAX = 1.0
HUE_MAX = 360.0
PERCENT_MAX = 100.0

DEFAULT_ALPHA = 1.0

# Closed intervals, both ends inclusive
domain_bounds = {
    Domain.RGB: (0, RGB_MAX),
    Domain.ALPHA: (0.0, ALPHA_MAX),
    Domain.HUE: (0.0, HUE_MAX),
    Domain.PERCENTAGE: (0.0, PERCENT_MAX),
}

HUE_SHIFT_COMPLEMENTARY = 180.0
