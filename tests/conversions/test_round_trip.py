from chromashift.conversions import (
    cmyka_to_rgba,
    hsla_to_rgba,
    hsva_to_rgba,
    rgba_to_cmyka,
    rgba_to_hsla,
    rgba_to_hsva,
)
from tests.samples import chromatic_rgba

# truncation loses at most one step per channel
rgb_tolerance = 1


def _assert_close(original, result):
    for c_in, c_out in zip(original[:3], result[:3]):
        assert abs(c_in - c_out) <= rgb_tolerance
    assert result[3] == original[3]

def test_round_trip_rgba_hsla():
    for rgba in chromatic_rgba:
        _assert_close(rgba, hsla_to_rgba(rgba_to_hsla(rgba)))

def test_round_trip_rgba_hsva():
    for rgba in chromatic_rgba:
        _assert_close(rgba, hsva_to_rgba(rgba_to_hsva(rgba)))

def test_round_trip_rgba_cmyka():
    for rgba in chromatic_rgba:
        _assert_close(rgba, cmyka_to_rgba(rgba_to_cmyka(rgba)))

def test_round_trip_exhaustive_hue_wheel():
    # every step of the red -> yellow -> ... -> magenta edges
    for x in range(0, 256, 5):
        for rgba in [(255, x, 0, 1.0), (x, 255, 0, 1.0), (0, 255, x, 1.0), (0, x, 255, 1.0), (x, 0, 255, 1.0), (255, 0, x, 1.0)]:
            _assert_close(rgba, hsla_to_rgba(rgba_to_hsla(rgba)))
            _assert_close(rgba, hsva_to_rgba(rgba_to_hsva(rgba)))
