from chromashift.conversions import (
    cmyka_to_rgba,
    hsla_to_rgba,
    hsva_to_rgba,
    np_cmyka_to_rgba,
    np_hsla_to_rgba,
    np_hsva_to_rgba,
    np_rgba_to_cmyka,
    np_rgba_to_hsla,
    np_rgba_to_hsva,
    rgba_to_cmyka,
    rgba_to_hsla,
    rgba_to_hsva,
)
from chromashift.errors import AchromaticShortcutWarning, InvalidInput
from tests.samples import chromatic_rgba, samples_rgba_hsla
import numpy as np
import pytest

# chromatic plus gray, black and white
the_matrix = np.array(chromatic_rgba + [(0, 0, 0, 1.0), (255, 255, 255, 0.5), (128, 128, 128, 1.0)], dtype=float)


def test_np_rgba_to_hsla_matches_scalar():
    result = np_rgba_to_hsla(the_matrix)
    expected = np.array([rgba_to_hsla(tuple(int(c) for c in row[:3]) + (row[3],)) for row in the_matrix])
    assert result.shape == (len(the_matrix), 4)
    assert np.allclose(result, expected, atol=1e-9)

def test_np_rgba_to_hsva_matches_scalar():
    result = np_rgba_to_hsva(the_matrix)
    expected = np.array([rgba_to_hsva(tuple(int(c) for c in row[:3]) + (row[3],)) for row in the_matrix])
    assert np.allclose(result, expected, atol=1e-9)

def test_np_rgba_to_cmyka_matches_scalar():
    result = np_rgba_to_cmyka(the_matrix)
    expected = np.array([rgba_to_cmyka(tuple(int(c) for c in row[:3]) + (row[3],)) for row in the_matrix])
    assert result.shape == (len(the_matrix), 5)
    assert not np.isnan(result).any()
    assert np.allclose(result, expected, atol=1e-9)

def test_np_implicit_alpha():
    rgb = np.array(list(samples_rgba_hsla.keys()))
    expected = np.array(list(samples_rgba_hsla.values()))
    hsla = np_rgba_to_hsla(rgb)
    assert np.allclose(hsla[..., :3], expected, atol=1e-9)
    assert np.all(hsla[..., 3] == 1.0)

def test_np_reverse_matches_scalar():
    chromatic = np.array(chromatic_rgba, dtype=float)
    hsla = np_rgba_to_hsla(chromatic)
    hsva = np_rgba_to_hsva(chromatic)
    cmyka = np_rgba_to_cmyka(chromatic)

    assert np.array_equal(np_hsla_to_rgba(hsla), np.array([hsla_to_rgba(tuple(row)) for row in hsla], dtype=float))
    assert np.array_equal(np_hsva_to_rgba(hsva), np.array([hsva_to_rgba(tuple(row)) for row in hsva], dtype=float))
    assert np.array_equal(np_cmyka_to_rgba(cmyka), np.array([cmyka_to_rgba(tuple(row)) for row in cmyka], dtype=float))

def test_np_round_trip():
    chromatic = np.array(chromatic_rgba, dtype=float)
    for forward, backward in [(np_rgba_to_hsla, np_hsla_to_rgba), (np_rgba_to_hsva, np_hsva_to_rgba)]:
        result = backward(forward(chromatic))
        assert np.all(np.abs(result[..., :3] - chromatic[..., :3]) <= 1)
        assert np.array_equal(result[..., 3], chromatic[..., 3])

def test_np_preserves_leading_shape():
    grid = the_matrix[:6].reshape(2, 3, 4)
    assert np_rgba_to_hsva(grid).shape == (2, 3, 4)
    assert np_rgba_to_cmyka(grid).shape == (2, 3, 5)

def test_np_achromatic_shortcut():
    with pytest.warns(AchromaticShortcutWarning):
        result = np_hsla_to_rgba(np.array([[0.0, 0.0, 50.0, 1.0], [0.0, 100.0, 50.0, 1.0]]))
    assert np.array_equal(result, [[255, 255, 255, 1.0], [255, 0, 0, 1.0]])

    with pytest.warns(AchromaticShortcutWarning):
        result = np_hsva_to_rgba(np.array([[0.0, 0.0, 50.0]]))
    assert np.array_equal(result, [[255, 255, 255, 1.0]])

def test_np_rejects_out_of_range():
    with pytest.raises(InvalidInput, match="r=256"):
        np_rgba_to_hsla([[0, 0, 0], [256, 0, 0]])
    with pytest.raises(InvalidInput):
        np_rgba_to_hsva([[1.5, 0, 0]])
    with pytest.raises(InvalidInput, match="alpha"):
        np_rgba_to_cmyka([[0, 0, 0, 1.5]])
    with pytest.raises(InvalidInput, match="h"):
        np_hsva_to_rgba([[361.0, 0.0, 0.0]])
    with pytest.raises(InvalidInput):
        np_cmyka_to_rgba([[np.nan, 0.0, 0.0, 0.0]])

def test_np_rejects_bad_shape():
    with pytest.raises(ValueError, match="last dimension"):
        np_rgba_to_hsla(np.zeros((3, 2)))
    with pytest.raises(ValueError, match="last dimension"):
        np_cmyka_to_rgba(np.zeros((3, 3)))
