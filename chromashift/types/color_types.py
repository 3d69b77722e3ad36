from __future__ import annotations
from typing import Literal, NamedTuple, Optional, Tuple, Union
import numpy as np
from numpy import ndarray


class RGBA(NamedTuple):
    """Red, green, blue in ``[0, 255]`` plus optional alpha in ``[0, 1]``."""
    r: int
    g: int
    b: int
    a: Optional[float] = None


class HSLA(NamedTuple):
    """Hue in degrees, saturation and lightness in percent, optional alpha."""
    h: float
    s: float
    l: float
    a: Optional[float] = None


class HSVA(NamedTuple):
    """Hue in degrees, saturation and value in percent, optional alpha."""
    h: float
    s: float
    v: float
    a: Optional[float] = None


class CMYKA(NamedTuple):
    """Cyan, magenta, yellow and key in percent, optional alpha."""
    c: float
    m: float
    y: float
    k: float
    a: Optional[float] = None


RGBALike = Union[RGBA, Tuple[int, int, int], Tuple[int, int, int, Optional[float]]]
HSLALike = Union[HSLA, Tuple[float, float, float], Tuple[float, float, float, Optional[float]]]
HSVALike = Union[HSVA, Tuple[float, float, float], Tuple[float, float, float, Optional[float]]]
CMYKALike = Union[
    CMYKA,
    Tuple[float, float, float, float],
    Tuple[float, float, float, float, Optional[float]],
]
ColorElement = Union[str, RGBALike, HSLALike, HSVALike, CMYKALike]
ColorSpace = Literal["hex", "rgba", "hsla", "hsva", "cmyka"]
COLOR_SPACES = ("hex", "rgba", "hsla", "hsva", "cmyka")

# Records are built from plain tuples that may omit the trailing alpha
record_classes = {
    "rgba": RGBA,
    "hsla": HSLA,
    "hsva": HSVA,
    "cmyka": CMYKA,
}


def as_record(element, space: ColorSpace):
    """
    Build the named record for ``space`` from a tuple or an existing record.

    Args:
        element: Tuple of components, with or without the trailing alpha
        space: One of the tuple-valued color spaces

    Returns:
        The matching NamedTuple instance
    """
    cls = record_classes[space]
    if isinstance(element, cls):
        return element
    values = tuple(element)
    base_len = len(cls._fields) - 1
    if len(values) not in (base_len, base_len + 1):
        raise ValueError(
            f"{space} expects {base_len} or {base_len + 1} components, got {len(values)}"
        )
    return cls(*values)


def element_to_array(element: Union[ndarray, list, tuple]) -> np.ndarray:
    """
    Convert a batch of color tuples to a float numpy array.

    Args:
        element: Nested sequence or already an ndarray

    Returns:
        numpy array with dtype float64
    """
    if isinstance(element, ndarray) and element.dtype == np.float64:
        return element
    return np.asarray(element, dtype=float)

