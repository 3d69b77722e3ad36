from typing import Sequence, Tuple, TypeVar

T = TypeVar('T')


def max_with_index(values: Sequence[T]) -> Tuple[T, int]:
    """
    Return the largest element and its index.

    Only a strictly greater element replaces the current candidate, so the
    first maximal element wins on ties.
    """
    if not values:
        raise ValueError("max_with_index() arg is an empty sequence")
    result, index = values[0], 0
    for i in range(1, len(values)):
        if values[i] > result:
            result, index = values[i], i
    return result, index


def min_with_index(values: Sequence[T]) -> Tuple[T, int]:
    """Return the smallest element and its index; the first minimal element wins."""
    if not values:
        raise ValueError("min_with_index() arg is an empty sequence")
    result, index = values[0], 0
    for i in range(1, len(values)):
        if values[i] < result:
            result, index = values[i], i
    return result, index
