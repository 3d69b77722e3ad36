import numpy as np


def clamp01(value: float) -> float:
    """Clamp to the inclusive range ``[0, 1]``; absorbs last-bit rounding in derived components."""
    return min(max(value, 0.0), 1.0)

def np_clamp01(values: np.ndarray) -> np.ndarray:
    """Vectorized: clamp to ``[0, 1]``."""
    return np.clip(values, 0.0, 1.0)
