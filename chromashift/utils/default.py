from typing import Optional, TypeVar
from ..types.format_type import DEFAULT_ALPHA

T = TypeVar('T')

def value_or_default(value: Optional[T], default: T) -> T:
    """Return the value if it is not None, otherwise return the default."""
    return value if value is not None else default

def alpha_or_default(alpha: Optional[float]) -> float:
    """Resolve an omitted alpha to fully opaque."""
    return value_or_default(alpha, DEFAULT_ALPHA)
