from typing import List, Optional, Sequence, TypeVar

from .num_utils import is_num

T = TypeVar('T')


def value_or_default(value: Optional[T], default: T) -> T:
    """Return the value if it is a finite number, otherwise return the default."""
    return value if is_num(value) else default


def replace_at_index(values: Sequence[T], value: T, index: int) -> List[T]:
    """Copy of ``values`` with one item replaced; out-of-range indices give a plain copy."""
    if not 0 <= index < len(values):
        return list(values)
    return [*values[:index], value, *values[index + 1:]]
