from typing import Any, Tuple
from collections.abc import Sequence

from numpy import ndarray


def is_color_sequence(element: Any) -> bool:
    """Lists, tuples and 1-D arrays of channels; strings do not count."""
    if isinstance(element, ndarray):
        return element.ndim == 1
    return isinstance(element, Sequence) and not isinstance(element, (str, bytes))


def get_dimension(element: Any) -> int:
    if element is None:
        return 0
    if is_color_sequence(element):
        return len(element)
    return 1


def channels(element: Any, count: int = 4) -> Tuple[Any, ...]:
    """First ``count`` items of a channel sequence, padded with None."""
    values = tuple(element)[:count] if is_color_sequence(element) else ()
    return values + (None,) * (count - len(values))
