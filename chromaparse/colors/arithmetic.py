import logging
from typing import Any, Callable, Dict, Sequence, Union

import numpy as np

from ..types.color_types import ColorArray, ColorOperator, ColorSpace
from ..types.format_type import COMBINE_OPERATORS, RGB_RANGE
from ..utils import cubic_bezier, finite_float, is_color_sequence, is_num, parabola
from .color_base import builder_for, color_array, default_color

logger = logging.getLogger(__name__)

Strength = Union[float, Sequence[float]]

CONTRAST_CURVE = (0, -3.465, 3.465, 0)


def np_div_safe(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Element-wise division that yields 0 wherever either operand is 0."""
    out = np.zeros(np.broadcast(a, b).shape, dtype=float)
    return np.divide(a, b, out=out, where=(a != 0) & (b != 0))


OPERATORS: Dict[str, Callable[[np.ndarray, np.ndarray], np.ndarray]] = dict(
    zip(COMBINE_OPERATORS, (np.add, np.subtract, np.multiply, np_div_safe))
)


def combine_ca(c1: Any, c2: Any, operator: ColorOperator, color_space: Any = ColorSpace.RGB) -> ColorArray:
    """
    Combine two color tuples channel by channel.

    Only the first three channels take part; alpha is carried over from
    ``c1``. Channels of ``c2`` that are not numbers leave the matching
    channel of ``c1`` untouched. The result is normalized by the builder of
    ``color_space``, so hue wraps and everything else is clamped.

    Degrades to identity instead of failing: a missing ``c1`` gives ``c2``
    (or the space default), a missing ``c2`` or an unknown operator gives
    ``c1`` unchanged.
    """
    space = ColorSpace.coerce(color_space)
    if not is_color_sequence(c1):
        return tuple(c2) if is_color_sequence(c2) else default_color(space)  # type: ignore[return-value]
    known = isinstance(operator, str) and operator in OPERATORS
    if not is_color_sequence(c2) or not known:
        if not known:
            logger.debug("Unknown combine operator %r, keeping first operand", operator)
        return tuple(c1)  # type: ignore[return-value]

    base = color_array(space, c1)
    other = list(c2)[:3]
    other += [None] * (3 - len(other))
    valid = np.array([is_num(v) for v in other])
    a = np.array(base[:3], dtype=float)
    b = np.array([finite_float(v) if is_num(v) else 0.0 for v in other], dtype=float)

    result = np.where(valid, OPERATORS[operator](a, b), a)
    return builder_for(space)(*result.tolist(), base[3])


def _make_combiner(operator: ColorOperator, color_space: ColorSpace) -> Callable[[Any, Any], ColorArray]:
    def combiner(c1: Any, c2: Any) -> ColorArray:
        return combine_ca(c1, c2, operator, color_space)

    combiner.__doc__ = f"Combine two {color_space.value} tuples with '{operator}'."
    return combiner


add_rgb, sub_rgb, mult_rgb, div_rgb = (_make_combiner(op, ColorSpace.RGB) for op in OPERATORS)
add_hsl, sub_hsl, mult_hsl, div_hsl = (_make_combiner(op, ColorSpace.HSL) for op in OPERATORS)


def _strengths(strength: Strength) -> list[float]:
    if is_color_sequence(strength):
        values = list(strength)[:3]  # type: ignore[arg-type]
        values += [0] * (3 - len(values))
    else:
        values = [strength] * 3
    return [finite_float(v) if is_num(v) else 0.0 for v in values]


def _apply_curve(rgba: Any, strength: Strength, curve: Callable[[float, int], float]) -> ColorArray:
    base = color_array(ColorSpace.RGB, rgba)
    strengths = _strengths(strength)
    if not any(strengths):
        return base
    deltas = [
        curve(base[i], RGB_RANGE[i]) * s if s else 0.0
        for i, s in enumerate(strengths)
    ]
    return combine_ca(base, deltas, "+", ColorSpace.RGB)


def adjust_tone(rgba: Any, strength: Strength) -> ColorArray:
    """
    Lift (positive strength) or sink (negative strength) mid-range channel
    values along a parabola; channels at 0 or 255 stay where they are.

    ``strength`` is one number for all channels or one per red, green and
    blue. Values roughly within [-1, 1] are useful.
    """
    return _apply_curve(rgba, strength, lambda v, top: parabola(v, 0, top) * top)


def adjust_brightness(rgba: Any, strength: float) -> ColorArray:
    """
    Tone with the same strength on red, green and blue.

    ``strength`` must be a single number; anything else, sequences
    included, counts as 0 and leaves the color unchanged.
    """
    return adjust_tone(rgba, strength if is_num(strength) else 0.0)


def adjust_contrast(rgba: Any, strength: Strength) -> ColorArray:
    """
    S-curve contrast: darks get darker and lights get lighter for positive
    strength, the other way around for negative strength.
    """
    return _apply_curve(rgba, strength, lambda v, top: cubic_bezier(v, 0, top, *CONTRAST_CURVE))
