import math
from numbers import Real
from typing import Any

from boundednumbers import clamp as _bounded_clamp

FLOAT_LIMIT = 1e300


def is_num(value: Any) -> bool:
    """True for finite real numbers. Booleans are not numbers here."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    # ints are always finite; isfinite overflows on very large ones
    if isinstance(value, int):
        return True
    return math.isfinite(value)


def clamp(value: float, min_value: float, max_value: float) -> float:
    return float(_bounded_clamp(value, min_value, max_value))


def finite_float(value: float, limit: float = FLOAT_LIMIT) -> float:
    """``value`` as a float bounded to ``[-limit, limit]``, safe for huge ints."""
    return clamp(value, -limit, limit)


def div_safe(dividend: float, divisor: float) -> float:
    """Divide, collapsing to 0 when either operand is zero."""
    if not dividend or not divisor:
        return 0
    return dividend / divisor


def map_range(
    value: float,
    input_start: float,
    input_end: float,
    output_start: float,
    output_end: float,
    constrain: bool = False,
) -> float:
    """
    Linearly remap ``value`` from one range onto another.

    Args:
        value: incoming value
        input_start: start of incoming range
        input_end: end of incoming range
        output_start: start of output range
        output_end: end of output range
        constrain: clamp the result to the output range

    Returns:
        The remapped value.
    """
    result = (
        div_safe(value - input_start, input_end - input_start) * (output_end - output_start)
        + output_start
    )
    if not constrain:
        return result
    return clamp(result, min(output_start, output_end), max(output_start, output_end))


def normalize(value: float, range_start: float, range_end: float) -> float:
    return map_range(value, range_start, range_end, 0, 1, True)


def euclidean_modulo(value: float, modulus: float) -> float:
    """Modulo that always lands in ``[0, modulus)``, also for negative values."""
    result = value % modulus
    # float modulo can round up to the modulus itself for tiny negative inputs
    return 0 if result >= modulus else result


def segment_map(value: float, segments: int, min_value: float, max_value: float) -> int:
    """
    Find the segment ``value`` falls into.

    Args:
        value: value of which the segment position is calculated
        segments: amount of segments
        min_value: lowest value in range
        max_value: highest value in range

    Returns:
        Zero based index of the segment.
    """
    position = math.floor(map_range(value, min_value, max_value, 0, segments, True))
    return int(euclidean_modulo(position, segments))


def parabola(x: float, t_min: float = 0, t_max: float = 1) -> float:
    """
    Y-value on a downward parabola peaking at 1 halfway between ``t_min``
    and ``t_max`` and reaching 0 at both ends.
    """
    t = normalize(x, t_min, t_max)
    return -4 * (t - 0.5) ** 2 + 1


def cubic_bezier(
    x: float,
    t_min: float,
    t_max: float,
    y1: float,
    y2: float,
    y3: float,
    y4: float,
) -> float:
    """
    Y-value on a cubic bezier curve at a given X-value.

    Args:
        x: incoming value
        t_min: start of the range ``x`` is normalized against
        t_max: end of the range ``x`` is normalized against
        y1: Y-value of the first control point
        y2: Y-value of the second control point
        y3: Y-value of the third control point
        y4: Y-value of the fourth control point

    Returns:
        Y-value at ``x``, scaled by ``t_max - t_min``.
    """
    t = normalize(x, t_min, t_max)
    y = (
        (1 - t) ** 3 * y1
        + 3 * (1 - t) ** 2 * t * y2
        + 3 * (1 - t) * t ** 2 * y3
        + t ** 3 * y4
    )
    return y * (t_max - t_min)


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def round_float(value: float, precision: int = 1) -> float:
    """Round non-integral floats to ``precision`` decimals; other values pass through."""
    if not is_num(value) or float(value).is_integer():
        return value
    multiplier = 10 ** precision
    return round_half_up(value * multiplier) / multiplier


def format_number(value: float) -> str:
    """Integral values print without a decimal point."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))
