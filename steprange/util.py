"""Numeric constants and input checks for steprange.

The constants act as the library's configuration.
"""

import math
import numbers
import sys
from typing import Any

# Stop bound used when Range() is called without arguments
DEFAULT_STOP = 10

# Units of float rounding error forgiven when snapping to the step grid
ULP_SLACK = 4

_TEXT_TYPES = (str, bytes, bytearray, bool)


def is_finite_real(value: Any) -> bool:
    """Return True for real numbers that are neither NaN nor infinite."""
    if isinstance(value, _TEXT_TYPES) or not isinstance(value, numbers.Real):
        return False
    # ints and Fractions may exceed float range but are always finite
    if isinstance(value, numbers.Rational):
        return True
    return math.isfinite(value)


def is_rational(*values: Any) -> bool:
    """True when every value supports exact arithmetic (int, Fraction)."""
    return all(
        isinstance(v, numbers.Rational) and not isinstance(v, bool) for v in values
    )


def check_number(value: Any, name: str) -> None:
    """Validate one range input.

    Raises:
        TypeError: If value is text or a boolean
        ValueError: If value is not a real number, or is NaN/infinite
    """
    if isinstance(value, _TEXT_TYPES):
        raise TypeError(
            f"Range inputs must be numbers, got {type(value).__name__} "
            f"for {name}: {value!r}\n"
            f"Hint: convert first, e.g. Range(1, 10, float('2'))"
        )
    if not is_finite_real(value):
        raise ValueError(
            f"All range inputs must be valid numbers.\n"
            f"Got {name}={value!r} ({type(value).__name__}); "
            f"expected a finite int, float or Fraction"
        )


def grid_tolerance(start: float, stop: float, stride: float, ratio: float) -> float:
    """Slack allowed around an integer step count.

    Covers the representation error of the operands relative to the stride
    plus the rounding of the division itself.
    """
    spread = (abs(start) + abs(stop)) / abs(stride)
    return ULP_SLACK * sys.float_info.epsilon * (spread + abs(ratio) + 1)


def check_float_mix(values: dict[str, Any]) -> None:
    """Reject integers too large to combine with a float input.

    Raises:
        ValueError: If a float is present and another input overflows a float
    """
    if is_rational(*values.values()):
        return
    for name, value in values.items():
        try:
            float(value)
        except OverflowError:
            raise ValueError(
                f"All range inputs must be valid numbers.\n"
                f"Got {name}={value!r}, too large to step by a float; "
                f"use int or Fraction bounds and step instead"
            ) from None
