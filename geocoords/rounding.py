"""Half-down decimal rounding used by every formatter.

Ties round toward zero (``2.5 -> 2``, ``-2.5 -> -2``) rather than to even or
away from zero. Values are rounded from their shortest repr, so ``0.125`` is
treated as the exact tie it prints as.
"""

from decimal import ROUND_HALF_DOWN, Context, Decimal

_CONTEXT = Context(prec=60, rounding=ROUND_HALF_DOWN)


def round_half_down(value: float, precision: int) -> float:
    """Round a float to ``precision`` decimal places, ties toward zero.

    Negative precision rounds to tens, hundreds, and so on.

    Args:
        value: Finite value to round.
        precision: Number of decimal places.

    Returns:
        The rounded value.
    """
    quantum = Decimal(1).scaleb(-precision)
    rounded = Decimal(repr(float(value))).quantize(
        quantum, rounding=ROUND_HALF_DOWN, context=_CONTEXT
    )
    return float(rounded)


def format_fixed(value: float, precision: int) -> str:
    """Round half-down and render with exactly ``precision`` decimals."""
    return f"{round_half_down(value, precision):.{max(precision, 0)}f}"


def resolve_precision(precision: int, default: int) -> int:
    """Map the ``-1`` sentinel (or any negative value) to ``default``."""
    return precision if precision > -1 else default
