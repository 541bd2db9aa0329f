"""
Precision rounding of drawn values.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from decimal import ROUND_HALF_UP, Context, Decimal


def round_half_up(value: float, precision: int) -> float:
    """
    Round ``value`` to ``precision`` decimal digits, ties away from zero.

    The value is scaled by ``10**precision``, rounded half-up and scaled
    back. Scaling works on the shortest decimal representation of the float
    (its ``repr``), so ``round_half_up(2.345, 2)`` gives ``2.35`` even though
    the binary value of ``2.345`` is slightly below the tie.

    Ties go away from zero on both sides, so ``round_half_up(-0.5, 0)`` is
    ``-1.0``. A ceiling-biased ``floor(x * 10**p + 0.5)`` would give ``0.0``
    there; negative values here mirror positive ones instead.

    Parameters
    ----------
    value : float
        Value to round. NaN and infinities are returned unchanged.
    precision : int
        Non-negative number of decimal digits.

    Returns
    -------
    float
        Rounded value.
    """
    if not math.isfinite(value):
        return value

    exact = Decimal(repr(float(value)))
    quantum = Decimal(1).scaleb(-precision)
    # Enough significant digits for the integer part plus the kept fraction.
    context = Context(prec=max(exact.adjusted(), 0) + precision + 2)
    return float(exact.quantize(quantum, rounding=ROUND_HALF_UP, context=context))


__all__ = ["round_half_up"]
