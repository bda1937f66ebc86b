"""Limiting-reagent arithmetic for the 1 A + 1 B -> products reaction.

The functions here are pure and accept either scalars or numpy arrays, so the
same rule drives :class:`~complex_reactor.reactor.ComplexReactor` and
vectorized parameter sweeps.
"""

from __future__ import annotations

import logging
import math
from numbers import Real

import numpy as np
import numpy.typing as npt

from complex_reactor.exceptions import InvalidParameterError

logger = logging.getLogger(__name__)

ArrayOrFloat = float | npt.NDArray[np.float64]


def _to_float(name: str, value: float) -> float:
    """Convert a real, non-boolean number to float or raise InvalidParameterError."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidParameterError(f"{name} must be a real number, got {value!r}")
    try:
        return float(value)
    except OverflowError as exc:
        raise InvalidParameterError(f"{name} is too large to represent as a float") from exc


def check_fraction(name: str, value: float) -> float:
    """Validate that ``value`` is a real number in [0, 1].

    Args:
        name: Parameter name used in the error message.
        value: Candidate value.

    Returns:
        The value as a Python float.

    Raises:
        InvalidParameterError: If value is not real or lies outside [0, 1].
    """
    number = _to_float(name, value)
    # NaN fails both comparisons
    if not 0.0 <= number <= 1.0:
        raise InvalidParameterError(f"{name} must be in [0,1], got {value}")
    return number


def check_non_negative(name: str, value: float) -> float:
    """Validate that ``value`` is a real number >= 0.

    Raises:
        InvalidParameterError: If value is not real, negative, NaN, or overflows float.
    """
    number = _to_float(name, value)
    if math.isnan(number) or number < 0.0:
        raise InvalidParameterError(f"{name} must be non-negative, got {value}")
    return number


def check_flag(name: str, value: bool) -> bool:
    """Validate that ``value`` is a boolean (numpy booleans included).

    Raises:
        InvalidParameterError: For strings, numbers and other non-boolean values.
    """
    if not isinstance(value, (bool, np.bool_)):
        raise InvalidParameterError(f"{name} must be a boolean, got {value!r}")
    return bool(value)


def reacted_amount(a: ArrayOrFloat, b: ArrayOrFloat, conversion: ArrayOrFloat) -> ArrayOrFloat:
    """Amount of the limiting reagent converted to product: min(a, b) * conversion."""
    limiting = np.minimum(a, b)
    return limiting * conversion


def split_products(
    reacted: ArrayOrFloat, split_ratio: ArrayOrFloat
) -> tuple[ArrayOrFloat, ArrayOrFloat]:
    """Divide reacted mass between products R and S.

    Args:
        reacted: Total converted amount.
        split_ratio: Fraction routed to R; the remainder goes to S.

    Returns:
        Tuple ``(R, S)``.
    """
    r = reacted * split_ratio
    s = reacted * (1.0 - split_ratio)
    return r, s


def compute_products(
    a: ArrayOrFloat,
    b: ArrayOrFloat,
    conversion: ArrayOrFloat,
    two_outputs: bool = False,
    split_ratio: ArrayOrFloat = 0.5,
) -> tuple[ArrayOrFloat, ...]:
    """Products of the reaction for the given reagents and parameters.

    No range checks are done here; callers validate at assignment time.

    Args:
        a: Quantity of reagent A.
        b: Quantity of reagent B.
        conversion: Fraction of the limiting reagent that reacts.
        two_outputs: If True, split into R and S; otherwise everything is R.
        split_ratio: Fraction of reacted mass going to R in two-output mode.

    Returns:
        ``(R,)`` in single-output mode, ``(R, S)`` in two-output mode.
    """
    reacted = reacted_amount(a, b, conversion)
    if not two_outputs:
        return (reacted,)
    return split_products(reacted, split_ratio)


__all__ = [
    "check_fraction",
    "check_non_negative",
    "check_flag",
    "reacted_amount",
    "split_products",
    "compute_products",
]
