"""add_numbers: strictly validated addition of two real numbers.

Validation order matters when both operands are bad: every check on the
first operand runs before any check on the second, and a missing operand is
reported before a wrong-typed one.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np

from idcase.errors import InvalidNumberError, MissingOperandError

__all__ = ["add_numbers"]

logger = logging.getLogger(__name__)

_POSITIONS = ("first", "second")


def _is_valid_number(value: Any) -> bool:
    # bool is an int subclass but not a number here.
    if isinstance(value, (bool, np.bool_)):
        return False
    if isinstance(value, (int, np.integer)):
        return True
    if isinstance(value, (float, np.floating)):
        return not bool(np.isnan(value))
    return False


def add_numbers(a: Any, b: Any) -> Any:
    """Return ``a + b`` after validating both operands.

    Accepts ``int``, ``float`` and numpy integer/floating scalars.  Infinities
    are allowed; NaN is not.

    Args:
        a: First addend.
        b: Second addend.

    Returns:
        The native sum ``a + b``.

    Raises:
        MissingOperandError: If ``a`` or ``b`` is None.
        InvalidNumberError: If ``a`` or ``b`` is not a real number, or is NaN.
    """
    operands = (a, b)
    for position, value in zip(_POSITIONS, operands, strict=True):
        if value is None:
            logger.debug("%s operand missing", position)
            raise MissingOperandError(position)
    for position, value in zip(_POSITIONS, operands, strict=True):
        if not _is_valid_number(value):
            logger.debug("%s operand rejected: %r", position, value)
            raise InvalidNumberError(position, value)
    return a + b
