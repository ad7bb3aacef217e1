"""Exception hierarchy for idcase.

Case conversion never raises on bad text, so every error here comes from
``add_numbers`` operand validation.  ``OperandError`` subclasses ``ValueError``
so callers that already catch ``ValueError`` keep working; ``InvalidNumberError``
is additionally a ``TypeError`` because the usual cause is a non-numeric type.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "IdcaseError",
    "InvalidNumberError",
    "MissingOperandError",
    "OperandError",
]


class IdcaseError(Exception):
    """Base class for all idcase errors."""


class OperandError(IdcaseError, ValueError):
    """An ``add_numbers`` operand failed validation.

    Attributes:
        position: ``"first"`` or ``"second"``.
        value: The rejected operand, as passed by the caller.
    """

    def __init__(self, message: str, position: str, value: Any) -> None:
        super().__init__(message)
        self.position = position
        self.value = value


class MissingOperandError(OperandError):
    """Operand is ``None``."""

    def __init__(self, position: str) -> None:
        super().__init__(f"{position.capitalize()} argument is None", position, None)


class InvalidNumberError(OperandError, TypeError):
    """Operand is not a real number, or is NaN."""

    def __init__(self, position: str, value: Any) -> None:
        super().__init__(
            f"{position.capitalize()} argument is not a valid number: {value!r}",
            position,
            value,
        )
