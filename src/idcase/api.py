"""Public API functions for idcase.

This module provides the user-facing conversion functions: to_snake_case,
to_camel_case, to_dot_case, to_kebab_case and the general convert.  Each call
creates a fresh CaseConverter to guarantee zero global state mutation between
calls.  None of them raise on bad text: non-string input returns "".
"""

from __future__ import annotations

from typing import Any

from idcase.casing import CaseStyle
from idcase.converter import CaseConverter

__all__ = ["convert", "to_camel_case", "to_dot_case", "to_kebab_case", "to_snake_case"]


def convert(text: Any, style: CaseStyle | str) -> str:
    """Convert ``text`` to the given identifier style.

    Args:
        text:  Value to convert.  Non-strings (including None) return "".
        style: A ``CaseStyle`` member or its string value.

    Returns:
        The converted identifier.

    Raises:
        ValueError: If ``style`` is not a known CaseStyle.
    """
    return CaseConverter().convert(text, style)


def to_snake_case(text: Any) -> str:
    """Return ``text`` as snake_case.

    Example:
        to_snake_case("convertToSnakeCase")  # "convert_to_snake_case"
    """
    return convert(text, CaseStyle.SNAKE)


def to_camel_case(text: Any) -> str:
    """Return ``text`` as camelCase.

    Example:
        to_camel_case("SCREEN_NAME")  # "screenName"
    """
    return convert(text, CaseStyle.CAMEL)


def to_dot_case(text: Any) -> str:
    """Return ``text`` as dot.case."""
    return convert(text, CaseStyle.DOT)


def to_kebab_case(text: Any) -> str:
    """Return ``text`` as kebab-case."""
    return convert(text, CaseStyle.KEBAB)
