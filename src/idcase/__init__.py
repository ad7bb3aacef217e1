"""idcase - identifier case conversion and validated arithmetic."""

from __future__ import annotations

from idcase.api import (
    convert,
    to_camel_case,
    to_dot_case,
    to_kebab_case,
    to_snake_case,
)
from idcase.casing import (
    STYLE_CONFIGS,
    Capitalization,
    CaseJoiner,
    CaseStyle,
    StyleConfig,
)
from idcase.converter import CaseConverter
from idcase.errors import (
    IdcaseError,
    InvalidNumberError,
    MissingOperandError,
    OperandError,
)
from idcase.numeric import add_numbers
from idcase.tokenizer import Tokenizer, tokenize

__version__: str = "0.1.0"
__all__: list[str] = [
    "STYLE_CONFIGS",
    "Capitalization",
    "CaseConverter",
    "CaseJoiner",
    "CaseStyle",
    "IdcaseError",
    "InvalidNumberError",
    "MissingOperandError",
    "OperandError",
    "StyleConfig",
    "Tokenizer",
    "add_numbers",
    "convert",
    "to_camel_case",
    "to_dot_case",
    "to_kebab_case",
    "to_snake_case",
    "tokenize",
]
