"""CaseStyle, Capitalization and StyleConfig for case joining.

StyleConfig is a frozen (immutable) dataclass pairing a separator with a
capitalization rule.  Every built-in CaseStyle maps to one StyleConfig in
``STYLE_CONFIGS``, so the four styles differ only in data, never in code.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto


class CaseStyle(StrEnum):
    """Target identifier style.

    - SNAKE: ``hello_world``
    - CAMEL: ``helloWorld``
    - DOT:   ``hello.world``
    - KEBAB: ``hello-world``
    """

    SNAKE = auto()
    CAMEL = auto()
    DOT = auto()
    KEBAB = auto()


class Capitalization(StrEnum):
    """Per-token casing rule applied while joining.

    - LOWER: every token lowercased.
    - CAMEL: first token lowercased; later tokens get an uppercase first
      character and a lowercase remainder.
    """

    LOWER = auto()
    CAMEL = auto()


@dataclass(frozen=True, slots=True)
class StyleConfig:
    """Immutable joining rule for one identifier style.

    Attributes:
        separator: String placed between tokens.  May be empty.  Must not
            contain ASCII letters or digits, otherwise joined output would
            re-tokenize differently.
        capitalization: How each token is cased.
    """

    separator: str
    capitalization: Capitalization = Capitalization.LOWER

    def __post_init__(self) -> None:
        if any(ch.isascii() and ch.isalnum() for ch in self.separator):
            msg = f"separator must not contain letters or digits: {self.separator!r}"
            raise ValueError(msg)


STYLE_CONFIGS: dict[CaseStyle, StyleConfig] = {
    CaseStyle.SNAKE: StyleConfig("_"),
    CaseStyle.CAMEL: StyleConfig("", Capitalization.CAMEL),
    CaseStyle.DOT: StyleConfig("."),
    CaseStyle.KEBAB: StyleConfig("-"),
}
