"""Tokenizer: splits free-form text into alphanumeric word tokens.

Boundaries come from two sources:
- Runs of non-alphanumeric characters (e.g. "user_name-field" -> user, name, field).
  Repeated separators collapse into one boundary ("some__key" -> some, key).
- camelCase transitions, where a lowercase letter or digit is followed by an
  uppercase letter ("convertToSnake" -> convert, To, Snake; "v2Config" -> v2, Config).

Only ASCII letters and digits belong to words.  Tokens keep their original
casing; the joiners decide the final case.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Any

__all__ = ["Tokenizer", "tokenize"]


class _ScanState(Enum):
    IN_WORD = auto()
    AT_BOUNDARY = auto()


def _is_word_char(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def _is_camel_break(prev: str, ch: str) -> bool:
    """True when ``prev`` -> ``ch`` is a lowercase/digit to uppercase transition."""
    return (prev.islower() or prev.isdigit()) and ch.isupper()


class Tokenizer:
    """Splits text into word tokens with a single left-to-right scan.

    The scanner is in one of two states.  In ``AT_BOUNDARY`` it skips
    separator characters until the next word character starts a token.  In
    ``IN_WORD`` it extends the current token, closing it on a separator or on
    a camelCase transition (which immediately opens the next token).

    Example usage:
        tokenizer = Tokenizer()
        tokenizer.tokenize("convertToSnakeCase")  # ["convert", "To", "Snake", "Case"]
        tokenizer.tokenize("  spaced-out  ")      # ["spaced", "out"]
        tokenizer.tokenize(None)                  # []
    """

    def tokenize(self, text: Any) -> list[str]:
        """Split ``text`` into an ordered list of non-empty word tokens.

        Args:
            text: Value to tokenize.  Anything that is not a ``str`` yields
                an empty list rather than an error.

        Returns:
            Word tokens in input order, original casing preserved.
        """
        if not isinstance(text, str):
            return []

        tokens: list[str] = []
        state = _ScanState.AT_BOUNDARY
        start = 0
        prev = ""
        stripped = text.strip()

        for i, ch in enumerate(stripped):
            if not _is_word_char(ch):
                if state is _ScanState.IN_WORD:
                    tokens.append(stripped[start:i])
                    state = _ScanState.AT_BOUNDARY
            elif state is _ScanState.AT_BOUNDARY:
                start = i
                state = _ScanState.IN_WORD
            elif _is_camel_break(prev, ch):
                tokens.append(stripped[start:i])
                start = i
            prev = ch

        if state is _ScanState.IN_WORD:
            tokens.append(stripped[start:])
        return tokens


# Module-level singleton -- Tokenizer is stateless, safe to share.
_tokenizer = Tokenizer()


def tokenize(text: Any) -> list[str]:
    """Split ``text`` into word tokens; non-strings yield ``[]``."""
    return _tokenizer.tokenize(text)
