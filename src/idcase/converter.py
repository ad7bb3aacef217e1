"""CaseConverter: orchestrator that wires Tokenizer + CaseJoiner per style.

Architecture:
- convert() resolves the requested CaseStyle, tokenizes the input once and
  hands the tokens to the CaseJoiner built for that style.
- Non-string input never reaches the joiner; it degrades to "" without
  raising.  Only string inputs are cached.
- Results are memoized in a per-instance LRU cache keyed by (style, text).
  Two converters never share cache state.
"""

from __future__ import annotations

import logging
from typing import Any

from cachetools import LRUCache

from idcase.casing import STYLE_CONFIGS, CaseJoiner, CaseStyle
from idcase.tokenizer import Tokenizer

__all__ = ["CaseConverter"]

logger = logging.getLogger(__name__)


class CaseConverter:
    """Converts text between identifier styles.

    Example::

        from idcase.converter import CaseConverter

        conv = CaseConverter()
        conv.convert("Hello World", "snake")   # "hello_world"
        conv.to_camel_case("mobile-number")    # "mobileNumber"
    """

    def __init__(self, max_cache_size: int = 512) -> None:
        """Initialise the converter.

        Args:
            max_cache_size: Maximum number of conversions held in the
                per-instance LRU cache.  When exceeded, the least-recently-used
                entry is silently evicted.  Defaults to 512.
        """
        self._tokenizer = Tokenizer()
        self._joiners: dict[CaseStyle, CaseJoiner] = {
            style: CaseJoiner(config) for style, config in STYLE_CONFIGS.items()
        }
        self._cache: LRUCache[tuple[CaseStyle, str], str] = LRUCache(
            maxsize=max_cache_size
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of entries the cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def convert(self, text: Any, style: CaseStyle | str) -> str:
        """Convert ``text`` to the given style.

        Args:
            text:  Value to convert.  Non-strings (including None) yield "".
            style: A ``CaseStyle`` member or its value ("snake", "camel",
                   "dot", "kebab").

        Returns:
            The converted identifier.

        Raises:
            ValueError: If ``style`` is not a known CaseStyle.
        """
        resolved = self._resolve_style(style)
        if not isinstance(text, str):
            logger.debug(
                "non-string input of type %s converts to empty string",
                type(text).__name__,
            )
            return ""

        key = (resolved, text)
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        result = self._joiners[resolved].join(self._tokenizer.tokenize(text))
        self._cache[key] = result
        return result

    def to_snake_case(self, text: Any) -> str:
        return self.convert(text, CaseStyle.SNAKE)

    def to_camel_case(self, text: Any) -> str:
        return self.convert(text, CaseStyle.CAMEL)

    def to_dot_case(self, text: Any) -> str:
        return self.convert(text, CaseStyle.DOT)

    def to_kebab_case(self, text: Any) -> str:
        return self.convert(text, CaseStyle.KEBAB)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _resolve_style(style: CaseStyle | str) -> CaseStyle:
        try:
            return CaseStyle(style)
        except ValueError:
            valid = ", ".join(s.value for s in CaseStyle)
            msg = f"unknown case style {style!r}; expected one of: {valid}"
            raise ValueError(msg) from None
