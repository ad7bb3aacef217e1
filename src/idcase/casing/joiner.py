"""CaseJoiner: reassembles word tokens under a StyleConfig."""

from __future__ import annotations

from collections.abc import Sequence

from idcase.casing.config import Capitalization, StyleConfig

__all__ = ["CaseJoiner"]


def _capitalize(token: str) -> str:
    # A leading digit passes through unchanged.
    return token[:1].upper() + token[1:].lower()


class CaseJoiner:
    """Joins tokens with a style's separator and capitalization rule.

    One class covers every style; behaviour comes entirely from the
    ``StyleConfig`` passed in.  Tokens are never added, dropped or reordered.

    Example usage:
        joiner = CaseJoiner(STYLE_CONFIGS[CaseStyle.CAMEL])
        joiner.join(["SCREEN", "NAME"])  # "screenName"
    """

    def __init__(self, config: StyleConfig) -> None:
        self._config = config

    @property
    def config(self) -> StyleConfig:
        return self._config

    def join(self, tokens: Sequence[str]) -> str:
        """Case each token and concatenate with the configured separator.

        Args:
            tokens: Word tokens from ``Tokenizer.tokenize``.

        Returns:
            The joined identifier, or ``""`` for an empty sequence.
        """
        if not tokens:
            return ""
        if self._config.capitalization is Capitalization.CAMEL:
            words = [tokens[0].lower()] + [_capitalize(t) for t in tokens[1:]]
        else:
            words = [t.lower() for t in tokens]
        return self._config.separator.join(words)
