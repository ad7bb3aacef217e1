"""Casing subpackage: style configuration and token joining.

Re-exports the public API for the casing module:
- CaseStyle: StrEnum of the four identifier styles (snake, camel, dot, kebab)
- Capitalization: StrEnum of per-token casing rules
- StyleConfig: frozen dataclass pairing a separator with a capitalization rule
- STYLE_CONFIGS: the StyleConfig for every CaseStyle
- CaseJoiner: joins tokens according to a StyleConfig
"""

from idcase.casing.config import STYLE_CONFIGS, Capitalization, CaseStyle, StyleConfig
from idcase.casing.joiner import CaseJoiner

__all__ = ["STYLE_CONFIGS", "Capitalization", "CaseJoiner", "CaseStyle", "StyleConfig"]
