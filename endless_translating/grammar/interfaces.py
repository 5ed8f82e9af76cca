"""endless_translating.grammar.interfaces

Interfaces for grammar-annotation providers.

The session only depends on `GrammarChecker.check`, so LanguageTool can be
swapped for another service (or a stub in tests) without touching it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Protocol

from endless_translating.utils.env import get_env, get_env_float

DEFAULT_LANGUAGETOOL_URL = "https://api.languagetool.org/v2/check"


@dataclass(frozen=True)
class LanguageToolConfig:
    endpoint: str = DEFAULT_LANGUAGETOOL_URL
    language: str = "en-US"
    timeout_s: float = 10.0

    @classmethod
    def from_env(cls) -> "LanguageToolConfig":
        return cls(
            endpoint=get_env("LANGUAGETOOL_URL") or DEFAULT_LANGUAGETOOL_URL,
            language=get_env("LANGUAGETOOL_LANGUAGE") or "en-US",
            timeout_s=get_env_float("LANGUAGETOOL_TIMEOUT", 10.0),
        )


class GrammarChecker(Protocol):
    async def check(self, sentence: str) -> List[str]:
        """Return display lines for `sentence`. Must never raise."""
        ...
