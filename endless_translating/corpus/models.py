"""endless_translating.corpus.models

Corpus value types.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CorpusPair:
    """One training example: a Japanese prompt and its English model answer."""

    source: str
    target: str

    def __post_init__(self) -> None:
        if not self.source.strip() or not self.target.strip():
            raise ValueError("CorpusPair fields must be non-empty after trimming.")
