"""endless_translating.evaluation.scoring

Deterministic answer scoring: exact match after normalization, then a
token-set overlap score bucketed into tiers.

Pure functions only. Nothing here performs I/O or raises on string input.
"""

from __future__ import annotations

import re
from typing import Iterable, List

from endless_translating.evaluation.labels import EvaluationLabel

NEAR_THRESHOLD = 0.8
PARTIAL_THRESHOLD = 0.5

_EXACT_PUNCTUATION = re.compile(r"[.,!?;:()\"']")
_NON_TOKEN_CHARS = re.compile(r"[^A-Za-z'’]")


def normalize_exact(text: str) -> str:
    """Lowercase, drop common English punctuation, trim."""
    return _EXACT_PUNCTUATION.sub("", text.lower()).strip()


def tokenize(text: str) -> List[str]:
    """Split on whitespace and keep only ASCII letters and apostrophes per word."""
    tokens: List[str] = []
    for chunk in text.split():
        cleaned = _NON_TOKEN_CHARS.sub("", chunk.lower())
        if cleaned:
            tokens.append(cleaned)
    return tokens


def similarity(model_tokens: Iterable[str], user_tokens: Iterable[str]) -> float:
    """Set overlap `2|A∩B| / (|A|+|B|)`.

    Two empty token sets score 0.0, not 1.0.
    """
    a = set(model_tokens)
    b = set(user_tokens)
    denom = len(a) + len(b)
    if denom == 0:
        return 0.0
    return 2 * len(a & b) / denom


def evaluate(model: str, user: str) -> EvaluationLabel:
    # Exact match wins even when the token overlap alone would score lower.
    if normalize_exact(model) == normalize_exact(user):
        return EvaluationLabel.EXACT

    s = similarity(tokenize(model), tokenize(user))
    if s >= NEAR_THRESHOLD:
        return EvaluationLabel.NEAR
    if s >= PARTIAL_THRESHOLD:
        return EvaluationLabel.PARTIAL
    return EvaluationLabel.DIFFERENT
