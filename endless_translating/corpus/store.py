"""endless_translating.corpus.store

Corpus ingestion and sampling.

The corpus is a Tatoeba-style TSV export: one record per line,
`<eng_id>\t<english>\t<jpn_id>\t<japanese>[\t...]`. Column positions are
fixed by that export format.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from endless_translating.corpus.models import CorpusPair
from endless_translating.utils.logger import get_logger

logger = get_logger(__name__)

ENGLISH_COLUMN = 1
JAPANESE_COLUMN = 3
MIN_FIELDS = 4


class CorpusLoadError(RuntimeError):
    """The corpus file could not be read."""


def _parse_with_stats(raw: str) -> Tuple[List[CorpusPair], int]:
    pairs: List[CorpusPair] = []
    skipped = 0
    for line in raw.splitlines():
        if not line.strip():
            continue
        cols = line.split("\t")
        if len(cols) < MIN_FIELDS:
            skipped += 1
            continue
        eng = cols[ENGLISH_COLUMN].strip()
        jpn = cols[JAPANESE_COLUMN].strip()
        if not eng or not jpn:
            skipped += 1
            continue
        pairs.append(CorpusPair(source=jpn, target=eng))
    return pairs, skipped


def parse_corpus(raw: str) -> List[CorpusPair]:
    """Parse TSV text into pairs; malformed or incomplete records are dropped."""
    pairs, _ = _parse_with_stats(raw)
    return pairs


def sample_pair(pairs: Sequence[CorpusPair], rng: Optional[random.Random] = None) -> Optional[CorpusPair]:
    """Uniformly pick one pair, or None for an empty corpus."""
    if not pairs:
        return None
    r = rng or random
    return pairs[r.randrange(len(pairs))]


def load_corpus_file(path: str | Path) -> List[CorpusPair]:
    p = Path(path)
    try:
        raw = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CorpusLoadError(f"{p}: {e}") from e

    pairs, skipped = _parse_with_stats(raw)
    logger.info("Loaded %d corpus pairs from %s (%d records skipped)", len(pairs), p, skipped)
    return pairs


@dataclass(frozen=True)
class CorpusStore:
    """Read-only corpus plus the random source used to sample from it."""

    pairs: Tuple[CorpusPair, ...]
    rng: random.Random = field(default_factory=random.Random, compare=False)

    @classmethod
    def from_text(cls, raw: str, *, rng: Optional[random.Random] = None) -> "CorpusStore":
        return cls(pairs=tuple(parse_corpus(raw)), rng=rng or random.Random())

    @classmethod
    def from_file(cls, path: str | Path, *, rng: Optional[random.Random] = None) -> "CorpusStore":
        return cls(pairs=tuple(load_corpus_file(path)), rng=rng or random.Random())

    def __len__(self) -> int:
        return len(self.pairs)

    def sample(self) -> Optional[CorpusPair]:
        return sample_pair(self.pairs, self.rng)
