"""endless_translating.utils.paths

Central place for resolving project paths.

All functions return absolute Paths.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


def project_root() -> Path:
    """Return the repository root folder (the parent of `endless_translating/`)."""
    # .../endless_translating/utils/paths.py -> parents: [utils, endless_translating, <root>]
    return Path(__file__).resolve().parents[2]


def data_dir() -> Path:
    return project_root() / "data"


def default_corpus_path(filename: str = "corpus.tsv") -> Path:
    return data_dir() / filename


def resolve_corpus_path(corpus_path: Optional[str] = None) -> Path:
    """Resolve a corpus path.

    - If `corpus_path` is None/empty: returns the default corpus path.
    - If `corpus_path` is relative: resolve it relative to repo root.
    - If absolute: use it as-is.
    """
    if not corpus_path:
        return default_corpus_path()

    p = Path(corpus_path)
    if p.is_absolute():
        return p

    return project_root() / p
