"""endless_translating.session.models

Session state types.

`LastResult` and `Frame` are immutable snapshots; `Session` is the single
mutable record owned by `SessionController`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from endless_translating.corpus.models import CorpusPair
from endless_translating.corpus.store import CorpusStore
from endless_translating.evaluation.labels import EvaluationLabel


class SessionState(str, Enum):
    LOADING = "loading"
    READY = "ready"
    CHECKING = "checking"
    TRANSITIONING = "transitioning"
    EMPTY_CORPUS = "empty_corpus"


@dataclass(frozen=True)
class LastResult:
    source_prompt: str
    model_answer: str
    user_answer: str
    label: EvaluationLabel
    grammar_feedback: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Frame:
    """One displayable unit. `last_result=None` marks the welcome frame."""

    current: CorpusPair
    last_result: Optional[LastResult] = None


@dataclass(frozen=True)
class Transition:
    from_frame: Frame
    to_frame: Frame


@dataclass
class Session:
    corpus: CorpusStore
    frame: Optional[Frame] = None
    transition: Optional[Transition] = None
    input_buffer: str = ""
    checking: bool = False
    notice: Optional[str] = None
    pending_answer: Optional[str] = field(default=None, repr=False)
