"""endless_translating.session.controller

The practice-session state machine.

    LOADING -> READY | EMPTY_CORPUS
    READY -> CHECKING            (submit of a non-blank answer)
    CHECKING -> TRANSITIONING    (evaluation + grammar check done, next pair sampled)
    CHECKING -> READY            (next pair could not be sampled; frame unchanged)
    TRANSITIONING -> READY       (animator completion only)

`submit` is ignored in every state but READY, so at most one
question/result cycle is in flight. The controller owns the `Session`;
UI code reads it through `controller.session` and never mutates it.
"""

from __future__ import annotations

import random
from pathlib import Path
from typing import Callable, List, Optional

from endless_translating.corpus.store import CorpusLoadError, CorpusStore
from endless_translating.evaluation.scoring import evaluate
from endless_translating.grammar.interfaces import GrammarChecker
from endless_translating.session.animator import TransitionAnimator
from endless_translating.session.models import Frame, LastResult, Session, SessionState, Transition
from endless_translating.utils.logger import get_logger

logger = get_logger(__name__)

BLANK_ANSWER_NOTICE = "英訳を入力してください。"
EMPTY_CORPUS_NOTICE = "有効なコーパス行が見つかりませんでした。"
NO_NEXT_PAIR_NOTICE = "次の問題を取得できませんでした。"
GRAMMAR_CHECK_FAILED_NOTICE = "文法チェック中にエラーが発生しました"

ReadyListener = Callable[[Frame], None]


class SessionController:
    def __init__(
        self,
        *,
        grammar_checker: GrammarChecker,
        animator: Optional[TransitionAnimator] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._grammar_checker = grammar_checker
        self._animator = animator or TransitionAnimator()
        self._rng = rng or random.Random()
        self._state = SessionState.LOADING
        self._session: Optional[Session] = None
        self._ready_listeners: List[ReadyListener] = []
        self._closed = False

    # ----------------------------
    # Read access
    # ----------------------------
    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def session(self) -> Optional[Session]:
        return self._session

    @property
    def frame(self) -> Optional[Frame]:
        return self._session.frame if self._session else None

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def can_submit(self) -> bool:
        return self._state is SessionState.READY

    def add_ready_listener(self, listener: ReadyListener) -> None:
        """Register an effect to run every time the session enters READY."""
        self._ready_listeners.append(listener)

    # ----------------------------
    # Loading
    # ----------------------------
    def load_store(self, store: CorpusStore) -> SessionState:
        self._session = Session(corpus=store)
        first = store.sample()
        if first is None:
            logger.warning("Corpus is empty; session cannot start.")
            self._session.notice = f"コーパス読み込みエラー: {EMPTY_CORPUS_NOTICE}"
            self._set_state(SessionState.EMPTY_CORPUS)
            return self._state

        self._session.frame = Frame(current=first)
        self._enter_ready()
        return self._state

    def load_text(self, raw: str) -> SessionState:
        return self.load_store(CorpusStore.from_text(raw, rng=self._rng))

    def load_file(self, path: str | Path) -> SessionState:
        try:
            store = CorpusStore.from_file(path, rng=self._rng)
        except CorpusLoadError as e:
            logger.error("Corpus load failed: %s", e)
            self._session = Session(corpus=CorpusStore(pairs=(), rng=self._rng))
            self._session.notice = f"コーパス読み込みエラー: {e}"
            self._set_state(SessionState.EMPTY_CORPUS)
            return self._state
        return self.load_store(store)

    # ----------------------------
    # Input
    # ----------------------------
    def update_input(self, text: str) -> None:
        if self._session is not None and self._state is SessionState.READY:
            self._session.input_buffer = text

    async def submit(self, answer: Optional[str] = None) -> bool:
        """Run one evaluation cycle and start the transition to the next frame.

        Returns True when a transition was started. Any call outside READY is
        a no-op.
        """
        if self._closed or self._state is not SessionState.READY:
            return False
        session = self._session
        if session is None or session.frame is None:
            return False

        text = session.input_buffer if answer is None else answer
        if not text.strip():
            session.notice = BLANK_ANSWER_NOTICE
            return False

        from_frame = session.frame
        session.notice = None
        session.input_buffer = text
        session.pending_answer = text
        session.checking = True
        self._set_state(SessionState.CHECKING)

        label = evaluate(from_frame.current.target, text)
        try:
            feedback = await self._grammar_checker.check(text)
        except Exception as e:
            logger.warning("Grammar check raised %s: %s", e.__class__.__name__, e)
            feedback = [f"{GRAMMAR_CHECK_FAILED_NOTICE}: {e.__class__.__name__}: {e}"]

        if self._closed or self._session is not session:
            logger.debug("Session torn down during grammar check; result discarded.")
            return False

        next_pair = session.corpus.sample()
        session.pending_answer = None
        if next_pair is None:
            logger.warning("Could not sample the next pair; staying on the current frame.")
            session.checking = False
            session.notice = NO_NEXT_PAIR_NOTICE
            self._enter_ready()
            return False

        result = LastResult(
            source_prompt=from_frame.current.source,
            model_answer=from_frame.current.target,
            user_answer=text,
            label=label,
            grammar_feedback=tuple(feedback),
        )
        to_frame = Frame(current=next_pair, last_result=result)
        session.transition = Transition(from_frame=from_frame, to_frame=to_frame)
        self._set_state(SessionState.TRANSITIONING)
        self._animator.start(from_frame, to_frame, self._commit)
        return True

    async def wait_for_transition(self) -> None:
        await self._animator.wait()

    def _commit(self, to_frame: Frame) -> None:
        session = self._session
        if self._closed or session is None or self._state is not SessionState.TRANSITIONING:
            return
        session.frame = to_frame
        session.transition = None
        session.input_buffer = ""
        session.checking = False
        self._enter_ready()

    # ----------------------------
    # Lifecycle
    # ----------------------------
    def teardown(self) -> None:
        """Cancel any scheduled transition and drop the session."""
        if self._closed:
            return
        self._closed = True
        self._animator.cancel()
        self._session = None
        self._ready_listeners.clear()
        logger.debug("Session torn down.")

    def _set_state(self, state: SessionState) -> None:
        logger.debug("Session state %s -> %s", self._state.value, state.value)
        self._state = state

    def _enter_ready(self) -> None:
        self._set_state(SessionState.READY)
        frame = self.frame
        if frame is None:
            return
        for listener in list(self._ready_listeners):
            listener(frame)
