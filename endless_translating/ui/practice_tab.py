"""endless_translating.ui.practice_tab

Practice UI: previous result as context, current prompt, answer box.

Streamlit cannot report rendered heights, so transitions here always take
the animator's instant-commit path.
"""

from __future__ import annotations

import asyncio

import streamlit as st

from endless_translating.evaluation.labels import Severity
from endless_translating.session.controller import SessionController
from endless_translating.session.models import LastResult, SessionState
from endless_translating.state.session_keys import ANSWER_INPUT
from endless_translating.state.session_store import ControllerFactory, restart

_ALERTS = {
    Severity.SUCCESS: st.success,
    Severity.INFO: st.info,
    Severity.WARNING: st.warning,
    Severity.ERROR: st.error,
}


async def _submit_and_settle(controller: SessionController, answer: str) -> None:
    if await controller.submit(answer):
        await controller.wait_for_transition()


def _on_submit(controller: SessionController) -> None:
    answer = st.session_state.get(ANSWER_INPUT, "")
    controller.update_input(answer)
    asyncio.run(_submit_and_settle(controller, answer))


def _render_last_result(result: LastResult) -> None:
    st.divider()
    st.markdown("**前回の問題**")
    st.write(result.source_prompt)
    st.markdown("**Model answer**")
    st.write(result.model_answer)
    st.markdown("**Your answer**")
    st.write(result.user_answer)

    _ALERTS[result.label.severity](result.label.message)

    st.markdown("**Grammar check (LanguageTool)**")
    for line in result.grammar_feedback:
        st.text(line)
    st.divider()


def render_practice_tab(*, controller: SessionController, controller_factory: ControllerFactory) -> None:
    session = controller.session

    if controller.state is SessionState.LOADING:
        st.info("Loading corpus...")
        return

    if controller.state is SessionState.EMPTY_CORPUS or session is None or session.frame is None:
        st.error((session.notice if session else None) or "問題が取得できません。")
        st.button("Restart session", on_click=restart, kwargs={"factory": controller_factory})
        return

    if session.notice:
        st.warning(session.notice)

    frame = session.frame
    if frame.last_result is not None:
        _render_last_result(frame.last_result)

    with st.container(border=True):
        st.caption("Japanese")
        st.write(frame.current.source)

    st.text_area("Your English", key=ANSWER_INPUT, height=100, disabled=not controller.can_submit)

    col1, col2 = st.columns(2)
    with col1:
        st.button(
            "Checking..." if session.checking else "採点・文法チェック",
            type="primary",
            disabled=not controller.can_submit,
            on_click=_on_submit,
            args=(controller,),
        )
    with col2:
        st.button("Restart session", on_click=restart, kwargs={"factory": controller_factory})
