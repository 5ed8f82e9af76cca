"""endless_translating.state.session_store

Session state helpers.

Streamlit-specific logic stays here: each browser session owns exactly one
`SessionController`, created on first render and torn down on restart. The
engine itself stays testable without Streamlit.
"""

from __future__ import annotations

from typing import Callable

import streamlit as st

from endless_translating.session.controller import SessionController
from endless_translating.state.session_keys import ANSWER_INPUT, SESSION_CONTROLLER

ControllerFactory = Callable[[], SessionController]


def sync_answer_widget(controller: SessionController) -> None:
    """Copy the controller's input buffer into the answer widget.

    Empty after a committed transition; an aborted advance keeps the typed answer.
    """
    session = controller.session
    st.session_state[ANSWER_INPUT] = session.input_buffer if session is not None else ""


def _create(factory: ControllerFactory) -> SessionController:
    controller = factory()
    controller.add_ready_listener(lambda _frame: sync_answer_widget(controller))
    st.session_state[SESSION_CONTROLLER] = controller
    return controller


def ensure_initialized(*, factory: ControllerFactory) -> SessionController:
    """Return this browser session's controller, creating it if needed."""
    if ANSWER_INPUT not in st.session_state:
        st.session_state[ANSWER_INPUT] = ""
    controller = st.session_state.get(SESSION_CONTROLLER)
    if controller is None or controller.closed:
        controller = _create(factory)
    return controller


def restart(*, factory: ControllerFactory) -> SessionController:
    """Tear down the current controller and re-seed a fresh session."""
    old = st.session_state.get(SESSION_CONTROLLER)
    if old is not None:
        old.teardown()
    st.session_state[ANSWER_INPUT] = ""
    return _create(factory)
