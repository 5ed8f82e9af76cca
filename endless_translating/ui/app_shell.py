"""endless_translating.ui.app_shell

Streamlit shell: page setup + practice view.

Keep this module free of any provider-specific logic.
"""

from __future__ import annotations

import streamlit as st

from endless_translating.state.session_store import ControllerFactory, ensure_initialized
from endless_translating.ui.practice_tab import render_practice_tab


def render_app(*, controller_factory: ControllerFactory) -> None:
    st.set_page_config(page_title="Endless Translating", layout="centered")
    st.title("Endless Translating")
    st.caption("日本語の文がランダムに表示されます。英訳を入力して採点と文法チェックを行います。")

    controller = ensure_initialized(factory=controller_factory)
    render_practice_tab(controller=controller, controller_factory=controller_factory)
