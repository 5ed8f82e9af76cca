"""Streamlit entrypoint.

Run:
    streamlit run app.py

The engine lives in endless_translating/* so the UI stays a thin shell.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure repo root is on sys.path (helps when running Streamlit from elsewhere).
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from endless_translating.utils.env import load_env

load_env()

from endless_translating.grammar.interfaces import LanguageToolConfig
from endless_translating.grammar.languagetool import LanguageToolChecker
from endless_translating.session.animator import TransitionAnimator
from endless_translating.session.controller import SessionController
from endless_translating.ui.app_shell import render_app
from endless_translating.utils.env import get_env
from endless_translating.utils.paths import resolve_corpus_path


def build_controller() -> SessionController:
    controller = SessionController(
        grammar_checker=LanguageToolChecker(config=LanguageToolConfig.from_env()),
        animator=TransitionAnimator(),
    )
    controller.load_file(resolve_corpus_path(get_env("CORPUS_PATH")))
    return controller


def main() -> None:
    render_app(controller_factory=build_controller)


if __name__ == "__main__":
    main()
