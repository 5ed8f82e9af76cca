"""endless_translating.utils.logger

Package-wide logging setup.

One handler lives on the `endless_translating` logger; module loggers obtained
through `get_logger(__name__)` propagate to it. The level comes from
`LOG_LEVEL` (default INFO).
"""

from __future__ import annotations

import logging

from endless_translating.utils.env import get_env

PACKAGE_LOGGER = "endless_translating"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _resolve_level(name: str | None) -> int:
    level = logging.getLevelName((name or "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def configure_package_logger() -> logging.Logger:
    root = logging.getLogger(PACKAGE_LOGGER)
    if not root.handlers:
        # Streamlit reruns re-import modules; keep a single handler.
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.setLevel(_resolve_level(get_env("LOG_LEVEL")))
    return root


def get_logger(name: str = PACKAGE_LOGGER) -> logging.Logger:
    configure_package_logger()
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
