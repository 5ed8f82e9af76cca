"""endless_translating.utils.env

Environment loading + lightweight typed reads.

The entrypoint calls:

    from endless_translating.utils.env import load_env
    load_env()

"""

from __future__ import annotations

import os
from typing import Optional

from dotenv import load_dotenv


def load_env(*, override: bool = False) -> None:
    """Load environment variables from a `.env` file if present."""
    load_dotenv(override=override)


def get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.environ.get(name, default)


def get_env_float(name: str, default: float) -> float:
    """Read a float variable; empty or malformed values fall back to `default`."""
    v = os.environ.get(name)
    if not v:
        return default
    try:
        return float(v)
    except ValueError:
        return default
