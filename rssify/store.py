"""Resolve the repository spec from a flag, the environment, or the default."""

from __future__ import annotations

import os
from typing import Callable

ENV_REPO = "RSSIFY_REPO"
DEFAULT_SPEC = "fs:."


def resolve_store_spec_with_env(
    get_env: Callable[[str], str | None], store_flag: str | None = None
) -> str:
    """Resolve with precedence flag > environment > ``fs:.``, using ``get_env``."""
    if store_flag is not None:
        return store_flag
    env_value = get_env(ENV_REPO)
    if env_value is not None:
        trimmed = env_value.strip()
        if trimmed:
            return trimmed
    return DEFAULT_SPEC


def resolve_store_spec(store_flag: str | None = None) -> str:
    """Resolve the repository spec against the process environment."""
    return resolve_store_spec_with_env(os.environ.get, store_flag)