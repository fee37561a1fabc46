"""Environment and ``.env`` configuration helpers.

Purpose
-------
Let deployments configure the logger without code changes: tokens come from
the ``LOG_DECOR_OPTIONS`` environment variable, which may itself be loaded from
the nearest ``.env`` file.

Contents
--------
* :data:`OPTIONS_ENV_VAR`, :data:`DOTENV_ENV_VAR` - variable names.
* :func:`tokens_from_env` - split the options variable into tokens.
* :func:`should_use_dotenv` / :func:`enable_dotenv` - ``.env`` loading via
  python-dotenv; real environment variables keep precedence.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

LOGGER = logging.getLogger(__name__)

OPTIONS_ENV_VAR = "LOG_DECOR_OPTIONS"
DOTENV_ENV_VAR = "LOG_DECOR_USE_DOTENV"

_TRUTHY = {"1", "true", "yes", "on"}

_DOTENV_LOADED: Path | None = None


def tokens_from_env(environ: Mapping[str, str] | None = None) -> list[str]:
    """Return configuration tokens from ``LOG_DECOR_OPTIONS``.

    Tokens are separated by commas or whitespace.

    Examples
    --------
    >>> tokens_from_env({"LOG_DECOR_OPTIONS": "date, utc plain"})
    ['date', 'utc', 'plain']
    >>> tokens_from_env({})
    []
    """

    env = os.environ if environ is None else environ
    raw = env.get(OPTIONS_ENV_VAR, "")
    return [token for token in raw.replace(",", " ").split() if token]


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Decide whether ``.env`` loading is requested.

    An explicit CLI flag wins; otherwise the ``LOG_DECOR_USE_DOTENV`` value
    decides.

    Examples
    --------
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(env_value="yes")
    True
    >>> should_use_dotenv()
    False
    """

    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUTHY


def enable_dotenv(search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` walking up from ``search_from`` (cwd by default).

    Existing environment variables are not overridden. Returns the loaded file
    or ``None`` when no file was found.
    """

    global _DOTENV_LOADED
    if search_from is None:
        found = find_dotenv(usecwd=True)
        candidate = Path(found) if found else None
    else:
        candidate = _search_upwards(Path(search_from))
    if candidate is None:
        LOGGER.debug("No .env file found")
        return None
    resolved = candidate.resolve()
    load_dotenv(resolved, override=False)
    _DOTENV_LOADED = resolved
    return resolved


def _search_upwards(start: Path) -> Path | None:
    """Find the nearest ``.env`` from ``start``; ``find_dotenv`` only searches from cwd or the caller's file."""

    directory = start.resolve()
    if directory.is_file():
        directory = directory.parent
    for folder in (directory, *directory.parents):
        candidate = folder / ".env"
        if candidate.is_file():
            return candidate
    return None


def loaded_dotenv() -> Path | None:
    """Return the ``.env`` file loaded by :func:`enable_dotenv`, if any."""

    return _DOTENV_LOADED


def _reset_dotenv_state_for_testing() -> None:
    global _DOTENV_LOADED
    _DOTENV_LOADED = None


__all__ = [
    "DOTENV_ENV_VAR",
    "OPTIONS_ENV_VAR",
    "enable_dotenv",
    "loaded_dotenv",
    "should_use_dotenv",
    "tokens_from_env",
]
