from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_config_dir as _uc

APP_NAME = "pyharmony"
STORE_FILENAME = "theme.json"
DEFAULT_PREFIX = "pm"

STORE_ENV = "PYHARMONY_STORE"
PREFIX_ENV = "PYHARMONY_PREFIX"


def user_config_dir(app_name: str = APP_NAME) -> Path:
    return Path(_uc(appname=app_name)).resolve()


def default_store_path() -> Path:
    """Return the store file, honouring ``PYHARMONY_STORE``."""

    env = os.getenv(STORE_ENV)
    if env:
        return Path(env).expanduser().resolve()
    return user_config_dir() / STORE_FILENAME


def default_prefix() -> str:
    return os.getenv(PREFIX_ENV) or DEFAULT_PREFIX
