"""Persistence of theme settings in a key-value store.

Loading fails safe: a missing key, unparsable text or a value of the wrong
shape all come back as ``None`` so callers fall back to library defaults.
Saving fails loud: write errors from the backend reach the caller.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, TypeVar

from .backends import KeyValueStore, get_backend_for_path
from .catalogs import is_background_style
from .errors import StoreError
from .modes import SYSTEM, is_preference
from .paths import DEFAULT_PREFIX, default_prefix, default_store_path
from .settings import (
    DEFAULT_BACKGROUND_STYLE,
    DEFAULT_COLOR_SETTINGS,
    DEFAULT_FONT_SETTINGS,
    ColorSettings,
    FontSettings,
)

logger = logging.getLogger("pyharmony.persistence")

COLOR_SETTINGS_KEY = "color-settings"
FONT_SETTINGS_KEY = "font-settings"
BACKGROUND_STYLE_KEY = "background-style"
# The mode preference lives outside the settings prefix
DEFAULT_MODE_KEY = "pm-theme"

T = TypeVar("T")


@dataclass(frozen=True)
class ThemeState:
    """Settings snapshot with defaults filled in for anything not stored."""

    color: ColorSettings = field(default_factory=ColorSettings)
    fonts: FontSettings = field(default_factory=FontSettings)
    background_style: str = DEFAULT_BACKGROUND_STYLE
    preference: str = SYSTEM


class SettingsStore:
    """Load, save and clear theme settings under a key prefix.

    One instance is created at startup and handed to everything that reads
    or writes settings, so the prefix is configured in a single place.
    """

    def __init__(
        self,
        backend: KeyValueStore,
        *,
        prefix: str = DEFAULT_PREFIX,
        mode_key: str = DEFAULT_MODE_KEY,
    ) -> None:
        self.backend = backend
        self._prefix = prefix
        self._mode_key = mode_key

    @classmethod
    def from_path(cls, path: Path | None = None, *, prefix: str | None = None) -> "SettingsStore":
        """Open a file backed store; defaults come from the environment."""

        path = Path(path) if path is not None else default_store_path()
        if prefix is None:
            prefix = default_prefix()
        return cls(get_backend_for_path(path), prefix=prefix)

    # ------------------------------------------------------------------
    # Key namespace
    # ------------------------------------------------------------------
    @property
    def prefix(self) -> str:
        return self._prefix

    def set_prefix(self, prefix: str) -> None:
        self._prefix = prefix

    @property
    def mode_key(self) -> str:
        """Key of the mode preference; :meth:`set_prefix` does not move it."""

        return self._mode_key

    def set_mode_key(self, key: str) -> None:
        self._mode_key = key

    def key(self, name: str) -> str:
        return f"{self._prefix}-{name}"

    # ------------------------------------------------------------------
    # Raw access
    # ------------------------------------------------------------------
    def _read(self, key: str, parse: Callable[[str], T]) -> T | None:
        try:
            raw = self.backend.get(key)
            if not raw:
                return None
            return parse(raw)
        except (StoreError, OSError, ValueError) as exc:
            logger.debug("discarding stored value for %s: %s", key, exc)
            return None

    def _remove(self, key: str) -> None:
        try:
            self.backend.remove(key)
        except (StoreError, OSError) as exc:
            logger.debug("could not remove %s: %s", key, exc)

    # ------------------------------------------------------------------
    # Colour settings
    # ------------------------------------------------------------------
    def load_color_settings(self) -> ColorSettings | None:
        return self._read(
            self.key(COLOR_SETTINGS_KEY),
            lambda raw: ColorSettings.from_dict(json.loads(raw)),
        )

    def save_color_settings(self, settings: ColorSettings) -> None:
        self.backend.set(self.key(COLOR_SETTINGS_KEY), json.dumps(settings.to_dict()))

    def clear_color_settings(self) -> None:
        self._remove(self.key(COLOR_SETTINGS_KEY))

    # ------------------------------------------------------------------
    # Font settings
    # ------------------------------------------------------------------
    def load_font_settings(self) -> FontSettings | None:
        return self._read(
            self.key(FONT_SETTINGS_KEY),
            lambda raw: FontSettings.from_dict(json.loads(raw)),
        )

    def save_font_settings(self, settings: FontSettings) -> None:
        self.backend.set(self.key(FONT_SETTINGS_KEY), json.dumps(settings.to_dict()))

    def clear_font_settings(self) -> None:
        self._remove(self.key(FONT_SETTINGS_KEY))

    # ------------------------------------------------------------------
    # Background style (stored as the raw string)
    # ------------------------------------------------------------------
    def load_background_style(self) -> str | None:
        return self._read(self.key(BACKGROUND_STYLE_KEY), _checked(is_background_style))

    def save_background_style(self, style: str) -> None:
        self.backend.set(self.key(BACKGROUND_STYLE_KEY), style)

    def clear_background_style(self) -> None:
        self._remove(self.key(BACKGROUND_STYLE_KEY))

    # ------------------------------------------------------------------
    # Mode preference
    # ------------------------------------------------------------------
    def load_mode_preference(self) -> str | None:
        return self._read(self.mode_key, _checked(is_preference))

    def save_mode_preference(self, preference: str) -> None:
        self.backend.set(self.mode_key, preference)

    def clear_mode_preference(self) -> None:
        self._remove(self.mode_key)

    # ------------------------------------------------------------------
    # Aggregate helpers
    # ------------------------------------------------------------------
    def load_all(self) -> ThemeState:
        return ThemeState(
            color=self.load_color_settings() or DEFAULT_COLOR_SETTINGS,
            fonts=self.load_font_settings() or DEFAULT_FONT_SETTINGS,
            background_style=self.load_background_style() or DEFAULT_BACKGROUND_STYLE,
            preference=self.load_mode_preference() or SYSTEM,
        )

    def reset(self) -> None:
        """Clear colour, font and background settings.

        The mode preference is a separate choice and is left alone.
        """

        self.clear_color_settings()
        self.clear_font_settings()
        self.clear_background_style()


def _checked(predicate: Callable[[Any], bool]) -> Callable[[str], str]:
    def parse(raw: str) -> str:
        if not predicate(raw):
            raise ValueError(f"unexpected value {raw!r}")
        return raw

    return parse


__all__ = [
    "COLOR_SETTINGS_KEY",
    "FONT_SETTINGS_KEY",
    "BACKGROUND_STYLE_KEY",
    "DEFAULT_MODE_KEY",
    "ThemeState",
    "SettingsStore",
]
