from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace

from .catalogs import is_background_style
from .errors import InvalidSettingsError
from .harmony import ColorHarmony, compute_harmony, primary_color
from .modes import SYSTEM, is_preference, next_mode, resolve_preference
from .persistence import SettingsStore, ThemeState
from .settings import ColorSettings, FontSettings
from .tokens import TokenSink, apply_tokens

logger = logging.getLogger("pyharmony.controller")


class ThemeController:
    """Tie stored settings, the active mode and a token sink together.

    ``system_dark`` reports whether the host currently prefers a dark colour
    scheme; it is consulted whenever the preference is ``system``.  Every
    edit is persisted immediately and re-applied to the attached sink.
    """

    def __init__(
        self,
        store: SettingsStore,
        *,
        system_dark: Callable[[], bool] = lambda: False,
        sink: TokenSink | None = None,
    ) -> None:
        self.store = store
        self._system_dark = system_dark
        self.sink = sink
        self._listeners: list[Callable[[ThemeController], None]] = []
        self.state: ThemeState = store.load_all()
        self.applied_mode = resolve_preference(
            self.state.preference, system_dark=self._system_dark()
        )

    # ------------------------------------------------------------------
    @property
    def preference(self) -> str:
        return self.state.preference

    def on_change(self, callback: Callable[[ThemeController], None]) -> None:
        self._listeners.append(callback)

    def harmony(self) -> ColorHarmony:
        return compute_harmony(self.applied_mode, self.state.color)

    def apply(self, sink: TokenSink | None = None) -> None:
        """Push the current tokens to *sink* (or the attached sink)."""

        target = sink if sink is not None else self.sink
        if target is not None:
            apply_tokens(
                target,
                self.harmony(),
                primary_color(self.state.color),
                self.state.fonts,
                self.state.background_style,
                mode=self.applied_mode,
            )
        for callback in list(self._listeners):
            callback(self)

    # ------------------------------------------------------------------
    # Mode preference
    # ------------------------------------------------------------------
    def set_preference(self, preference: str) -> None:
        if not is_preference(preference):
            raise InvalidSettingsError(f"unknown theme preference: {preference!r}")
        self.store.save_mode_preference(preference)
        self.state = replace(self.state, preference=preference)
        self.applied_mode = resolve_preference(preference, system_dark=self._system_dark())
        logger.debug("preference=%s applied=%s", preference, self.applied_mode)
        self.apply()

    def cycle(self) -> str:
        """Switch to the next concrete mode and return it."""

        self.set_preference(next_mode(self.applied_mode))
        return self.applied_mode

    def system_changed(self) -> None:
        """Handle a change of the host colour scheme."""

        if self.state.preference != SYSTEM:
            return
        self.applied_mode = resolve_preference(SYSTEM, system_dark=self._system_dark())
        self.apply()

    # ------------------------------------------------------------------
    # Settings edits
    # ------------------------------------------------------------------
    def update_colors(self, settings: ColorSettings) -> None:
        self.store.save_color_settings(settings)
        self.state = replace(self.state, color=settings)
        self.apply()

    def update_fonts(self, settings: FontSettings) -> None:
        self.store.save_font_settings(settings)
        self.state = replace(self.state, fonts=settings)
        self.apply()

    def update_background(self, style: str) -> None:
        if not is_background_style(style):
            raise InvalidSettingsError(f"unknown background style: {style!r}")
        self.store.save_background_style(style)
        self.state = replace(self.state, background_style=style)
        self.apply()

    def reset(self) -> None:
        self.store.reset()
        self.state = ThemeState(preference=self.state.preference)
        self.apply()


__all__ = ["ThemeController"]
