from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

DARK = "dark"
TWILIGHT = "twilight"
LIGHT = "light"
SYSTEM = "system"

MODES: Tuple[str, ...] = (DARK, TWILIGHT, LIGHT)
PREFERENCES: Tuple[str, ...] = (DARK, LIGHT, TWILIGHT, SYSTEM)

# Order used when cycling the applied mode from a toggle button
MODE_CYCLE: Tuple[str, ...] = (LIGHT, TWILIGHT, DARK)


@dataclass(frozen=True)
class ModeConfig:
    """Structural constraints a mode imposes on the derived colours."""

    light_stops: Tuple[int, ...]
    default_light: float
    fg_lightness: float
    surface_step: float
    border_step: float
    surface_sat_mult: float
    contrast_ratio: str
    bg_min_sat: float | None = None


MODE_CONFIGS: Mapping[str, ModeConfig] = MappingProxyType(
    {
        DARK: ModeConfig(
            light_stops=(5, 8, 10, 12, 15, 18),
            default_light=10,
            fg_lightness=85,
            surface_step=3,
            border_step=12,
            surface_sat_mult=1.0,
            contrast_ratio="~12:1",
        ),
        TWILIGHT: ModeConfig(
            light_stops=(12, 16, 20, 25, 30, 35),
            default_light=16,
            bg_min_sat=15,
            fg_lightness=96,
            surface_step=5,
            border_step=15,
            surface_sat_mult=1.2,
            contrast_ratio="~12:1",
        ),
        LIGHT: ModeConfig(
            light_stops=(88, 90, 92, 94, 96, 98),
            default_light=94,
            fg_lightness=15,
            surface_step=-3,
            border_step=-15,
            surface_sat_mult=0.8,
            contrast_ratio="~12:1",
        ),
    }
)


def get_mode_config(mode: str) -> ModeConfig:
    """Return the configuration for *mode*, falling back to ``dark``."""

    return MODE_CONFIGS.get(mode, MODE_CONFIGS[DARK])


def is_preference(value: object) -> bool:
    return isinstance(value, str) and value in PREFERENCES


def resolve_preference(preference: str, *, system_dark: bool) -> str:
    """Map a stored preference to the mode that should be applied.

    ``system`` (and anything unrecognised) follows the host colour scheme,
    which only distinguishes dark from light.
    """

    if preference in MODES:
        return preference
    return DARK if system_dark else LIGHT


def next_mode(applied: str) -> str:
    """Return the mode following *applied* in :data:`MODE_CYCLE`."""

    try:
        index = MODE_CYCLE.index(applied)
    except ValueError:
        return MODE_CYCLE[0]
    return MODE_CYCLE[(index + 1) % len(MODE_CYCLE)]


__all__ = [
    "DARK",
    "TWILIGHT",
    "LIGHT",
    "SYSTEM",
    "MODES",
    "PREFERENCES",
    "MODE_CYCLE",
    "ModeConfig",
    "MODE_CONFIGS",
    "get_mode_config",
    "is_preference",
    "resolve_preference",
    "next_mode",
]
