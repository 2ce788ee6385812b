from .catalogs import (
    BACKGROUND_STYLE_OPTIONS,
    FONT_OPTIONS,
    get_background_style_option,
    resolve_font_family,
)
from .color import HSL, hsl_to_hex
from .controller import ThemeController
from .errors import HarmonyError
from .harmony import ColorHarmony, compute_harmony
from .modes import MODE_CONFIGS, ModeConfig, get_mode_config
from .persistence import SettingsStore
from .settings import (
    DEFAULT_BACKGROUND_STYLE,
    DEFAULT_COLOR_SETTINGS,
    DEFAULT_FONT_SETTINGS,
    ColorSettings,
    FontSettings,
    ModeLightnessSettings,
    SharedColorSettings,
)


__all__ = [
    "BACKGROUND_STYLE_OPTIONS",
    "FONT_OPTIONS",
    "get_background_style_option",
    "resolve_font_family",
    "HSL",
    "hsl_to_hex",
    "ThemeController",
    "HarmonyError",
    "ColorHarmony",
    "compute_harmony",
    "MODE_CONFIGS",
    "ModeConfig",
    "get_mode_config",
    "SettingsStore",
    "DEFAULT_BACKGROUND_STYLE",
    "DEFAULT_COLOR_SETTINGS",
    "DEFAULT_FONT_SETTINGS",
    "ColorSettings",
    "FontSettings",
    "ModeLightnessSettings",
    "SharedColorSettings",
]
