"""Colour harmony computation.

The mode gives soft guidance rather than hard rules: it fixes the foreground
lightness, the border and surface stepping and (for twilight) a saturation
floor, while hue and saturation stay fully user controlled.  Contrast is a
consequence of the fixed foreground lightness, it is never computed.
"""

from __future__ import annotations

from dataclasses import dataclass

from .color import HSL, SurfaceColor
from .modes import ModeConfig, get_mode_config
from .settings import ColorSettings

BORDER_MIN_LIGHT = 5
BORDER_MAX_LIGHT = 95

# Border saturation sits slightly above the background's
BORDER_SAT_BOOST = 2


@dataclass(frozen=True)
class ColorHarmony:
    bg: HSL
    fg: HSL
    border: HSL
    surface: SurfaceColor
    surface_step: float
    contrast_ratio: str

    def surface_level(self, level: int) -> HSL:
        """Return the colour of elevation *level* (``0`` is the background)."""

        return self.surface.at_level(self.bg.l, self.surface_step, level)

    def as_dict(self) -> dict[str, object]:
        return {
            "bg": self.bg.as_dict(),
            "fg": self.fg.as_dict(),
            "border": self.border.as_dict(),
            "surface": self.surface.as_dict(),
            "surfaceStep": self.surface_step,
            "contrastRatio": self.contrast_ratio,
        }


def compute_harmony(
    mode: str,
    settings: ColorSettings,
    *,
    config: ModeConfig | None = None,
) -> ColorHarmony:
    """Derive the colour harmony for *mode* from the user's *settings*.

    ``config`` replaces the registered configuration for *mode*; the
    lightness override is still looked up under *mode*.
    """

    if config is None:
        config = get_mode_config(mode)
    shared = settings.shared

    bg_light = settings.lightness.get(mode)
    if bg_light is None:
        bg_light = config.default_light

    bg_sat = shared.bg_sat
    if config.bg_min_sat is not None:
        bg_sat = max(bg_sat, config.bg_min_sat)

    border_light = max(BORDER_MIN_LIGHT, min(BORDER_MAX_LIGHT, bg_light + config.border_step))

    return ColorHarmony(
        bg=HSL(shared.bg_hue, bg_sat, bg_light),
        fg=HSL(shared.fg_hue, shared.fg_sat, config.fg_lightness),
        border=HSL(shared.bg_hue, bg_sat + BORDER_SAT_BOOST, border_light),
        surface=SurfaceColor(shared.bg_hue, bg_sat * config.surface_sat_mult),
        surface_step=config.surface_step,
        contrast_ratio=config.contrast_ratio,
    )


def primary_color(settings: ColorSettings) -> HSL:
    """Return the user's accent colour, which no mode constrains."""

    return settings.shared.primary


__all__ = ["ColorHarmony", "compute_harmony", "primary_color"]
