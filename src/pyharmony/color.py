"""HSL primitives and hex conversion."""

from __future__ import annotations

import math
from dataclasses import dataclass


def _round_half_up(value: float) -> int:
    # Python's round() is banker's rounding; tokens must match the usual
    # half-up channel rounding exactly.
    return int(math.floor(value + 0.5))


def hsl_to_hex(h: float, s: float, l: float) -> str:  # noqa: E741
    """Convert an HSL triplet to an uppercase ``#RRGGBB`` string.

    ``h`` is in degrees, ``s`` and ``l`` are percentages.  Hue wraps around
    the colour wheel and channels are clamped to ``0..255`` so that
    out-of-range input still yields a valid hex string.
    """

    s /= 100
    l /= 100  # noqa: E741
    a = s * min(l, 1 - l)

    def channel(n: int) -> str:
        k = (n + h / 30) % 12
        color = l - a * max(min(k - 3, 9 - k, 1), -1)
        value = min(255, max(0, _round_half_up(255 * color)))
        return f"{value:02X}"

    return f"#{channel(0)}{channel(8)}{channel(4)}"


@dataclass(frozen=True)
class HSL:
    """Role-agnostic hue/saturation/lightness triplet."""

    h: float
    s: float
    l: float  # noqa: E741

    def to_hex(self) -> str:
        return hsl_to_hex(self.h, self.s, self.l)

    def as_dict(self) -> dict[str, float]:
        return {"h": self.h, "s": self.s, "l": self.l}


@dataclass(frozen=True)
class SurfaceColor:
    """Hue and saturation of elevated surfaces.

    Surfaces carry no lightness of their own; each elevation level is the
    background lightness offset by the harmony's ``surface_step``.
    """

    h: float
    s: float

    def at_level(self, bg_light: float, step: float, level: int) -> HSL:
        return HSL(self.h, self.s, bg_light + step * level)

    def as_dict(self) -> dict[str, float]:
        return {"h": self.h, "s": self.s}


__all__ = ["HSL", "SurfaceColor", "hsl_to_hex"]
