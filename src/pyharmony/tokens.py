"""Named token variables and the sinks that receive them."""

from __future__ import annotations

from typing import Mapping, Protocol

from .catalogs import FONT_CATEGORIES, SOLID, resolve_font_family
from .color import HSL
from .harmony import ColorHarmony
from .modes import DARK, TWILIGHT
from .settings import FontSettings


def format_number(value: float) -> str:
    """Format *value* without a trailing ``.0`` for integral floats."""

    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)


def _pct(value: float) -> str:
    return f"{format_number(value)}%"


def harmony_variables(harmony: ColorHarmony, primary: HSL) -> dict[str, str]:
    """Return the colour variables for *harmony* and the *primary* accent.

    Hues are bare degrees; saturation, lightness and the surface step are
    percentages.
    """

    out: dict[str, str] = {}
    for role, color in (("bg", harmony.bg), ("fg", harmony.fg), ("border", harmony.border)):
        out[f"{role}-h"] = format_number(color.h)
        out[f"{role}-s"] = _pct(color.s)
        out[f"{role}-l"] = _pct(color.l)
    out["surface-s"] = _pct(harmony.surface.s)
    out["surface-step"] = _pct(harmony.surface_step)
    out["primary-h"] = format_number(primary.h)
    out["primary-s"] = _pct(primary.s)
    out["primary-l"] = _pct(primary.l)
    return out


def font_variables(settings: FontSettings) -> dict[str, str]:
    return {
        f"font-{category}": resolve_font_family(category, getattr(settings, category))
        for category in FONT_CATEGORIES
    }


def background_class(style: str) -> str | None:
    """Return the texture class for *style*, or ``None`` for a solid fill."""

    if style == SOLID:
        return None
    return style


def mode_class(applied: str) -> str | None:
    """Return the surface class for the *applied* mode.

    Light is the unclassed base theme; dark and twilight are opt-in classes.
    """

    if applied in (DARK, TWILIGHT):
        return applied
    return None


class TokenSink(Protocol):
    """Rendering surface that receives computed tokens."""

    def set_variable(self, name: str, value: str) -> None: ...

    def set_texture(self, class_name: str | None) -> None: ...

    def set_mode_class(self, class_name: str | None) -> None: ...


def apply_tokens(
    sink: TokenSink,
    harmony: ColorHarmony,
    primary: HSL,
    fonts: FontSettings,
    background_style: str,
    *,
    mode: str,
) -> None:
    for name, value in harmony_variables(harmony, primary).items():
        sink.set_variable(name, value)
    for name, value in font_variables(fonts).items():
        sink.set_variable(name, value)
    sink.set_texture(background_class(background_style))
    sink.set_mode_class(mode_class(mode))


class CssTokenSink:
    """Collect tokens and render them as a CSS custom property block."""

    def __init__(self, selector: str = ":root") -> None:
        self.selector = selector
        self.variables: dict[str, str] = {}
        self.texture: str | None = None
        self.mode_class: str | None = None

    def set_variable(self, name: str, value: str) -> None:
        self.variables[name] = value

    def set_texture(self, class_name: str | None) -> None:
        # only one texture class may be active at a time
        self.texture = class_name

    def set_mode_class(self, class_name: str | None) -> None:
        # replaces any previous mode class
        self.mode_class = class_name

    def as_dict(self) -> dict[str, object]:
        return {
            "variables": dict(self.variables),
            "texture": self.texture,
            "mode_class": self.mode_class,
        }

    def render(self) -> str:
        lines = [f"{self.selector} {{"]
        lines.extend(f"  --{name}: {value};" for name, value in self.variables.items())
        lines.append("}")
        if self.texture is not None:
            lines.append(f"/* body class: {self.texture} */")
        if self.mode_class is not None:
            lines.append(f"/* root class: {self.mode_class} */")
        return "\n".join(lines) + "\n"


def render_css(variables: Mapping[str, str], selector: str = ":root") -> str:
    sink = CssTokenSink(selector)
    for name, value in variables.items():
        sink.set_variable(name, value)
    return sink.render()


__all__ = [
    "format_number",
    "harmony_variables",
    "font_variables",
    "background_class",
    "mode_class",
    "TokenSink",
    "apply_tokens",
    "CssTokenSink",
    "render_css",
]
