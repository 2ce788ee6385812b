"""User-owned theme settings and their library defaults.

Every record here is an immutable snapshot.  Editing a setting produces a new
record (see the ``with_*`` helpers or :func:`dataclasses.replace`), which is
then persisted through :class:`pyharmony.persistence.SettingsStore`.

Field names are camelCase on disk so the stored JSON can be shared with
browser front ends reading the same keys::

    {"shared": {"bgHue": 18, "bgSat": 8, ...},
     "lightness": {"dark": 10, "twilight": 16, "light": 94}}
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any, Mapping

from .catalogs import FONT_CATEGORIES, SOLID
from .color import HSL
from .errors import InvalidSettingsError
from .modes import MODES

Number = float


def _number(value: Any, name: str) -> Number:
    # bool is an int subclass but never a meaningful colour component
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidSettingsError(f"{name} must be a number, got {value!r}")
    return value


def parse_number(text: str, name: str = "value") -> Number:
    """Parse a number typed by a user, keeping integers integral."""

    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        raise InvalidSettingsError(f"{name} must be a number, got {text!r}") from None


# wire name -> attribute name
SHARED_WIRE_NAMES = {
    "bgHue": "bg_hue",
    "bgSat": "bg_sat",
    "fgHue": "fg_hue",
    "fgSat": "fg_sat",
    "primaryHue": "primary_hue",
    "primarySat": "primary_sat",
    "primaryLight": "primary_light",
}


@dataclass(frozen=True)
class SharedColorSettings:
    """Hue/saturation choices that apply to every mode."""

    bg_hue: Number = 18
    bg_sat: Number = 8
    fg_hue: Number = 18
    fg_sat: Number = 15
    primary_hue: Number = 18
    primary_sat: Number = 100
    primary_light: Number = 60

    @property
    def primary(self) -> HSL:
        return HSL(self.primary_hue, self.primary_sat, self.primary_light)

    def to_dict(self) -> dict[str, Number]:
        return {wire: getattr(self, attr) for wire, attr in SHARED_WIRE_NAMES.items()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SharedColorSettings":
        """Build from wire data; missing fields take the library default."""

        if not isinstance(data, Mapping):
            raise InvalidSettingsError("shared settings must be an object")
        values = {
            attr: _number(data[wire], wire)
            for wire, attr in SHARED_WIRE_NAMES.items()
            if wire in data
        }
        return cls(**values)


@dataclass(frozen=True)
class ModeLightnessSettings:
    """Background lightness chosen per mode.

    ``None`` means "no choice recorded", in which case the mode's default
    lightness is used when computing the harmony.
    """

    dark: Number | None = 10
    twilight: Number | None = 16
    light: Number | None = 94

    def get(self, mode: str) -> Number | None:
        if mode not in MODES:
            return None
        return getattr(self, mode)

    def to_dict(self) -> dict[str, Number | None]:
        return {mode: getattr(self, mode) for mode in MODES}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ModeLightnessSettings":
        if not isinstance(data, Mapping):
            raise InvalidSettingsError("lightness settings must be an object")
        values: dict[str, Number | None] = {}
        for mode in MODES:
            raw = data.get(mode)
            values[mode] = None if raw is None else _number(raw, mode)
        return cls(**values)


@dataclass(frozen=True)
class ColorSettings:
    shared: SharedColorSettings = field(default_factory=SharedColorSettings)
    lightness: ModeLightnessSettings = field(default_factory=ModeLightnessSettings)

    def with_shared(self, **changes: Number) -> "ColorSettings":
        return replace(self, shared=replace(self.shared, **changes))

    def with_lightness(self, mode: str, value: Number | None) -> "ColorSettings":
        if mode not in MODES:
            raise InvalidSettingsError(f"unknown mode: {mode!r}")
        return replace(self, lightness=replace(self.lightness, **{mode: value}))

    def to_dict(self) -> dict[str, dict[str, Any]]:
        return {"shared": self.shared.to_dict(), "lightness": self.lightness.to_dict()}

    @classmethod
    def from_dict(cls, data: Any) -> "ColorSettings":
        if not isinstance(data, Mapping):
            raise InvalidSettingsError("color settings must be an object")
        shared = data.get("shared")
        lightness = data.get("lightness")
        if shared is None or lightness is None:
            raise InvalidSettingsError("color settings need 'shared' and 'lightness'")
        return cls(
            shared=SharedColorSettings.from_dict(shared),
            lightness=ModeLightnessSettings.from_dict(lightness),
        )


@dataclass(frozen=True)
class FontSettings:
    display: str = "space-grotesk"
    body: str = "ibm-plex-condensed"
    mono: str = "jetbrains"

    def to_dict(self) -> dict[str, str]:
        return {category: getattr(self, category) for category in FONT_CATEGORIES}

    @classmethod
    def from_dict(cls, data: Any) -> "FontSettings":
        if not isinstance(data, Mapping):
            raise InvalidSettingsError("font settings must be an object")
        values = {}
        for category in FONT_CATEGORIES:
            value = data.get(category)
            if not value or not isinstance(value, str):
                raise InvalidSettingsError(f"font settings need a {category!r} id")
            values[category] = value
        return cls(**values)


DEFAULT_COLOR_SETTINGS = ColorSettings()
DEFAULT_FONT_SETTINGS = FontSettings()
DEFAULT_BACKGROUND_STYLE = SOLID

SHARED_FIELD_NAMES = tuple(f.name for f in fields(SharedColorSettings))


__all__ = [
    "SharedColorSettings",
    "ModeLightnessSettings",
    "ColorSettings",
    "FontSettings",
    "DEFAULT_COLOR_SETTINGS",
    "DEFAULT_FONT_SETTINGS",
    "DEFAULT_BACKGROUND_STYLE",
    "SHARED_FIELD_NAMES",
    "SHARED_WIRE_NAMES",
    "parse_number",
]
