from __future__ import annotations

import pytest

from pyharmony.errors import InvalidSettingsError
from pyharmony.settings import (
    ColorSettings,
    FontSettings,
    ModeLightnessSettings,
    SharedColorSettings,
    parse_number,
)


def test_defaults():
    settings = ColorSettings()
    assert settings.shared.bg_hue == 18
    assert settings.shared.primary_sat == 100
    assert settings.lightness.to_dict() == {"dark": 10, "twilight": 16, "light": 94}
    assert FontSettings().to_dict() == {
        "display": "space-grotesk",
        "body": "ibm-plex-condensed",
        "mono": "jetbrains",
    }


def test_wire_names_are_camel_case():
    data = ColorSettings().to_dict()
    assert set(data["shared"]) == {
        "bgHue", "bgSat", "fgHue", "fgSat", "primaryHue", "primarySat", "primaryLight",
    }
    assert ColorSettings.from_dict(data) == ColorSettings()


def test_edits_produce_new_snapshots():
    original = ColorSettings()
    edited = original.with_shared(bg_hue=200).with_lightness("dark", 15)
    assert original.shared.bg_hue == 18
    assert edited.shared.bg_hue == 200
    assert edited.lightness.dark == 15
    with pytest.raises(InvalidSettingsError):
        original.with_lightness("sepia", 10)


def test_missing_sub_object_is_rejected():
    with pytest.raises(InvalidSettingsError):
        ColorSettings.from_dict({"shared": {}})
    with pytest.raises(InvalidSettingsError):
        ColorSettings.from_dict({"shared": None, "lightness": {}})
    with pytest.raises(InvalidSettingsError):
        ColorSettings.from_dict([1, 2])


def test_partial_shared_uses_defaults():
    settings = ColorSettings.from_dict({"shared": {"bgHue": 200}, "lightness": {"dark": 12}})
    assert settings.shared == SharedColorSettings(bg_hue=200)
    assert settings.lightness == ModeLightnessSettings(dark=12, twilight=None, light=None)


def test_non_numeric_values_are_rejected():
    with pytest.raises(InvalidSettingsError):
        SharedColorSettings.from_dict({"bgHue": "red"})
    with pytest.raises(InvalidSettingsError):
        ModeLightnessSettings.from_dict({"dark": True})


def test_lightness_get_unknown_mode():
    assert ModeLightnessSettings().get("sepia") is None


def test_font_settings_require_all_categories():
    with pytest.raises(InvalidSettingsError):
        FontSettings.from_dict({"display": "inter", "body": "inter"})
    with pytest.raises(InvalidSettingsError):
        FontSettings.from_dict({"display": "inter", "body": "", "mono": "system"})


def test_parse_number():
    assert parse_number("12") == 12
    assert isinstance(parse_number("12"), int)
    assert parse_number("12.5") == 12.5
    with pytest.raises(InvalidSettingsError):
        parse_number("twelve")
