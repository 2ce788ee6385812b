from __future__ import annotations

import pytest

from pyharmony.modes import (
    MODE_CONFIGS,
    MODES,
    get_mode_config,
    is_preference,
    next_mode,
    resolve_preference,
)


def test_exactly_three_modes():
    assert set(MODE_CONFIGS) == set(MODES) == {"dark", "twilight", "light"}


@pytest.mark.parametrize("mode", ["", "sepia", "DARK", "system"])
def test_unknown_mode_falls_back_to_dark(mode):
    assert get_mode_config(mode) is MODE_CONFIGS["dark"]


def test_only_twilight_has_saturation_floor():
    assert get_mode_config("twilight").bg_min_sat == 15
    assert get_mode_config("dark").bg_min_sat is None
    assert get_mode_config("light").bg_min_sat is None


def test_lightness_ranges_follow_design_intent():
    for mode in ("dark", "twilight"):
        cfg = get_mode_config(mode)
        assert len(cfg.light_stops) == 6
        assert all(5 <= stop <= 35 for stop in cfg.light_stops)
        assert 85 <= cfg.fg_lightness <= 96
    light = get_mode_config("light")
    assert all(88 <= stop <= 98 for stop in light.light_stops)
    assert light.fg_lightness == 15
    assert light.surface_step < 0 and light.border_step < 0


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        MODE_CONFIGS["sepia"] = MODE_CONFIGS["dark"]  # type: ignore[index]


def test_resolve_preference():
    assert resolve_preference("twilight", system_dark=True) == "twilight"
    assert resolve_preference("light", system_dark=True) == "light"
    assert resolve_preference("system", system_dark=True) == "dark"
    assert resolve_preference("system", system_dark=False) == "light"
    assert resolve_preference("bogus", system_dark=False) == "light"


def test_next_mode_cycles():
    assert next_mode("light") == "twilight"
    assert next_mode("twilight") == "dark"
    assert next_mode("dark") == "light"
    assert next_mode("unknown") == "light"


def test_is_preference():
    assert is_preference("system")
    assert not is_preference("sepia")
    assert not is_preference(None)
