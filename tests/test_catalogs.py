from __future__ import annotations

import pytest

from pyharmony.catalogs import (
    BACKGROUND_STYLES,
    FONT_OPTIONS,
    get_background_style_option,
    is_background_style,
    resolve_font_family,
)
from pyharmony.errors import UnknownCategoryError


def test_resolve_known_font():
    assert resolve_font_family("display", "inter") == '"Inter", sans-serif'
    assert resolve_font_family("mono", "fira-code") == '"Fira Code", monospace'


@pytest.mark.parametrize("category", ["display", "body", "mono"])
def test_unknown_font_falls_back_to_first_in_category(category):
    first = FONT_OPTIONS[category][0].family
    assert resolve_font_family(category, "nonexistent-id") == first


def test_same_id_resolves_per_category():
    assert resolve_font_family("display", "system") == "system-ui, sans-serif"
    assert resolve_font_family("mono", "system") == "ui-monospace, monospace"


def test_unknown_category():
    with pytest.raises(UnknownCategoryError):
        resolve_font_family("serif", "inter")


def test_background_styles():
    assert BACKGROUND_STYLES == ("solid", "dither-25", "dither-50", "dither-75")
    assert is_background_style("dither-50")
    assert not is_background_style("dither-100")
    assert get_background_style_option("dither-50").label == "50% Dither"
    with pytest.raises(KeyError):
        get_background_style_option("plaid")
