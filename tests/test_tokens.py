from __future__ import annotations

from pyharmony.color import HSL
from pyharmony.harmony import compute_harmony
from pyharmony.settings import ColorSettings, FontSettings
from pyharmony.tokens import (
    CssTokenSink,
    apply_tokens,
    background_class,
    font_variables,
    format_number,
    harmony_variables,
    mode_class,
    render_css,
)


def test_format_number():
    assert format_number(8.0) == "8"
    assert format_number(-3) == "-3"
    assert format_number(6.5) == "6.5"


def test_harmony_variables_units():
    harmony = compute_harmony("dark", ColorSettings())
    variables = harmony_variables(harmony, HSL(18, 100, 60))
    assert variables == {
        "bg-h": "18",
        "bg-s": "8%",
        "bg-l": "10%",
        "fg-h": "18",
        "fg-s": "15%",
        "fg-l": "85%",
        "border-h": "18",
        "border-s": "10%",
        "border-l": "22%",
        "surface-s": "8%",
        "surface-step": "3%",
        "primary-h": "18",
        "primary-s": "100%",
        "primary-l": "60%",
    }


def test_negative_surface_step():
    harmony = compute_harmony("light", ColorSettings())
    assert harmony_variables(harmony, HSL(0, 0, 0))["surface-step"] == "-3%"


def test_font_variables_resolve_families():
    variables = font_variables(FontSettings(display="inter", body="missing", mono="system"))
    assert variables == {
        "font-display": '"Inter", sans-serif',
        "font-body": '"IBM Plex Sans Condensed", sans-serif',
        "font-mono": "ui-monospace, monospace",
    }


def test_background_class():
    assert background_class("solid") is None
    assert background_class("dither-75") == "dither-75"


def test_mode_class():
    assert mode_class("light") is None
    assert mode_class("dark") == "dark"
    assert mode_class("twilight") == "twilight"


def test_apply_tokens_to_sink():
    sink = CssTokenSink()
    sink.set_texture("dither-25")
    harmony = compute_harmony("twilight", ColorSettings())
    apply_tokens(sink, harmony, HSL(18, 100, 60), FontSettings(), "solid", mode="twilight")
    assert sink.texture is None
    assert sink.mode_class == "twilight"
    assert sink.variables["bg-s"] == "15%"
    assert sink.variables["font-mono"] == '"JetBrains Mono", monospace'
    css = sink.render()
    assert css.startswith(":root {\n")
    assert "  --bg-l: 16%;\n" in css
    assert "body class" not in css
    assert css.endswith("}\n/* root class: twilight */\n")


def test_render_css_with_selector():
    css = render_css({"bg-h": "18"}, selector=".twilight")
    assert css == ".twilight {\n  --bg-h: 18;\n}\n"


def test_light_mode_clears_mode_class():
    sink = CssTokenSink()
    sink.set_mode_class("dark")
    harmony = compute_harmony("light", ColorSettings())
    apply_tokens(sink, harmony, HSL(18, 100, 60), FontSettings(), "dither-50", mode="light")
    assert sink.mode_class is None
    assert sink.as_dict()["mode_class"] is None
    css = sink.render()
    assert "/* body class: dither-50 */" in css
    assert "root class" not in css
