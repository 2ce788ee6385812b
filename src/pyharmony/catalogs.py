"""Typography and background texture catalogs."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

from .errors import UnknownCategoryError

FONT_CATEGORIES: Tuple[str, ...] = ("display", "body", "mono")


@dataclass(frozen=True)
class FontOption:
    id: str
    label: str
    family: str
    category: str
    style: str | None = None


FONT_OPTIONS: Mapping[str, Tuple[FontOption, ...]] = MappingProxyType(
    {
        "display": (
            FontOption("space-grotesk", "Space Grotesk", '"Space Grotesk", sans-serif', "display"),
            FontOption("inter", "Inter", '"Inter", sans-serif', "display"),
            FontOption("system", "System UI", "system-ui, sans-serif", "display"),
        ),
        "body": (
            FontOption(
                "ibm-plex-condensed",
                "IBM Plex Condensed",
                '"IBM Plex Sans Condensed", sans-serif',
                "body",
                style="condensed",
            ),
            FontOption("ibm-plex", "IBM Plex Sans", '"IBM Plex Sans", sans-serif', "body"),
            FontOption("inter", "Inter", '"Inter", sans-serif', "body"),
            FontOption("system", "System UI", "system-ui, sans-serif", "body"),
        ),
        "mono": (
            FontOption("jetbrains", "JetBrains Mono", '"JetBrains Mono", monospace', "mono"),
            FontOption("fira-code", "Fira Code", '"Fira Code", monospace', "mono"),
            FontOption("ibm-plex-mono", "IBM Plex Mono", '"IBM Plex Mono", monospace', "mono"),
            FontOption("system", "System Mono", "ui-monospace, monospace", "mono"),
        ),
    }
)


def font_options(category: str) -> Tuple[FontOption, ...]:
    try:
        return FONT_OPTIONS[category]
    except KeyError:
        raise UnknownCategoryError(f"unknown font category: {category!r}") from None


def resolve_font_family(category: str, font_id: str) -> str:
    """Return the CSS family for *font_id* within *category*.

    Unknown ids resolve to the first option listed for the category.
    """

    options = font_options(category)
    for option in options:
        if option.id == font_id:
            return option.family
    return options[0].family


@dataclass(frozen=True)
class BackgroundStyleOption:
    id: str
    label: str
    description: str


SOLID = "solid"

BACKGROUND_STYLE_OPTIONS: Tuple[BackgroundStyleOption, ...] = (
    BackgroundStyleOption(SOLID, "Solid", "Clean, solid background"),
    BackgroundStyleOption("dither-25", "25% Dither", "Sparse dot pattern"),
    BackgroundStyleOption("dither-50", "50% Dither", "Classic checkerboard"),
    BackgroundStyleOption("dither-75", "75% Dither", "Dense dot pattern"),
)

BACKGROUND_STYLES: Tuple[str, ...] = tuple(opt.id for opt in BACKGROUND_STYLE_OPTIONS)


def is_background_style(value: object) -> bool:
    return isinstance(value, str) and value in BACKGROUND_STYLES


def get_background_style_option(style_id: str) -> BackgroundStyleOption:
    # Persisted styles are validated on load, so no fallback here.
    for option in BACKGROUND_STYLE_OPTIONS:
        if option.id == style_id:
            return option
    raise KeyError(style_id)


__all__ = [
    "FONT_CATEGORIES",
    "FontOption",
    "FONT_OPTIONS",
    "font_options",
    "resolve_font_family",
    "BackgroundStyleOption",
    "SOLID",
    "BACKGROUND_STYLE_OPTIONS",
    "BACKGROUND_STYLES",
    "is_background_style",
    "get_background_style_option",
]
