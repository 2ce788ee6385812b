from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .catalogs import (
    BACKGROUND_STYLE_OPTIONS,
    BACKGROUND_STYLES,
    FONT_CATEGORIES,
    FONT_OPTIONS,
)
from .color import hsl_to_hex
from .controller import ThemeController
from .errors import InvalidSettingsError, StoreError
from .modes import MODES, PREFERENCES
from .persistence import SettingsStore
from .settings import SHARED_FIELD_NAMES, SHARED_WIRE_NAMES, FontSettings, parse_number
from .tokens import CssTokenSink

logger = logging.getLogger("pyharmony")


def _open_store(args: argparse.Namespace) -> SettingsStore:
    return SettingsStore.from_path(args.store, prefix=args.prefix)


def _controller(args: argparse.Namespace) -> ThemeController:
    system_dark = bool(getattr(args, "system_dark", False))
    return ThemeController(_open_store(args), system_dark=lambda: system_dark)


def _write_failed(exc: Exception) -> int:
    print(f"error: could not save settings: {exc}", file=sys.stderr)
    return 1


# ---------------------------------------------------------------------------
# Read-only commands
# ---------------------------------------------------------------------------


def tokens_cmd(args: argparse.Namespace) -> int:
    controller = _controller(args)
    if args.mode is not None:
        controller.applied_mode = args.mode
    sink = CssTokenSink()
    controller.apply(sink)
    if args.format == "json":
        payload = {"mode": controller.applied_mode, **sink.as_dict()}
        if args.hex:
            payload["hex"] = _hex_colors(controller)
        print(json.dumps(payload, indent=2))
    else:
        print(sink.render(), end="")
        if args.hex:
            for role, value in _hex_colors(controller).items():
                print(f"/* {role}: {value} */")
    return 0


def _hex_colors(controller: ThemeController) -> dict[str, str]:
    harmony = controller.harmony()
    return {
        "bg": harmony.bg.to_hex(),
        "fg": harmony.fg.to_hex(),
        "border": harmony.border.to_hex(),
        "surface-1": harmony.surface_level(1).to_hex(),
        "primary": controller.state.color.shared.primary.to_hex(),
    }


def hex_cmd(args: argparse.Namespace) -> int:
    print(hsl_to_hex(args.hue, args.sat, args.light))
    return 0


def fonts_cmd(args: argparse.Namespace) -> int:
    categories = [args.category] if args.category else list(FONT_CATEGORIES)
    for category in categories:
        print(f"{category}:")
        for option in FONT_OPTIONS[category]:
            print(f"  {option.id:<20} {option.family}")
    return 0


def backgrounds_cmd(args: argparse.Namespace) -> int:
    for option in BACKGROUND_STYLE_OPTIONS:
        print(f"{option.id:<10} {option.label:<12} {option.description}")
    return 0


def show_cmd(args: argparse.Namespace) -> int:
    state = _open_store(args).load_all()
    data = {
        "color": state.color.to_dict(),
        "fonts": state.fonts.to_dict(),
        "background_style": state.background_style,
        "preference": state.preference,
    }
    if args.as_json:
        print(json.dumps(data, indent=2))
    else:
        for k, v in data.items():
            print(f"{k}: {v}")
    return 0


# ---------------------------------------------------------------------------
# Edit commands
# ---------------------------------------------------------------------------


def set_color_cmd(args: argparse.Namespace) -> int:
    field = SHARED_WIRE_NAMES.get(args.field, args.field)
    if field not in SHARED_FIELD_NAMES:
        print(f"error: unknown colour field {args.field!r}", file=sys.stderr)
        return 2
    controller = _controller(args)
    try:
        value = parse_number(args.value, args.field)
        controller.update_colors(controller.state.color.with_shared(**{field: value}))
    except InvalidSettingsError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except StoreError as exc:
        return _write_failed(exc)
    return 0


def set_lightness_cmd(args: argparse.Namespace) -> int:
    controller = _controller(args)
    try:
        value = parse_number(args.value, args.mode)
        controller.update_colors(controller.state.color.with_lightness(args.mode, value))
    except InvalidSettingsError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except StoreError as exc:
        return _write_failed(exc)
    return 0


def set_font_cmd(args: argparse.Namespace) -> int:
    known = [opt.id for opt in FONT_OPTIONS[args.category]]
    if args.font_id not in known:
        print(
            f"error: unknown {args.category} font {args.font_id!r} (choose from {', '.join(known)})",
            file=sys.stderr,
        )
        return 2
    controller = _controller(args)
    fonts = controller.state.fonts.to_dict()
    fonts[args.category] = args.font_id
    try:
        controller.update_fonts(FontSettings.from_dict(fonts))
    except StoreError as exc:
        return _write_failed(exc)
    return 0


def set_background_cmd(args: argparse.Namespace) -> int:
    try:
        _controller(args).update_background(args.style)
    except StoreError as exc:
        return _write_failed(exc)
    return 0


def mode_cmd(args: argparse.Namespace) -> int:
    controller = _controller(args)
    try:
        if args.cycle:
            controller.cycle()
        elif args.preference is not None:
            controller.set_preference(args.preference)
    except StoreError as exc:
        return _write_failed(exc)
    print(f"{controller.preference} ({controller.applied_mode})")
    return 0


def reset_cmd(args: argparse.Namespace) -> int:
    _open_store(args).reset()
    return 0


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pyharmony", description="Derive and manage theme colour tokens."
    )
    parser.add_argument("--store", type=Path, help="Settings file (.json, .yaml or .ini)")
    parser.add_argument("--prefix", help="Key prefix for stored settings")
    parser.add_argument(
        "--system-dark",
        action="store_true",
        help="Treat the host colour scheme as dark when the preference is 'system'",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    subparsers = parser.add_subparsers(dest="cmd")

    p_tokens = subparsers.add_parser("tokens", help="Print the computed tokens.")
    p_tokens.add_argument("--mode", choices=MODES, help="Override the stored preference")
    p_tokens.add_argument("--as", dest="format", choices=["css", "json"], default="css")
    p_tokens.add_argument("--hex", action="store_true", help="Also print hex colours")
    p_tokens.set_defaults(func=tokens_cmd)

    p_hex = subparsers.add_parser("hex", help="Convert an HSL colour to hex.")
    p_hex.add_argument("hue", type=float)
    p_hex.add_argument("sat", type=float)
    p_hex.add_argument("light", type=float)
    p_hex.set_defaults(func=hex_cmd)

    p_fonts = subparsers.add_parser("fonts", help="List font options.")
    p_fonts.add_argument("category", nargs="?", choices=FONT_CATEGORIES)
    p_fonts.set_defaults(func=fonts_cmd)

    p_bg = subparsers.add_parser("backgrounds", help="List background styles.")
    p_bg.set_defaults(func=backgrounds_cmd)

    p_show = subparsers.add_parser("show", help="Show stored settings.")
    p_show.add_argument("--json", dest="as_json", action="store_true")
    p_show.set_defaults(func=show_cmd)

    p_color = subparsers.add_parser("set-color", help="Set a shared colour field.")
    p_color.add_argument("field", help="e.g. bg_hue or bgHue")
    p_color.add_argument("value")
    p_color.set_defaults(func=set_color_cmd)

    p_light = subparsers.add_parser("set-lightness", help="Set the background lightness of a mode.")
    p_light.add_argument("mode", choices=MODES)
    p_light.add_argument("value")
    p_light.set_defaults(func=set_lightness_cmd)

    p_font = subparsers.add_parser("set-font", help="Select a font.")
    p_font.add_argument("category", choices=FONT_CATEGORIES)
    p_font.add_argument("font_id")
    p_font.set_defaults(func=set_font_cmd)

    p_style = subparsers.add_parser("set-background", help="Select a background style.")
    p_style.add_argument("style", choices=BACKGROUND_STYLES)
    p_style.set_defaults(func=set_background_cmd)

    p_mode = subparsers.add_parser("mode", help="Show or set the theme preference.")
    p_mode.add_argument("preference", nargs="?", choices=PREFERENCES)
    p_mode.add_argument("--cycle", action="store_true", help="Switch to the next mode")
    p_mode.set_defaults(func=mode_cmd)

    p_reset = subparsers.add_parser("reset", help="Clear stored colour, font and background settings.")
    p_reset.set_defaults(func=reset_cmd)

    return parser


def _configure_logging(verbose: bool) -> None:
    if verbose and not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s:%(name)s:%(message)s"))
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    func = getattr(args, "func", None)
    if func is None:
        parser.print_help()
        return 1
    _configure_logging(args.verbose)
    try:
        return int(func(args))
    except SystemExit as exc:  # pragma: no cover - argparse may raise
        return int(exc.code)


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
