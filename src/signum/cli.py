"""CLI commands for signum."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from signum import __version__
from signum.badge import normalize_badge_input
from signum.color import ColorResolver
from signum.config import (
    FONT_PATH_ENV,
    get_default_style,
    get_font_path,
    load_config,
    set_font_path,
)
from signum.display import (
    console,
    print_config,
    print_error,
    print_palette,
    print_render_result,
    print_styles,
    setup_logging,
)
from signum.errors import SignumError
from signum.fonts import FontMetrics
from signum.renderer import Renderer
from signum.styles import Style

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser."""
    parser = argparse.ArgumentParser(
        prog="signum",
        description="Render shields-style SVG status badges",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser("render", help="Render a badge to SVG")
    render_parser.add_argument("--subject", "-s", required=True, help="Badge subject text")
    render_parser.add_argument("--status", "-t", required=True, help="Badge status text")
    render_parser.add_argument("--color", "-c", required=True, help="Badge color (named or hex)")
    render_parser.add_argument(
        "--style", default=None, help="Badge style (flat, flat-square, plastic)"
    )
    render_parser.add_argument("--font", "-f", default=None, help=f"Path to a .ttf font (or set {FONT_PATH_ENV})")
    render_parser.add_argument("--output", "-o", default=None, help="Output SVG file path (default: stdout)")

    subparsers.add_parser("colors", help="List named badge colors")
    subparsers.add_parser("styles", help="List badge styles")

    config_parser = subparsers.add_parser("config", help="Show or change saved settings")
    config_sub = config_parser.add_subparsers(dest="config_command")
    set_font_p = config_sub.add_parser("set-font", help="Remember the font used for rendering")
    set_font_p.add_argument("path", help="Path to a .ttf/.otf font file")
    config_sub.add_parser("show", help="Show saved settings")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return

    try:
        if args.command == "render":
            do_render(
                subject=args.subject,
                status=args.status,
                color=args.color,
                style=args.style,
                font=args.font,
                output=args.output,
            )
        elif args.command == "colors":
            do_colors()
        elif args.command == "styles":
            do_styles()
        elif args.command == "config":
            if getattr(args, "config_command", None) == "set-font":
                do_config_set_font(args.path)
            else:
                do_config_show()
    except SignumError as exc:
        print_error(str(exc))
        sys.exit(1)


def _resolve_font(font: str | None) -> Path:
    if font:
        return Path(font).expanduser()
    configured = get_font_path()
    if configured is None:
        raise SignumError(f"font is required (use --font, set {FONT_PATH_ENV} or run: signum config set-font PATH)")
    return configured.expanduser()


def do_render(
    subject: str,
    status: str,
    color: str,
    style: str | None = None,
    font: str | None = None,
    output: str | None = None,
) -> dict:
    """Render one badge to a file, or to stdout when no output is given."""
    request = normalize_badge_input(subject, status, color, style or get_default_style())
    font_path = _resolve_font(font)
    renderer = Renderer.from_font_path(font_path)
    svg = renderer.render(request)
    width = renderer.bounds_for(request.subject, request.status).dx

    result = {
        "ok": True,
        "subject": request.subject,
        "status": request.status,
        "color": renderer.colors.resolve(request.color),
        "style": request.style,
        "width": width,
        "output": None,
        "bytes": len(svg),
    }
    if output is None:
        sys.stdout.buffer.write(svg)
        sys.stdout.buffer.flush()
        return result

    output_path = Path(output)
    output_path.write_bytes(svg)
    result["output"] = str(output_path)
    logger.debug("wrote %d bytes to %s", len(svg), output_path)
    print_render_result(result)
    return result


def do_colors() -> dict:
    palette = dict(ColorResolver().palette)
    print_palette(palette)
    return palette


def do_styles() -> list[str]:
    styles = [s.value for s in Style]
    print_styles(styles, default=get_default_style())
    return styles


def do_config_set_font(path: str) -> dict:
    """Validate a font file and save it as the rendering default."""
    font_path = Path(path).expanduser().resolve()
    FontMetrics.from_path(font_path)
    set_font_path(font_path)
    console.print(f"[green]Font saved:[/] {font_path}")
    return {"ok": True, "font_path": str(font_path)}


def do_config_show() -> dict:
    config = load_config()
    font_path = get_font_path()
    print_config(config, str(font_path) if font_path else None)
    return {"config": config, "font_path": str(font_path) if font_path else None}


if __name__ == "__main__":
    main()
