"""MCP server for signum.

Exposes badge rendering as MCP tools so an assistant can produce README badges
mid-conversation. Run via: python3 -m signum.mcp_server
"""
from __future__ import annotations

import threading
from typing import Any

from mcp.server.fastmcp import FastMCP

from signum.errors import ConstructionError, InvalidBadgeInput

mcp = FastMCP(name="signum")

_renderer = None
_renderer_lock = threading.Lock()


def _get_renderer():
    """Build the shared renderer from the configured font on first use."""
    global _renderer
    with _renderer_lock:
        if _renderer is None:
            from signum.config import get_font_path
            from signum.renderer import Renderer

            font_path = get_font_path()
            if font_path is None:
                raise ConstructionError(
                    "No font configured. Run: signum config set-font /path/to/font.ttf"
                )
            _renderer = Renderer.from_font_path(font_path)
        return _renderer


@mcp.tool()
def render_badge(subject: str, status: str, color: str, style: str = "flat") -> dict[str, Any]:
    """Render an SVG status badge.

    color: a named color (see list_colors) or #rgb / #rrggbb.
    style: flat, flat-square or plastic.
    """
    from signum.badge import normalize_badge_input
    from signum.styles import format_number

    try:
        renderer = _get_renderer()
        request = normalize_badge_input(subject, status, color, style, colors=renderer.colors)
    except (ConstructionError, InvalidBadgeInput) as exc:
        return {"error": str(exc)}

    svg = renderer.render(request)
    bounds = renderer.bounds_for(request.subject, request.status)
    return {
        "svg": svg.decode("utf-8"),
        "width": format_number(bounds.dx),
        "style": request.style,
        "color": renderer.colors.resolve(request.color),
    }


@mcp.tool()
def list_colors() -> dict[str, Any]:
    """List named badge colors and the hex value each one renders as."""
    from signum.color import ColorResolver

    return {"colors": dict(ColorResolver().palette)}


@mcp.tool()
def list_styles() -> dict[str, Any]:
    """List available badge styles."""
    from signum.styles import DEFAULT_STYLE, Style

    return {"styles": [s.value for s in Style], "default": DEFAULT_STYLE.value}


def main() -> None:
    mcp.run()


if __name__ == "__main__":
    main()
