"""Badge request value and caller-side input checks.

The renderer measures whatever it is given. Front ends (CLI, MCP tools) go
through :func:`normalize_badge_input` first so users get a clear message for
blank fields instead of a badge with an empty segment.
"""

from __future__ import annotations

from dataclasses import dataclass

from signum.color import ColorResolver
from signum.errors import InvalidBadgeInput, InvalidColorError, InvalidStyleError
from signum.styles import DEFAULT_STYLE, is_valid_style


@dataclass(frozen=True)
class BadgeRequest:
    """Input of a single render: ``subject | status`` drawn in ``color``."""

    subject: str
    status: str
    color: str = ""
    style: str = ""


def normalize_badge_input(
    subject: str,
    status: str,
    color: str,
    style: str = "",
    colors: ColorResolver | None = None,
) -> BadgeRequest:
    """Trim fields, require subject/status/color and validate color and style."""
    subject = (subject or "").strip()
    status = (status or "").strip()
    color = (color or "").strip()
    style = (style or "").strip()

    if not subject:
        raise InvalidBadgeInput("subject is required")
    if not status:
        raise InvalidBadgeInput("status is required")
    if not color:
        raise InvalidBadgeInput("color is required")
    if not style:
        style = DEFAULT_STYLE.value

    resolver = colors or ColorResolver()
    if not resolver.is_valid(color):
        raise InvalidColorError(color)
    if not is_valid_style(style):
        raise InvalidStyleError(style)

    return BadgeRequest(subject=subject, status=status, color=color, style=style)
