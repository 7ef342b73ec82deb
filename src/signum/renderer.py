"""Badge rendering engine.

Build one :class:`Renderer` at startup and share it. Construction reads the
font and every style template; :meth:`Renderer.render` does no I/O and only
locks around text measurement.
"""

from __future__ import annotations

import logging
from pathlib import Path

import jinja2

from signum.badge import BadgeRequest
from signum.color import ColorResolver
from signum.errors import InvalidColorError, InvalidStyleError, RenderError, TemplateExecError
from signum.fonts import Face, FontMetrics
from signum.layout import Bounds, compute_bounds
from signum.styles import DEFAULT_STYLE, StyleRegistry

logger = logging.getLogger(__name__)


class Renderer:
    def __init__(
        self,
        metrics: FontMetrics,
        registry: StyleRegistry | None = None,
        colors: ColorResolver | None = None,
    ) -> None:
        self.metrics = metrics
        self.registry = registry or StyleRegistry()
        self.colors = colors or ColorResolver()

    @classmethod
    def from_font_path(cls, font_path: Path | str, template_dir: Path | str | None = None) -> Renderer:
        """Load a .ttf/.otf file and the style templates."""
        metrics = FontMetrics.from_path(font_path)
        return cls(metrics, StyleRegistry(template_dir))

    @classmethod
    def from_face(cls, face: Face | None, template_dir: Path | str | None = None) -> Renderer:
        """Use an already loaded face, e.g. ``FixedWidthFace`` in tests."""
        return cls(FontMetrics(face), StyleRegistry(template_dir))

    def bounds_for(self, subject: str, status: str) -> Bounds:
        subject_dx, status_dx = self.metrics.measure_pair(subject, status)
        return compute_bounds(subject_dx, status_dx)

    def render(self, request: BadgeRequest) -> bytes:
        """Render ``request`` to SVG bytes.

        Raises InvalidColorError / InvalidStyleError before any measuring,
        and TemplateExecError if a template breaks while rendering.
        """
        if not self.colors.is_valid(request.color):
            raise InvalidColorError(request.color)

        style = request.style or DEFAULT_STYLE.value
        if not self.registry.is_valid(style):
            raise InvalidStyleError(style)
        try:
            template = self.registry.template_for(style)
        except KeyError:
            raise RenderError(f"missing template for style: {style!r}") from None

        bounds = self.bounds_for(request.subject, request.status)
        color = self.colors.resolve(request.color)

        try:
            svg = template.render(
                subject=request.subject,
                status=request.status,
                color=color,
                bounds=bounds,
            )
        except (jinja2.TemplateError, TypeError, ValueError) as exc:
            raise TemplateExecError(f"template for style {style!r} failed: {exc}") from exc

        logger.debug(
            "rendered %s badge %r|%r width=%s color=%s",
            style, request.subject, request.status, bounds.dx, color,
        )
        return svg.encode("utf-8")
