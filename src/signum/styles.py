"""Badge styles and their SVG templates.

Each style owns one Jinja2 template, ``templates/<style>.svg``. Templates are
read and parsed once when a :class:`StyleRegistry` is built and are never
touched again, so a registry can be shared between threads.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from types import MappingProxyType

import jinja2

from signum.errors import TemplateInitError

DEFAULT_TEMPLATE_DIR: Path = Path(__file__).parent / "templates"

_INTER_TAG_WHITESPACE = re.compile(r">\s+<")


class Style(str, Enum):
    FLAT = "flat"
    FLAT_SQUARE = "flat-square"
    PLASTIC = "plastic"


DEFAULT_STYLE = Style.FLAT


def is_valid_style(style: str) -> bool:
    """True only for the exact registered names. Empty is not a style."""
    if isinstance(style, Style):
        return True
    return style in {s.value for s in Style}


def strip_xml_whitespace(source: str) -> str:
    """Drop indentation and newlines between tags so output is one line."""
    return _INTER_TAG_WHITESPACE.sub("><", source.strip())


def format_number(value: float) -> str:
    """Render 13.0 as "13" and 19.5 as "19.5"."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def _build_environment() -> jinja2.Environment:
    env = jinja2.Environment(
        autoescape=jinja2.select_autoescape(["svg"], default_for_string=True),
        undefined=jinja2.StrictUndefined,
    )
    env.filters["num"] = format_number
    return env


class StyleRegistry:
    """Parsed template per :class:`Style`, keyed by style."""

    def __init__(self, template_dir: Path | str | None = None) -> None:
        self.template_dir = Path(template_dir) if template_dir else DEFAULT_TEMPLATE_DIR
        env = _build_environment()
        templates: dict[Style, jinja2.Template] = {}
        for style in Style:
            templates[style] = self._load(env, style)
        self._templates: Mapping[Style, jinja2.Template] = MappingProxyType(templates)

    def _load(self, env: jinja2.Environment, style: Style) -> jinja2.Template:
        path = self.template_dir / f"{style.value}.svg"
        try:
            source = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise TemplateInitError(f"cannot read template for style {style.value!r}: {exc}") from exc
        if not source.strip():
            raise TemplateInitError(f"empty template for style: {style.value!r}")
        try:
            return env.from_string(strip_xml_whitespace(source))
        except jinja2.TemplateSyntaxError as exc:
            raise TemplateInitError(
                f"malformed template for style {style.value!r} (line {exc.lineno}): {exc.message}"
            ) from exc

    @property
    def styles(self) -> list[Style]:
        return list(self._templates)

    def is_valid(self, style: str) -> bool:
        return is_valid_style(style)

    def template_for(self, style: Style | str) -> jinja2.Template:
        """Return the parsed template. Raises KeyError for unknown styles."""
        try:
            key = Style(style)
        except ValueError:
            raise KeyError(style) from None
        return self._templates[key]
