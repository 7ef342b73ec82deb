"""Exceptions raised by the signum badge engine."""
from __future__ import annotations


class SignumError(Exception):
    """Base class for every signum error."""


class ConstructionError(SignumError):
    """The renderer could not be built. The instance must not be used."""


class FontLoadError(ConstructionError):
    """Font bytes could not be parsed, or the font file could not be read."""


class TemplateInitError(ConstructionError):
    """A style template source is missing, empty or malformed."""


class InvalidBadgeInput(SignumError, ValueError):
    """Caller supplied a badge field that can never render."""


class InvalidColorError(InvalidBadgeInput):
    def __init__(self, color: str) -> None:
        super().__init__(f"invalid color: {color!r}")
        self.color = color


class InvalidStyleError(InvalidBadgeInput):
    def __init__(self, style: str) -> None:
        super().__init__(f"invalid style: {style!r}")
        self.style = style


class RenderError(SignumError):
    """Rendering failed for a reason the caller cannot fix."""


class TemplateExecError(RenderError):
    """A parsed template failed while being instantiated."""
