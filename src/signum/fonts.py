"""Text width measurement for badge layout.

Widths are advance widths at 11px (11pt at 72 DPI), truncated to whole pixels,
plus ``EXTRA_DX``. shields.io measures with Verdana and pads by 10px; the extra
13px keeps our widths in line with theirs for the fonts we ship with.
"""

from __future__ import annotations

import io
import logging
import math
import threading
from pathlib import Path
from typing import Protocol

from PIL import ImageFont

from signum.errors import FontLoadError

logger = logging.getLogger(__name__)

FONT_SIZE = 11
DPI = 72
EXTRA_DX = 13


class Face(Protocol):
    def getlength(self, text: str) -> float: ...


class FixedWidthFace:
    """Every character advances by the same number of pixels.

    Stands in for a real typeface where tests need exact, font-independent
    widths. The default advance matches a 7x13 bitmap font.
    """

    def __init__(self, advance: int = 7) -> None:
        if advance < 0:
            raise ValueError("advance must be non-negative")
        self.advance = advance

    def getlength(self, text: str) -> float:
        return float(len(text) * self.advance)

    def __repr__(self) -> str:
        return f"FixedWidthFace(advance={self.advance})"


class FontMetrics:
    """Measures strings with one face.

    Font backends keep internal glyph caches, so every measurement goes through
    ``self._lock``. Use :meth:`measure_pair` to measure both badge segments in
    a single critical section.
    """

    def __init__(self, face: Face | None) -> None:
        if face is None:
            raise FontLoadError("font face is required")
        self.face = face
        self._lock = threading.Lock()

    @classmethod
    def from_bytes(cls, data: bytes) -> FontMetrics:
        """Parse TrueType/OpenType bytes into a face at the badge font size."""
        if not data:
            raise FontLoadError("font data is empty")
        size = round(FONT_SIZE * DPI / 72)
        try:
            face = ImageFont.truetype(
                io.BytesIO(data), size=size, layout_engine=ImageFont.Layout.BASIC
            )
        except (OSError, ValueError) as exc:
            raise FontLoadError(f"cannot parse font: {exc}") from exc
        return cls(face)

    @classmethod
    def from_path(cls, path: Path | str) -> FontMetrics:
        if not path:
            raise FontLoadError("font path is required")
        try:
            data = Path(path).read_bytes()
        except OSError as exc:
            raise FontLoadError(f"cannot read font {path}: {exc}") from exc
        logger.debug("loaded %d font bytes from %s", len(data), path)
        return cls.from_bytes(data)

    def _measure(self, text: str) -> float:
        return float(math.floor(self.face.getlength(text)) + EXTRA_DX)

    def measure(self, text: str) -> float:
        """Width of ``text`` in pixels, including ``EXTRA_DX``."""
        with self._lock:
            return self._measure(text)

    def measure_pair(self, subject: str, status: str) -> tuple[float, float]:
        with self._lock:
            return self._measure(subject), self._measure(status)
