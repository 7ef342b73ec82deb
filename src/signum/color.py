"""Badge color palette and validation.

Named colors follow the shields.io scheme. Any other token must be a
``#RGB`` or ``#RRGGBB`` hex string, or empty to let the template choose.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from types import MappingProxyType

DEFAULT_PALETTE: Mapping[str, str] = MappingProxyType({
    "brightgreen": "#4c1",
    "green": "#97ca00",
    "yellow": "#dfb317",
    "yellowgreen": "#a4a61d",
    "orange": "#fe7d37",
    "red": "#e05d44",
    "blue": "#007ec6",
    "grey": "#555",
    "gray": "#555",
    "lightgrey": "#9f9f9f",
    "lightgray": "#9f9f9f",
})

_HEX_COLOR = re.compile(r"#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})")


def is_hex_color(value: str) -> bool:
    """Return True for ``#abc`` / ``#aabbcc`` style strings (any case)."""
    return _HEX_COLOR.fullmatch(value) is not None


class ColorResolver:
    """Maps color tokens to the hex string written into the badge."""

    def __init__(self, palette: Mapping[str, str] = DEFAULT_PALETTE) -> None:
        self._palette: Mapping[str, str] = MappingProxyType(dict(palette))

    @property
    def palette(self) -> Mapping[str, str]:
        return self._palette

    def names(self) -> list[str]:
        return list(self._palette)

    def resolve(self, token: str) -> str:
        """Palette names become hex, everything else passes through."""
        return self._palette.get(token, token)

    def is_valid(self, token: str) -> bool:
        if token == "":
            return True
        if token in self._palette:
            return True
        return is_hex_color(token)
