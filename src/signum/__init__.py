"""signum: shields-style SVG status badges rendered with real font metrics."""

__version__ = "0.1.0"
