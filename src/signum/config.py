"""Configuration file management for signum.

Reads and writes ~/.signum/config.json for settings the command line and MCP
server share (font path, default style). ``SIGNUM_FONT_PATH`` in the
environment takes precedence over the file.
"""
from __future__ import annotations

import json
import os
from pathlib import Path

from signum.styles import DEFAULT_STYLE, is_valid_style

DEFAULT_CONFIG_PATH: Path = Path.home() / ".signum" / "config.json"
FONT_PATH_ENV = "SIGNUM_FONT_PATH"


def load_config(config_path: Path | None = None) -> dict:
    """Load config from JSON file. Returns {} if file missing or invalid."""
    path = config_path or DEFAULT_CONFIG_PATH
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict, config_path: Path | None = None) -> None:
    """Write config dict to JSON file. Creates parent dirs if needed."""
    path = config_path or DEFAULT_CONFIG_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")


def get_font_path(config_path: Path | None = None) -> Path | None:
    """Return the font to render with: env var first, then config, else None."""
    env_value = os.environ.get(FONT_PATH_ENV, "").strip()
    if env_value:
        return Path(env_value)
    raw = load_config(config_path).get("font_path")
    if raw:
        return Path(raw)
    return None


def set_font_path(font_path: Path, config_path: Path | None = None) -> None:
    """Persist the font path to config."""
    config = load_config(config_path)
    config["font_path"] = str(font_path)
    save_config(config, config_path)


def get_default_style(config_path: Path | None = None) -> str:
    """Configured default style, falling back to flat for unknown values."""
    raw = load_config(config_path).get("default_style", "")
    if isinstance(raw, str) and is_valid_style(raw):
        return raw
    return DEFAULT_STYLE.value
