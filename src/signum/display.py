"""Rich terminal display for signum."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

console = Console()
err_console = Console(stderr=True)


def setup_logging(verbose: bool = False) -> None:
    """Route library logging through rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _swatch(hex_color: str) -> str:
    """Colored block for a #rgb/#rrggbb value."""
    return f"[on {_expand_hex(hex_color)}]    [/]"


def _expand_hex(hex_color: str) -> str:
    """'#4c1' -> '#44cc11'. Rich only understands six-digit hex."""
    digits = hex_color.lstrip("#")
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return f"#{digits.lower()}"


def print_palette(palette: Mapping[str, str]) -> None:
    """Print named colors with their hex value and a swatch."""
    table = Table(title="Badge colors", box=box.SIMPLE_HEAVY)
    table.add_column("Name", style="bold")
    table.add_column("Hex")
    table.add_column("")
    for name, hex_color in palette.items():
        table.add_row(name, hex_color, _swatch(hex_color))
    console.print(table)
    console.print("  Any [bold]#rgb[/] or [bold]#rrggbb[/] value is accepted too.")


def print_styles(styles: list[str], default: str) -> None:
    lines: list[str] = []
    for style in styles:
        marker = " [dim](default)[/]" if style == default else ""
        lines.append(f"  {style}{marker}")
    panel = Panel(
        "\n".join(lines),
        title="[bold]Badge styles[/]",
        box=box.ROUNDED,
        border_style="cyan",
        width=40,
    )
    console.print(panel)


def print_render_result(result: dict) -> None:
    """Print badge generation result."""
    lines: list[str] = []
    lines.append("")
    lines.append(f"  Badge saved to: [bold]{result.get('output', '')}[/]")
    lines.append(f"  {escape(result.get('subject', ''))} | {escape(result.get('status', ''))}")
    lines.append(f"  Style: {result.get('style', '')}  Color: {result.get('color', '')}")
    lines.append(f"  Width: {result.get('width', 0):g}px")
    lines.append("")

    content = "\n".join(lines)
    panel = Panel(
        content,
        title="[bold]Badge Generated[/]",
        box=box.ROUNDED,
        border_style="green",
        width=50,
    )
    console.print(panel)


def print_config(config: dict, font_path: str | None) -> None:
    table = Table(box=box.SIMPLE)
    table.add_column("Setting", style="bold")
    table.add_column("Value")
    table.add_row("font_path", font_path or "[dim]not set[/]")
    for key, value in sorted(config.items()):
        if key != "font_path":
            table.add_row(key, str(value))
    console.print(table)


def print_error(message: str) -> None:
    err_console.print(f"[red]{escape(message)}[/]")
