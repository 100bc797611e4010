"""Colored swatch widgets for labels."""

from __future__ import annotations

from rich.text import Text
from textual.widgets import Static

from autocolor.color import hsl_to_hex

SWATCH = "\u2588\u2588"  # full blocks


def chip_text(label: str, color: str) -> Text:
    """Build a colored block + label Text. Malformed colors render plain."""
    hex_color = hsl_to_hex(color)
    result = Text()
    if hex_color:
        result.append(SWATCH, style=hex_color)
    else:
        result.append(SWATCH)
    result.append_text(Text(f" {label}"))
    return result


class ColorChip(Static):
    """A label with its color swatch."""

    DEFAULT_CSS = """
    ColorChip {
        width: auto;
        height: 1;
        margin: 0 2 0 0;
    }
    """

    def __init__(self, label: str, color: str, **kwargs) -> None:
        super().__init__(chip_text(label, color), **kwargs)
        self.label_name = label
        self.color_value = color
        self.tooltip = color
