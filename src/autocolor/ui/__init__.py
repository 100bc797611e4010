"""Textual preview UI for autocolor."""

from autocolor.ui.app import CategoryPanel, PreviewApp
from autocolor.ui.chip import ColorChip, chip_text

__all__ = ["CategoryPanel", "ColorChip", "PreviewApp", "chip_text"]
