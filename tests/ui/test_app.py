"""Tests for the preview app and color chips."""

import pytest

from autocolor.ui import CategoryPanel, ColorChip, PreviewApp, chip_text

SNAPSHOT = {
    "tags": {"bug": "hsl(297, 72%, 48%)", "feature": "hsl(52, 77%, 52%)"},
    "pages": {"Login": "hsl(0, 100%, 50%)"},
}


# --- Sync tests (no app needed) ---


def test_chip_text_colored():
    text = chip_text("Login", "hsl(0, 100%, 50%)")
    assert text.plain == "██ Login"
    assert any(str(span.style) == "#ff0000" for span in text.spans)


def test_chip_text_malformed_color_is_plain():
    text = chip_text("odd", "not a color")
    assert text.plain == "██ odd"
    assert text.spans == []


def test_color_chip_attributes():
    chip = ColorChip("bug", "hsl(297, 72%, 48%)")
    assert chip.label_name == "bug"
    assert chip.color_value == "hsl(297, 72%, 48%)"


# --- Async tests ---


@pytest.mark.asyncio
async def test_app_shows_panel_per_category():
    app = PreviewApp(SNAPSHOT)
    async with app.run_test():
        panels = list(app.query(CategoryPanel))
        assert [p.category for p in panels] == ["pages", "tags"]
        chips = list(app.query(ColorChip))
        assert sorted(c.label_name for c in chips) == ["Login", "bug", "feature"]


@pytest.mark.asyncio
async def test_app_empty_snapshot():
    app = PreviewApp({})
    async with app.run_test():
        assert app.query_one("#empty")
        assert not list(app.query(ColorChip))


@pytest.mark.asyncio
async def test_q_quits():
    app = PreviewApp(SNAPSHOT)
    async with app.run_test() as pilot:
        await pilot.press("q")
        await pilot.pause()
    assert app.return_code == 0
