"""Textual app previewing a category -> label -> color snapshot."""

from textual.app import App, ComposeResult
from textual.containers import Vertical, VerticalScroll
from textual.widgets import Footer, Static

from autocolor.ui.chip import ColorChip


class CategoryPanel(Vertical):
    """Header plus one chip per label."""

    DEFAULT_CSS = """
    CategoryPanel {
        height: auto;
        border: round $primary;
        padding: 0 1;
        margin-bottom: 1;
    }
    CategoryPanel > .category-title {
        text-style: bold;
    }
    """

    def __init__(self, category: str, colors: dict[str, str], **kwargs) -> None:
        super().__init__(**kwargs)
        self.category = category
        self.label_colors = colors

    def compose(self) -> ComposeResult:
        count = len(self.label_colors)
        noun = "label" if count == 1 else "labels"
        yield Static(f"{self.category}  ({count} {noun})", classes="category-title")
        for label, color in self.label_colors.items():
            yield ColorChip(label, color)


class PreviewApp(App):
    """Browse precomputed or scanned label colors."""

    TITLE = "autocolor"
    BINDINGS = [("q", "quit", "Quit"), ("ctrl+q", "quit", "Quit")]

    def __init__(self, snapshot: dict[str, dict[str, str]]) -> None:
        super().__init__()
        self.snapshot = snapshot

    def compose(self) -> ComposeResult:
        with VerticalScroll(id="categories"):
            if not self.snapshot:
                yield Static("No colors to show.", id="empty")
            for category in sorted(self.snapshot):
                yield CategoryPanel(category, self.snapshot[category])
        yield Footer()
