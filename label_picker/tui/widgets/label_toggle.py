"""Collapsed-state button of the inline label editor."""

from textual.widgets import Button


class InlineLabelToggle(Button):
    """Small "+ Label" button that opens the label suggestions."""

    DEFAULT_CSS = """
    InlineLabelToggle {
        min-width: 9;
        height: 1;
        border: none;
        padding: 0 1;
        background: $primary-darken-2;
    }

    InlineLabelToggle:hover {
        background: $primary;
    }
    """

    def __init__(self, label: str = "+ Label", **kwargs) -> None:
        super().__init__(label, **kwargs)
