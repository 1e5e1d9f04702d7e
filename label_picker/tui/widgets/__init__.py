"""Widgets that make up the inline label editor."""

from label_picker.tui.widgets.inline_label_editor import InlineLabelEditor
from label_picker.tui.widgets.label_menu import InlineLabelEditorMenu
from label_picker.tui.widgets.label_toggle import InlineLabelToggle


__all__ = [
    "InlineLabelEditor",
    "InlineLabelEditorMenu",
    "InlineLabelToggle",
]
