"""Selection and filtering logic for the inline label editor."""

from label_picker.core.availability import (
    all_labels_used,
    compute_available,
    difference_by_name,
    find_by_id,
    find_by_name,
)
from label_picker.core.controller import EditorMode, LabelEditorController
from label_picker.core.navigation import ArrowDirection, move_highlight


__all__ = [
    "ArrowDirection",
    "EditorMode",
    "LabelEditorController",
    "all_labels_used",
    "compute_available",
    "difference_by_name",
    "find_by_id",
    "find_by_name",
    "move_highlight",
]
