"""LabelEditorController - the state machine behind the inline label editor.

The controller owns all transient editor state (mode, filter text, filtered
labels and highlight cursor) and knows nothing about widgets. Views drive it
with discrete events and re-render from its read-only properties whenever
``on_state_changed`` fires.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from label_picker.core.availability import (
    all_labels_used,
    compute_available,
    difference_by_name,
    find_by_id,
)
from label_picker.core.navigation import ArrowDirection, move_highlight


if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Sequence

    from label_picker.models import Label


logger = logging.getLogger(__name__)


class EditorMode(Enum):
    COLLAPSED = "collapsed"
    SUGGESTING = "suggesting"


_NAVIGATION_KEYS = {
    "up": ArrowDirection.UP,
    "down": ArrowDirection.DOWN,
}


class LabelEditorController:
    def __init__(
        self,
        *,
        labels: Sequence[Label],
        selected_labels: Sequence[Label],
        on_add_label: Callable[[Label], None],
        create_label: Callable[[str, dict[str, str]], Awaitable[Label]],
        on_state_changed: Callable[[], None] | None = None,
    ) -> None:
        self._labels: list[Label] = list(labels)
        self._selected_labels: list[Label] = list(selected_labels)
        self._on_add_label = on_add_label
        self._create_label = create_label
        self._on_state_changed = on_state_changed

        self._mode = EditorMode.COLLAPSED
        self._filter_value = ""
        self._filtered_labels: list[Label] = difference_by_name(
            self._labels, self._selected_labels
        )
        self._highlighted_id: str | None = None
        self._create_in_flight = False
        self._closed = False

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def mode(self) -> EditorMode:
        return self._mode

    @property
    def is_suggesting(self) -> bool:
        return self._mode is EditorMode.SUGGESTING

    @property
    def filter_value(self) -> str:
        return self._filter_value

    @property
    def highlighted_id(self) -> str | None:
        """Id of the highlighted candidate, or None."""
        return self._highlighted_id

    @property
    def labels(self) -> list[Label]:
        return list(self._labels)

    @property
    def selected_labels(self) -> list[Label]:
        return list(self._selected_labels)

    @property
    def available_labels(self) -> list[Label]:
        """Filtered labels that are not already selected."""
        return difference_by_name(self._filtered_labels, self._selected_labels)

    @property
    def highlighted_label(self) -> Label | None:
        return find_by_id(self.available_labels, self._highlighted_id)

    @property
    def all_labels_used(self) -> bool:
        return all_labels_used(self._labels, self._selected_labels)

    @property
    def can_create(self) -> bool:
        """Filter text is set and no catalog label carries exactly that name.

        Compares the stripped text, which is what gets created.
        """
        name = self._filter_value.strip()
        if not name:
            return False
        return all(label.name != name for label in self._labels)

    @property
    def is_creating(self) -> bool:
        return self._create_in_flight

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def start_suggesting(self) -> None:
        self._filtered_labels = list(self._labels)
        available = self.available_labels

        if not available and not self.is_suggesting:
            # Nothing left to offer, the menu reports that all labels are used
            self._enter_suggesting(highlighted_id=None)
            return

        first = available[0].id if available else None
        self._enter_suggesting(highlighted_id=first)

    def _enter_suggesting(self, highlighted_id: str | None) -> None:
        self._mode = EditorMode.SUGGESTING
        self._highlighted_id = highlighted_id
        self._filter_value = ""
        logger.debug("Label editor suggesting, highlighted=%r", highlighted_id)
        self._changed()

    def stop_suggesting(self) -> None:
        """Collapse the editor and reset filter text, cursor and filtered list."""
        self._mode = EditorMode.COLLAPSED
        self._filter_value = ""
        self._highlighted_id = None
        self._filtered_labels = list(self._labels)
        logger.debug("Label editor collapsed")
        self._changed()

    dismiss = stop_suggesting

    def change_filter(self, filter_value: str) -> None:
        if not self.is_suggesting:
            return

        if not filter_value:
            # Clearing the input is a full reset rather than an empty match
            self._filtered_labels = list(self._labels)
            self._highlighted_id = None
            self._filter_value = ""
            self._changed()
            return

        self._filtered_labels = compute_available(
            self._labels, self._selected_labels, filter_value
        )
        self._filter_value = filter_value
        self._revalidate_highlight()
        self._changed()

    def highlight(self, label_id: str) -> None:
        """Highlight a candidate directly, e.g. when the mouse hovers a row."""
        if find_by_id(self.available_labels, label_id) is None:
            return
        self._highlighted_id = label_id
        self._changed()

    def highlight_adjacent(self, direction: ArrowDirection) -> None:
        available = self.available_labels
        current = find_by_id(available, self._highlighted_id)
        if current is None:
            return

        # move_highlight matches on name but hands back an id
        self._highlighted_id = move_highlight(current.name, available, direction)
        self._changed()

    def add_label(self, label_id: str | None) -> Label | None:
        """Emit the catalog label with id ``label_id`` and collapse.

        A miss leaves the state untouched.
        """
        label = find_by_id(self._labels, label_id)
        if label is None:
            logger.debug("No catalog label has id %r, ignoring", label_id)
            return None

        self._on_add_label(label)
        self.stop_suggesting()
        return label

    def select_highlighted(self) -> Label | None:
        return self.add_label(self._highlighted_id)

    async def create_label(
        self, name: str, properties: dict[str, str] | None = None
    ) -> Label | None:
        """Create a new label through the creator and emit it.

        Errors raised by the creator propagate unchanged and leave the editor
        suggesting. Returns None when the call was ignored or its result
        dropped.
        """
        if self._create_in_flight:
            logger.debug("Create request already pending, ignoring %r", name)
            return None

        self._create_in_flight = True
        self._changed()
        try:
            label = await self._create_label(name, dict(properties or {}))
        finally:
            self._create_in_flight = False

        if self._closed:
            logger.debug("Editor closed before %r was created, dropping", name)
            return None

        self._on_add_label(label)
        self.stop_suggesting()
        return label

    def handle_key(self, key: str) -> bool:
        """Dispatch an editing shortcut.

        Shortcuts only apply while suggesting with a highlighted candidate.
        Returns True if the key was consumed.
        """
        if not self.is_suggesting or self._highlighted_id is None:
            return False

        if key == "escape":
            self.stop_suggesting()
            return True
        if key == "enter":
            self.select_highlighted()
            return True
        if key in _NAVIGATION_KEYS:
            self.highlight_adjacent(_NAVIGATION_KEYS[key])
            return True
        return False

    def set_labels(
        self, labels: Sequence[Label], selected_labels: Sequence[Label]
    ) -> None:
        """Replace the catalog and the selected set supplied by the owner."""
        self._labels = list(labels)
        self._selected_labels = list(selected_labels)

        if not self.is_suggesting:
            self._filtered_labels = list(self._labels)
            self._changed()
            return

        self._filtered_labels = compute_available(
            self._labels, self._selected_labels, self._filter_value
        )
        self._revalidate_highlight()
        self._changed()

    def close(self) -> None:
        """End the controller lifetime; pending create results are dropped."""
        self._closed = True
        self._on_state_changed = None

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _revalidate_highlight(self) -> None:
        available = self.available_labels
        if find_by_id(available, self._highlighted_id) is not None:
            return
        self._highlighted_id = available[0].id if available else None

    def _changed(self) -> None:
        if self._on_state_changed is not None:
            self._on_state_changed()
