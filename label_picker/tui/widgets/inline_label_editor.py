from __future__ import annotations

import logging
from collections.abc import Sequence

from textual import on
from textual.app import ComposeResult
from textual.containers import Container, Vertical
from textual.events import DescendantBlur, Key
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Button, Input
from textual.worker import Worker

from label_picker.api.protocols import LabelCreator
from label_picker.core.controller import LabelEditorController
from label_picker.models import Label
from label_picker.stores.settings import InputSize
from label_picker.tui.colors import color_for_label
from label_picker.tui.widgets.label_menu import InlineLabelEditorMenu
from label_picker.tui.widgets.label_toggle import InlineLabelToggle


logger = logging.getLogger(__name__)

FILTER_PLACEHOLDER = "Type to filter, press Enter to add a label"

CREATE_LABEL_WORKER_GROUP = "create_label"

_SHORTCUT_KEYS = {"escape", "up", "down"}


class InlineLabelEditor(Container):
    """Inline label picker with a collapsed and a suggesting state.

    Collapsed it shows only an InlineLabelToggle. Suggesting it shows a
    filter input with an InlineLabelEditorMenu underneath. All state lives
    in a LabelEditorController; this widget forwards events to it and
    re-renders whenever it reports a change.

    Keyboard (suggesting, with a highlighted row):
    - Escape: blur the input and collapse
    - Enter: add the highlighted label
    - Up/Down: move the highlight, clamped at both ends
    """

    DEFAULT_CSS = """
    InlineLabelEditor {
        width: auto;
        height: auto;

        #label-suggestions {
            width: auto;
            height: auto;
            display: none;
        }

        #label-filter {
            height: 3;
        }
    }
    """

    class LabelAdded(Message):
        """Posted once per label selected from the menu or newly created."""

        def __init__(self, label: Label) -> None:
            super().__init__()
            self.label = label

    def __init__(
        self,
        labels: Sequence[Label],
        selected_labels: Sequence[Label],
        label_creator: LabelCreator,
        input_size: InputSize = InputSize.EXTRA_SMALL,
        default_color: str | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.input_size = input_size
        self.default_color = default_color
        self.controller = LabelEditorController(
            labels=labels,
            selected_labels=selected_labels,
            on_add_label=self._emit_label_added,
            create_label=label_creator.create_label,
            on_state_changed=self._on_controller_changed,
        )

    def compose(self) -> ComposeResult:
        yield InlineLabelToggle(id="label-toggle")
        with Vertical(id="label-suggestions"):
            filter_input = Input(placeholder=FILTER_PLACEHOLDER, id="label-filter")
            filter_input.styles.width = self.input_size.width
            yield filter_input
            yield InlineLabelEditorMenu(
                default_color=self.default_color, id="label-menu"
            )

    def on_mount(self) -> None:
        self._render_state()

    def on_unmount(self) -> None:
        self.controller.close()

    @property
    def is_suggesting(self) -> bool:
        return self.controller.is_suggesting

    @property
    def filter_input(self) -> Input:
        return self.query_one("#label-filter", Input)

    @property
    def menu(self) -> InlineLabelEditorMenu:
        return self.query_one("#label-menu", InlineLabelEditorMenu)

    # ------------------------------------------------------------------
    # Owner-facing API
    # ------------------------------------------------------------------

    def update_labels(
        self, labels: Sequence[Label], selected_labels: Sequence[Label]
    ) -> None:
        """Push a new catalog and selected set from the owner."""
        self.controller.set_labels(labels, selected_labels)

    def dismiss(self) -> None:
        if self.controller.is_suggesting:
            self.controller.stop_suggesting()

    def dismiss_if_outside(self, widget: Widget | None) -> None:
        """Collapse when a click landed outside this editor."""
        if widget is None or widget is self or self in widget.ancestors:
            return
        self.dismiss()

    def create_label(self, name: str) -> Worker | None:
        """Create ``name`` in the background.

        The worker runs on the app, so a failing request surfaces through the
        app's worker state handling rather than here.
        """
        name = name.strip()
        if not name or self.controller.is_creating:
            return None

        properties = {"color": color_for_label(name)}
        return self.app.run_worker(
            self.controller.create_label(name, properties),
            name=f"create_label:{name}",
            group=CREATE_LABEL_WORKER_GROUP,
            exit_on_error=False,
        )

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    @on(Button.Pressed, "#label-toggle")
    def _on_toggle_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.controller.start_suggesting()
        self.filter_input.focus()

    @on(Input.Changed, "#label-filter")
    def _on_filter_changed(self, event: Input.Changed) -> None:
        event.stop()
        self.controller.change_filter(event.value)

    @on(Input.Submitted, "#label-filter")
    def _on_filter_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.controller.handle_key("enter")

    def on_key(self, event: Key) -> None:
        if not self.controller.is_suggesting or event.key not in _SHORTCUT_KEYS:
            return

        if event.key == "escape" and self.controller.highlighted_id is not None:
            self.filter_input.blur()

        if self.controller.handle_key(event.key):
            event.prevent_default()
            event.stop()

    @on(InlineLabelEditorMenu.ItemHighlighted)
    def _on_item_highlighted(
        self, event: InlineLabelEditorMenu.ItemHighlighted
    ) -> None:
        event.stop()
        self.controller.highlight(event.label_id)

    @on(InlineLabelEditorMenu.ItemClicked)
    def _on_item_clicked(self, event: InlineLabelEditorMenu.ItemClicked) -> None:
        event.stop()
        self.controller.add_label(event.label_id)

    @on(InlineLabelEditorMenu.CreateRequested)
    def _on_create_requested(
        self, event: InlineLabelEditorMenu.CreateRequested
    ) -> None:
        event.stop()
        self.create_label(event.label_name)

    def on_descendant_blur(self, event: DescendantBlur) -> None:  # noqa: ARG002
        if self.controller.is_suggesting:
            self.call_after_refresh(self._maybe_dismiss_on_blur)

    def _maybe_dismiss_on_blur(self) -> None:
        focused = self.app.focused
        if focused is not None and focused not in self.walk_children():
            self.dismiss()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _emit_label_added(self, label: Label) -> None:
        logger.debug("Label added: %s", label.name)
        self.post_message(self.LabelAdded(label))

    def _on_controller_changed(self) -> None:
        if self.is_mounted:
            self._render_state()

    def _render_state(self) -> None:
        controller = self.controller
        suggesting = controller.is_suggesting

        self.query_one("#label-toggle", InlineLabelToggle).display = not suggesting
        self.query_one("#label-suggestions", Vertical).display = suggesting

        filter_input = self.filter_input
        if filter_input.value != controller.filter_value:
            with filter_input.prevent(Input.Changed):
                filter_input.value = controller.filter_value

        if suggesting:
            self.menu.update_items(
                labels=controller.available_labels,
                highlighted=controller.highlighted_label,
                filter_value=controller.filter_value,
                all_labels_used=controller.all_labels_used,
                can_create=controller.can_create,
            )
