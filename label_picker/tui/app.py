"""Standalone Textual app hosting an InlineLabelEditor for one entity."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.events import Click
from textual.widgets import Footer, Static
from textual.worker import Worker, WorkerState

from label_picker.api.protocols import LabelCreator
from label_picker.models import Label
from label_picker.stores.settings import PickerSettings
from label_picker.tui.colors import label_color
from label_picker.tui.widgets.inline_label_editor import (
    CREATE_LABEL_WORKER_GROUP,
    InlineLabelEditor,
)


logger = logging.getLogger(__name__)


def render_selected(labels: Sequence[Label], default_color: str | None = None) -> Text:
    """Render the selected labels as colored chips."""
    if not labels:
        return Text("No labels yet", style="dim")

    chips = Text()
    for index, label in enumerate(labels):
        if index:
            chips.append("  ")
        color = label_color(label, default_color)
        chips.append(f" {label.name} ", style=f"bold on {color}")
    return chips


class LabelPickerApp(App):
    """Owner of the label set for a single entity.

    Appends each added label to the selected set and pushes the new props
    back into the editor. Failed create requests end up here and are
    reported as error notifications.
    """

    TITLE = "Label picker"

    CSS = """
    Screen {
        padding: 1 2;
    }

    #selected-row {
        height: auto;
        margin-bottom: 1;
    }

    #selected-labels {
        width: 1fr;
        height: auto;
    }
    """

    def __init__(
        self,
        labels: Sequence[Label],
        selected_labels: Sequence[Label],
        label_creator: LabelCreator,
        settings: PickerSettings | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.settings = settings or PickerSettings()
        self.labels: list[Label] = list(labels)
        self.selected_labels: list[Label] = list(selected_labels)
        self.label_creator = label_creator

    def compose(self) -> ComposeResult:
        with Vertical():
            with Horizontal(id="selected-row"):
                yield Static(
                    render_selected(
                        self.selected_labels, self.settings.default_label_color
                    ),
                    id="selected-labels",
                )
            yield InlineLabelEditor(
                labels=self.labels,
                selected_labels=self.selected_labels,
                label_creator=self.label_creator,
                input_size=self.settings.input_size,
                default_color=self.settings.default_label_color,
                id="label-editor",
            )
        yield Footer()

    @property
    def editor(self) -> InlineLabelEditor:
        return self.query_one("#label-editor", InlineLabelEditor)

    def on_inline_label_editor_label_added(
        self, event: InlineLabelEditor.LabelAdded
    ) -> None:
        label = event.label
        if all(existing.id != label.id for existing in self.labels):
            self.labels.append(label)
        if all(existing.name != label.name for existing in self.selected_labels):
            self.selected_labels.append(label)

        self.editor.update_labels(self.labels, self.selected_labels)
        self.query_one("#selected-labels", Static).update(
            render_selected(self.selected_labels, self.settings.default_label_color)
        )

    def on_click(self, event: Click) -> None:
        self.editor.dismiss_if_outside(event.widget)

    def on_worker_state_changed(self, event: Worker.StateChanged) -> None:
        worker = event.worker
        if worker.group != CREATE_LABEL_WORKER_GROUP:
            return
        if event.state == WorkerState.ERROR:
            logger.error("Label creation failed", exc_info=worker.error)
            self.notify(
                f"Could not create label: {worker.error}",
                title="Label error",
                severity="error",
            )
