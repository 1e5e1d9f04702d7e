"""Suggestion menu rendered under the label filter input."""

from __future__ import annotations

from collections.abc import Sequence

from rich.text import Text
from textual import on
from textual.message import Message
from textual.widgets import OptionList
from textual.widgets.option_list import Option

from label_picker.models import Label
from label_picker.tui.colors import label_color


CREATE_OPTION_ID = "__create_label__"

ALL_LABELS_USED_TEXT = "All labels are in use"
NO_MATCHES_TEXT = "No labels match"


def build_label_prompt(
    label: Label, filter_value: str = "", default_color: str | None = None
) -> Text:
    """Build a colored swatch + name row, emphasising the matched substring."""
    prompt = Text()
    prompt.append("██ ", style=label_color(label, default_color))
    name = Text(label.name)
    if filter_value:
        start = label.name.find(filter_value)
        if start >= 0:
            name.stylize("bold underline", start, start + len(filter_value))
    prompt.append_text(name)
    return prompt


class InlineLabelEditorMenu(OptionList, can_focus=False):
    """Candidate rows for the inline label editor.

    The menu never takes focus so typing stays in the filter input. It only
    renders what it is given and reports mouse interaction as messages.
    """

    DEFAULT_CSS = """
    InlineLabelEditorMenu {
        width: 100%;
        height: auto;
        max-height: 10;
        border: solid $primary;
        background: $surface;
        padding: 0;
    }
    """

    class ItemHighlighted(Message):
        """The user highlighted a candidate row."""

        def __init__(self, label_id: str) -> None:
            super().__init__()
            self.label_id = label_id

    class ItemClicked(Message):
        """The user clicked a candidate row."""

        def __init__(self, label_id: str) -> None:
            super().__init__()
            self.label_id = label_id

    class CreateRequested(Message):
        """The user asked to create a label from the current filter text."""

        def __init__(self, label_name: str) -> None:
            super().__init__()
            self.label_name = label_name

    def __init__(self, default_color: str | None = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.default_color = default_color
        self._filter_value = ""

    def update_items(
        self,
        *,
        labels: Sequence[Label],
        highlighted: Label | None,
        filter_value: str,
        all_labels_used: bool,
        can_create: bool,
    ) -> None:
        """Rebuild the rows from the editor state."""
        self._filter_value = filter_value
        options: list[Option] = [
            Option(
                build_label_prompt(label, filter_value, self.default_color),
                id=label.id,
            )
            for label in labels
        ]

        if not labels:
            if all_labels_used and not filter_value:
                options.append(
                    Option(Text(ALL_LABELS_USED_TEXT, style="dim"), disabled=True)
                )
            elif not can_create:
                options.append(
                    Option(Text(NO_MATCHES_TEXT, style="dim"), disabled=True)
                )

        if can_create:
            options.append(
                Option(
                    Text.assemble(
                        ("+ ", "bold green"), f'Create label "{filter_value}"'
                    ),
                    id=CREATE_OPTION_ID,
                )
            )

        with self.prevent(OptionList.OptionHighlighted):
            self.clear_options()
            self.add_options(options)
            self.highlighted = self._index_of(labels, highlighted)

    @staticmethod
    def _index_of(labels: Sequence[Label], highlighted: Label | None) -> int | None:
        if highlighted is None:
            return None
        for index, label in enumerate(labels):
            if label.id == highlighted.id:
                return index
        return None

    @property
    def row_ids(self) -> list[str | None]:
        return [
            self.get_option_at_index(index).id for index in range(self.option_count)
        ]

    @on(OptionList.OptionHighlighted)
    def _on_option_highlighted(self, event: OptionList.OptionHighlighted) -> None:
        event.stop()
        option_id = event.option.id
        if option_id and option_id != CREATE_OPTION_ID:
            self.post_message(self.ItemHighlighted(option_id))

    @on(OptionList.OptionSelected)
    def _on_option_selected(self, event: OptionList.OptionSelected) -> None:
        event.stop()
        option_id = event.option.id
        if option_id == CREATE_OPTION_ID:
            self.post_message(self.CreateRequested(self._filter_value))
        elif option_id:
            self.post_message(self.ItemClicked(option_id))
