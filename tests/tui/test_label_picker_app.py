"""Tests for the standalone label picker app."""

from unittest.mock import AsyncMock, Mock

import pytest
from textual.widgets import Button

from label_picker.api.labels_client import LabelsApiError
from label_picker.api.memory_store import InMemoryLabelStore
from label_picker.stores.settings import InputSize, PickerSettings
from label_picker.tui.app import LabelPickerApp, render_selected
from label_picker.tui.widgets.inline_label_editor import InlineLabelEditor


def test_render_selected_empty():
    assert render_selected([]).plain == "No labels yet"


def test_render_selected_chips(make_label):
    chips = render_selected(
        [make_label("bug", color="#ff0000"), make_label("docs")],
        default_color="#00ff00",
    )

    assert chips.plain == " bug    docs "
    styles = [str(span.style) for span in chips.spans]
    assert styles == ["bold on #ff0000", "bold on #00ff00"]


@pytest.fixture
def picker_app(alpha_beta_gamma) -> LabelPickerApp:
    return LabelPickerApp(
        labels=alpha_beta_gamma,
        selected_labels=[alpha_beta_gamma[0]],
        label_creator=InMemoryLabelStore(alpha_beta_gamma),
        settings=PickerSettings(input_size=InputSize.SMALL),
    )


class TestLabelPickerApp:
    @pytest.mark.asyncio
    async def test_editor_receives_settings(self, picker_app):
        async with picker_app.run_test():
            editor = picker_app.editor

            assert isinstance(editor, InlineLabelEditor)
            assert editor.input_size is InputSize.SMALL
            assert editor.controller.selected_labels == picker_app.selected_labels

    @pytest.mark.asyncio
    async def test_added_label_is_selected(self, picker_app):
        async with picker_app.run_test() as pilot:
            editor = picker_app.editor
            editor.query_one("#label-toggle", Button).press()
            await pilot.pause()

            await pilot.press("enter")
            await pilot.pause()

            assert [label.name for label in picker_app.selected_labels] == [
                "Alpha",
                "Beta",
            ]
            assert editor.controller.selected_labels == picker_app.selected_labels

    @pytest.mark.asyncio
    async def test_created_label_joins_catalog(self, picker_app):
        async with picker_app.run_test() as pilot:
            editor = picker_app.editor
            editor.controller.start_suggesting()

            editor.create_label("Delta")
            await pilot.pause()
            await picker_app.workers.wait_for_complete()
            await pilot.pause()

            assert [label.name for label in picker_app.labels][-1] == "Delta"
            assert picker_app.selected_labels[-1].name == "Delta"
            assert not editor.is_suggesting

    @pytest.mark.asyncio
    async def test_duplicate_add_does_not_grow_selection(
        self, picker_app, alpha_beta_gamma
    ):
        async with picker_app.run_test() as pilot:
            picker_app.editor.post_message(
                InlineLabelEditor.LabelAdded(alpha_beta_gamma[0])
            )
            await pilot.pause()

            assert len(picker_app.selected_labels) == 1
            assert len(picker_app.labels) == 3

    @pytest.mark.asyncio
    async def test_failed_create_notifies(self, alpha_beta_gamma):
        creator = AsyncMock()
        creator.create_label.side_effect = LabelsApiError("server said no")
        app = LabelPickerApp(
            labels=alpha_beta_gamma,
            selected_labels=[],
            label_creator=creator,
        )
        async with app.run_test() as pilot:
            app.notify = Mock()
            app.editor.controller.start_suggesting()

            worker = app.editor.create_label("Delta")
            while not worker.is_finished:
                await pilot.pause()
            await pilot.pause()

            app.notify.assert_called_once()
            message = app.notify.call_args.args[0]
            assert "server said no" in message
            assert app.notify.call_args.kwargs["severity"] == "error"
            assert app.editor.is_suggesting
            assert app.selected_labels == []

    @pytest.mark.asyncio
    async def test_click_outside_dismisses(self, picker_app):
        async with picker_app.run_test() as pilot:
            editor = picker_app.editor
            editor.controller.start_suggesting()
            await pilot.pause()

            await pilot.click("#selected-labels")
            await pilot.pause()

            assert not editor.is_suggesting
