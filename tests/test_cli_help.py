from unittest.mock import patch

import pytest

from label_picker.api.labels_client import LabelsApiClient
from label_picker.api.memory_store import InMemoryLabelStore
from label_picker.argparsers.main_parser import create_main_parser
from label_picker.models import Label
from label_picker.simple_main import (
    build_label_creator,
    build_settings,
    load_labels,
)
from label_picker.stores.settings import InputSize, PickerSettings


def test_main_help_includes_key_flags() -> None:
    """Help text should advertise catalog, server and sizing flags."""
    parser = create_main_parser()
    help_text = parser.format_help()

    assert "--catalog" in help_text
    assert "--selected" in help_text
    assert "--server-url" in help_text
    assert "--api-token" in help_text
    assert "--input-size" in help_text
    assert "--version" in help_text or "-v" in help_text


def test_input_size_choices_are_validated() -> None:
    parser = create_main_parser()

    with pytest.raises(SystemExit):
        parser.parse_args(["--input-size", "xl"])


def test_build_settings_applies_flags() -> None:
    args = create_main_parser().parse_args(
        ["--server-url", "https://labels.example.com/", "--input-size", "md"]
    )

    settings = build_settings(args)

    assert settings.server_url == "https://labels.example.com"
    assert settings.input_size is InputSize.MEDIUM


def test_build_settings_without_flags_uses_stored_settings() -> None:
    PickerSettings(input_size=InputSize.LARGE).save()

    settings = build_settings(create_main_parser().parse_args([]))

    assert settings.input_size is InputSize.LARGE


def test_build_label_creator_offline(alpha_beta_gamma) -> None:
    creator = build_label_creator(PickerSettings(), alpha_beta_gamma)

    assert isinstance(creator, InMemoryLabelStore)
    assert creator.labels == alpha_beta_gamma


def test_build_label_creator_online() -> None:
    settings = PickerSettings(server_url="https://labels.example.com", api_token="t")

    creator = build_label_creator(settings, [])

    assert isinstance(creator, LabelsApiClient)
    assert creator.server_url == "https://labels.example.com"


def test_selected_flag_warns_about_unknown_names(tmp_path, caplog) -> None:
    catalog = tmp_path / "labels.json"
    catalog.write_text('{"labels": [{"id": "1", "name": "bug"}]}')
    args = create_main_parser().parse_args(
        ["--catalog", str(catalog), "--selected", "ghost", "bug"]
    )

    with caplog.at_level("WARNING"):
        _, selected = load_labels(args, PickerSettings())

    assert [label.name for label in selected] == ["bug"]
    assert "ghost" in caplog.text


def test_load_labels_from_catalog_with_selected_override(tmp_path) -> None:
    catalog = tmp_path / "labels.json"
    catalog.write_text(
        '{"labels": [{"id": "1", "name": "bug"}, {"id": "2", "name": "docs"}],'
        ' "selected": ["bug"]}'
    )
    args = create_main_parser().parse_args(
        ["--catalog", str(catalog), "--selected", "docs"]
    )

    labels, selected = load_labels(args, PickerSettings())

    assert [label.name for label in labels] == ["bug", "docs"]
    assert [label.name for label in selected] == ["docs"]


def test_load_labels_from_server() -> None:
    args = create_main_parser().parse_args([])
    settings = PickerSettings(server_url="https://labels.example.com")
    served = [Label(id="1", name="bug")]

    with patch.object(LabelsApiClient, "list_labels", return_value=served) as mock:
        labels, selected = load_labels(args, settings)

    mock.assert_called_once()
    assert labels == served
    assert selected == []
