"""Tests for PickerSettings loading, saving and environment overrides."""

import json

import pytest
from pydantic import ValidationError

from label_picker.stores.settings import (
    DEFAULT_LABEL_COLOR,
    InputSize,
    PickerSettings,
)


def test_defaults_when_file_missing(isolated_settings_home):
    settings = PickerSettings.load()

    assert settings.server_url is None
    assert settings.api_token is None
    assert settings.request_timeout == 10.0
    assert settings.input_size is InputSize.EXTRA_SMALL
    assert settings.default_label_color == DEFAULT_LABEL_COLOR


def test_config_path_uses_env(isolated_settings_home):
    assert PickerSettings.get_config_path() == isolated_settings_home / "config.json"


def test_save_and_load_round_trip(isolated_settings_home):
    PickerSettings(
        server_url="https://labels.example.com",
        input_size=InputSize.LARGE,
        request_timeout=2.5,
    ).save()

    loaded = PickerSettings.load()

    assert loaded.server_url == "https://labels.example.com"
    assert loaded.input_size is InputSize.LARGE
    assert loaded.request_timeout == 2.5


def test_saved_file_is_plain_json(isolated_settings_home):
    PickerSettings(input_size=InputSize.MEDIUM).save()

    data = json.loads((isolated_settings_home / "config.json").read_text())

    assert data["input_size"] == "md"


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        json.dumps({"request_timeout": -1}),
        json.dumps({"input_size": "huge"}),
    ],
)
def test_corrupt_or_invalid_file_falls_back_to_defaults(
    isolated_settings_home, content
):
    isolated_settings_home.mkdir(parents=True)
    (isolated_settings_home / "config.json").write_text(content)

    assert PickerSettings.load() == PickerSettings()


def test_env_overrides_file(isolated_settings_home, monkeypatch):
    PickerSettings(server_url="https://file.example.com").save()
    monkeypatch.setenv("LABEL_PICKER_SERVER_URL", "https://env.example.com/")
    monkeypatch.setenv("LABEL_PICKER_API_TOKEN", "tok")

    settings = PickerSettings.load()

    assert settings.server_url == "https://env.example.com"
    assert settings.api_token == "tok"


def test_blank_server_url_means_offline():
    assert PickerSettings(server_url="   ").server_url is None


def test_timeout_must_be_positive():
    with pytest.raises(ValidationError, match="must be positive"):
        PickerSettings(request_timeout=0)


@pytest.mark.parametrize(
    "size,width",
    [
        (InputSize.EXTRA_SMALL, 24),
        (InputSize.SMALL, 32),
        (InputSize.MEDIUM, 40),
        (InputSize.LARGE, 56),
    ],
)
def test_input_size_width(size, width):
    assert size.width == width
