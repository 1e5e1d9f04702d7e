"""Label picker settings models and utilities."""

import json
import os
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, field_validator


# Used for labels created without an explicit color
DEFAULT_LABEL_COLOR = "#326BBA"

DEFAULT_REQUEST_TIMEOUT = 10.0


class InputSize(str, Enum):
    """Width presets for the filter input."""

    EXTRA_SMALL = "xs"
    SMALL = "sm"
    MEDIUM = "md"
    LARGE = "lg"

    @property
    def width(self) -> int:
        return {"xs": 24, "sm": 32, "md": 40, "lg": 56}[self.value]


class PickerSettings(BaseModel):
    """Model for label picker settings."""

    # None = offline mode, labels are created in memory
    server_url: str | None = None
    api_token: str | None = None
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    input_size: InputSize = InputSize.EXTRA_SMALL
    default_label_color: str = DEFAULT_LABEL_COLOR

    @field_validator("request_timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"Request timeout must be positive, got {v}")
        return v

    @field_validator("server_url")
    @classmethod
    def strip_server_url(cls, v: str | None) -> str | None:
        if v is None:
            return None
        v = v.strip().rstrip("/")
        return v or None

    @classmethod
    def get_config_path(cls) -> Path:
        """Get the path to the settings file."""
        home = os.environ.get(
            "LABEL_PICKER_HOME", os.path.expanduser("~/.label_picker")
        )
        return Path(home) / "config.json"

    @classmethod
    def load(cls) -> "PickerSettings":
        """Load settings from file, then apply environment overrides.

        Returns:
            PickerSettings instance with loaded settings, or defaults if the file
            doesn't exist or can't be parsed
        """
        config_path = cls.get_config_path()

        settings = cls()
        if config_path.exists():
            try:
                with open(config_path) as f:
                    data = json.load(f)
                settings = cls.model_validate(data)
            except (json.JSONDecodeError, ValueError):
                # If file is corrupted, fall back to defaults
                settings = cls()

        return settings._with_env_overrides()

    def _with_env_overrides(self) -> "PickerSettings":
        overrides = {}
        server_url = os.environ.get("LABEL_PICKER_SERVER_URL")
        if server_url:
            overrides["server_url"] = server_url
        api_token = os.environ.get("LABEL_PICKER_API_TOKEN")
        if api_token:
            overrides["api_token"] = api_token

        if not overrides:
            return self
        return self.model_validate({**self.model_dump(), **overrides})

    def save(self) -> None:
        """Save settings to file."""
        config_path = self.get_config_path()

        # Ensure the settings directory exists
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w") as f:
            json.dump(self.model_dump(mode="json"), f, indent=2)
