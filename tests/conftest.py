import pytest

from label_picker.models import Label


def _make_label(name: str, label_id: str | None = None, **properties: str) -> Label:
    return Label(id=label_id or f"id-{name}", name=name, properties=properties)


@pytest.fixture
def make_label():
    """Factory for labels whose id differs from their name unless given."""
    return _make_label


@pytest.fixture
def alpha_beta_gamma() -> list[Label]:
    return [
        _make_label("Alpha", color="#DC4E58"),
        _make_label("Beta", color="#4ED8A0"),
        _make_label("Gamma", color="#22ADF6"),
    ]


# Fixture: isolated_settings_home
# Automatically keep settings reads/writes out of the real home directory
@pytest.fixture(autouse=True)
def isolated_settings_home(tmp_path, monkeypatch):
    """
    Point LABEL_PICKER_HOME at a per-test temporary directory and clear
    environment overrides so tests never see the developer's configuration.
    """
    home = tmp_path / "label_picker_home"
    monkeypatch.setenv("LABEL_PICKER_HOME", str(home))
    monkeypatch.delenv("LABEL_PICKER_SERVER_URL", raising=False)
    monkeypatch.delenv("LABEL_PICKER_API_TOKEN", raising=False)
    return home
