from typing import Any, Callable, Iterator

import pytest

from hhdocs.uploader.settings import SETTINGS, Settings


@pytest.fixture(autouse=True)
def default_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[Settings]:
    """Ensure default values are set for Settings."""
    # reset the shared instance, since modules hold a reference to it
    for name, field in Settings.model_fields.items():
        monkeypatch.setattr(SETTINGS, name, field.default)
    yield SETTINGS


@pytest.fixture
def override_setting(monkeypatch: pytest.MonkeyPatch) -> Iterator[Callable[[str, Any], None]]:
    """Function to override value for a setting."""

    def override(attr: str, value: Any) -> None:
        monkeypatch.setattr(SETTINGS, attr, value)

    yield override
