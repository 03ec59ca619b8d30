"""Environment-driven codec settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from siren.config.settings import SirenSettings
from siren.models.constants import APPLICATION_SIREN_JSON


def test_defaults() -> None:
    settings = SirenSettings(_env_file=None)
    assert settings.JSON_INDENT is None
    assert settings.MEDIA_TYPE == APPLICATION_SIREN_JSON
    assert settings.ETAG_WEAK is False


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SIREN_JSON_INDENT", "2")
    monkeypatch.setenv("SIREN_ETAG_WEAK", "true")
    settings = SirenSettings(_env_file=None)
    assert settings.JSON_INDENT == 2
    assert settings.ETAG_WEAK is True


def test_settings_are_frozen() -> None:
    settings = SirenSettings(_env_file=None)
    with pytest.raises(ValidationError):
        settings.ETAG_WEAK = True
