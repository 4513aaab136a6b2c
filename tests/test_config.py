"""Tests for codec settings."""

import pytest
from pydantic import ValidationError

from turncodec.config import CodecSettings


def test_defaults():
    settings = CodecSettings()
    assert settings.charset == "cp437"
    assert settings.rewrap is True
    assert settings.normalize_headers is True


def test_unknown_charset():
    with pytest.raises(ValidationError, match="Unknown charset"):
        CodecSettings(charset="no-such-codepage")


def test_from_env(monkeypatch):
    """Environment variables override defaults."""
    monkeypatch.setenv("TURNCODEC_CHARSET", "cp850")
    monkeypatch.setenv("TURNCODEC_REWRAP", "false")
    monkeypatch.delenv("TURNCODEC_NORMALIZE_HEADERS", raising=False)

    settings = CodecSettings.from_env()
    assert settings.charset == "cp850"
    assert settings.rewrap is False
    assert settings.normalize_headers is True


def test_from_env_defaults(monkeypatch):
    for name in ("TURNCODEC_CHARSET", "TURNCODEC_REWRAP", "TURNCODEC_NORMALIZE_HEADERS"):
        monkeypatch.delenv(name, raising=False)
    assert CodecSettings.from_env() == CodecSettings()
