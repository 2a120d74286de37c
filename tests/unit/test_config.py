"""Unit tests for settings."""

import pytest
from pydantic import ValidationError

from grantsync.config import Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GRANTSYNC_ATLASSIAN_URL", raising=False)
    settings = Settings(_env_file=None)
    assert settings.atlassian_url == "https://example.atlassian.net"
    assert settings.ignored_tokens == ["atlassian-addons-project-access"]
    assert settings.http_timeout == 30.0


def test_reads_prefixed_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GRANTSYNC_ATLASSIAN_URL", "https://acme.atlassian.net")
    monkeypatch.setenv("GRANTSYNC_DIRECTORY_CACHE_TTL", "0")
    settings = Settings(_env_file=None)
    assert settings.atlassian_url == "https://acme.atlassian.net"
    assert settings.directory_cache_ttl == 0


def test_rejects_non_positive_timeout() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, http_timeout=0)
