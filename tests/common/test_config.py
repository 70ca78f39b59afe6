from __future__ import annotations

import pytest

from storeview.config import (
    ConfigurationError,
    env_or_default,
    get_bookstore_config,
    get_countries_config,
    get_pipeline_config,
)
from storeview.config.bookstore import DEFAULT_BOOKSTORE_API_URL
from storeview.config.countries import DEFAULT_COUNTRIES_API_URL
from storeview.domain.model import UnsupportedKindPolicy


def test_env_or_default_uses_default_for_blank(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "   ")

    assert env_or_default("EXAMPLE_VAR", "fallback") == "fallback"


def test_env_or_default_strips_value(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", " value ")

    assert env_or_default("EXAMPLE_VAR", "fallback") == "value"


def test_bookstore_config_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("BOOKSTORE_API_URL", raising=False)

    config = get_bookstore_config()

    assert config.base_url == DEFAULT_BOOKSTORE_API_URL
    assert config.resilience.name == "bookstore"
    assert config.resilience.retry.total == 0


def test_bookstore_config_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BOOKSTORE_API_URL", "https://books.example/api/")

    assert get_bookstore_config().base_url == "https://books.example/api"


def test_countries_config_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("COUNTRIES_API_URL", raising=False)

    config = get_countries_config()

    assert config.base_url == DEFAULT_COUNTRIES_API_URL
    assert config.resilience.ratelimit is not None


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("skip", UnsupportedKindPolicy.SKIP), ("REJECT", UnsupportedKindPolicy.REJECT)],
)
def test_pipeline_config_reads_policy(
    monkeypatch: pytest.MonkeyPatch, raw: str, expected: UnsupportedKindPolicy
) -> None:
    monkeypatch.setenv("STOREVIEW_UNSUPPORTED_KIND", raw)

    assert get_pipeline_config().unsupported_kind_policy is expected


def test_pipeline_config_rejects_unknown_policy(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STOREVIEW_UNSUPPORTED_KIND", "ignore")

    with pytest.raises(ConfigurationError) as exc:
        get_pipeline_config()

    assert "STOREVIEW_UNSUPPORTED_KIND" in str(exc.value)
