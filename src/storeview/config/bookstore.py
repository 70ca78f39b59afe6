"""Bookstore API configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_or_default
from .http_resilience import ResilienceConfig

DEFAULT_BOOKSTORE_API_URL = "http://localhost:3000"
BOOKSTORE_TIMEOUT_SECONDS = 10.0
JSON_API_MEDIA_TYPE = "application/vnd.api+json"


@dataclass(frozen=True, slots=True)
class BookstoreConfig:
    """Holds the location of the book store JSON:API service."""

    base_url: str
    resilience: ResilienceConfig


def get_bookstore_config(*, resilience: ResilienceConfig | None = None) -> BookstoreConfig:
    base_url = env_or_default("BOOKSTORE_API_URL", DEFAULT_BOOKSTORE_API_URL).rstrip("/")
    return BookstoreConfig(
        base_url=base_url,
        resilience=resilience
        or ResilienceConfig(
            name="bookstore",
            timeout_seconds=BOOKSTORE_TIMEOUT_SECONDS,
            default_headers={"Accept": JSON_API_MEDIA_TYPE},
        ),
    )
