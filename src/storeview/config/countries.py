"""Country flag lookup configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_or_default
from .http_resilience import RateLimit, ResilienceConfig

DEFAULT_COUNTRIES_API_URL = "https://restcountries.com/v3.1/alpha"
COUNTRIES_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True, slots=True)
class CountriesConfig:
    """Holds the location of the country lookup service."""

    base_url: str
    resilience: ResilienceConfig


def get_countries_config(*, resilience: ResilienceConfig | None = None) -> CountriesConfig:
    base_url = env_or_default("COUNTRIES_API_URL", DEFAULT_COUNTRIES_API_URL).rstrip("/")
    return CountriesConfig(
        base_url=base_url,
        resilience=resilience
        or ResilienceConfig(
            name="restcountries",
            timeout_seconds=COUNTRIES_TIMEOUT_SECONDS,
            ratelimit=RateLimit(max_calls=5, per_seconds=1.0),
        ),
    )
