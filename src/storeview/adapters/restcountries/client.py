"""HTTP client for the country flag lookup service."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from storeview.adapters.http_resilience import ResilientClient
from storeview.config.countries import get_countries_config
from storeview.domain.errors import UpstreamFetchFailureError

from .translator import parse_flags

if TYPE_CHECKING:
    from collections.abc import Callable

    from storeview.config.countries import CountriesConfig
    from storeview.config.http_resilience import ResilienceConfig
    from storeview.domain.model import CountryFlag
    from storeview.domain.ports import FlagFetcher

log = getLogger(__name__)

SERVICE_NAME = "restcountries"


class CountriesClient:
    """Looks up flag images for a batch of country codes in one request."""

    def __init__(
        self,
        *,
        config: CountriesConfig | None = None,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._config = config or get_countries_config()
        self._client_factory = client_factory or ResilientClient

    def fetch_flags(self, batch_key: str) -> list[CountryFlag]:
        return asyncio.run(self._fetch_flags_async(batch_key))

    async def _fetch_flags_async(self, batch_key: str) -> list[CountryFlag]:
        params = httpx.QueryParams({"codes": batch_key})
        try:
            async with self._client_factory(self._config.resilience) as client:
                response = await client.get(self._config.base_url, params=params)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            raise UpstreamFetchFailureError(
                SERVICE_NAME, f"lookup of {batch_key} returned {status}", status_code=status
            ) from exc
        except httpx.HTTPError as exc:
            raise UpstreamFetchFailureError(
                SERVICE_NAME, f"lookup of {batch_key} failed: {exc}"
            ) from exc
        except ValueError as exc:
            raise UpstreamFetchFailureError(SERVICE_NAME, "response is not valid JSON") from exc

        try:
            flags = parse_flags(payload)
        except ValidationError as exc:
            raise UpstreamFetchFailureError(SERVICE_NAME, "unexpected response payload") from exc

        log.debug("Fetched %s flag(s) for %s", len(flags), batch_key)
        return flags


if TYPE_CHECKING:
    _flag_fetcher_check: FlagFetcher = CountriesClient().fetch_flags
