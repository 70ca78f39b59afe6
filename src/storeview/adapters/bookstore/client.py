"""HTTP client for the bookstore JSON:API service."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from storeview.adapters.http_resilience import ResilientClient
from storeview.config.bookstore import JSON_API_MEDIA_TYPE, get_bookstore_config
from storeview.domain.errors import MalformedDocumentError, UpstreamFetchFailureError

from .schema import RatingUpdatePayload
from .translator import parse_document

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from storeview.config.bookstore import BookstoreConfig
    from storeview.config.http_resilience import ResilienceConfig
    from storeview.domain.model import ResourceDocument
    from storeview.domain.ports import RatingUpdater, StoreDocumentFetcher

log = getLogger(__name__)

SERVICE_NAME = "bookstore"
STORES_PATH = "/stores"


class BookstoreClient:
    """Fetches the store document and sends rating updates."""

    def __init__(
        self,
        *,
        config: BookstoreConfig | None = None,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._config = config or get_bookstore_config()
        self._client_factory = client_factory or ResilientClient

    @property
    def stores_url(self) -> str:
        return f"{self._config.base_url}{STORES_PATH}"

    def store_url(self, store_id: str) -> str:
        return f"{self.stores_url}/{store_id}"

    def fetch_document(self) -> ResourceDocument:
        return asyncio.run(self._fetch_document_async())

    def update_rating(self, store_id: str, rating: float) -> None:
        asyncio.run(self._update_rating_async(store_id, rating))

    async def _fetch_document_async(self) -> ResourceDocument:
        async with self._client_factory(self._config.resilience) as client:
            response = await _send(client.get(self.stores_url), action=f"GET {STORES_PATH}")

        try:
            payload = response.json()
        except ValueError as exc:
            raise MalformedDocumentError("Bookstore response is not valid JSON") from exc

        try:
            document = parse_document(payload)
        except ValidationError as exc:
            raise MalformedDocumentError(
                f"Bookstore response is not a resource document: {exc.error_count()} error(s)"
            ) from exc

        log.debug(
            "Fetched store document: data=%s, included=%s",
            len(document.data),
            len(document.included),
        )
        return document

    async def _update_rating_async(self, store_id: str, rating: float) -> None:
        body = RatingUpdatePayload.for_store(store_id, rating)
        async with self._client_factory(self._config.resilience) as client:
            await _send(
                client.patch(
                    self.store_url(store_id),
                    content=body.model_dump_json(),
                    headers={"Content-Type": JSON_API_MEDIA_TYPE},
                ),
                action=f"PATCH {STORES_PATH}/{store_id}",
            )
        log.info("Updated rating of store %s to %s", store_id, rating)


async def _send(request: Awaitable[httpx.Response], *, action: str) -> httpx.Response:
    try:
        response = await request
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        status = exc.response.status_code
        raise UpstreamFetchFailureError(
            SERVICE_NAME, f"{action} returned {status}", status_code=status
        ) from exc
    except httpx.HTTPError as exc:
        raise UpstreamFetchFailureError(SERVICE_NAME, f"{action} failed: {exc}") from exc
    return response


if TYPE_CHECKING:
    _fetcher_check: StoreDocumentFetcher = BookstoreClient().fetch_document
    _updater_check: RatingUpdater = BookstoreClient().update_rating
