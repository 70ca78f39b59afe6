"""Application orchestration entry points."""

from __future__ import annotations

import math
from logging import getLogger
from typing import TYPE_CHECKING

from storeview.adapters.bookstore import BookstoreClient
from storeview.adapters.restcountries import CountriesClient
from storeview.config import get_pipeline_config
from storeview.domain.pipeline import refresh_stores

if TYPE_CHECKING:
    from storeview.config import PipelineConfig
    from storeview.domain.pipeline import StoreListing
    from storeview.domain.ports import FlagFetcher, RatingUpdater, StoreDocumentFetcher

log = getLogger(__name__)

MIN_RATING = 0
MAX_RATING = 5


def load_store_listing(
    *,
    document_source: StoreDocumentFetcher | None = None,
    flag_source: FlagFetcher | None = None,
    config: PipelineConfig | None = None,
) -> StoreListing:
    """Fetch and resolve the store listing using the configured adapters."""

    effective_config = config or get_pipeline_config()
    effective_documents = document_source or BookstoreClient().fetch_document
    effective_flags = flag_source or CountriesClient().fetch_flags

    return refresh_stores(
        fetch_document=effective_documents,
        fetch_flags=effective_flags,
        policy=effective_config.unsupported_kind_policy,
    )


def update_store_rating(
    store_id: str,
    rating: float,
    *,
    sink: RatingUpdater | None = None,
) -> None:
    """Persist a store's star rating."""

    if not store_id.strip():
        raise ValueError("Store id must not be blank")
    if not math.isfinite(rating) or not MIN_RATING <= rating <= MAX_RATING:
        raise ValueError(f"Rating must be between {MIN_RATING} and {MAX_RATING}, got {rating}")

    effective_sink = sink or BookstoreClient().update_rating
    log.info("Sending rating %s for store %s", rating, store_id)
    effective_sink(store_id, rating)
