"""Refresh the store listing: fetch, resolve, rank, look up flags, merge."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING

from .aggregation import aggregate_country_codes
from .errors import StoreViewError
from .flags import merge_flags
from .indexer import build_resource_index
from .model import UnsupportedKindPolicy
from .resolver import log_unresolved, resolve_stores

if TYPE_CHECKING:
    from .model import ResolvedStore, UnresolvedReference
    from .ports import FlagFetcher, StoreDocumentFetcher

log = getLogger(__name__)


class ListingStatus(StrEnum):
    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True, slots=True)
class StoreListing:
    """Outcome of one refresh, handed to rendering."""

    status: ListingStatus
    stores: tuple[ResolvedStore, ...] = ()
    unresolved: tuple[UnresolvedReference, ...] = ()
    reason: str | None = None

    @classmethod
    def unavailable(cls, reason: str) -> StoreListing:
        return cls(status=ListingStatus.UNAVAILABLE, reason=reason)

    @property
    def is_available(self) -> bool:
        return self.status is ListingStatus.AVAILABLE

    def as_view(self) -> list[dict[str, object]]:
        return [store.as_view() for store in self.stores]


def build_store_views(
    *,
    fetch_document: StoreDocumentFetcher,
    fetch_flags: FlagFetcher,
    policy: UnsupportedKindPolicy = UnsupportedKindPolicy.SKIP,
) -> StoreListing:
    """Run the pipeline once, raising ``StoreViewError`` on any abort."""

    document = fetch_document()
    index = build_resource_index(document.included, policy=policy)

    unresolved: list[UnresolvedReference] = []

    def record_unresolved(reference: UnresolvedReference) -> None:
        log_unresolved(reference)
        unresolved.append(reference)

    stores = resolve_stores(document.data, index, on_unresolved=record_unresolved)

    batch = aggregate_country_codes(stores)
    if batch.is_empty:
        log.info("No country codes to look up; skipping flag fetch")
    else:
        flags = fetch_flags(batch.key)
        stores = merge_flags(stores, flags)

    return StoreListing(
        status=ListingStatus.AVAILABLE,
        stores=tuple(stores),
        unresolved=tuple(unresolved),
    )


def refresh_stores(
    *,
    fetch_document: StoreDocumentFetcher,
    fetch_flags: FlagFetcher,
    policy: UnsupportedKindPolicy = UnsupportedKindPolicy.SKIP,
) -> StoreListing:
    """Run the pipeline once; any failure yields an empty, unavailable listing."""

    log.info("Refreshing store listing (unsupported kinds: %s)", policy.value)
    try:
        listing = build_store_views(
            fetch_document=fetch_document,
            fetch_flags=fetch_flags,
            policy=policy,
        )
    except StoreViewError as exc:
        log.error("Store listing unavailable: %s", exc)  # noqa: TRY400
        return StoreListing.unavailable(str(exc))

    log.info(
        "Store listing ready: stores=%s, unresolved=%s",
        len(listing.stores),
        len(listing.unresolved),
    )
    return listing
