from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from storeview.domain.errors import (
    MalformedDocumentError,
    MissingRelationshipError,
    UpstreamFetchFailureError,
)
from storeview.domain.model import (
    CountryFlag,
    Relationship,
    Resource,
    ResourceDocument,
    ResourceKind,
    ResourceRef,
    UnsupportedKindPolicy,
)
from storeview.domain.pipeline import (
    ListingStatus,
    StoreListing,
    build_store_views,
    refresh_stores,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

US_FLAG = "https://flagcdn.com/w320/us.png"


class RecordingFlagFetcher:
    def __init__(self, flags: Sequence[CountryFlag] = ()) -> None:
        self.flags = list(flags)
        self.calls: list[str] = []

    def __call__(self, batch_key: str) -> list[CountryFlag]:
        self.calls.append(batch_key)
        return self.flags


def test_refresh_resolves_ranks_and_attaches_flags(store_document: ResourceDocument) -> None:
    flags = RecordingFlagFetcher([CountryFlag(code="US", image_url=US_FLAG)])

    listing = refresh_stores(fetch_document=lambda: store_document, fetch_flags=flags)

    assert listing.status is ListingStatus.AVAILABLE
    assert flags.calls == ["US,FR"]
    assert [store.id for store in listing.stores] == ["1", "2", "3"]
    assert listing.stores[0].country.flag_url == US_FLAG
    assert listing.stores[1].country.flag_url is None
    assert listing.stores[0].books[0].copies_sold == 50
    assert listing.unresolved == ()


def test_refresh_with_empty_data_skips_flag_fetch() -> None:
    flags = RecordingFlagFetcher()

    listing = refresh_stores(
        fetch_document=lambda: ResourceDocument(data=(), included=()),
        fetch_flags=flags,
    )

    assert listing.is_available
    assert listing.stores == ()
    assert listing.as_view() == []
    assert flags.calls == []


def test_refresh_skips_flag_fetch_when_no_country_resolves() -> None:
    store = Resource(
        id="1",
        type="stores",
        relationships={"countries": Relationship(one=ResourceRef(kind="countries", id="9"))},
    )
    flags = RecordingFlagFetcher()

    listing = refresh_stores(
        fetch_document=lambda: ResourceDocument(data=(store,)),
        fetch_flags=flags,
    )

    assert flags.calls == []
    assert listing.is_available
    assert listing.stores[0].country.id == "9"
    assert [ref.kind for ref in listing.unresolved] == [ResourceKind.COUNTRY]


def test_refresh_reports_unavailable_on_missing_relationship(
    store_document: ResourceDocument,
) -> None:
    broken = Resource(id="4", type="stores", attributes={"name": "No Country"})
    document = ResourceDocument(
        data=(*store_document.data, broken),
        included=store_document.included,
    )
    flags = RecordingFlagFetcher()

    listing = refresh_stores(fetch_document=lambda: document, fetch_flags=flags)

    assert listing.status is ListingStatus.UNAVAILABLE
    assert listing.stores == ()
    assert listing.reason is not None
    assert "4" in listing.reason
    assert flags.calls == []


def test_refresh_reports_unavailable_when_document_fetch_fails() -> None:
    def failing_fetch() -> ResourceDocument:
        raise MalformedDocumentError("no data")

    listing = refresh_stores(fetch_document=failing_fetch, fetch_flags=RecordingFlagFetcher())

    assert listing == StoreListing.unavailable("no data")


def test_refresh_reports_unavailable_when_flag_fetch_fails(
    store_document: ResourceDocument,
) -> None:
    def failing_flags(batch_key: str) -> list[CountryFlag]:
        raise UpstreamFetchFailureError("restcountries", f"lookup of {batch_key} failed")

    listing = refresh_stores(fetch_document=lambda: store_document, fetch_flags=failing_flags)

    assert not listing.is_available
    assert listing.stores == ()


def test_refresh_honours_reject_policy(store_document: ResourceDocument) -> None:
    document = ResourceDocument(
        data=store_document.data,
        included=(*store_document.included, Resource(id="1", type="publishers")),
    )

    skipped = refresh_stores(
        fetch_document=lambda: document,
        fetch_flags=RecordingFlagFetcher(),
    )
    rejected = refresh_stores(
        fetch_document=lambda: document,
        fetch_flags=RecordingFlagFetcher(),
        policy=UnsupportedKindPolicy.REJECT,
    )

    assert skipped.is_available
    assert not rejected.is_available


def test_build_store_views_raises_instead_of_degrading() -> None:
    store = Resource(id="1", type="stores")

    with pytest.raises(MissingRelationshipError):
        build_store_views(
            fetch_document=lambda: ResourceDocument(data=(store,)),
            fetch_flags=RecordingFlagFetcher(),
        )
