"""Store-view domain: resource documents, resolution and the refresh pipeline."""

from __future__ import annotations

from .aggregation import CountryCodeBatch, aggregate_country_codes
from .errors import (
    MalformedDocumentError,
    MissingRelationshipError,
    StoreViewError,
    UnsupportedResourceKindError,
    UpstreamFetchFailureError,
)
from .flags import merge_flags
from .indexer import ResourceIndex, build_resource_index
from .model import (
    CountryFlag,
    IndexedBook,
    Relationship,
    ResolvedAuthor,
    ResolvedBook,
    ResolvedCountry,
    ResolvedStore,
    Resource,
    ResourceDocument,
    ResourceKind,
    ResourceRef,
    UnresolvedReference,
    UnsupportedKindPolicy,
)
from .pipeline import ListingStatus, StoreListing, build_store_views, refresh_stores
from .ranking import compare_by_copies_sold, rank_books
from .resolver import resolve_store, resolve_stores

__all__ = [
    "CountryCodeBatch",
    "CountryFlag",
    "IndexedBook",
    "ListingStatus",
    "MalformedDocumentError",
    "MissingRelationshipError",
    "Relationship",
    "ResolvedAuthor",
    "ResolvedBook",
    "ResolvedCountry",
    "ResolvedStore",
    "Resource",
    "ResourceDocument",
    "ResourceIndex",
    "ResourceKind",
    "ResourceRef",
    "StoreListing",
    "StoreViewError",
    "UnresolvedReference",
    "UnsupportedKindPolicy",
    "UnsupportedResourceKindError",
    "UpstreamFetchFailureError",
    "aggregate_country_codes",
    "build_resource_index",
    "build_store_views",
    "compare_by_copies_sold",
    "merge_flags",
    "rank_books",
    "refresh_stores",
    "resolve_store",
    "resolve_stores",
]
