"""Denormalize primary resources into nested store views."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from .errors import MissingRelationshipError
from .model import (
    ResolvedAuthor,
    ResolvedBook,
    ResolvedCountry,
    ResolvedStore,
    ResourceKind,
    UnresolvedReference,
)
from .ranking import rank_books

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from .indexer import ResourceIndex
    from .model import Resource

log = getLogger(__name__)

# The bookstore API names the to-one country relationship "countries".
COUNTRY_RELATIONSHIPS = ("countries", "country")
BOOK_RELATIONSHIPS = ("books",)

type UnresolvedHook = Callable[[UnresolvedReference], None]


def log_unresolved(reference: UnresolvedReference) -> None:
    log.warning(
        "Resource %s references %s %s which is not side-loaded",
        reference.owner_id,
        reference.kind.value,
        reference.id,
    )


def resolve_stores(
    data: Iterable[Resource],
    index: ResourceIndex,
    *,
    on_unresolved: UnresolvedHook = log_unresolved,
) -> list[ResolvedStore]:
    """Resolve every primary resource, preserving input order."""

    return [resolve_store(resource, index, on_unresolved=on_unresolved) for resource in data]


def resolve_store(
    resource: Resource,
    index: ResourceIndex,
    *,
    on_unresolved: UnresolvedHook = log_unresolved,
) -> ResolvedStore:
    country_id = _country_id(resource)
    country_attributes = index.country(country_id)
    if country_attributes is None:
        on_unresolved(UnresolvedReference(ResourceKind.COUNTRY, country_id, resource.id))
        country = ResolvedCountry(id=country_id)
    else:
        country = ResolvedCountry(id=country_id, attributes=country_attributes)

    books: list[ResolvedBook] = []
    for book_id in _book_ids(resource):
        entry = index.book(book_id)
        if entry is None:
            on_unresolved(UnresolvedReference(ResourceKind.BOOK, book_id, resource.id))
            books.append(ResolvedBook(id=book_id, author=ResolvedAuthor(id=None)))
            continue
        books.append(ResolvedBook(id=book_id, attributes=entry.attributes, author=entry.author))

    return ResolvedStore(
        id=resource.id,
        attributes=resource.attributes,
        country=country,
        books=rank_books(books),
    )


def _country_id(resource: Resource) -> str:
    relationship = resource.relationship(*COUNTRY_RELATIONSHIPS)
    if relationship is None or relationship.one is None:
        raise MissingRelationshipError(resource.id, COUNTRY_RELATIONSHIPS[0])
    return relationship.one.id


def _book_ids(resource: Resource) -> list[str]:
    relationship = resource.relationship(*BOOK_RELATIONSHIPS)
    if relationship is None or relationship.many is None:
        return []
    return [ref.id for ref in relationship.many]
