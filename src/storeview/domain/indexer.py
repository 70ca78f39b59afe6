"""Build per-kind lookup tables from side-loaded resources."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from .errors import UnsupportedResourceKindError
from .model import IndexedBook, ResolvedAuthor, ResourceKind, UnsupportedKindPolicy

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from .model import Attributes, Resource

log = getLogger(__name__)

AUTHOR_RELATIONSHIP = "author"


@dataclass(frozen=True, slots=True)
class ResourceIndex:
    """Side-loaded resources keyed by kind, then id."""

    countries: Mapping[str, Attributes] = field(default_factory=dict)
    books: Mapping[str, IndexedBook] = field(default_factory=dict)
    authors: Mapping[str, Attributes] = field(default_factory=dict)

    def country(self, country_id: str) -> Attributes | None:
        return self.countries.get(country_id)

    def book(self, book_id: str) -> IndexedBook | None:
        return self.books.get(book_id)


@dataclass(frozen=True, slots=True)
class _RawBook:
    attributes: Attributes
    author_id: str | None


def build_resource_index(
    included: Iterable[Resource],
    *,
    policy: UnsupportedKindPolicy = UnsupportedKindPolicy.SKIP,
) -> ResourceIndex:
    """Index side-loaded resources and resolve each book's author.

    A later entry with the same kind and id replaces an earlier one. Books whose
    author is not side-loaded keep an author carrying only the id.
    """

    countries: dict[str, Attributes] = {}
    authors: dict[str, Attributes] = {}
    raw_books: dict[str, _RawBook] = {}

    for resource in included:
        kind = ResourceKind.parse(resource.type)
        match kind:
            case ResourceKind.COUNTRY:
                countries[resource.id] = resource.attributes
            case ResourceKind.AUTHOR:
                authors[resource.id] = resource.attributes
            case ResourceKind.BOOK:
                raw_books[resource.id] = _RawBook(
                    attributes=resource.attributes,
                    author_id=_author_id(resource),
                )
            case None:
                if policy is UnsupportedKindPolicy.REJECT:
                    raise UnsupportedResourceKindError(resource.type, resource.id)
                log.warning(
                    "Skipping included resource %s of unsupported kind %r",
                    resource.id,
                    resource.type,
                )

    books = {
        book_id: IndexedBook(
            attributes=raw.attributes,
            author=_resolve_author(raw.author_id, authors),
        )
        for book_id, raw in raw_books.items()
    }
    return ResourceIndex(countries=countries, books=books, authors=authors)


def _author_id(book: Resource) -> str | None:
    relationship = book.relationship(AUTHOR_RELATIONSHIP)
    if relationship is None or relationship.one is None:
        return None
    return relationship.one.id


def _resolve_author(author_id: str | None, authors: Mapping[str, Attributes]) -> ResolvedAuthor:
    if author_id is None:
        return ResolvedAuthor(id=None)
    attributes = authors.get(author_id)
    if attributes is None:
        log.debug("Author %s is not side-loaded", author_id)
        return ResolvedAuthor(id=author_id)
    return ResolvedAuthor(id=author_id, attributes=attributes)
