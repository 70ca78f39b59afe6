"""Resource-graph documents and the nested store views resolved from them.

Input side: ``ResourceDocument`` holds primary ``Resource`` objects plus the
side-loaded ones they reference through typed ``ResourceRef`` pairs.

Output side: ``ResolvedStore`` and its nested country, books and authors. These
are frozen; later stages produce new objects instead of mutating earlier ones.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

type Attributes = Mapping[str, object]


class ResourceKind(StrEnum):
    """Kinds of side-loaded resources a store document may include."""

    COUNTRY = "countries"
    BOOK = "books"
    AUTHOR = "authors"

    @classmethod
    def _missing_(cls, value: object) -> ResourceKind | None:
        if not isinstance(value, str):
            return None
        normalized = value.strip().lower()
        return cls.__members__.get(_KIND_ALIASES.get(normalized, normalized).upper())

    @classmethod
    def parse(cls, value: str) -> ResourceKind | None:
        try:
            return cls(value)
        except ValueError:
            return None


_KIND_ALIASES = {
    "countries": "country",
    "books": "book",
    "authors": "author",
}


class UnsupportedKindPolicy(StrEnum):
    """What the indexer does with an included resource of unknown kind."""

    SKIP = "skip"
    REJECT = "reject"


@dataclass(frozen=True, slots=True)
class ResourceRef:
    kind: str
    id: str


@dataclass(frozen=True, slots=True)
class Relationship:
    """A relationship as sent on the wire: to-one, to-many, or without data."""

    one: ResourceRef | None = None
    many: tuple[ResourceRef, ...] | None = None


@dataclass(frozen=True, slots=True)
class Resource:
    id: str
    type: str
    attributes: Attributes = field(default_factory=dict)
    relationships: Mapping[str, Relationship] = field(default_factory=dict)

    def relationship(self, *names: str) -> Relationship | None:
        """Return the first relationship present under any of ``names``."""

        for name in names:
            relationship = self.relationships.get(name)
            if relationship is not None:
                return relationship
        return None


@dataclass(frozen=True, slots=True)
class ResourceDocument:
    data: tuple[Resource, ...]
    included: tuple[Resource, ...] = ()


@dataclass(frozen=True, slots=True)
class ResolvedAuthor:
    id: str | None
    attributes: Attributes = field(default_factory=dict)

    @property
    def full_name(self) -> str | None:
        return _string(self.attributes, "fullName")

    def as_view(self) -> dict[str, object]:
        return {"id": self.id, **self.attributes}


@dataclass(frozen=True, slots=True)
class IndexedBook:
    attributes: Attributes
    author: ResolvedAuthor


@dataclass(frozen=True, slots=True)
class ResolvedBook:
    id: str
    attributes: Attributes = field(default_factory=dict)
    author: ResolvedAuthor = field(default_factory=lambda: ResolvedAuthor(id=None))

    @property
    def name(self) -> str | None:
        return _string(self.attributes, "name")

    @property
    def copies_sold(self) -> int | float | None:
        value = self.attributes.get("copiesSold")
        if isinstance(value, bool) or not isinstance(value, int | float):
            return None
        return value

    def as_view(self) -> dict[str, object]:
        return {"id": self.id, **self.attributes, "author": self.author.as_view()}


@dataclass(frozen=True, slots=True)
class ResolvedCountry:
    id: str
    attributes: Attributes = field(default_factory=dict)
    flag_url: str | None = None

    @property
    def code(self) -> str | None:
        return _string(self.attributes, "code")

    def as_view(self) -> dict[str, object]:
        return {"id": self.id, **self.attributes, "flagUrl": self.flag_url}


@dataclass(frozen=True, slots=True)
class ResolvedStore:
    id: str
    country: ResolvedCountry
    attributes: Attributes = field(default_factory=dict)
    books: tuple[ResolvedBook, ...] = ()

    @property
    def name(self) -> str | None:
        return _string(self.attributes, "name")

    @property
    def rating(self) -> object:
        return self.attributes.get("rating")

    @property
    def establishment_date(self) -> str | None:
        """Wire value, ``YYYY-MM-DDThh:mm:ss[+-]hh:mm``."""
        return _string(self.attributes, "establishmentDate")

    @property
    def website(self) -> str | None:
        return _string(self.attributes, "website")

    @property
    def store_image(self) -> str | None:
        return _string(self.attributes, "storeImage")

    @property
    def best_sellers(self) -> tuple[ResolvedBook, ...]:
        return self.books[:2]

    def as_view(self) -> dict[str, object]:
        return {
            "id": self.id,
            **self.attributes,
            "country": self.country.as_view(),
            "books": [book.as_view() for book in self.books],
        }


@dataclass(frozen=True, slots=True)
class CountryFlag:
    code: str
    image_url: str


@dataclass(frozen=True, slots=True)
class UnresolvedReference:
    """An id that had no side-loaded entry; resolution degrades to the bare id."""

    kind: ResourceKind
    id: str | None
    owner_id: str


def _string(attributes: Attributes, key: str) -> str | None:
    value = attributes.get(key)
    return value if isinstance(value, str) else None
