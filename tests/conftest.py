from __future__ import annotations

import copy

import pytest

from storeview.adapters.bookstore import parse_document
from storeview.domain.model import ResourceDocument

StorePayload = dict[str, object]

_STORE_DOCUMENT: StorePayload = {
    "data": [
        {
            "id": "1",
            "type": "stores",
            "attributes": {
                "name": "Dogears Books",
                "rating": 4,
                "establishmentDate": "1995-02-09T00:00:00+01:00",
                "website": "https://www.dogearsbooks.com",
                "storeImage": "https://images.example/dogears.jpg",
            },
            "relationships": {
                "countries": {"data": {"id": "1", "type": "countries"}},
                "books": {
                    "data": [
                        {"id": "1", "type": "books"},
                        {"id": "2", "type": "books"},
                        {"id": "3", "type": "books"},
                    ]
                },
            },
        },
        {
            "id": "2",
            "type": "stores",
            "attributes": {
                "name": "Shakespeare and Company",
                "rating": 5,
                "establishmentDate": "1951-08-12T00:00:00+02:00",
                "website": "https://shakespeareandcompany.com",
                "storeImage": "https://images.example/shakespeare.jpg",
            },
            "relationships": {
                "countries": {"data": {"id": "2", "type": "countries"}},
            },
        },
        {
            "id": "3",
            "type": "stores",
            "attributes": {
                "name": "Powell's City of Books",
                "rating": 3,
                "establishmentDate": "1971-03-01T00:00:00-08:00",
                "website": "https://www.powells.com",
                "storeImage": "https://images.example/powells.jpg",
            },
            "relationships": {
                "countries": {"data": {"id": "1", "type": "countries"}},
                "books": {"data": [{"id": "2", "type": "books"}]},
            },
        },
    ],
    "included": [
        {"id": "1", "type": "countries", "attributes": {"code": "US"}},
        {"id": "2", "type": "countries", "attributes": {"code": "FR"}},
        {
            "id": "1",
            "type": "books",
            "attributes": {"name": "Small Gods", "copiesSold": 10},
            "relationships": {"author": {"data": {"id": "1", "type": "authors"}}},
        },
        {
            "id": "2",
            "type": "books",
            "attributes": {"name": "Mort", "copiesSold": 50},
            "relationships": {"author": {"data": {"id": "1", "type": "authors"}}},
        },
        {
            "id": "3",
            "type": "books",
            "attributes": {"name": "Good Omens", "copiesSold": 30},
            "relationships": {"author": {"data": {"id": "2", "type": "authors"}}},
        },
        {"id": "1", "type": "authors", "attributes": {"fullName": "Terry Pratchett"}},
        {"id": "2", "type": "authors", "attributes": {"fullName": "Neil Gaiman"}},
    ],
}

_COUNTRIES_RESPONSE: list[StorePayload] = [
    {
        "cca2": "US",
        "flags": {
            "png": "https://flagcdn.com/w320/us.png",
            "svg": "https://flagcdn.com/us.svg",
            "alt": "The flag of the United States of America",
        },
    },
    {
        "cca2": "FR",
        "flags": {"png": "https://flagcdn.com/w320/fr.png", "svg": "https://flagcdn.com/fr.svg"},
    },
]


@pytest.fixture
def store_document_payload() -> StorePayload:
    return copy.deepcopy(_STORE_DOCUMENT)


@pytest.fixture
def store_document(store_document_payload: StorePayload) -> ResourceDocument:
    return parse_document(store_document_payload)


@pytest.fixture
def countries_payload() -> list[StorePayload]:
    return copy.deepcopy(_COUNTRIES_RESPONSE)
