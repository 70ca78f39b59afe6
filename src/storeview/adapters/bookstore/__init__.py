"""Public interface for the bookstore adapter."""

from __future__ import annotations

from .client import BookstoreClient
from .schema import RatingUpdatePayload, ResourcePayload, StoreDocumentPayload
from .translator import parse_document

__all__ = [
    "BookstoreClient",
    "RatingUpdatePayload",
    "ResourcePayload",
    "StoreDocumentPayload",
    "parse_document",
]
