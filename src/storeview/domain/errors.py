"""Errors raised while building store views."""

from __future__ import annotations


class StoreViewError(RuntimeError):
    """Base class for failures that abort a store refresh."""


class MalformedDocumentError(StoreViewError):
    """Raised when the primary response is not a resource document."""


class MissingRelationshipError(StoreViewError):
    """Raised when a primary resource lacks a required relationship."""

    def __init__(self, resource_id: str, relationship: str) -> None:
        super().__init__(f"Resource {resource_id} has no {relationship!r} relationship")
        self.resource_id = resource_id
        self.relationship = relationship


class UnsupportedResourceKindError(StoreViewError):
    """Raised when an included resource has a kind outside the recognised set."""

    def __init__(self, kind: str, resource_id: str) -> None:
        super().__init__(f"Unsupported resource kind {kind!r} for included resource {resource_id}")
        self.kind = kind
        self.resource_id = resource_id


class UpstreamFetchFailureError(StoreViewError):
    """Raised when a remote service call fails or answers with a non-success status."""

    def __init__(self, service: str, message: str, *, status_code: int | None = None) -> None:
        super().__init__(f"{service}: {message}")
        self.service = service
        self.status_code = status_code
