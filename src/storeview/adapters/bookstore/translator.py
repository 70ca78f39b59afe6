"""Translate bookstore payloads into domain resource documents."""

from __future__ import annotations

from typing import TYPE_CHECKING

from storeview.domain.model import Relationship, Resource, ResourceDocument, ResourceRef

from .schema import ResourceIdentifier, StoreDocumentPayload

if TYPE_CHECKING:
    from .schema import RelationshipPayload, ResourcePayload


def _ensure_document_payload(payload: StoreDocumentPayload | object) -> StoreDocumentPayload:
    if isinstance(payload, StoreDocumentPayload):
        return payload
    return StoreDocumentPayload.model_validate(payload)


def parse_document(payload: StoreDocumentPayload | object) -> ResourceDocument:
    """Build a ``ResourceDocument``; raises ``pydantic.ValidationError`` on bad input."""

    document = _ensure_document_payload(payload)
    return ResourceDocument(
        data=tuple(_resource(item) for item in document.data),
        included=tuple(_resource(item) for item in document.included),
    )


def _resource(payload: ResourcePayload) -> Resource:
    return Resource(
        id=payload.id,
        type=payload.type,
        attributes=dict(payload.attributes),
        relationships={
            name: _relationship(relationship)
            for name, relationship in payload.relationships.items()
        },
    )


def _relationship(payload: RelationshipPayload) -> Relationship:
    data = payload.data
    if data is None:
        return Relationship()
    if isinstance(data, ResourceIdentifier):
        return Relationship(one=_ref(data))
    return Relationship(many=tuple(_ref(item) for item in data))


def _ref(identifier: ResourceIdentifier) -> ResourceRef:
    return ResourceRef(kind=identifier.type or "", id=identifier.id)
