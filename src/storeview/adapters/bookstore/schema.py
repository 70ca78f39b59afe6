"""Pydantic models describing the bookstore JSON:API payloads."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _id_to_str(value: object) -> object:
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


def _none_to_empty(value: object) -> object:
    return {} if value is None else value


class JsonApiBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ResourceIdentifier(JsonApiBaseModel):
    id: str
    type: str | None = None

    _normalize_id = field_validator("id", mode="before")(_id_to_str)


class RelationshipPayload(JsonApiBaseModel):
    data: ResourceIdentifier | list[ResourceIdentifier] | None = None


class ResourcePayload(JsonApiBaseModel):
    id: str
    type: str
    attributes: dict[str, object] = Field(default_factory=dict)
    relationships: dict[str, RelationshipPayload] = Field(default_factory=dict)

    _normalize_id = field_validator("id", mode="before")(_id_to_str)
    _normalize_maps = field_validator("attributes", "relationships", mode="before")(
        _none_to_empty
    )


class StoreDocumentPayload(JsonApiBaseModel):
    data: list[ResourcePayload]
    included: list[ResourcePayload]


class RatingAttributes(JsonApiBaseModel):
    rating: int | float


class RatingUpdateData(JsonApiBaseModel):
    type: Literal["stores"] = "stores"
    id: str
    attributes: RatingAttributes


class RatingUpdatePayload(JsonApiBaseModel):
    data: RatingUpdateData

    @classmethod
    def for_store(cls, store_id: str, rating: float) -> RatingUpdatePayload:
        return cls(
            data=RatingUpdateData(id=store_id, attributes=RatingAttributes(rating=rating))
        )
