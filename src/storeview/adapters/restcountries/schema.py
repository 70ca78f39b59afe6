"""Pydantic models describing the country lookup payloads."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, TypeAdapter


class CountriesBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class FlagImages(CountriesBaseModel):
    png: str | None = None
    svg: str | None = None


class CountryPayload(CountriesBaseModel):
    code: str = Field(validation_alias=AliasChoices("cca2", "code"))
    flags: FlagImages = Field(default_factory=FlagImages)


CountryListAdapter = TypeAdapter(list[CountryPayload])
