"""Public interface for the country flag adapter."""

from __future__ import annotations

from .client import CountriesClient
from .schema import CountryPayload, FlagImages
from .translator import parse_flags

__all__ = ["CountriesClient", "CountryPayload", "FlagImages", "parse_flags"]
