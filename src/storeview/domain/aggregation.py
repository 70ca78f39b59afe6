"""Derive the country-code batch key for the flag lookup."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .model import ResolvedStore

BATCH_SEPARATOR = ","


@dataclass(frozen=True, slots=True)
class CountryCodeBatch:
    codes: tuple[str, ...] = ()

    @property
    def key(self) -> str:
        return BATCH_SEPARATOR.join(self.codes)

    @property
    def is_empty(self) -> bool:
        """True when there is nothing to look up and the flag fetch must be skipped."""
        return not self.codes


def aggregate_country_codes(stores: Iterable[ResolvedStore]) -> CountryCodeBatch:
    """Collect each distinct country code once, in first-seen order."""

    codes: dict[str, None] = {}
    for store in stores:
        code = store.country.code
        if code is None or not code.strip():
            continue
        codes.setdefault(code, None)
    return CountryCodeBatch(codes=tuple(codes))
