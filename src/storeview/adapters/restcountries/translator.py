"""Translate country lookup payloads into flag records."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from storeview.domain.model import CountryFlag

from .schema import CountryListAdapter

if TYPE_CHECKING:
    from .schema import CountryPayload

log = getLogger(__name__)


def parse_flags(payload: list[CountryPayload] | object) -> list[CountryFlag]:
    """Return one flag per country that has a PNG image."""

    countries = CountryListAdapter.validate_python(payload)
    flags: list[CountryFlag] = []
    for country in countries:
        if country.flags.png is None:
            log.debug("Country %s has no PNG flag", country.code)
            continue
        flags.append(CountryFlag(code=country.code, image_url=country.flags.png))
    return flags
