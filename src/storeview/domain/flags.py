"""Attach flag images to resolved stores."""

from __future__ import annotations

from dataclasses import replace
from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .model import CountryFlag, ResolvedStore

log = getLogger(__name__)


def merge_flags(
    stores: Iterable[ResolvedStore],
    flags: Iterable[CountryFlag],
) -> list[ResolvedStore]:
    """Return copies of ``stores`` whose country carries its flag image.

    Codes missing from ``flags`` leave ``flag_url`` unset.
    """

    flag_urls = {flag.code: flag.image_url for flag in flags}
    merged: list[ResolvedStore] = []
    for store in stores:
        code = store.country.code
        flag_url = flag_urls.get(code) if code is not None else None
        if flag_url is None:
            log.debug("No flag for store %s (country code %s)", store.id, code)
            merged.append(store)
            continue
        merged.append(replace(store, country=replace(store.country, flag_url=flag_url)))
    return merged
