"""Ports for the remote services the pipeline depends on."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .model import CountryFlag, ResourceDocument


@runtime_checkable
class StoreDocumentFetcher(Protocol):
    """Callable port returning the primary store document."""

    def __call__(self) -> ResourceDocument: ...


@runtime_checkable
class FlagFetcher(Protocol):
    """Callable port returning flag images for a comma-separated batch of codes."""

    def __call__(self, batch_key: str) -> Sequence[CountryFlag]: ...


@runtime_checkable
class RatingUpdater(Protocol):
    """Callable port persisting a store's rating."""

    def __call__(self, store_id: str, rating: float) -> None: ...


__all__ = ["FlagFetcher", "RatingUpdater", "StoreDocumentFetcher"]
