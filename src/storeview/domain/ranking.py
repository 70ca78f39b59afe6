"""Order a store's books by copies sold."""

from __future__ import annotations

from functools import cmp_to_key
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .model import ResolvedBook


def compare_by_copies_sold(left: ResolvedBook, right: ResolvedBook) -> int:
    """Three-way comparison putting the better seller first.

    Negative when ``left`` sold more, positive when ``right`` sold more, zero on a
    tie. Books without a numeric ``copiesSold`` sort after every book that has one.
    """

    left_sold = left.copies_sold
    right_sold = right.copies_sold
    if left_sold is None or right_sold is None:
        return (left_sold is None) - (right_sold is None)
    if left_sold > right_sold:
        return -1
    if left_sold < right_sold:
        return 1
    return 0


def rank_books(books: Iterable[ResolvedBook]) -> tuple[ResolvedBook, ...]:
    """Return ``books`` best seller first; ties keep their input order."""

    return tuple(sorted(books, key=cmp_to_key(compare_by_copies_sold)))
