"""Comparators used to order cards before shuffling and joker insertion."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable, Final

from .cards import RANK_TO_IDX, SUIT_TO_IDX, Card

__all__ = [
    "Comparator",
    "ORDERINGS",
    "by_rank",
    "by_rank_then_suit",
    "by_suit",
    "by_suit_then_rank",
    "comparator_key",
    "reverse",
]

Comparator = Callable[[Card, Card], bool]


def comparator_key(less: Comparator) -> Callable[[Card], Any]:
    """Adapt a strict less-than predicate into a ``sorted`` key.

    Pairs for which neither ``less(a, b)`` nor ``less(b, a)`` holds compare
    equal, so ``sorted`` keeps their input order.
    """

    def _compare(left: Card, right: Card) -> int:
        if less(left, right):
            return -1
        if less(right, left):
            return 1
        return 0

    return cmp_to_key(_compare)


def _rank_index(card: Card) -> int:
    # jokers and unknown ranks sort after K
    return RANK_TO_IDX.get(card.rank, len(RANK_TO_IDX))


def _suit_index(card: Card) -> int:
    return SUIT_TO_IDX.get(card.suit, len(SUIT_TO_IDX))


def by_rank(left: Card, right: Card) -> bool:
    return _rank_index(left) < _rank_index(right)


def by_suit(left: Card, right: Card) -> bool:
    return _suit_index(left) < _suit_index(right)


def by_suit_then_rank(left: Card, right: Card) -> bool:
    return (_suit_index(left), _rank_index(left)) < (_suit_index(right), _rank_index(right))


def by_rank_then_suit(left: Card, right: Card) -> bool:
    return (_rank_index(left), _suit_index(left)) < (_rank_index(right), _suit_index(right))


def reverse(less: Comparator) -> Comparator:
    """Return a comparator ordering cards opposite to ``less``."""

    def _reversed(left: Card, right: Card) -> bool:
        return less(right, left)

    return _reversed


ORDERINGS: Final[dict[str, Comparator]] = {
    "rank": by_rank,
    "suit": by_suit,
    "suit-rank": by_suit_then_rank,
    "rank-suit": by_rank_then_suit,
}
