"""Construction options for the deck builder."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Collection

from .ordering import Comparator

__all__ = ["DeckOptions", "rank_set"]


def rank_set(ranks: Collection[str] | str) -> frozenset[str]:
    """Return ``ranks`` as a set, treating a single string as one rank."""

    if isinstance(ranks, str):
        return frozenset((ranks,))
    return frozenset(ranks)


@dataclass(frozen=True, slots=True)
class DeckOptions:
    """Declarative description of the transformations applied to a deck.

    Values are not validated: a negative ``num_jokers`` appends nothing and
    ``composed_deck`` is only honoured by ``build_composed_deck``.
    """

    sorting: Comparator | None = None
    shuffle: bool = False
    num_jokers: int = 0
    filter_ranks: Collection[str] | str | None = None
    composed_deck: int = 1

    def with_sorting(self, less: Comparator) -> "DeckOptions":
        return replace(self, sorting=less)

    def with_shuffle(self, shuffle: bool = True) -> "DeckOptions":
        return replace(self, shuffle=shuffle)

    def with_jokers(self, num_jokers: int) -> "DeckOptions":
        return replace(self, num_jokers=num_jokers)

    def with_filter_ranks(self, ranks: Collection[str] | str) -> "DeckOptions":
        """Return options excluding every card whose rank is in ``ranks``."""

        return replace(self, filter_ranks=rank_set(ranks))

    def with_composed_deck(self, num_decks: int) -> "DeckOptions":
        return replace(self, composed_deck=num_decks)
