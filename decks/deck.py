"""Deck assembly: base generation followed by the configured transformations."""

from __future__ import annotations

import logging
import random
from typing import Sequence

from .cards import SUITS, Card, rank_label
from .options import DeckOptions, rank_set
from .ordering import comparator_key

__all__ = ["apply_options", "build_composed_deck", "build_deck", "standard_deck"]

logger = logging.getLogger(__name__)


def standard_deck() -> list[Card]:
    """Return one standard 52-card deck in generation order.

    Suits run Hearts, Diamonds, Clubs, Spades and ranks run ``"1"`` through
    ``"10"`` followed by ``"J"``, ``"Q"`` and ``"K"``.
    """

    return [Card(rank=rank_label(number), suit=suit) for suit in SUITS for number in range(1, 14)]


def apply_options(
    cards: Sequence[Card],
    options: DeckOptions,
    rng: random.Random | None = None,
) -> list[Card]:
    """Return a copy of ``cards`` with sorting, shuffling, jokers and filtering applied.

    The steps always run in that order. Jokers are appended after the shuffle,
    so they always sit at the end of the deck unless filtered away.
    """

    result = list(cards)

    if options.sorting is not None:
        result = sorted(result, key=comparator_key(options.sorting))

    if options.shuffle:
        if rng is None:
            rng = random.Random()
        rng.shuffle(result)

    for _ in range(options.num_jokers):
        result.append(Card.joker())

    if options.filter_ranks is not None:
        excluded = rank_set(options.filter_ranks)
        before = len(result)
        result = [card for card in result if card.rank not in excluded]
        logger.debug("Filtered %d card(s) with ranks %s", before - len(result), sorted(excluded))

    return result


def build_deck(options: DeckOptions | None = None, *, rng: random.Random | None = None) -> list[Card]:
    """Build a single standard deck and apply ``options`` to it.

    ``options.composed_deck`` is accepted but not applied here; use
    :func:`build_composed_deck` to concatenate several decks.
    """

    if options is None:
        options = DeckOptions()
    if options.composed_deck != 1:
        logger.debug("composed_deck=%d ignored by build_deck", options.composed_deck)
    cards = apply_options(standard_deck(), options, rng)
    logger.debug("Built deck with %d card(s)", len(cards))
    return cards


def build_composed_deck(options: DeckOptions | None = None, *, rng: random.Random | None = None) -> list[Card]:
    """Build ``options.composed_deck`` concatenated standard decks and apply ``options``."""

    if options is None:
        options = DeckOptions()
    base: list[Card] = []
    for _ in range(options.composed_deck):
        base.extend(standard_deck())
    cards = apply_options(base, options, rng)
    logger.debug("Built %d composed deck(s) with %d card(s)", max(options.composed_deck, 0), len(cards))
    return cards
