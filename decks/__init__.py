"""Top-level package for the configurable deck builder."""

from . import cards, deck, options, ordering
from .cards import Card, Suit
from .deck import build_composed_deck, build_deck, standard_deck
from .options import DeckOptions

__all__ = [
    "Card",
    "DeckOptions",
    "Suit",
    "build_composed_deck",
    "build_deck",
    "cards",
    "deck",
    "options",
    "ordering",
    "standard_deck",
]
