"""Card abstractions and helpers for standard decks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final


class Suit(str, Enum):
    """Enumeration of the four suits in generation order."""

    HEARTS = "Hearts"
    DIAMONDS = "Diamonds"
    CLUBS = "Clubs"
    SPADES = "Spades"


JOKER: Final[str] = "Joker"
SUITS: Final[list[str]] = [suit.value for suit in Suit]
RANKS: Final[list[str]] = ["1", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K"]
RANK_TO_IDX: Final[dict[str, int]] = {rank: idx for idx, rank in enumerate(RANKS)}
SUIT_TO_IDX: Final[dict[str, int]] = {suit: idx for idx, suit in enumerate(SUITS)}


def rank_label(rank_number: int) -> str:
    """Return the rank string for ``rank_number`` in ``1..13``."""

    if rank_number == 11:
        return "J"
    if rank_number == 12:
        return "Q"
    if rank_number == 13:
        return "K"
    return str(rank_number)


@dataclass(frozen=True, slots=True)
class Card:
    """Value object describing a single playing card."""

    rank: str
    suit: str

    @classmethod
    def joker(cls) -> "Card":
        return cls(rank=JOKER, suit=JOKER)

    @property
    def is_joker(self) -> bool:
        """Return ``True`` when the card represents a Joker."""

        return self.rank == JOKER and self.suit == JOKER
