"""Composable view primitives for the deck CLI."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Callable, Sequence

from rich import box
from rich.console import Group, RenderableType
from rich.table import Table
from rich.text import Text

from ..cards import JOKER, RANK_TO_IDX, SUITS, Card


@dataclass(slots=True)
class DeckSummaryView:
    """Renderable summarising how many cards of each suit a deck holds."""

    cards: Sequence[Card]
    card_formatter: Callable[[Card], str]

    def _suit_row(self, suit: str, suit_cards: list[Card]) -> tuple[str, str, str]:
        if not suit_cards:
            return suit, "0", "—"
        counts = Counter(card.rank for card in suit_cards)
        ranks = sorted(counts, key=lambda rank: RANK_TO_IDX.get(rank, len(RANK_TO_IDX)))
        labels = []
        for rank in ranks:
            label = self.card_formatter(Card(rank=rank, suit=suit))
            if counts[rank] > 1:
                label += f"×{counts[rank]}"
            labels.append(label)
        return suit, str(len(suit_cards)), " ".join(labels)

    def render(self) -> RenderableType:
        if not self.cards:
            return Text("Deck is empty", style="dim")

        table = Table(box=box.ROUNDED, expand=True)
        table.add_column("Suit", justify="left", style="bold")
        table.add_column("Cards", justify="right")
        table.add_column("Ranks", justify="left")

        by_suit: dict[str, list[Card]] = {suit: [] for suit in SUITS}
        others: list[Card] = []
        for card in self.cards:
            if card.suit in by_suit:
                by_suit[card.suit].append(card)
            else:
                others.append(card)

        for suit in SUITS:
            table.add_row(*self._suit_row(suit, by_suit[suit]))
        if others:
            jokers = sum(1 for card in others if card.is_joker)
            table.add_row(JOKER, str(len(others)), f"{jokers} joker(s)")

        total = Text(f"Total: {len(self.cards)} card(s)", style="cyan")
        return Group(table, total)
