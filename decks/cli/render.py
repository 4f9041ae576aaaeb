"""Rendering helpers dedicated to the CLI experience."""

from __future__ import annotations

from typing import Sequence

from rich.console import RenderableType
from rich.panel import Panel

from ..cards import Card
from .views import DeckSummaryView

_SUIT_STYLES = {
    "Hearts": ("♥", "red"),
    "Diamonds": ("♦", "magenta"),
    "Clubs": ("♣", "green"),
    "Spades": ("♠", "cyan"),
}


def format_card(card: Card) -> str:
    """Return a Rich-rendered label for ``card``."""

    if card.is_joker:
        return "[bold yellow]🃏[/bold yellow]"
    symbol, color = _SUIT_STYLES.get(card.suit, (card.suit, "white"))
    return f"[{color}]{card.rank}{symbol}[/{color}]"


def format_deck(cards: Sequence[Card]) -> str:
    return " ".join(format_card(card) for card in cards)


def render_summary(cards: Sequence[Card], *, title: str = "Deck") -> RenderableType:
    """Return a Rich panel summarising ``cards`` per suit."""

    view = DeckSummaryView(cards=cards, card_formatter=format_card)
    return Panel(view.render(), title=title, padding=(0, 1), border_style="cyan")
