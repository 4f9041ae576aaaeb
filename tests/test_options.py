from __future__ import annotations

from decks.options import DeckOptions
from decks.ordering import by_rank, by_suit


def test_defaults() -> None:
    options = DeckOptions()
    assert options.sorting is None
    assert options.shuffle is False
    assert options.num_jokers == 0
    assert options.filter_ranks is None
    assert options.composed_deck == 1


def test_with_helpers_return_new_records() -> None:
    base = DeckOptions()
    configured = base.with_shuffle().with_jokers(2).with_filter_ranks(["2", "3"]).with_composed_deck(3)

    assert base == DeckOptions()
    assert configured.shuffle is True
    assert configured.num_jokers == 2
    assert configured.filter_ranks == frozenset({"2", "3"})
    assert configured.composed_deck == 3


def test_last_option_wins() -> None:
    options = DeckOptions().with_jokers(4).with_sorting(by_rank).with_jokers(1).with_sorting(by_suit)
    assert options.num_jokers == 1
    assert options.sorting is by_suit


def test_invalid_values_are_accepted() -> None:
    options = DeckOptions(num_jokers=-3, composed_deck=0)
    assert options.num_jokers == -3
    assert options.composed_deck == 0
