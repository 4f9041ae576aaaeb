from __future__ import annotations

from decks import ordering
from decks.cards import Card


def test_comparator_key_sorts_by_predicate() -> None:
    cards = [Card("K", "Hearts"), Card("1", "Clubs"), Card("7", "Spades")]
    ordered = sorted(cards, key=ordering.comparator_key(ordering.by_rank))
    assert [card.rank for card in ordered] == ["1", "7", "K"]


def test_comparator_key_keeps_equal_cards_in_input_order() -> None:
    cards = [Card("5", "Spades"), Card("5", "Hearts"), Card("2", "Clubs"), Card("5", "Diamonds")]
    ordered = sorted(cards, key=ordering.comparator_key(ordering.by_rank))
    assert ordered == [Card("2", "Clubs"), Card("5", "Spades"), Card("5", "Hearts"), Card("5", "Diamonds")]


def test_rank_order_is_numeric_with_jokers_last() -> None:
    assert ordering.by_rank(Card("2", "Hearts"), Card("10", "Hearts"))
    assert ordering.by_rank(Card("10", "Hearts"), Card("J", "Hearts"))
    assert ordering.by_rank(Card("K", "Spades"), Card.joker())
    assert not ordering.by_rank(Card.joker(), Card("K", "Spades"))


def test_suit_then_rank_and_rank_then_suit() -> None:
    low_spade = Card("1", "Spades")
    high_heart = Card("K", "Hearts")
    assert ordering.by_suit_then_rank(high_heart, low_spade)
    assert ordering.by_rank_then_suit(low_spade, high_heart)


def test_reverse_inverts_comparator() -> None:
    descending = ordering.reverse(ordering.by_rank)
    assert descending(Card("K", "Hearts"), Card("2", "Hearts"))
    assert not descending(Card("2", "Hearts"), Card("K", "Hearts"))


def test_named_orderings() -> None:
    assert set(ordering.ORDERINGS) == {"rank", "suit", "suit-rank", "rank-suit"}
    assert ordering.ORDERINGS["suit-rank"] is ordering.by_suit_then_rank
