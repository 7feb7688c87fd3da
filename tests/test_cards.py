import dataclasses

import pytest

from jokerpoker.poker.cards import BASE_CARDS, JOKER, RANKS, SUITS, Card, cards_str


def test_labels():
    assert Card(rank=14, suit="S").label == "A"
    assert Card(rank=11, suit="H").label == "J"
    assert Card(rank=10, suit="D").label == "10"
    assert Card(rank=2, suit="C").label == "2"
    assert JOKER.label == "Joker"


def test_str_and_symbol():
    assert str(Card(rank=10, suit="H")) == "10H"
    assert Card(rank=13, suit="S").symbol == "♠K"
    assert str(JOKER) == "Joker"
    assert cards_str([Card(rank=14, suit="S"), JOKER]) == "AS Joker"


def test_wildcard_has_no_rank_or_suit():
    assert JOKER.is_wildcard
    assert JOKER.rank is None and JOKER.suit is None
    with pytest.raises(ValueError):
        Card(rank=5, suit="S", is_wildcard=True)


@pytest.mark.parametrize("rank,suit", [(1, "S"), (15, "H"), (None, "D"), (5, "X"), (5, None)])
def test_natural_card_requires_rank_and_suit(rank, suit):
    with pytest.raises(ValueError):
        Card(rank=rank, suit=suit)


def test_cards_are_immutable():
    c = Card(rank=7, suit="C")
    with pytest.raises(dataclasses.FrozenInstanceError):
        c.rank = 8


def test_base_cards():
    assert len(BASE_CARDS) == 52
    assert len(set(BASE_CARDS)) == 52
    assert {(c.rank, c.suit) for c in BASE_CARDS} == {(r, s) for r in RANKS for s in SUITS}
    assert JOKER not in BASE_CARDS
