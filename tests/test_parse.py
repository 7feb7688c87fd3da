import pytest

from jokerpoker.poker.cards import JOKER, Card
from jokerpoker.poker.parse import parse_card, parse_hand


@pytest.mark.parametrize(
    "tok,expected",
    [
        ("AS", Card(rank=14, suit="S")),
        ("kd", Card(rank=13, suit="D")),
        ("10H", Card(rank=10, suit="H")),
        ("TC", Card(rank=10, suit="C")),
        ("2s", Card(rank=2, suit="S")),
        ("A♠", Card(rank=14, suit="S")),
        ("Q♥", Card(rank=12, suit="H")),
    ],
)
def test_parse_card(tok, expected):
    assert parse_card(tok) == expected


@pytest.mark.parametrize("tok", ["Joker", "JOKER", "jk", "*"])
def test_parse_wildcard(tok):
    assert parse_card(tok) is JOKER


@pytest.mark.parametrize("tok", ["1S", "15H", "AX", "ZS", "S", ""])
def test_parse_card_rejects_garbage(tok):
    with pytest.raises(ValueError):
        parse_card(tok)


def test_parse_hand():
    hand = parse_hand("AS, KS, QS, JS, Joker")
    assert hand[0] == Card(rank=14, suit="S")
    assert hand[-1] is JOKER


def test_parse_hand_wrong_size():
    with pytest.raises(ValueError, match="exactly 5"):
        parse_hand("AS KS QS JS")


def test_parse_hand_duplicates():
    with pytest.raises(ValueError, match="duplicates"):
        parse_hand("AS AS QS JS 2H")


def test_parse_hand_names_the_repeated_card():
    with pytest.raises(ValueError, match="KD appears more than once"):
        parse_hand("KD 2H kd 9C 4S")


def test_parse_hand_reports_card_count():
    with pytest.raises(ValueError, match="got 6"):
        parse_hand("AS KS QS JS 10S 9S")


def test_parse_hand_single_joker_only():
    with pytest.raises(ValueError, match="Joker appears more than once"):
        parse_hand("Joker JK 2H 3D 4C")
