from __future__ import annotations

from typing import List

from .cards import JOKER, SUIT_SYMBOLS, Card

_RANK_TOKENS = {"A": 14, "K": 13, "Q": 12, "J": 11, "T": 10}
_WILDCARD_TOKENS = {"JOKER", "JK", "*"}
_SYMBOL_SUITS = {sym: s for s, sym in SUIT_SYMBOLS.items()}


def parse_card(tok: str) -> Card:
    """
    Token format like: AS, KD, 10H, TC, 2S, A♠ or Joker
    Suits: S,H,D,C (or the suit glyphs)
    Ranks: 2-10,T,J,Q,K,A
    """
    tok = tok.strip().upper()
    if tok in _WILDCARD_TOKENS:
        return JOKER
    if len(tok) < 2:
        raise ValueError(f"Bad card token {tok!r}")

    suit = _SYMBOL_SUITS.get(tok[-1], tok[-1])
    r = tok[:-1]
    if suit not in SUIT_SYMBOLS:
        raise ValueError(f"Bad suit in {tok}")

    if r in _RANK_TOKENS:
        rank = _RANK_TOKENS[r]
    elif r.isdigit():
        rank = int(r)
    else:
        raise ValueError(f"Bad rank in {tok}")

    if rank < 2 or rank > 14:
        raise ValueError(f"Bad rank in {tok}")
    return Card(rank=rank, suit=suit)


def parse_hand(text: str) -> List[Card]:
    """Five card tokens separated by spaces or commas, e.g. "AS KS QS JS Joker"."""
    hand = [parse_card(tok) for tok in text.replace(",", " ").split()]
    if len(hand) != 5:
        raise ValueError(f"Hand must have exactly 5 cards, got {len(hand)}")

    seen = set()
    for card in hand:
        if card in seen:
            raise ValueError(f"Hand has duplicates: {card} appears more than once")
        seen.add(card)
    return hand
