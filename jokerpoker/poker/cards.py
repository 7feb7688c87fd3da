from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

SUITS = ("S", "H", "D", "C")  # Spades, Hearts, Diamonds, Clubs
RANKS = tuple(range(2, 15))  # 2..14 (14 = Ace)

SUIT_SYMBOLS = {"S": "♠", "H": "♥", "D": "♦", "C": "♣"}
FACE_LABELS = {11: "J", 12: "Q", 13: "K", 14: "A"}
ROYAL_LABELS = frozenset({"10", "J", "Q", "K", "A"})
WILDCARD_LABEL = "Joker"


@dataclass(frozen=True, slots=True)
class Card:
    rank: Optional[int] = None  # 2..14, None for the joker
    suit: Optional[str] = None  # one of SUITS, None for the joker
    is_wildcard: bool = False

    def __post_init__(self) -> None:
        if self.is_wildcard:
            if self.rank is not None or self.suit is not None:
                raise ValueError("Wildcard cards carry neither rank nor suit")
            return
        if self.rank not in RANKS:
            raise ValueError(f"Bad rank: {self.rank!r}")
        if self.suit not in SUITS:
            raise ValueError(f"Bad suit: {self.suit!r}")

    @property
    def label(self) -> str:
        if self.is_wildcard:
            return WILDCARD_LABEL
        return FACE_LABELS.get(self.rank, str(self.rank))

    @property
    def symbol(self) -> str:
        if self.is_wildcard:
            return WILDCARD_LABEL
        return f"{SUIT_SYMBOLS[self.suit]}{self.label}"

    def __str__(self) -> str:
        if self.is_wildcard:
            return WILDCARD_LABEL
        return f"{self.label}{self.suit}"


JOKER = Card(is_wildcard=True)

# Built once; decks copy this, nothing mutates it.
BASE_CARDS: Tuple[Card, ...] = tuple(Card(rank=r, suit=s) for s in SUITS for r in RANKS)


def cards_str(cards: Iterable[Card]) -> str:
    return " ".join(str(c) for c in cards)
