from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence, Tuple

from .cards import Card, cards_str
from .detectors import (
    is_five_of_a_kind,
    is_flush,
    is_four_of_a_kind,
    is_full_house,
    is_one_pair,
    is_royal_straight_flush,
    is_straight,
    is_straight_flush,
    is_three_of_a_kind,
    is_two_pair,
)

logger = logging.getLogger(__name__)

ROYAL_STRAIGHT_FLUSH = "royal_straight_flush"
FIVE_OF_A_KIND = "five_of_a_kind"
STRAIGHT_FLUSH = "straight_flush"
FOUR_OF_A_KIND = "four_of_a_kind"
FULL_HOUSE = "full_house"
FLUSH = "flush"
STRAIGHT = "straight"
THREE_OF_A_KIND = "three_of_a_kind"
TWO_PAIR = "two_pair"
ONE_PAIR = "one_pair"
NO_PAIR = "no_pair"

Detector = Callable[[Sequence[Card]], bool]

# Highest first; the first satisfied detector names the hand.
CASCADE: Tuple[Tuple[Detector, str], ...] = (
    (is_royal_straight_flush, ROYAL_STRAIGHT_FLUSH),
    (is_five_of_a_kind, FIVE_OF_A_KIND),
    (is_straight_flush, STRAIGHT_FLUSH),
    (is_four_of_a_kind, FOUR_OF_A_KIND),
    (is_full_house, FULL_HOUSE),
    (is_flush, FLUSH),
    (is_straight, STRAIGHT),
    (is_three_of_a_kind, THREE_OF_A_KIND),
    (is_two_pair, TWO_PAIR),
    (is_one_pair, ONE_PAIR),
)

CATEGORIES: Tuple[str, ...] = tuple(cat for _fn, cat in CASCADE) + (NO_PAIR,)

DISPLAY_NAMES: Dict[str, str] = {
    ROYAL_STRAIGHT_FLUSH: "Royal straight flush",
    FIVE_OF_A_KIND: "Five of a kind",
    STRAIGHT_FLUSH: "Straight flush",
    FOUR_OF_A_KIND: "Four of a kind",
    FULL_HOUSE: "Full house",
    FLUSH: "Flush",
    STRAIGHT: "Straight",
    THREE_OF_A_KIND: "Three of a kind",
    TWO_PAIR: "Two pair",
    ONE_PAIR: "One pair",
    NO_PAIR: "No pair",
}


@dataclass(frozen=True)
class HandResult:
    category: str


def _validate(cards: Sequence[Card]) -> None:
    if len(cards) != 5:
        raise ValueError(f"classify expects exactly 5 cards, got {len(cards)}")
    for c in cards:
        if not isinstance(c, Card):
            raise ValueError(f"Not a card: {c!r}")
    naturals = [c for c in cards if not c.is_wildcard]
    if len(set(naturals)) != len(naturals):
        raise ValueError(f"Hand has duplicates: {cards_str(cards)}")


def classify(cards: Sequence[Card]) -> str:
    _validate(cards)
    for detector, category in CASCADE:
        if detector(cards):
            break
    else:
        category = NO_PAIR
    logger.debug("%s -> %s", cards_str(cards), category)
    return category


def evaluate_hand(cards: Sequence[Card]) -> HandResult:
    return HandResult(classify(cards))


def display_name(category: str, labels: Optional[Dict[str, str]] = None) -> str:
    if labels and category in labels:
        return labels[category]
    return DISPLAY_NAMES[category]
