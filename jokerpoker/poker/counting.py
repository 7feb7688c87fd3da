from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence

from .cards import SUITS, Card


@dataclass(frozen=True)
class SuitCount:
    wildcards: int
    suits: Dict[str, int]  # every suit in SUITS, defaulting to 0


@dataclass(frozen=True)
class RankCount:
    wildcards: int
    ranks: List[int]  # indexed by rank; 0 and 1 unused and always 0


def count_suits(cards: Sequence[Card]) -> SuitCount:
    wildcards = 0
    suits = {s: 0 for s in SUITS}
    for c in cards:
        if c.is_wildcard:
            wildcards += 1
        else:
            suits[c.suit] += 1
    return SuitCount(wildcards=wildcards, suits=suits)


def count_ranks(cards: Sequence[Card]) -> RankCount:
    wildcards = 0
    ranks = [0] * 15
    for c in cards:
        if c.is_wildcard:
            wildcards += 1
        else:
            ranks[c.rank] += 1
    return RankCount(wildcards=wildcards, ranks=ranks)


def remove_wildcards(cards: Sequence[Card]) -> List[Card]:
    return [c for c in cards if not c.is_wildcard]


def sort_by_rank(cards: Sequence[Card], ace_low: bool = False) -> List[Card]:
    """Sort natural cards ascending; with ace_low, aces sort first as value 1."""
    if ace_low:
        return sorted(cards, key=lambda c: 1 if c.rank == 14 else c.rank)
    return sorted(cards, key=lambda c: c.rank)
