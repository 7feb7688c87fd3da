from __future__ import annotations

from typing import Sequence

from .cards import RANKS, ROYAL_LABELS, SUITS, Card
from .counting import count_ranks, count_suits, remove_wildcards, sort_by_rank


def _has_n_of_a_kind(cards: Sequence[Card], n: int) -> bool:
    count = count_ranks(cards)
    return any(count.ranks[r] + count.wildcards == n for r in RANKS)


def _rank_value(card: Card, ace_low: bool) -> int:
    if ace_low and card.rank == 14:
        return 1
    return card.rank


def _is_run(naturals: Sequence[Card], wildcards: int, ace_low: bool) -> bool:
    """Walk adjacent ranks; a wildcard can stand in for one missing rank between two cards."""
    ordered = sort_by_rank(naturals, ace_low=ace_low)
    remaining = wildcards
    for i in range(len(ordered) - 1):
        gap = _rank_value(ordered[i + 1], ace_low) - _rank_value(ordered[i], ace_low)
        if gap == 2 and remaining:
            remaining -= 1
            gap = 1
        if gap != 1:
            return False
    return True


def is_flush(cards: Sequence[Card]) -> bool:
    count = count_suits(cards)
    return any(count.suits[s] + count.wildcards == 5 for s in SUITS)


def is_straight(cards: Sequence[Card]) -> bool:
    """
    Five ranks in a row once wildcards fill the gaps.
    Ace plays high (10-J-Q-K-A) or low (A-2-3-4-5), never both: K-A-2 does not wrap.
    With fewer than 2 natural cards there is nothing to walk and the hand counts
    as a straight; the wildcards can always build a run around a single rank.
    """
    wildcards = count_suits(cards).wildcards
    naturals = remove_wildcards(cards)
    if _is_run(naturals, wildcards, ace_low=False):
        return True
    return any(c.rank == 14 for c in naturals) and _is_run(naturals, wildcards, ace_low=True)


def is_straight_flush(cards: Sequence[Card]) -> bool:
    return is_straight(cards) and is_flush(cards)


def is_royal_straight_flush(cards: Sequence[Card]) -> bool:
    if not is_straight_flush(cards):
        return False
    # A straight flush has no repeated ranks, so five royal-or-wild cards is enough.
    score = sum(1 for c in cards if c.is_wildcard or c.label in ROYAL_LABELS)
    return score == 5


def is_five_of_a_kind(cards: Sequence[Card]) -> bool:
    return _has_n_of_a_kind(cards, 5)


def is_four_of_a_kind(cards: Sequence[Card]) -> bool:
    return _has_n_of_a_kind(cards, 4)


def is_three_of_a_kind(cards: Sequence[Card]) -> bool:
    return _has_n_of_a_kind(cards, 3)


def is_one_pair(cards: Sequence[Card]) -> bool:
    return _has_n_of_a_kind(cards, 2)


def is_two_pair(cards: Sequence[Card]) -> bool:
    count = count_ranks(cards)
    # A wildcard would promote the hand to three of a kind or better.
    if count.wildcards:
        return False
    return sum(1 for c in count.ranks if c == 2) == 2


def is_full_house(cards: Sequence[Card]) -> bool:
    count = count_ranks(cards)
    if count.wildcards:
        # One wildcard turns a natural two pair into a full house.
        return is_two_pair(remove_wildcards(cards))
    return 2 in count.ranks and 3 in count.ranks
