from __future__ import annotations

import logging
import random
from typing import List, Optional

from .cards import BASE_CARDS, JOKER, Card

logger = logging.getLogger(__name__)


class Deck:
    def __init__(
        self,
        include_wildcard: bool = False,
        rng: Optional[random.Random] = None,
    ):
        self.include_wildcard = include_wildcard
        self.rng = rng or random.Random()
        self.cards: List[Card] = []
        self.reset()

    def _fresh_cards(self) -> List[Card]:
        cards = list(BASE_CARDS)
        if self.include_wildcard:
            cards.append(JOKER)
        return cards

    def reset(self) -> None:
        """
        Reset deck back to its full composition, then shuffle.
        52 base cards, plus the joker when include_wildcard is set.
        """
        self.cards = self._fresh_cards()
        self.shuffle()
        logger.debug("deck reset: %d cards (wildcard=%s)", len(self.cards), self.include_wildcard)

    def shuffle(self) -> None:
        # Random.shuffle is an in-place Fisher-Yates permutation.
        self.rng.shuffle(self.cards)

    @property
    def remaining(self) -> int:
        return len(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def deal(self, n: int) -> List[Card]:
        """
        Remove and return the top n cards.
        Dealing exactly the remaining count is allowed (deal(53) empties a deck
        with the joker); only n above the remaining count, or n < 0, raises
        ValueError, and the deck is left as it was.
        """
        if n < 0:
            raise ValueError(f"Cannot deal a negative number of cards: {n}")
        if n > len(self.cards):
            raise ValueError(f"Not enough cards left to deal: wanted {n}, have {len(self.cards)}")
        out = self.cards[:n]
        del self.cards[:n]
        logger.debug("dealt %d cards, %d left", n, len(self.cards))
        return out
