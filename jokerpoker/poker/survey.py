from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Dict

from .deck import Deck
from .hand_eval import classify

logger = logging.getLogger(__name__)


@dataclass
class SurveyResult:
    hands: int
    category_counts: Dict[str, int]

    def frequency(self, category: str) -> float:
        return self.category_counts.get(category, 0) / self.hands if self.hands else 0.0


def survey(hands: int, include_wildcard: bool = True, seed: int = 42) -> SurveyResult:
    """Deal `hands` fresh 5-card hands and tally their categories (no holds, no draws)."""
    if hands < 0:
        raise ValueError(f"hands must be >= 0, got {hands}")

    rng = random.Random(seed)
    deck = Deck(include_wildcard=include_wildcard, rng=rng)

    category_counts: Dict[str, int] = {}
    for h in range(hands):
        if h:
            deck.reset()
        cat = classify(deck.deal(5))
        category_counts[cat] = category_counts.get(cat, 0) + 1

    logger.info("surveyed %d hands (wildcard=%s, seed=%d)", hands, include_wildcard, seed)
    return SurveyResult(hands=hands, category_counts=category_counts)
