import argparse
import logging
import random
from typing import List, Optional

from jokerpoker.logging_utils import LOG_LEVEL, setup_logging
from jokerpoker.poker.cards import cards_str
from jokerpoker.poker.deck import Deck
from jokerpoker.poker.hand_eval import CATEGORIES, classify, display_name
from jokerpoker.poker.parse import parse_hand
from jokerpoker.poker.ruleset import RuleSet
from jokerpoker.poker.survey import survey

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(description="jokerpoker — 5-card hand classifier with an optional joker")

    ap.add_argument("--ruleset", help="Path to rule set YAML (default: built-in Joker Poker)")
    joker = ap.add_mutually_exclusive_group()
    joker.add_argument("--joker", dest="joker", action="store_true", default=None, help="Include the joker")
    joker.add_argument("--no-joker", dest="joker", action="store_false", default=None, help="Leave the joker out")

    ap.add_argument("--hand", help='Classify a hand like "AS KS QS JS Joker"')
    ap.add_argument("--hands", type=int, default=0, help="Survey N freshly dealt hands")
    ap.add_argument("--seed", type=int, default=None, help="RNG seed")
    ap.add_argument("--log-level", default=LOG_LEVEL, help="DEBUG, INFO, WARNING or ERROR")

    args = ap.parse_args(argv)
    setup_logging(args.log_level)

    try:
        rules = RuleSet.from_yaml(args.ruleset) if args.ruleset else RuleSet.default()
    except (OSError, ValueError) as e:
        ap.error(f"cannot load rule set: {e}")

    include_wildcard = rules.include_wildcard if args.joker is None else args.joker
    logger.debug("rule set %r, wildcard=%s", rules.name, include_wildcard)

    # fixed-hand mode
    if args.hand:
        try:
            hand = parse_hand(args.hand)
        except ValueError as e:
            ap.error(str(e))
        print(f"Hand: {cards_str(hand)}")
        print(f"Category: {display_name(classify(hand), rules.labels)}")
        return

    # survey mode
    if args.hands:
        if args.hands < 0:
            ap.error("--hands must be positive")
        seed = 42 if args.seed is None else args.seed
        res = survey(args.hands, include_wildcard=include_wildcard, seed=seed)

        print(f"Rule set: {rules.name}")
        print(f"Joker:    {'yes' if include_wildcard else 'no'}")
        print(f"Hands:    {res.hands:,}")
        print("\nCategory counts:")
        for k in CATEGORIES:
            v = res.category_counts.get(k, 0)
            print(f"  {display_name(k, rules.labels):24s} {v:9,d}  {100.0 * res.frequency(k):6.3f}%")
        return

    # deal one hand
    rng = random.Random(args.seed) if args.seed is not None else None
    hand = Deck(include_wildcard=include_wildcard, rng=rng).deal(5)
    print(f"Hand: {cards_str(hand)}")
    print(f"Category: {display_name(classify(hand), rules.labels)}")


if __name__ == "__main__":
    main()
