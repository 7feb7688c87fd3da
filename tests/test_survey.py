import pytest

from jokerpoker.poker.hand_eval import CATEGORIES, FIVE_OF_A_KIND, NO_PAIR
from jokerpoker.poker.survey import survey


def test_counts_sum_to_hands():
    res = survey(1000, seed=3)
    assert res.hands == 1000
    assert sum(res.category_counts.values()) == 1000
    assert set(res.category_counts) <= set(CATEGORIES)


def test_seed_repeats():
    assert survey(300, seed=9).category_counts == survey(300, seed=9).category_counts


def test_no_joker_means_no_five_of_a_kind():
    res = survey(2000, include_wildcard=False, seed=1)
    assert res.category_counts.get(FIVE_OF_A_KIND, 0) == 0


def test_frequency():
    res = survey(2000, seed=4)
    # roughly half of all 5-card hands have no pair at all
    assert 0.3 < res.frequency(NO_PAIR) < 0.6
    assert survey(0).frequency(NO_PAIR) == 0.0


def test_negative_hands():
    with pytest.raises(ValueError):
        survey(-1)
