"""
Schocken - Throw Engine Tests

Tests for throw classification and the rank key.
"""

import random
from itertools import permutations

import pytest

from schocken.engine import classify, rank_key
from schocken.engine.base import CategoryKey, ClassifiedThrow, InvalidInputError, Throw
from schocken.engine.categories import CATEGORY_TABLE
from schocken.engine.schocken import SchockenEngine


# === Roll Dice ===


class TestRollDice:
    """Tests for SchockenEngine.roll_dice() and dice_source()."""

    def test_returns_throw(self):
        assert isinstance(SchockenEngine.roll_dice(), Throw)

    def test_three_dice(self):
        assert len(SchockenEngine.roll_dice()) == 3

    def test_value_range(self):
        """Roll 200 times; every value should be 1-6."""
        for _ in range(200):
            throw = SchockenEngine.roll_dice()
            assert all(1 <= v <= 6 for v in throw.values)

    def test_seeded_rng_is_reproducible(self):
        first = [SchockenEngine.roll_dice(random.Random(7)).values for _ in range(5)]
        second = [SchockenEngine.roll_dice(random.Random(7)).values for _ in range(5)]
        assert first == second

    def test_dice_source_returns_triples(self):
        source = SchockenEngine.dice_source(random.Random(1))
        for _ in range(20):
            dice = source()
            assert len(dice) == 3
            assert all(1 <= v <= 6 for v in dice)


# === Classification ===


class TestClassify:
    """Tests for SchockenEngine.classify()."""

    def test_common_rolls(self, classified_rolls):
        for name, (dice, key, penalty) in classified_rolls.items():
            result = classify(dice)
            assert result.key == CategoryKey(key), name
            assert result.penalty == penalty, name

    def test_exhaustive_and_exclusive(self, all_throws):
        """Every throw matches exactly one category before the catch-all."""
        for dice in all_throws:
            sorted_dice = tuple(sorted(dice))
            specific = [c for c in CATEGORY_TABLE[:-1] if c.matches(sorted_dice)]
            assert len(specific) <= 1, dice
            expected = specific[0].key if specific else CategoryKey.EYE_THROW
            assert classify(dice).key == expected

    def test_category_counts(self, all_throws):
        counts: dict[CategoryKey, int] = {}
        for dice in all_throws:
            key = classify(dice).key
            counts[key] = counts.get(key, 0) + 1
        assert counts == {
            CategoryKey.SCHOCK_OUT: 1,
            CategoryKey.JULE: 6,
            CategoryKey.SCHOCK: 15,
            CategoryKey.GENERAL: 5,
            CategoryKey.STRAIGHT: 24,
            CategoryKey.EYE_THROW: 165,
        }

    def test_penalty_always_positive(self, all_throws):
        for dice in all_throws:
            assert classify(dice).penalty >= 1

    def test_schock_out(self):
        result = classify([1, 1, 1])
        assert result.key == CategoryKey.SCHOCK_OUT
        assert result.penalty == 15
        assert result.name == "Schock-Out"

    def test_three_ones_never_general(self):
        assert classify([1, 1, 1]).key != CategoryKey.GENERAL

    @pytest.mark.parametrize("dice", list(permutations((1, 2, 4))))
    def test_jule_any_order(self, dice):
        result = classify(dice)
        assert result.key == CategoryKey.JULE
        assert result.penalty == 7

    def test_two_ones_and_four_is_schock(self):
        result = classify([1, 4, 1])
        assert result.key == CategoryKey.SCHOCK
        assert result.penalty == 4

    @pytest.mark.parametrize("third", [2, 3, 4, 5, 6])
    def test_schock_penalty_is_third_die(self, third):
        result = classify([third, 1, 1])
        assert result.key == CategoryKey.SCHOCK
        assert result.penalty == third

    @pytest.mark.parametrize("value", [2, 3, 4, 5, 6])
    def test_general(self, value):
        result = classify([value] * 3)
        assert result.key == CategoryKey.GENERAL
        assert result.penalty == 3

    @pytest.mark.parametrize("low", [1, 2, 3, 4])
    def test_straight(self, low):
        result = classify([low + 2, low, low + 1])
        assert result.key == CategoryKey.STRAIGHT
        assert result.penalty == 2

    def test_eye_throw(self):
        result = classify([2, 5, 6])
        assert result.key == CategoryKey.EYE_THROW
        assert result.penalty == 1
        assert result.name == "Augenwurf"

    def test_keeps_original_order(self):
        result = classify([6, 2, 5])
        assert result.dice == (6, 2, 5)
        assert result.sorted_dice == (2, 5, 6)

    def test_does_not_mutate_input(self):
        dice = [5, 1, 1]
        classify(dice)
        assert dice == [5, 1, 1]

    def test_accepts_throw(self):
        result = classify(Throw(values=(4, 4, 4)))
        assert result.key == CategoryKey.GENERAL

    def test_throw_from_list_matches_plain_dice(self):
        result = classify(Throw(values=[1, 1, 5]))
        assert result == classify([1, 1, 5])
        assert result.dice == (1, 1, 5)
        assert hash(result) == hash(classify([1, 1, 5]))

    def test_idempotent(self):
        assert classify([3, 1, 1]) == classify([3, 1, 1])

    def test_category_fields_passed_through(self):
        result = classify([1, 1, 3])
        assert result.priority == 3
        assert result.description == result.category.description

    @pytest.mark.parametrize("dice", [[0, 1, 1], [1, 1, 7], [1, 2], [1, 2, 3, 4], [1, 2, "3"]])
    def test_invalid_input_raises(self, dice):
        with pytest.raises(InvalidInputError):
            classify(dice)

    def test_to_dict(self):
        data = classify([5, 1, 1]).to_dict()
        assert data == {
            "key": "SCHOCK",
            "name": "Schock",
            "description": "Two ones and one other die (1-1-2 to 1-1-6)",
            "priority": 3,
            "penalty": 5,
            "dice": [5, 1, 1],
        }


# === Rank Key ===


class TestRankKey:
    """Tests for SchockenEngine.rank_key()."""

    def test_largest_tiebreak_value(self, all_throws):
        values = [SchockenEngine.tiebreak_value(classify(d)) for d in all_throws]
        assert max(values) == 665
        assert SchockenEngine.tiebreak_value(classify([6, 5, 6])) == 665

    def test_fixed_categories(self):
        assert rank_key(classify([1, 1, 1])) == 1000
        assert rank_key(classify([2, 4, 1])) == 2000

    def test_schock_formula(self):
        assert rank_key(classify([1, 1, 6])) == 3000 - 6

    def test_general_formula(self):
        assert rank_key(classify([5, 5, 5])) == 4000 - 5

    def test_straight_formula(self):
        assert rank_key(classify([2, 3, 4])) == 5000 - 4

    def test_eye_throw_formula(self):
        assert rank_key(classify([2, 6, 5])) == 6000 - 652

    def test_higher_schock_is_better(self):
        assert rank_key(classify([1, 1, 6])) < rank_key(classify([1, 1, 5]))

    def test_higher_general_is_better(self):
        assert rank_key(classify([6, 6, 6])) < rank_key(classify([2, 2, 2]))

    def test_higher_straight_is_better(self):
        assert rank_key(classify([4, 5, 6])) < rank_key(classify([1, 2, 3]))

    def test_straight_beats_eye_throw_pair(self):
        assert rank_key(classify([6, 5, 4])) < rank_key(classify([6, 6, 1]))

    def test_eye_throw_lexicographic(self):
        assert rank_key(classify([1, 6, 6])) < rank_key(classify([6, 5, 3]))
        assert rank_key(classify([6, 5, 3])) < rank_key(classify([6, 4, 3]))

    def test_eye_throw_matches_descending_comparison(self, all_throws):
        eye_throws = [d for d in all_throws if classify(d).key == CategoryKey.EYE_THROW]
        by_key = sorted(eye_throws, key=lambda d: rank_key(classify(d)))
        by_dice = sorted(eye_throws, key=lambda d: sorted(d, reverse=True), reverse=True)
        assert [sorted(d, reverse=True) for d in by_key] == [
            sorted(d, reverse=True) for d in by_dice
        ]

    def test_category_always_dominates(self, all_throws):
        classified = [classify(d) for d in all_throws]
        for better in classified:
            for worse in classified:
                if better.priority < worse.priority:
                    assert rank_key(better) < rank_key(worse)

    def test_same_dice_any_order_same_key(self):
        keys = {rank_key(classify(p)) for p in permutations((2, 5, 6))}
        assert len(keys) == 1

    def test_compare(self):
        best = classify([1, 1, 1])
        worst = classify([3, 2, 6])
        assert SchockenEngine.compare(best, worst) < 0
        assert SchockenEngine.compare(worst, best) > 0
        assert SchockenEngine.compare(best, classify([1, 1, 1])) == 0


# === Best Throw Reducer ===


class TestKeepBetter:
    """Tests for SchockenEngine.keep_better()."""

    def test_first_throw_is_kept(self):
        throw = classify([2, 3, 6])
        assert SchockenEngine.keep_better(None, throw) is throw

    def test_better_throw_replaces(self):
        current = classify([2, 3, 6])
        better = classify([1, 1, 4])
        assert SchockenEngine.keep_better(current, better) is better

    def test_worse_throw_is_ignored(self):
        current = classify([1, 1, 4])
        worse = classify([2, 3, 6])
        assert SchockenEngine.keep_better(current, worse) is current

    def test_equal_throw_keeps_earlier(self):
        earlier = classify([6, 5, 2])
        later = classify([2, 5, 6])
        kept = SchockenEngine.keep_better(earlier, later)
        assert kept is earlier
        assert kept.dice == (6, 5, 2)

    def test_returns_classified_throw(self):
        assert isinstance(SchockenEngine.keep_better(None, classify([3, 3, 3])), ClassifiedThrow)
