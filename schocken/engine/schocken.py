"""
Schocken - Throw Engine

Classifies a throw of three dice into one of the six categories and maps
classified throws onto a single integer rank key (lower = better). All
methods are stateless class methods that operate on immutable inputs.

Rank key:
    priority * 1000 - tiebreak value

    - Schock: the penalty (1-1-6 beats 1-1-5)
    - General: the repeated die (6-6-6 beats 2-2-2)
    - Straße: the highest die (4-5-6 beats 1-2-3)
    - Augenwurf: 100 * highest + 10 * middle + lowest (6-6-1 beats 6-5-4)
    - Schock-Out, Jule: 0

The tiebreak value never exceeds 665 (6-6-5), so it can never push a throw
across a category boundary.
"""

import random
from typing import Callable, Sequence

from schocken.engine.base import (
    DICE_PER_THROW,
    DIE_FACES,
    CategoryKey,
    ClassifiedThrow,
    Throw,
)
from schocken.engine.categories import CATEGORY_TABLE
from schocken.engine.validators import validate_dice_values


DiceSource = Callable[[], Sequence[int]]


class SchockenEngine:
    """
    Stateless engine for classifying and comparing Schocken throws.

    All methods are class methods operating on immutable data.
    """

    PRIORITY_SPACING = 1000

    @classmethod
    def roll_dice(cls, rng: random.Random | None = None) -> Throw:
        """
        Roll three D6 dice.

        Args:
            rng: Optional random generator (defaults to the random module)

        Returns:
            Throw with random values
        """
        source = rng if rng is not None else random
        values = tuple(source.randint(1, DIE_FACES) for _ in range(DICE_PER_THROW))
        return Throw(values=values)

    @classmethod
    def dice_source(cls, rng: random.Random | None = None) -> DiceSource:
        """
        Build a dice source that rolls fresh dice on every call.

        Args:
            rng: Optional random generator shared by every roll

        Returns:
            Zero-argument callable returning three dice values
        """
        def roll() -> tuple[int, int, int]:
            return cls.roll_dice(rng).values

        return roll

    @classmethod
    def classify(cls, dice: Sequence[int] | Throw) -> ClassifiedThrow:
        """
        Classify a throw.

        The dice are sorted into a working copy and matched against the
        category table in priority order; the first match wins. The
        original roll order is kept on the result.

        Args:
            dice: Three dice values in the order thrown (sequence or Throw)

        Returns:
            ClassifiedThrow with the category and resolved penalty

        Raises:
            InvalidInputError: If the throw is not three dice in 1-6
        """
        if isinstance(dice, Throw):
            values = dice.values
        else:
            values = validate_dice_values(dice)

        sorted_dice = tuple(sorted(values))

        for category in CATEGORY_TABLE:
            if category.matches(sorted_dice):
                return ClassifiedThrow(
                    category=category,
                    dice=values,
                    sorted_dice=sorted_dice,
                    penalty=category.penalty.resolve(sorted_dice),
                )

        # The last category matches everything
        raise AssertionError(f"No category matched {sorted_dice}")

    @classmethod
    def tiebreak_value(cls, classified: ClassifiedThrow) -> int:
        """
        Within-category strength of a throw (higher = better).

        Args:
            classified: A classified throw

        Returns:
            Tiebreak value in 0..665
        """
        key = classified.key
        low, mid, high = classified.sorted_dice

        if key == CategoryKey.SCHOCK:
            return classified.penalty
        if key == CategoryKey.GENERAL:
            return low
        if key == CategoryKey.STRAIGHT:
            return high
        if key == CategoryKey.EYE_THROW:
            return high * 100 + mid * 10 + low
        return 0

    @classmethod
    def rank_key(cls, classified: ClassifiedThrow) -> int:
        """
        Single comparison key for a classified throw.

        Args:
            classified: A classified throw

        Returns:
            Integer key where lower means a better throw
        """
        return classified.priority * cls.PRIORITY_SPACING - cls.tiebreak_value(classified)

    @classmethod
    def keep_better(
        cls,
        best: ClassifiedThrow | None,
        candidate: ClassifiedThrow,
    ) -> ClassifiedThrow:
        """
        Reducer for a player's best throw.

        The candidate replaces the current best only if its rank key is
        strictly lower, so on equal keys the earlier throw is kept.

        Args:
            best: Best throw so far, or None before the first throw
            candidate: The throw just made

        Returns:
            The throw to keep
        """
        if best is None or cls.rank_key(candidate) < cls.rank_key(best):
            return candidate
        return best

    @classmethod
    def compare(cls, first: ClassifiedThrow, second: ClassifiedThrow) -> int:
        """
        Compare two throws.

        Returns:
            Negative if first is better, positive if second is better,
            0 if they are equal
        """
        return cls.rank_key(first) - cls.rank_key(second)


def classify(dice: Sequence[int] | Throw) -> ClassifiedThrow:
    """Classify a throw of three dice. See SchockenEngine.classify."""
    return SchockenEngine.classify(dice)


def rank_key(classified: ClassifiedThrow) -> int:
    """Rank key of a classified throw. See SchockenEngine.rank_key."""
    return SchockenEngine.rank_key(classified)
