"""
Schocken - Category Table

The six throw categories in priority order. A throw belongs to the first
category whose predicate matches its ascending-sorted dice; the last row
always matches. The table is built once at import and never mutated.

    Priority  Category    Dice (sorted)       Penalty
    1         Schock-Out  1-1-1               15
    2         Jule        1-2-4               7
    3         Schock      1-1-x, x != 1       x
    4         General     x-x-x, x != 1       3
    5         Straße      x-(x+1)-(x+2)       2
    6         Augenwurf   anything else       1
"""

from types import MappingProxyType

from schocken.engine.base import Category, CategoryKey, ComputedPenalty, FixedPenalty


def _is_schock_out(dice: tuple[int, int, int]) -> bool:
    return dice == (1, 1, 1)


def _is_jule(dice: tuple[int, int, int]) -> bool:
    return dice == (1, 2, 4)


def _is_schock(dice: tuple[int, int, int]) -> bool:
    low, mid, high = dice
    return low == 1 and mid == 1 and high != 1


def _is_general(dice: tuple[int, int, int]) -> bool:
    low, mid, high = dice
    return low == mid == high and low != 1


def _is_straight(dice: tuple[int, int, int]) -> bool:
    low, mid, high = dice
    return mid == low + 1 and high == mid + 1


def _always(dice: tuple[int, int, int]) -> bool:
    return True


def _schock_penalty(dice: tuple[int, int, int]) -> int:
    # The die that is not a one
    return dice[2]


SCHOCK_OUT = Category(
    key=CategoryKey.SCHOCK_OUT,
    name="Schock-Out",
    description="1-1-1, the highest throw in the game",
    priority=1,
    penalty=FixedPenalty(15),
    matches=_is_schock_out,
)

JULE = Category(
    key=CategoryKey.JULE,
    name="Jule",
    description="1-2-4, the second highest throw",
    priority=2,
    penalty=FixedPenalty(7),
    matches=_is_jule,
)

SCHOCK = Category(
    key=CategoryKey.SCHOCK,
    name="Schock",
    description="Two ones and one other die (1-1-2 to 1-1-6)",
    priority=3,
    penalty=ComputedPenalty(_schock_penalty),
    matches=_is_schock,
)

GENERAL = Category(
    key=CategoryKey.GENERAL,
    name="General",
    description="Three of a kind (except 1-1-1)",
    priority=4,
    penalty=FixedPenalty(3),
    matches=_is_general,
)

STRAIGHT = Category(
    key=CategoryKey.STRAIGHT,
    name="Straße",
    description="Three consecutive numbers",
    priority=5,
    penalty=FixedPenalty(2),
    matches=_is_straight,
)

EYE_THROW = Category(
    key=CategoryKey.EYE_THROW,
    name="Augenwurf",
    description="Every other throw",
    priority=6,
    penalty=FixedPenalty(1),
    matches=_always,
)

# Priority order, best first
CATEGORY_TABLE: tuple[Category, ...] = (
    SCHOCK_OUT,
    JULE,
    SCHOCK,
    GENERAL,
    STRAIGHT,
    EYE_THROW,
)

CATEGORIES_BY_KEY = MappingProxyType({category.key: category for category in CATEGORY_TABLE})


def get_category(key: CategoryKey | str) -> Category:
    """
    Look up a category by key.

    Args:
        key: A CategoryKey or its string value (e.g. "SCHOCK")

    Returns:
        The matching Category

    Raises:
        KeyError: If no category has that key
    """
    if isinstance(key, str):
        try:
            key = CategoryKey(key)
        except ValueError:
            raise KeyError(key) from None
    return CATEGORIES_BY_KEY[key]
