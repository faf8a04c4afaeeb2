"""
Schocken - Input Validation Utilities

Provides validation functions for engine inputs. All validators either
return validated data or raise a descriptive SchockenError.
"""

from typing import Sequence

from schocken.engine.base import (
    DICE_PER_THROW,
    DIE_FACES,
    ConfigurationError,
    InvalidInputError,
)


MIN_PLAYERS = 2


def validate_dice_values(values: Sequence[int]) -> tuple[int, int, int]:
    """
    Validate and normalize the dice of a single throw.

    Args:
        values: Sequence of exactly three dice values

    Returns:
        Validated values as a tuple, in the order given

    Raises:
        InvalidInputError: If the count or any value is invalid
    """
    if values is None or isinstance(values, (str, bytes)):
        raise InvalidInputError(f"A throw must be a sequence of dice, got {values!r}.")

    try:
        values_tuple = tuple(values)
    except TypeError:
        raise InvalidInputError(
            f"A throw must be a sequence of dice, got {type(values).__name__}."
        ) from None

    if len(values_tuple) != DICE_PER_THROW:
        raise InvalidInputError(
            f"A throw needs exactly {DICE_PER_THROW} dice, got {len(values_tuple)}."
        )

    for i, value in enumerate(values_tuple):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidInputError(
                f"Die value at index {i} must be an integer, got {type(value).__name__}."
            )
        if not (1 <= value <= DIE_FACES):
            raise InvalidInputError(
                f"Die value at index {i} is {value}, must be between 1 and {DIE_FACES}."
            )

    return values_tuple


def validate_player_names(names: Sequence[str]) -> tuple[str, ...]:
    """
    Validate the players of a round.

    Args:
        names: Player names in play order

    Returns:
        Validated names as a tuple

    Raises:
        ConfigurationError: If there are fewer than two players, or a name
            is empty, not a string, or repeated
    """
    if names is None or isinstance(names, str):
        raise ConfigurationError(f"Player names must be a sequence, got {names!r}.")

    try:
        names_tuple = tuple(names)
    except TypeError:
        raise ConfigurationError(
            f"Player names must be a sequence, got {type(names).__name__}."
        ) from None

    if len(names_tuple) < MIN_PLAYERS:
        raise ConfigurationError(
            f"At least {MIN_PLAYERS} players required, got {len(names_tuple)}."
        )

    seen: set[str] = set()
    for i, name in enumerate(names_tuple):
        if not isinstance(name, str):
            raise ConfigurationError(
                f"Player name at index {i} must be a string, got {type(name).__name__}."
            )
        if not name.strip():
            raise ConfigurationError(f"Player name at index {i} is empty.")
        if name in seen:
            raise ConfigurationError(f"Duplicate player name {name!r}.")
        seen.add(name)

    return names_tuple


def validate_roll_budget(budget: int) -> int:
    """
    Validate a roll budget.

    Args:
        budget: Number of throws allowed

    Returns:
        Validated budget

    Raises:
        ConfigurationError: If budget is not a positive integer
    """
    if isinstance(budget, bool) or not isinstance(budget, int):
        raise ConfigurationError(
            f"Roll budget must be an integer, got {type(budget).__name__}."
        )

    if budget < 1:
        raise ConfigurationError(f"Roll budget must be positive, got {budget}.")

    return budget
