"""
Schocken - Game Engine Base Classes

This module defines the foundational data structures, enums and errors used
throughout the engine. All classes are immutable (frozen dataclasses) so a
round can be built once and handed to any consumer without copying.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Sequence


DICE_PER_THROW = 3
DIE_FACES = 6


class SchockenError(ValueError):
    """Base class for all engine errors."""


class InvalidInputError(SchockenError):
    """A throw or die value outside the game's contract."""


class ConfigurationError(SchockenError):
    """A round cannot start with the given players or roll policy."""


class CategoryKey(Enum):
    """Identity of the six throw categories."""
    SCHOCK_OUT = "SCHOCK_OUT"
    JULE = "JULE"
    SCHOCK = "SCHOCK"
    GENERAL = "GENERAL"
    STRAIGHT = "STRAIGHT"
    EYE_THROW = "EYE_THROW"


@dataclass(frozen=True)
class Throw:
    """
    Immutable representation of one throw of three dice.

    Attributes:
        values: Dice values in the order they were rolled
    """
    values: tuple[int, int, int]

    def __post_init__(self) -> None:
        """Validate that the throw holds exactly three dice in range."""
        if self.values is None or isinstance(self.values, (str, bytes)):
            raise InvalidInputError(f"A throw must be a sequence of dice, got {self.values!r}.")
        try:
            values = tuple(self.values)
        except TypeError:
            raise InvalidInputError(
                f"A throw must be a sequence of dice, got {type(self.values).__name__}."
            ) from None
        object.__setattr__(self, "values", values)

        if len(self.values) != DICE_PER_THROW:
            raise InvalidInputError(
                f"A throw needs exactly {DICE_PER_THROW} dice, got {len(self.values)}."
            )
        for value in self.values:
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidInputError(
                    f"Die value must be an integer, got {type(value).__name__}."
                )
            if not (1 <= value <= DIE_FACES):
                raise InvalidInputError(
                    f"Invalid die value {value}. Must be between 1 and {DIE_FACES}."
                )

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> int:
        return self.values[index]

    @property
    def sorted_values(self) -> tuple[int, int, int]:
        """Dice sorted ascending, the form every predicate works on."""
        return tuple(sorted(self.values))

    @classmethod
    def from_sequence(cls, values: Sequence[int]) -> "Throw":
        """Create a Throw from any sequence type."""
        return cls(values=values)


@dataclass(frozen=True)
class FixedPenalty:
    """A penalty that does not depend on the dice."""
    amount: int

    def resolve(self, sorted_dice: tuple[int, int, int]) -> int:
        return self.amount


@dataclass(frozen=True)
class ComputedPenalty:
    """A penalty derived from the sorted dice."""
    compute: Callable[[tuple[int, int, int]], int]

    def resolve(self, sorted_dice: tuple[int, int, int]) -> int:
        return self.compute(sorted_dice)


Penalty = FixedPenalty | ComputedPenalty


@dataclass(frozen=True)
class Category:
    """
    One row of the category table.

    Attributes:
        key: Category identity
        name: Display name, passed through unchanged
        description: Rule text, passed through unchanged
        priority: 1 = best category, 6 = worst
        penalty: Fixed or computed penalty rule
        matches: Predicate on the ascending-sorted dice
    """
    key: CategoryKey
    name: str
    description: str
    priority: int
    penalty: Penalty
    matches: Callable[[tuple[int, int, int]], bool]


@dataclass(frozen=True)
class ClassifiedThrow:
    """
    A throw bound to the category it falls into.

    Attributes:
        category: The matching category table row
        dice: Dice in original roll order (display order is up to the caller)
        sorted_dice: Dice sorted ascending, as used for classification
        penalty: Resolved penalty amount (always >= 1)
    """
    category: Category
    dice: tuple[int, int, int]
    sorted_dice: tuple[int, int, int]
    penalty: int

    @property
    def key(self) -> CategoryKey:
        return self.category.key

    @property
    def name(self) -> str:
        return self.category.name

    @property
    def description(self) -> str:
        return self.category.description

    @property
    def priority(self) -> int:
        return self.category.priority

    def to_dict(self) -> dict:
        """Convert to a plain dictionary."""
        return {
            "key": self.key.value,
            "name": self.name,
            "description": self.description,
            "priority": self.priority,
            "penalty": self.penalty,
            "dice": list(self.dice),
        }


@dataclass(frozen=True)
class RollBudgetPolicy:
    """
    How many throws each player may take in a round.

    The base budget is drawn from BASE_BUDGET_CHOICES unless fixed. The
    first player in play order uses the base budget as drawn; everyone
    after them is capped at max_rolls.

    Attributes:
        max_rolls: Cap applied to every player after the first
        base_budget: Fixed base budget, or None to draw one per round
    """
    max_rolls: int = 3
    base_budget: int | None = None

    BASE_BUDGET_CHOICES = (1, 2, 3)

    def __post_init__(self) -> None:
        """Validate the policy."""
        if isinstance(self.max_rolls, bool) or not isinstance(self.max_rolls, int):
            raise ConfigurationError(
                f"max_rolls must be an integer, got {type(self.max_rolls).__name__}."
            )
        if self.max_rolls < 1:
            raise ConfigurationError(f"max_rolls must be positive, got {self.max_rolls}.")
        if self.base_budget is not None and (
            isinstance(self.base_budget, bool)
            or not isinstance(self.base_budget, int)
            or self.base_budget < 1
        ):
            raise ConfigurationError(
                f"base_budget must be a positive integer, got {self.base_budget!r}."
            )

    @classmethod
    def from_settings(cls, settings) -> "RollBudgetPolicy":
        """Build a policy from application settings."""
        return cls(max_rolls=settings.max_rolls)

    def budget_for(self, play_index: int, base_budget: int) -> int:
        """Personal budget for the player at play_index."""
        if play_index == 0:
            return base_budget
        return min(base_budget, self.max_rolls)


@dataclass(frozen=True)
class PlayerThrowRecord:
    """
    Everything one player threw in a round.

    Attributes:
        name: Player name
        play_index: Position in play order (0 = first)
        budget: Number of throws the player was allowed and used
        attempts: Every classified throw, in the order thrown
        best: The throw kept (lowest rank key, earliest on ties)
        best_rank_key: Rank key of the kept throw
    """
    name: str
    play_index: int
    budget: int
    attempts: tuple[ClassifiedThrow, ...]
    best: ClassifiedThrow
    best_rank_key: int

    def to_dict(self) -> dict:
        """Convert to a plain dictionary."""
        return {
            "name": self.name,
            "play_index": self.play_index,
            "budget": self.budget,
            "attempts": [attempt.to_dict() for attempt in self.attempts],
            "best": self.best.to_dict(),
            "best_rank_key": self.best_rank_key,
        }


@dataclass(frozen=True)
class RoundOutcome:
    """
    Result of one simulated round.

    Attributes:
        players: Player records in original play order
        winner: Name of the player with the best kept throw
        loser: Name of the player with the worst kept throw
        penalty: Amount owed by the loser, set by the winner's throw
        base_budget: Base roll budget drawn for this round
    """
    players: tuple[PlayerThrowRecord, ...]
    winner: str
    loser: str
    penalty: int
    base_budget: int

    def record_for(self, name: str) -> PlayerThrowRecord:
        """Look up a player's record by name."""
        for record in self.players:
            if record.name == name:
                return record
        raise KeyError(name)

    @property
    def winning_throw(self) -> ClassifiedThrow:
        return self.record_for(self.winner).best

    @property
    def losing_throw(self) -> ClassifiedThrow:
        return self.record_for(self.loser).best

    @property
    def ranking(self) -> tuple[PlayerThrowRecord, ...]:
        """Records best-first; earlier play order wins ties."""
        return tuple(
            sorted(self.players, key=lambda r: (r.best_rank_key, r.play_index))
        )

    def to_dict(self) -> dict:
        """Convert to a plain dictionary."""
        return {
            "players": [record.to_dict() for record in self.players],
            "winner": self.winner,
            "loser": self.loser,
            "penalty": self.penalty,
            "base_budget": self.base_budget,
        }
