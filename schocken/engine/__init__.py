"""
Schocken Game Engine.

Pure Python game logic with zero UI dependencies.
Handles throw classification, throw ranking and round resolution.
"""

from schocken.engine.base import (
    Category,
    CategoryKey,
    ClassifiedThrow,
    ComputedPenalty,
    ConfigurationError,
    FixedPenalty,
    InvalidInputError,
    PlayerThrowRecord,
    RollBudgetPolicy,
    RoundOutcome,
    SchockenError,
    Throw,
)
from schocken.engine.categories import CATEGORY_TABLE, get_category
from schocken.engine.round import RoundEngine, simulate_round
from schocken.engine.schocken import DiceSource, SchockenEngine, classify, rank_key

__all__ = [
    # Data Classes
    "Category",
    "ClassifiedThrow",
    "ComputedPenalty",
    "FixedPenalty",
    "PlayerThrowRecord",
    "RollBudgetPolicy",
    "RoundOutcome",
    "Throw",
    # Enums
    "CategoryKey",
    # Errors
    "ConfigurationError",
    "InvalidInputError",
    "SchockenError",
    # Category Table
    "CATEGORY_TABLE",
    "get_category",
    # Engines
    "DiceSource",
    "RoundEngine",
    "SchockenEngine",
    "classify",
    "rank_key",
    "simulate_round",
]
