"""
Schocken - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

from itertools import product
from typing import Callable, Iterable, Sequence

import pytest

from schocken.config.settings import get_settings


# =============================================================================
# THROW TEST DATA
# =============================================================================

@pytest.fixture
def all_throws() -> list[tuple[int, int, int]]:
    """Every possible ordered throw of three D6 (216 throws)."""
    return list(product(range(1, 7), repeat=3))


@pytest.fixture
def classified_rolls() -> dict[str, tuple[tuple[int, int, int], str, int]]:
    """
    Common throws with expected category and penalty.

    Returns:
        Dict mapping name to (dice, expected_category_key, expected_penalty)
    """
    return {
        "schock_out": ((1, 1, 1), "SCHOCK_OUT", 15),
        "jule": ((1, 2, 4), "JULE", 7),
        "jule_shuffled": ((4, 1, 2), "JULE", 7),
        "schock_two": ((1, 2, 1), "SCHOCK", 2),
        "schock_five": ((1, 1, 5), "SCHOCK", 5),
        "schock_six": ((6, 1, 1), "SCHOCK", 6),
        "general_two": ((2, 2, 2), "GENERAL", 3),
        "general_four": ((4, 4, 4), "GENERAL", 3),
        "straight_low": ((3, 1, 2), "STRAIGHT", 2),
        "straight_mid": ((3, 4, 5), "STRAIGHT", 2),
        "straight_high": ((6, 5, 4), "STRAIGHT", 2),
        "eye_throw": ((2, 5, 6), "EYE_THROW", 1),
        "eye_pair": ((6, 1, 6), "EYE_THROW", 1),
        "eye_low": ((1, 2, 5), "EYE_THROW", 1),
    }


# =============================================================================
# DICE SOURCES
# =============================================================================

def make_scripted_source(throws: Iterable[Sequence[int]]) -> Callable[[], Sequence[int]]:
    """Dice source that yields the given throws in order, then fails."""
    iterator = iter(throws)

    def next_throw() -> Sequence[int]:
        try:
            return next(iterator)
        except StopIteration:
            raise AssertionError("Scripted dice source ran out of throws") from None

    return next_throw


@pytest.fixture
def scripted_source() -> Callable[[Iterable[Sequence[int]]], Callable[[], Sequence[int]]]:
    """Factory for scripted dice sources."""
    return make_scripted_source


# =============================================================================
# SETTINGS
# =============================================================================

@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch):
    """Isolate tests from the environment and the cached settings."""
    for key in (
        "SCHOCKEN_PLAYER_NAMES",
        "SCHOCKEN_MAX_ROLLS",
        "SCHOCKEN_RNG_SEED",
        "SCHOCKEN_DEBUG",
        "SCHOCKEN_LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
