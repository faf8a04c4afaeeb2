"""
Schocken - Learning Quiz

A quiz round shows each player's kept throw and asks for the winner, the
loser and the penalty. This module starts quiz rounds, formats throws for
display and grades answers. Rendering is left to the caller.
"""

import random
from dataclasses import dataclass
from itertools import product

from pydantic import BaseModel, Field

from schocken.config.settings import Settings, get_settings
from schocken.engine.base import (
    DICE_PER_THROW,
    DIE_FACES,
    CategoryKey,
    ClassifiedThrow,
    RollBudgetPolicy,
    RoundOutcome,
)
from schocken.engine.round import RoundEngine
from schocken.engine.schocken import DiceSource, SchockenEngine


def _penalty_choices() -> tuple[int, ...]:
    faces = range(1, DIE_FACES + 1)
    amounts = {
        SchockenEngine.classify(dice).penalty
        for dice in product(faces, repeat=DICE_PER_THROW)
    }
    return tuple(sorted(amounts))


# Every penalty a round can end with
PENALTY_CHOICES: tuple[int, ...] = _penalty_choices()


class QuizAnswer(BaseModel):
    """A user's guess for one round."""

    winner: str = Field(min_length=1)
    loser: str = Field(min_length=1)
    penalty: int = Field(ge=1)

    model_config = {"frozen": True}


@dataclass(frozen=True)
class QuizResult:
    """
    Graded answer for one round.

    Attributes:
        outcome: The round that was asked about
        answer: The user's answer
        winner_correct: Whether the winner was guessed right
        loser_correct: Whether the loser was guessed right
        penalty_correct: Whether the penalty was guessed right
    """
    outcome: RoundOutcome
    answer: QuizAnswer
    winner_correct: bool
    loser_correct: bool
    penalty_correct: bool

    @property
    def is_correct(self) -> bool:
        return self.winner_correct and self.loser_correct and self.penalty_correct

    def explanation(self) -> list[str]:
        """Lines explaining the right answer."""
        best = self.outcome.winning_throw
        worst = self.outcome.losing_throw
        return [
            f"Winner: {self.outcome.winner} with {format_dice_display(best)} ({best.name})",
            f"Loser: {self.outcome.loser} with {format_dice_display(worst)} ({worst.name})",
            f"Penalty: {self.outcome.penalty} (based on {best.name})",
            best.description,
        ]


def format_dice_display(classified: ClassifiedThrow) -> str:
    """
    Dice of a throw as shown to players.

    Augenwurf is read highest die first (6-5-2); every other category is
    shown ascending (1-1-5, 2-3-4).
    """
    if classified.key == CategoryKey.EYE_THROW:
        dice = sorted(classified.dice, reverse=True)
    else:
        dice = classified.sorted_dice
    return "-".join(str(value) for value in dice)


def new_round(
    settings: Settings | None = None,
    rng: random.Random | None = None,
    dice_source: DiceSource | None = None,
) -> RoundOutcome:
    """
    Start a quiz round with the configured players.

    Args:
        settings: Settings to use (defaults to get_settings())
        rng: Random generator; seeded from settings.rng_seed when omitted
        dice_source: Optional dice source overriding rng for the dice

    Returns:
        The simulated round
    """
    settings = settings or get_settings()
    if rng is None:
        rng = random.Random(settings.rng_seed)
    return RoundEngine.simulate_round(
        settings.player_names,
        dice_source=dice_source,
        policy=RollBudgetPolicy.from_settings(settings),
        rng=rng,
    )


def grade_answer(outcome: RoundOutcome, answer: QuizAnswer) -> QuizResult:
    """
    Grade a user's answer against a round.

    Args:
        outcome: The simulated round
        answer: The user's guess

    Returns:
        QuizResult with per-field correctness
    """
    return QuizResult(
        outcome=outcome,
        answer=answer,
        winner_correct=answer.winner == outcome.winner,
        loser_correct=answer.loser == outcome.loser,
        penalty_correct=answer.penalty == outcome.penalty,
    )
