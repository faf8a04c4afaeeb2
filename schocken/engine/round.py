"""
Schocken - Round Engine

Plays one round: every player throws up to their roll budget, keeps their
best throw, and the round's winner, loser and penalty are determined.

Roll budget:
    A base budget is drawn from (1, 2, 3). The first player in play order
    may use all of it; every later player is capped at max_rolls.

Ties:
    - Equal best throws for the winner: the earliest player wins.
    - Equal worst throws for the loser: the latest player loses.

The penalty the loser owes is set by the winner's throw.
"""

import logging
import random
from functools import reduce
from typing import Sequence

from schocken.engine.base import (
    ClassifiedThrow,
    PlayerThrowRecord,
    RollBudgetPolicy,
    RoundOutcome,
)
from schocken.engine.schocken import DiceSource, SchockenEngine
from schocken.engine.validators import validate_player_names, validate_roll_budget

logger = logging.getLogger(__name__)


class RoundEngine:
    """
    Stateless engine for a single Schocken round.

    The only state is local to one call of simulate_round; nothing is
    kept between rounds.
    """

    @classmethod
    def draw_base_budget(
        cls,
        policy: RollBudgetPolicy,
        rng: random.Random | None = None,
    ) -> int:
        """
        Base roll budget for a round.

        Args:
            policy: Roll budget policy (a fixed base_budget skips the draw)
            rng: Optional random generator

        Returns:
            Base budget (1-3 unless fixed by the policy)
        """
        if policy.base_budget is not None:
            return policy.base_budget
        source = rng if rng is not None else random
        return source.choice(RollBudgetPolicy.BASE_BUDGET_CHOICES)

    @classmethod
    def play_turn(
        cls,
        name: str,
        play_index: int,
        budget: int,
        dice_source: DiceSource,
    ) -> PlayerThrowRecord:
        """
        Let one player throw up to their budget.

        Args:
            name: Player name
            play_index: Position in play order
            budget: Number of throws the player takes
            dice_source: Callable returning three dice per call

        Returns:
            PlayerThrowRecord with every attempt and the kept throw

        Raises:
            InvalidInputError: If the dice source yields an invalid throw
        """
        budget = validate_roll_budget(budget)
        attempts: tuple[ClassifiedThrow, ...] = tuple(
            SchockenEngine.classify(dice_source()) for _ in range(budget)
        )
        best = reduce(SchockenEngine.keep_better, attempts, None)

        logger.debug(
            "%s kept %s (%s) after %d throw(s)",
            name, best.dice, best.name, len(attempts),
        )

        return PlayerThrowRecord(
            name=name,
            play_index=play_index,
            budget=budget,
            attempts=attempts,
            best=best,
            best_rank_key=SchockenEngine.rank_key(best),
        )

    @classmethod
    def select_winner(cls, records: Sequence[PlayerThrowRecord]) -> PlayerThrowRecord:
        """
        Player with the lowest best rank key; the earliest player wins ties.
        """
        return min(records, key=lambda r: (r.best_rank_key, r.play_index))

    @classmethod
    def select_loser(cls, records: Sequence[PlayerThrowRecord]) -> PlayerThrowRecord:
        """
        Player with the highest best rank key; the latest player loses ties.
        """
        return max(records, key=lambda r: (r.best_rank_key, r.play_index))

    @classmethod
    def simulate_round(
        cls,
        player_names: Sequence[str],
        dice_source: DiceSource | None = None,
        policy: RollBudgetPolicy | None = None,
        rng: random.Random | None = None,
    ) -> RoundOutcome:
        """
        Play a full round.

        Args:
            player_names: Players in play order (at least two, unique)
            dice_source: Callable returning three dice per call; defaults to
                random dice from rng
            policy: Roll budget policy; defaults to RollBudgetPolicy()
            rng: Optional random generator for the budget draw and default dice

        Returns:
            RoundOutcome with per-player records in play order

        Raises:
            ConfigurationError: If the players are invalid (before any dice
                are drawn)
            InvalidInputError: If the dice source yields an invalid throw
        """
        names = validate_player_names(player_names)
        if policy is None:
            policy = RollBudgetPolicy()
        if dice_source is None:
            dice_source = SchockenEngine.dice_source(rng)

        base_budget = cls.draw_base_budget(policy, rng)
        logger.debug("Round base budget %d for %d players", base_budget, len(names))

        records = tuple(
            cls.play_turn(name, index, policy.budget_for(index, base_budget), dice_source)
            for index, name in enumerate(names)
        )

        winner = cls.select_winner(records)
        loser = cls.select_loser(records)
        penalty = winner.best.penalty

        logger.info(
            "Round won by %s with %s, %s pays %d",
            winner.name, winner.best.name, loser.name, penalty,
        )

        return RoundOutcome(
            players=records,
            winner=winner.name,
            loser=loser.name,
            penalty=penalty,
            base_budget=base_budget,
        )


def simulate_round(
    player_names: Sequence[str],
    dice_source: DiceSource | None = None,
    policy: RollBudgetPolicy | None = None,
    rng: random.Random | None = None,
) -> RoundOutcome:
    """Play a full round. See RoundEngine.simulate_round."""
    return RoundEngine.simulate_round(player_names, dice_source, policy, rng)
