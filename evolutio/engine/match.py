"""Single-match simulation.

A match keeps one canonical round log with player 1's action first.
Player 2 is handed the mirrored projection of that log, so both sides
always agree on what happened, noise included.
"""

import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ..core.payoff import payoff
from ..core.types import Action, MatchResult, PayoffMatrix, Round
from ..core.validation import validate_run_parameters
from ..strategies.registry import Strategy, create_strategy

logger = logging.getLogger(__name__)


def mirror_history(history: Sequence[Round]) -> List[Round]:
    """Swap each round to the other player's perspective."""
    return [(theirs, mine) for mine, theirs in history]


def apply_noise(action: Action, noise: float, rng: np.random.Generator) -> Action:
    """Flip an intended action with probability ``noise``."""
    if rng.random() < noise:
        return action.toggle()
    return action


def make_rng(
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None,
) -> np.random.Generator:
    """Return the caller's generator, or a fresh one (seeded if given)."""
    if rng is not None:
        return rng
    return np.random.default_rng(seed)


def play_match(
    player1: Strategy,
    player2: Strategy,
    round_count: int,
    noise: float,
    matrix: PayoffMatrix,
    rng: np.random.Generator,
) -> MatchResult:
    """Play a fixed-length match between two strategies.

    Args:
        player1: First strategy.
        player2: Second strategy.
        round_count: Number of rounds to play.
        noise: Independent per-player, per-round flip probability.
        matrix: Payoff matrix used for scoring and by Pavlov.
        rng: Random source for intents and noise.

    Returns:
        MatchResult with the canonical log and both scores.
    """
    history: List[Round] = []
    score1 = 0
    score2 = 0

    for _ in range(round_count):
        intent1 = player1.decide(history, matrix, rng)
        intent2 = player2.decide(mirror_history(history), matrix, rng)

        a1 = apply_noise(intent1, noise, rng)
        a2 = apply_noise(intent2, noise, rng)

        history.append((a1, a2))
        s1, s2 = payoff(a1, a2, matrix)
        score1 += s1
        score2 += s2

    return MatchResult(
        player_name=player1.name,
        opponent_name=player2.name,
        rounds=history,
        player_score=score1,
        opponent_score=score2,
    )


def run_match(
    player1_id: str,
    player2_id: str,
    round_count: int,
    noise: float,
    matrix: Optional[PayoffMatrix] = None,
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None,
    strict: bool = False,
) -> MatchResult:
    """Run one match between two roster strategies by identifier.

    Unknown identifiers resolve to Always Defect unless ``strict`` is set.
    """
    validate_run_parameters(round_count, noise, strict=strict)
    matrix = matrix or PayoffMatrix()
    player1 = create_strategy(player1_id, strict=strict)
    player2 = create_strategy(player2_id, strict=strict)

    logger.debug(
        "Match %s vs %s: %d rounds, noise %.3f", player1.name, player2.name,
        round_count, noise,
    )
    return play_match(player1, player2, round_count, noise, matrix, make_rng(rng, seed))


def cooperation_rates(result: MatchResult) -> Tuple[float, float]:
    """Fraction of rounds each player cooperated (0.0 for an empty match)."""
    if not result.rounds:
        return 0.0, 0.0
    n = len(result.rounds)
    p1 = sum(1 for a1, _ in result.rounds if a1 == Action.COOPERATE)
    p2 = sum(1 for _, a2 in result.rounds if a2 == Action.COOPERATE)
    return p1 / n, p2 / n
