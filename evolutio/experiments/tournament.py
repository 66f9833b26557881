"""Round-robin tournament over the strategy roster.

Every ordered pair of roster entries plays one match, self-play
included, and each row player's score is added to its running total.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple
import logging

import numpy as np

from ..core.config import DEFAULT_NOISE, DEFAULT_ROUNDS
from ..core.types import PayoffMatrix, TournamentResult
from ..core.validation import validate_run_parameters
from ..engine.match import make_rng, play_match
from ..strategies.registry import ROSTER, STRATEGY_NAMES, Strategy, StrategyId

logger = logging.getLogger(__name__)


@dataclass
class TournamentConfig:
    """Configuration for a tournament."""
    round_count: int = DEFAULT_ROUNDS
    noise: float = DEFAULT_NOISE
    matrix: PayoffMatrix = field(default_factory=PayoffMatrix)
    strict: bool = False


class TournamentRunner:
    """Runs a double round-robin across the full roster."""

    def __init__(
        self,
        config: TournamentConfig,
        rng: Optional[np.random.Generator] = None,
        progress_callback: Optional[Callable[[int, int, str], None]] = None,
    ):
        """Initialize tournament runner.

        Args:
            config: Tournament configuration
            rng: Random source (a fresh generator if None)
            progress_callback: Optional callback(completed, total, message)
        """
        self.config = config
        self.rng = make_rng(rng)
        self.progress_callback = progress_callback
        self.roster: List[StrategyId] = list(ROSTER)

    def _generate_matchups(self) -> List[Tuple[int, int]]:
        """All ordered (row, column) index pairs, self-play included."""
        n = len(self.roster)
        return [(i, j) for i in range(n) for j in range(n)]

    def _rank(self, totals: List[int]) -> List[Tuple[str, int]]:
        standings = [
            (STRATEGY_NAMES[strategy_id], total)
            for strategy_id, total in zip(self.roster, totals)
        ]
        # sorted() is stable, so ties keep roster order
        return sorted(standings, key=lambda x: x[1], reverse=True)

    def run(self) -> TournamentResult:
        """Execute the tournament.

        Returns:
            TournamentResult with the ranking and the head-to-head matrix.
        """
        config = self.config
        validate_run_parameters(config.round_count, config.noise, strict=config.strict)

        n = len(self.roster)
        score_matrix = np.zeros((n, n), dtype=np.int64)
        totals = [0] * n

        matchups = self._generate_matchups()
        total_matchups = len(matchups)

        for completed, (i, j) in enumerate(matchups):
            row = Strategy(self.roster[i])
            column = Strategy(self.roster[j])

            if self.progress_callback:
                self.progress_callback(
                    completed, total_matchups, f"{row.name} vs {column.name}"
                )

            result = play_match(
                row, column, config.round_count, config.noise, config.matrix, self.rng
            )
            score_matrix[i, j] = result.player_score
            totals[i] += result.player_score

        if self.progress_callback:
            self.progress_callback(total_matchups, total_matchups, "Tournament complete")

        ranking = self._rank(totals)
        logger.debug("Tournament finished, leader %s (%d)", *ranking[0])

        return TournamentResult(
            ranking=ranking,
            strategy_ids=[strategy_id.value for strategy_id in self.roster],
            score_matrix=score_matrix,
        )

    def results_to_dict(self, result: TournamentResult) -> Dict[str, Any]:
        """Convert tournament result to serializable dict, with its settings."""
        data = result.to_dict()
        data.update({
            "round_count": self.config.round_count,
            "noise": self.config.noise,
            "payoff_matrix": self.config.matrix.to_dict(),
        })
        return data


def run_tournament(
    round_count: int,
    noise: float,
    matrix: Optional[PayoffMatrix] = None,
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None,
    strict: bool = False,
) -> TournamentResult:
    """Run a full round-robin tournament.

    Args:
        round_count: Rounds per match
        noise: Per-action flip probability
        matrix: Payoff matrix (classical defaults if None)
        rng: Random source
        seed: Seed for a fresh generator when rng is None
        strict: Raise on out-of-range parameters

    Returns:
        TournamentResult ranked by total score
    """
    config = TournamentConfig(
        round_count=round_count,
        noise=noise,
        matrix=matrix or PayoffMatrix(),
        strict=strict,
    )
    return TournamentRunner(config, rng=make_rng(rng, seed)).run()
