"""Experiments built on the match engine."""

from .tournament import (
    TournamentConfig,
    TournamentRunner,
    run_tournament,
)
from .evolution import (
    EvolutionSimulator,
    run_evolution,
)

__all__ = [
    # Tournaments
    "TournamentConfig",
    "TournamentRunner",
    "run_tournament",
    # Evolution
    "EvolutionSimulator",
    "run_evolution",
]
