"""Evolutio - Iterated Prisoner's Dilemma matches, tournaments and evolution."""

from .core import (
    ENGINE_VERSION,
    DEFAULT_PAYOFF,
    DEFAULT_ROUNDS,
    DEFAULT_NOISE,
    DEFAULT_GENERATIONS,
    DEFAULT_POPULATION,
    EvolutioError,
    InvalidParameterError,
    UnknownStrategyError,
    PopulationSizeError,
    UnknownCommandError,
    Action,
    Round,
    PayoffMatrix,
    MatchResult,
    TournamentResult,
    Generation,
    payoff,
    configure_logging,
)
from .strategies import (
    StrategyId,
    Strategy,
    ROSTER,
    STRATEGY_NAMES,
    STRATEGY_DESCRIPTIONS,
    create_strategy,
    list_strategies,
    get_strategy_names,
)
from .engine import play_match, run_match, cooperation_rates
from .experiments import (
    TournamentConfig,
    TournamentRunner,
    run_tournament,
    EvolutionSimulator,
    run_evolution,
)

__version__ = ENGINE_VERSION

__all__ = [
    # Configuration
    "ENGINE_VERSION",
    "DEFAULT_PAYOFF",
    "DEFAULT_ROUNDS",
    "DEFAULT_NOISE",
    "DEFAULT_GENERATIONS",
    "DEFAULT_POPULATION",
    "configure_logging",
    # Errors
    "EvolutioError",
    "InvalidParameterError",
    "UnknownStrategyError",
    "PopulationSizeError",
    "UnknownCommandError",
    # Types
    "Action",
    "Round",
    "PayoffMatrix",
    "MatchResult",
    "TournamentResult",
    "Generation",
    "payoff",
    # Strategies
    "StrategyId",
    "Strategy",
    "ROSTER",
    "STRATEGY_NAMES",
    "STRATEGY_DESCRIPTIONS",
    "create_strategy",
    "list_strategies",
    "get_strategy_names",
    # Match engine
    "play_match",
    "run_match",
    "cooperation_rates",
    # Experiments
    "TournamentConfig",
    "TournamentRunner",
    "run_tournament",
    "EvolutionSimulator",
    "run_evolution",
]
