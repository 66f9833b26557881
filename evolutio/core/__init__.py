"""Core module for the evolutio package."""

from .config import (
    ENGINE_VERSION,
    DEFAULT_PAYOFF,
    DEFAULT_ROUNDS,
    DEFAULT_NOISE,
    DEFAULT_GENERATIONS,
    DEFAULT_POPULATION,
    MAX_ROUNDS,
    MAX_NOISE,
    STRICT_MODE,
    configure_logging,
)
from .errors import (
    EvolutioError,
    InvalidParameterError,
    UnknownStrategyError,
    PopulationSizeError,
    UnknownCommandError,
)
from .types import (
    Action,
    Round,
    PayoffMatrix,
    MatchResult,
    TournamentResult,
    Generation,
)
from .payoff import payoff
from .validation import (
    check_run_parameters,
    validate_run_parameters,
    resolve_population,
)

__all__ = [
    # Configuration constants
    "ENGINE_VERSION",
    "DEFAULT_PAYOFF",
    "DEFAULT_ROUNDS",
    "DEFAULT_NOISE",
    "DEFAULT_GENERATIONS",
    "DEFAULT_POPULATION",
    "MAX_ROUNDS",
    "MAX_NOISE",
    "STRICT_MODE",
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
    # Validation
    "check_run_parameters",
    "validate_run_parameters",
    "resolve_population",
]
