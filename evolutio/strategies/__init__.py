"""Strategy roster and factory."""

from .registry import (
    StrategyId,
    Strategy,
    ROSTER,
    FALLBACK_STRATEGY,
    STRATEGY_NAMES,
    STRATEGY_DESCRIPTIONS,
    STRATEGY_COLORS,
    decide,
    create_strategy,
    list_strategies,
    get_strategy_names,
)

__all__ = [
    "StrategyId",
    "Strategy",
    "ROSTER",
    "FALLBACK_STRATEGY",
    "STRATEGY_NAMES",
    "STRATEGY_DESCRIPTIONS",
    "STRATEGY_COLORS",
    "decide",
    "create_strategy",
    "list_strategies",
    "get_strategy_names",
]
