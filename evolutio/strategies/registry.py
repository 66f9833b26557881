"""Closed roster of Iterated Prisoner's Dilemma strategies.

Each strategy sees only its own-perspective history: a list of
(own_action, opponent_action) rounds, empty on the first round of a
match. Stochastic strategies draw from the generator passed in by the
caller; nothing is kept between calls.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Sequence

import numpy as np

from ..core.errors import UnknownStrategyError
from ..core.payoff import payoff
from ..core.types import Action, PayoffMatrix, Round

logger = logging.getLogger(__name__)

GENEROUS_FORGIVENESS = 0.1
JOSS_SNEAK_RATE = 0.1


class StrategyId(str, Enum):
    """Roster identifiers, in roster order."""
    TIT_FOR_TAT = "tit_for_tat"
    ALWAYS_DEFECT = "always_defect"
    GRIM_TRIGGER = "grim_trigger"
    ALWAYS_COOPERATE = "always_cooperate"
    RANDOM = "random"
    PAVLOV = "pavlov"
    GENEROUS_TFT = "generous_tft"
    JOSS = "joss"


ROSTER: List[StrategyId] = list(StrategyId)

FALLBACK_STRATEGY = StrategyId.ALWAYS_DEFECT

STRATEGY_NAMES: Dict[StrategyId, str] = {
    StrategyId.TIT_FOR_TAT: "Tit-For-Tat",
    StrategyId.ALWAYS_DEFECT: "Always Defect",
    StrategyId.GRIM_TRIGGER: "Grim Trigger",
    StrategyId.ALWAYS_COOPERATE: "Always Cooperate",
    StrategyId.RANDOM: "Random",
    StrategyId.PAVLOV: "Pavlov",
    StrategyId.GENEROUS_TFT: "Generous TFT",
    StrategyId.JOSS: "Joss",
}

STRATEGY_DESCRIPTIONS: Dict[StrategyId, str] = {
    StrategyId.TIT_FOR_TAT: "Starts with cooperation, then mimics the opponent's last move.",
    StrategyId.ALWAYS_DEFECT: "The agent of chaos. Never cooperates.",
    StrategyId.GRIM_TRIGGER: "Cooperates until the opponent defects once, then never forgives.",
    StrategyId.ALWAYS_COOPERATE: "The saint. Always cooperates.",
    StrategyId.RANDOM: "Unpredictable. Flips a coin every round.",
    StrategyId.PAVLOV: "Win-stay, lose-shift. Changes its move only when it did badly.",
    StrategyId.GENEROUS_TFT: "Tit-For-Tat that forgives a defection one time in ten.",
    StrategyId.JOSS: "Tit-For-Tat that sneaks in a defection one time in ten.",
}

# Keyed by display name, as charts are
STRATEGY_COLORS: Dict[str, str] = {
    "Tit-For-Tat": "#3b82f6",
    "Always Defect": "#ef4444",
    "Grim Trigger": "#eab308",
    "Always Cooperate": "#22c55e",
    "Random": "#94a3b8",
    "Pavlov": "#a855f7",
    "Generous TFT": "#ec4899",
    "Joss": "#f97316",
}


def _bernoulli(rng: np.random.Generator, probability: float) -> bool:
    return rng.random() < probability


def decide(
    strategy_id: StrategyId,
    history: Sequence[Round],
    matrix: PayoffMatrix,
    rng: np.random.Generator,
) -> Action:
    """Choose the next action for a roster strategy.

    Args:
        strategy_id: Which rule to apply.
        history: Own-perspective rounds so far (own action first).
        matrix: Active payoff matrix (Pavlov scores its last round).
        rng: Random source for the stochastic strategies.

    Returns:
        The intended action, before noise.
    """
    last = history[-1] if history else None

    if strategy_id is StrategyId.ALWAYS_DEFECT:
        return Action.DEFECT

    if strategy_id is StrategyId.ALWAYS_COOPERATE:
        return Action.COOPERATE

    if strategy_id is StrategyId.RANDOM:
        return Action.COOPERATE if _bernoulli(rng, 0.5) else Action.DEFECT

    if strategy_id is StrategyId.GRIM_TRIGGER:
        if any(opp == Action.DEFECT for _, opp in history):
            return Action.DEFECT
        return Action.COOPERATE

    if last is None:
        return Action.COOPERATE
    own_last, opp_last = last

    if strategy_id is StrategyId.TIT_FOR_TAT:
        return opp_last

    if strategy_id is StrategyId.PAVLOV:
        own_score, _ = payoff(own_last, opp_last, matrix)
        return own_last if own_score >= matrix.r else own_last.toggle()

    if strategy_id is StrategyId.GENEROUS_TFT:
        if opp_last == Action.COOPERATE:
            return Action.COOPERATE
        return Action.COOPERATE if _bernoulli(rng, GENEROUS_FORGIVENESS) else Action.DEFECT

    if strategy_id is StrategyId.JOSS:
        if opp_last == Action.DEFECT:
            return Action.DEFECT
        return Action.DEFECT if _bernoulli(rng, JOSS_SNEAK_RATE) else Action.COOPERATE

    raise ValueError(f"Unhandled strategy: {strategy_id!r}")


@dataclass(frozen=True)
class Strategy:
    """A roster strategy bound to its identifier."""
    id: StrategyId

    @property
    def name(self) -> str:
        return STRATEGY_NAMES[self.id]

    @property
    def description(self) -> str:
        return STRATEGY_DESCRIPTIONS[self.id]

    def decide(
        self,
        history: Sequence[Round],
        matrix: PayoffMatrix,
        rng: np.random.Generator,
    ) -> Action:
        return decide(self.id, history, matrix, rng)


def create_strategy(identifier: str, strict: bool = False) -> Strategy:
    """Create a strategy from its identifier.

    Args:
        identifier: Roster id such as "tit_for_tat".
        strict: Raise instead of substituting Always Defect.

    Returns:
        The matching Strategy. Unknown identifiers resolve to
        Always Defect unless strict is set.

    Raises:
        UnknownStrategyError: If strict and the identifier is not in the roster.
    """
    try:
        return Strategy(StrategyId(identifier))
    except ValueError:
        if strict:
            raise UnknownStrategyError(identifier, list_strategies()) from None
        logger.warning(
            "Unknown strategy '%s', substituting %s", identifier, FALLBACK_STRATEGY.value
        )
        return Strategy(FALLBACK_STRATEGY)


def list_strategies() -> List[str]:
    """List all roster ids in roster order."""
    return [strategy_id.value for strategy_id in ROSTER]


def get_strategy_names() -> Dict[str, str]:
    """Get a mapping of strategy id to display name for UI dropdowns."""
    return {strategy_id.value: STRATEGY_NAMES[strategy_id] for strategy_id in ROSTER}
