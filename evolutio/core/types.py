"""Type definitions for the evolutio package."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple

import numpy as np

from .config import DEFAULT_PAYOFF
from .errors import InvalidParameterError


class Action(str, Enum):
    """A player's choice in a single round."""
    COOPERATE = "Cooperate"
    DEFECT = "Defect"

    def toggle(self) -> "Action":
        """Return the opposite action."""
        return Action.DEFECT if self is Action.COOPERATE else Action.COOPERATE


# (own_action, opponent_action) from the acting player's perspective
Round = Tuple[Action, Action]


@dataclass(frozen=True)
class PayoffMatrix:
    """Prisoner's Dilemma payoffs.

    No ordering is enforced; any integers are scored as given.
    """
    t: int = DEFAULT_PAYOFF["t"]  # Temptation: defect against a cooperator
    r: int = DEFAULT_PAYOFF["r"]  # Reward: mutual cooperation
    p: int = DEFAULT_PAYOFF["p"]  # Punishment: mutual defection
    s: int = DEFAULT_PAYOFF["s"]  # Sucker: cooperate against a defector

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PayoffMatrix":
        """Build a matrix from a ``{t, r, p, s}`` mapping.

        Keys are matched case-insensitively.

        Raises:
            InvalidParameterError: If a key is missing or not an integer.
        """
        lowered = {str(k).lower(): v for k, v in data.items()}
        missing = [k for k in ("t", "r", "p", "s") if k not in lowered]
        if missing:
            raise InvalidParameterError(
                f"Payoff matrix missing keys: {', '.join(missing)}"
            )
        try:
            return cls(**{k: int(lowered[k]) for k in ("t", "r", "p", "s")})
        except (TypeError, ValueError) as e:
            raise InvalidParameterError(f"Payoff values must be integers: {e}") from e

    def to_dict(self) -> Dict[str, int]:
        return {"t": self.t, "r": self.r, "p": self.p, "s": self.s}


@dataclass
class MatchResult:
    """Result of a single match between two strategies."""
    player_name: str
    opponent_name: str
    rounds: List[Round]  # canonical log, player 1 first
    player_score: int
    opponent_score: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-ready dict."""
        return {
            "player_name": self.player_name,
            "opponent_name": self.opponent_name,
            "rounds": [[a1.value, a2.value] for a1, a2 in self.rounds],
            "player_score": self.player_score,
            "opponent_score": self.opponent_score,
        }


@dataclass
class TournamentResult:
    """Complete round-robin tournament results."""
    ranking: List[Tuple[str, int]]  # (display name, total score), best first
    strategy_ids: List[str] = field(default_factory=list)  # roster order
    score_matrix: Optional[np.ndarray] = None  # [i, j] = score of i against j

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-ready dict."""
        return {
            "ranking": [[name, score] for name, score in self.ranking],
            "strategy_ids": list(self.strategy_ids),
            "score_matrix": (
                self.score_matrix.tolist() if self.score_matrix is not None else None
            ),
        }


@dataclass
class Generation:
    """Population snapshot at the start of a generation."""
    gen_number: int
    populations: List[Tuple[str, int]]  # (display name, count) in roster order

    @property
    def total_population(self) -> int:
        return sum(count for _, count in self.populations)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "gen_number": self.gen_number,
            "populations": [[name, count] for name, count in self.populations],
        }
