"""Payoff function for the two-action Prisoner's Dilemma."""

from typing import Tuple

from .types import Action, PayoffMatrix


def payoff(a1: Action, a2: Action, matrix: PayoffMatrix) -> Tuple[int, int]:
    """Score one round.

    Args:
        a1: Player 1's action.
        a2: Player 2's action.
        matrix: Active payoff matrix.

    Returns:
        Tuple of (player1_score, player2_score).
    """
    if a1 == Action.DEFECT and a2 == Action.COOPERATE:
        return matrix.t, matrix.s
    if a1 == Action.COOPERATE and a2 == Action.COOPERATE:
        return matrix.r, matrix.r
    if a1 == Action.DEFECT and a2 == Action.DEFECT:
        return matrix.p, matrix.p
    return matrix.s, matrix.t
