"""Polars views of simulation results for analysis and charting."""

from typing import Sequence

import polars as pl

from ..core.payoff import payoff
from ..core.types import Generation, MatchResult, PayoffMatrix, TournamentResult


def match_to_frame(
    result: MatchResult,
    matrix: PayoffMatrix = None,
) -> pl.DataFrame:
    """One row per round with actions and, given a matrix, payoffs.

    Args:
        result: Match to tabulate.
        matrix: Matrix the match was played under; adds per-round and
            cumulative payoff columns when given.

    Returns:
        DataFrame with round_number (1-indexed), player1_action,
        player2_action and optional payoff columns.
    """
    data = {
        "round_number": list(range(1, len(result.rounds) + 1)),
        "player1_action": [a1.value for a1, _ in result.rounds],
        "player2_action": [a2.value for _, a2 in result.rounds],
    }
    schema = {
        "round_number": pl.Int64,
        "player1_action": pl.Utf8,
        "player2_action": pl.Utf8,
    }
    if matrix is not None:
        scores = [payoff(a1, a2, matrix) for a1, a2 in result.rounds]
        data["player1_payoff"] = [s1 for s1, _ in scores]
        data["player2_payoff"] = [s2 for _, s2 in scores]
        schema["player1_payoff"] = pl.Int64
        schema["player2_payoff"] = pl.Int64

    df = pl.DataFrame(data, schema=schema)

    if matrix is not None:
        df = df.with_columns([
            pl.col("player1_payoff").cum_sum().alias("cumulative_payoff_player1"),
            pl.col("player2_payoff").cum_sum().alias("cumulative_payoff_player2"),
        ])
    return df


def ranking_to_frame(result: TournamentResult) -> pl.DataFrame:
    """One row per strategy in ranking order, with a 1-indexed rank."""
    return pl.DataFrame(
        {
            "rank": list(range(1, len(result.ranking) + 1)),
            "strategy": [name for name, _ in result.ranking],
            "score": [score for _, score in result.ranking],
        },
        schema={"rank": pl.Int64, "strategy": pl.Utf8, "score": pl.Int64},
    )


def evolution_to_frame(generations: Sequence[Generation]) -> pl.DataFrame:
    """Long format: one row per (generation, strategy) with population share."""
    rows = [
        {"gen_number": gen.gen_number, "strategy": name, "count": count}
        for gen in generations
        for name, count in gen.populations
    ]
    df = pl.DataFrame(
        rows,
        schema={"gen_number": pl.Int64, "strategy": pl.Utf8, "count": pl.Int64},
    )
    if df.is_empty():
        return df.with_columns(pl.lit(None, dtype=pl.Float64).alias("share"))

    total = pl.col("count").sum().over("gen_number")
    return df.with_columns(
        pl.when(total > 0)
        .then(pl.col("count") / total)
        .otherwise(0.0)
        .alias("share")
    )
