"""Altair chart factories for match, tournament and evolution results."""

from typing import Sequence

import altair as alt
import pandas as pd
import polars as pl

from ..analytics.frames import evolution_to_frame, match_to_frame, ranking_to_frame
from ..core.types import Action, Generation, MatchResult, PayoffMatrix, TournamentResult
from ..strategies.registry import STRATEGY_COLORS

ACTION_COLORS = {
    Action.COOPERATE.value: "#22c55e",
    Action.DEFECT.value: "#dc2626",
}


def _empty_chart_placeholder(message: str, width: int, height: int) -> alt.Chart:
    """Create placeholder chart for empty/invalid data."""
    return alt.Chart(pd.DataFrame({"text": [message]})).mark_text(
        fontSize=14, color="#888"
    ).encode(text="text:N").properties(width=width, height=height, title="")


def create_match_timeline_chart(
    result: MatchResult,
    width: int = 600,
    height: int = 80,
) -> alt.Chart:
    """Two-row grid of actions per round, one row per player.

    Args:
        result: Match to draw.
        width: Chart width.
        height: Chart height.

    Returns:
        An Altair chart object.
    """
    if not result.rounds:
        return _empty_chart_placeholder("No rounds played", width, height)

    df = match_to_frame(result)
    long_df = df.unpivot(
        index="round_number",
        on=["player1_action", "player2_action"],
        variable_name="player",
        value_name="action",
    ).with_columns(
        pl.col("player").replace({
            "player1_action": result.player_name,
            "player2_action": result.opponent_name,
        })
    )

    return (
        alt.Chart(long_df.to_pandas())
        .mark_rect(stroke="white", strokeWidth=1)
        .encode(
            x=alt.X("round_number:O", title="Round"),
            y=alt.Y("player:N", title=None, sort=[result.player_name, result.opponent_name]),
            color=alt.Color(
                "action:N",
                scale=alt.Scale(
                    domain=list(ACTION_COLORS.keys()),
                    range=list(ACTION_COLORS.values()),
                ),
                title="Action",
            ),
            tooltip=["round_number", "player", "action"],
        )
        .properties(title="Match Timeline", width=width, height=height)
    )


def create_cumulative_score_chart(
    result: MatchResult,
    matrix: PayoffMatrix,
    width: int = 600,
    height: int = 300,
) -> alt.Chart:
    """Cumulative score of both players over the rounds of a match."""
    if not result.rounds:
        return _empty_chart_placeholder("No rounds played", width, height)

    df = match_to_frame(result, matrix)
    long_df = df.select(
        "round_number", "cumulative_payoff_player1", "cumulative_payoff_player2"
    ).unpivot(
        index="round_number",
        variable_name="player",
        value_name="cumulative_payoff",
    ).with_columns(
        pl.col("player").replace({
            "cumulative_payoff_player1": result.player_name,
            "cumulative_payoff_player2": result.opponent_name,
        })
    )

    return (
        alt.Chart(long_df.to_pandas())
        .mark_line(point=True)
        .encode(
            x=alt.X("round_number:O", title="Round"),
            y=alt.Y("cumulative_payoff:Q", title="Cumulative Score"),
            color=alt.Color("player:N", title="Player"),
            tooltip=["round_number", "player", "cumulative_payoff"],
        )
        .properties(title="Cumulative Score", width=width, height=height)
    )


def create_tournament_chart(
    result: TournamentResult,
    width: int = 500,
    height: int = 280,
) -> alt.Chart:
    """Horizontal leaderboard bars, best strategy on top."""
    if not result.ranking:
        return _empty_chart_placeholder("No tournament results", width, height)

    df = ranking_to_frame(result).to_pandas()
    order = df["strategy"].tolist()

    bars = (
        alt.Chart(df)
        .mark_bar(cornerRadiusEnd=4)
        .encode(
            x=alt.X("score:Q", title="Total Score"),
            y=alt.Y("strategy:N", title=None, sort=order),
            color=alt.Color(
                "strategy:N",
                scale=alt.Scale(
                    domain=list(STRATEGY_COLORS.keys()),
                    range=list(STRATEGY_COLORS.values()),
                ),
                legend=None,
            ),
            tooltip=["rank", "strategy", "score"],
        )
    )
    labels = bars.mark_text(align="left", dx=4, color="#9ca3af").encode(
        text="score:Q"
    )

    return (bars + labels).properties(
        title="Tournament Leaderboard", width=width, height=height
    )


def create_evolution_chart(
    generations: Sequence[Generation],
    width: int = 600,
    height: int = 300,
) -> alt.Chart:
    """Population count per strategy across generations."""
    if not generations:
        return _empty_chart_placeholder("No generations run", width, height)

    df = evolution_to_frame(generations)

    return (
        alt.Chart(df.to_pandas())
        .mark_line()
        .encode(
            x=alt.X("gen_number:Q", title="Generation"),
            y=alt.Y("count:Q", title="Population"),
            color=alt.Color(
                "strategy:N",
                scale=alt.Scale(
                    domain=list(STRATEGY_COLORS.keys()),
                    range=list(STRATEGY_COLORS.values()),
                ),
                title="Strategy",
            ),
            tooltip=["gen_number", "strategy", "count", alt.Tooltip("share:Q", format=".1%")],
        )
        .properties(title="Population Dynamics", width=width, height=height)
    )
