"""Smoke tests for the Altair chart factories."""

import altair as alt

from ..core.types import PayoffMatrix
from ..engine.match import run_match
from ..experiments.evolution import run_evolution
from ..experiments.tournament import run_tournament
from .charts import (
    create_cumulative_score_chart,
    create_evolution_chart,
    create_match_timeline_chart,
    create_tournament_chart,
)

MATRIX = PayoffMatrix()


class TestCharts:

    def test_match_timeline(self):
        result = run_match("tit_for_tat", "random", 12, 0.0, MATRIX, seed=1)
        chart_dict = create_match_timeline_chart(result).to_dict()
        assert chart_dict["mark"]["type"] == "rect"
        assert chart_dict["title"] == "Match Timeline"

    def test_cumulative_score(self):
        result = run_match("pavlov", "joss", 12, 0.05, MATRIX, seed=1)
        chart_dict = create_cumulative_score_chart(result, MATRIX).to_dict()
        assert chart_dict["mark"]["type"] == "line"

    def test_tournament_leaderboard(self):
        chart = create_tournament_chart(run_tournament(5, 0.0, MATRIX, seed=0))
        assert isinstance(chart, alt.LayerChart)
        assert chart.to_dict()["title"] == "Tournament Leaderboard"

    def test_evolution(self):
        history = run_evolution(5, 0.0, [5] * 8, 4, MATRIX, seed=0)
        chart_dict = create_evolution_chart(history).to_dict()
        assert chart_dict["title"] == "Population Dynamics"

    def test_empty_inputs_render_placeholders(self):
        empty_match = run_match("tit_for_tat", "joss", 0, 0.0, MATRIX, seed=0)
        for chart in (
            create_match_timeline_chart(empty_match),
            create_cumulative_score_chart(empty_match, MATRIX),
            create_evolution_chart([]),
        ):
            assert chart.to_dict()["mark"]["type"] == "text"
