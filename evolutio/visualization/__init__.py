"""Visualization module."""

from .charts import (
    create_match_timeline_chart,
    create_cumulative_score_chart,
    create_tournament_chart,
    create_evolution_chart,
)

__all__ = [
    "create_match_timeline_chart",
    "create_cumulative_score_chart",
    "create_tournament_chart",
    "create_evolution_chart",
]
