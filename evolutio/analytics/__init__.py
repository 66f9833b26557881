"""Tabular views of simulation results."""

from .frames import match_to_frame, ranking_to_frame, evolution_to_frame

__all__ = [
    "match_to_frame",
    "ranking_to_frame",
    "evolution_to_frame",
]
