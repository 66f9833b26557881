"""Tests for the command surface used by front ends."""

import pytest

from . import api
from .core.config import ENGINE_VERSION
from .core.errors import InvalidParameterError, UnknownCommandError, UnknownStrategyError
from .core.types import PayoffMatrix

PAYOFF = {"t": 5, "r": 3, "p": 1, "s": 0}


class TestGreetEngine:

    def test_banner_includes_version(self):
        assert ENGINE_VERSION in api.greet_engine()


class TestRunGame:

    def test_returns_plain_data(self):
        data = api.run_game("tit_for_tat", "always_defect", 5, 0.0, PAYOFF)
        assert data == {
            "player_name": "Tit-For-Tat",
            "opponent_name": "Always Defect",
            "rounds": [["Cooperate", "Defect"]] + [["Defect", "Defect"]] * 4,
            "player_score": 4,
            "opponent_score": 9,
        }

    def test_accepts_matrix_object(self):
        data = api.run_game("always_cooperate", "always_cooperate", 4, 0.0, PayoffMatrix(r=7))
        assert data["player_score"] == 28

    def test_uppercase_payoff_keys(self):
        data = api.run_game("always_defect", "always_cooperate", 2, 0.0, {"T": 8, "R": 3, "P": 1, "S": 0})
        assert data["player_score"] == 16

    def test_missing_payoff_uses_default(self):
        data = api.run_game("always_defect", "always_defect", 3, 0.0)
        assert data["player_score"] == 3

    def test_incomplete_payoff_raises(self):
        with pytest.raises(InvalidParameterError):
            api.run_game("always_defect", "always_defect", 3, 0.0, {"t": 5})

    def test_strict_unknown_strategy(self):
        with pytest.raises(UnknownStrategyError):
            api.run_game("saint", "always_defect", 3, 0.0, PAYOFF, strict=True)

    def test_seeded(self):
        a = api.run_game("random", "joss", 30, 0.1, PAYOFF, seed=8)
        b = api.run_game("random", "joss", 30, 0.1, PAYOFF, seed=8)
        assert a == b


class TestRunTournament:

    def test_returns_ranking(self):
        data = api.run_tournament(5, 0.0, PAYOFF, seed=0)
        assert len(data["ranking"]) == 8
        scores = [score for _, score in data["ranking"]]
        assert scores == sorted(scores, reverse=True)
        assert len(data["score_matrix"]) == 8


class TestRunEvolution:

    def test_returns_generation_dicts(self):
        data = api.run_evolution(5, 0.0, [5] * 8, 3, PAYOFF, seed=0)
        assert [g["gen_number"] for g in data] == [1, 2, 3]
        assert all(sum(c for _, c in g["populations"]) == 40 for g in data)

    def test_wrong_length_population(self):
        data = api.run_evolution(5, 0.0, [], 1, PAYOFF, seed=0)
        assert [c for _, c in data[0]["populations"]] == [5] * 8


class TestInvoke:

    def test_dispatches_by_name(self):
        data = api.invoke(
            "run_game", p1_id="tit_for_tat", p2_id="always_cooperate",
            rounds=3, noise=0.0, payoff_matrix=PAYOFF,
        )
        assert data["player_score"] == 9

    def test_greet(self):
        assert api.invoke("greet_engine") == api.greet_engine()

    def test_unknown_command(self):
        with pytest.raises(UnknownCommandError, match="run_game"):
            api.invoke("launch_missiles")

    def test_registered_commands(self):
        assert set(api.COMMANDS) == {
            "greet_engine", "run_game", "run_tournament", "run_evolution",
        }
