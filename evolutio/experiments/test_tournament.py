"""Tests for the round-robin tournament."""

import numpy as np
import pytest

from ..core.errors import InvalidParameterError
from ..core.types import PayoffMatrix
from ..strategies.registry import STRATEGY_NAMES, ROSTER, StrategyId
from .tournament import TournamentConfig, TournamentRunner, run_tournament

MATRIX = PayoffMatrix(t=5, r=3, p=1, s=0)
IDX = {strategy_id: i for i, strategy_id in enumerate(ROSTER)}


class TestRanking:
    """Tests for ranking shape and ordering."""

    @pytest.mark.parametrize("seed", [0, 1, 2])
    @pytest.mark.parametrize("noise", [0.0, 0.05, 0.5])
    def test_ranking_is_sorted_permutation(self, seed, noise):
        result = run_tournament(10, noise, MATRIX, seed=seed)

        names = [name for name, _ in result.ranking]
        scores = [score for _, score in result.ranking]
        assert sorted(names) == sorted(STRATEGY_NAMES.values())
        assert scores == sorted(scores, reverse=True)

    def test_totals_are_row_sums(self):
        result = run_tournament(12, 0.1, MATRIX, seed=4)
        totals = dict(result.ranking)
        for i, strategy_id in enumerate(ROSTER):
            assert totals[STRATEGY_NAMES[strategy_id]] == int(result.score_matrix[i].sum())

    def test_ties_keep_roster_order(self):
        """An all-zero matrix ties everyone at 0."""
        result = run_tournament(5, 0.0, PayoffMatrix(t=0, r=0, p=0, s=0), seed=0)
        assert result.ranking == [(STRATEGY_NAMES[s], 0) for s in ROSTER]

    def test_zero_rounds(self):
        result = run_tournament(0, 0.0, MATRIX, seed=0)
        assert all(score == 0 for _, score in result.ranking)


class TestHeadToHead:
    """Deterministic entries of the score matrix at zero noise."""

    def setup_method(self):
        self.result = run_tournament(5, 0.0, MATRIX, seed=0)
        self.m = self.result.score_matrix

    def test_shape(self):
        assert self.m.shape == (8, 8)
        assert self.result.strategy_ids == [s.value for s in ROSTER]

    def test_tit_for_tat_vs_always_defect(self):
        tft, alld = IDX[StrategyId.TIT_FOR_TAT], IDX[StrategyId.ALWAYS_DEFECT]
        assert self.m[tft, alld] == 4
        assert self.m[alld, tft] == 9

    def test_self_play_is_included(self):
        allc = IDX[StrategyId.ALWAYS_COOPERATE]
        alld = IDX[StrategyId.ALWAYS_DEFECT]
        assert self.m[allc, allc] == 15
        assert self.m[alld, alld] == 5

    def test_always_defect_exploits_always_cooperate(self):
        allc = IDX[StrategyId.ALWAYS_COOPERATE]
        alld = IDX[StrategyId.ALWAYS_DEFECT]
        assert self.m[alld, allc] == 25
        assert self.m[allc, alld] == 0


class TestTournamentRunner:

    def test_seeded_runs_reproduce(self):
        a = run_tournament(20, 0.1, MATRIX, seed=123)
        b = run_tournament(20, 0.1, MATRIX, seed=123)
        assert a.ranking == b.ranking
        np.testing.assert_array_equal(a.score_matrix, b.score_matrix)

    def test_progress_callback(self):
        calls = []
        runner = TournamentRunner(
            TournamentConfig(round_count=3, noise=0.0, matrix=MATRIX),
            rng=np.random.default_rng(0),
            progress_callback=lambda done, total, msg: calls.append((done, total, msg)),
        )
        runner.run()

        assert len(calls) == 65  # 64 pairings + completion
        assert calls[0] == (0, 64, "Tit-For-Tat vs Tit-For-Tat")
        assert calls[-1] == (64, 64, "Tournament complete")

    def test_results_to_dict(self):
        config = TournamentConfig(round_count=3, noise=0.0, matrix=MATRIX)
        runner = TournamentRunner(config, rng=np.random.default_rng(0))
        data = runner.results_to_dict(runner.run())

        assert data["round_count"] == 3
        assert data["payoff_matrix"] == {"t": 5, "r": 3, "p": 1, "s": 0}
        assert len(data["ranking"]) == 8
        assert len(data["score_matrix"]) == 8

    def test_strict_rejects_bad_noise(self):
        with pytest.raises(InvalidParameterError):
            run_tournament(5, -0.5, MATRIX, strict=True)
