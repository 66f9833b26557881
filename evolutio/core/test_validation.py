"""Tests for parameter checks and population resolution."""

import logging

import pytest

from .config import DEFAULT_POPULATION
from .errors import InvalidParameterError, PopulationSizeError
from .validation import check_run_parameters, resolve_population, validate_run_parameters


class TestCheckRunParameters:

    def test_valid(self):
        assert check_run_parameters(10, 0.0, 5) == (True, [])
        assert check_run_parameters(0, 1.0) == (True, [])

    def test_collects_all_errors(self):
        is_valid, errors = check_run_parameters(-1, 1.5, -2)
        assert not is_valid
        assert len(errors) == 3

    def test_lenient_mode_never_raises(self):
        validate_run_parameters(-5, 3.0, -1, strict=False)

    def test_strict_mode_raises(self):
        with pytest.raises(InvalidParameterError, match="noise"):
            validate_run_parameters(10, -0.1, strict=True)


class TestResolvePopulation:

    def test_matching_length_is_copied(self):
        initial = [1, 2, 3]
        population = resolve_population(initial, 3)
        assert population == [1, 2, 3]
        population[0] = 99
        assert initial[0] == 1

    def test_mismatch_falls_back_to_uniform(self, caplog):
        with caplog.at_level(logging.WARNING):
            population = resolve_population([1, 2], 8)
        assert population == [DEFAULT_POPULATION] * 8
        assert "expected 8" in caplog.text

    def test_none_falls_back_to_uniform(self):
        assert resolve_population(None, 4) == [DEFAULT_POPULATION] * 4

    def test_strict_mismatch_raises(self):
        with pytest.raises(PopulationSizeError) as exc_info:
            resolve_population([1, 2, 3], 8, strict=True)
        assert exc_info.value.got == 3
        assert exc_info.value.expected == 8
        assert isinstance(exc_info.value, ValueError)

    def test_strict_negative_raises(self):
        with pytest.raises(InvalidParameterError):
            resolve_population([1, -1], 2, strict=True)
