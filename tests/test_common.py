"""
Unit tests for simulations/common.py
"""
import pytest

from simulations.common import (
    ExperimentResult,
    Timer,
    TrialSpec,
    format_result_line,
    fractions,
    precision_estimate,
    to_fraction,
)
from src.odds.errors import ConfigurationError, UndefinedEstimate


class TestTrialSpec:
    """Tests for TrialSpec."""

    def test_defaults(self):
        spec = TrialSpec(num_trials=10)
        assert spec.workers == 1
        assert spec.seed is None

    @pytest.mark.parametrize("kwargs", [
        {"num_trials": 0},
        {"num_trials": -5},
        {"num_trials": 10, "workers": 0},
    ])
    def test_rejects_non_positive(self, kwargs):
        with pytest.raises(ConfigurationError):
            TrialSpec(**kwargs)

    def test_configuration_error_is_value_error(self):
        """Callers catching ValueError still see bad parameters."""
        with pytest.raises(ValueError):
            TrialSpec(num_trials=0)


class TestToFraction:
    """Tests for to_fraction / fractions / precision_estimate."""

    def test_all_is_exactly_one(self):
        assert to_fraction(37, 37) == 1.0

    def test_none_is_exactly_zero(self):
        assert to_fraction(0, 37) == 0.0

    def test_ratio(self):
        assert to_fraction(1, 4) == pytest.approx(0.25)

    @pytest.mark.parametrize("count", [0, 3])
    def test_zero_total_undefined(self, count):
        with pytest.raises(UndefinedEstimate):
            to_fraction(count, 0)

    def test_negative_rejected(self):
        with pytest.raises(ConfigurationError):
            to_fraction(-1, 10)

    def test_fractions_only_observed_keys(self):
        result = fractions({7: 3, 2: 1}, 4)
        assert result == {7: 0.75, 2: 0.25}

    def test_precision(self):
        assert precision_estimate(1, 51) == pytest.approx(1 / 51)

    def test_precision_no_diagnosed_cases(self):
        with pytest.raises(UndefinedEstimate, match="no diagnosed cases"):
            precision_estimate(0, 0)


class TestExperimentResult:
    """Tests for ExperimentResult."""

    def test_table_must_cover_every_trial(self):
        """A table that does not sum to num_trials is rejected."""
        with pytest.raises(ValueError, match="mismatch"):
            ExperimentResult(
                problem="dice",
                spec=TrialSpec(num_trials=5),
                table={7: 4},
                estimates={},
            )

    def test_format_line(self):
        r = ExperimentResult(
            problem="monty_hall",
            spec=TrialSpec(num_trials=3),
            table={"a": 3},
            estimates={"stay": 1 / 3, "switch": 2 / 3},
            runtime_s=0.5,
        )
        line = format_result_line(r)
        assert line.startswith("monty_hall: trials=3")
        assert "stay=0.3333" in line
        assert "switch=0.6667" in line
        assert "runtime=0.500s" in line


class TestTimer:
    """Tests for Timer."""

    def test_records_elapsed(self):
        with Timer() as t:
            pass
        assert t.elapsed_s is not None
        assert t.elapsed_s >= 0

    def test_unset_until_block_exits(self):
        with Timer() as t:
            assert t.elapsed_s is None
        assert t.elapsed_s is not None
