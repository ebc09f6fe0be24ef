"""Tests for period recovery and factoring."""

import pytest

from qupost import (
    phase_from_measurement, candidate_denominators, extract_period,
    combine_periods, factors_from_period,
    InvalidArgumentError, EmptyInputError,
)


class TestPhase:
    """Tests for converting measurements to phases."""

    @pytest.mark.parametrize(
        "measurement,num_qubits,expected",
        [(0, 4, 0.0), (4, 4, 0.25), (8, 4, 0.5), (12, 4, 0.75), (1, 1, 0.5)],
    )
    def test_phase(self, measurement, num_qubits, expected):
        assert phase_from_measurement(measurement, num_qubits) == expected

    def test_measurement_out_of_range(self):
        with pytest.raises(InvalidArgumentError):
            phase_from_measurement(16, 4)

    def test_negative_measurement(self):
        with pytest.raises(InvalidArgumentError):
            phase_from_measurement(-1, 4)


class TestCandidateDenominators:
    """Tests for convergent denominators."""

    def test_quarter(self):
        assert candidate_denominators(0.25, 15) == [1, 4]

    def test_three_quarters(self):
        """Convergents 0/1, 1/1, 3/4 give distinct denominators 1 and 4."""
        assert candidate_denominators(0.75, 15) == [1, 4]

    def test_bounded_by_max_denominator(self):
        assert candidate_denominators(0.25, 3) == [1]


class TestExtractPeriod:
    """Tests for period extraction (N = 15, a = 7, r = 4)."""

    def test_period_from_measurement_4(self):
        """Measurement 4 from 4-qubit register (phase 0.25) gives period 4."""
        assert extract_period(4, 4, 15, 7) == 4

    def test_period_from_measurement_8(self):
        """Measurement 8 (phase 0.5 = 2/4 reduced) still gives period 4."""
        assert extract_period(8, 4, 15, 7) == 4

    def test_period_from_measurement_12(self):
        """Measurement 12 (phase 0.75 = 3/4) gives period 4."""
        assert extract_period(12, 4, 15, 7) == 4

    def test_period_from_measurement_0(self):
        """Measurement 0 gives no information."""
        assert extract_period(0, 4, 15, 7) is None

    def test_period_of_two_mod_21(self):
        """2 has order 6 mod 21; 85/512 approximates 1/6."""
        r = extract_period(85, 9, 21, 2)
        assert r == 6
        assert pow(2, r, 21) == 1

    def test_not_coprime_rejected(self):
        with pytest.raises(InvalidArgumentError):
            extract_period(4, 4, 15, 5)

    def test_small_modulus_rejected(self):
        with pytest.raises(InvalidArgumentError):
            extract_period(1, 2, 1, 1)

    def test_verbose_trace(self, capsys):
        extract_period(4, 4, 15, 7, verbose=True)
        out = capsys.readouterr().out
        assert "Candidate denominators: [1, 4]" in out
        assert "Period r = 4" in out


class TestCombinePeriods:
    """Tests for combining partial periods."""

    def test_lcm_of_divisors(self):
        assert combine_periods([2, None, 3]) == 6

    def test_single_period(self):
        assert combine_periods([4]) == 4

    def test_all_failed_rejected(self):
        with pytest.raises(EmptyInputError):
            combine_periods([None, None])

    def test_empty_rejected(self):
        with pytest.raises(EmptyInputError):
            combine_periods([])


class TestFactorsFromPeriod:
    """Tests for turning a period into factors."""

    def test_factor_15(self):
        assert factors_from_period(15, 7, 4) == (3, 5)

    def test_factor_21(self):
        assert factors_from_period(21, 2, 6) == (3, 7)

    def test_odd_period(self):
        assert factors_from_period(15, 7, 3) is None

    def test_missing_period(self):
        assert factors_from_period(15, 7, None) is None

    def test_trivial_factors(self):
        """14 = -1 mod 15, so a^(r/2) + 1 is a multiple of 15."""
        assert factors_from_period(15, 14, 2) is None

    @pytest.mark.parametrize("measurement", [4, 8, 12])
    def test_end_to_end(self, measurement):
        """Every informative measurement of the N = 15 circuit factors 15."""
        r = extract_period(measurement, 4, 15, 7)
        assert factors_from_period(15, 7, r) == (3, 5)

    def test_verbose_trace(self, capsys):
        factors_from_period(15, 7, 4, verbose=True)
        out = capsys.readouterr().out
        assert "7^2 mod 15 = 4" in out
