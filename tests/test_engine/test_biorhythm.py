"""Tests for biorhythm calculations.

Day counts use 30-day months and 365-day years, so they differ from
exact calendar arithmetic. The expected values below follow the
simplified model on purpose.
"""

import math
from datetime import date

import pytest

from src.core.exceptions import ValidationError
from src.engine.biorhythm import (
    DEFAULT_BIRTHDATE,
    DEFAULT_CHART_DAYS,
    Cycle,
    cycle_value,
    days_between,
    days_in_month,
    days_since_birth,
    is_leap_year,
    parse_birthdate,
    reading,
    sample_series,
    validate_date,
)


class TestCycle:
    """Test cycle definitions."""

    def test_periods(self):
        assert Cycle.PHYSICAL.period == 23.0
        assert Cycle.EMOTIONAL.period == 28.0
        assert Cycle.INTELLECTUAL.period == 33.0

    def test_legend(self):
        assert Cycle.PHYSICAL.legend == "Physical (23 days)"
        assert Cycle.INTELLECTUAL.label == "Intellectual"

    def test_chart_days_match_longest_cycle(self):
        assert DEFAULT_CHART_DAYS == max(cycle.value for cycle in Cycle)


# =============================================================================
# DATE VALIDATION
# =============================================================================


class TestLeapYears:
    """Test Gregorian leap year rule."""

    @pytest.mark.parametrize("year", [2024, 2000, 1996])
    def test_leap(self, year):
        assert is_leap_year(year)

    @pytest.mark.parametrize("year", [2023, 1900, 2100])
    def test_not_leap(self, year):
        assert not is_leap_year(year)

    def test_days_in_month(self):
        assert days_in_month(2024, 2) == 29
        assert days_in_month(2023, 2) == 28
        assert days_in_month(2023, 4) == 30
        assert days_in_month(2023, 12) == 31


class TestValidateDate:
    """Test first-failure date validation."""

    def test_leap_day_ok(self):
        assert validate_date(2024, 2, 29) is None

    def test_leap_day_in_common_year(self):
        assert validate_date(2023, 2, 29) == "Invalid day for month 2. Maximum is 28"

    def test_year_too_early(self):
        assert validate_date(1899, 1, 1) == "Year must be between 1900 and 2100"

    def test_year_bounds_inclusive(self):
        assert validate_date(1900, 1, 1) is None
        assert validate_date(2100, 12, 31) is None
        assert validate_date(2101, 1, 1) == "Year must be between 1900 and 2100"

    def test_month_range(self):
        assert validate_date(2000, 13, 1) == "Month must be between 1 and 12"
        assert validate_date(2000, 0, 1) == "Month must be between 1 and 12"

    def test_day_range(self):
        assert validate_date(2000, 1, 32) == "Day must be between 1 and 31"
        assert validate_date(2000, 1, 0) == "Day must be between 1 and 31"

    def test_thirty_day_month(self):
        assert validate_date(2000, 4, 31) == "Invalid day for month 4. Maximum is 30"

    def test_only_first_problem_reported(self):
        """Year, month and day all bad: only the year message comes back."""
        assert validate_date(1800, 14, 40) == "Year must be between 1900 and 2100"
        assert validate_date(2000, 14, 40) == "Month must be between 1 and 12"

    def test_non_numeric_text(self):
        assert validate_date("19x0", "1", "1") == "Year must be a valid number"
        assert validate_date("1990", "Jan", "1") == "Month must be a valid number"
        assert validate_date("1990", "1", "") == "Day must be a valid number"

    def test_number_checks_come_before_ranges(self):
        assert validate_date("1800", "x", "1") == "Month must be a valid number"

    def test_text_input_accepted(self):
        assert validate_date("1990", "01", " 1 ") is None


class TestParseBirthdate:
    """Test the raising variant."""

    def test_returns_date(self):
        assert parse_birthdate("1990", "1", "1") == DEFAULT_BIRTHDATE

    def test_raises_single_message(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_birthdate(1899, 13, 32)
        assert exc_info.value.errors == ["Year must be between 1900 and 2100"]


# =============================================================================
# DAY COUNTS
# =============================================================================


class TestDaysBetween:
    """Test simplified day arithmetic."""

    def test_same_day(self):
        assert days_between(date(1990, 5, 17), date(1990, 5, 17)) == 0

    def test_one_year(self):
        assert days_between(date(1990, 1, 1), date(1991, 1, 1)) == 365

    def test_months_are_thirty_days(self):
        # February really has 28 days; the simplified model says 30.
        assert days_between(date(2023, 2, 1), date(2023, 3, 1)) == 30
        assert (date(2023, 3, 1) - date(2023, 2, 1)).days == 28

    def test_reference_chart_date(self):
        assert days_between(date(1990, 1, 1), date(2025, 11, 1)) == 35 * 365 + 10 * 30

    def test_negative_when_reference_is_earlier(self):
        assert days_between(date(2000, 1, 10), date(2000, 1, 1)) == -9

    def test_days_since_birth_with_reference(self, mock_config):
        assert days_since_birth(date(1990, 1, 1), mock_config.reference_date) == 13075

    def test_days_since_birth_defaults_to_today(self):
        birth = date(2000, 1, 1)
        assert days_since_birth(birth) == days_between(birth, date.today())


# =============================================================================
# CYCLE VALUES
# =============================================================================


class TestCycleValue:
    """Test the sine mapping."""

    def test_zero_at_birth(self):
        assert cycle_value(0, 23.0) == 0.0

    def test_full_period_is_zero(self):
        assert cycle_value(23, 23.0) == pytest.approx(0.0, abs=1e-12)

    def test_quarter_period_peak(self):
        assert cycle_value(7, 28.0) == pytest.approx(1.0)
        assert cycle_value(21, 28.0) == pytest.approx(-1.0)

    @pytest.mark.parametrize("cycle", list(Cycle))
    @pytest.mark.parametrize("day", [-400, -1, 0, 5, 13075])
    def test_periodic(self, cycle, day):
        assert cycle_value(day, cycle.period) == pytest.approx(
            cycle_value(day + cycle.value, cycle.period), abs=1e-9
        )

    @pytest.mark.parametrize("period", [0.0, -23.0, float("nan")])
    def test_non_positive_period_raises(self, period):
        with pytest.raises(ValueError):
            cycle_value(10, period)

    def test_reading_has_all_cycles(self):
        values = reading(100)
        assert set(values) == set(Cycle)
        assert values[Cycle.EMOTIONAL] == cycle_value(100, 28.0)


class TestSampleSeries:
    """Test chart sample generation."""

    def test_count_and_offsets(self):
        series = sample_series(0, 23.0, 33)
        assert len(series) == 33
        assert [offset for offset, _ in series] == list(range(33))
        assert all(-1.0 <= value <= 1.0 for _, value in series)

    def test_values_follow_cycle(self):
        series = sample_series(500, 33.0, 5)
        for offset, value in series:
            assert value == cycle_value(500 + offset, 33.0)

    def test_repeatable(self):
        assert sample_series(1234, 28.0, 33) == sample_series(1234, 28.0, 33)

    def test_zero_count(self):
        assert sample_series(10, 23.0, 0) == []

    def test_negative_count_raises(self):
        with pytest.raises(ValueError):
            sample_series(10, 23.0, -1)

    def test_bad_period_raises_even_when_empty(self):
        with pytest.raises(ValueError):
            sample_series(10, 0.0, 0)

    def test_nan_period_raises(self):
        with pytest.raises(ValueError):
            sample_series(0, float("nan"), 3)
