"""Biorhythm cycle calculations.

Three sine cycles start at birth:
    - Physical: 23 days
    - Emotional: 28 days
    - Intellectual: 33 days

Day counts use the same simplified calendar the chart has always used:
every month is 30 days and every year 365. Exact calendar arithmetic
would shift the curves by a few days for most birth dates.

Usage:
    from src.engine.biorhythm import Cycle, days_since_birth, sample_series

    days = days_since_birth(date(1990, 1, 1))
    series = sample_series(days, Cycle.PHYSICAL.period, 33)
"""

import math
from datetime import date
from enum import Enum
from typing import Optional, Union

from src.core.exceptions import ValidationError
from src.core.logging import get_logger

logger = get_logger(__name__)

MIN_YEAR = 1900
MAX_YEAR = 2100

DEFAULT_BIRTHDATE = date(1990, 1, 1)
# Longest cycle, so one full intellectual wave fits on the chart
DEFAULT_CHART_DAYS = 33


class Cycle(Enum):
    """Biorhythm cycle and its period in days."""

    PHYSICAL = 23
    EMOTIONAL = 28
    INTELLECTUAL = 33

    @property
    def period(self) -> float:
        return float(self.value)

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @property
    def legend(self) -> str:
        """Chart legend text, e.g. "Physical (23 days)"."""
        return f"{self.label} ({self.value} days)"


# =============================================================================
# DATE HANDLING
# =============================================================================


def is_leap_year(year: int) -> bool:
    """Gregorian leap year rule."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    """Number of days in a month (1-12)."""
    if month == 2:
        return 29 if is_leap_year(year) else 28
    if month in (4, 6, 9, 11):
        return 30
    return 31


def _parse_int(value: Union[int, str]) -> Optional[int]:
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def validate_date(
    year: Union[int, str], month: Union[int, str], day: Union[int, str]
) -> Optional[str]:
    """Validate a birth date typed into the date dialog.

    Stops at the first problem. Checks run in order: year, month and day
    are numbers, then year range, month range, day range, and finally the
    day fits the month.

    Args:
        year: Year as int or raw text
        month: Month as int or raw text
        day: Day as int or raw text

    Returns:
        Error message, or None if the date is valid
    """
    y = _parse_int(year)
    if y is None:
        return "Year must be a valid number"

    m = _parse_int(month)
    if m is None:
        return "Month must be a valid number"

    d = _parse_int(day)
    if d is None:
        return "Day must be a valid number"

    if not MIN_YEAR <= y <= MAX_YEAR:
        return f"Year must be between {MIN_YEAR} and {MAX_YEAR}"

    if not 1 <= m <= 12:
        return "Month must be between 1 and 12"

    if not 1 <= d <= 31:
        return "Day must be between 1 and 31"

    max_days = days_in_month(y, m)
    if d > max_days:
        return f"Invalid day for month {m}. Maximum is {max_days}"

    return None


def parse_birthdate(
    year: Union[int, str], month: Union[int, str], day: Union[int, str]
) -> date:
    """Validate and convert dialog fields into a date.

    Raises:
        ValidationError: With the single message from validate_date()
    """
    error = validate_date(year, month, day)
    if error is not None:
        raise ValidationError([error])
    return date(int(str(year).strip()), int(str(month).strip()), int(str(day).strip()))


def _simple_day_number(d: date) -> int:
    return d.year * 365 + d.month * 30 + d.day


def days_between(birth: date, reference: date) -> int:
    """Days from birth to reference using 30-day months and 365-day years.

    Negative when reference is before birth.
    """
    return _simple_day_number(reference) - _simple_day_number(birth)


def days_since_birth(birth: date, reference: Optional[date] = None) -> int:
    """Days from birth to reference (today when not given)."""
    if reference is None:
        reference = date.today()
    days = days_between(birth, reference)
    logger.debug(
        "Computed days since birth",
        extra={"context": {"birth": birth.isoformat(), "reference": reference.isoformat(), "days": days}},
    )
    return days


# =============================================================================
# CYCLES
# =============================================================================


def cycle_value(days_since_birth: int, period_days: float) -> float:
    """Position in a cycle: sin(2*pi*days/period), always in [-1.0, 1.0].

    Raises:
        ValueError: If period_days is not positive
    """
    if not period_days > 0:
        raise ValueError(f"Cycle period must be positive, got {period_days}")
    return math.sin(2.0 * math.pi * days_since_birth / period_days)


def reading(days_since_birth: int) -> dict[Cycle, float]:
    """All three cycle values for one day."""
    return {cycle: cycle_value(days_since_birth, cycle.period) for cycle in Cycle}


def sample_series(
    days_since_birth: int, period_days: float, count: int
) -> list[tuple[int, float]]:
    """Daily samples for charting.

    Args:
        days_since_birth: First day plotted
        period_days: Cycle length
        count: Number of samples

    Returns:
        count (offset, value) pairs with offsets 0..count-1

    Raises:
        ValueError: If count is negative or period_days is not positive
    """
    if count < 0:
        raise ValueError(f"Sample count must not be negative, got {count}")
    if not period_days > 0:
        raise ValueError(f"Cycle period must be positive, got {period_days}")
    return [
        (offset, cycle_value(days_since_birth + offset, period_days)) for offset in range(count)
    ]
