"""Engine package - Biorhythm logic.

Modules:
    - biorhythm: Date validation, day counts, cycle values, sample series
    - chart: Pixel coordinates for the chart window
"""

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
from src.engine.chart import (
    BiorhythmChart,
    ChartGeometry,
    ChartPoint,
    ChartSegment,
    build_chart,
    build_chart_for,
    chart_points,
    chart_segments,
    interpolate,
    value_to_y,
)

__all__ = [
    # Biorhythm
    "DEFAULT_BIRTHDATE",
    "DEFAULT_CHART_DAYS",
    "Cycle",
    "cycle_value",
    "days_between",
    "days_in_month",
    "days_since_birth",
    "is_leap_year",
    "parse_birthdate",
    "reading",
    "sample_series",
    "validate_date",
    # Chart
    "BiorhythmChart",
    "ChartGeometry",
    "ChartPoint",
    "ChartSegment",
    "build_chart",
    "build_chart_for",
    "chart_points",
    "chart_segments",
    "interpolate",
    "value_to_y",
]
