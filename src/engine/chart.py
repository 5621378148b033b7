"""Biorhythm chart coordinates.

Turns sample series into pixel positions for the chart window. Value
1.0 maps to height/2 - height/2.5 (near the top) and -1.0 near the
bottom; the margin keeps the dots inside the plot area.

Usage:
    from src.engine.chart import build_chart

    chart = build_chart(days_since_birth=12345)
    for cycle, points in chart.points.items():
        ...
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Sequence

from src.core.config import Config
from src.engine.biorhythm import DEFAULT_CHART_DAYS, Cycle, days_since_birth, sample_series

DEFAULT_WIDTH = 700.0
DEFAULT_HEIGHT = 300.0
DEFAULT_STEPS = 10


@dataclass(frozen=True)
class ChartGeometry:
    """Plot area size in pixels."""

    width: float = DEFAULT_WIDTH
    height: float = DEFAULT_HEIGHT

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Chart size must be positive, got {self.width}x{self.height}")

    def x_step(self, days: int) -> float:
        """Horizontal distance between consecutive days.

        Raises:
            ValueError: If days is less than 1
        """
        if days < 1:
            raise ValueError(f"Chart must show at least one day, got {days}")
        return self.width / days

    @property
    def baseline(self) -> float:
        """Y coordinate of the zero line."""
        return self.height / 2.0


@dataclass(frozen=True)
class ChartPoint:
    """One plotted sample."""

    x: float
    y: float
    offset: int
    value: float


@dataclass(frozen=True)
class ChartSegment:
    """Line between two consecutive samples."""

    start: ChartPoint
    end: ChartPoint


@dataclass
class BiorhythmChart:
    """Everything the host needs to draw the chart.

    Attributes:
        days_since_birth: First day plotted
        days: Number of days plotted
        geometry: Plot area size
        points: Sample dots per cycle
        segments: Connecting lines per cycle
    """

    days_since_birth: int
    days: int
    geometry: ChartGeometry
    points: dict[Cycle, list[ChartPoint]] = field(default_factory=dict)
    segments: dict[Cycle, list[ChartSegment]] = field(default_factory=dict)

    @property
    def caption(self) -> str:
        return f"Days since birth: {self.days_since_birth} (showing next {self.days} days)"

    @property
    def legend(self) -> list[str]:
        return [cycle.legend for cycle in Cycle]


def value_to_y(value: float, height: float) -> float:
    """Map a cycle value in [-1, 1] to a y pixel coordinate."""
    return (height / 2.0) - (value * height / 2.5)


def chart_points(
    series: Sequence[tuple[int, float]],
    geometry: ChartGeometry,
    days: int,
) -> list[ChartPoint]:
    """Place each (offset, value) sample on the chart."""
    x_step = geometry.x_step(days)
    return [
        ChartPoint(x=offset * x_step, y=value_to_y(value, geometry.height), offset=offset, value=value)
        for offset, value in series
    ]


def chart_segments(
    series: Sequence[tuple[int, float]],
    geometry: ChartGeometry,
    days: int,
) -> list[ChartSegment]:
    """Join consecutive samples. n samples give n-1 segments."""
    points = chart_points(series, geometry, days)
    return [ChartSegment(start=a, end=b) for a, b in zip(points, points[1:])]


def interpolate(segment: ChartSegment, steps: int = DEFAULT_STEPS) -> list[tuple[float, float]]:
    """Evenly spaced (x, y) positions along a segment.

    Includes the start, excludes the end (the next segment starts there).
    """
    if steps < 1:
        raise ValueError(f"Interpolation needs at least one step, got {steps}")
    x1, y1 = segment.start.x, segment.start.y
    x2, y2 = segment.end.x, segment.end.y
    result = []
    for step in range(steps):
        t = step / steps
        result.append((x1 + t * (x2 - x1), y1 + t * (y2 - y1)))
    return result


def build_chart(
    days_since_birth: int,
    days: int = DEFAULT_CHART_DAYS,
    geometry: Optional[ChartGeometry] = None,
) -> BiorhythmChart:
    """Sample all three cycles and lay them out for drawing.

    Args:
        days_since_birth: First day plotted
        days: Number of days to plot
        geometry: Plot area (700x300 when not given)

    Raises:
        ValueError: If days is less than 1
    """
    if days < 1:
        raise ValueError(f"Chart must show at least one day, got {days}")
    if geometry is None:
        geometry = ChartGeometry()

    chart = BiorhythmChart(days_since_birth=days_since_birth, days=days, geometry=geometry)
    for cycle in Cycle:
        series = sample_series(days_since_birth, cycle.period, days)
        chart.points[cycle] = chart_points(series, geometry, days)
        chart.segments[cycle] = chart_segments(series, geometry, days)
    return chart


def build_chart_for(
    config: Config, birth: date, geometry: Optional[ChartGeometry] = None
) -> BiorhythmChart:
    """Chart for a birth date using the configured reference day and length.

    config.reference_date of None means today.
    """
    days = days_since_birth(birth, config.reference_date)
    return build_chart(days, days=config.chart_days, geometry=geometry)
