"""
Usage series generation.

Synthesizes a connected, chart-like path of grid cells from a
normalized usage level and trend. The path is built in four passes:
a deterministic base curve, a smoothed random walk around it, a
3-tap moving average, and a gap-fill that keeps adjacent columns
within one row of each other.
"""

import logging
import math
import numpy as np
from dataclasses import dataclass, field, replace
from typing import List, Optional, Union

from .grid import Position
from .state_map import StateMap, halo_state_map

logger = logging.getLogger(__name__)

RandomSource = Union[None, int, np.random.Generator]


@dataclass
class UsageSeriesConfig:
    """
    Shape and smoothing parameters of a usage chart.

    Attributes:
        columns: Number of chart columns (one height each)
        rows: Grid rows; heights range over [0, rows - 1]
        ease: Exponential smoothing factor of the random walk
        jitter_scale: Jitter bound grows as round(level * jitter_scale)
        jitter_min: Lower limit of the jitter bound
        center_weight: Weight of the center tap in the moving average
    """
    columns: int = 23
    rows: int = 14
    ease: float = 0.6
    jitter_scale: float = 4.0
    jitter_min: int = 2
    center_weight: float = 1.5

    def __post_init__(self):
        assert self.columns >= 1, "columns must be >= 1"
        assert self.rows >= 1, "rows must be >= 1"
        assert 0 < self.ease <= 1, "ease must be in (0, 1]"
        assert self.jitter_min >= 0, "jitter_min must be >= 0"
        assert self.center_weight > 0, "center_weight must be > 0"

    @property
    def max_row(self) -> int:
        return self.rows - 1

    def jitter_bound(self, level: float) -> int:
        """Largest per-column random offset for a given level."""
        return max(self.jitter_min, round_half_up(level * self.jitter_scale))

    def copy(self, **overrides) -> 'UsageSeriesConfig':
        """Create a copy with optional parameter overrides."""
        return replace(self, **overrides)


# 23 x 14 dashboard card
DASHBOARD_CARD = UsageSeriesConfig()

# 21 x 13 compact card: calmer walk, heavier center tap
COMPACT_CARD = UsageSeriesConfig(
    columns=21,
    rows=13,
    ease=0.45,
    jitter_scale=2.0,
    jitter_min=1,
    center_weight=2.0,
)


@dataclass
class UsageSeries:
    """A generated chart: one height per column plus the lit path cells."""
    heights: List[int]
    positions: List[Position] = field(default_factory=list)


@dataclass
class UsageSample:
    """Normalized inputs for one usage chart."""
    level: float
    trend: float


def round_half_up(value: float) -> int:
    """Round to nearest integer, ties toward +infinity."""
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def base_heights(level: float, trend: float, columns: int, max_row: int) -> List[int]:
    """
    Deterministic curve the random walk is anchored to.

    Level sets a quadratic rise, trend adds a t^1.4 slope, and a
    negative trend also droops the last 40% of the series.
    """
    level = clamp(level, 0.0, 1.0)
    trend = clamp(trend, -1.0, 1.0)

    heights = []
    for column in range(columns):
        t = column / (columns - 1) if columns > 1 else 0.0
        amplitude = level * (0.2 + 0.8 * t * t)
        trend_offset = trend * t ** 1.4 * max_row * 0.9

        tail_drop = 0.0
        if trend < 0 and t > 0.6:
            tail_drop = abs(trend) * ((t - 0.6) / 0.4) * max_row * 0.6

        heights.append(round_half_up(amplitude * max_row + trend_offset - tail_drop))
    return heights


def jitter_heights(
    base: List[int],
    max_row: int,
    jitter: int,
    ease: float,
    rng: np.random.Generator
) -> List[int]:
    """
    Random walk around the base curve.

    Each column draws an integer offset in [-jitter, jitter], clamps
    base + offset into [0, max_row], and eases the running height
    toward that target.
    """
    if not base:
        return []

    current = int(clamp(base[0], 0, max_row))
    heights = []
    for target_base in base:
        delta = int(rng.integers(-jitter, jitter, endpoint=True))
        target = int(clamp(target_base + delta, 0, max_row))
        current = round_half_up(current * (1 - ease) + target * ease)
        heights.append(current)
    return heights


def smooth_heights(heights: List[int], center_weight: float = 1.5) -> List[int]:
    """Weighted 3-tap moving average; edge columns stand in for their missing neighbor."""
    last = len(heights) - 1
    smoothed = []
    for i, value in enumerate(heights):
        prev = heights[max(0, i - 1)]
        nxt = heights[min(last, i + 1)]
        smoothed.append(round_half_up(
            (prev + value * center_weight + nxt) / (2 + center_weight)
        ))
    return smoothed


def series_positions(heights: List[int], max_row: int) -> List[Position]:
    """
    Path cells for a height profile, with vertical gaps filled.

    When the next column's row is more than one away, the rows in
    between are lit in the current column so the path stays connected.
    """
    positions = []
    last = len(heights) - 1

    for column, height in enumerate(heights):
        y = max_row - height
        positions.append((column, y))

        if column < last:
            next_y = max_row - heights[column + 1]
            y_diff = next_y - y
            if abs(y_diff) > 1:
                step_dir = 1 if y_diff > 0 else -1
                for step in range(1, abs(y_diff)):
                    positions.append((column, y + step_dir * step))

    return positions


def build_usage_series(
    level: float,
    trend: float,
    config: Optional[UsageSeriesConfig] = None,
    rng: RandomSource = None
) -> UsageSeries:
    """
    Run every pass and return heights and path cells.

    Args:
        level: Usage level, clamped to [0, 1]
        trend: Usage trend, clamped to [-1, 1]
        config: Chart parameters (defaults to DASHBOARD_CARD)
        rng: numpy Generator, integer seed, or None for fresh entropy

    Returns:
        UsageSeries with exactly config.columns heights
    """
    if config is None:
        config = DASHBOARD_CARD
    rng = np.random.default_rng(rng)

    level = clamp(level, 0.0, 1.0)
    trend = clamp(trend, -1.0, 1.0)

    base = base_heights(level, trend, config.columns, config.max_row)
    walk = jitter_heights(base, config.max_row, config.jitter_bound(level),
                          config.ease, rng)
    heights = smooth_heights(walk, config.center_weight)
    positions = series_positions(heights, config.max_row)

    logger.debug("usage series level=%.2f trend=%.2f: %d columns, %d cells",
                 level, trend, len(heights), len(positions))

    return UsageSeries(heights=heights, positions=positions)


def generate_usage_series(
    level: float,
    trend: float,
    columns: int,
    max_row: int,
    rng: RandomSource = None,
    config: Optional[UsageSeriesConfig] = None
) -> List[Position]:
    """
    Path cells of a usage chart with the given column count and height.

    Smoothing and jitter parameters come from config
    (DASHBOARD_CARD by default); its size is overridden. A column
    count below one yields the single-point series.
    """
    if config is None:
        config = DASHBOARD_CARD
    config = config.copy(columns=max(columns, 1), rows=max(max_row, 0) + 1)
    return build_usage_series(level, trend, config, rng).positions


def usage_state_map(
    level: float,
    trend: float,
    config: Optional[UsageSeriesConfig] = None,
    rng: RandomSource = None
) -> StateMap:
    """Full card pipeline: path cells become FULL, their halo MID."""
    if config is None:
        config = DASHBOARD_CARD
    series = build_usage_series(level, trend, config, rng)
    return halo_state_map(series.positions, config.columns, config.rows)


def sample_usage(
    amount: float,
    max_amount: float,
    rng: RandomSource = None
) -> UsageSample:
    """
    Derive chart inputs from a raw usage amount.

    The trend is random, but low levels are biased downward so that
    near-empty usage rarely draws a steep climb.
    """
    rng = np.random.default_rng(rng)

    level = clamp(amount / max_amount, 0.0, 1.0) if max_amount > 0 else 0.0
    trend = float(rng.random()) * 2 - 1
    if level < 0.35:
        trend -= (0.35 - level) * 1.5
    return UsageSample(level=level, trend=clamp(trend, -1.0, 1.0))
