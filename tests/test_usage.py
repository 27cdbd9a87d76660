"""
Tests for usage series generation.
"""

import pytest
import numpy as np
from src.state_map import DotState
from src.usage import (
    COMPACT_CARD,
    DASHBOARD_CARD,
    UsageSeriesConfig,
    base_heights,
    build_usage_series,
    generate_usage_series,
    jitter_heights,
    round_half_up,
    sample_usage,
    series_positions,
    smooth_heights,
    usage_state_map,
)


def rows_by_column(positions):
    rows = {}
    for x, y in positions:
        rows.setdefault(x, set()).add(y)
    return rows


class TestUsageSeriesConfig:
    """Tests for chart configuration."""

    def test_dashboard_preset(self):
        assert DASHBOARD_CARD.columns == 23
        assert DASHBOARD_CARD.rows == 14
        assert DASHBOARD_CARD.max_row == 13
        assert DASHBOARD_CARD.ease == 0.6

    def test_compact_preset(self):
        assert COMPACT_CARD.columns == 21
        assert COMPACT_CARD.rows == 13
        assert COMPACT_CARD.ease == 0.45

    def test_jitter_bounds(self):
        assert DASHBOARD_CARD.jitter_bound(0.0) == 2
        assert DASHBOARD_CARD.jitter_bound(1.0) == 4
        assert COMPACT_CARD.jitter_bound(0.0) == 1
        assert COMPACT_CARD.jitter_bound(1.0) == 2

    def test_copy_overrides(self):
        config = DASHBOARD_CARD.copy(columns=5)
        assert config.columns == 5
        assert DASHBOARD_CARD.columns == 23

    def test_invalid_config(self):
        with pytest.raises(AssertionError):
            UsageSeriesConfig(columns=0)
        with pytest.raises(AssertionError):
            UsageSeriesConfig(ease=0.0)


class TestSeriesPasses:
    """Tests for the individual generation passes."""

    def test_round_half_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(-2.5) == -2
        assert round_half_up(0.49) == 0

    def test_flat_base(self):
        assert base_heights(0.0, 0.0, 5, 4) == [0, 0, 0, 0, 0]

    def test_quadratic_base(self):
        assert base_heights(1.0, 0.0, 3, 10) == [2, 4, 10]

    def test_base_inputs_clamped(self):
        assert base_heights(5.0, 3.0, 7, 10) == base_heights(1.0, 1.0, 7, 10)

    def test_positive_trend_raises_tail(self):
        flat = base_heights(0.5, 0.0, 23, 13)
        rising = base_heights(0.5, 1.0, 23, 13)
        assert rising[-1] > flat[-1]
        assert rising[0] == flat[0]

    def test_negative_trend_droops_tail(self):
        heights = base_heights(1.0, -1.0, 11, 10)
        assert heights[-1] < heights[6]

    def test_jitter_free_walk_follows_clamped_base(self):
        rng = np.random.default_rng(0)
        assert jitter_heights([0, 3, 20, -2], 10, 0, 1.0, rng) == [0, 3, 10, 0]

    def test_walk_eases_toward_target(self):
        rng = np.random.default_rng(0)
        assert jitter_heights([0, 4, 4], 10, 0, 0.5, rng) == [0, 2, 3]

    def test_smoothing(self):
        assert smooth_heights([0, 0, 7, 0, 0], 1.5) == [0, 2, 3, 2, 0]

    def test_smoothing_preserves_constant(self):
        assert smooth_heights([5, 5, 5], 2.0) == [5, 5, 5]

    def test_gap_fill_upward(self):
        assert series_positions([0, 3], 4) == [(0, 4), (0, 3), (0, 2), (1, 1)]

    def test_gap_fill_downward(self):
        assert series_positions([4, 1], 4) == [(0, 0), (0, 1), (0, 2), (1, 3)]

    def test_no_fill_for_small_steps(self):
        assert series_positions([2, 1], 4) == [(0, 2), (1, 3)]


class TestGenerateUsageSeries:
    """Tests for the full usage series pipeline."""

    @pytest.mark.parametrize("seed", range(20))
    def test_flat_input_stays_near_bottom(self, seed):
        """Zero level and trend leave only jitter above the bottom row."""
        positions = generate_usage_series(0.0, 0.0, 5, 4, rng=seed)
        assert {y for _, y in positions} <= {2, 3, 4}

    @pytest.mark.parametrize("level,trend", [
        (0.0, -1.0), (0.56, 0.0), (1.0, 1.0), (1.0, -1.0), (-2.0, 4.0), (0.2, 0.7),
    ])
    def test_one_height_per_column(self, level, trend):
        for seed in range(10):
            series = build_usage_series(level, trend, DASHBOARD_CARD, rng=seed)
            assert len(series.heights) == DASHBOARD_CARD.columns
            xs = {x for x, _ in series.positions}
            assert xs == set(range(DASHBOARD_CARD.columns))

    @pytest.mark.parametrize("config", [DASHBOARD_CARD, COMPACT_CARD])
    def test_rows_within_grid(self, config):
        rng = np.random.default_rng(7)
        for _ in range(50):
            level, trend = rng.uniform(-0.5, 1.5), rng.uniform(-1.5, 1.5)
            series = build_usage_series(level, trend, config, rng)
            assert all(0 <= y <= config.max_row for _, y in series.positions)
            assert all(0 <= h <= config.max_row for h in series.heights)

    @pytest.mark.parametrize("seed", range(25))
    def test_path_is_connected(self, seed):
        """Each column lights every row up to one step short of the next column."""
        series = build_usage_series(0.8, -0.6, DASHBOARD_CARD, rng=seed)
        rows = rows_by_column(series.positions)
        max_row = DASHBOARD_CARD.max_row

        for column in range(DASHBOARD_CARD.columns - 1):
            y = max_row - series.heights[column]
            next_y = max_row - series.heights[column + 1]
            between = set(range(min(y, next_y) + 1, max(y, next_y)))
            assert y in rows[column]
            assert between <= rows[column]
            gap = min(abs(a - b) for a in rows[column] for b in rows[column + 1])
            assert gap <= 1

    def test_single_column(self):
        positions = generate_usage_series(0.5, 0.5, 1, 4, rng=1)
        assert len(positions) == 1
        assert positions[0][0] == 0

    @pytest.mark.parametrize("columns", [0, -3])
    def test_no_columns_degenerates_to_single_point(self, columns):
        positions = generate_usage_series(0.5, 0.0, columns, 4, rng=1)
        assert positions == generate_usage_series(0.5, 0.0, 1, 4, rng=1)
        assert len(positions) == 1
        x, y = positions[0]
        assert x == 0 and 0 <= y <= 4

    def test_seeded_reproducibility(self):
        a = generate_usage_series(0.56, 0.2, 23, 13, rng=np.random.default_rng(42))
        b = generate_usage_series(0.56, 0.2, 23, 13, rng=np.random.default_rng(42))
        assert a == b

    def test_unseeded_call(self):
        positions = generate_usage_series(0.5, 0.0, 23, 13)
        assert {x for x, _ in positions} == set(range(23))


class TestUsageStateMap:
    """Tests for usage chart halos and sample inputs."""

    def test_halo_around_path(self):
        series = build_usage_series(0.56, 0.0, COMPACT_CARD, rng=3)
        states = usage_state_map(0.56, 0.0, COMPACT_CARD, rng=3)

        for p in series.positions:
            assert states[p] is DotState.FULL
        assert any(s is DotState.MID for s in states.values())
        assert all(0 <= x < 21 and 0 <= y < 13 for x, y in states)

    def test_sample_level_clamped(self):
        assert sample_usage(200.0, 120.0, rng=0).level == 1.0
        assert sample_usage(60.0, 120.0, rng=0).level == 0.5

    def test_low_level_biases_trend_down(self):
        for seed in range(30):
            sample = sample_usage(0.0, 120.0, rng=seed)
            assert -1.0 <= sample.trend < 1.0 - 0.35 * 1.5
