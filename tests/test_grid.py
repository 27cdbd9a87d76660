"""
Tests for grid geometry and state map merging.
"""

import pytest
import numpy as np
from src.grid import (
    all_cells,
    centroid,
    euclidean_distance,
    grid_dimensions,
    in_bounds,
    neighbors_of,
    unique_positions,
)
from src.state_map import (
    DotState,
    build_state_map,
    halo_state_map,
    merge_states,
    render_text,
    state_at,
    to_grid,
)


class TestGridGeometry:
    """Tests for bounds, distances and centroids."""

    def test_square_and_rect_dimensions(self):
        """Integers are square grids, tuples are (width, height)."""
        assert grid_dimensions(5) == (5, 5)
        assert grid_dimensions((23, 14)) == (23, 14)

    def test_in_bounds(self):
        assert in_bounds((0, 0), 5)
        assert in_bounds((4, 4), 5)
        assert not in_bounds((5, 0), 5)
        assert not in_bounds((-1, 2), 5)
        assert in_bounds((22, 13), (23, 14))
        assert not in_bounds((13, 22), (23, 14))

    def test_all_cells_count(self):
        assert len(all_cells(5)) == 25
        assert len(all_cells((21, 13))) == 21 * 13

    def test_euclidean_distance(self):
        assert euclidean_distance((0, 0), (3, 4)) == 5.0
        assert np.isclose(euclidean_distance((1, 1), (2, 2)), np.sqrt(2))

    def test_centroid(self):
        assert centroid([(0, 0), (2, 0), (2, 2), (0, 2)]) == (1.0, 1.0)

    def test_centroid_empty_is_origin(self):
        assert centroid([]) == (0.0, 0.0)

    def test_unique_positions_keeps_order(self):
        assert unique_positions([(1, 1), (0, 0), (1, 1)]) == [(1, 1), (0, 0)]


class TestNeighbors:
    """Tests for the neighbor projector."""

    def test_interior_all_directions(self):
        """Interior cell has 8 neighbors at distance 1."""
        neighbors = neighbors_of((2, 2), 5)
        assert len(neighbors) == 8
        assert (2, 2) not in neighbors
        assert all(max(abs(x - 2), abs(y - 2)) == 1 for x, y in neighbors)

    def test_interior_orthogonal(self):
        """Orthogonal mode keeps only up/down/left/right."""
        neighbors = neighbors_of((2, 2), 5, 1, orthogonal_only=True)
        assert set(neighbors) == {(1, 2), (3, 2), (2, 1), (2, 3)}

    def test_corner_is_clipped(self):
        assert set(neighbors_of((0, 0), 5)) == {(1, 0), (0, 1), (1, 1)}

    def test_distance_two(self):
        """Distance 2 from the center of a 5x5 grid covers the rest of the grid."""
        assert len(neighbors_of((2, 2), 5, 2)) == 24
        assert len(neighbors_of((2, 2), 5, 2, orthogonal_only=True)) == 8

    def test_rectangular_grid(self):
        neighbors = neighbors_of((22, 0), (23, 14))
        assert set(neighbors) == {(21, 0), (21, 1), (22, 1)}

    def test_zero_size_grid(self):
        assert neighbors_of((0, 0), 0) == []

    def test_out_of_range_cell(self):
        """A cell far outside the grid projects to nothing."""
        assert neighbors_of((10, 10), 5) == []


class TestStateMap:
    """Tests for the state map builder."""

    def test_full_overrides_mid(self):
        states = build_state_map([(1, 1)], [(1, 1), (2, 1)], 5)
        assert states == {(1, 1): DotState.FULL, (2, 1): DotState.MID}

    def test_out_of_bounds_dropped(self):
        states = build_state_map([(5, 5), (0, 0)], [(-1, 0), (0, 1)], 5)
        assert states == {(0, 0): DotState.FULL, (0, 1): DotState.MID}

    def test_state_at_defaults_to_empty(self):
        states = build_state_map([(0, 0)], [], 5)
        assert state_at(states, (0, 0)) is DotState.FULL
        assert state_at(states, (3, 3)) is DotState.EMPTY

    def test_priority_order(self):
        assert DotState.FULL.priority > DotState.MID.priority > DotState.EMPTY.priority

    def test_merge_keeps_higher_priority(self):
        a = {(0, 0): DotState.MID, (1, 0): DotState.FULL}
        b = {(0, 0): DotState.FULL, (1, 0): DotState.MID, (2, 0): DotState.MID}
        merged = merge_states(a, b)
        assert merged == {
            (0, 0): DotState.FULL,
            (1, 0): DotState.FULL,
            (2, 0): DotState.MID,
        }

    def test_halo_state_map(self):
        states = halo_state_map([(0, 0)], 3, 2)
        assert states == {
            (0, 0): DotState.FULL,
            (1, 0): DotState.MID,
            (0, 1): DotState.MID,
            (1, 1): DotState.MID,
        }

    def test_to_grid(self):
        states = {(2, 0): DotState.FULL, (0, 1): DotState.MID}
        grid = to_grid(states, (3, 2))
        assert grid.shape == (2, 3)
        np.testing.assert_array_equal(grid, [[0, 0, 2], [1, 0, 0]])

    def test_render_text(self):
        states = {(1, 0): DotState.FULL, (0, 0): DotState.MID}
        assert render_text(states, (3, 2)) == "+#.\n..."
