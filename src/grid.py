"""
Grid coordinate model.

Shared geometry for every generator: bounds checks, neighbor
projection, distances and centroids over small integer grids.
"""

import math
from typing import Iterable, List, Tuple, Union

Position = Tuple[int, int]

# A square grid is given by its side length, anything else by (width, height)
GridSize = Union[int, Tuple[int, int]]


def grid_dimensions(grid_size: GridSize) -> Tuple[int, int]:
    """Resolve a grid size into (width, height)."""
    if isinstance(grid_size, tuple):
        width, height = grid_size
        return int(width), int(height)
    return int(grid_size), int(grid_size)


def in_bounds(position: Position, grid_size: GridSize) -> bool:
    """True if the position lies inside [0, width) x [0, height)."""
    width, height = grid_dimensions(grid_size)
    x, y = position
    return 0 <= x < width and 0 <= y < height


def all_cells(grid_size: GridSize) -> List[Position]:
    """Every cell of the grid in row-major order."""
    width, height = grid_dimensions(grid_size)
    return [(x, y) for y in range(height) for x in range(width)]


def neighbors_of(
    cell: Position,
    grid_size: GridSize,
    max_distance: int = 1,
    orthogonal_only: bool = False
) -> List[Position]:
    """
    Cells within max_distance of a cell (Chebyshev square).

    Args:
        cell: Center cell, need not be in bounds itself
        grid_size: Grid side length or (width, height)
        max_distance: Offset limit on each axis
        orthogonal_only: Skip offsets that move on both axes

    Returns:
        In-bounds neighbor positions, never including the cell itself
    """
    x, y = cell
    neighbors = []

    for dx in range(-max_distance, max_distance + 1):
        for dy in range(-max_distance, max_distance + 1):
            if dx == 0 and dy == 0:
                continue
            if orthogonal_only and dx != 0 and dy != 0:
                continue

            candidate = (x + dx, y + dy)
            if in_bounds(candidate, grid_size):
                neighbors.append(candidate)

    return neighbors


def euclidean_distance(p1: Tuple[float, float], p2: Tuple[float, float]) -> float:
    """Straight-line distance between two points."""
    return math.hypot(p1[0] - p2[0], p1[1] - p2[1])


def centroid(positions: Iterable[Position]) -> Tuple[float, float]:
    """Arithmetic mean position. An empty input maps to the origin."""
    positions = list(positions)
    if not positions:
        return (0.0, 0.0)

    sum_x = sum(p[0] for p in positions)
    sum_y = sum(p[1] for p in positions)
    return (sum_x / len(positions), sum_y / len(positions))


def unique_positions(positions: Iterable[Position]) -> List[Position]:
    """Drop duplicates, keeping first-seen order."""
    seen = set()
    result = []
    for p in positions:
        key = (int(p[0]), int(p[1]))
        if key not in seen:
            seen.add(key)
            result.append(key)
    return result
