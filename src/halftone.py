"""
Halftone engine.

Expands a set of full cells into mid cells under one of four
strategies and merges both into a state map.
"""

import logging
import numpy as np
from typing import Iterable, List, Mapping, Optional, Sequence, Union

from .grid import (
    GridSize,
    Position,
    all_cells,
    centroid,
    euclidean_distance,
    neighbors_of,
    unique_positions,
)
from .state_map import StateMap, build_state_map
from .strategies import (
    DistanceStrategy,
    GradientDirection,
    GradientStrategy,
    HalftoneStrategy,
    NeighborsStrategy,
    TrailStrategy,
    UnsupportedStrategyError,
    strategy_from_dict,
)

logger = logging.getLogger(__name__)

# Hard cap on how many history frames a trail may draw
MAX_TRAIL_FRAMES = 10

STRATEGY_CLASSES = (NeighborsStrategy, TrailStrategy, DistanceStrategy, GradientStrategy)


def generate_halftone_states(
    full_positions: Iterable[Position],
    strategy: Union[HalftoneStrategy, Mapping],
    grid_size: GridSize = 5,
    frame_history: Optional[Sequence[Iterable[Position]]] = None
) -> StateMap:
    """
    Convert a set of full cells into a complete state map.

    Args:
        full_positions: Cells of the current shape
        strategy: Strategy dataclass or its tagged dict form
        grid_size: Grid side length or (width, height)
        frame_history: Previous frames, most recent first (trail only)

    Returns:
        StateMap with every in-bounds full cell and its mid halo

    Raises:
        UnsupportedStrategyError: Strategy is not one of the four kinds
    """
    if isinstance(strategy, Mapping):
        strategy = strategy_from_dict(strategy)
    elif not isinstance(strategy, STRATEGY_CLASSES):
        raise UnsupportedStrategyError(strategy)

    full_positions = unique_positions(full_positions)
    if not full_positions:
        # Nothing to halo, whatever the strategy
        return {}

    if isinstance(strategy, NeighborsStrategy):
        mid = apply_neighbor_halftones(
            full_positions, grid_size, strategy.orthogonal_only, strategy.distance
        )
    elif isinstance(strategy, TrailStrategy):
        mid = apply_trail_halftones(
            full_positions, frame_history or [], strategy.length
        )
    elif isinstance(strategy, DistanceStrategy):
        mid = apply_distance_halftones(full_positions, strategy.radius, grid_size)
    elif isinstance(strategy, GradientStrategy):
        mid = apply_gradient_halftones(full_positions, strategy.direction, grid_size)
    else:
        raise UnsupportedStrategyError(strategy)

    logger.debug("%s: %d full, %d mid candidates",
                 type(strategy).__name__, len(full_positions), len(mid))

    return build_state_map(full_positions, mid, grid_size)


def apply_neighbor_halftones(
    positions: Sequence[Position],
    grid_size: GridSize,
    orthogonal_only: bool = False,
    distance: int = 1
) -> List[Position]:
    """Neighbors of every full cell that are not full themselves."""
    full_set = set(positions)
    mid = []
    for p in positions:
        for n in neighbors_of(p, grid_size, distance, orthogonal_only):
            if n not in full_set:
                mid.append(n)
    return unique_positions(mid)


def apply_trail_halftones(
    current_positions: Sequence[Position],
    previous_frames: Sequence[Iterable[Position]],
    length: int
) -> List[Position]:
    """
    Cells lit in recent frames but not in the current one.

    Only the first min(length, MAX_TRAIL_FRAMES) frames are read;
    previous_frames must not include the current frame.
    """
    full_set = set(current_positions)
    frames = list(previous_frames)[:min(length, MAX_TRAIL_FRAMES)]

    trail = []
    for frame in frames:
        for x, y in frame:
            p = (int(x), int(y))
            if p not in full_set:
                trail.append(p)
    return unique_positions(trail)


def apply_distance_halftones(
    positions: Sequence[Position],
    radius: float,
    grid_size: GridSize
) -> List[Position]:
    """
    Non-full cells whose nearest full cell lies within radius.

    Cost is O(grid area x full count); fine for loader-sized grids.
    """
    if not positions:
        return []

    full_set = set(positions)
    candidates = [c for c in all_cells(grid_size) if c not in full_set]
    if not candidates:
        return []

    cells = np.array(candidates, dtype=float)
    full = np.array(positions, dtype=float)

    # (cells, full) pairwise distances
    diff = cells[:, None, :] - full[None, :, :]
    nearest = np.sqrt((diff ** 2).sum(axis=2)).min(axis=1)

    within = (nearest > 0) & (nearest <= radius)
    return [candidates[i] for i in np.flatnonzero(within)]


def apply_gradient_halftones(
    positions: Sequence[Position],
    direction: GradientDirection,
    grid_size: GridSize
) -> List[Position]:
    """
    Neighbor halo filtered by distance from the shape's centroid.

    A neighbor is kept when at least one full cell sits closer to the
    centroid than it does (OUTWARD) or farther away (INWARD). The test
    is existential over all full cells, not just the nearest one.
    """
    center = centroid(positions)
    full_distances = [euclidean_distance(p, center) for p in positions]

    mid = []
    for n in apply_neighbor_halftones(positions, grid_size, False, 1):
        d = euclidean_distance(n, center)
        if direction is GradientDirection.OUTWARD:
            keep = any(fd < d for fd in full_distances)
        else:
            keep = any(fd > d for fd in full_distances)
        if keep:
            mid.append(n)
    return mid
