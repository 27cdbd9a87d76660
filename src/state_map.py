"""
Dot state maps.

A state map holds only the lit cells of a grid: every coordinate is
either FULL or MID, and anything absent is implicitly EMPTY. All full
cell sources funnel through build_state_map so FULL always wins.
"""

import logging
import numpy as np
from enum import Enum
from typing import Dict, Iterable

from .grid import GridSize, Position, grid_dimensions, in_bounds, neighbors_of

logger = logging.getLogger(__name__)


class DotState(Enum):
    """Visual intensity of a single grid cell."""
    FULL = "full"
    MID = "mid"
    EMPTY = "empty"

    @property
    def priority(self) -> int:
        """Higher wins when two sources disagree about a cell."""
        return _PRIORITY[self]


_PRIORITY = {
    DotState.EMPTY: 0,
    DotState.MID: 1,
    DotState.FULL: 2,
}

StateMap = Dict[Position, DotState]

TEXT_GLYPHS = {
    DotState.FULL: "#",
    DotState.MID: "+",
    DotState.EMPTY: ".",
}


def build_state_map(
    full_positions: Iterable[Position],
    mid_positions: Iterable[Position],
    grid_size: GridSize
) -> StateMap:
    """
    Merge full and mid candidates into one state map.

    Out-of-bounds candidates are dropped. A cell listed as both full
    and mid ends up FULL.

    Args:
        full_positions: Cells of the source shape
        mid_positions: Halo candidates from a halftone strategy
        grid_size: Grid side length or (width, height)

    Returns:
        Mapping from position to FULL or MID
    """
    states: StateMap = {}

    for x, y in full_positions:
        p = (int(x), int(y))
        if in_bounds(p, grid_size):
            states[p] = DotState.FULL

    for x, y in mid_positions:
        p = (int(x), int(y))
        if p not in states and in_bounds(p, grid_size):
            states[p] = DotState.MID

    return states


def merge_states(base: StateMap, overlay: StateMap) -> StateMap:
    """Combine two maps, keeping the higher-priority state per cell."""
    merged = dict(base)
    for p, state in overlay.items():
        current = merged.get(p, DotState.EMPTY)
        if state.priority > current.priority:
            merged[p] = state
    return merged


def state_at(states: StateMap, position: Position) -> DotState:
    """State of a cell, EMPTY when the map has no entry."""
    return states.get(position, DotState.EMPTY)


def halo_state_map(
    positions: Iterable[Position],
    width: int,
    height: int
) -> StateMap:
    """
    Mark positions FULL and their 8-connected neighbors MID.

    This is the projection used for generated usage paths.
    """
    positions = list(positions)
    grid_size = (width, height)

    halo = []
    for p in positions:
        halo.extend(neighbors_of(p, grid_size, 1, False))

    states = build_state_map(positions, halo, grid_size)
    logger.debug("halo map: %d cells lit on %dx%d grid", len(states), width, height)
    return states


def to_grid(states: StateMap, grid_size: GridSize) -> np.ndarray:
    """
    Dense array view of a state map.

    Returns:
        Integer array of shape (height, width) holding each
        cell's priority (EMPTY=0, MID=1, FULL=2)
    """
    width, height = grid_dimensions(grid_size)
    grid = np.zeros((height, width), dtype=np.int8)
    for (x, y), state in states.items():
        if 0 <= x < width and 0 <= y < height:
            grid[y, x] = state.priority
    return grid


def render_text(states: StateMap, grid_size: GridSize) -> str:
    """ASCII picture of a state map, one line per row."""
    width, height = grid_dimensions(grid_size)
    lines = []
    for y in range(height):
        lines.append("".join(
            TEXT_GLYPHS[state_at(states, (x, y))] for x in range(width)
        ))
    return "\n".join(lines)
