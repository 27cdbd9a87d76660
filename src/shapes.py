"""
Loader shapes and frame sequences.

Static 5x5 glyphs and the animation sequences built from them. A
frame is simply the list of full cells shown at that step; some
sequences include blank frames. HALFTONE_DEMO is a hand-drawn map
that bypasses the strategies.
"""

import math
from typing import Dict, List

from .grid import Position
from .state_map import StateMap, build_state_map

Frame = List[Position]

SHAPES: Dict[str, Frame] = {
    'arrow_right': [(2, 0), (3, 1), (0, 2), (1, 2), (2, 2), (3, 2), (4, 2), (3, 3), (2, 4)],
    'arrow_left': [(2, 0), (1, 1), (0, 2), (1, 2), (2, 2), (3, 2), (4, 2), (1, 3), (2, 4)],
    'arrow_up': [(0, 2), (1, 1), (2, 0), (2, 1), (2, 2), (2, 3), (2, 4), (3, 1), (4, 2)],
    'arrow_down': [(0, 2), (1, 3), (2, 0), (2, 1), (2, 2), (2, 3), (2, 4), (3, 3), (4, 2)],
    'circle': [(1, 1), (2, 1), (3, 1), (1, 2), (3, 2), (1, 3), (2, 3), (3, 3)],
    'plus': [(2, 0), (2, 1), (0, 2), (1, 2), (2, 2), (3, 2), (4, 2), (2, 3), (2, 4)],
    'cross': [(0, 0), (1, 1), (2, 2), (3, 3), (4, 4), (0, 4), (1, 3), (3, 1), (4, 0)],
    'diamond': [(2, 0), (1, 1), (3, 1), (0, 2), (2, 2), (4, 2), (1, 3), (3, 3), (2, 4)],
    'horizontal_line': [(x, 2) for x in range(5)],
    'vertical_line': [(2, y) for y in range(5)],
    'square': [(x, y) for y in range(1, 4) for x in range(1, 4)],
    'corners': [(0, 0), (4, 0), (0, 4), (4, 4)],
}


def arrow_at_offset(offset: int, grid_size: int = 5) -> Frame:
    """Right-pointing arrow shifted horizontally, clipped to the grid."""
    cells = [(2, 0), (2, 4), (3, 1), (3, 3)] + [(i, 2) for i in range(5)]
    return [
        (x + offset, y) for x, y in cells
        if 0 <= x + offset < grid_size
    ]


def traveling_arrow() -> List[Frame]:
    """Arrow entering from the left and leaving on the right."""
    return [arrow_at_offset(offset) for offset in range(-4, 5)]


def bar_chart_waves(total_columns: int = 30, visible_columns: int = 5, rows: int = 5) -> List[Frame]:
    """
    Scroll a visible window across a sine-shaped bar chart.

    Heights follow one full sine period over total_columns and run
    from 0 to rows - 1; a bar of height h lights h + 1 cells up from
    the bottom row, so height 0 still shows the bottom cell.
    """
    max_height = rows - 1
    amplitude = max_height / 2

    wave_heights = []
    for i in range(total_columns):
        wave = math.sin(i / total_columns * math.pi * 2) * amplitude + amplitude
        wave_heights.append(int(math.floor(max(0.0, min(max_height, wave)) + 0.5)))

    frames = []
    for offset in range(total_columns):
        frame = []
        for col in range(visible_columns):
            height = wave_heights[(offset + col) % total_columns]
            for y in range(max_height - height, max_height + 1):
                frame.append((col, y))
        frames.append(frame)
    return frames


PULSING_DOT: List[Frame] = [
    [(2, 2)],
    [(2, 2), (1, 2), (3, 2), (2, 1), (2, 3)],
    SHAPES['plus'],
    [(2, 2), (1, 2), (3, 2), (2, 1), (2, 3)],
]

SCANNING_LINE: List[Frame] = [[(x, y) for y in range(5)] for x in range(5)]

EXPANDING_SQUARE: List[Frame] = [
    [(2, 2)],
    SHAPES['circle'],
    [(x, y) for y in range(5) for x in range(5) if x in (0, 4) or y in (0, 4)],
    SHAPES['circle'],
]

# 3x3 single dot circling the border
MINI_ORBIT: List[Frame] = [
    [(1, 0)], [(2, 0)], [(2, 1)], [(2, 2)],
    [(1, 2)], [(0, 2)], [(0, 1)], [(0, 0)],
]

# Center dot with a mid ring, drawn without any strategy
HALFTONE_DEMO: StateMap = build_state_map(
    [(2, 2)],
    [(1, 1), (2, 1), (3, 1), (1, 2), (3, 2), (1, 3), (2, 3), (3, 3)],
    5,
)

_CHECK = [(0, 3), (1, 4), (2, 3), (3, 2), (4, 1)]

CHECK_SUCCESS: List[Frame] = [
    [(2, 2)],
    [(1, 3)],
    [(1, 3), (2, 4)],
    [(1, 3), (2, 4), (2, 3)],
    [(1, 3), (2, 4), (2, 3), (3, 2)],
    [(1, 3), (2, 4), (2, 3), (3, 2), (4, 1)],
    _CHECK,
    _CHECK,
    _CHECK,
]

_INNER_X = [(2, 2), (1, 1), (3, 3), (3, 1), (1, 3)]

CROSS_ERROR: List[Frame] = [
    [(2, 2)],
    _INNER_X,
    _INNER_X + [(0, 0), (4, 4), (4, 0), (0, 4)],
    SHAPES['cross'],
    SHAPES['cross'],
    SHAPES['cross'],
]

# Rest row is y=3; each dot rises two rows in turn
BOUNCING_DOTS: List[Frame] = [
    [(x, y) for x, y in enumerate(rows)]
    for rows in [
        (3, 3, 3, 3, 3),
        (2, 3, 3, 3, 3),
        (1, 2, 3, 3, 3),
        (2, 1, 2, 3, 3),
        (3, 2, 1, 2, 3),
        (3, 3, 2, 1, 2),
        (3, 3, 3, 2, 1),
        (3, 3, 3, 3, 2),
    ]
]

ROTATING_SQUARE: List[Frame] = [
    [(1, 2), (2, 2), (3, 2)],
    [(2, 1), (2, 2), (2, 3)],
    [(2, 1), (2, 2), (2, 3)],
    SHAPES['circle'],
    [(x, y) for y in range(1, 4) for x in range(5) if x in (0, 4) or y != 2],
    SHAPES['circle'],
]

WAVE_PATTERN: List[Frame] = [
    [(x, y) for x, y in enumerate(rows)]
    for rows in [
        (2, 3, 4, 3, 2),
        (1, 2, 3, 2, 1),
        (2, 1, 2, 1, 2),
        (3, 2, 1, 2, 3),
        (2, 3, 2, 3, 2),
        (1, 2, 3, 2, 1),
    ]
]

CORNERS_SPIN: List[Frame] = [
    [(0, 0), (4, 0), (0, 4), (4, 4)],
    [(1, 0), (4, 1), (0, 3), (3, 4)],
    [(2, 0), (4, 2), (0, 2), (2, 4)],
    [(3, 0), (4, 3), (1, 4), (0, 1)],
    [(4, 0), (4, 4), (0, 4), (0, 0)],
    [(4, 1), (3, 4), (0, 3), (1, 0)],
    [(4, 2), (2, 4), (0, 2), (2, 0)],
    [(4, 3), (1, 4), (0, 1), (3, 0)],
]

# Two dots orbiting the center column
DNA_HELIX: List[Frame] = [
    [(1, 2), (3, 2)],
    [(1, 1), (3, 3)],
    [(2, 0), (2, 4)],
    [(3, 1), (1, 3)],
    [(3, 2), (1, 2)],
    [(3, 3), (1, 1)],
    [(2, 4), (2, 0)],
    [(1, 3), (3, 1)],
]

SPIRAL_IN: List[Frame] = [
    [(x, 0) for x in range(5)],
    [(4, y) for y in range(1, 5)],
    [(x, 4) for x in range(3, -1, -1)],
    [(0, y) for y in range(3, 0, -1)],
    [(1, 1), (2, 1), (3, 1)],
    [(3, 2), (3, 3)],
    [(2, 3), (1, 3)],
    [(1, 2)],
    [(2, 2)],
]

RADAR_SWEEP: List[Frame] = [
    [(2, 2)] + beam
    for beam in [
        [(2, 0), (2, 1)],
        [(3, 0), (3, 1)],
        [(4, 1), (4, 2)],
        [(4, 3), (3, 3)],
        [(2, 4), (2, 3)],
        [(1, 4), (1, 3)],
        [(0, 3), (0, 2)],
        [(0, 1), (1, 1)],
    ]
]

METEOR_SHOWER: List[Frame] = [
    [(1, 0), (3, 0)],
    [(1, 1), (3, 1), (0, 0), (4, 0)],
    [(1, 2), (3, 2), (0, 1), (4, 1)],
    [(1, 3), (3, 3), (0, 2), (4, 2), (2, 0)],
    [(1, 4), (3, 4), (0, 3), (4, 3), (2, 1)],
    [(0, 4), (4, 4), (2, 2)],
    [(2, 3)],
    [(2, 4)],
    [],
]

# Fills row-major up to the center cell
_READING_ORDER = [(x, y) for y in range(5) for x in range(5)]
TYPEWRITER: List[Frame] = [_READING_ORDER[:n] for n in range(1, 14)]

SNAKE: List[Frame] = [
    [(0, 2), (1, 2)],
    [(1, 2), (2, 2)],
    [(2, 2), (3, 2)],
    [(3, 2), (4, 2)],
    [(4, 2), (4, 1)],
    [(4, 1), (4, 0)],
    [(4, 0), (3, 0)],
    [(3, 0), (2, 0)],
    [(2, 0), (1, 0)],
    [(1, 0), (0, 0)],
    [(0, 0), (0, 1)],
    [(0, 1), (1, 1)],
    [(1, 1), (2, 1)],
    [(2, 1), (3, 1)],
    [(3, 1), (4, 1)],
    [(4, 1), (4, 2)],
]

# Manhattan rings spreading from the center, then a blank frame
CIRCULAR_WAVE: List[Frame] = [
    [(x, y) for y in range(5) for x in range(5) if abs(x - 2) + abs(y - 2) == r]
    for r in range(3)
] + [
    [(x, y) for y in range(5) for x in range(5) if abs(x - 2) + abs(y - 2) >= 3],
    [],
]

# Diagonal lines sweeping from the bottom-left corner to the top-right, then blank
DIAGONAL_SWEEP: List[Frame] = [
    [(x, y) for y in range(5) for x in range(5) if x - y == d]
    for d in range(-4, 5)
] + [[]]

SEQUENCES: Dict[str, List[Frame]] = {
    'check_success': CHECK_SUCCESS,
    'cross_error': CROSS_ERROR,
    'traveling_arrow': traveling_arrow(),
    'pulsing_dot': PULSING_DOT,
    'scanning_line': SCANNING_LINE,
    'expanding_square': EXPANDING_SQUARE,
    'bar_chart_waves': bar_chart_waves(),
    'bouncing_dots': BOUNCING_DOTS,
    'rotating_square': ROTATING_SQUARE,
    'wave_pattern': WAVE_PATTERN,
    'corners_spin': CORNERS_SPIN,
    'dna_helix': DNA_HELIX,
    'spiral_in': SPIRAL_IN,
    'radar_sweep': RADAR_SWEEP,
    'meteor_shower': METEOR_SHOWER,
    'typewriter': TYPEWRITER,
    'snake': SNAKE,
    'circular_wave': CIRCULAR_WAVE,
    'diagonal_sweep': DIAGONAL_SWEEP,
}
