"""
Dot Halftone - halo and usage-chart generators for small dot grids.
"""

from .grid import (
    Position,
    GridSize,
    neighbors_of,
    euclidean_distance,
    centroid,
    in_bounds,
)
from .state_map import (
    DotState,
    StateMap,
    build_state_map,
    merge_states,
    halo_state_map,
    render_text,
)
from .strategies import (
    NeighborsStrategy,
    TrailStrategy,
    DistanceStrategy,
    GradientStrategy,
    GradientDirection,
    HalftoneError,
    UnsupportedStrategyError,
    StrategyConfigError,
    strategy_from_dict,
)
from .halftone import generate_halftone_states, MAX_TRAIL_FRAMES
from .usage import (
    UsageSeriesConfig,
    UsageSeries,
    UsageSample,
    DASHBOARD_CARD,
    COMPACT_CARD,
    generate_usage_series,
    build_usage_series,
    usage_state_map,
    sample_usage,
)
from .animation import FrameHistory, HalftoneAnimator
from .shapes import SHAPES, SEQUENCES, HALFTONE_DEMO

__version__ = "0.1.0"

__all__ = [
    # Grid
    'Position',
    'GridSize',
    'neighbors_of',
    'euclidean_distance',
    'centroid',
    'in_bounds',
    # State maps
    'DotState',
    'StateMap',
    'build_state_map',
    'merge_states',
    'halo_state_map',
    'render_text',
    # Strategies
    'NeighborsStrategy',
    'TrailStrategy',
    'DistanceStrategy',
    'GradientStrategy',
    'GradientDirection',
    'HalftoneError',
    'UnsupportedStrategyError',
    'StrategyConfigError',
    'strategy_from_dict',
    # Engine
    'generate_halftone_states',
    'MAX_TRAIL_FRAMES',
    # Usage charts
    'UsageSeriesConfig',
    'UsageSeries',
    'UsageSample',
    'DASHBOARD_CARD',
    'COMPACT_CARD',
    'generate_usage_series',
    'build_usage_series',
    'usage_state_map',
    'sample_usage',
    # Animation
    'FrameHistory',
    'HalftoneAnimator',
    'SHAPES',
    'SEQUENCES',
    'HALFTONE_DEMO',
]
