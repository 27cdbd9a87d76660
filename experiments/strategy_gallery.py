"""
Strategy gallery.

Renders every built-in shape under every halftone strategy so the
strategies can be compared side by side.
"""

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.colors import ListedColormap
from typing import Dict, List
import sys
sys.path.insert(0, '..')

from src.shapes import SHAPES
from src.halftone import generate_halftone_states
from src.state_map import build_state_map, to_grid
from src.strategies import (
    NeighborsStrategy,
    DistanceStrategy,
    GradientStrategy,
    GradientDirection,
)

# empty, mid, full
DOT_CMAP = ListedColormap(['#f4f4f5', '#d2d3d6', '#1f2123'])

GALLERY_STRATEGIES = {
    'none': None,
    'neighbors': NeighborsStrategy(),
    'orthogonal': NeighborsStrategy(orthogonal_only=True),
    'distance r=1.5': DistanceStrategy(radius=1.5),
    'gradient out': GradientStrategy(GradientDirection.OUTWARD),
    'gradient in': GradientStrategy(GradientDirection.INWARD),
}


def build_gallery(
    shapes: Dict[str, list],
    strategies: Dict[str, object],
    grid_size: int = 5
) -> Dict[str, List[np.ndarray]]:
    """
    Compute dense grids for each shape under each strategy.

    Returns:
        Mapping from shape name to one grid per strategy (in order)
    """
    gallery = {}
    for name, shape in shapes.items():
        row = []
        for strategy in strategies.values():
            if strategy is None:
                states = build_state_map(shape, [], grid_size)
            else:
                states = generate_halftone_states(shape, strategy, grid_size)
            row.append(to_grid(states, grid_size))
        gallery[name] = row
    return gallery


def plot_gallery(
    gallery: Dict[str, List[np.ndarray]],
    strategy_names: List[str],
    save_path: str = None
):
    """Grid of dot maps: shapes down, strategies across."""
    n_rows = len(gallery)
    n_cols = len(strategy_names)

    fig, axes = plt.subplots(n_rows, n_cols, figsize=(1.6 * n_cols, 1.6 * n_rows))
    axes = np.atleast_2d(axes)

    for i, (shape_name, grids) in enumerate(gallery.items()):
        for j, grid in enumerate(grids):
            ax = axes[i, j]
            ax.imshow(grid, cmap=DOT_CMAP, vmin=0, vmax=2)
            ax.set_xticks([])
            ax.set_yticks([])
            if i == 0:
                ax.set_title(strategy_names[j], fontsize=8)
            if j == 0:
                ax.set_ylabel(shape_name, fontsize=8)

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=150)
        print(f"Saved to {save_path}")

    return fig


if __name__ == "__main__":
    print("=" * 60)
    print("HALFTONE STRATEGY GALLERY")
    print("=" * 60)

    gallery = build_gallery(SHAPES, GALLERY_STRATEGIES)

    for name, grids in gallery.items():
        lit = [int((g > 0).sum()) for g in grids]
        print(f"  {name:16s} lit cells per strategy: {lit}")

    plot_gallery(gallery, list(GALLERY_STRATEGIES), 'strategy_gallery.png')
