"""
Trail filmstrip.

Steps an animation sequence through the trail strategy and lays the
frames out left to right, one strip per trail length.
"""

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.colors import ListedColormap
from typing import Dict, List
import sys
sys.path.insert(0, '..')

from src.animation import HalftoneAnimator
from src.shapes import SEQUENCES
from src.state_map import to_grid
from src.strategies import TrailStrategy

DOT_CMAP = ListedColormap(['#f4f4f5', '#d2d3d6', '#1f2123'])


def run_trails(
    frames: list,
    lengths: List[int],
    cycles: int = 1
) -> Dict[int, List[np.ndarray]]:
    """Dense grids for each frame, keyed by trail length."""
    strips = {}
    for length in lengths:
        animator = HalftoneAnimator(frames, TrailStrategy(length=length))
        strips[length] = [to_grid(s, 5) for s in animator.run(cycles=cycles)]
    return strips


def plot_filmstrip(
    strips: Dict[int, List[np.ndarray]],
    title: str,
    save_path: str = None
):
    n_rows = len(strips)
    n_cols = max(len(s) for s in strips.values())

    fig, axes = plt.subplots(n_rows, n_cols, figsize=(1.2 * n_cols, 1.4 * n_rows))
    axes = np.atleast_2d(axes)

    for i, (length, grids) in enumerate(strips.items()):
        for j in range(n_cols):
            ax = axes[i, j]
            ax.set_xticks([])
            ax.set_yticks([])
            if j < len(grids):
                ax.imshow(grids[j], cmap=DOT_CMAP, vmin=0, vmax=2)
            else:
                ax.axis('off')
            if j == 0:
                ax.set_ylabel(f"length {length}", fontsize=8)

    fig.suptitle(title)
    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=150)
        print(f"Saved to {save_path}")

    return fig


if __name__ == "__main__":
    print("=" * 60)
    print("TRAIL FILMSTRIPS")
    print("=" * 60)

    for name in ['traveling_arrow', 'scanning_line', 'snake', 'radar_sweep']:
        print(f"\n{name}...")
        strips = run_trails(SEQUENCES[name], lengths=[1, 2, 4])
        for length, grids in strips.items():
            mids = [int((g == 1).sum()) for g in grids]
            print(f"  length {length}: mid cells per frame {mids}")
        plot_filmstrip(strips, name, f"trail_{name}.png")
