"""
Usage card demonstration.

Generates randomized dashboard and compact usage charts and plots
them next to the inputs that produced them.
"""

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.colors import ListedColormap
from typing import List, Tuple
import sys
sys.path.insert(0, '..')

from src.usage import (
    DASHBOARD_CARD,
    COMPACT_CARD,
    UsageSeriesConfig,
    UsageSample,
    sample_usage,
    usage_state_map,
)
from src.state_map import to_grid

# empty, mid, full
CARD_CMAP = ListedColormap(['#d9d9d9', '#d2d3d6', '#1672eb'])

# (label, full-scale amount)
CARD_KINDS = [
    ('Usage ($)', 120.0),
    ('Compute units', 0.009),
    ('Storage (MB)', 5000.0),
]


def generate_cards(
    config: UsageSeriesConfig,
    n_cards: int = 6,
    seed: int = 42
) -> List[Tuple[str, UsageSample, np.ndarray]]:
    """
    Draw random amounts and build one chart per amount.

    Returns:
        List of (label, sample, dense grid) tuples
    """
    rng = np.random.default_rng(seed)
    cards = []

    for i in range(n_cards):
        label, full_scale = CARD_KINDS[i % len(CARD_KINDS)]
        amount = rng.uniform(0, full_scale)
        sample = sample_usage(amount, full_scale, rng)
        states = usage_state_map(sample.level, sample.trend, config, rng)
        cards.append((label, sample, to_grid(states, (config.columns, config.rows))))

    return cards


def plot_cards(
    cards: List[Tuple[str, UsageSample, np.ndarray]],
    title: str,
    save_path: str = None
):
    """One panel per card, inputs in the panel title."""
    n = len(cards)
    n_cols = 3
    n_rows = int(np.ceil(n / n_cols))

    fig, axes = plt.subplots(n_rows, n_cols, figsize=(4 * n_cols, 2.4 * n_rows))
    axes = np.atleast_1d(axes).flatten()

    for ax, (label, sample, grid) in zip(axes, cards):
        ax.imshow(grid, cmap=CARD_CMAP, vmin=0, vmax=2)
        ax.set_title(f"{label}\nlevel={sample.level:.2f} trend={sample.trend:+.2f}",
                     fontsize=9)
        ax.set_xticks([])
        ax.set_yticks([])

    for ax in axes[n:]:
        ax.axis('off')

    fig.suptitle(title)
    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=150)
        print(f"Saved to {save_path}")

    return fig


if __name__ == "__main__":
    print("=" * 60)
    print("USAGE CARD GENERATION")
    print("=" * 60)

    for name, config in [('dashboard', DASHBOARD_CARD), ('compact', COMPACT_CARD)]:
        print(f"\n{name}: {config.columns}x{config.rows}, ease={config.ease}")
        cards = generate_cards(config)
        for label, sample, grid in cards:
            path_cells = int((grid == 2).sum())
            print(f"  {label:14s} level={sample.level:.2f} "
                  f"trend={sample.trend:+.2f} path cells={path_cells}")
        plot_cards(cards, f"{name} cards", f"usage_cards_{name}.png")
