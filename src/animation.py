"""
Frame-by-frame halftone driving.

The halftone engine itself is stateless. FrameHistory and
HalftoneAnimator are the caller-side state: the history of shown
frames for trail strategies and a bounded cache of computed maps.
"""

import logging
from collections import OrderedDict
from typing import Iterable, Iterator, List, Mapping, Sequence, Tuple, Union

from .grid import GridSize, Position, unique_positions
from .halftone import MAX_TRAIL_FRAMES, generate_halftone_states
from .state_map import StateMap
from .strategies import HalftoneStrategy, TrailStrategy, strategy_from_dict

logger = logging.getLogger(__name__)

# Cached maps kept per animator before the oldest is evicted
CACHE_LIMIT = 100


class FrameHistory:
    """
    Most-recent-first list of shown frames, capped in length.

    The cap is min(max_length, MAX_TRAIL_FRAMES).
    """

    def __init__(self, max_length: int = MAX_TRAIL_FRAMES):
        assert max_length >= 1, "max_length must be >= 1"
        self.max_length = min(max_length, MAX_TRAIL_FRAMES)
        self._frames: List[List[Position]] = []

    def push(self, frame: Iterable[Position]):
        """Record a frame as the most recent one."""
        self._frames.insert(0, unique_positions(frame))
        del self._frames[self.max_length:]

    def frames(self) -> List[List[Position]]:
        """Snapshot of the stored frames, newest first."""
        return [list(f) for f in self._frames]

    def clear(self):
        self._frames.clear()

    def __len__(self) -> int:
        return len(self._frames)

    def __iter__(self) -> Iterator[List[Position]]:
        return iter(self.frames())


class HalftoneAnimator:
    """
    Steps through a frame sequence, producing one state map per frame.

    Usage:
        animator = HalftoneAnimator(traveling_arrow(), TrailStrategy(length=3))
        for states in animator.run(cycles=2):
            draw(states)
    """

    def __init__(
        self,
        frames: Sequence[Iterable[Position]],
        strategy: Union[HalftoneStrategy, Mapping],
        grid_size: GridSize = 5,
        cache_limit: int = CACHE_LIMIT
    ):
        """
        Args:
            frames: Full cells of each animation step
            strategy: Strategy dataclass or tagged dict
            grid_size: Grid side length or (width, height)
            cache_limit: Maximum cached maps (non-trail strategies)
        """
        assert len(frames) > 0, "animation needs at least one frame"
        if isinstance(strategy, Mapping):
            strategy = strategy_from_dict(strategy)

        self.frames = [unique_positions(f) for f in frames]
        self.strategy = strategy
        self.grid_size = grid_size
        self.cache_limit = cache_limit

        history_length = max(strategy.length, 1) if isinstance(strategy, TrailStrategy) else 1
        self.history = FrameHistory(history_length)
        self._cache: "OrderedDict[Tuple[int, HalftoneStrategy], StateMap]" = OrderedDict()
        self.index = 0

    @property
    def uses_history(self) -> bool:
        return isinstance(self.strategy, TrailStrategy)

    def states_for(self, index: int) -> StateMap:
        """State map for one frame given the current history."""
        frame = self.frames[index]

        if self.uses_history:
            # Trail output depends on what was shown before; never cache it
            return generate_halftone_states(
                frame, self.strategy, self.grid_size, self.history.frames()
            )

        key = (index, self.strategy)
        if key in self._cache:
            self._cache.move_to_end(key)
            return self._cache[key]

        states = generate_halftone_states(frame, self.strategy, self.grid_size)
        self._cache[key] = states
        if len(self._cache) > self.cache_limit:
            evicted, _ = self._cache.popitem(last=False)
            logger.debug("evicted cached frame %d", evicted[0])
        return states

    def step(self) -> StateMap:
        """Render the current frame, record it, and advance (wrapping)."""
        states = self.states_for(self.index)
        if self.uses_history:
            self.history.push(self.frames[self.index])
        self.index = (self.index + 1) % len(self.frames)
        return states

    def run(self, cycles: int = 1) -> Iterator[StateMap]:
        """Yield state maps for the given number of full passes."""
        for _ in range(cycles * len(self.frames)):
            yield self.step()

    def reset(self):
        """Back to the first frame with an empty history."""
        self.index = 0
        self.history.clear()

    @property
    def cache_size(self) -> int:
        return len(self._cache)
