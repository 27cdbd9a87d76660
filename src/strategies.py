"""
Halftone strategy definitions.

Each strategy is a small frozen dataclass describing how mid cells
are derived from a set of full cells. Callers that carry strategies
as tagged dicts go through strategy_from_dict.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Union


class HalftoneError(Exception):
    """Base class for halftone configuration errors."""


class UnsupportedStrategyError(HalftoneError, ValueError):
    """Raised when a strategy tag or object is not one of the known kinds."""

    def __init__(self, strategy: Any):
        self.strategy = strategy
        super().__init__(f"unsupported halftone strategy: {strategy!r}")


class StrategyConfigError(HalftoneError, ValueError):
    """Raised when a tagged strategy has a missing or invalid field."""


class GradientDirection(Enum):
    """Which side of the shape the gradient halo grows on."""
    OUTWARD = "outward"
    INWARD = "inward"


@dataclass(frozen=True)
class NeighborsStrategy:
    """
    Anti-aliasing halo around every full cell.

    Attributes:
        orthogonal_only: Ignore diagonal offsets
        distance: Offset limit on each axis
    """
    orthogonal_only: bool = False
    distance: int = 1

    def __post_init__(self):
        assert self.distance >= 1, "distance must be >= 1"


@dataclass(frozen=True)
class TrailStrategy:
    """
    Motion blur from previous animation frames.

    Attributes:
        length: How many previous frames to draw as mid cells (0 draws none)
    """
    length: int

    def __post_init__(self):
        assert self.length >= 0, "length must be >= 0"


@dataclass(frozen=True)
class DistanceStrategy:
    """
    Glow: every cell within radius of some full cell.

    Attributes:
        radius: Euclidean radius in cell units
    """
    radius: float

    def __post_init__(self):
        assert self.radius > 0, "radius must be > 0"


@dataclass(frozen=True)
class GradientStrategy:
    """Directional halo relative to the shape's centroid."""
    direction: GradientDirection

    def __post_init__(self):
        # Accept the plain string value as well
        object.__setattr__(self, 'direction', GradientDirection(self.direction))


HalftoneStrategy = Union[
    NeighborsStrategy,
    TrailStrategy,
    DistanceStrategy,
    GradientStrategy,
]

def _field(tagged: Mapping[str, Any], *names: str, required: bool = True, default: Any = None):
    """First key present out of several spellings."""
    for name in names:
        if name in tagged:
            return tagged[name]
    if required:
        raise StrategyConfigError(
            f"{tagged.get('type')!r} strategy requires '{names[0]}'"
        )
    return default


def strategy_from_dict(tagged: Mapping[str, Any]) -> HalftoneStrategy:
    """
    Build a strategy from its tagged form.

    Examples:
        {"type": "neighbors", "orthogonalOnly": True, "distance": 2}
        {"type": "trail", "length": 3}
        {"type": "distance", "radius": 1.5}
        {"type": "gradient", "direction": "outward"}

    Raises:
        UnsupportedStrategyError: Unknown or missing type tag
        StrategyConfigError: Required field missing or out of range
    """
    kind = tagged.get("type")

    if kind == "gradient":
        direction = _field(tagged, "direction")
        try:
            return GradientStrategy(direction=direction)
        except ValueError as exc:
            raise StrategyConfigError(
                f"unknown gradient direction: {direction!r}"
            ) from exc

    if kind not in ("neighbors", "trail", "distance"):
        raise UnsupportedStrategyError(kind)

    try:
        if kind == "neighbors":
            return NeighborsStrategy(
                orthogonal_only=bool(_field(tagged, "orthogonalOnly", "orthogonal_only",
                                            required=False, default=False)),
                distance=int(_field(tagged, "distance", required=False, default=1)),
            )
        if kind == "trail":
            return TrailStrategy(length=int(_field(tagged, "length")))
        return DistanceStrategy(radius=float(_field(tagged, "radius")))
    except StrategyConfigError:
        raise
    except (AssertionError, TypeError, ValueError) as exc:
        raise StrategyConfigError(f"invalid {kind!r} strategy: {exc}") from exc
