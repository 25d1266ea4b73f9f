from typing import List, Tuple

from rover_sim.components import MapBounds, Position
from rover_sim.state import MoveOutcome
from rover_sim.types import Direction

PositionSpec = Tuple[int, int, str]


def make_position(x: int = 0, y: int = 0, direction: str = "N") -> Position:
    """Position from plain values, e.g. ``make_position(1, 2, "E")``."""
    return Position(x, y, Direction(direction))


def make_bounds(width: int = 5, height: int = 5) -> MapBounds:
    return MapBounds(width, height)


def make_history(entries: List[Tuple[bool, PositionSpec]]) -> List[MoveOutcome]:
    """Expected history from ``(accepted, (x, y, direction))`` rows."""
    return [MoveOutcome(accepted, make_position(*spec)) for accepted, spec in entries]
