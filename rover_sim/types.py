"""Common type aliases and enumerations.

``CommandFn`` is the extension point used by :mod:`rover_sim.moves` to map a
command onto the candidate position it would produce.
"""

from enum import StrEnum
from typing import Callable, List, TYPE_CHECKING


# Forward declaration for CommandFn typing to avoid circular imports:
if TYPE_CHECKING:
    from rover_sim.components import Position

CommandFn = Callable[["Position"], "Position"]


class Direction(StrEnum):
    """Facing direction of a rover (serialized as its single letter)."""

    N = "N"
    E = "E"
    S = "S"
    W = "W"


DIRECTIONS: List[Direction] = [Direction.N, Direction.E, Direction.S, Direction.W]
"""Clockwise cyclic ordering; ``R`` steps forward, ``L`` steps backward."""
