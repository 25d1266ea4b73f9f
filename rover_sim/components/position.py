"""Position component.

Immutable integer grid coordinates plus facing direction. Every command
produces a new ``Position``; nothing is updated in place.
"""

from dataclasses import dataclass

from rover_sim.types import Direction


@dataclass(frozen=True)
class Position:
    """Rover pose.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at bottom, grows northward).
        direction: Facing direction.
    """

    x: int
    y: int
    direction: Direction
