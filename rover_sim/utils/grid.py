"""Grid boundary helpers."""

from rover_sim.components import MapBounds, Position


def is_position_valid(position: Position, bounds: MapBounds) -> bool:
    """Return True if ``position`` lies inside the inclusive ``bounds`` rectangle.

    A negative ``width`` or ``height`` leaves no valid cell, the origin included.
    """
    return 0 <= position.x <= bounds.width and 0 <= position.y <= bounds.height
