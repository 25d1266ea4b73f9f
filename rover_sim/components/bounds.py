"""Map bounds component."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MapBounds:
    """Inclusive upper corner of the grid; the lower corner is always ``(0, 0)``.

    Attributes:
        width: Largest valid ``x``. A 5 wide map spans ``x`` in ``0..5``.
        height: Largest valid ``y``.

    Negative values are accepted and simply leave no valid cell.
    """

    width: int
    height: int
