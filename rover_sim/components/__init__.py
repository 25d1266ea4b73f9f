"""rover_sim.components
=================================

Value objects threaded through the simulation. Import them from here::

    from rover_sim.components import Position, MapBounds

Both are frozen dataclasses with no behavior; the functions in
:mod:`rover_sim.moves` and :mod:`rover_sim.step` derive new instances.
"""

from .bounds import MapBounds
from .position import Position

__all__ = [
    "MapBounds",
    "Position",
]
