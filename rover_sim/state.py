"""Immutable run state.

A simulation run is a left fold over the filtered command sequence. The
accumulator is a frozen :class:`RunState`; every step produces a new one, so
runs are deterministic and can execute side by side without coordination.

Design notes:

* :class:`MoveOutcome` is the unit of the returned history. A rejected move
    is ordinary data (``accepted=False``), never an exception.
* ``history`` is a persistent vector (``pyrsistent.PVector``); appending
    shares structure with the previous run state instead of copying.
"""

from dataclasses import dataclass
from typing import Iterator, Tuple, Union

from pyrsistent import pvector
from pyrsistent.typing import PVector

from rover_sim.components import Position


@dataclass(frozen=True)
class MoveOutcome:
    """Result of a single command.

    Attributes:
        accepted (bool): False if the candidate position fell outside the map.
        position (Position): The new position when accepted, otherwise the
            unchanged position the command started from.

    Unpacks like a pair: ``accepted, position = outcome``.
    """

    accepted: bool
    position: Position

    def __iter__(self) -> Iterator[Union[bool, Position]]:
        yield self.accepted
        yield self.position

    def as_tuple(self) -> Tuple[bool, Position]:
        return self.accepted, self.position


@dataclass(frozen=True)
class RunState:
    """Fold accumulator for :func:`rover_sim.step.run_rover`.

    Attributes:
        current (MoveOutcome): Latest outcome. The run is seeded with an
            accepted outcome at the initial position which is not part of
            ``history``.
        history (PVector[MoveOutcome]): Outcomes so far, in execution order.
    """

    current: MoveOutcome
    history: PVector[MoveOutcome] = pvector()
