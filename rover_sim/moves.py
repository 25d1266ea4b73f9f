"""Built-in command functions.

Each *command function* maps a ``Position`` to the candidate ``Position`` the
rover would occupy after executing one command. Nothing here looks at the map
bounds; :func:`rover_sim.step.move_rover` validates candidates afterwards.

Contract (``CommandFn``):

* Must return a new ``Position`` and never mutate its input.
* Rotations only change ``direction``; advances only change ``x``/``y``.
"""

from dataclasses import replace
from typing import Dict, Tuple

from rover_sim.commands import Command
from rover_sim.components import Position
from rover_sim.errors import InvalidStateError
from rover_sim.types import CommandFn, DIRECTIONS, Direction


DIRECTION_DELTAS: Dict[Direction, Tuple[int, int]] = {
    Direction.N: (0, 1),
    Direction.E: (1, 0),
    Direction.S: (0, -1),
    Direction.W: (-1, 0),
}


def _direction_index(direction: Direction) -> int:
    try:
        return DIRECTIONS.index(direction)
    except ValueError as exc:
        raise InvalidStateError(f"Unknown direction: {direction!r}") from exc


def rotate(position: Position, delta: int) -> Position:
    """Turn ``delta`` steps clockwise (negative for counter-clockwise).

    The index wraps around ``DIRECTIONS``, so L from N gives W.
    """
    index = _direction_index(position.direction)
    count = len(DIRECTIONS)
    return replace(position, direction=DIRECTIONS[(index + delta + count) % count])


def rotate_left(position: Position) -> Position:
    """Quarter turn counter-clockwise (N -> W -> S -> E -> N)."""
    return rotate(position, -1)


def rotate_right(position: Position) -> Position:
    """Quarter turn clockwise (N -> E -> S -> W -> N)."""
    return rotate(position, 1)


def advance(position: Position) -> Position:
    """Step one cell in the facing direction, bounds unchecked."""
    delta = DIRECTION_DELTAS.get(position.direction)
    if delta is None:
        raise InvalidStateError(f"Unknown direction: {position.direction!r}")
    dx, dy = delta
    return replace(position, x=position.x + dx, y=position.y + dy)


# Command function registry, keyed by the command alphabet
COMMAND_FN_REGISTRY: Dict[Command, CommandFn] = {
    Command.L: rotate_left,
    Command.R: rotate_right,
    Command.A: advance,
}


def next_position(command: Command, position: Position) -> Position:
    """Candidate position after ``command``, ignoring the map.

    Raises:
        ValueError: If ``command`` is not part of the alphabet.
        InvalidStateError: If ``position`` has an unknown direction.
    """
    command_fn = COMMAND_FN_REGISTRY.get(command)
    if command_fn is None:
        raise ValueError("Command is not valid")
    return command_fn(position)
