# tests/unit/test_moves.py

import pytest
from typing import Tuple

from rover_sim.commands import Command
from rover_sim.components import Position
from rover_sim.errors import InvalidStateError
from rover_sim.moves import (
    COMMAND_FN_REGISTRY,
    advance,
    next_position,
    rotate,
    rotate_left,
    rotate_right,
)
from rover_sim.types import DIRECTIONS, Direction
from tests.test_utils import make_position


@pytest.mark.parametrize(
    "command, start, expected",
    [
        # rotate left
        (Command.L, (0, 0, "N"), (0, 0, "W")),
        (Command.L, (0, 0, "W"), (0, 0, "S")),
        (Command.L, (0, 0, "S"), (0, 0, "E")),
        (Command.L, (0, 0, "E"), (0, 0, "N")),
        # rotate right
        (Command.R, (0, 0, "N"), (0, 0, "E")),
        (Command.R, (0, 0, "E"), (0, 0, "S")),
        (Command.R, (0, 0, "S"), (0, 0, "W")),
        (Command.R, (0, 0, "W"), (0, 0, "N")),
        # advance, no bounds applied
        (Command.A, (0, 0, "N"), (0, 1, "N")),
        (Command.A, (0, 0, "E"), (1, 0, "E")),
        (Command.A, (0, 0, "S"), (0, -1, "S")),
        (Command.A, (0, 0, "W"), (-1, 0, "W")),
    ],
)
def test_next_position(
    command: Command,
    start: Tuple[int, int, str],
    expected: Tuple[int, int, str],
) -> None:
    assert next_position(command, make_position(*start)) == make_position(*expected)


def test_next_position_accepts_plain_characters() -> None:
    assert next_position("A", make_position(2, 2, "E")) == make_position(3, 2, "E")  # type: ignore[arg-type]


@pytest.mark.parametrize("command", ["X", "l", "", "AA"])
def test_next_position_unknown_command_raises(command: str) -> None:
    with pytest.raises(ValueError, match="Command is not valid"):
        next_position(command, make_position())  # type: ignore[arg-type]


def test_registry_covers_alphabet() -> None:
    assert set(COMMAND_FN_REGISTRY) == set(Command)


@pytest.mark.parametrize("direction", list(Direction))
def test_left_then_right_is_identity(direction: Direction) -> None:
    start = Position(2, 3, direction)
    assert rotate_right(rotate_left(start)) == start
    assert rotate_left(rotate_right(start)) == start


@pytest.mark.parametrize("direction", list(Direction))
def test_four_rotations_return_to_start(direction: Direction) -> None:
    start = Position(1, 1, direction)
    left = right = start
    for _ in range(4):
        left = rotate_left(left)
        right = rotate_right(right)
    assert left == start
    assert right == start


@pytest.mark.parametrize("direction", list(Direction))
@pytest.mark.parametrize("rotate_fn", [rotate_left, rotate_right])
def test_rotation_keeps_coordinates(rotate_fn, direction: Direction) -> None:
    start = Position(-3, 7, direction)
    turned = rotate_fn(start)
    assert (turned.x, turned.y) == (start.x, start.y)
    assert turned.direction in DIRECTIONS


def test_rotate_left_from_first_wraps_to_last() -> None:
    # (0 - 1) must land on index 3, not a negative index
    assert rotate(make_position(0, 0, "N"), -1).direction == DIRECTIONS[-1]
    assert rotate(make_position(0, 0, "W"), 1).direction == DIRECTIONS[0]


@pytest.mark.parametrize("delta, expected", [(-4, "N"), (-3, "E"), (2, "S"), (4, "N"), (5, "E")])
def test_rotate_by_delta(delta: int, expected: str) -> None:
    assert rotate(make_position(0, 0, "N"), delta).direction == Direction(expected)


def test_advance_keeps_direction() -> None:
    start = make_position(4, 4, "S")
    assert advance(start) == make_position(4, 3, "S")


def test_moves_do_not_mutate_input() -> None:
    start = make_position(1, 1, "N")
    advance(start)
    rotate_left(start)
    assert start == make_position(1, 1, "N")


@pytest.mark.parametrize("move_fn", [rotate_left, rotate_right, advance])
def test_unknown_direction_raises(move_fn) -> None:
    broken = Position(0, 0, "Q")  # type: ignore[arg-type]
    with pytest.raises(InvalidStateError):
        move_fn(broken)
