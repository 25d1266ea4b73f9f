"""Command enumeration and filtering.

``Command`` is the recognized alphabet. Anything else in a command string is
dropped by :func:`filter_commands` before simulation and never shows up in
the move history.
"""

from enum import StrEnum

from pyrsistent import pvector
from pyrsistent.typing import PVector


class Command(StrEnum):
    """Single-character rover commands.

    Members:
        L: Rotate left (counter-clockwise) in place.
        R: Rotate right (clockwise) in place.
        A: Advance one cell in the facing direction.
    """

    L = "L"
    R = "R"
    A = "A"


COMMAND_ALPHABET = frozenset(command.value for command in Command)


def is_known_command(char: str) -> bool:
    """Return True if ``char`` belongs to the command alphabet (case sensitive)."""
    return char in COMMAND_ALPHABET


def filter_commands(commands: str) -> PVector[Command]:
    """Keep recognized commands in their original order."""
    return pvector(Command(char) for char in commands if is_known_command(char))
