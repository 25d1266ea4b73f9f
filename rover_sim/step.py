"""Command execution and run reduction.

:func:`move_rover` executes one command against the map and :func:`run_rover`
folds it over a whole command string. Both are pure: they return new values
and never touch their inputs.

Order for a single command:

1. ``next_position`` computes the candidate (rotation or advance).
2. ``is_position_valid`` checks it against the bounds, for every command.
3. The candidate is kept if valid; otherwise the original position is kept
    and the outcome is flagged as rejected.
"""

import logging
from dataclasses import replace
from functools import reduce
from typing import Sequence

from pyrsistent.typing import PVector

from rover_sim.commands import Command, filter_commands
from rover_sim.components import MapBounds, Position
from rover_sim.moves import next_position
from rover_sim.state import MoveOutcome, RunState
from rover_sim.utils.grid import is_position_valid

log = logging.getLogger(__name__)


def move_rover(command: Command, position: Position, bounds: MapBounds) -> MoveOutcome:
    """Execute one command.

    Args:
        command (Command): Command to execute.
        position (Position): Position before the command.
        bounds (MapBounds): Map the rover must stay on.

    Returns:
        MoveOutcome: ``(True, candidate)`` if the candidate is on the map,
            ``(False, position)`` otherwise.

    Raises:
        ValueError: If the command is not recognized.
    """
    candidate = next_position(command, position)
    if is_position_valid(candidate, bounds):
        return MoveOutcome(True, candidate)
    log.debug("Rejected %s from %s: %s is outside %s", command, position, candidate, bounds)
    return MoveOutcome(False, position)


def step_run_state(state: RunState, command: Command, bounds: MapBounds) -> RunState:
    """Apply ``command`` to the current position and record the outcome."""
    outcome = move_rover(command, state.current.position, bounds)
    return replace(state, current=outcome, history=state.history.append(outcome))


def run_rover(commands: str, position: Position, bounds: MapBounds) -> PVector[MoveOutcome]:
    """Run a command string from ``position``.

    Unrecognized characters are dropped first and leave no trace in the
    result. A rejected move does not stop the run; later commands start from
    the last accepted position.

    Args:
        commands (str): Raw command text, e.g. ``"AALAR"``.
        position (Position): Initial rover position.
        bounds (MapBounds): Map bounds for every step.

    Returns:
        PVector[MoveOutcome]: One outcome per recognized command.
    """
    known = filter_commands(commands)
    if len(known) != len(commands):
        log.debug("Dropped %d unknown command(s)", len(commands) - len(known))
    seed = RunState(current=MoveOutcome(True, position))
    final = reduce(
        lambda state, command: step_run_state(state, command, bounds), known, seed
    )
    return final.history


def final_position(history: Sequence[MoveOutcome], initial: Position) -> Position:
    """Position after the last outcome, or ``initial`` when nothing ran."""
    if not history:
        return initial
    return history[-1].position
