"""Command line front end.

Collects the three simulation inputs (command string, start position, map
bounds), runs them and prints the move history::

    rover-sim AARAA --start 0,0,N --bounds 5x5
"""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import dataclass
from typing import Sequence

from rover_sim.components import MapBounds, Position
from rover_sim.state import MoveOutcome
from rover_sim.step import final_position, run_rover
from rover_sim.types import Direction

log = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


@dataclass(frozen=True)
class RoverConfig:
    """Inputs of one run."""

    commands: str
    position: Position = Position(0, 0, Direction.N)
    bounds: MapBounds = MapBounds(5, 5)


def _position(value: str) -> Position:
    parts = [part.strip() for part in value.split(",")]
    if len(parts) != 3:
        raise argparse.ArgumentTypeError(f"position must look like X,Y,D: {value!r}")
    raw_x, raw_y, raw_direction = parts
    try:
        x, y = int(raw_x), int(raw_y)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"position coordinates must be integers: {value!r}") from exc
    try:
        direction = Direction(raw_direction.upper())
    except ValueError as exc:
        choices = "".join(direction.value for direction in Direction)
        raise argparse.ArgumentTypeError(f"direction must be one of {choices}: {raw_direction!r}") from exc
    return Position(x, y, direction)


def _bounds(value: str) -> MapBounds:
    parts = value.lower().split("x")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"bounds must look like WIDTHxHEIGHT: {value!r}")
    try:
        return MapBounds(int(parts[0]), int(parts[1]))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"bounds must be integers: {value!r}") from exc


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rover-sim",
        description=(
            "Drive a rover across a rectangular grid. L/R rotate in place, A advances one cell; "
            "other characters are ignored and moves off the grid are rejected."
        ),
    )
    parser.add_argument("commands", help="Command string, e.g. AARAL")
    parser.add_argument("--start", type=_position, default=RoverConfig.position, help="Start position X,Y,D (default 0,0,N)")
    parser.add_argument("--bounds", type=_bounds, default=RoverConfig.bounds, help="Inclusive map corner WIDTHxHEIGHT (default 5x5)")
    parser.add_argument("--json", action="store_true", help="Print the history as JSON")
    parser.add_argument("--verbose", action="store_true", help="Log rejected moves and dropped commands")
    return parser


def _format_position(position: Position) -> str:
    return f"{position.x} {position.y} {position.direction}"


def _outcome_payload(outcome: MoveOutcome) -> dict[str, object]:
    return {
        "accepted": outcome.accepted,
        "x": outcome.position.x,
        "y": outcome.position.y,
        "direction": str(outcome.position.direction),
    }


def format_history(history: Sequence[MoveOutcome], initial: Position) -> list[str]:
    lines = [
        f"{'ok' if outcome.accepted else 'blocked'} {_format_position(outcome.position)}"
        for outcome in history
    ]
    lines.append(f"final {_format_position(final_position(history, initial))}")
    return lines


def run(config: RoverConfig, *, as_json: bool = False) -> str:
    history = run_rover(config.commands, config.position, config.bounds)
    rejected = sum(1 for outcome in history if not outcome.accepted)
    log.info("Executed %d command(s), %d rejected", len(history), rejected)
    if as_json:
        return json.dumps([_outcome_payload(outcome) for outcome in history])
    return "\n".join(format_history(history, config.position))


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format=LOG_FORMAT)
    config = RoverConfig(commands=args.commands, position=args.start, bounds=args.bounds)
    print(run(config, as_json=args.json))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
