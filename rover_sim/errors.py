"""Engine exceptions."""


class InvalidStateError(ValueError):
    """Raised when a position carries a direction outside ``DIRECTIONS``.

    Not reachable through the command alphabet; seeing it means the caller
    built a malformed :class:`rover_sim.components.Position`.
    """
