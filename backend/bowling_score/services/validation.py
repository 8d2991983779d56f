from typing import Any, Sequence

from ..exceptions import FrameOverflow, InvalidInput, InvalidPinCount

PINS = 10


def validate_pins(value: Any) -> int:
    """Validate a single roll's pin count and return it.

    Rules:
    - ``value`` must be an ``int`` (booleans, floats and strings are rejected)
    - ``value`` must be within ``0..10``
    """

    # Reject booleans explicitly (bool is a subclass of int in Python)
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInput(value)
    if value < 0 or value > PINS:
        raise InvalidPinCount(value)
    return value


def validate_frame_total(frame: int, previous: int, points: int) -> None:
    """Reject a second roll that would knock down more pins than stand."""

    if previous + points > PINS:
        raise FrameOverflow(frame, previous + points)


def validate_roll_sequence(rolls: Sequence[Any]) -> list[Any]:
    """Check that ``rolls`` is a sequence of rolls, leaving each roll as is.

    Individual pin counts are validated one at a time as they are submitted
    to a game, so the first offending roll is the one reported.
    """
    if not isinstance(rolls, Sequence) or isinstance(rolls, (str, bytes)):
        raise InvalidInput(rolls)
    return list(rolls)
