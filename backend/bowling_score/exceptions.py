from typing import Any, Optional

from pydantic import BaseModel


class ProblemDetail(BaseModel):
    """RFC 7807 compliant error payload."""

    type: str = "about:blank"
    title: str
    detail: Optional[str] = None
    status: int
    instance: Optional[str] = None
    code: str


class BowlingError(Exception):
    """Base class for bowling rule and input errors."""

    def __init__(
        self,
        status: int,
        title: str,
        *,
        code: str,
        detail: str | None = None,
        type_: str = "about:blank",
    ) -> None:
        super().__init__(detail or title)
        self.status = status
        self.title = title
        self.detail = detail
        self.type = type_
        self.code = code

    def to_problem(self, instance: str | None = None) -> ProblemDetail:
        return ProblemDetail(
            type=self.type,
            title=self.title,
            detail=self.detail,
            status=self.status,
            instance=instance,
            code=self.code,
        )


class InvalidInput(BowlingError, TypeError):
    def __init__(self, value: Any) -> None:
        super().__init__(
            status=422,
            title="Invalid input",
            detail=f"wrong type of points: expected int, got {type(value).__name__}",
            code="invalid_input",
        )
        self.value = value


class InvalidPinCount(BowlingError, ValueError):
    def __init__(self, points: int) -> None:
        super().__init__(
            status=422,
            title="Invalid pin count",
            detail=f"impossible number of points in a roll: {points}",
            code="invalid_pin_count",
        )
        self.points = points


class FrameOverflow(BowlingError, ValueError):
    def __init__(self, frame: int, frame_points: int) -> None:
        super().__init__(
            status=422,
            title="Frame overflow",
            detail=f"too many points in frame {frame}: 10 is max, got {frame_points}",
            code="frame_overflow",
        )
        self.frame = frame
        self.frame_points = frame_points


class TooManyRolls(BowlingError):
    def __init__(self, rolls_made: int, roll_limit: int) -> None:
        super().__init__(
            status=409,
            title="Too many rolls",
            detail=(
                f"a roll was made after the game has ended: "
                f"{rolls_made} (+1) rolls, limit {roll_limit}"
            ),
            code="too_many_rolls",
        )
        self.rolls_made = rolls_made
        self.roll_limit = roll_limit


class UnfinishedGame(BowlingError):
    def __init__(self, rolls_made: int, rolls_required: int) -> None:
        super().__init__(
            status=409,
            title="Unfinished game",
            detail=(
                f"game is not finished: {rolls_made} rolls out of "
                f"{rolls_required} are made"
            ),
            code="unfinished_game",
        )
        self.rolls_made = rolls_made
        self.rolls_required = rolls_required
