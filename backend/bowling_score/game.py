"""Ten-pin bowling game: roll submission and score computation."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, List, Optional

from .exceptions import BowlingError, TooManyRolls, UnfinishedGame
from .services.validation import PINS, validate_frame_total, validate_pins

logger = logging.getLogger(__name__)

FRAMES = 10
BASE_ROLL_LIMIT = 20
MAX_ROLLS_IN_LAST_FRAME = 3


@dataclass
class FrameCursor:
    """Position of the next roll plus the number of rolls the game will take.

    ``roll_limit`` starts at two rolls per frame and is adjusted as the game
    unfolds: each strike in frames 1-9 saves one roll, and a strike or spare
    in the last frame earns one bonus roll.
    """

    frame: int = 1
    roll_in_frame: int = 1
    roll_limit: int = BASE_ROLL_LIMIT

    @property
    def in_last_frame(self) -> bool:
        return self.frame == FRAMES

    def close_frame(self) -> None:
        self.frame += 1
        self.roll_in_frame = 1


class Game:
    """A single bowler's game.

    Rolls are validated on submission and a rejected roll leaves the game
    untouched. The score is available once every required roll is in.
    """

    def __init__(self) -> None:
        self._rolls: List[int] = []
        self._cursor = FrameCursor()

    def __repr__(self) -> str:
        return (
            f"Game(frame={self.frame}, roll_in_frame={self.roll_in_frame}, "
            f"rolls={len(self._rolls)}/{self.roll_limit})"
        )

    @property
    def rolls(self) -> List[int]:
        return list(self._rolls)

    @property
    def frame(self) -> int:
        return self._cursor.frame

    @property
    def roll_in_frame(self) -> int:
        return self._cursor.roll_in_frame

    @property
    def roll_limit(self) -> int:
        return self._cursor.roll_limit

    @property
    def is_complete(self) -> bool:
        return len(self._rolls) >= self._cursor.roll_limit

    @property
    def rolls_remaining(self) -> int:
        return max(self._cursor.roll_limit - len(self._rolls), 0)

    def submit_roll(self, points: Any) -> None:
        try:
            self._verify_roll(points)
        except BowlingError as exc:
            logger.info("Rejected roll %r in frame %d: %s", points, self.frame, exc.code)
            raise

        cursor = self._cursor
        if points == PINS and cursor.roll_in_frame == 1 and not cursor.in_last_frame:
            cursor.roll_limit -= 1
            self._record(points)
            cursor.close_frame()
            return

        if cursor.in_last_frame and self._earns_bonus_roll(points):
            cursor.roll_limit += 1

        self._record(points)

        if cursor.roll_in_frame > 1 and not cursor.in_last_frame:
            cursor.close_frame()
        else:
            cursor.roll_in_frame += 1

    def get_score(self) -> int:
        if not self.is_complete:
            raise UnfinishedGame(len(self._rolls), self._cursor.roll_limit)

        rolls = self._rolls
        score = 0
        r = 0
        for _ in range(FRAMES):
            if rolls[r] == PINS:
                score += PINS + rolls[r + 1] + rolls[r + 2]
                r += 1
                continue
            if rolls[r] + rolls[r + 1] == PINS:
                score += PINS + rolls[r + 2]
            else:
                score += rolls[r] + rolls[r + 1]
            r += 2
        return score

    def frames(self) -> List[List[int]]:
        """Group the rolls made so far into ten frames."""
        frames: List[List[int]] = [[] for _ in range(FRAMES)]
        idx = 0
        for pins in self._rolls:
            current = frames[idx]
            current.append(pins)
            if idx < FRAMES - 1 and (len(current) == 2 or current == [PINS]):
                idx += 1
        return frames

    def frame_scores(self) -> List[Optional[int]]:
        """Score every frame whose bonus rolls are already known.

        Frames that are unfinished, or still waiting on bonus rolls, are
        reported as ``None``.
        """
        rolls = self._rolls
        scores: List[Optional[int]] = []
        r = 0
        for frame in range(FRAMES):
            last = frame == FRAMES - 1
            if r >= len(rolls):
                scores.append(None)
                continue
            if rolls[r] == PINS:
                needed, step = 3, 1
            elif r + 1 < len(rolls) and rolls[r] + rolls[r + 1] == PINS:
                needed, step = 3, 2
            else:
                needed, step = 2, 2
            if r + needed > len(rolls):
                scores.append(None)
            else:
                scores.append(sum(rolls[r:r + needed]))
            if last:
                break
            r += step
        return scores

    def _verify_roll(self, points: Any) -> None:
        validate_pins(points)
        cursor = self._cursor
        if not cursor.in_last_frame and cursor.roll_in_frame > 1:
            validate_frame_total(cursor.frame, self._rolls[-1], points)
        # Frame 10 has no cross-roll overflow check: any single roll in 0..10
        # is accepted there.
        if (
            len(self._rolls) >= cursor.roll_limit
            or cursor.roll_in_frame > MAX_ROLLS_IN_LAST_FRAME
        ):
            raise TooManyRolls(len(self._rolls), cursor.roll_limit)

    def _earns_bonus_roll(self, points: int) -> bool:
        cursor = self._cursor
        if cursor.roll_in_frame == 1:
            return points == PINS
        if cursor.roll_in_frame == 2:
            previous = self._rolls[-1]
            return previous != PINS and previous + points == PINS
        return False

    def _record(self, points: int) -> None:
        self._rolls.append(points)
        logger.debug(
            "Roll %d: %d pins (frame %d, limit %d)",
            len(self._rolls),
            points,
            self._cursor.frame,
            self._cursor.roll_limit,
        )
        if self.is_complete:
            logger.debug("Game complete after %d rolls", len(self._rolls))
