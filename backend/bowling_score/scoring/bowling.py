"""Ten-pin bowling scoring engine.

Event-driven wrapper around :class:`~bowling_score.game.Game`: ``ROLL``
events carry the number of pins knocked down and are validated as they are
applied.
"""
from typing import Any, Dict, List, Optional, Sequence

from ..exceptions import InvalidInput
from ..game import Game
from ..schemas import GameSummary
from ..services.validation import validate_roll_sequence


def init_state(config: Dict) -> Dict:
    return {
        "config": dict(config or {}),
        "game": Game(),
    }


def apply(event: Dict, state: Dict) -> Dict:
    if not isinstance(event, dict) or event.get("type") != "ROLL":
        raise InvalidInput(event)
    state["game"].submit_roll(event.get("pins"))
    return state


def _running_totals(scores: List[Optional[int]]) -> List[Optional[int]]:
    totals: List[Optional[int]] = []
    total = 0
    for s in scores:
        if s is None:
            # Later frames can't have a running total until this one is known
            totals.extend([None] * (len(scores) - len(totals)))
            break
        total += s
        totals.append(total)
    return totals


def summary(state: Dict) -> Dict:
    game: Game = state["game"]
    scores = game.frame_scores()
    return GameSummary(
        frames=game.frames(),
        scores=scores,
        cumulative=_running_totals(scores),
        total=game.get_score() if game.is_complete else None,
        complete=game.is_complete,
        rolls_made=len(game.rolls),
        rolls_required=game.roll_limit,
    ).model_dump(by_alias=True)


def score_rolls(rolls: Sequence[Any]) -> int:
    """Play ``rolls`` through a fresh game and return the final score."""
    game = Game()
    for pins in validate_roll_sequence(rolls):
        game.submit_roll(pins)
    return game.get_score()
