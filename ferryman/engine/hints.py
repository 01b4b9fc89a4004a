"""Re-planning from an arbitrary configuration to suggest the next crossing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..core.models import GOAL_STATE, Configuration, Move
from ..utils.logger import get_logger
from .search import solve

LOGGER = get_logger(__name__)


class HintStatus(str, Enum):
    MOVE = "move"
    AT_GOAL = "at_goal"
    NO_PATH = "no_path"


@dataclass(frozen=True)
class Hint:
    status: HintStatus
    move: Optional[Move] = None
    remaining: Optional[int] = None

    def to_jsonable(self) -> dict:
        return {
            "status": self.status.value,
            "move": self.move.to_jsonable() if self.move else None,
            "remaining": self.remaining,
        }


def hint(current: Configuration, goal: Configuration = GOAL_STATE) -> Hint:
    """Suggest the first crossing of a shortest plan from ``current``.

    Being at the goal and being stuck are reported separately so the caller
    can tell them apart.
    """

    path = solve(current, goal)
    if path is None:
        LOGGER.info("No safe continuation from %s", current)
        return Hint(HintStatus.NO_PATH)
    if not path:
        return Hint(HintStatus.AT_GOAL, remaining=0)
    return Hint(HintStatus.MOVE, move=path[0], remaining=len(path))
