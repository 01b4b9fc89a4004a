"""Game sessions: explicit, immutable play state layered over the solver.

A :class:`GameSession` holds everything a front-end needs between two user
actions (current banks, history, the precomputed optimal solution and the
playback position). Every operation returns a new session instead of
mutating the old one, so callers can keep, compare or discard sessions
freely.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Optional, Tuple

from ..core.constants import GameMode
from ..core.exceptions import SessionError, ValidationError
from ..core.models import GOAL_STATE, INITIAL_STATE, Configuration, Move
from ..utils.logger import get_logger
from .hints import Hint, hint
from .moves import legal_moves
from .safety import is_safe
from .search import solve
from .validator import PathValidator

LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class SessionConfig:
    """Configuration values driving a game session."""

    mode: GameMode = GameMode.AUTO
    start: Configuration = INITIAL_STATE
    goal: Configuration = GOAL_STATE


class OutcomeStatus(str, Enum):
    ACCEPTED = "accepted"
    UNSAFE = "unsafe"
    ILLEGAL = "illegal"


@dataclass(frozen=True)
class MoveOutcome:
    """Result of submitting a move; ``session`` is unchanged unless accepted."""

    status: OutcomeStatus
    session: "GameSession"
    message: str = ""

    @property
    def accepted(self) -> bool:
        return self.status == OutcomeStatus.ACCEPTED


@dataclass(frozen=True)
class GameSession:
    config: SessionConfig
    state: Configuration
    solution: Optional[Tuple[Move, ...]]
    history: Tuple[Configuration, ...] = field(default=())
    step: int = 0

    @property
    def mode(self) -> GameMode:
        return self.config.mode

    @property
    def won(self) -> bool:
        return self.state == self.config.goal

    @property
    def minimum_moves(self) -> Optional[int]:
        """Length of the optimal solution from the start, or None if there is none."""
        if self.solution is None:
            return None
        return len(self.solution)

    @property
    def can_advance(self) -> bool:
        return (
            self.mode == GameMode.AUTO
            and self.solution is not None
            and self.step < len(self.solution)
        )

    def legal_moves(self) -> List[Move]:
        return legal_moves(self.state)

    def apply(self, move: Move) -> MoveOutcome:
        """Re-validate ``move`` against the current banks and commit it if allowed."""

        if self.mode == GameMode.AUTO:
            raise SessionError("Moves cannot be chosen by hand in auto mode")
        if not is_safe(move.result):
            LOGGER.info("Rejected unsafe move '%s' from %s", move.label, self.state)
            return MoveOutcome(OutcomeStatus.UNSAFE, self, f"'{move.label}' is not safe")
        try:
            PathValidator(self.config.goal).check_transition(self.state, move)
        except ValidationError as exc:
            LOGGER.info("Rejected illegal move from %s: %s", self.state, exc)
            return MoveOutcome(OutcomeStatus.ILLEGAL, self, str(exc))

        updated = replace(self, state=move.result, history=self.history + (move.result,))
        return MoveOutcome(OutcomeStatus.ACCEPTED, updated)

    def advance(self) -> "GameSession":
        """Play the next step of the precomputed solution (auto mode)."""

        solution = self.solution or ()
        if not self.can_advance:
            raise SessionError(
                f"Cannot advance playback in {self.mode.value} mode at step {self.step}"
            )
        move = solution[self.step]
        return replace(
            self,
            state=move.result,
            history=self.history + (move.result,),
            step=self.step + 1,
        )

    def reset(self) -> "GameSession":
        return replace(self, state=self.config.start, history=(self.config.start,), step=0)

    def hint(self) -> Hint:
        if self.mode != GameMode.ASSISTED:
            raise SessionError(f"Hints are only available in assisted mode, not {self.mode.value}")
        return hint(self.state, self.config.goal)


def start_session(config: Optional[SessionConfig] = None) -> GameSession:
    """Solve once from the configured start and return a fresh session."""

    config = config or SessionConfig()
    path = solve(config.start, config.goal)
    solution = tuple(path) if path is not None else None
    if solution is None:
        LOGGER.warning("No solution from %s to %s", config.start, config.goal)
    else:
        LOGGER.info("Session started in %s mode; minimum crossings: %d", config.mode.value, len(solution))
    return GameSession(
        config=config,
        state=config.start,
        solution=solution,
        history=(config.start,),
    )
