"""Deterministic rule validation for crossing sequences."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from ..core.constants import CARGO, Entity
from ..core.exceptions import ValidationError
from ..core.models import GOAL_STATE, Configuration, Move
from ..utils.logger import get_logger
from .safety import is_safe, violations


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class PathValidator:
    """Replays a move sequence and checks every crossing against the rules."""

    def __init__(self, goal: Configuration = GOAL_STATE) -> None:
        self.goal = goal

    def validate(self, start: Configuration, path: Sequence[Move]) -> ValidationResult:
        messages: List[str] = []
        try:
            current = start
            for index, move in enumerate(path, start=1):
                try:
                    self.check_transition(current, move)
                except ValidationError as exc:
                    raise ValidationError(f"Step {index}: {exc}") from exc
                current = move.result
            self._check_goal(current)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def check_transition(self, source: Configuration, move: Move) -> None:
        """Raise :class:`ValidationError` unless ``move`` is a legal crossing from ``source``."""

        self._check_ferryman_crossed(source, move)
        self._check_cargo(source, move)
        self._check_safe(move)

    @staticmethod
    def _check_ferryman_crossed(source: Configuration, move: Move) -> None:
        if move.result.ferryman == source.ferryman:
            raise ValidationError(f"'{move.label}' does not move the ferryman")

    @staticmethod
    def _check_cargo(source: Configuration, move: Move) -> None:
        moved = [
            cargo for cargo in CARGO
            if source.side_of(cargo) != move.result.side_of(cargo)
        ]
        if len(moved) > 1:
            names = ", ".join(cargo.value for cargo in moved)
            raise ValidationError(f"'{move.label}' moves more than one item: {names}")
        if len(move.carried) > 1 or Entity.FERRYMAN in move.carried:
            raise ValidationError(f"'{move.label}' declares an invalid load")
        if tuple(moved) != tuple(move.carried):
            declared = [cargo.value for cargo in move.carried]
            actual = [cargo.value for cargo in moved]
            raise ValidationError(f"'{move.label}' declares {declared} but moves {actual}")
        for cargo in moved:
            if source.side_of(cargo) != source.ferryman:
                raise ValidationError(
                    f"'{move.label}' takes the {cargo.value} from the other bank"
                )

    @staticmethod
    def _check_safe(move: Move) -> None:
        if is_safe(move.result):
            return
        problems = ", ".join(
            f"{v.predator.value} with {v.prey.value} on the {v.side.value} bank"
            for v in violations(move.result)
        )
        raise ValidationError(f"'{move.label}' leaves {problems}")

    def _check_goal(self, final: Configuration) -> None:
        if final != self.goal:
            raise ValidationError(f"Sequence ends at {final}, expected {self.goal}")
