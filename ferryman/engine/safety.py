"""Safety rules: which banks may be left without the ferryman."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ..core.constants import FORBIDDEN_PAIRS, Entity, Side
from ..core.models import Configuration


@dataclass(frozen=True)
class Violation:
    """A forbidden pair left together on ``side`` while the ferryman is away."""

    predator: Entity
    prey: Entity
    side: Side


def is_safe(config: Configuration) -> bool:
    """Return False when the wolf is alone with the goat or the goat with the cabbage."""

    if config.wolf == config.goat and config.wolf != config.ferryman:
        return False
    if config.goat == config.cabbage and config.goat != config.ferryman:
        return False
    return True


def violations(config: Configuration) -> List[Violation]:
    found: List[Violation] = []
    for predator, prey in FORBIDDEN_PAIRS:
        side = config.side_of(predator)
        if side == config.side_of(prey) and side != config.ferryman:
            found.append(Violation(predator=predator, prey=prey, side=side))
    return found
