"""Shared constants and enumerations for the ferryman puzzle."""

from __future__ import annotations

from enum import Enum
from typing import Tuple


class Side(str, Enum):
    """River banks an entity can stand on."""

    NEAR = "near"
    FAR = "far"

    def flipped(self) -> "Side":
        return Side.FAR if self is Side.NEAR else Side.NEAR


class Entity(str, Enum):
    """Everything that has to cross the river."""

    WOLF = "wolf"
    GOAT = "goat"
    CABBAGE = "cabbage"
    FERRYMAN = "ferryman"


class GameMode(str, Enum):
    """Ways a session can be played."""

    AUTO = "auto"
    MANUAL = "manual"
    ASSISTED = "assisted"


ENTITY_ORDER: Tuple[Entity, ...] = (Entity.WOLF, Entity.GOAT, Entity.CABBAGE, Entity.FERRYMAN)
CARGO: Tuple[Entity, ...] = ENTITY_ORDER[:3]

# (predator, prey) pairs that may only share a bank while the ferryman is there.
FORBIDDEN_PAIRS: Tuple[Tuple[Entity, Entity], ...] = (
    (Entity.WOLF, Entity.GOAT),
    (Entity.GOAT, Entity.CABBAGE),
)

SOLO_LABEL = "Ferryman crosses alone"
CARRY_LABELS = {
    Entity.WOLF: "Carry wolf",
    Entity.GOAT: "Carry goat",
    Entity.CABBAGE: "Carry cabbage",
}

# Accepted spellings when parsing a configuration; "1"/"2" is the legacy bank numbering.
SIDE_ALIASES = {
    "near": Side.NEAR,
    "n": Side.NEAR,
    "1": Side.NEAR,
    "far": Side.FAR,
    "f": Side.FAR,
    "2": Side.FAR,
}
