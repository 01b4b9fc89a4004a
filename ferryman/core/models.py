"""Data models supporting the ferryman puzzle."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from .constants import ENTITY_ORDER, SIDE_ALIASES, Entity, Side
from .exceptions import InvalidConfigurationError

_SEPARATORS = re.compile(r"[\s,;]+")


@dataclass(frozen=True)
class Configuration:
    """Where every entity stands, in canonical order wolf, goat, cabbage, ferryman."""

    wolf: Side
    goat: Side
    cabbage: Side
    ferryman: Side

    def __post_init__(self) -> None:
        for entity in ENTITY_ORDER:
            object.__setattr__(self, entity.value, _coerce_side(getattr(self, entity.value)))

    @classmethod
    def from_sequence(cls, values: Iterable[Side | str]) -> "Configuration":
        sides = [_coerce_side(value) for value in values]
        if len(sides) != len(ENTITY_ORDER):
            raise InvalidConfigurationError(
                f"Expected {len(ENTITY_ORDER)} sides, got {len(sides)}"
            )
        return cls(*sides)

    @classmethod
    def parse(cls, text: str) -> "Configuration":
        """Parse ``near,near,far,far``, ``n f f n`` or compact forms such as ``NNFF``/``1122``."""

        stripped = text.strip()
        if not stripped:
            raise InvalidConfigurationError("Empty configuration")
        tokens = [token for token in _SEPARATORS.split(stripped) if token]
        if len(tokens) == 1 and len(tokens[0]) == len(ENTITY_ORDER):
            compact = tokens[0].lower()
            if all(char in SIDE_ALIASES for char in compact):
                tokens = list(compact)
        return cls.from_sequence(tokens)

    def side_of(self, entity: Entity) -> Side:
        return getattr(self, entity.value)

    def as_tuple(self) -> Tuple[Side, Side, Side, Side]:
        return (self.wolf, self.goat, self.cabbage, self.ferryman)

    def flipped(self, *entities: Entity) -> "Configuration":
        """Return a copy with the given entities moved to the opposite bank."""

        sides = [
            side.flipped() if entity in entities else side
            for entity, side in zip(ENTITY_ORDER, self.as_tuple())
        ]
        return Configuration(*sides)

    def entities_on(self, side: Side) -> List[Entity]:
        return [entity for entity in ENTITY_ORDER if self.side_of(entity) == side]

    def to_jsonable(self) -> List[str]:
        return [side.value for side in self.as_tuple()]

    def __str__(self) -> str:
        return "".join(side.value[0].upper() for side in self.as_tuple())


@dataclass(frozen=True)
class Move:
    """A single crossing: its label, the configuration it leads to, and the cargo on board."""

    label: str
    result: Configuration
    carried: Tuple[Entity, ...] = ()

    def to_jsonable(self) -> dict:
        return {
            "label": self.label,
            "result": self.result.to_jsonable(),
            "carried": [entity.value for entity in self.carried],
        }


def _coerce_side(value: Side | str) -> Side:
    if isinstance(value, Side):
        return value
    side = SIDE_ALIASES.get(str(value).strip().lower())
    if side is None:
        raise InvalidConfigurationError(f"Unknown side '{value}'")
    return side


INITIAL_STATE = Configuration(Side.NEAR, Side.NEAR, Side.NEAR, Side.NEAR)
GOAL_STATE = Configuration(Side.FAR, Side.FAR, Side.FAR, Side.FAR)
