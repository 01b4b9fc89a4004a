"""Pretty-print helpers for banks, crossing plans and hints."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, List, Optional, Sequence

from ..core.constants import Side
from ..engine.hints import Hint, HintStatus

if TYPE_CHECKING:
    from ..core.models import Configuration, Move
    from ..engine.safety import Violation


RULES = (
    "The boat carries the ferryman and at most one item.",
    "The wolf may not be left with the goat without the ferryman.",
    "The goat may not be left with the cabbage without the ferryman.",
    "Goal: bring everyone to the far bank safely.",
)


def format_bank(config: Configuration, side: Side) -> str:
    names = [entity.value for entity in config.entities_on(side)]
    return ", ".join(names) if names else "(empty)"


def format_configuration(config: Configuration) -> str:
    boat = "<- boat at near bank" if config.ferryman == Side.NEAR else "boat at far bank ->"
    lines = [
        f"near bank | {format_bank(config, Side.NEAR)}",
        f"    river | {boat}",
        f" far bank | {format_bank(config, Side.FAR)}",
    ]
    return "\n".join(lines)


def format_path(path: Optional[Sequence[Move]]) -> str:
    if path is None:
        return "No solution: the goal cannot be reached from here."
    if not path:
        return "Already solved: no crossings needed."
    width = len(str(len(path)))
    lines = [
        f"{index:>{width}}. {move.label:<24} -> {move.result}"
        for index, move in enumerate(path, start=1)
    ]
    lines.append(f"Minimum crossings: {len(path)}")
    return "\n".join(lines)


def format_hint(result: Hint) -> str:
    if result.status == HintStatus.MOVE and result.move is not None:
        return f"Hint: {result.move.label} ({result.remaining} crossings left)"
    if result.status == HintStatus.AT_GOAL:
        return "Everyone is already across. Nothing left to do!"
    return "The goal cannot be reached from this position."


def format_violations(found: List[Violation]) -> str:
    if not found:
        return "Safe."
    return "\n".join(
        f"Unsafe: the {v.predator.value} is left with the {v.prey.value} on the {v.side.value} bank"
        for v in found
    )


def print_rules(*, stream=None) -> None:
    stream = stream or sys.stdout
    for rule in RULES:
        print(f"- {rule}", file=stream)
