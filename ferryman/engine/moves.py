"""Crossing generation for a given bank configuration."""

from __future__ import annotations

from typing import List

from ..core.constants import CARGO, CARRY_LABELS, SOLO_LABEL, Entity
from ..core.models import Configuration, Move
from .safety import is_safe


def candidate_moves(config: Configuration) -> List[Move]:
    """Every physically possible crossing, safe or not.

    The ferryman may always cross alone; a cargo item can only be taken
    along when it is on the ferryman's bank. Order is fixed: solo crossing,
    then wolf, goat, cabbage.
    """

    moves = [Move(label=SOLO_LABEL, result=config.flipped(Entity.FERRYMAN))]
    for cargo in CARGO:
        if config.side_of(cargo) == config.ferryman:
            moves.append(
                Move(
                    label=CARRY_LABELS[cargo],
                    result=config.flipped(cargo, Entity.FERRYMAN),
                    carried=(cargo,),
                )
            )
    return moves


def legal_moves(config: Configuration) -> List[Move]:
    """Candidate crossings that leave both banks safe, in generation order."""

    return [move for move in candidate_moves(config) if is_safe(move.result)]
