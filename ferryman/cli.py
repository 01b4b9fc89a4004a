"""Command-line interface for the wolf, goat and cabbage crossing solver."""

from __future__ import annotations

import argparse
import json
import sys
import time
from pathlib import Path
from typing import Any, Dict, List, Optional, TextIO

from .core.constants import GameMode
from .core.exceptions import InvalidConfigurationError, SessionError
from .core.models import GOAL_STATE, INITIAL_STATE, Configuration
from .engine.hints import hint
from .engine.moves import candidate_moves, legal_moves
from .engine.safety import is_safe, violations
from .engine.search import search
from .engine.session import GameSession, SessionConfig, start_session
from .utils.logger import LEVEL_NAMES, configure_logging
from .utils.pretty import (
    format_configuration,
    format_hint,
    format_path,
    format_violations,
    print_rules,
)


def parse_configuration(text: str) -> Configuration:
    try:
        return Configuration.parse(text)
    except InvalidConfigurationError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Solve the wolf, goat and cabbage river-crossing puzzle",
    )
    parser.add_argument(
        "--format",
        choices=["json", "text"],
        default="json",
        help="Output format (default json)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LEVEL_NAMES,
        default="WARNING",
        help="Logging level (default WARNING)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    solve_cmd = sub.add_parser("solve", help="Find a shortest crossing plan")
    solve_cmd.add_argument(
        "--start",
        type=parse_configuration,
        default=INITIAL_STATE,
        help="Start configuration as wolf,goat,cabbage,ferryman (e.g. near,near,near,near or NNNN)",
    )
    solve_cmd.add_argument(
        "--goal",
        type=parse_configuration,
        default=GOAL_STATE,
        help="Goal configuration (default FFFF)",
    )
    solve_cmd.add_argument("--steps", action="store_true", help="Include every intermediate bank layout")
    solve_cmd.add_argument("--output", type=Path, help="Optional path to JSON/text output")

    moves_cmd = sub.add_parser("moves", help="List the crossings available from a configuration")
    moves_cmd.add_argument("--state", type=parse_configuration, required=True)

    hint_cmd = sub.add_parser("hint", help="Suggest the next crossing from a configuration")
    hint_cmd.add_argument("--state", type=parse_configuration, required=True)
    hint_cmd.add_argument("--goal", type=parse_configuration, default=GOAL_STATE)

    check_cmd = sub.add_parser("check", help="Check whether a configuration is safe")
    check_cmd.add_argument("--state", type=parse_configuration, required=True)

    play_cmd = sub.add_parser("play", help="Play in auto, manual or assisted mode")
    play_cmd.add_argument(
        "--mode",
        choices=[mode.value for mode in GameMode],
        default=GameMode.AUTO.value,
    )
    play_cmd.add_argument("--start", type=parse_configuration, default=INITIAL_STATE)
    play_cmd.add_argument("--goal", type=parse_configuration, default=GOAL_STATE)
    play_cmd.add_argument(
        "--delay",
        type=float,
        default=1.5,
        help="Seconds between auto-play steps",
    )
    return parser


def solve_payload(start: Configuration, goal: Configuration, steps: bool) -> Dict[str, Any]:
    result = search(start, goal)
    payload: Dict[str, Any] = {
        "start": start.to_jsonable(),
        "goal": goal.to_jsonable(),
        "found": result.found,
        "length": len(result.path) if result.path is not None else None,
        "moves": [move.to_jsonable() for move in result.path or []],
        "expanded": result.expanded,
        "visited": len(result.visited),
    }
    if steps:
        payload["states"] = [start.to_jsonable()] + [
            move.result.to_jsonable() for move in result.path or []
        ]
    return payload


def render_solve(start: Configuration, goal: Configuration, steps: bool) -> str:
    path = search(start, goal).path
    if not steps or not path:
        return format_path(path)
    blocks: List[str] = ["Start:", format_configuration(start)]
    for index, move in enumerate(path, start=1):
        blocks.append(f"\n{index}. {move.label}")
        blocks.append(format_configuration(move.result))
    blocks.append(f"\nMinimum crossings: {len(path)}")
    return "\n".join(blocks)


def moves_payload(state: Configuration) -> Dict[str, Any]:
    legal = legal_moves(state)
    return {
        "state": state.to_jsonable(),
        "legal": [move.to_jsonable() for move in legal],
        "rejected": [
            move.to_jsonable() for move in candidate_moves(state) if move not in legal
        ],
    }


def render_moves(state: Configuration) -> str:
    lines = [format_configuration(state), ""]
    for index, move in enumerate(legal_moves(state), start=1):
        lines.append(f"{index}. {move.label}")
    return "\n".join(lines)


def run_play(
    session: GameSession,
    delay: float,
    stdin: TextIO,
    stdout: TextIO,
    sleep=time.sleep,
) -> GameSession:
    """Drive a session from a line-oriented console.

    Auto mode plays the stored solution with ``delay`` seconds between
    steps. Manual and assisted modes read one command per line: a move
    number, ``r`` to reset, ``h`` for a hint (assisted only) or ``q``.
    """

    print_rules(stream=stdout)
    print(format_configuration(session.state), file=stdout)

    if session.mode == GameMode.AUTO:
        if session.solution is None:
            print(format_path(None), file=stdout)
            return session
        while session.can_advance:
            sleep(delay)
            move = session.solution[session.step]
            session = session.advance()
            print(f"\n{session.step}. {move.label}", file=stdout)
            print(format_configuration(session.state), file=stdout)
        print("\nDone! Everyone crossed safely.", file=stdout)
        return session

    while not session.won:
        moves = session.legal_moves()
        for index, move in enumerate(moves, start=1):
            print(f"{index}. {move.label}", file=stdout)
        print("> ", end="", file=stdout)
        line = stdin.readline()
        if not line:
            break
        command = line.strip().lower()
        if command == "q":
            break
        if command == "r":
            session = session.reset()
        elif command == "h":
            try:
                print(format_hint(session.hint()), file=stdout)
            except SessionError as exc:
                print(str(exc), file=stdout)
            continue
        elif command.isdigit() and 1 <= int(command) <= len(moves):
            outcome = session.apply(moves[int(command) - 1])
            if not outcome.accepted:
                print(outcome.message, file=stdout)
            session = outcome.session
        else:
            print(f"Unknown command '{command}'", file=stdout)
            continue
        print(format_configuration(session.state), file=stdout)

    if session.won:
        crossings = len(session.history) - 1
        print(
            f"Congratulations! Solved in {crossings} crossings "
            f"(minimum {session.minimum_moves}).",
            file=stdout,
        )
    return session


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    as_json = args.format == "json"

    if args.command == "play":
        config = SessionConfig(mode=GameMode(args.mode), start=args.start, goal=args.goal)
        run_play(start_session(config), args.delay, sys.stdin, sys.stdout)
        return

    if args.command == "solve":
        if as_json:
            output_text = json.dumps(solve_payload(args.start, args.goal, args.steps), indent=2)
        else:
            output_text = render_solve(args.start, args.goal, args.steps)
        if args.output:
            args.output.write_text(output_text + "\n", encoding="utf-8")
        else:
            print(output_text)
        return

    if args.command == "moves":
        output_text = (
            json.dumps(moves_payload(args.state), indent=2) if as_json else render_moves(args.state)
        )
    elif args.command == "hint":
        result = hint(args.state, args.goal)
        output_text = json.dumps(result.to_jsonable(), indent=2) if as_json else format_hint(result)
    else:
        found = violations(args.state)
        if as_json:
            output_text = json.dumps(
                {
                    "state": args.state.to_jsonable(),
                    "safe": is_safe(args.state),
                    "violations": [
                        {"predator": v.predator.value, "prey": v.prey.value, "side": v.side.value}
                        for v in found
                    ],
                },
                indent=2,
            )
        else:
            output_text = format_violations(found)
    print(output_text)


if __name__ == "__main__":  # pragma: no cover
    main()
