import contextlib
import io
import json
import logging
import tempfile
import unittest
from pathlib import Path

from ferryman.cli import main, run_play
from ferryman.core.constants import GameMode
from ferryman.engine.session import SessionConfig, start_session


def run_cli(*argv: str) -> str:
    buffer = io.StringIO()
    with contextlib.redirect_stdout(buffer):
        main(list(argv))
    return buffer.getvalue()


class SolveCommandTests(unittest.TestCase):
    def test_solve_json(self) -> None:
        payload = json.loads(run_cli("solve"))
        self.assertTrue(payload["found"])
        self.assertEqual(payload["length"], 7)
        self.assertEqual(payload["moves"][0]["label"], "Carry goat")
        self.assertEqual(payload["moves"][-1]["result"], ["far", "far", "far", "far"])
        self.assertNotIn("states", payload)

    def test_solve_with_steps_lists_every_state(self) -> None:
        payload = json.loads(run_cli("solve", "--steps"))
        self.assertEqual(len(payload["states"]), 8)
        self.assertEqual(payload["states"][0], ["near", "near", "near", "near"])

    def test_solve_unreachable_goal(self) -> None:
        payload = json.loads(run_cli("solve", "--goal", "NNFF"))
        self.assertFalse(payload["found"])
        self.assertIsNone(payload["length"])
        self.assertEqual(payload["moves"], [])

    def test_solve_text_to_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            target = Path(tmpdir) / "plan.txt"
            output = run_cli("--format", "text", "solve", "--output", str(target))
            self.assertEqual(output, "")
            text = target.read_text(encoding="utf-8")
        self.assertIn("Minimum crossings: 7", text)
        self.assertIn("1. Carry goat", text)

    def test_solve_text_steps_renders_banks(self) -> None:
        output = run_cli("--format", "text", "solve", "--steps", "--start", "FNFN")
        self.assertIn("Start:", output)
        self.assertIn("1. Carry goat", output)
        self.assertIn("far bank | wolf, goat, cabbage, ferryman", output)
        self.assertIn("Minimum crossings: 1", output)


class StateCommandTests(unittest.TestCase):
    def test_moves_lists_legal_and_rejected(self) -> None:
        payload = json.loads(run_cli("moves", "--state", "near,near,near,near"))
        self.assertEqual([m["label"] for m in payload["legal"]], ["Carry goat"])
        self.assertEqual(
            [m["label"] for m in payload["rejected"]],
            ["Ferryman crosses alone", "Carry wolf", "Carry cabbage"],
        )

    def test_hint_text(self) -> None:
        output = run_cli("--format", "text", "hint", "--state", "NFNN")
        self.assertEqual(output.strip(), "Hint: Carry wolf (5 crossings left)")

    def test_hint_json_at_goal(self) -> None:
        payload = json.loads(run_cli("hint", "--state", "FFFF"))
        self.assertEqual(payload["status"], "at_goal")

    def test_check_reports_violations(self) -> None:
        payload = json.loads(run_cli("check", "--state", "1122"))
        self.assertFalse(payload["safe"])
        self.assertEqual(
            payload["violations"],
            [{"predator": "wolf", "prey": "goat", "side": "near"}],
        )

    def test_check_text_safe(self) -> None:
        self.assertEqual(run_cli("--format", "text", "check", "--state", "NFNF").strip(), "Safe.")

    def test_invalid_state_exits_with_usage_error(self) -> None:
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                main(["check", "--state", "XXXX"])
        self.assertEqual(ctx.exception.code, 2)


class LogLevelOptionTests(unittest.TestCase):
    def setUp(self) -> None:
        root = logging.getLogger()
        self.saved_handlers = list(root.handlers)
        self.saved_level = root.level

    def tearDown(self) -> None:
        root = logging.getLogger()
        root.handlers[:] = self.saved_handlers
        root.setLevel(self.saved_level)

    def test_level_name_is_case_insensitive(self) -> None:
        with contextlib.redirect_stderr(io.StringIO()):
            run_cli("--log-level", "debug", "check", "--state", "NFNF")
        self.assertEqual(logging.getLogger().level, logging.DEBUG)

    def test_unknown_level_exits_with_usage_error(self) -> None:
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                main(["--log-level", "loud", "check", "--state", "NFNF"])
        self.assertEqual(ctx.exception.code, 2)


class EntrypointTests(unittest.TestCase):
    def test_script_wrapper_delegates_to_package_cli(self) -> None:
        import main as script

        self.assertIs(script.main, main)


class PlayTests(unittest.TestCase):
    def test_auto_play_reaches_goal(self) -> None:
        delays = []
        out = io.StringIO()
        session = run_play(start_session(), 0.5, io.StringIO(), out, sleep=delays.append)
        self.assertTrue(session.won)
        self.assertEqual(delays, [0.5] * 7)
        self.assertIn("7. Carry goat", out.getvalue())
        self.assertIn("Done!", out.getvalue())

    def test_manual_play_by_move_numbers(self) -> None:
        out = io.StringIO()
        session = run_play(
            start_session(SessionConfig(mode=GameMode.MANUAL)),
            0.0,
            io.StringIO("1\n1\n2\n2\n2\n1\n2\n"),
            out,
        )
        self.assertTrue(session.won)
        self.assertIn("Solved in 7 crossings (minimum 7)", out.getvalue())

    def test_manual_play_rejects_hint_and_unknown_commands(self) -> None:
        out = io.StringIO()
        session = run_play(
            start_session(SessionConfig(mode=GameMode.MANUAL)),
            0.0,
            io.StringIO("h\n9\nq\n"),
            out,
        )
        self.assertFalse(session.won)
        self.assertIn("only available in assisted mode", out.getvalue())
        self.assertIn("Unknown command '9'", out.getvalue())

    def test_assisted_play_gives_hint_and_reset(self) -> None:
        out = io.StringIO()
        session = run_play(
            start_session(SessionConfig(mode=GameMode.ASSISTED)),
            0.0,
            io.StringIO("h\n1\nr\n"),
            out,
        )
        self.assertIn("Hint: Carry goat (7 crossings left)", out.getvalue())
        self.assertEqual(len(session.history), 1)
        self.assertFalse(session.won)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
