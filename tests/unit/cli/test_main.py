# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Tests for the scenario-notifier command line."""

from collections.abc import Callable
from pathlib import Path

import pytest

import scenario_notifier
from scenario_notifier.core.constants import EXIT_ERROR
from scenario_notifier.utils.terminal import terminal

from .conftest import event_line, run_cli, scenario_lines

WriteEvents = Callable[[list[str]], Path]

PASSED = {"status": "passed"}
UNDEFINED = {"status": "undefined"}
FAILED = {"status": "failed", "error": {"type": "AssertionError", "message": "no"}}


class TestMainExitCodes:
    """Tests for exit code handling."""

    def test_exit_code_0_all_passed(self, write_events: WriteEvents) -> None:
        events = write_events(scenario_lines([("I have 5 cukes", PASSED)], PASSED))

        result = run_cli(events)

        assert result.exit_code == 0, result.output
        assert "1 tests, 1 passed, 0 failed, 0 skipped." in terminal.strip_ansi(
            result.output
        )

    def test_exit_code_counts_failures(self, write_events: WriteEvents) -> None:
        events = write_events(scenario_lines([("I eat 6 cukes", FAILED)], FAILED))

        result = run_cli(events)

        assert result.exit_code == 1
        assert "AssertionError: no" in result.output

    def test_malformed_event_exits_with_error(self, write_events: WriteEvents) -> None:
        lines = scenario_lines([], PASSED) + ["SCENARIO_EVENT:{broken"]
        events = write_events(lines)

        result = run_cli(events)

        assert result.exit_code == EXIT_ERROR

    def test_undecodable_engine_output_is_ignored(
        self, write_events: WriteEvents
    ) -> None:
        events = write_events(scenario_lines([("I have 5 cukes", PASSED)], PASSED))
        events.write_bytes(b"engine output \xff\xfe\n" + events.read_bytes())

        result = run_cli(events)

        assert result.exit_code == 0, result.output

    def test_undecodable_event_line_exits_with_error(
        self, write_events: WriteEvents
    ) -> None:
        events = write_events(scenario_lines([("I have 5 cukes", PASSED)], PASSED))
        events.write_bytes(events.read_bytes() + b"SCENARIO_EVENT:{\"\xff\"}\n")

        result = run_cli(events)

        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert result.exit_code == EXIT_ERROR
        assert "1 tests, 1 passed" in terminal.strip_ansi(result.output)

    def test_missing_events_file(self, tmp_path: Path) -> None:
        result = run_cli(tmp_path / "missing.log")

        assert result.exit_code != 0


class TestMainOptions:
    """Tests for options mapped onto ReporterOptions."""

    @pytest.mark.parametrize("strict,expected_exit", [(False, 0), (True, 1)])
    def test_strict_undefined(
        self, write_events: WriteEvents, strict: bool, expected_exit: int
    ) -> None:
        events = write_events(scenario_lines([("I do magic", UNDEFINED)], UNDEFINED))

        result = run_cli(events, ["--strict"] if strict else [])

        assert result.exit_code == expected_exit
        assert "This scenario has undefined steps" in result.output

    def test_strict_from_environment(
        self, write_events: WriteEvents, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("SCENARIO_NOTIFIER_STRICT", "1")
        events = write_events(scenario_lines([], UNDEFINED))

        result = run_cli(events)

        assert result.exit_code == 1

    def test_step_notifications_report_steps(self, write_events: WriteEvents) -> None:
        events = write_events(
            scenario_lines([("I have 5 cukes", PASSED), ("I eat 3", PASSED)], PASSED)
        )

        result = run_cli(events, ["--step-notifications"])

        assert result.exit_code == 0
        output = terminal.strip_ansi(result.output)
        assert "PASSED I have 5 cukes" in output
        assert "3 tests, 3 passed" in output

    def test_hook_steps_are_not_reported(self, write_events: WriteEvents) -> None:
        hook = {"text": "Before", "line": 0, "is_hook": True}
        lines = [
            event_line("test_case_started"),
            event_line("test_step_started", test_step=hook),
            event_line("test_step_finished", test_step=hook, result=PASSED),
            event_line("test_case_finished", result=PASSED),
        ]
        events = write_events(lines)

        result = run_cli(events, ["--step-notifications"])

        assert "1 tests, 1 passed" in terminal.strip_ansi(result.output)

    def test_filename_compatible_names(self, write_events: WriteEvents) -> None:
        events = write_events(scenario_lines([], PASSED))

        result = run_cli(events, ["--filename-compatible-names"])

        assert "PASSED Eat_cukes" in terminal.strip_ansi(result.output)

    def test_version(self, tmp_path: Path) -> None:
        events = tmp_path / "events.log"
        events.write_text("")

        result = run_cli(events, ["--version"])

        assert result.exit_code == 0
        assert f"version {scenario_notifier.__version__}" in result.output
