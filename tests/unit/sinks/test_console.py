# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Tests for ConsoleRunNotifier output and tallies."""

import pytest

from scenario_notifier.core.models import Description
from scenario_notifier.sinks.console import ConsoleRunNotifier
from scenario_notifier.utils.terminal import terminal

CASE = Description("Eat cukes", "features/cukes.feature:3")
STEP = Description("I have 5 cukes", "features/cukes.feature:3:4")


def plain_output(capsys: pytest.CaptureFixture[str]) -> str:
    return terminal.strip_ansi(capsys.readouterr().out)


class TestConsoleRunNotifier:
    """Tests for status tracking and printing."""

    def test_passed_target(self, capsys: pytest.CaptureFixture[str]) -> None:
        notifier = ConsoleRunNotifier()

        notifier.fire_test_started(CASE)
        notifier.fire_test_finished(CASE)

        output = plain_output(capsys)
        assert "[ID:1] EXECUTING Eat cukes" in output
        assert "[ID:1] PASSED Eat cukes in" in output
        assert notifier.results.passed == 1

    def test_finished_targets_are_no_longer_tracked(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        notifier = ConsoleRunNotifier()

        notifier.fire_test_started(CASE)
        notifier.fire_test_started(STEP)
        notifier.fire_test_finished(STEP)

        assert list(notifier.test_status) == [CASE]
        notifier.fire_test_finished(CASE)
        assert notifier.test_status == {}

    def test_failure_wins_over_failed_assumption(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        notifier = ConsoleRunNotifier(show_started=False)

        notifier.fire_test_started(CASE)
        notifier.fire_test_assumption_failed(CASE, Exception("soft"))
        notifier.fire_test_failure(CASE, AssertionError("hard"))
        notifier.fire_test_assumption_failed(CASE, Exception("soft again"))
        notifier.fire_test_finished(CASE)

        output = plain_output(capsys)
        assert "FAILED Eat cukes" in output
        assert "AssertionError: hard" in output
        assert "EXECUTING" not in output
        assert notifier.results.failed == 1
        assert notifier.results.skipped == 0

    def test_failed_assumption_only_counts_as_skipped(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        notifier = ConsoleRunNotifier()

        notifier.fire_test_started(STEP)
        notifier.fire_test_assumption_failed(STEP, Exception("This step is undefined"))
        notifier.fire_test_finished(STEP)

        output = plain_output(capsys)
        assert "SKIPPED I have 5 cukes" in output
        assert "This step is undefined" in output
        assert notifier.results.skipped == 1

    def test_targets_get_sequential_ids(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        notifier = ConsoleRunNotifier()

        notifier.fire_test_started(CASE)
        notifier.fire_test_started(STEP)

        assert notifier.test_status[CASE]["test_id"] == 1
        assert notifier.test_status[STEP]["test_id"] == 2

    def test_finish_without_start_is_tracked(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        notifier = ConsoleRunNotifier()

        notifier.fire_test_finished(CASE)

        assert notifier.results.passed == 1
