# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

import json
import logging
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import Result
from typer.testing import CliRunner

from scenario_notifier.cli.main import app

runner = CliRunner()

TEST_CASE = {"name": "Eat cukes", "uri": "features/cukes.feature", "line": 3}


def event_line(event: str, **fields: Any) -> str:
    payload = {"version": "1.0", "event": event, "test_case": TEST_CASE, **fields}
    return f"SCENARIO_EVENT:{json.dumps(payload)}"


def scenario_lines(
    steps: list[tuple[str, dict[str, Any]]], case_result: dict[str, Any]
) -> list[str]:
    """Event lines of one scenario with the given (step text, result) pairs."""
    lines = ["Feature: Cukes", event_line("test_case_started")]
    for line_number, (text, result) in enumerate(steps, start=4):
        step = {"text": text, "line": line_number}
        lines.append(event_line("test_step_started", test_step=step))
        lines.append(event_line("test_step_finished", test_step=step, result=result))
    lines.append(event_line("test_case_finished", result=case_result))
    return lines


def run_cli(events_file: Path, additional_args: list[str] | None = None) -> Result:
    args = additional_args or []
    return runner.invoke(app, [str(events_file)] + args)


@pytest.fixture()
def write_events(tmp_path: Path):
    def write(lines: list[str]) -> Path:
        events_file = tmp_path / "events.log"
        events_file.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return events_file

    return write


@pytest.fixture(autouse=True)
def restore_root_logger() -> Generator[None, None, None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
