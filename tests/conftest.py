# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Global pytest fixtures shared across all test modules.

This module provides a run notifier that records every notification in
order, plus ready-made test cases and steps.
"""

from dataclasses import dataclass, field
from typing import Any

import pytest

from scenario_notifier.core.models import Description, TestCase, TestStep


@dataclass
class RecordingRunNotifier:
    """Run notifier recording (kind, description, error) tuples in call order."""

    calls: list[tuple[Any, ...]] = field(default_factory=list)

    def fire_test_started(self, description: Description) -> None:
        self.calls.append(("started", description))

    def fire_test_finished(self, description: Description) -> None:
        self.calls.append(("finished", description))

    def fire_test_failure(self, description: Description, error: BaseException) -> None:
        self.calls.append(("failure", description, error))

    def fire_test_assumption_failed(
        self, description: Description, error: BaseException
    ) -> None:
        self.calls.append(("assumption_failed", description, error))

    def kinds(self) -> list[str]:
        return [call[0] for call in self.calls]

    def errors(self, kind: str) -> list[BaseException]:
        return [call[2] for call in self.calls if call[0] == kind]


@pytest.fixture()
def run_notifier() -> RecordingRunNotifier:
    return RecordingRunNotifier()


@pytest.fixture()
def scenario() -> TestCase:
    return TestCase(name="Eat cukes", uri="features/cukes.feature", line=3)


@pytest.fixture()
def step() -> TestStep:
    return TestStep(text="I have 5 cukes in my belly", line=4)


@pytest.fixture()
def hook_step() -> TestStep:
    return TestStep(text="before hook", line=0, is_hook=True)
