# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Classification of scenario and step results into notifications.

The ResultClassifier turns each finished result into at most a handful of
calls on a run notifier: nothing for passed results, a failed assumption
for skipped ones, a failure for failed ones, and either of the two for
pending and undefined results depending on strict mode.
"""

import logging
from dataclasses import dataclass
from typing import Protocol

from scenario_notifier.core.error_classification import (
    PendingError,
    SkippedError,
    UndefinedError,
)
from scenario_notifier.core.exceptions import NoExecutionUnitError, StepNotStartedError
from scenario_notifier.core.models import (
    Description,
    Granularity,
    Result,
    Status,
    TestStep,
)
from scenario_notifier.core.types import ReporterOptions
from scenario_notifier.reporting.notifier import (
    EachTestNotifier,
    NoTestNotifier,
    RunNotifier,
    TestNotifier,
)

logger = logging.getLogger(__name__)


class DescriptionProvider(Protocol):
    """Describes a test case and its steps, deterministically per unit."""

    def describe(self) -> Description: ...

    def describe_child(self, step: TestStep) -> Description: ...


@dataclass
class ExecutionUnit:
    """Notification state of the test case currently being reported.

    Created by ResultClassifier.start_execution_unit() and replaced by the
    next call; never reused across test cases.
    """

    describer: DescriptionProvider
    run_notifier: RunNotifier
    case_notifier: TestNotifier
    step_notifier: TestNotifier | None = None


class ResultClassifier:
    """Relays test case and step results to a run notifier."""

    def __init__(self, options: ReporterOptions) -> None:
        self.options = options
        self._unit: ExecutionUnit | None = None

    @property
    def strict(self) -> bool:
        return self.options.strict

    @property
    def step_notifications(self) -> bool:
        return self.options.step_notifications

    @property
    def unit(self) -> ExecutionUnit:
        if self._unit is None:
            raise NoExecutionUnitError()
        return self._unit

    def start_execution_unit(
        self, describer: DescriptionProvider, run_notifier: RunNotifier
    ) -> None:
        """Begin reporting a test case.

        Must be called once per test case, before any of its events.

        Args:
            describer: Describes the test case and its steps
            run_notifier: Sink receiving the notifications
        """
        description = describer.describe()
        logger.debug(f"Starting execution unit '{description}'")
        self._unit = ExecutionUnit(
            describer=describer,
            run_notifier=run_notifier,
            case_notifier=EachTestNotifier(run_notifier, description),
        )

    def handle_test_case_started(self) -> None:
        self.unit.case_notifier.fire_test_started()

    def handle_step_started(self, step: TestStep) -> None:
        unit = self.unit
        if self.step_notifications:
            description = unit.describer.describe_child(step)
            unit.step_notifier = EachTestNotifier(unit.run_notifier, description)
        else:
            unit.step_notifier = NoTestNotifier()
        unit.step_notifier.fire_test_started()

    def handle_step_result(self, result: Result) -> None:
        unit = self.unit
        step_notifier = unit.step_notifier
        if step_notifier is None:
            raise StepNotStartedError()
        try:
            self.notify_result(step_notifier, result, Granularity.STEP)
            step_notifier.fire_test_finished()
        finally:
            # a step is finished exactly once
            unit.step_notifier = None

    def handle_test_case_result(self, result: Result) -> None:
        case_notifier = self.unit.case_notifier
        self.notify_result(case_notifier, result, Granularity.SCENARIO)
        case_notifier.fire_test_finished()

    def notify_result(
        self, notifier: TestNotifier, result: Result, granularity: Granularity
    ) -> None:
        """Relay a result through a notifier without finishing it.

        Args:
            notifier: Notifier of the test case or step the result belongs to
            result: The result to relay
            granularity: Selects the wording of placeholder errors
        """
        error = result.error
        status = result.status

        if status == Status.PASSED:
            return
        if status == Status.SKIPPED:
            if error is None:
                error = SkippedError(granularity)
            notifier.add_failed_assumption(error)
        elif status == Status.PENDING:
            if error is None:
                error = PendingError()
            self._add_failure_or_failed_assumption(notifier, error)
        elif status == Status.UNDEFINED:
            if error is None:
                error = UndefinedError(granularity)
            self._add_failure_or_failed_assumption(notifier, error)
        elif status == Status.FAILED and error is not None:
            notifier.add_failure(error)

    def _add_failure_or_failed_assumption(
        self, notifier: TestNotifier, error: BaseException
    ) -> None:
        if self.strict:
            notifier.add_failure(error)
        else:
            notifier.add_failed_assumption(error)
