# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Exceptions raised by scenario-notifier itself.

These are usage errors of the reporter. Test outcomes are never raised;
they are relayed to a run notifier as data.
"""


class ReporterError(Exception):
    """Base class for scenario-notifier errors."""


class NoExecutionUnitError(ReporterError):
    """Raised when an event is handled before any execution unit started."""

    def __init__(self) -> None:
        super().__init__(
            "No execution unit has been started; call start_execution_unit() "
            "before publishing test case events"
        )


class EventStreamError(ReporterError):
    """Raised when an event line cannot be turned into an event."""


class StepNotStartedError(ReporterError):
    """Raised when a step result arrives before any step started."""

    def __init__(self) -> None:
        super().__init__("Step result received before the step started")
