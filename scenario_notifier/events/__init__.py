# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Test lifecycle events and their delivery."""

from scenario_notifier.events.bus import (
    Event,
    EventBus,
    TestCaseFinished,
    TestCaseStarted,
    TestStepFinished,
    TestStepStarted,
)
from scenario_notifier.events.stream import EventStreamProcessor, ReportedError

__all__ = [
    "Event",
    "EventBus",
    "EventStreamProcessor",
    "ReportedError",
    "TestCaseFinished",
    "TestCaseStarted",
    "TestStepFinished",
    "TestStepStarted",
]
