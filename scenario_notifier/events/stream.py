# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Replay of test lifecycle events recorded as JSON lines.

An execution engine running in another process emits one line per event,
prefixed with SCENARIO_EVENT: so that the events can be picked out of the
engine's regular output. Example lines:

    SCENARIO_EVENT:{"version": "1.0", "event": "test_case_started",
        "test_case": {"name": "Eat cukes", "uri": "cukes.feature", "line": 3}}
    SCENARIO_EVENT:{"version": "1.0", "event": "test_step_finished",
        "test_case": {...}, "test_step": {"text": "I eat 5", "line": 5},
        "result": {"status": "failed", "error": {"type": "AssertionError",
        "message": "expected 5"}}}
"""

import json
import logging
from collections.abc import Callable, Iterable
from typing import Any

from scenario_notifier.core.constants import EVENT_PREFIX, EVENT_SCHEMA_VERSION
from scenario_notifier.core.error_classification import CompositeFailure
from scenario_notifier.core.exceptions import EventStreamError, ReporterError
from scenario_notifier.core.models import Result, Status, TestCase, TestStep
from scenario_notifier.events.bus import (
    Event,
    EventBus,
    TestCaseFinished,
    TestCaseStarted,
    TestStepFinished,
    TestStepStarted,
)

logger = logging.getLogger(__name__)


class ReportedError(Exception):
    """Error recreated from an event line.

    Attributes:
        error_type: Name of the exception type raised in the engine
        is_assumption_violation: The engine flagged the error as a failed
            assumption
    """

    def __init__(
        self, message: str, error_type: str | None = None, assumption: bool = False
    ) -> None:
        super().__init__(message)
        self.error_type = error_type
        self.is_assumption_violation = assumption


def parse_error(data: dict[str, Any]) -> BaseException:
    """Recreate an error from its JSON representation.

    An object carrying an "errors" list becomes a CompositeFailure of the
    recursively parsed constituents.
    """
    if "errors" in data:
        constituents = [parse_error(each) for each in data["errors"]]
        return CompositeFailure(constituents, data.get("message", ""))
    return ReportedError(
        data.get("message", ""),
        error_type=data.get("type"),
        assumption=bool(data.get("assumption_violated", False)),
    )


def parse_result(data: dict[str, Any]) -> Result:
    try:
        status = Status(data["status"])
    except (KeyError, ValueError) as e:
        raise EventStreamError(f"Invalid result status: {data.get('status')!r}") from e
    error = parse_error(data["error"]) if data.get("error") else None
    try:
        return Result(status=status, error=error, duration=data.get("duration"))
    except ValueError as e:
        raise EventStreamError(str(e)) from e


def parse_test_case(data: dict[str, Any]) -> TestCase:
    return TestCase(
        name=data["name"],
        uri=data["uri"],
        line=int(data["line"]),
        tags=tuple(data.get("tags", [])),
    )


def parse_test_step(data: dict[str, Any]) -> TestStep:
    return TestStep(
        text=data["text"],
        line=int(data["line"]),
        is_hook=bool(data.get("is_hook", False)),
    )


def parse_event(event: dict[str, Any]) -> Event:
    """Turn a decoded event object into an event instance.

    Raises:
        EventStreamError: If the event type is unknown or fields are missing
    """
    event_type = event.get("event")
    try:
        test_case = parse_test_case(event["test_case"])
        if event_type == "test_case_started":
            return TestCaseStarted(test_case)
        if event_type == "test_step_started":
            return TestStepStarted(test_case, parse_test_step(event["test_step"]))
        if event_type == "test_step_finished":
            return TestStepFinished(
                test_case,
                parse_test_step(event["test_step"]),
                parse_result(event["result"]),
            )
        if event_type == "test_case_finished":
            return TestCaseFinished(test_case, parse_result(event["result"]))
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise EventStreamError(f"Malformed {event_type} event: {e}") from e
    raise EventStreamError(f"Unknown event type: {event_type!r}")


class EventStreamProcessor:
    """Publishes events read from engine output lines to a bus.

    Args:
        bus: Bus the events are published to
        on_test_case_started: Called with each test case before its
            TestCaseStarted event is published, typically to start an
            execution unit on a reporter
    """

    def __init__(
        self,
        bus: EventBus,
        on_test_case_started: Callable[[TestCase], None] | None = None,
    ) -> None:
        self.bus = bus
        self.on_test_case_started = on_test_case_started
        self.events_published = 0
        self.errors = 0

    def process_line(self, line: str | bytes) -> None:
        """Process an output line, publishing it if it is an event.

        Lines without the event prefix are ignored, whatever their encoding.
        Event lines that cannot be decoded are logged as errors and skipped.

        Args:
            line: Output line to process, raw bytes are decoded as UTF-8
        """
        if isinstance(line, bytes):
            if not line.startswith(EVENT_PREFIX.encode()):
                return
            try:
                line = line.decode("utf-8")
            except UnicodeDecodeError as e:
                self.errors += 1
                logger.error(f"Failed to decode event line: {e}")
                return

        line = line.rstrip("\r\n")
        if not line.startswith(EVENT_PREFIX):
            return

        try:
            data = json.loads(line[len(EVENT_PREFIX) :])
            if not isinstance(data, dict):
                raise EventStreamError(f"Event is not an object: {data!r}")

            if data.get("version", EVENT_SCHEMA_VERSION) != EVENT_SCHEMA_VERSION:
                logger.warning(f"Unknown event schema version: {data.get('version')}")

            event = parse_event(data)
        except json.JSONDecodeError as e:
            self.errors += 1
            logger.error(f"Failed to parse event line: {e}: {line}")
            return
        except EventStreamError as e:
            self.errors += 1
            logger.error(f"Skipping event: {e}")
            return

        if isinstance(event, TestCaseStarted) and self.on_test_case_started:
            self.on_test_case_started(event.test_case)
        try:
            self.bus.publish(event)
        except ReporterError as e:
            self.errors += 1
            logger.error(f"Error reporting {type(event).__name__}: {e}")
            return
        self.events_published += 1

    def process_lines(self, lines: Iterable[str | bytes]) -> None:
        for line in lines:
            self.process_line(line)
