# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Test lifecycle events and the synchronous bus that delivers them."""

import logging
from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from scenario_notifier.core.models import Result, TestCase, TestStep

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TestCaseStarted:
    __test__ = False

    test_case: TestCase


@dataclass(frozen=True)
class TestStepStarted:
    __test__ = False

    test_case: TestCase
    test_step: TestStep


@dataclass(frozen=True)
class TestStepFinished:
    __test__ = False

    test_case: TestCase
    test_step: TestStep
    result: Result


@dataclass(frozen=True)
class TestCaseFinished:
    __test__ = False

    test_case: TestCase
    result: Result


Event = TestCaseStarted | TestStepStarted | TestStepFinished | TestCaseFinished

E = TypeVar("E")


class EventBus:
    """Delivers events to the handlers subscribed for their type.

    Handlers run synchronously, in subscription order, before publish()
    returns. Exceptions raised by a handler propagate to the publisher.
    """

    def __init__(self) -> None:
        self._handlers: dict[type, list[Callable[[Any], None]]] = defaultdict(list)

    def subscribe(self, event_type: type[E], handler: Callable[[E], None]) -> None:
        """Register a handler for one event type."""
        self._handlers[event_type].append(handler)
        logger.debug(f"Subscribed {handler!r} to {event_type.__name__}")

    def publish(self, event: Event) -> None:
        """Deliver an event to every handler subscribed for its exact type."""
        for handler in self._handlers.get(type(event), []):
            handler(event)

    def handler_count(self, event_type: type) -> int:
        return len(self._handlers.get(event_type, []))
