# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Forwards test lifecycle events from the bus to the result classifier."""

from scenario_notifier.events.bus import (
    EventBus,
    TestCaseFinished,
    TestCaseStarted,
    TestStepFinished,
    TestStepStarted,
)
from scenario_notifier.reporting.classifier import ResultClassifier


class EventSubscriber:
    """Subscribes the classifier to the four test lifecycle events.

    Hook steps (before/after hooks around a scenario) are never reported;
    their step events are dropped here.
    """

    def __init__(self, bus: EventBus, classifier: ResultClassifier) -> None:
        self.classifier = classifier
        bus.subscribe(TestCaseStarted, self.on_test_case_started)
        bus.subscribe(TestStepStarted, self.on_test_step_started)
        bus.subscribe(TestStepFinished, self.on_test_step_finished)
        bus.subscribe(TestCaseFinished, self.on_test_case_finished)

    def on_test_case_started(self, event: TestCaseStarted) -> None:
        self.classifier.handle_test_case_started()

    def on_test_step_started(self, event: TestStepStarted) -> None:
        if not event.test_step.is_hook:
            self.classifier.handle_step_started(event.test_step)

    def on_test_step_finished(self, event: TestStepFinished) -> None:
        if not event.test_step.is_hook:
            self.classifier.handle_step_result(event.result)

    def on_test_case_finished(self, event: TestCaseFinished) -> None:
        self.classifier.handle_test_case_result(event.result)
