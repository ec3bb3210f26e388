# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Scenario reporter attached to an event bus for the length of a run."""

import logging

from scenario_notifier.core.models import TestCase
from scenario_notifier.core.types import ReporterOptions
from scenario_notifier.events.bus import EventBus
from scenario_notifier.reporting.classifier import DescriptionProvider, ResultClassifier
from scenario_notifier.reporting.describe import ScenarioDescriber
from scenario_notifier.reporting.notifier import RunNotifier
from scenario_notifier.reporting.subscriber import EventSubscriber

logger = logging.getLogger(__name__)


class ScenarioReporter:
    """Reports the test cases published on a bus to a run notifier.

    The caller starts an execution unit for every test case before the
    case's events are published. Each concurrently running test case needs
    its own reporter; only the options may be shared.

    Example:
        >>> bus = EventBus()
        >>> reporter = ScenarioReporter(bus, ReporterOptions(strict=True))
        >>> reporter.start_test_case(test_case, notifier)
        >>> bus.publish(TestCaseStarted(test_case))
    """

    def __init__(self, bus: EventBus, options: ReporterOptions | None = None):
        self.options = options or ReporterOptions()
        self.classifier = ResultClassifier(self.options)
        self.subscriber = EventSubscriber(bus, self.classifier)
        logger.debug(f"Scenario reporter attached with {self.options}")

    def start_execution_unit(
        self, describer: DescriptionProvider, run_notifier: RunNotifier
    ) -> None:
        self.classifier.start_execution_unit(describer, run_notifier)

    def start_test_case(self, test_case: TestCase, run_notifier: RunNotifier) -> None:
        """Start an execution unit described by the default ScenarioDescriber."""
        describer = ScenarioDescriber(
            test_case, filename_compatible_names=self.options.filename_compatible_names
        )
        self.start_execution_unit(describer, run_notifier)
