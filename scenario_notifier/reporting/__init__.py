# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Translation of scenario and step results into run notifications."""

from scenario_notifier.reporting.classifier import (
    DescriptionProvider,
    ExecutionUnit,
    ResultClassifier,
)
from scenario_notifier.reporting.describe import ScenarioDescriber
from scenario_notifier.reporting.notifier import (
    EachTestNotifier,
    NoTestNotifier,
    RunNotifier,
    TestNotifier,
)
from scenario_notifier.reporting.reporter import ScenarioReporter
from scenario_notifier.reporting.subscriber import EventSubscriber

__all__ = [
    "DescriptionProvider",
    "EachTestNotifier",
    "EventSubscriber",
    "ExecutionUnit",
    "NoTestNotifier",
    "ResultClassifier",
    "RunNotifier",
    "ScenarioDescriber",
    "ScenarioReporter",
    "TestNotifier",
]
