# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Run notifiers receiving scenario and step notifications."""

from scenario_notifier.sinks.console import ConsoleRunNotifier
from scenario_notifier.sinks.unittest_adapter import DescribedTest, UnittestRunNotifier

__all__ = ["ConsoleRunNotifier", "DescribedTest", "UnittestRunNotifier"]
