# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Core components shared across scenario-notifier."""

from scenario_notifier.core.models import (
    Description,
    Granularity,
    Result,
    Status,
    TestCase,
    TestStep,
)
from scenario_notifier.core.types import ReporterOptions, TestResults

__all__ = [
    # Models
    "Description",
    "Granularity",
    "Result",
    "Status",
    "TestCase",
    "TestStep",
    # Types
    "ReporterOptions",
    "TestResults",
]
