# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Core data models shared across scenario-notifier.

This module contains the data structures passed between the event bus,
the reporter and the run notifiers.
"""

from dataclasses import dataclass, field
from enum import Enum


class Status(str, Enum):
    """Outcome of an executed test case or test step."""

    PASSED = "passed"
    SKIPPED = "skipped"
    PENDING = "pending"
    UNDEFINED = "undefined"
    FAILED = "failed"


class Granularity(Enum):
    """Whether a result applies to a whole scenario or to one of its steps."""

    SCENARIO = "scenario"
    STEP = "step"


@dataclass(frozen=True)
class Result:
    """Result of a test case or test step as reported by the execution engine.

    Attributes:
        status: Outcome of the execution
        error: Error attached to the outcome, required for FAILED
        duration: Execution time in seconds, if known
    """

    status: Status
    error: BaseException | None = None
    duration: float | None = None

    def __post_init__(self) -> None:
        if self.status == Status.FAILED and self.error is None:
            raise ValueError("A failed result must carry an error")

    def is_status(self, status: Status) -> bool:
        return self.status == status


@dataclass(frozen=True)
class Description:
    """Identifies the test case or step a notification applies to."""

    display_name: str
    unique_id: str

    def __str__(self) -> str:
        return self.display_name


@dataclass(frozen=True)
class TestStep:
    """A step of a test case, or a hook pseudo-step around it."""

    __test__ = False

    text: str
    line: int
    is_hook: bool = False


@dataclass(frozen=True)
class TestCase:
    """A scenario (pickle) ready for execution."""

    __test__ = False

    name: str
    uri: str
    line: int
    tags: tuple[str, ...] = field(default_factory=tuple)
