# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Notifiers bound to one test case or step.

A notifier relays the four notifications of a single target to the run
notifier. Step notifications that are switched off use NoTestNotifier,
which absorbs every call.
"""

import logging
from typing import Protocol

from scenario_notifier.core.error_classification import (
    as_composite_error,
    is_assumption_violated,
)
from scenario_notifier.core.models import Description

logger = logging.getLogger(__name__)


class RunNotifier(Protocol):
    """Test-progress sink receiving notifications keyed by description."""

    def fire_test_started(self, description: Description) -> None: ...

    def fire_test_finished(self, description: Description) -> None: ...

    def fire_test_failure(
        self, description: Description, error: BaseException
    ) -> None: ...

    def fire_test_assumption_failed(
        self, description: Description, error: BaseException
    ) -> None: ...


class TestNotifier(Protocol):
    __test__ = False

    def fire_test_started(self) -> None: ...

    def add_failure(self, error: BaseException) -> None: ...

    def add_failed_assumption(self, error: BaseException) -> None: ...

    def fire_test_finished(self) -> None: ...


class NoTestNotifier:
    """Notifier for steps whose notifications are switched off."""

    def fire_test_started(self) -> None:
        pass

    def add_failure(self, error: BaseException) -> None:
        pass

    def add_failed_assumption(self, error: BaseException) -> None:
        pass

    def fire_test_finished(self) -> None:
        pass


class EachTestNotifier:
    """Relays notifications for one description to a run notifier.

    Errors are relayed one at a time. An error that represents a failed
    assumption always goes to the failed-assumption channel, whichever
    channel was asked for. A composite error is never relayed itself; each
    of its constituents is relayed in order, recursively.
    """

    def __init__(self, notifier: RunNotifier, description: Description) -> None:
        self.notifier = notifier
        self.description = description

    def fire_test_started(self) -> None:
        self.notifier.fire_test_started(self.description)

    def add_failure(self, error: BaseException) -> None:
        if is_assumption_violated(error):
            self.add_failed_assumption(error)
            return

        constituents = as_composite_error(error)
        if constituents is not None:
            for each in constituents:
                self.add_failure(each)
            return

        logger.debug(f"Failure for '{self.description}': {error!r}")
        self.notifier.fire_test_failure(self.description, error)

    def add_failed_assumption(self, error: BaseException) -> None:
        constituents = as_composite_error(error)
        if constituents is not None:
            for each in constituents:
                self.add_failed_assumption(each)
            return

        logger.debug(f"Failed assumption for '{self.description}': {error!r}")
        self.notifier.fire_test_assumption_failed(self.description, error)

    def fire_test_finished(self) -> None:
        self.notifier.fire_test_finished(self.description)
