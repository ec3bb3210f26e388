# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Run notifier printing scenario progress to the terminal."""

import logging
import time
from datetime import datetime
from typing import Any

from scenario_notifier.core.models import Description
from scenario_notifier.core.types import TestResults
from scenario_notifier.utils.terminal import terminal

logger = logging.getLogger(__name__)

EXECUTING = "EXECUTING"
PASSED = "PASSED"
FAILED = "FAILED"
SKIPPED = "SKIPPED"


class ConsoleRunNotifier:
    """Prints one line per started and finished target, Robot Framework style.

    Also tallies finished targets into TestResults. A target that received a
    failure counts as failed, one that only received failed assumptions as
    skipped, anything else as passed.
    """

    def __init__(self, show_started: bool = True) -> None:
        self.show_started = show_started
        self.results = TestResults()
        self.test_status: dict[Description, dict[str, Any]] = {}
        self.test_counter = 0

    def fire_test_started(self, description: Description) -> None:
        self.test_counter += 1
        self.test_status[description] = {
            "start_time": time.time(),
            "status": EXECUTING,
            "test_id": self.test_counter,
            "messages": [],
        }
        if self.show_started:
            print(
                f"{self._timestamp()} [ID:{self.test_counter}] "
                f"{terminal.warning(EXECUTING)} {description}"
            )

    def fire_test_failure(
        self, description: Description, error: BaseException
    ) -> None:
        info = self._status_for(description)
        info["status"] = FAILED
        error_type = getattr(error, "error_type", None) or type(error).__name__
        info["messages"].append(f"{error_type}: {error}")

    def fire_test_assumption_failed(
        self, description: Description, error: BaseException
    ) -> None:
        info = self._status_for(description)
        if info["status"] != FAILED:
            info["status"] = SKIPPED
        info["messages"].append(str(error))

    def fire_test_finished(self, description: Description) -> None:
        info = self._status_for(description)
        del self.test_status[description]
        if info["status"] == EXECUTING:
            info["status"] = PASSED
        status = info["status"]
        duration = time.time() - info["start_time"]

        if status == PASSED:
            self.results.passed += 1
            status_text = terminal.success(status)
        elif status == FAILED:
            self.results.failed += 1
            status_text = terminal.error(status)
        else:
            self.results.skipped += 1
            status_text = terminal.warning(status)

        print(
            f"{self._timestamp()} [ID:{info['test_id']}] "
            f"{status_text} {description} in {duration:.1f} seconds"
        )
        for message in info["messages"]:
            print(f"    {message}")

    def _status_for(self, description: Description) -> dict[str, Any]:
        if description not in self.test_status:
            # finished or failed without a start; track it anyway
            logger.warning(f"Notification for '{description}' before it started")
            self.test_counter += 1
            self.test_status[description] = {
                "start_time": time.time(),
                "status": EXECUTING,
                "test_id": self.test_counter,
                "messages": [],
            }
        return self.test_status[description]

    @staticmethod
    def _timestamp() -> str:
        return datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
