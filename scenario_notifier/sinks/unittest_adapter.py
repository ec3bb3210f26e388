# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Run notifier adapting notifications onto a unittest.TestResult."""

import unittest

from scenario_notifier.core.models import Description


class DescribedTest(unittest.TestCase):
    """Stand-in test case identifying a scenario or step to unittest."""

    __test__ = False

    def __init__(self, description: Description) -> None:
        super().__init__("runTest")
        self.description = description

    def runTest(self) -> None:  # noqa: N802
        pass

    def id(self) -> str:
        return self.description.unique_id

    def shortDescription(self) -> str:  # noqa: N802
        return self.description.display_name

    def __str__(self) -> str:
        return self.description.display_name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DescribedTest):
            return NotImplemented
        return self.description == other.description

    def __hash__(self) -> int:
        return hash(self.description)


class UnittestRunNotifier:
    """Relays notifications to a unittest.TestResult.

    Failures become addFailure(), failed assumptions become addSkip() with
    the error message as reason.
    """

    def __init__(self, result: unittest.TestResult | None = None) -> None:
        self.result = result if result is not None else unittest.TestResult()
        self._tests: dict[Description, DescribedTest] = {}

    def _test_for(self, description: Description) -> DescribedTest:
        if description not in self._tests:
            self._tests[description] = DescribedTest(description)
        return self._tests[description]

    def fire_test_started(self, description: Description) -> None:
        self.result.startTest(self._test_for(description))

    def fire_test_failure(
        self, description: Description, error: BaseException
    ) -> None:
        exc_info = (type(error), error, error.__traceback__)
        self.result.addFailure(self._test_for(description), exc_info)

    def fire_test_assumption_failed(
        self, description: Description, error: BaseException
    ) -> None:
        self.result.addSkip(self._test_for(description), str(error))

    def fire_test_finished(self, description: Description) -> None:
        self.result.stopTest(self._test_for(description))
