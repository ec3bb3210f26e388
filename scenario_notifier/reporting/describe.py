# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Human readable descriptions of scenarios and steps."""

from scenario_notifier.core.models import Description, TestCase, TestStep
from scenario_notifier.utils.strings import make_filename_compatible


class ScenarioDescriber:
    """Describes one test case and its steps.

    The scenario is named after the test case, each step after its text.
    Unique ids point at the feature file location. Step ids also carry the
    scenario line, so background and outline steps shared by several
    scenarios remain distinct.

    Args:
        test_case: The test case to describe
        filename_compatible_names: Replace characters that are unsafe in
            file names with underscores
    """

    def __init__(self, test_case: TestCase, filename_compatible_names: bool = False):
        self.test_case = test_case
        self.filename_compatible_names = filename_compatible_names

    def describe(self) -> Description:
        return Description(
            display_name=self._name(self.test_case.name),
            unique_id=f"{self.test_case.uri}:{self.test_case.line}",
        )

    def describe_child(self, step: TestStep) -> Description:
        return Description(
            display_name=self._name(step.text),
            unique_id=f"{self.test_case.uri}:{self.test_case.line}:{step.line}",
        )

    def _name(self, name: str) -> str:
        if self.filename_compatible_names:
            return make_filename_compatible(name)
        return name
