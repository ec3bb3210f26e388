# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt
"""Error classification utilities for test results.

This module decides how errors attached to scenario and step results are
relayed to a run notifier. It recognises soft (assumption) failures and
composite errors bundling several independent failures, and provides the
placeholder errors used when a result carries no error of its own.
"""

from collections.abc import Sequence

from scenario_notifier.core.constants import (
    PENDING_MESSAGE,
    SKIPPED_SCENARIO_MESSAGE,
    SKIPPED_STEP_MESSAGE,
    UNDEFINED_SCENARIO_MESSAGE,
    UNDEFINED_STEP_MESSAGE,
)
from scenario_notifier.core.models import Granularity

# Exceptions that mark a test as skipped rather than failed, matched by
# qualified class name so the frameworks need not be importable.
_ASSUMPTION_VIOLATION_TYPES: frozenset[str] = frozenset(
    {
        "unittest.case.SkipTest",
        "_pytest.outcomes.Skipped",
    }
)


class SkippedError(Exception):
    """Placeholder for a skipped result that carries no error."""

    def __init__(self, granularity: Granularity = Granularity.STEP) -> None:
        if granularity == Granularity.SCENARIO:
            message = SKIPPED_SCENARIO_MESSAGE
        else:
            message = SKIPPED_STEP_MESSAGE
        super().__init__(message)
        self.granularity = granularity


class UndefinedError(Exception):
    """Placeholder for an undefined result that carries no error."""

    def __init__(self, granularity: Granularity = Granularity.STEP) -> None:
        if granularity == Granularity.SCENARIO:
            message = UNDEFINED_SCENARIO_MESSAGE
        else:
            message = UNDEFINED_STEP_MESSAGE
        super().__init__(message)
        self.granularity = granularity


class PendingError(Exception):
    """Raised by step definitions that are not implemented yet."""

    def __init__(self, message: str = PENDING_MESSAGE) -> None:
        super().__init__(message)


class AssumptionViolated(Exception):
    """Soft failure: the test could not run meaningfully but did not fail."""

    is_assumption_violation = True


class CompositeFailure(Exception):
    """Bundles several independent failures raised by one test case or step.

    Exposes ``exceptions`` like ``ExceptionGroup`` so both are flattened the
    same way.
    """

    def __init__(self, exceptions: Sequence[BaseException], message: str = "") -> None:
        self.exceptions = tuple(exceptions)
        super().__init__(
            message or f"{len(self.exceptions)} failures", self.exceptions
        )

    def __str__(self) -> str:
        return str(self.args[0])


def is_assumption_violated(error: BaseException) -> bool:
    """Check whether an error represents a failed assumption.

    Any error can opt in by setting a truthy ``is_assumption_violation``
    attribute. The skip exceptions of unittest and pytest are recognised by
    their qualified class name anywhere in the MRO.

    Args:
        error: The error attached to a result.

    Returns:
        True if the error must be reported as a failed assumption.
    """
    if getattr(error, "is_assumption_violation", False):
        return True
    for cls in type(error).__mro__:
        if f"{cls.__module__}.{cls.__qualname__}" in _ASSUMPTION_VIOLATION_TYPES:
            return True
    return False


def as_composite_error(error: BaseException) -> list[BaseException] | None:
    """Return the constituents of a composite error.

    Args:
        error: The error attached to a result.

    Returns:
        The ordered constituent errors, or None when the error is not a
        composite or bundles no errors at all.
    """
    constituents = getattr(error, "exceptions", None)
    if isinstance(constituents, (list, tuple)) and constituents:
        return list(constituents)
    return None


def flatten_errors(error: BaseException) -> list[BaseException]:
    """Flatten nested composite errors depth first, left to right.

    Args:
        error: The error to flatten.

    Returns:
        The leaf errors; a non-composite error yields itself.
    """
    constituents = as_composite_error(error)
    if constituents is None:
        return [error]
    leaves: list[BaseException] = []
    for each in constituents:
        leaves.extend(flatten_errors(each))
    return leaves
