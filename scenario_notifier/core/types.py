# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Core types for scenario-notifier configuration and summaries."""

from dataclasses import dataclass

from scenario_notifier.core.constants import EXIT_ERROR, EXIT_FAILURE_CAP, EXIT_OK


@dataclass(frozen=True)
class ReporterOptions:
    """Configuration of a scenario reporter, fixed for its lifetime.

    Attributes:
        strict: Report pending and undefined results as failures instead of
            failed assumptions
        step_notifications: Notify started/finished/failures for each step in
            addition to the scenario itself
        filename_compatible_names: Replace characters that are unsafe in file
            names when describing scenarios and steps
    """

    strict: bool = False
    step_notifications: bool = False
    filename_compatible_names: bool = False


@dataclass
class TestResults:
    """Tally of finished notification targets seen by a run notifier.

    Attributes:
        passed: Targets finished without failure or failed assumption
        failed: Targets that received at least one failure
        skipped: Targets that only received failed assumptions
        errors: Number of errors logged while processing the event stream

    Properties:
        total: Total number of targets (passed + failed + skipped)
    """

    __test__ = False

    passed: int = 0
    failed: int = 0
    skipped: int = 0
    errors: int = 0

    @property
    def total(self) -> int:
        """Total number of finished targets."""
        return self.passed + self.failed + self.skipped

    @property
    def has_failures(self) -> bool:
        """Check if any target failed."""
        return self.failed > 0

    @property
    def has_errors(self) -> bool:
        """Check if processing errors occurred (not test failures)."""
        return self.errors > 0

    @property
    def success_rate(self) -> float:
        """Success rate excluding skipped targets (0.0-100.0)."""
        with_results = self.total - self.skipped
        if with_results > 0:
            return (self.passed / with_results) * 100
        return 0.0

    @property
    def exit_code(self) -> int:
        """Calculate exit code per Robot Framework convention.

        Exit codes:
            0: All targets passed, no errors
            1-250: Number of failures (capped at 250)
            255: Processing errors occurred
        """
        if self.has_errors:
            return EXIT_ERROR
        if self.has_failures:
            return min(self.failed, EXIT_FAILURE_CAP)
        return EXIT_OK

    def __str__(self) -> str:
        """Concise string representation: total/passed/failed/skipped."""
        return f"{self.total}/{self.passed}/{self.failed}/{self.skipped}"
