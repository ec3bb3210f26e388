# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Centralized terminal formatting utilities for scenario-notifier."""

import os
import re

from colorama import Fore, Style, init

from scenario_notifier.core.types import TestResults

# autoreset=True means colors reset after each print
init(autoreset=True)


class TerminalColors:
    """Centralized color scheme for consistent terminal output."""

    # Semantic color mapping for different message types
    ERROR = Fore.RED
    WARNING = Fore.YELLOW
    SUCCESS = Fore.GREEN
    INFO = Fore.CYAN
    RESET = Style.RESET_ALL

    BOLD = Style.BRIGHT

    # Check if colors should be disabled (for CI/CD environments)
    NO_COLOR = os.environ.get("NO_COLOR") is not None

    # Regex pattern to match ANSI escape sequences
    ANSI_ESCAPE_PATTERN = re.compile(r"\x1b\[[0-9;]*m")

    @classmethod
    def strip_ansi(cls, text: str) -> str:
        """Remove all ANSI escape sequences from text."""
        return cls.ANSI_ESCAPE_PATTERN.sub("", text)

    @classmethod
    def _color(cls, color: str, text: str) -> str:
        if cls.NO_COLOR:
            return text
        return f"{color}{text}{cls.RESET}"

    @classmethod
    def error(cls, text: str) -> str:
        """Format error text in red."""
        return cls._color(cls.ERROR, text)

    @classmethod
    def warning(cls, text: str) -> str:
        """Format warning text in yellow."""
        return cls._color(cls.WARNING, text)

    @classmethod
    def success(cls, text: str) -> str:
        """Format success text in green."""
        return cls._color(cls.SUCCESS, text)

    @classmethod
    def info(cls, text: str) -> str:
        """Format info text in cyan."""
        return cls._color(cls.INFO, text)

    @classmethod
    def bold(cls, text: str) -> str:
        """Format text in bold."""
        return cls._color(cls.BOLD, text)

    @classmethod
    def format_test_summary(cls, results: TestResults) -> str:
        """Format a one line summary: 'N tests, N passed, N failed, N skipped.'

        Counts are colored only when greater than zero; labels never are.

        Args:
            results: Tally to summarize

        Returns:
            Summary line, possibly containing ANSI color codes
        """

        def count(value: int, color: str) -> str:
            return cls._color(color, str(value)) if value > 0 else str(value)

        return (
            f"{results.total} tests, "
            f"{count(results.passed, cls.SUCCESS)} passed, "
            f"{count(results.failed, cls.ERROR)} failed, "
            f"{count(results.skipped, cls.WARNING)} skipped."
        )


# Single instance for use across the codebase
terminal = TerminalColors()
