# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Utility modules for scenario-notifier."""

from scenario_notifier.utils.strings import make_filename_compatible
from scenario_notifier.utils.terminal import terminal

__all__ = [
    "make_filename_compatible",
    "terminal",
]
