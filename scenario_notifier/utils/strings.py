# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""String utility functions for scenario-notifier."""

import re


def make_filename_compatible(name: str) -> str:
    """Make a scenario or step name safe for use in file names.

    Replaces any character that is not alphanumeric or underscore with an
    underscore. Case is preserved.

    Args:
        name: The name to convert (e.g., "Given I have 5 cukes").

    Returns:
        Name suitable for filenames (e.g., "Given_I_have_5_cukes").

    Examples:
        >>> make_filename_compatible("Given I have 5 cukes")
        'Given_I_have_5_cukes'
        >>> make_filename_compatible("a/b: c")
        'a_b__c'
    """
    return re.sub(r"[^a-zA-Z0-9_]", "_", name)
