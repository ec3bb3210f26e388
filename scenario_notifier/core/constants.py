# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Core constants shared across scenario-notifier."""

# Event stream
EVENT_PREFIX = "SCENARIO_EVENT:"
EVENT_SCHEMA_VERSION = "1.0"

# Exit codes (Robot Framework convention)
EXIT_OK = 0
EXIT_FAILURE_CAP = 250
EXIT_ERROR = 255

# Placeholder error messages
SKIPPED_SCENARIO_MESSAGE = "This scenario has been skipped"
SKIPPED_STEP_MESSAGE = "This step has been skipped"
UNDEFINED_SCENARIO_MESSAGE = "This scenario has undefined steps"
UNDEFINED_STEP_MESSAGE = "This step is undefined"
PENDING_MESSAGE = "TODO: implement me"
