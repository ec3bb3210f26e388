# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

import logging
from pathlib import Path

import errorhandler
import typer
from typing_extensions import Annotated

import scenario_notifier
from scenario_notifier.core.constants import EXIT_ERROR
from scenario_notifier.core.models import TestCase
from scenario_notifier.core.types import ReporterOptions, TestResults
from scenario_notifier.events.bus import EventBus
from scenario_notifier.events.stream import EventStreamProcessor
from scenario_notifier.reporting.reporter import ScenarioReporter
from scenario_notifier.sinks.console import ConsoleRunNotifier
from scenario_notifier.utils.logging import VerbosityLevel, configure_logging
from scenario_notifier.utils.terminal import terminal

app = typer.Typer(add_completion=False)

logger = logging.getLogger(__name__)

error_handler = errorhandler.ErrorHandler()


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"scenario-notifier, version {scenario_notifier.__version__}")
        raise typer.Exit()


Events = Annotated[
    Path,
    typer.Argument(
        exists=True,
        dir_okay=False,
        file_okay=True,
        help="Path to the recorded event stream of a test run.",
    ),
]


Strict = Annotated[
    bool,
    typer.Option(
        "--strict",
        help="Report pending and undefined results as failures.",
        envvar="SCENARIO_NOTIFIER_STRICT",
    ),
]


StepNotifications = Annotated[
    bool,
    typer.Option(
        "--step-notifications",
        help="Report each step as a test of its own, in addition to the scenario.",
        envvar="SCENARIO_NOTIFIER_STEP_NOTIFICATIONS",
    ),
]


FilenameCompatibleNames = Annotated[
    bool,
    typer.Option(
        "--filename-compatible-names",
        help="Replace characters unsafe in file names in scenario and step names.",
        envvar="SCENARIO_NOTIFIER_FILENAME_COMPATIBLE_NAMES",
    ),
]


Verbosity = Annotated[
    VerbosityLevel,
    typer.Option(
        "-v",
        "--verbosity",
        help="Verbosity level.",
        envvar="SCENARIO_NOTIFIER_VERBOSITY",
        is_eager=True,
    ),
]


Version = Annotated[
    bool,
    typer.Option(
        "--version",
        callback=version_callback,
        help="Display version number.",
        is_eager=True,
    ),
]


def replay(events: Path, options: ReporterOptions) -> TestResults:
    """Replay a recorded event stream into the console notifier.

    Args:
        events: Path to the event stream
        options: Reporter configuration

    Returns:
        Tally of the finished scenarios (and steps, with step notifications)
    """
    bus = EventBus()
    reporter = ScenarioReporter(bus, options)
    notifier = ConsoleRunNotifier()

    def start_unit(test_case: TestCase) -> None:
        reporter.start_test_case(test_case, notifier)

    processor = EventStreamProcessor(bus, on_test_case_started=start_unit)
    with events.open("rb") as f:
        processor.process_lines(f)

    logger.info(f"Replayed {processor.events_published} events from {events}")
    notifier.results.errors = processor.errors
    return notifier.results


@app.command()
def main(
    events: Events,
    strict: Strict = False,
    step_notifications: StepNotifications = False,
    filename_compatible_names: FilenameCompatibleNames = False,
    verbosity: Verbosity = VerbosityLevel.WARNING,
    version: Version = False,
) -> None:
    """Relay the scenario and step results of a recorded BDD run."""
    configure_logging(verbosity, error_handler)

    options = ReporterOptions(
        strict=strict,
        step_notifications=step_notifications,
        filename_compatible_names=filename_compatible_names,
    )
    results = replay(events, options)

    typer.echo(terminal.format_test_summary(results))
    exit(results)


def exit(results: TestResults) -> None:
    if error_handler.fired:
        raise typer.Exit(EXIT_ERROR)
    raise typer.Exit(results.exit_code)
