"""Build CTRF reports from Nightwatch results and write them to disk."""

import json
import logging
import time
from collections.abc import Callable, Mapping
from datetime import UTC, datetime, timedelta
from email.utils import parsedate_to_datetime
from pathlib import Path
from typing import Any

from ctrf.nightwatch_reporter.models.ctrf import (
    CtrfReport,
    CtrfTest,
    CtrfTestState,
    Results,
    Summary,
    Tool,
)
from ctrf.nightwatch_reporter.models.nightwatch import (
    NightwatchModule,
    NightwatchResult,
)
from ctrf.nightwatch_reporter.models.reporter_config import ReporterConfig

logger = logging.getLogger(__name__)

REPORTER_NAME = "nightwatch-ctrf-json-reporter"

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

_STATUS_MAP: dict[str, CtrfTestState] = {
    "pass": "passed",
    "fail": "failed",
    "skipped": "skipped",
    "pending": "pending",
}


def map_status(nightwatch_status: str) -> CtrfTestState:
    """Map a Nightwatch status onto the CTRF vocabulary."""
    return _STATUS_MAP.get(nightwatch_status, "other")


def parse_timestamp(value: str) -> int:
    """Parse a Nightwatch timestamp into epoch milliseconds.

    Nightwatch formats timestamps with ``Date.toUTCString()``, e.g.
    ``Tue, 10 Oct 2023 12:00:00 GMT``. ISO-8601 strings are accepted too.
    Timestamps without an offset are read as UTC.

    Raises:
        ValueError: If the value is in neither format

    """
    try:
        parsed = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        try:
            parsed = datetime.fromisoformat(value)
        except ValueError as e:
            raise ValueError(f"Unparseable timestamp: {value!r}") from e

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return (parsed - _EPOCH) // timedelta(milliseconds=1)


def is_module_skipped(module: NightwatchModule) -> bool:
    """Return True when no test case in the module completed."""
    return len(module.completed) == 0


def get_skipped_at_runtime_tests(module: NightwatchModule) -> list[CtrfTest]:
    return [
        CtrfTest(name=name, status="skipped", duration=0)
        for name in module.skipped_at_runtime
    ]


def get_tests_from_module(module: NightwatchModule, module_name: str) -> list[CtrfTest]:
    """Flatten one module into CTRF tests.

    A module with no completed cases yields a single skipped test named
    after the module. Runtime-skipped cases always follow the module's
    other tests.
    """
    if is_module_skipped(module):
        tests = [CtrfTest(name=module_name, status="skipped", duration=0)]
    else:
        tests = [
            CtrfTest(
                name=test_name,
                status=map_status(test_case.status),
                duration=test_case.time_ms,
            )
            for test_name, test_case in module.completed.items()
        ]

    tests.extend(get_skipped_at_runtime_tests(module))
    return tests


def get_tests_from_results(results: NightwatchResult) -> list[CtrfTest]:
    tests: list[CtrfTest] = []
    for module_name, module in results.modules.items():
        tests.extend(get_tests_from_module(module, module_name))
    return tests


def build_report(results: NightwatchResult, config: ReporterConfig) -> CtrfReport:
    """Build a CTRF report from Nightwatch results.

    Note that ``summary.stop`` is taken from the run's start timestamp and
    ``summary.start`` from its end timestamp, matching the reports that the
    JavaScript Nightwatch reporter produces.
    """
    start = int(time.time() * 1000)
    stop = 0
    if results.start_timestamp is not None:
        stop = parse_timestamp(results.start_timestamp)
    if results.end_timestamp is not None:
        start = parse_timestamp(results.end_timestamp)

    tests = get_tests_from_results(results)

    return CtrfReport(
        results=Results(
            tool=Tool(),
            summary=Summary.from_tests(tests, start=start, stop=stop),
            tests=tests,
            environment=config.environment(),
        )
    )


def render_report(report: CtrfReport) -> str:
    """Serialize a report as indented JSON with a trailing newline."""
    return json.dumps(report.to_json_dict(), indent=2, ensure_ascii=False) + "\n"


def write_report_to_file(report: CtrfReport, config: ReporterConfig) -> Path | None:
    """Write the report, creating the output directory if needed.

    Filesystem errors are logged rather than raised so the test run is never
    blocked by the reporter.

    Returns:
        Path of the written file, or None if writing failed

    """
    file_path = config.output_path
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(render_report(report), encoding="utf-8")
    except OSError as e:
        logger.error(f"Error writing ctrf json report: {e}")
        return None

    logger.info(
        f"{REPORTER_NAME}: successfully written ctrf json to "
        f"{config.output_dir}/{config.resolved_filename}"
    )
    return file_path


class CtrfReportGenerator:
    """Nightwatch custom reporter producing a CTRF JSON file.

    Every call to ``write`` builds a fresh report; nothing is kept between
    runs.
    """

    def write(
        self,
        results: NightwatchResult | Mapping[str, Any],
        options: Mapping[str, Any] | None,
        done: Callable[[], None],
    ) -> None:
        """Generate the report for a finished run and signal ``done``.

        Args:
            results: Nightwatch result object, parsed or raw
            options: Nightwatch settings; only ``globals.ctrf`` is read
            done: Callback invoked once the write attempt is over

        """
        if not isinstance(results, NightwatchResult):
            results = NightwatchResult.model_validate(results)

        self.generate(results, ReporterConfig.from_options(options))

        done()

    def generate(
        self, results: NightwatchResult, config: ReporterConfig
    ) -> Path | None:
        """Build the report and write it to the configured location."""
        report = build_report(results, config)
        logger.debug(
            f"Built report with {report.results.summary.tests} tests "
            f"from {len(results.modules)} modules"
        )
        return write_report_to_file(report, config)


def write(
    results: NightwatchResult | Mapping[str, Any],
    options: Mapping[str, Any] | None,
    done: Callable[[], None],
) -> None:
    """Reporter hook with the signature Nightwatch calls on completion."""
    CtrfReportGenerator().write(results, options, done)
