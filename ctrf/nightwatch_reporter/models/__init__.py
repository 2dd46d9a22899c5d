"""Data models for Nightwatch results, reporter options, and CTRF reports."""

from ctrf.nightwatch_reporter.models.ctrf import (
    CtrfReport,
    CtrfTest,
    CtrfTestState,
    Environment,
    Results,
    Summary,
    Tool,
)
from ctrf.nightwatch_reporter.models.nightwatch import (
    NightwatchCompletedTestCase,
    NightwatchModule,
    NightwatchResult,
)
from ctrf.nightwatch_reporter.models.reporter_config import ReporterConfig

__all__ = [
    "CtrfReport",
    "CtrfTest",
    "CtrfTestState",
    "Environment",
    "NightwatchCompletedTestCase",
    "NightwatchModule",
    "NightwatchResult",
    "ReporterConfig",
    "Results",
    "Summary",
    "Tool",
]
