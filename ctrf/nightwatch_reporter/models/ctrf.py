"""Models for the Common Test Report Format (CTRF) JSON document."""

from collections.abc import Sequence
from typing import Any, Literal, get_args

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

CtrfTestState = Literal["passed", "failed", "skipped", "pending", "other"]

TOOL_NAME = "nightwatch.js"


class CtrfModel(BaseModel):
    """Base model emitting camelCase CTRF keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Tool(CtrfModel):
    """Tool that produced the report."""

    name: str = Field(default=TOOL_NAME, description="Test runner name")


class CtrfTest(CtrfModel):
    """Outcome of a single test case."""

    __test__ = False

    name: str = Field(..., min_length=1, description="Test or module name")
    status: CtrfTestState = Field(..., description="Normalized test status")
    duration: int = Field(..., ge=0, description="Execution time in milliseconds")


class Summary(CtrfModel):
    """Aggregate counts for a test run."""

    tests: int = Field(default=0, ge=0)
    passed: int = Field(default=0, ge=0)
    failed: int = Field(default=0, ge=0)
    pending: int = Field(default=0, ge=0)
    skipped: int = Field(default=0, ge=0)
    other: int = Field(default=0, ge=0)
    start: int = Field(..., description="Run start, epoch milliseconds")
    stop: int = Field(..., description="Run stop, epoch milliseconds")

    @classmethod
    def from_tests(cls, tests: Sequence[CtrfTest], start: int, stop: int) -> "Summary":
        """Count tests per status in a single pass."""
        counts = dict.fromkeys(get_args(CtrfTestState), 0)
        for test in tests:
            counts[test.status] += 1
        return cls(tests=len(tests), start=start, stop=stop, **counts)


class Environment(CtrfModel):
    """Optional details about the application and build under test."""

    app_name: str | None = None
    app_version: str | None = None
    os_platform: str | None = None
    os_release: str | None = None
    os_version: str | None = None
    build_name: str | None = None
    build_number: str | None = None

    def has_details(self) -> bool:
        """Return True when at least one field is set."""
        return bool(self.model_dump(exclude_none=True))


class Results(CtrfModel):
    """Body of a CTRF report."""

    tool: Tool = Field(default_factory=Tool)
    summary: Summary
    tests: list[CtrfTest] = Field(default_factory=list)
    environment: Environment | None = None


class CtrfReport(CtrfModel):
    """Top-level CTRF document."""

    results: Results

    def to_json_dict(self) -> dict[str, Any]:
        """Dump with CTRF keys, dropping unset optional fields."""
        return self.model_dump(by_alias=True, exclude_none=True)
