"""Models for the result object Nightwatch hands to custom reporters."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class NightwatchModel(BaseModel):
    """Base model reading camelCase Nightwatch keys and ignoring the rest."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )


class NightwatchCompletedTestCase(NightwatchModel):
    """A test case Nightwatch finished executing."""

    status: str = Field(..., description="Raw status (pass, fail, skipped, ...)")
    time_ms: int = Field(..., ge=0, description="Measured duration in milliseconds")


class NightwatchModule(NightwatchModel):
    """Results for one test module, usually one test file."""

    completed: dict[str, NightwatchCompletedTestCase] = Field(
        ..., description="Completed test cases keyed by name, in completion order"
    )
    skipped_at_runtime: list[str] = Field(
        default_factory=list, description="Test cases skipped during the run"
    )


class NightwatchResult(NightwatchModel):
    """Complete result tree for a Nightwatch run."""

    modules: dict[str, NightwatchModule] = Field(
        default_factory=dict, description="Module results keyed by module name"
    )
    start_timestamp: str | None = Field(default=None, description="Run start time")
    end_timestamp: str | None = Field(default=None, description="Run end time")
