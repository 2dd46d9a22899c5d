"""Reporter options read from the Nightwatch ``globals.ctrf`` block."""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from ctrf.nightwatch_reporter.models.ctrf import Environment

DEFAULT_OUTPUT_FILE = "ctrf-report.json"
DEFAULT_OUTPUT_DIR = "ctrf"


class ReporterConfig(BaseModel):
    """Configuration for the CTRF reporter."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )

    output_file: str = Field(
        default=DEFAULT_OUTPUT_FILE, description="Report file name"
    )
    output_dir: str = Field(
        default=DEFAULT_OUTPUT_DIR, description="Directory the report is written to"
    )
    app_name: str | None = None
    app_version: str | None = None
    os_platform: str | None = None
    os_release: str | None = None
    os_version: str | None = None
    build_name: str | None = None
    build_number: str | None = None

    @field_validator("output_file", "output_dir", mode="before")
    @classmethod
    def _default_when_null(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].default
        return value

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None) -> "ReporterConfig":
        """Build config from a Nightwatch options mapping.

        Only ``options["globals"]["ctrf"]`` is read; anything missing falls
        back to the defaults.
        """
        globals_ = (options or {}).get("globals") or {}
        return cls.model_validate(globals_.get("ctrf") or {})

    @property
    def resolved_filename(self) -> str:
        """Output file name, always ending in ``.json``."""
        if self.output_file.endswith(".json"):
            return self.output_file
        return f"{self.output_file}.json"

    @property
    def output_path(self) -> Path:
        return Path(self.output_dir) / self.resolved_filename

    def environment(self) -> Environment | None:
        """Return the configured environment details, or None if there are none."""
        environment = Environment(
            app_name=self.app_name,
            app_version=self.app_version,
            os_platform=self.os_platform,
            os_release=self.os_release,
            os_version=self.os_version,
            build_name=self.build_name,
            build_number=self.build_number,
        )
        return environment if environment.has_details() else None
