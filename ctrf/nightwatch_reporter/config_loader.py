"""Load Nightwatch options and result dumps from disk."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ctrf.nightwatch_reporter.models.nightwatch import NightwatchResult
from ctrf.nightwatch_reporter.models.reporter_config import ReporterConfig


def _load_mapping(path: Path, kind: str) -> dict[str, Any]:
    """Read a YAML or JSON file holding a single mapping.

    JSON documents are parsed by the YAML loader as well.
    """
    if not path.exists():
        raise FileNotFoundError(f"{kind} file not found: {path}")

    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        raise ValueError(f"Empty {kind.lower()} file: {path}")

    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping in {path}, got {type(data).__name__}")

    return data


def load_reporter_config(path: Path) -> ReporterConfig:
    """Load reporter options from a Nightwatch settings file.

    Args:
        path: YAML or JSON file with a ``globals.ctrf`` block

    Returns:
        Parsed reporter configuration, with defaults for anything missing

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is invalid or doesn't match the schema

    """
    options = _load_mapping(path, "Config")

    try:
        return ReporterConfig.from_options(options)
    except (ValidationError, AttributeError) as e:
        raise ValueError(f"Invalid reporter config schema in {path}: {e}") from e


def load_results(path: Path) -> NightwatchResult:
    """Load a JSON dump of the Nightwatch result object.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is invalid or doesn't match the schema

    """
    data = _load_mapping(path, "Results")

    try:
        return NightwatchResult.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid results schema in {path}: {e}") from e
