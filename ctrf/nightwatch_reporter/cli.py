"""CLI entry point for converting saved Nightwatch results to CTRF."""

import logging
import sys
from pathlib import Path

import typer

from ctrf.nightwatch_reporter.config_loader import load_reporter_config, load_results
from ctrf.nightwatch_reporter.models.reporter_config import ReporterConfig
from ctrf.nightwatch_reporter.report_generator import CtrfReportGenerator

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream=sys.stderr,
    force=True,
)
logger = logging.getLogger(__name__)

app = typer.Typer()


@app.command()
def main(  # noqa: PLR0913
    results: Path = typer.Option(  # noqa: B008
        ..., help="JSON dump of the Nightwatch results"
    ),
    config: Path | None = typer.Option(  # noqa: B008
        None, help="Nightwatch settings file (YAML or JSON) with a globals.ctrf block"
    ),
    output_file: str | None = typer.Option(None, help="Report file name"),
    output_dir: str | None = typer.Option(None, help="Report output directory"),
    app_name: str | None = typer.Option(None, help="Application name"),
    app_version: str | None = typer.Option(None, help="Application version"),
    os_platform: str | None = typer.Option(None, help="Operating system platform"),
    os_release: str | None = typer.Option(None, help="Operating system release"),
    os_version: str | None = typer.Option(None, help="Operating system version"),
    build_name: str | None = typer.Option(None, help="Build name"),
    build_number: str | None = typer.Option(None, help="Build number"),
) -> None:
    """Write a CTRF JSON report for a saved Nightwatch run."""
    logger.info(f"Results file: {results}")

    try:
        reporter_config = (
            load_reporter_config(config) if config is not None else ReporterConfig()
        )
        nightwatch_results = load_results(results)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Failed to load input: {e}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    overrides = {
        key: value
        for key, value in {
            "output_file": output_file,
            "output_dir": output_dir,
            "app_name": app_name,
            "app_version": app_version,
            "os_platform": os_platform,
            "os_release": os_release,
            "os_version": os_version,
            "build_name": build_name,
            "build_number": build_number,
        }.items()
        if value is not None
    }
    reporter_config = reporter_config.model_copy(update=overrides)

    try:
        CtrfReportGenerator().generate(nightwatch_results, reporter_config)
    except ValueError as e:
        logger.error(f"Failed to build report: {e}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


if __name__ == "__main__":  # pragma: no cover
    app()
