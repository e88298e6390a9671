"""Click command-line interface for agentline."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
from functools import wraps
from pathlib import Path
from typing import Any, TypeVar

import click

from agentline.config import load_settings
from agentline.console import (
    print_error,
    print_header,
    print_init_report,
    print_result,
    print_run_info,
    print_stages,
)
from agentline.domain.exceptions import ConfigurationError
from agentline.domain.models import PipelineOptions, PipelineStatus
from agentline.domain.stages import stages
from agentline.entrypoint import build_pipeline
from agentline.logging_setup import setup_logging
from agentline.project import init_project


F = TypeVar("F", bound=Callable[..., Any])


def project_options(func: F) -> F:
    """
    Decorator adding project selection options to a click command.

    Options added:
        -p/--project-dir: Project root the agents work in
        --config: Path to a config.json overriding .agentline/config.json
    """

    @click.option(
        "-p",
        "--project-dir",
        default=".",
        type=click.Path(file_okay=False, path_type=Path),
        help="Working directory for the agents (default: .)",
    )
    @click.option(
        "--config",
        "config_path",
        default=None,
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        help="Path to config.json (default: <project>/.agentline/config.json)",
    )
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


@click.group()
@click.version_option(package_name="agentline")
def main() -> None:
    """Multi-agent pipeline: requirements, design, code, tests and review."""


@main.command("run")
@click.argument("feature")
@project_options
@click.option("-f", "--fast", is_flag=True, help="Use the fastest model for every agent")
@click.option("-d", "--dry-run", is_flag=True, help="Print commands without executing them")
@click.option("-v", "--verbose", is_flag=True, help="Print each command and its exit code")
@click.option(
    "--runs-dir",
    default=None,
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory for run artifacts (default: <project>/.agentline/runs)",
)
@click.option("--invoker", default=None, help="Invoker name (default: claude)")
@click.option(
    "--timeout",
    default=None,
    type=click.FloatRange(min=0, min_open=True),
    help="Per-stage timeout in seconds (default: none)",
)
@click.option(
    "--log-file",
    default=None,
    type=click.Path(dir_okay=False),
    help="Path to log file",
)
def run_command(
    feature: str,
    project_dir: Path,
    config_path: Path | None,
    fast: bool,
    dry_run: bool,
    verbose: bool,
    runs_dir: Path | None,
    invoker: str | None,
    timeout: float | None,
    log_file: str | None,
) -> None:
    """Run the pipeline for FEATURE, a plain-text feature request."""
    setup_logging(log_file=log_file, verbose=verbose)

    options = PipelineOptions(
        fast=fast, dry_run=dry_run, verbose=verbose, project_dir=project_dir
    )

    try:
        settings = load_settings(options.working_dir, config_path)
        if runs_dir is not None:
            settings = replace(settings, runs_dir=runs_dir.expanduser().resolve())
        if invoker is not None:
            settings = replace(settings, invoker=invoker)
        if timeout is not None:
            settings = replace(settings, stage_timeout=timeout)
        pipeline = build_pipeline(options, settings=settings)
    except ConfigurationError as e:
        print_error(str(e), hint="Check .agentline/config.json and the --invoker option")
        raise SystemExit(2) from e

    print_header("agentline", subtitle=feature)
    print_run_info(
        project_dir=str(options.working_dir),
        runs_dir=str(settings.runs_dir),
        invoker=settings.invoker,
        fast=fast,
        dry_run=dry_run,
        log_file=log_file,
        extra_info={"Stage timeout": f"{settings.stage_timeout}s"}
        if settings.stage_timeout
        else None,
    )

    result = pipeline.run(feature)
    print_result(result)

    if result.status == PipelineStatus.FAILED:
        raise SystemExit(1)


@main.command("stages")
def stages_command() -> None:
    """Show the pipeline stages."""
    print_stages(stages())


@main.command("init")
@project_options
def init_command(project_dir: Path, config_path: Path | None) -> None:
    """Install personas and the runs directory into a project."""
    project = project_dir.expanduser().resolve()
    try:
        settings = load_settings(project, config_path)
    except ConfigurationError as e:
        print_error(str(e))
        raise SystemExit(2) from e

    report = init_project(project, settings)
    print_init_report(report, str(project / ".gitignore"))
