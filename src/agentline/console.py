"""Rich console utilities for the agentline CLI."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from agentline.domain.models import PipelineResult, PipelineStatus, StageDefinition

if TYPE_CHECKING:
    from agentline.project import InitReport

# Shared console instances
console = Console()
error_console = Console(stderr=True)

_STATUS_STYLES = {
    PipelineStatus.APPROVED: ("Success", "green"),
    PipelineStatus.EXHAUSTED: ("Success", "yellow"),
    PipelineStatus.FAILED: ("Failed", "red"),
}


def print_header(title: str, subtitle: str | None = None) -> None:
    """Print the run banner with the feature request underneath."""
    content = Text(title, style="bold blue")
    if subtitle:
        content.append(f"\n{subtitle}", style="dim")
    console.print(Panel(content, expand=False))


def print_error(message: str, hint: str | None = None) -> None:
    """Print formatted error message to stderr."""
    content = Text(f"ERROR: {message}", style="bold red")
    if hint:
        content.append(f"\n\nHint: {hint}", style="yellow")
    error_console.print(Panel(content, title="Error", border_style="red"))


def print_run_info(
    project_dir: str,
    runs_dir: str,
    invoker: str,
    fast: bool,
    dry_run: bool,
    log_file: str | None = None,
    extra_info: dict[str, Any] | None = None,
) -> None:
    """Print run configuration info table."""
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value")

    table.add_row("Project", project_dir)
    table.add_row("Runs", runs_dir)
    table.add_row("Invoker", invoker)
    table.add_row("Fast mode", "yes" if fast else "no")
    table.add_row("Dry run", "yes" if dry_run else "no")
    if log_file:
        table.add_row("Log file", log_file)

    for key, value in (extra_info or {}).items():
        table.add_row(key, str(value))

    console.print(table)


def print_stages(stages: Sequence[StageDefinition]) -> None:
    """Print the pipeline stage table."""
    table = Table(title="Pipeline stages", show_header=True)
    table.add_column("#", style="cyan", width=3)
    table.add_column("Stage", style="magenta")
    table.add_column("Reads")
    table.add_column("Writes", style="green")
    table.add_column("Tools")
    table.add_column("Model", style="yellow")
    table.add_column("Permission")

    for i, stage in enumerate(stages, 1):
        table.add_row(
            str(i),
            stage.name,
            ", ".join(stage.reads) or "-",
            stage.writes,
            ", ".join(stage.tools),
            stage.model,
            stage.permission_mode,
        )

    console.print(table)


def _outcome_message(result: PipelineResult) -> Text:
    if result.status == PipelineStatus.APPROVED:
        text = Text("Pipeline completed successfully.\n", style="bold green")
        text.append(f"Approved in cycle {result.cycles}.")
    elif result.status == PipelineStatus.EXHAUSTED:
        text = Text("Pipeline completed successfully.\n", style="bold yellow")
        text.append(f"No approval after {result.cycles} review cycles.")
    else:
        where = f" at stage '{result.failed_stage}'" if result.failed_stage else ""
        text = Text(f"Pipeline failed{where}", style="bold red")
        if result.error is not None:
            text.append(f"\n{result.error}", style="dim")
    return text


def print_result(result: PipelineResult) -> None:
    """Print the outcome panel and the artifacts the run produced."""
    title, color = _STATUS_STYLES[result.status]
    content = _outcome_message(result)
    if result.run_dir is not None:
        content.append(f"\nArtifacts: {result.run_dir}", style="dim")
    console.print(Panel(content, title=title, border_style=color))

    if result.completed_stages:
        console.print("\n[bold]Artifacts written:[/bold]")
        for name in result.completed_stages:
            console.print(f"  {name}", markup=False)


def _report_line(label: str, style: str, path: object) -> Text:
    # Paths may contain brackets; keep them out of markup parsing.
    return Text.assemble((label, style), " ", str(path))


def print_init_report(report: InitReport, gitignore: str) -> None:
    """List what `agentline init` created, skipped and updated."""
    for path in report.created:
        console.print(_report_line("created", "green", path))
    for path in report.skipped:
        console.print(_report_line("exists ", "dim", path))
    if report.gitignore_updated:
        console.print(_report_line("updated", "green", gitignore))
