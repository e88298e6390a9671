"""
Composition root: wires the filesystem adapters into a Pipeline.

Example:
    from agentline import PipelineOptions, run

    result = run("Build a products listing page", PipelineOptions(fast=True))
    if not result.succeeded:
        raise SystemExit(1)
"""

from __future__ import annotations

from pathlib import Path

from agentline.application.pipeline import Pipeline
from agentline.config import Settings, load_settings
from agentline.domain.exceptions import ConfigurationError
from agentline.domain.interfaces import InvokerInterface, PersonaLoaderInterface
from agentline.domain.models import PipelineOptions, PipelineResult
from agentline.infrastructure.invokers import ClaudeCliInvoker
from agentline.infrastructure.persistence import FilesystemArtifactStore
from agentline.infrastructure.personas import FilesystemPersonaLoader
from agentline.infrastructure.registry import InvokerRegistry


def create_invoker(settings: Settings) -> InvokerInterface:
    """
    Instantiate the invoker named in settings.

    Raises:
        ConfigurationError: If no invoker is registered under that name
    """
    try:
        invoker_class = InvokerRegistry.get(settings.invoker)
    except KeyError as e:
        raise ConfigurationError(str(e.args[0])) from e

    if issubclass(invoker_class, ClaudeCliInvoker):
        return invoker_class(
            command=settings.claude_command, timeout=settings.stage_timeout
        )
    return invoker_class()


def build_pipeline(
    options: PipelineOptions | None = None,
    *,
    invoker: InvokerInterface | None = None,
    personas: PersonaLoaderInterface | None = None,
    runs_dir: str | Path | None = None,
    settings: Settings | None = None,
) -> Pipeline:
    """
    Build a Pipeline for a project.

    Args:
        options: Per-run switches; project_dir selects the project
        invoker: Replaces the configured invoker (test seam)
        personas: Replaces the project/bundled persona loader
        runs_dir: Overrides the configured runs directory
        settings: Pre-loaded settings; read from the project when None
    """
    options = options or PipelineOptions()
    settings = settings or load_settings(options.working_dir)

    store = FilesystemArtifactStore(runs_dir if runs_dir is not None else settings.runs_dir)
    personas = personas or FilesystemPersonaLoader(settings.personas_dir)
    invoker = invoker or create_invoker(settings)

    return Pipeline(store=store, invoker=invoker, personas=personas, options=options)


def run(
    feature_description: str,
    options: PipelineOptions | None = None,
    *,
    invoker: InvokerInterface | None = None,
    personas: PersonaLoaderInterface | None = None,
    runs_dir: str | Path | None = None,
    settings: Settings | None = None,
) -> PipelineResult:
    """Run the full pipeline for a feature request. See build_pipeline()."""
    pipeline = build_pipeline(
        options,
        invoker=invoker,
        personas=personas,
        runs_dir=runs_dir,
        settings=settings,
    )
    return pipeline.run(feature_description)
