"""
StageExecutor: Runs a single pipeline stage.

Resolves model, persona and prior-artifact context, builds the prompt, and
hands one InvocationConfig to the invoker. Knows nothing about cycles: the
pipeline passes in already-versioned stage definitions.
"""

import logging
from pathlib import Path

from agentline.domain.artifacts import ensure_extension
from agentline.domain.exceptions import (
    InvocationError,
    InvocationTimeout,
    PersonaNotFoundError,
    StageFailed,
    StageTimedOut,
)
from agentline.domain.interfaces import (
    ArtifactStoreInterface,
    InvokerInterface,
    PersonaLoaderInterface,
)
from agentline.domain.models import InvocationConfig, PipelineOptions, StageDefinition
from agentline.domain.prompts import build_prompt
from agentline.domain.stages import FAST_MODEL

logger = logging.getLogger(__name__)


class StageExecutor:
    """
    Stateless executor for one stage invocation.

    Failures are raised, never retried here: the only retry mechanism is
    the pipeline's review loop.
    """

    def __init__(
        self,
        store: ArtifactStoreInterface,
        invoker: InvokerInterface,
        personas: PersonaLoaderInterface,
        options: PipelineOptions,
    ):
        """
        Args:
            store: Artifact storage used to assemble prior outputs
            invoker: Runs the external agent
            personas: Resolves system prompts
            options: Per-run switches (fast, dry_run, verbose, project_dir)
        """
        self._store = store
        self._invoker = invoker
        self._personas = personas
        self._options = options

    def resolve_model(self, stage: StageDefinition) -> str:
        """Fast mode replaces every stage's model with the fastest tier."""
        return FAST_MODEL if self._options.fast else stage.model

    def build_config(
        self, stage: StageDefinition, feature_description: str, run_dir: Path
    ) -> InvocationConfig:
        """
        Assemble the invocation for a stage.

        Raises:
            StageFailed: If the stage's persona cannot be loaded
        """
        try:
            system_prompt = self._personas.load(stage.persona)
        except PersonaNotFoundError as e:
            raise StageFailed(stage.name, cause=e) from e

        if stage.reads:
            artifacts_content = self._store.assemble(run_dir, stage.reads)
        else:
            artifacts_content = ""

        prompt = build_prompt(
            feature_description,
            artifacts_content,
            run_dir,
            ensure_extension(stage.writes),
        )

        return InvocationConfig(
            prompt=prompt,
            system_prompt=system_prompt,
            allowed_tools=stage.tools,
            model=self.resolve_model(stage),
            working_dir=self._options.working_dir,
            run_dir=run_dir,
            permission_mode=stage.permission_mode,
        )

    def execute(
        self, stage: StageDefinition, feature_description: str, run_dir: Path
    ) -> None:
        """
        Run a stage to completion.

        Args:
            stage: Stage definition, already versioned for the current cycle
            feature_description: The run's feature request
            run_dir: The run directory

        Raises:
            StageFailed: On persona failure, invocation failure or non-zero exit
            StageTimedOut: If the invoker reported a timeout
        """
        logger.info(f"--- Stage: {stage.name} ---")
        config = self.build_config(stage, feature_description, run_dir)

        if self._options.dry_run:
            logger.info(f"[dry-run] {self._invoker.describe(config)}")
            return

        if self._options.verbose:
            logger.info(f"[verbose] working_dir: {config.working_dir}")
            logger.info(f"[verbose] run_dir:     {config.run_dir}")
            logger.info(f"[verbose] model:       {config.model}")
            logger.info(f"[verbose] permission:  {config.permission_mode}")
            logger.info(f"[verbose] cmd: {self._invoker.describe(config)}")

        try:
            exit_code = self._invoker.invoke(config)
        except InvocationTimeout as e:
            if self._options.verbose:
                logger.info(f"[verbose] timeout: {e}")
            raise StageTimedOut(stage.name, cause=e) from e
        except InvocationError as e:
            if self._options.verbose:
                logger.info(f"[verbose] error: {e!r}")
            raise StageFailed(stage.name, cause=e) from e

        if exit_code != 0:
            if self._options.verbose:
                logger.info(f"[verbose] exit: {exit_code} (error)")
            raise StageFailed(stage.name, exit_code=exit_code)

        if self._options.verbose:
            logger.info("[verbose] exit: 0 (ok)")
