"""
Pipeline: Drives a full run end-to-end.

Init -> linear phase (requirements, design) -> review loop
(implementation, tests, review) bounded by max_review_cycles.
"""

import logging
from pathlib import Path

from agentline.application.stage_executor import StageExecutor
from agentline.domain.artifacts import versioned_name
from agentline.domain.exceptions import StageFailed
from agentline.domain.interfaces import (
    ArtifactStoreInterface,
    InvokerInterface,
    PersonaLoaderInterface,
)
from agentline.domain.models import (
    MISSING_VERDICT_DEFAULT,
    PipelineOptions,
    PipelineResult,
    PipelineStatus,
    Verdict,
)
from agentline.domain.stages import (
    FEATURE_ARTIFACT,
    MAX_REVIEW_CYCLES,
    REVIEW_VERDICT_ARTIFACT,
    linear_stages,
    review_cycle_stages,
)

logger = logging.getLogger(__name__)


class Pipeline:
    """
    Sequential multi-agent pipeline with a bounded review loop.

    Every stage runs to completion before the next one starts. A stage
    failure aborts the run; a rejected review re-runs implementation,
    tests and review together as the next cycle.
    """

    def __init__(
        self,
        store: ArtifactStoreInterface,
        invoker: InvokerInterface,
        personas: PersonaLoaderInterface,
        options: PipelineOptions | None = None,
        max_review_cycles: int = MAX_REVIEW_CYCLES,
    ):
        """
        Args:
            store: Artifact storage for the run directory
            invoker: Runs each external agent
            personas: Resolves system prompts
            options: Per-run switches (defaults to PipelineOptions())
            max_review_cycles: Review cycles before giving up (default: 3)
        """
        if max_review_cycles < 1:
            raise ValueError(
                f"max_review_cycles must be >= 1, got {max_review_cycles}"
            )
        self._store = store
        self._invoker = invoker
        self._personas = personas
        self._options = options or PipelineOptions()
        self._max_review_cycles = max_review_cycles

    def run(self, feature_description: str) -> PipelineResult:
        """
        Run the pipeline for a feature request.

        Args:
            feature_description: The feature request handed to every stage

        Returns:
            PipelineResult. APPROVED and EXHAUSTED both count as success;
            FAILED carries the failing stage (if any) and the error.
        """
        try:
            run_dir = self._store.create_run_dir()
            self._store.write(run_dir, FEATURE_ARTIFACT, feature_description)
        except OSError as e:
            logger.error(f"Could not initialise run directory: {e}")
            return PipelineResult(status=PipelineStatus.FAILED, error=e)

        logger.info(f"Run directory: {run_dir}")

        executor = StageExecutor(
            self._store, self._invoker, self._personas, self._options
        )
        completed: list[str] = []
        cycle = 0
        verdict: Verdict | None = None

        try:
            for stage in linear_stages():
                executor.execute(stage, feature_description, run_dir)
                completed.append(stage.writes)

            for cycle in range(1, self._max_review_cycles + 1):
                for stage in review_cycle_stages(cycle):
                    executor.execute(stage, feature_description, run_dir)
                    completed.append(stage.writes)

                verdict_name = versioned_name(REVIEW_VERDICT_ARTIFACT, cycle)
                verdict = self.parse_verdict(run_dir, verdict_name)

                if verdict == Verdict.APPROVE:
                    logger.info(f"Review: APPROVED (cycle {cycle})")
                    return PipelineResult(
                        status=PipelineStatus.APPROVED,
                        run_dir=run_dir,
                        cycles=cycle,
                        verdict=verdict,
                        completed_stages=tuple(completed),
                    )

                logger.info(f"Review: REJECTED (cycle {cycle}), starting rework...")

        except StageFailed as e:
            logger.error(str(e))
            return PipelineResult(
                status=PipelineStatus.FAILED,
                run_dir=run_dir,
                cycles=cycle,
                verdict=verdict,
                failed_stage=e.stage_name,
                error=e,
                completed_stages=tuple(completed),
            )
        except OSError as e:
            logger.error(f"Artifact I/O failed: {e}")
            return PipelineResult(
                status=PipelineStatus.FAILED,
                run_dir=run_dir,
                cycles=cycle,
                verdict=verdict,
                error=e,
                completed_stages=tuple(completed),
            )

        logger.info(f"Max review cycles ({self._max_review_cycles}) reached. Stopping.")
        return PipelineResult(
            status=PipelineStatus.EXHAUSTED,
            run_dir=run_dir,
            cycles=self._max_review_cycles,
            verdict=verdict,
            completed_stages=tuple(completed),
        )

    def parse_verdict(self, run_dir: Path, verdict_name: str) -> Verdict:
        """
        Read a review verdict artifact.

        An unreadable artifact yields MISSING_VERDICT_DEFAULT (approve).
        """
        try:
            content = self._store.read(run_dir, verdict_name)
        except OSError:
            logger.warning(
                f"Verdict '{verdict_name}' unreadable, "
                f"treating as {MISSING_VERDICT_DEFAULT.value}"
            )
            return MISSING_VERDICT_DEFAULT
        return Verdict.from_text(content)
