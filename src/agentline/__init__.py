"""
agentline: Multi-agent pipeline for turning a feature request into reviewed code.

Five agents run in sequence (product manager, designer, programmer, test
writer, code reviewer). Each writes a Markdown artifact into a timestamped
run directory; a rejected review sends implementation, tests and review
around again, up to three cycles.

Example:
    from agentline import PipelineOptions, run
    from agentline.infrastructure import MockInvoker

    result = run(
        "Build a products listing page",
        PipelineOptions(dry_run=True),
        invoker=MockInvoker(),
    )
    print(result.status, result.run_dir)
"""

# Application layer (orchestration)
from agentline.application import Pipeline, StageExecutor

# Domain exceptions
from agentline.domain.exceptions import (
    AgentlineError,
    ConfigurationError,
    InvocationError,
    InvocationTimeout,
    PersonaNotFoundError,
    StageFailed,
    StageTimedOut,
)

# Domain interfaces (for type hints and custom implementations)
from agentline.domain.interfaces import (
    ArtifactStoreInterface,
    InvokerInterface,
    PersonaLoaderInterface,
)
from agentline.domain.models import (
    InvocationConfig,
    PipelineOptions,
    PipelineResult,
    PipelineStatus,
    ResolvedArtifact,
    StageDefinition,
    Verdict,
)
from agentline.domain.stages import STAGES, stages

# Composition root
from agentline.entrypoint import build_pipeline, run

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Entry points
    "run",
    "build_pipeline",
    # Application
    "Pipeline",
    "StageExecutor",
    # Models
    "StageDefinition",
    "ResolvedArtifact",
    "InvocationConfig",
    "Verdict",
    "PipelineOptions",
    "PipelineResult",
    "PipelineStatus",
    "STAGES",
    "stages",
    # Interfaces
    "ArtifactStoreInterface",
    "InvokerInterface",
    "PersonaLoaderInterface",
    # Exceptions
    "AgentlineError",
    "ConfigurationError",
    "InvocationError",
    "InvocationTimeout",
    "PersonaNotFoundError",
    "StageFailed",
    "StageTimedOut",
]
