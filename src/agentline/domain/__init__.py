"""
Domain layer for the agent pipeline.

Contains the stage table, artifact naming, prompt building and ports, with
no I/O and no external dependencies.
"""

from agentline.domain.artifacts import (
    DOCUMENT_EXTENSION,
    ensure_extension,
    parse_cycle,
    strip_extension,
    versioned_name,
)
from agentline.domain.exceptions import (
    AgentlineError,
    ConfigurationError,
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
from agentline.domain.models import (
    MISSING_VERDICT_DEFAULT,
    InvocationConfig,
    PipelineOptions,
    PipelineResult,
    PipelineStatus,
    ResolvedArtifact,
    StageDefinition,
    Verdict,
)
from agentline.domain.prompts import build_prompt, output_path_from_prompt
from agentline.domain.stages import (
    FAST_MODEL,
    MAX_REVIEW_CYCLES,
    STAGES,
    get_stage,
    linear_stages,
    review_cycle_stages,
    stages,
)

__all__ = [
    # Artifact naming
    "DOCUMENT_EXTENSION",
    "ensure_extension",
    "strip_extension",
    "versioned_name",
    "parse_cycle",
    # Models
    "StageDefinition",
    "ResolvedArtifact",
    "InvocationConfig",
    "Verdict",
    "MISSING_VERDICT_DEFAULT",
    "PipelineOptions",
    "PipelineResult",
    "PipelineStatus",
    # Prompts
    "build_prompt",
    "output_path_from_prompt",
    # Stages
    "STAGES",
    "FAST_MODEL",
    "MAX_REVIEW_CYCLES",
    "stages",
    "get_stage",
    "linear_stages",
    "review_cycle_stages",
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
