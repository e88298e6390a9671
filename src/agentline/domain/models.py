"""
Domain models for the agent pipeline.

Pure data structures. All models are immutable (frozen dataclasses).
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

# =============================================================================
# STAGES
# =============================================================================


@dataclass(frozen=True)
class StageDefinition:
    """Static description of one pipeline step."""

    name: str  # Unique symbolic identity
    persona: str  # Persona whose instructions become the system prompt
    reads: tuple[str, ...]  # Input artifact base names, in assembly order
    writes: str  # Output artifact base name (versioned per cycle)
    tools: tuple[str, ...]  # Capabilities the agent may use
    model: str  # Model tier
    permission_mode: str  # Opaque permission policy passed to the agent


# =============================================================================
# ARTIFACTS
# =============================================================================


@dataclass(frozen=True)
class ResolvedArtifact:
    """Latest version of an artifact family found in a run directory."""

    filename: str
    content: str
    cycle: int


# =============================================================================
# INVOCATION
# =============================================================================


@dataclass(frozen=True)
class InvocationConfig:
    """Everything an invoker needs to run one agent."""

    prompt: str
    system_prompt: str
    allowed_tools: tuple[str, ...]
    model: str
    working_dir: Path
    run_dir: Path
    permission_mode: str


# =============================================================================
# VERDICT
# =============================================================================

_APPROVE_PATTERN = re.compile(r"^APPROVE", re.IGNORECASE)


class Verdict(Enum):
    """Outcome of a review stage."""

    APPROVE = "approve"
    REJECT = "reject"

    @classmethod
    def from_text(cls, content: str) -> "Verdict":
        """
        Parse a verdict from review output.

        Only the first line of the stripped content counts. It approves when
        it starts with APPROVE (any case); everything else rejects.
        """
        lines = content.strip().splitlines()
        first_line = lines[0] if lines else ""
        if _APPROVE_PATTERN.match(first_line):
            return cls.APPROVE
        return cls.REJECT


# A verdict artifact that cannot be read counts as approval, so a reviewer
# that silently failed to write its file cannot wedge the loop.
MISSING_VERDICT_DEFAULT = Verdict.APPROVE


# =============================================================================
# PIPELINE
# =============================================================================


class PipelineStatus(Enum):
    """Pipeline run outcome."""

    APPROVED = "approved"  # Reviewer approved within the cycle limit
    EXHAUSTED = "exhausted"  # Cycle limit reached without approval
    FAILED = "failed"  # I/O or stage failure aborted the run


@dataclass(frozen=True)
class PipelineOptions:
    """Per-run switches."""

    fast: bool = False  # Force the fastest model tier for every stage
    dry_run: bool = False  # Describe invocations without running them
    verbose: bool = False  # Log diagnostic details for each stage
    project_dir: Path = Path(".")  # Working directory for the agents

    @property
    def working_dir(self) -> Path:
        return Path(self.project_dir).expanduser().resolve()


@dataclass(frozen=True)
class PipelineResult:
    """Result of a pipeline run."""

    status: PipelineStatus
    run_dir: Path | None = None
    cycles: int = 0  # Review cycles started
    verdict: Verdict | None = None  # Verdict of the last completed cycle
    failed_stage: str | None = None
    error: BaseException | None = None
    completed_stages: tuple[str, ...] = field(default_factory=tuple)

    @property
    def succeeded(self) -> bool:
        """Approval and cycle exhaustion both count as success."""
        return self.status != PipelineStatus.FAILED

    @property
    def approved(self) -> bool:
        return self.status == PipelineStatus.APPROVED
