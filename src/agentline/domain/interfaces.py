"""
Domain interfaces (Ports) for the agent pipeline.

These abstract base classes define the contracts that adapters must satisfy.
The orchestrator depends only on these, so tests can drive it with
deterministic fakes.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from agentline.domain.models import InvocationConfig, ResolvedArtifact


class InvokerInterface(ABC):
    """
    Port for running one external agent.

    The invoker owns command construction, process execution and output
    streaming. The pipeline only looks at the exit code.
    """

    @abstractmethod
    def invoke(self, config: "InvocationConfig") -> int:
        """
        Run an agent to completion.

        Args:
            config: Prompt, system prompt, tools, model and directories

        Returns:
            The agent's exit code (0 means success)

        Raises:
            InvocationError: If the agent could not be run at all
        """
        pass

    def describe(self, config: "InvocationConfig") -> str:
        """Human-readable summary of what invoke() would run."""
        tools = ",".join(config.allowed_tools)
        return (
            f"{type(self).__name__} model={config.model} tools={tools} "
            f"permission={config.permission_mode} run_dir={config.run_dir}"
        )


class PersonaLoaderInterface(ABC):
    """Port for resolving persona instruction text."""

    @abstractmethod
    def load(self, persona: str) -> str:
        """
        Load the instruction text for a persona.

        Raises:
            PersonaNotFoundError: If the persona cannot be resolved
        """
        pass


class ArtifactStoreInterface(ABC):
    """
    Port for run-scoped artifact storage.

    Implementations are append-only in practice: each artifact is written
    once, and later review cycles write new versioned names.
    """

    @abstractmethod
    def create_run_dir(self) -> Path:
        """
        Create a fresh, timestamp-named run directory.

        Raises:
            OSError: If the directory cannot be created (including a
                same-second name collision)
        """
        pass

    @abstractmethod
    def write(self, run_dir: Path, name: str, content: str) -> Path:
        """Write an artifact verbatim and return its path."""
        pass

    @abstractmethod
    def read(self, run_dir: Path, name: str) -> str:
        """
        Read an artifact by exact name.

        Raises:
            FileNotFoundError: If the artifact does not exist
        """
        pass

    @abstractmethod
    def latest(self, run_dir: Path, base_name: str) -> "ResolvedArtifact | None":
        """Return the highest-cycle version of an artifact, or None."""
        pass

    @abstractmethod
    def assemble(self, run_dir: Path, names: list[str] | tuple[str, ...]) -> str:
        """Concatenate the latest versions of several artifacts."""
        pass
