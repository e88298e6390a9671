"""Shared pytest fixtures for agentline tests."""

from datetime import datetime, timezone
from pathlib import Path

import pytest

from agentline.domain.exceptions import PersonaNotFoundError
from agentline.domain.interfaces import PersonaLoaderInterface
from agentline.domain.models import PipelineOptions
from agentline.domain.stages import STAGES
from agentline.infrastructure.invokers.mock import MockInvoker
from agentline.infrastructure.persistence.filesystem import FilesystemArtifactStore

FIXED_NOW = datetime(2025, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


class StaticPersonaLoader(PersonaLoaderInterface):
    """Persona loader backed by an in-memory dict."""

    def __init__(self, personas: dict[str, str] | None = None) -> None:
        if personas is None:
            personas = {
                stage.persona: f"# {stage.persona}\n\nYou are the {stage.persona}."
                for stage in STAGES
            }
        self._personas = personas

    def load(self, persona: str) -> str:
        if persona not in self._personas:
            raise PersonaNotFoundError(persona)
        return self._personas[persona]


@pytest.fixture
def feature() -> str:
    """A sample feature request."""
    return "Build a products listing page"


@pytest.fixture
def runs_dir(tmp_path: Path) -> Path:
    """Base directory for run directories."""
    return tmp_path / "runs"


@pytest.fixture
def store(runs_dir: Path) -> FilesystemArtifactStore:
    """Artifact store with a fixed clock."""
    return FilesystemArtifactStore(runs_dir, clock=lambda: FIXED_NOW)


@pytest.fixture
def run_dir(store: FilesystemArtifactStore) -> Path:
    """A freshly created run directory."""
    return store.create_run_dir()


@pytest.fixture
def mock_invoker() -> MockInvoker:
    """Mock invoker approving on the first review."""
    return MockInvoker()


@pytest.fixture
def personas() -> StaticPersonaLoader:
    """Persona loader knowing every stage persona."""
    return StaticPersonaLoader()


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """An empty project directory."""
    project = tmp_path / "project"
    project.mkdir()
    return project


@pytest.fixture
def options(project_dir: Path) -> PipelineOptions:
    """Default options rooted at the project directory."""
    return PipelineOptions(project_dir=project_dir)


@pytest.fixture
def make_personas() -> type[StaticPersonaLoader]:
    """Factory for persona loaders with a custom persona set."""
    return StaticPersonaLoader
