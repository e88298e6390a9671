"""Shared fixtures for architecture tests."""

import os

import pytest
from pytestarch import (
    EvaluableArchitecture,
    LayeredArchitecture,
    get_evaluable_architecture,
)

SRC_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..", "src"))

# Top-level modules that wire adapters together and talk to the user
SURFACE_MODULES = [
    "src.agentline.cli",
    "src.agentline.console",
    "src.agentline.entrypoint",
    "src.agentline.project",
]


@pytest.fixture(scope="session")
def evaluable() -> EvaluableArchitecture:
    """Build evaluable architecture from src/agentline."""
    return get_evaluable_architecture(SRC_DIR, os.path.join(SRC_DIR, "agentline"))


@pytest.fixture(scope="session")
def layers() -> LayeredArchitecture:
    """Define the three DDD layers plus the surface.

    PyTestArch resolves module names relative to the source root,
    so modules appear as 'src.agentline.domain', etc.
    """
    return (
        LayeredArchitecture()
        .layer("domain")
        .containing_modules(["src.agentline.domain"])
        .layer("application")
        .containing_modules(["src.agentline.application"])
        .layer("infrastructure")
        .containing_modules(["src.agentline.infrastructure"])
        .layer("surface")
        .containing_modules(SURFACE_MODULES)
    )
