"""
Infrastructure layer for the agent pipeline.

Contains adapters for external concerns (persistence, agent CLIs, personas, registry).
"""

from agentline.infrastructure.invokers import (
    ClaudeCliInvoker,
    MockInvoker,
)
from agentline.infrastructure.persistence import FilesystemArtifactStore
from agentline.infrastructure.personas import FilesystemPersonaLoader
from agentline.infrastructure.registry import InvokerRegistry

__all__ = [
    # Persistence
    "FilesystemArtifactStore",
    # Invokers
    "ClaudeCliInvoker",
    "MockInvoker",
    # Personas
    "FilesystemPersonaLoader",
    # Registry
    "InvokerRegistry",
]
