"""
Persistence adapters for run artifacts.
"""

from agentline.infrastructure.persistence.filesystem import FilesystemArtifactStore

__all__ = [
    "FilesystemArtifactStore",
]
