"""
Filesystem persona loader.

Personas are Markdown files named ``<persona>.md``. A project-local
directory overrides the personas bundled with the package.
"""

import logging
from importlib.resources import files
from importlib.resources.abc import Traversable
from pathlib import Path

from agentline.domain.artifacts import DOCUMENT_EXTENSION
from agentline.domain.exceptions import PersonaNotFoundError
from agentline.domain.interfaces import PersonaLoaderInterface

logger = logging.getLogger(__name__)

BUNDLED_PERSONAS_PACKAGE = "agentline.personas"


def bundled_personas_dir() -> Traversable:
    """Package resource directory holding the built-in personas."""
    return files(BUNDLED_PERSONAS_PACKAGE)


def bundled_persona_names() -> list[str]:
    """Names of the built-in personas."""
    return sorted(
        entry.name[: -len(DOCUMENT_EXTENSION)]
        for entry in bundled_personas_dir().iterdir()
        if entry.name.endswith(DOCUMENT_EXTENSION) and entry.is_file()
    )


class FilesystemPersonaLoader(PersonaLoaderInterface):
    """Resolves personas from a project directory, then the bundled set."""

    def __init__(self, project_personas_dir: str | Path | None = None):
        """
        Args:
            project_personas_dir: Directory checked before the bundled
                personas; None uses the bundled personas only
        """
        self._project_dir = (
            Path(project_personas_dir) if project_personas_dir is not None else None
        )

    def load(self, persona: str) -> str:
        if not persona or "/" in persona or "\\" in persona or persona.startswith("."):
            raise PersonaNotFoundError(persona)

        filename = f"{persona}{DOCUMENT_EXTENSION}"

        if self._project_dir is not None:
            local = self._project_dir / filename
            if local.is_file():
                logger.debug(f"Persona '{persona}' loaded from {local}")
                return local.read_text(encoding="utf-8")

        bundled = bundled_personas_dir().joinpath(filename)
        if bundled.is_file():
            return bundled.read_text(encoding="utf-8")

        raise PersonaNotFoundError(persona)

    def available(self) -> list[str]:
        """Persona names resolvable from either location."""
        names = set(bundled_persona_names())
        if self._project_dir is not None and self._project_dir.is_dir():
            names.update(path.stem for path in self._project_dir.glob(f"*{DOCUMENT_EXTENSION}"))
        return sorted(names)
