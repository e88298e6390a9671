"""
Project installation.

Copies the bundled personas into a project so they can be customised, and
prepares the runs directory.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from agentline.config import Settings, load_settings
from agentline.domain.artifacts import DOCUMENT_EXTENSION
from agentline.infrastructure.personas import bundled_persona_names, bundled_personas_dir

logger = logging.getLogger(__name__)

GITIGNORE_MARKER = "# agentline run output"


@dataclass
class InitReport:
    """Files touched by init_project()."""

    created: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)
    gitignore_updated: bool = False


def _gitignore_entries(project_dir: Path, runs_dir: Path) -> str | None:
    try:
        relative = runs_dir.relative_to(project_dir).as_posix()
    except ValueError:
        # Runs live outside the project; nothing to ignore
        return None
    return f"{GITIGNORE_MARKER}\n/{relative}/*\n!/{relative}/.gitkeep\n"


def init_project(project_dir: str | Path, settings: Settings | None = None) -> InitReport:
    """
    Install personas and the runs directory into a project.

    Existing persona files are never overwritten, so local customisations
    survive re-running init. The .gitignore block is appended once.

    Args:
        project_dir: Project root
        settings: Pre-loaded settings; read from the project when None

    Returns:
        InitReport listing created and skipped files
    """
    project = Path(project_dir).expanduser().resolve()
    settings = settings or load_settings(project)
    report = InitReport()

    settings.personas_dir.mkdir(parents=True, exist_ok=True)
    source_dir = bundled_personas_dir()
    for name in bundled_persona_names():
        filename = f"{name}{DOCUMENT_EXTENSION}"
        dest = settings.personas_dir / filename
        if dest.exists():
            report.skipped.append(dest)
            continue
        dest.write_text(source_dir.joinpath(filename).read_text(encoding="utf-8"), encoding="utf-8")
        report.created.append(dest)

    settings.runs_dir.mkdir(parents=True, exist_ok=True)
    gitkeep = settings.runs_dir / ".gitkeep"
    if gitkeep.exists():
        report.skipped.append(gitkeep)
    else:
        gitkeep.touch()
        report.created.append(gitkeep)

    entries = _gitignore_entries(project, settings.runs_dir)
    if entries is not None:
        gitignore = project / ".gitignore"
        existing = gitignore.read_text(encoding="utf-8") if gitignore.exists() else ""
        if GITIGNORE_MARKER not in existing:
            separator = "" if not existing or existing.endswith("\n") else "\n"
            prefix = "\n" if existing else ""
            gitignore.write_text(f"{existing}{separator}{prefix}{entries}", encoding="utf-8")
            report.gitignore_updated = True

    for path in report.created:
        logger.debug(f"Created {path}")
    return report
