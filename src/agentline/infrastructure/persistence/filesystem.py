"""
Filesystem implementation of the artifact store.

Each run gets a timestamp-named directory; artifacts are Markdown files in
it. Review cycles add ``_v<N>`` files next to the originals, so a run
directory keeps its full history.
"""

from collections.abc import Callable
from datetime import datetime, timezone
from pathlib import Path

from agentline.domain.artifacts import (
    DOCUMENT_EXTENSION,
    ensure_extension,
    parse_cycle,
    strip_extension,
)
from agentline.domain.interfaces import ArtifactStoreInterface
from agentline.domain.models import ResolvedArtifact

RUN_DIR_FORMAT = "%Y%m%d_%H%M%S"
SECTION_RULE = "\n\n---\n\n"
NOT_FOUND_PLACEHOLDER = "(not found)"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class FilesystemArtifactStore(ArtifactStoreInterface):
    """
    Versioned Markdown artifact storage under a runs directory.

    Missing artifacts are a normal outcome: latest() returns None and
    assemble() substitutes a placeholder section. Agents write these files
    directly, so bytes that are not valid UTF-8 are read back as U+FFFD.
    """

    def __init__(
        self, runs_dir: str | Path, clock: Callable[[], datetime] | None = None
    ):
        """
        Args:
            runs_dir: Base directory holding one subdirectory per run
            clock: Returns the current time (defaults to UTC now)
        """
        self._runs_dir = Path(runs_dir)
        self._clock = clock or _utc_now

    @property
    def runs_dir(self) -> Path:
        return self._runs_dir

    def create_run_dir(self) -> Path:
        """
        Create ``<runs_dir>/<YYYYMMDD_HHMMSS>``.

        Raises:
            FileExistsError: If a run already started in the same second
            OSError: If the directory cannot be created
        """
        run_dir = self._runs_dir / self._clock().strftime(RUN_DIR_FORMAT)
        self._runs_dir.mkdir(parents=True, exist_ok=True)
        run_dir.mkdir()
        return run_dir

    def write(self, run_dir: Path, name: str, content: str) -> Path:
        path = Path(run_dir) / ensure_extension(name)
        path.write_text(content, encoding="utf-8")
        return path

    def read(self, run_dir: Path, name: str) -> str:
        path = Path(run_dir) / ensure_extension(name)
        return path.read_text(encoding="utf-8", errors="replace")

    def latest(self, run_dir: Path, base_name: str) -> ResolvedArtifact | None:
        """
        Find the highest-cycle version of an artifact.

        Given "03_implementation_summary", considers
        ``03_implementation_summary.md`` (cycle 1) and
        ``03_implementation_summary_v<N>.md``, comparing N as an integer.

        Returns:
            The resolved artifact, or None if no version exists
        """
        base_name = strip_extension(base_name)
        run_path = Path(run_dir)
        if not run_path.is_dir():
            return None

        candidates: list[tuple[int, Path]] = []
        for path in run_path.glob(f"*{DOCUMENT_EXTENSION}"):
            cycle = parse_cycle(path.name, base_name)
            if cycle is not None and path.is_file():
                candidates.append((cycle, path))

        if not candidates:
            return None

        cycle, path = max(candidates, key=lambda item: item[0])
        return ResolvedArtifact(
            filename=path.name,
            content=path.read_text(encoding="utf-8", errors="replace"),
            cycle=cycle,
        )

    def assemble(self, run_dir: Path, names: list[str] | tuple[str, ...]) -> str:
        """
        Concatenate the latest version of each artifact.

        Each section is headed ``## <filename>`` and sections are separated
        by a ``---`` rule, in input order.
        """
        if not names:
            return ""

        sections = []
        for name in names:
            resolved = self.latest(run_dir, name)
            if resolved is None:
                sections.append(f"## {name}\n\n{NOT_FOUND_PLACEHOLDER}")
            else:
                sections.append(f"## {resolved.filename}\n\n{resolved.content}")

        return SECTION_RULE.join(sections)
