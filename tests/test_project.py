"""Tests for init_project()."""

from pathlib import Path

from agentline.config import Settings, load_settings
from agentline.infrastructure.personas import FilesystemPersonaLoader, bundled_persona_names
from agentline.project import GITIGNORE_MARKER, init_project


class TestInitProject:
    """Tests for project installation."""

    def test_copies_bundled_personas(self, project_dir: Path) -> None:
        report = init_project(project_dir)

        personas_dir = project_dir / ".agentline" / "personas"
        for name in bundled_persona_names():
            assert (personas_dir / f"{name}.md").is_file()
        assert len(report.created) == len(bundled_persona_names()) + 1

    def test_copies_match_bundled_text(self, project_dir: Path) -> None:
        init_project(project_dir)

        copied = (project_dir / ".agentline" / "personas" / "code_reviewer.md").read_text(
            encoding="utf-8"
        )
        assert copied == FilesystemPersonaLoader().load("code_reviewer")

    def test_creates_gitkeep_and_gitignore(self, project_dir: Path) -> None:
        report = init_project(project_dir)

        assert (project_dir / ".agentline" / "runs" / ".gitkeep").exists()
        assert report.gitignore_updated
        gitignore = (project_dir / ".gitignore").read_text(encoding="utf-8")
        assert GITIGNORE_MARKER in gitignore
        assert "/.agentline/runs/*" in gitignore
        assert "!/.agentline/runs/.gitkeep" in gitignore

    def test_keeps_customised_personas(self, project_dir: Path) -> None:
        init_project(project_dir)
        custom = project_dir / ".agentline" / "personas" / "designer.md"
        custom.write_text("# My designer", encoding="utf-8")

        report = init_project(project_dir)

        assert custom.read_text(encoding="utf-8") == "# My designer"
        assert report.created == []
        assert custom in report.skipped

    def test_gitignore_block_added_once(self, project_dir: Path) -> None:
        (project_dir / ".gitignore").write_text("node_modules/", encoding="utf-8")

        init_project(project_dir)
        second = init_project(project_dir)

        gitignore = (project_dir / ".gitignore").read_text(encoding="utf-8")
        assert gitignore.startswith("node_modules/\n\n")
        assert gitignore.count(GITIGNORE_MARKER) == 1
        assert not second.gitignore_updated

    def test_runs_outside_project_skip_gitignore(
        self, project_dir: Path, tmp_path: Path
    ) -> None:
        defaults = load_settings(project_dir)
        settings = Settings(runs_dir=tmp_path / "shared-runs", personas_dir=defaults.personas_dir)

        report = init_project(project_dir, settings)

        assert not report.gitignore_updated
        assert not (project_dir / ".gitignore").exists()
        assert (tmp_path / "shared-runs" / ".gitkeep").exists()
