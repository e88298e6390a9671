"""Tests for FilesystemPersonaLoader - project overrides and bundled personas."""

from pathlib import Path

import pytest

from agentline.domain.exceptions import PersonaNotFoundError
from agentline.domain.stages import STAGES
from agentline.infrastructure.personas import (
    FilesystemPersonaLoader,
    bundled_persona_names,
)


class TestBundledPersonas:
    """Tests for the personas shipped with the package."""

    def test_every_stage_has_a_bundled_persona(self) -> None:
        names = bundled_persona_names()

        for stage in STAGES:
            assert stage.persona in names

    def test_loads_bundled_persona(self) -> None:
        text = FilesystemPersonaLoader().load("product_manager")

        assert "Product Manager" in text

    def test_reviewer_persona_states_verdict_format(self) -> None:
        text = FilesystemPersonaLoader().load("code_reviewer")

        assert "APPROVE" in text
        assert "REJECT" in text


class TestProjectOverrides:
    """Tests for project-local personas."""

    def test_project_persona_wins(self, tmp_path: Path) -> None:
        (tmp_path / "designer.md").write_text("# Custom designer", encoding="utf-8")

        loader = FilesystemPersonaLoader(tmp_path)

        assert loader.load("designer") == "# Custom designer"

    def test_falls_back_to_bundled(self, tmp_path: Path) -> None:
        loader = FilesystemPersonaLoader(tmp_path)

        assert "Product Manager" in loader.load("product_manager")

    def test_missing_project_dir_falls_back(self, tmp_path: Path) -> None:
        loader = FilesystemPersonaLoader(tmp_path / "missing")

        assert loader.load("designer").startswith("# Designer")

    def test_available_includes_project_personas(self, tmp_path: Path) -> None:
        (tmp_path / "security_auditor.md").write_text("# Auditor", encoding="utf-8")

        available = FilesystemPersonaLoader(tmp_path).available()

        assert "security_auditor" in available
        assert "programmer" in available


class TestMissingPersonas:
    """Tests for unresolvable persona names."""

    def test_unknown_persona_raises(self, tmp_path: Path) -> None:
        loader = FilesystemPersonaLoader(tmp_path)

        with pytest.raises(PersonaNotFoundError) as exc_info:
            loader.load("janitor")

        assert exc_info.value.persona == "janitor"

    @pytest.mark.parametrize("name", ["", "../secrets", "a/b", ".hidden"])
    def test_path_like_names_rejected(self, name: str) -> None:
        with pytest.raises(PersonaNotFoundError):
            FilesystemPersonaLoader().load(name)

    def test_is_lookup_error(self) -> None:
        with pytest.raises(LookupError):
            FilesystemPersonaLoader().load("janitor")
