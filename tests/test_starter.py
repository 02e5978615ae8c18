from __future__ import annotations

from pathlib import Path

import pytest

from templatize.starter import StarterScaffolder, available_starters
from templatize.template import TemplateRenderer


def test_available_starters():
    assert available_starters() == ("component", "hook")


def test_starter_creates_expected_structure(tmp_path: Path):
    output = tmp_path / "templates"
    StarterScaffolder().create(output)

    expected_files = [
        output / "{{pascalCase name}}.tsx.hbs",
        output / "{{pascalCase name}}.test.tsx.hbs",
        output / "{{kebabCase name}}.module.css.hbs",
        output / "index.ts.hbs",
    ]
    for path in expected_files:
        assert path.exists(), f"expected {path} to exist"


def test_starter_respects_force(tmp_path: Path):
    scaffolder = StarterScaffolder("hook")
    scaffolder.create(tmp_path)
    target = tmp_path / "use{{pascalCase name}}.ts.hbs"
    target.write_text("custom", encoding="utf-8")

    with pytest.raises(FileExistsError):
        scaffolder.create(tmp_path)

    scaffolder.create(tmp_path, force=True)
    assert target.read_text(encoding="utf-8").startswith("import { useState }")


def test_unknown_starter_is_rejected():
    with pytest.raises(ValueError):
        StarterScaffolder("page")


def test_starter_expands_for_a_component_name(tmp_path: Path):
    StarterScaffolder().create(tmp_path / "templates")
    TemplateRenderer().render_directory(tmp_path / "templates", tmp_path / "out", {"name": "UserCard"})

    component = (tmp_path / "out" / "UserCard.tsx").read_text(encoding="utf-8")
    assert "export const UserCard = ({ className }: UserCardProps)" in component
    assert "styles.userCard" in component
    assert (tmp_path / "out" / "user-card.module.css").exists()
