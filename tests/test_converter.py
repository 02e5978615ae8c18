from __future__ import annotations

import json
from pathlib import Path

import pytest

from templatize.config import ConverterConfig
from templatize.converter import TemplateConverter, convert_to_template
from templatize.errors import InvalidSourceError, NoCanonicalFileError
from templatize.template import TemplateRenderer


@pytest.fixture()
def component_dir(tmp_path: Path) -> Path:
    source = tmp_path / "source"
    (source / "subdir1" / "subdir2").mkdir(parents=True)
    (source / "TestComponent.tsx").write_text("export const TestComponent = () => {};", encoding="utf-8")
    (source / "file1.ts").write_text("content", encoding="utf-8")
    (source / "subdir1" / "file2.ts").write_text("content", encoding="utf-8")
    (source / "subdir1" / "subdir2" / "file3.ts").write_text("content", encoding="utf-8")
    return source


def test_convert_mirrors_directory_structure(tmp_path: Path, component_dir: Path):
    output = tmp_path / "output"
    report = convert_to_template(component_dir, output)

    assert output.is_dir()
    assert (output / "subdir1").is_dir()
    assert (output / "subdir1" / "subdir2").is_dir()
    assert (output / "file1.ts.hbs").is_file()
    assert (output / "subdir1" / "file2.ts.hbs").is_file()
    assert (output / "subdir1" / "subdir2" / "file3.ts.hbs").is_file()

    template = output / "{{pascalCase name}}.tsx.hbs"
    assert template.read_text(encoding="utf-8") == "export const {{pascalCase name}} = () => {};"
    assert report.component_name == "TestComponent"
    assert report.variants.kebab == "test-component"
    assert len(report.files) == 4
    assert report.directories == [output / "subdir1", output / "subdir1" / "subdir2"]


def test_convert_copies_files_without_matches_unchanged(tmp_path: Path, component_dir: Path):
    output = tmp_path / "output"
    report = convert_to_template(component_dir, output)

    assert (output / "file1.ts.hbs").read_text(encoding="utf-8") == "content"
    changed = {written.source.name: written.changed for written in report.files}
    assert changed == {
        "TestComponent.tsx": True,
        "file1.ts": False,
        "file2.ts": False,
        "file3.ts": False,
    }


def test_convert_substitutes_every_case_style(tmp_path: Path):
    source = tmp_path / "source"
    source.mkdir()
    (source / "DatePicker.tsx").write_text("export const DatePicker = 1;", encoding="utf-8")
    (source / "date-picker.css").write_text(".date-picker { }", encoding="utf-8")
    (source / "date_picker.py").write_text("date_picker = datePicker", encoding="utf-8")

    output = tmp_path / "output"
    convert_to_template(source, output)

    assert (output / "{{kebabCase name}}.css.hbs").read_text(encoding="utf-8") == ".{{kebabCase name}} { }"
    assert (output / "{{snakeCase name}}.py.hbs").read_text(encoding="utf-8") == (
        "{{snakeCase name}} = {{camelCase name}}"
    )


def test_convert_does_not_modify_source(tmp_path: Path, component_dir: Path):
    before = {path: path.read_bytes() for path in component_dir.rglob("*") if path.is_file()}
    convert_to_template(component_dir, tmp_path / "output")
    after = {path: path.read_bytes() for path in component_dir.rglob("*") if path.is_file()}
    assert before == after


def test_convert_fails_without_component_file(tmp_path: Path):
    source = tmp_path / "empty"
    source.mkdir()
    output = tmp_path / "output"

    with pytest.raises(NoCanonicalFileError, match="Could not find main component file"):
        convert_to_template(source, output)

    assert output.is_dir()
    assert list(output.iterdir()) == []


def test_convert_rejects_missing_source(tmp_path: Path):
    with pytest.raises(InvalidSourceError, match="Source path must be a directory"):
        convert_to_template(tmp_path / "missing", tmp_path / "output")
    assert not (tmp_path / "output").exists()


def test_convert_rejects_file_source(tmp_path: Path):
    source = tmp_path / "Button.tsx"
    source.write_text("", encoding="utf-8")
    with pytest.raises(InvalidSourceError):
        convert_to_template(source, tmp_path / "output")


def test_convert_with_explicit_name(tmp_path: Path):
    source = tmp_path / "source"
    source.mkdir()
    (source / "index.ts").write_text("export * from './user-card';", encoding="utf-8")

    config = ConverterConfig.from_options(name="user card")
    report = TemplateConverter(config).convert(source, tmp_path / "output")

    assert report.component_name == "UserCard"
    content = (tmp_path / "output" / "index.ts.hbs").read_text(encoding="utf-8")
    assert content == "export * from './{{kebabCase name}}';"


def test_convert_with_moustache_scheme_and_custom_suffix(tmp_path: Path, component_dir: Path):
    config = ConverterConfig.from_options(scheme="moustache", suffix=".tmpl")
    output = tmp_path / "output"
    TemplateConverter(config).convert(component_dir, output)

    template = output / "{{ name|pascal }}.tsx.tmpl"
    assert template.read_text(encoding="utf-8") == "export const {{ name|pascal }} = () => {};"
    assert (output / "file1.ts.tmpl").exists()


def test_convert_skips_output_nested_in_source(component_dir: Path):
    output = component_dir / "templates"
    output.mkdir()
    (output / "stale.txt").write_text("old", encoding="utf-8")

    report = convert_to_template(component_dir, output)

    assert not (output / "templates").exists()
    assert all(output not in written.source.parents for written in report.files)
    assert len(report.files) == 4


def test_convert_preserves_line_endings_and_undecodable_bytes(tmp_path: Path):
    source = tmp_path / "source"
    source.mkdir()
    (source / "Widget.ts").write_bytes(b"const Widget = 1;\r\nconst widget = 2;\r\n")
    (source / "blob.bin").write_bytes(b"\xff\xfe\x00Widget\x80")

    output = tmp_path / "output"
    convert_to_template(source, output)

    assert (output / "{{pascalCase name}}.ts.hbs").read_bytes() == (
        b"const {{pascalCase name}} = 1;\r\nconst {{camelCase name}} = 2;\r\n"
    )
    assert (output / "blob.bin.hbs").read_bytes() == b"\xff\xfe\x00{{pascalCase name}}\x80"


def test_convert_then_expand_reproduces_the_source(tmp_path: Path):
    source = tmp_path / "source"
    (source / "my-ui-component").mkdir(parents=True)
    files = {
        "MyUiComponent.tsx": "export const MyUiComponent = () => <div className=\"my-ui-component\" />;\n",
        "useMyUiComponent.ts": "export const myUiComponent = { key: 'my_ui_component' };\n",
        "my-ui-component/styles.css": ".my-ui-component { color: red; }\n",
        "README.md": "Nothing to see here.\n",
    }
    for relative, content in files.items():
        (source / relative).write_text(content, encoding="utf-8")

    templates = tmp_path / "templates"
    convert_to_template(source, templates)
    expanded = tmp_path / "expanded"
    TemplateRenderer().render_directory(templates, expanded, {"name": "MyUiComponent"})

    for relative, content in files.items():
        assert (expanded / relative).read_text(encoding="utf-8") == content


def test_report_serialises_to_json(tmp_path: Path, component_dir: Path):
    report = convert_to_template(component_dir, tmp_path / "output")
    payload = json.loads(report.model_dump_json())
    assert payload["component_name"] == "TestComponent"
    assert payload["variants"]["snake"] == "test_component"
    assert len(payload["files"]) == 4


def test_convert_then_expand_component_named_name(tmp_path: Path):
    source = tmp_path / "source"
    source.mkdir()
    content = "export const Name = () => <div className=\"name\" />;\n"
    (source / "Name.tsx").write_text(content, encoding="utf-8")

    templates = tmp_path / "templates"
    convert_to_template(source, templates)
    assert (templates / "{{pascalCase name}}.tsx.hbs").read_text(encoding="utf-8") == (
        "export const {{pascalCase name}} = () => <div className=\"{{camelCase name}}\" />;\n"
    )

    expanded = tmp_path / "expanded"
    TemplateRenderer().render_directory(templates, expanded, {"name": "Name"})
    assert (expanded / "Name.tsx").read_text(encoding="utf-8") == content


def test_convert_aborts_on_unreadable_file_without_rollback(tmp_path: Path):
    source = tmp_path / "source"
    source.mkdir()
    (source / "Widget.tsx").write_text("export const Widget = 1;", encoding="utf-8")
    (source / "a.ts").write_text("widget", encoding="utf-8")
    (source / "b.ts").symlink_to(source / "missing.ts")
    (source / "c.ts").write_text("widget", encoding="utf-8")

    output = tmp_path / "output"
    with pytest.raises(FileNotFoundError) as excinfo:
        convert_to_template(source, output)

    assert isinstance(excinfo.value, OSError)
    assert Path(excinfo.value.filename) == source / "b.ts"
    assert (output / "{{pascalCase name}}.tsx.hbs").exists()
    assert (output / "a.ts.hbs").read_text(encoding="utf-8") == "{{camelCase name}}"
    assert not (output / "b.ts.hbs").exists()
    assert not (output / "c.ts.hbs").exists()
