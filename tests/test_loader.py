from __future__ import annotations

from pathlib import Path

import pytest

from adb_control.commands.errors import DefinitionParseError
from adb_control.commands.loader import ToolDefinition, load_definitions, parse_definition
from tests.utils import write_definition


def test_missing_directory_yields_nothing(tmp_path: Path):
    assert load_definitions(tmp_path / "absent") == []


def test_loads_toml_files_in_sorted_order(tmp_path: Path):
    write_definition(tmp_path, "b_tool", prompt="b", description="B tool")
    write_definition(tmp_path, "a_tool", prompt="a", description="A tool")
    (tmp_path / "notes.txt").write_text("ignored")
    (tmp_path / "upper.TOML").write_text('prompt = "ignored"')

    definitions = load_definitions(tmp_path)

    assert [d.name for d in definitions] == ["a_tool", "b_tool"]
    assert definitions[0] == ToolDefinition(name="a_tool", description="A tool", instruction_text="a")


def test_skips_directories_with_toml_suffix(tmp_path: Path):
    (tmp_path / "nested.toml").mkdir()
    write_definition(tmp_path, "real", prompt="x")
    assert [d.name for d in load_definitions(tmp_path)] == ["real"]


def test_defaults_for_missing_fields(tmp_path: Path):
    path = tmp_path / "bare.toml"
    path.write_text("")
    definition = parse_definition(path)
    assert definition.description == "Tool for bare"
    assert definition.instruction_text == ""


def test_empty_description_uses_fallback(tmp_path: Path):
    path = tmp_path / "blank.toml"
    path.write_text('description = ""\nprompt = "p"\n')
    assert parse_definition(path).description == "Tool for blank"


def test_invalid_toml_raises(tmp_path: Path):
    write_definition(tmp_path, "good", prompt="fine")
    bad = tmp_path / "broken.toml"
    bad.write_text("prompt = 'unterminated\n")

    with pytest.raises(DefinitionParseError) as excinfo:
        load_definitions(tmp_path)
    assert excinfo.value.path == bad


def test_non_string_field_raises(tmp_path: Path):
    path = tmp_path / "typed.toml"
    path.write_text("prompt = 42\n")
    with pytest.raises(DefinitionParseError, match="prompt"):
        parse_definition(path)


def test_undecodable_file_raises(tmp_path: Path):
    path = tmp_path / "binary.toml"
    path.write_bytes(b"\xff\xfe\x00prompt")
    with pytest.raises(DefinitionParseError):
        parse_definition(path)
