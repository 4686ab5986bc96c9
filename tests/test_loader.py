import json
from pathlib import Path

import pytest

from benchmark_apps.data.loader import CommandLoader, create_sample_commands, parse_command_specs
from benchmark_apps.errors import CommandFileError


def test_load_json_object(tmp_path: Path) -> None:
    path = tmp_path / "commands.json"
    path.write_text(json.dumps({"b": "sleep 0.1", "a": "true"}), encoding="utf-8")

    assert list(CommandLoader(str(path)).load().items()) == [("b", "sleep 0.1"), ("a", "true")]


def test_load_json_list_with_alias(tmp_path: Path) -> None:
    path = tmp_path / "commands.json"
    path.write_text(json.dumps([
        {"name": "one", "command": "echo one"},
        {"name": "two", "cmd": "echo two"},
        {"name": "", "command": "echo skipped"},
    ]), encoding="utf-8")

    assert CommandLoader(str(path)).load() == {"one": "echo one", "two": "echo two"}


def test_load_json_duplicate_names(tmp_path: Path) -> None:
    path = tmp_path / "commands.json"
    path.write_text(json.dumps([
        {"name": "one", "command": "echo a"},
        {"name": "one", "command": "echo b"},
    ]), encoding="utf-8")

    with pytest.raises(CommandFileError):
        CommandLoader(str(path)).load()


def test_load_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "commands.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(CommandFileError):
        CommandLoader(str(path)).load()


def test_load_csv(tmp_path: Path) -> None:
    path = tmp_path / "commands.csv"
    path.write_text("name,command\nls,ls -l\ncount,wc -l /etc/hosts\n", encoding="utf-8")

    assert CommandLoader(str(path)).load() == {"ls": "ls -l", "count": "wc -l /etc/hosts"}


def test_load_csv_missing_columns(tmp_path: Path) -> None:
    path = tmp_path / "commands.csv"
    path.write_text("id,content\n1,true\n", encoding="utf-8")

    with pytest.raises(CommandFileError):
        CommandLoader(str(path)).load()


def test_unsupported_format(tmp_path: Path) -> None:
    path = tmp_path / "commands.yaml"
    path.write_text("a: true\n", encoding="utf-8")

    with pytest.raises(CommandFileError):
        CommandLoader(str(path))


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        CommandLoader(str(tmp_path / "nope.json"))


def test_parse_command_specs() -> None:
    commands = parse_command_specs(["fast=sleep 0.1", "env=env FOO=bar printenv"])
    assert commands == {"fast": "sleep 0.1", "env": "env FOO=bar printenv"}


def test_parse_command_specs_requires_equals() -> None:
    with pytest.raises(CommandFileError):
        parse_command_specs(["no-separator"])


@pytest.mark.parametrize("fmt,suffix", [("json", ".json"), ("csv", ".csv")])
def test_sample_commands_load_back(tmp_path: Path, fmt, suffix) -> None:
    path = tmp_path / f"sample{suffix}"
    create_sample_commands(str(path), fmt)

    commands = CommandLoader(str(path)).load()
    assert set(commands) == {"sleep", "python", "sort"}
