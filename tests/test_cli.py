import json
import re
from pathlib import Path

from click.testing import CliRunner

from benchmark_apps.cli import cli


def test_run_with_pretty_print() -> None:
    result = CliRunner().invoke(cli, ["run", "-c", "a=true", "-c", "b=false", "-n", "2", "--pretty"])

    assert result.exit_code == 0, result.output
    assert "1st iteration:" in result.output
    assert "2nd iteration:" in result.output
    assert re.search(r"^        a => +\d+\.\d{4} s$", result.output, re.MULTILINE)
    assert "Benchmark Summary" in result.output


def test_run_without_commands() -> None:
    result = CliRunner().invoke(cli, ["run", "-n", "1"])
    assert result.exit_code == 1
    assert "no commands given" in result.output


def test_run_with_bad_command_spec() -> None:
    result = CliRunner().invoke(cli, ["run", "-c", "missing-separator"])
    assert result.exit_code == 1
    assert "NAME=COMMAND" in result.output


def test_run_with_bad_arg_template() -> None:
    result = CliRunner().invoke(cli, ["run", "-c", "a=true", "-n", "1", "--arg-template", "{foo}"])

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Invalid argument template" in result.output
    assert "Benchmark Summary" not in result.output


def test_run_from_file_writes_reports(tmp_path: Path) -> None:
    command_file = tmp_path / "commands.json"
    command_file.write_text(json.dumps({"noop": "true"}), encoding="utf-8")
    reports = tmp_path / "reports"

    result = CliRunner().invoke(cli, [
        "run", "-f", str(command_file), "-n", "3", "--no-args",
        "--format", "both", "-o", str(reports),
    ])

    assert result.exit_code == 0, result.output
    json_files = list(reports.glob("*/benchmark_results_*.json"))
    md_files = list(reports.glob("*/benchmark_report_*.md"))
    assert len(json_files) == 1
    assert len(md_files) == 1

    data = json.loads(json_files[0].read_text(encoding="utf-8"))
    assert data["commands"]["noop"]["run"] == "true"
    assert sorted(data["commands"]["noop"]["result"]) == ["1", "2", "3"]


def test_time_command() -> None:
    result = CliRunner().invoke(cli, ["time", "true"])
    assert result.exit_code == 0, result.output
    assert re.fullmatch(r"\d+\.\d{4} s\n", result.output)


def test_create_sample(tmp_path: Path) -> None:
    output = tmp_path / "commands.csv"
    result = CliRunner().invoke(cli, ["create-sample", "-o", str(output), "-f", "csv"])

    assert result.exit_code == 0, result.output
    assert output.read_text(encoding="utf-8").startswith("name,command")
