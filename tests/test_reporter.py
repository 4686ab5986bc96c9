import io
import json
from pathlib import Path

from rich.console import Console

from benchmark_apps.benchmark.reporter import Reporter, pretty_print, print_summary
from benchmark_apps.benchmark.runner import CommandTimings


def sample_results():
    return {
        "cmd1": CommandTimings(run="sleep 0.1; echo", result={1: 0.1234, 2: 0.5678}),
        "longname": CommandTimings(run="true", result={1: 0.01, 2: 0.02}),
    }


def test_pretty_print_format(capsys) -> None:
    pretty_print({"cmd1": {"run": "x", "result": {1: 0.1234, 2: 0.5678}}})

    assert capsys.readouterr().out.splitlines() == [
        "1st iteration:",
        "     cmd1 =>   0.1234 s",
        "2nd iteration:",
        "     cmd1 =>   0.5678 s",
    ]


def test_pretty_print_all_commands_per_iteration(capsys) -> None:
    pretty_print(sample_results())

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "1st iteration:"
    assert lines[1] == "     cmd1 =>   0.1234 s"
    assert lines[2] == " longname =>   0.0100 s"
    assert lines[3] == "2nd iteration:"


def test_pretty_print_explicit_iteration_range(capsys) -> None:
    pretty_print(sample_results(), iterations=3)

    out = capsys.readouterr().out
    assert "2nd iteration:" in out
    assert "3rd iteration:" not in out
    assert out.endswith(" longname =>   0.0200 s\n")


def test_pretty_print_skips_iterations_without_timings(capsys) -> None:
    pretty_print({"a": {"run": "true", "result": {2: 0.25}}}, iterations=3)

    assert capsys.readouterr().out.splitlines() == [
        "2nd iteration:",
        "        a =>   0.2500 s",
    ]


def test_pretty_print_to_stream() -> None:
    stream = io.StringIO()
    pretty_print({"a": {"result": {11: 1.5}}}, stream=stream)
    assert stream.getvalue() == "11th iteration:\n        a =>   1.5000 s\n"


def test_pretty_print_empty_table(capsys) -> None:
    pretty_print({})
    assert capsys.readouterr().out == ""


def test_generate_markdown(tmp_path: Path) -> None:
    reporter = Reporter(tmp_path)
    path = Path(reporter.generate_markdown(sample_results(), "report.md"))

    assert path.parent.parent == tmp_path
    content = path.read_text(encoding="utf-8")
    assert "# Command Benchmark Report" in content
    assert "| cmd1 | 2 |" in content
    assert "| 1st | 0.1234 | 0.0100 |" in content
    assert "`sleep 0.1; echo`" in content


def test_generate_markdown_without_results(tmp_path: Path) -> None:
    path = Path(Reporter(tmp_path).generate_markdown({}))
    assert "_No commands were run._" in path.read_text(encoding="utf-8")


def test_generate_json(tmp_path: Path) -> None:
    reporter = Reporter(tmp_path)
    path = Path(reporter.generate_json(sample_results()))

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["commands"]["cmd1"] == {"run": "sleep 0.1; echo", "result": {"1": 0.1234, "2": 0.5678}}
    assert data["summary"]["cmd1"]["count"] == 2
    assert abs(data["summary"]["cmd1"]["mean_sec"] - 0.3456) < 1e-9
    assert "hostname" in data["test_environment"]


def test_print_summary() -> None:
    buffer = io.StringIO()
    console = Console(file=buffer, width=120)

    print_summary(sample_results(), console=console)

    out = buffer.getvalue()
    assert "Benchmark Summary" in out
    assert "cmd1" in out
    assert "0.3456s" in out
    assert "Fastest on average: longname" in out


def test_reports_accept_plain_dict_results(tmp_path: Path) -> None:
    results = {name: timings.to_dict() for name, timings in sample_results().items()}
    reporter = Reporter(tmp_path)

    content = Path(reporter.generate_markdown(results, "report.md")).read_text(encoding="utf-8")
    assert "| cmd1 | 2 |" in content
    assert "`sleep 0.1; echo`" in content

    data = json.loads(Path(reporter.generate_json(results)).read_text(encoding="utf-8"))
    assert data["commands"]["longname"] == {"run": "true", "result": {"1": 0.01, "2": 0.02}}
    assert data["summary"]["cmd1"]["count"] == 2


def test_print_summary_accepts_plain_dict_results() -> None:
    buffer = io.StringIO()
    results = {name: timings.to_dict() for name, timings in sample_results().items()}

    print_summary(results, console=Console(file=buffer, width=120))

    assert "Fastest on average: longname" in buffer.getvalue()
