"""
Report generation for benchmark results.
Supports plain-text, Markdown and JSON output formats.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Mapping, Optional, TextIO

from rich.console import Console
from rich.table import Table

from .metrics import TimingStats, summarize
from .runner import ResultEntry, command_template, iteration_results
from .utils import get_machine_info, get_report_subdir_name, ordinal
from ..config import Config


def pretty_print(
    results: Mapping[str, ResultEntry],
    iterations: Optional[int] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Print a result table, one block per iteration.

    Output format:
        1st iteration:
             cmd1 =>   0.1234 s

    Args:
        results: Result table (CommandTimings or {"run", "result"} mappings)
        iterations: Print iterations 1..N; default is every recorded iteration
        stream: Output stream (default: stdout)
    """
    if iterations is None:
        recorded = set()
        for entry in results.values():
            recorded.update(iteration_results(entry))
        iteration_range = sorted(recorded)
    else:
        iteration_range = range(1, iterations + 1)

    for iteration in iteration_range:
        rows = []
        for name, entry in results.items():
            elapsed = iteration_results(entry).get(iteration)
            if elapsed is not None:
                rows.append((name, elapsed))
        if not rows:
            continue

        print(f"{ordinal(iteration)} iteration:", file=stream)
        for name, elapsed in rows:
            print(f" {name:>8} => {elapsed:8.4f} s", file=stream)


class Reporter:
    """
    Generate benchmark reports in various formats.

    Supports:
        - Markdown reports
        - JSON data export

    Reports are organized by date and hostname:
        reports/YYYYMMDD_hostname/

    Example:
        reporter = Reporter()
        reporter.generate_markdown(results, "report.md")
        reporter.generate_json(results, "results.json")
    """

    def __init__(self, output_dir: Optional[Path] = None):
        """
        Initialize reporter.

        Args:
            output_dir: Base directory for output files (default: Config.REPORT_DIR)
        """
        base_dir = Path(output_dir) if output_dir else Config.REPORT_DIR

        subdir_name = get_report_subdir_name()
        self.output_dir = base_dir / subdir_name
        self.output_dir.mkdir(parents=True, exist_ok=True)

        # Cache machine info for this reporter instance
        self._machine_info = get_machine_info()

    def generate_markdown(
        self,
        results: Mapping[str, ResultEntry],
        filename: Optional[str] = None,
    ) -> str:
        """
        Generate a Markdown benchmark report.

        Args:
            results: Result table to report
            filename: Output filename (optional)

        Returns:
            Path to generated file
        """
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        file_timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

        if not filename:
            filename = f"benchmark_report_{file_timestamp}.md"

        output_path = self.output_dir / filename
        machine_info = self._machine_info
        summary = summarize(results)

        lines = []
        lines.append("# Command Benchmark Report")
        lines.append(f"\n**Commands:** {', '.join(results.keys()) or '-'}")
        lines.append(f"**Generated:** {timestamp}")
        lines.append("\n---\n")

        lines.append("## Environment\n")
        lines.append("| Item | Value |")
        lines.append("|------|-------|")
        lines.append(f"| Hostname | {machine_info['hostname']} |")
        lines.append(f"| Platform | {machine_info['platform']} |")
        lines.append(f"| Machine | {machine_info['machine']} |")
        lines.append(f"| Python | {machine_info['python']} |")
        lines.append("\n---\n")

        lines.append(self._format_summary_section(summary))
        lines.append(self._format_iterations_section(results))

        content = "\n".join(lines) + "\n"

        with open(output_path, "w", encoding="utf-8") as f:
            f.write(content)

        return str(output_path)

    def _format_summary_section(self, summary: Dict[str, TimingStats]) -> str:
        """Format the per-command statistics for Markdown."""
        lines = []
        lines.append("## Summary\n")
        lines.append("| Command | Runs | Mean (s) | Min (s) | Max (s) | Median (s) | P95 (s) | Stdev (s) |")
        lines.append("|---------|------|----------|---------|---------|------------|---------|-----------|")

        for name, stats in summary.items():
            lines.append(
                f"| {name} | {stats.count} | {stats.mean:.4f} | {stats.min:.4f} | {stats.max:.4f} "
                f"| {stats.median:.4f} | {stats.p95:.4f} | {stats.stdev:.4f} |"
            )

        return "\n".join(lines)

    def _format_iterations_section(self, results: Mapping[str, ResultEntry]) -> str:
        """Format the raw per-iteration timings for Markdown."""
        names = list(results.keys())
        iterations = sorted({i for entry in results.values() for i in iteration_results(entry)})

        lines = []
        lines.append("\n## Iterations\n")
        if not names:
            lines.append("_No commands were run._")
            return "\n".join(lines)

        lines.append("| Iteration |" + "|".join(f" {n} " for n in names) + "|")
        lines.append("|-----------|" + "|".join("------" for _ in names) + "|")

        for iteration in iterations:
            row = f"| {ordinal(iteration)} |"
            for name in names:
                elapsed = iteration_results(results[name]).get(iteration)
                row += f" {elapsed:.4f} |" if elapsed is not None else " - |"
            lines.append(row)

        lines.append("\n### Command Lines\n")
        for name in names:
            lines.append(f"- **{name}:** `{command_template(results[name])}`")

        return "\n".join(lines)

    def generate_json(
        self,
        results: Mapping[str, ResultEntry],
        filename: Optional[str] = None,
    ) -> str:
        """
        Generate JSON benchmark results.

        Args:
            results: Result table to export
            filename: Output filename (optional)

        Returns:
            Path to generated file
        """
        file_timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

        if not filename:
            filename = f"benchmark_results_{file_timestamp}.json"

        output_path = self.output_dir / filename

        data = {
            "generated_at": datetime.now().isoformat(),
            "test_environment": dict(self._machine_info),
            "commands": {
                name: {"run": command_template(entry), "result": dict(iteration_results(entry))}
                for name, entry in results.items()
            },
            "summary": {name: stats.to_dict() for name, stats in summarize(results).items()},
        }

        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)

        return str(output_path)


def print_summary(
    results: Mapping[str, ResultEntry],
    console: Optional[Console] = None,
) -> None:
    """Print a summary table to the console."""
    console = console or Console()
    summary = summarize(results)

    table = Table(title="Benchmark Summary")
    table.add_column("Command", style="cyan")
    table.add_column("Runs", justify="right")
    table.add_column("Mean", justify="right")
    table.add_column("Min", justify="right")
    table.add_column("Max", justify="right")
    table.add_column("P95", justify="right")

    rows: List[TimingStats] = [stats for stats in summary.values() if stats.count]
    for stats in rows:
        table.add_row(
            stats.name,
            str(stats.count),
            f"{stats.mean:.4f}s",
            f"{stats.min:.4f}s",
            f"{stats.max:.4f}s",
            f"{stats.p95:.4f}s",
        )

    console.print(table)

    if rows:
        fastest = min(rows, key=lambda s: s.mean)
        console.print(f"Fastest on average: [green]{fastest.name}[/green] ({fastest.mean:.4f}s)")
