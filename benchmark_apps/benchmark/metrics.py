"""
Metrics collection and calculation for benchmarks.
"""

import math
import statistics
from dataclasses import dataclass
from typing import Dict, List, Any, Mapping

from .runner import ResultEntry, command_template, iteration_results


@dataclass
class TimingStats:
    """
    Aggregated timing statistics for a single command.

    All times are in seconds.
    """
    name: str = ""
    command: str = ""

    count: int = 0
    total: float = 0.0
    mean: float = 0.0
    min: float = 0.0
    max: float = 0.0
    median: float = 0.0
    p95: float = 0.0
    stdev: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "name": self.name,
            "command": self.command,
            "count": self.count,
            "total_sec": self.total,
            "mean_sec": self.mean,
            "min_sec": self.min,
            "max_sec": self.max,
            "median_sec": self.median,
            "p95_sec": self.p95,
            "stdev_sec": self.stdev,
        }


class MetricsCollector:
    """
    Collects elapsed times for one command and aggregates them.

    Usage:
        collector = MetricsCollector("cmd1", "sleep")
        for elapsed in timings.result.values():
            collector.record(elapsed)
        stats = collector.calculate()
    """

    def __init__(self, name: str, command: str = ""):
        """
        Initialize metrics collector.

        Args:
            name: Command name
            command: Command line template
        """
        self.name = name
        self.command = command
        self.samples: List[float] = []

    def record(self, elapsed: float) -> None:
        """Record a single elapsed time, ignoring non-finite values."""
        if elapsed is None or not math.isfinite(elapsed):
            return
        self.samples.append(float(elapsed))

    def calculate(self) -> TimingStats:
        """
        Calculate aggregated statistics.

        Returns:
            TimingStats with all calculated values
        """
        stats = TimingStats(name=self.name, command=self.command, count=len(self.samples))

        if not self.samples:
            return stats

        sorted_times = sorted(self.samples)
        n = len(sorted_times)

        stats.total = sum(sorted_times)
        stats.mean = stats.total / n
        stats.min = sorted_times[0]
        stats.max = sorted_times[-1]
        stats.median = statistics.median(sorted_times)
        stats.p95 = self._percentile(sorted_times, 95)
        stats.stdev = statistics.stdev(sorted_times) if n > 1 else 0.0

        return stats

    def _percentile(self, sorted_data: List[float], percentile: int) -> float:
        """Calculate percentile value (nearest rank)."""
        if not sorted_data:
            return 0.0

        n = len(sorted_data)
        index = int(n * percentile / 100)
        index = min(index, n - 1)

        return sorted_data[index]


def summarize(results: Mapping[str, ResultEntry]) -> Dict[str, TimingStats]:
    """
    Compute statistics for every command in a result table.

    Args:
        results: Result table as returned by BenchmarkRunner.run

    Returns:
        Dictionary mapping command name to TimingStats
    """
    summary = {}
    for name, entry in results.items():
        collector = MetricsCollector(name, command_template(entry))
        timings = iteration_results(entry)
        for iteration in sorted(timings):
            collector.record(timings[iteration])
        summary[name] = collector.calculate()
    return summary
