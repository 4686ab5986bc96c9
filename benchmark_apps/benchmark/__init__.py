"""
Benchmark execution and reporting package.
"""

from .runner import BenchmarkRunner, CommandTimings, HarnessOptions, time_this
from .metrics import MetricsCollector, TimingStats, summarize
from .reporter import Reporter, pretty_print, print_summary

__all__ = [
    "BenchmarkRunner",
    "CommandTimings",
    "HarnessOptions",
    "time_this",
    "MetricsCollector",
    "TimingStats",
    "summarize",
    "Reporter",
    "pretty_print",
    "print_summary",
]
