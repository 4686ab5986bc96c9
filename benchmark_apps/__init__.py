"""
Benchmark Apps - time shell commands over repeated iterations.
"""

from .benchmark.runner import BenchmarkRunner, CommandTimings, HarnessOptions, time_this
from .benchmark.reporter import pretty_print
from .errors import BenchmarkError, ConfigurationError, CommandFileError, SpawnError

__version__ = "0.4.0"

__all__ = [
    "BenchmarkRunner",
    "CommandTimings",
    "HarnessOptions",
    "time_this",
    "pretty_print",
    "BenchmarkError",
    "ConfigurationError",
    "CommandFileError",
    "SpawnError",
    "__version__",
]
