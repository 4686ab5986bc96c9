"""
Benchmark runner for timing shell commands.
"""

import time
import logging
import subprocess
from dataclasses import dataclass, field, replace
from typing import Dict, Any, Optional, Callable, Mapping, Union

from ..errors import ConfigurationError, SpawnError
from .utils import identity_arg

logger = logging.getLogger(__name__)

# Accepted option names -> HarnessOptions field
_OPTION_ALIASES = {
    "pretty_print": "pretty_print",
    "prettyPrint": "pretty_print",
    "iterations": "iterations",
    "iters": "iterations",
    "arg_generator": "arg_generator",
    "argGenerator": "arg_generator",
    "args": "arg_generator",
}


@dataclass(frozen=True)
class HarnessOptions:
    """Configuration for a benchmark harness."""
    pretty_print: bool = False
    iterations: int = 5
    arg_generator: Callable[[int], str] = identity_arg

    @classmethod
    def from_mapping(
        cls,
        options: Optional[Mapping[str, Any]] = None,
        base: Optional["HarnessOptions"] = None,
    ) -> "HarnessOptions":
        """
        Build options from a mapping, layered over ``base``.

        Unknown keys are ignored. Values are validated eagerly.

        Raises:
            ConfigurationError: If a recognised option has an invalid value
        """
        values: Dict[str, Any] = {}
        for key, value in (options or {}).items():
            name = _OPTION_ALIASES.get(key)
            if name is None:
                logger.debug(f"Ignoring unknown harness option: {key}")
                continue
            if value is None:
                continue
            values[name] = value

        if "pretty_print" in values:
            values["pretty_print"] = bool(values["pretty_print"])

        iterations = values.get("iterations")
        if iterations is not None and (isinstance(iterations, bool) or not isinstance(iterations, int)):
            raise ConfigurationError(f"iterations must be an integer, got {iterations!r}")

        arg_generator = values.get("arg_generator")
        if arg_generator is not None and not callable(arg_generator):
            raise ConfigurationError(f"arg_generator must be callable, got {type(arg_generator).__name__}")

        return replace(base or cls(), **values)


@dataclass
class CommandTimings:
    """Timings for one named command, keyed by iteration number."""
    run: str
    result: Dict[int, float] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "run": self.run,
            "result": dict(self.result),
        }


# A result table entry: CommandTimings or its to_dict() form
ResultEntry = Union[CommandTimings, Mapping[str, Any]]


def iteration_results(entry: ResultEntry) -> Mapping[int, float]:
    """Get the iteration -> seconds mapping from a result table entry."""
    if isinstance(entry, CommandTimings):
        return entry.result
    return entry.get("result", {})


def command_template(entry: ResultEntry) -> str:
    """Get the command template from a result table entry."""
    if isinstance(entry, CommandTimings):
        return entry.run
    return entry.get("run", "")


def time_this(command_line: str) -> float:
    """
    Run a command line through the shell and time it.

    Output and error streams of the child are discarded. The exit status
    is ignored.

    Args:
        command_line: Command to execute; interpreted by the shell

    Returns:
        Elapsed wall-clock seconds

    Raises:
        SpawnError: If the child process cannot be created
    """
    logger.debug(f"Timing: {command_line}")
    start_time = time.perf_counter()
    try:
        subprocess.run(
            command_line,
            shell=True,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except OSError as e:
        raise SpawnError(command_line, str(e)) from e
    return time.perf_counter() - start_time


class BenchmarkRunner:
    """
    Runs named shell commands repeatedly and records their wall-clock times.

    State (options, last command set, results) belongs to the instance.
    An instance is not safe to share between threads; use one per thread.
    Results accumulate across ``run`` calls until ``reset`` is called.

    Example:
        runner = BenchmarkRunner(pretty_print=True, iterations=10)
        results = runner.run({
            "cmd1": "run_command_1 with arguments",
            "cmd2": "run_command_2 with other arguments",
        })
    """

    def __init__(self, options: Optional[Mapping[str, Any]] = None, **kwargs: Any):
        """
        Initialize benchmark runner.

        Args:
            options: Mapping of harness options (pretty_print, iterations,
                arg_generator). Unknown keys are ignored.
            **kwargs: Same options as keyword arguments; override ``options``

        Raises:
            ConfigurationError: If an option value is invalid
        """
        merged = dict(options or {})
        merged.update(kwargs)
        self.options = HarnessOptions.from_mapping(merged)
        self.commands: Dict[str, str] = {}
        self.results: Dict[str, CommandTimings] = {}

        # Callbacks
        self._on_progress: Optional[Callable[[int, int], None]] = None
        self._on_result: Optional[Callable[[str, int, float], None]] = None

    def on_progress(self, callback: Callable[[int, int], None]) -> "BenchmarkRunner":
        """
        Set progress callback.

        Args:
            callback: Function(completed, total) called after each timed command
        """
        self._on_progress = callback
        return self

    def on_result(self, callback: Callable[[str, int, float], None]) -> "BenchmarkRunner":
        """
        Set result callback.

        Args:
            callback: Function(name, iteration, elapsed) called on each timing
        """
        self._on_result = callback
        return self

    def run(
        self,
        commands: Mapping[str, str],
        overrides: Optional[Mapping[str, Any]] = None,
    ) -> Dict[str, CommandTimings]:
        """
        Run every command once per iteration and record the timings.

        Args:
            commands: Mapping of command name to command line
            overrides: Option overrides applied to this call only; passed
                after the command set, positionally or as ``overrides=``

        Returns:
            The accumulated result table, keyed by command name

        Raises:
            SpawnError: If a command cannot be spawned; the run is aborted
        """
        options = HarnessOptions.from_mapping(overrides, base=self.options)
        self.commands = dict(commands)

        if options.iterations < 1:
            logger.warning(f"Iteration count is {options.iterations}; nothing to run")
            return self.results

        total = options.iterations * len(self.commands)
        completed = 0
        logger.info(f"Starting benchmark: {len(self.commands)} commands x {options.iterations} iterations")

        for iteration in range(1, options.iterations + 1):
            for name, command in self.commands.items():
                timings = self.results.setdefault(name, CommandTimings(run=command))
                timings.run = command

                elapsed = time_this(f"{command} {options.arg_generator(iteration)}")
                timings.result[iteration] = elapsed

                if self._on_result:
                    self._on_result(name, iteration, elapsed)

                completed += 1
                if self._on_progress:
                    self._on_progress(completed, total)

        logger.info(f"Benchmark complete: {completed} timed runs")

        if options.pretty_print and self.commands:
            self.pretty_print(iterations=options.iterations)

        return self.results

    def pretty_print(self, iterations: Optional[int] = None) -> None:
        """Print the stored results in the per-iteration text format."""
        from .reporter import pretty_print

        pretty_print(self.results, iterations=iterations)

    def results_as_dict(self) -> Dict[str, Dict[str, Any]]:
        """Return the result table as plain dictionaries."""
        return {name: timings.to_dict() for name, timings in self.results.items()}

    def reset(self) -> None:
        """Discard all accumulated results and the last command set."""
        self.commands = {}
        self.results = {}
