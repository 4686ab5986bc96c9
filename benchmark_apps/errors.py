"""
Exception types raised by the benchmark harness.
"""

from typing import Optional


class BenchmarkError(Exception):
    """Base class for all harness errors."""


class ConfigurationError(BenchmarkError, ValueError):
    """Raised when harness options are invalid."""


class CommandFileError(BenchmarkError, ValueError):
    """Raised when a command set cannot be read or parsed."""


class SpawnError(BenchmarkError):
    """
    Raised when a command's child process cannot be created at all.
    
    A command that runs and exits with a non-zero status is not a spawn
    failure; only the OS refusing to start the shell is.
    """
    
    def __init__(self, command: str, reason: Optional[str] = None):
        self.command = command
        self.reason = reason
        message = f"Failed to spawn command: {command}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
