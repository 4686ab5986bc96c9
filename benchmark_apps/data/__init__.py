"""
Command set loading package.
Supports JSON and CSV formats.
"""

from .loader import CommandLoader, parse_command_specs, create_sample_commands

__all__ = [
    "CommandLoader",
    "parse_command_specs",
    "create_sample_commands",
]
