"""
Command set loader.
Supports JSON and CSV formats.
"""

import json
import csv
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Tuple

from ..errors import CommandFileError

logger = logging.getLogger(__name__)


class CommandLoader:
    """
    Load a command set (name -> command line) from a file.

    Supported formats:
        - JSON (.json): {"name": "command", ...} or
          [{"name": "...", "command": "..."}, ...]
        - CSV (.csv): header with "name" and "command" columns

    Example:
        loader = CommandLoader("commands.json")
        commands = loader.load()
    """

    def __init__(self, file_path: str):
        """
        Initialize command loader.

        Args:
            file_path: Path to the command file
        """
        self.file_path = Path(file_path)

        if not self.file_path.exists():
            raise FileNotFoundError(f"Command file not found: {file_path}")

        self.format = self._detect_format()
        logger.info(f"CommandLoader initialized: {file_path} (format: {self.format})")

    def _detect_format(self) -> str:
        """Detect file format from extension."""
        suffix = self.file_path.suffix.lower()

        if suffix == ".json":
            return "json"
        elif suffix == ".csv":
            return "csv"
        else:
            raise CommandFileError(f"Unsupported file format: {suffix}")

    def load(self) -> Dict[str, str]:
        """
        Load the command set.

        Returns:
            Ordered mapping of command name to command line

        Raises:
            CommandFileError: If the file is malformed or has duplicate names
        """
        if self.format == "json":
            pairs = self._load_json()
        else:
            pairs = self._load_csv()

        commands = _build_command_set(pairs, source=str(self.file_path))
        logger.info(f"Loaded {len(commands)} commands from {self.format.upper()}")
        return commands

    def _load_json(self) -> List[Tuple[Any, Any]]:
        """Load (name, command) pairs from JSON file."""
        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise CommandFileError(f"Invalid JSON in {self.file_path}: {e}") from e

        if isinstance(data, dict):
            return list(data.items())

        if isinstance(data, list):
            pairs = []
            for idx, item in enumerate(data):
                if not isinstance(item, dict):
                    raise CommandFileError(f"Entry {idx} in {self.file_path} is not an object")
                pairs.append((item.get("name"), item.get("command", item.get("cmd"))))
            return pairs

        raise CommandFileError(f"Expected an object or a list in {self.file_path}")

    def _load_csv(self) -> List[Tuple[Any, Any]]:
        """Load (name, command) pairs from CSV file."""
        with open(self.file_path, "r", encoding="utf-8", newline="") as f:
            reader = csv.DictReader(f)
            fields = reader.fieldnames or []
            if "name" not in fields or "command" not in fields:
                raise CommandFileError(
                    f"CSV file {self.file_path} needs 'name' and 'command' columns, got {fields}"
                )
            return [(row.get("name"), row.get("command")) for row in reader]


def parse_command_specs(specs: Iterable[str]) -> Dict[str, str]:
    """
    Parse NAME=COMMAND strings (as given on the command line).

    Args:
        specs: Strings of the form "name=command line"

    Returns:
        Ordered mapping of command name to command line

    Raises:
        CommandFileError: If a spec has no '=' or a name repeats
    """
    pairs = []
    for spec in specs:
        name, sep, command = spec.partition("=")
        if not sep:
            raise CommandFileError(f"Expected NAME=COMMAND, got: {spec!r}")
        pairs.append((name, command))
    return _build_command_set(pairs, source="command line")


def _build_command_set(pairs: Iterable[Tuple[Any, Any]], source: str) -> Dict[str, str]:
    commands: Dict[str, str] = {}
    for name, command in pairs:
        name = str(name).strip() if name is not None else ""
        command = str(command).strip() if command is not None else ""

        if not name or not command:
            logger.warning(f"Skipping incomplete entry in {source}: name={name!r} command={command!r}")
            continue

        if name in commands:
            raise CommandFileError(f"Duplicate command name {name!r} in {source}")

        commands[name] = command
    return commands


def create_sample_commands(output_path: str, format: str = "json") -> None:
    """
    Create sample command set file for reference.

    Args:
        output_path: Path to save the sample commands
        format: Output format ('json' or 'csv')
    """
    sample_commands = {
        "sleep": "sleep 0.1 && echo",
        "python": "python3 -c 'import sys; sum(range(int(sys.argv[1]) * 10000))'",
        "sort": "seq 100000 | sort -r | head -n",
    }

    output_file = Path(output_path)

    if format == "json":
        with open(output_file, "w", encoding="utf-8") as f:
            json.dump(sample_commands, f, ensure_ascii=False, indent=2)
    elif format == "csv":
        with open(output_file, "w", encoding="utf-8", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=["name", "command"])
            writer.writeheader()
            writer.writerows({"name": k, "command": v} for k, v in sample_commands.items())
    else:
        raise CommandFileError(f"Unsupported sample format: {format}")

    logger.info(f"Sample commands created: {output_path}")
