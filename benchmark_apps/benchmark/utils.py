"""
Utility functions for benchmark module.
Separated to avoid circular imports.
"""

import socket
import platform
import sys
from datetime import datetime
from typing import Callable, Dict

from ..errors import ConfigurationError


def identity_arg(iteration: int) -> str:
    """Default argument generator: the iteration number itself."""
    return str(iteration)


def make_arg_generator(template: str = "{iteration}", scale: int = 1) -> Callable[[int], str]:
    """
    Build an argument generator from a format template.

    Args:
        template: str.format template; ``{iteration}`` is replaced by the
            (scaled) iteration number
        scale: Multiplier applied to the iteration number

    Returns:
        Function mapping an iteration index to the argument string

    Raises:
        ConfigurationError: If the template has fields other than {iteration}

    Example:
        >>> gen = make_arg_generator(scale=1000)
        >>> gen(3)
        '3000'
    """
    try:
        template.format(iteration=scale)
    except (KeyError, IndexError, ValueError, AttributeError) as e:
        raise ConfigurationError(f"Invalid argument template {template!r}: {e!r}") from e

    def generate(iteration: int) -> str:
        return template.format(iteration=iteration * scale)

    return generate


def ordinal(number: int) -> str:
    """
    Format a number as an English ordinal (1st, 2nd, 3rd, 4th, 11th, 21st...).

    Args:
        number: Number to format

    Returns:
        Number followed by its ordinal suffix
    """
    if 10 <= abs(number) % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(abs(number) % 10, "th")
    return f"{number}{suffix}"


def get_machine_info() -> Dict[str, str]:
    """
    Get machine information for report context.

    Returns:
        Dictionary with machine details including:
        - hostname: Machine hostname
        - platform: OS platform info
        - python: Interpreter version
        - machine: Hardware architecture
    """
    return {
        "hostname": socket.gethostname(),
        "platform": f"{platform.system()} {platform.release()}",
        "python": sys.version.split()[0],
        "machine": platform.machine() or "unknown",
    }


def get_report_subdir_name() -> str:
    """
    Generate report subdirectory name based on date and hostname.

    Format: YYYYMMDD_hostname
    Example: 20251224_build-box-01

    Returns:
        Subdirectory name string
    """
    date_str = datetime.now().strftime("%Y%m%d")
    hostname = get_machine_info()["hostname"].replace("_", "-").replace("/", "-") or "localhost"

    return f"{date_str}_{hostname}"
