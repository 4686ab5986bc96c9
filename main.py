#!/usr/bin/env python3
"""
Benchmark Apps - CLI Entry Point

Usage:
    python main.py run -c fast='sleep 0.1 && echo' -c slow='sleep 0.3 && echo' -n 5 --pretty
    python main.py run -f commands.json -n 10 --arg-scale 1000 --format both
    python main.py time "sleep 0.5"
"""

import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from benchmark_apps.cli import cli


if __name__ == "__main__":
    cli()
