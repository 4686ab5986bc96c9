"""
Configuration management for Benchmark Apps.
Loads CLI defaults from environment variables and .env file.
"""

import os
from pathlib import Path
from typing import Dict, Any
from dotenv import load_dotenv

# Load .env file from project root, then the working directory
PROJECT_ROOT = Path(__file__).parent.parent
load_dotenv(PROJECT_ROOT / ".env")
load_dotenv()


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Central configuration management."""
    
    # ==========================================================================
    # Benchmark Settings
    # ==========================================================================
    ITERATIONS: int = int(os.getenv("BENCH_ITERATIONS", "5"))
    PRETTY_PRINT: bool = _env_bool("BENCH_PRETTY_PRINT")
    
    # Output directories
    REPORT_DIR: Path = Path(os.getenv("REPORT_DIR", "reports"))
    
    @classmethod
    def get_harness_defaults(cls) -> Dict[str, Any]:
        """Get default harness options for the CLI."""
        return {
            "iterations": cls.ITERATIONS,
            "pretty_print": cls.PRETTY_PRINT,
        }
