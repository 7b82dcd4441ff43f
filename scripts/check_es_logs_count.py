#!/usr/bin/env python3
"""Launcher for the log count check.

Convenience wrapper so a monitoring host can point straight at:
    ./scripts/check_es_logs_count.py -T 100 -q 'level:ERROR'
without installing the package. Adds project root to sys.path and loads
environment variables early (ES_LOGS_COUNT_CONFIG etc. may live in .env).
"""

import sys
from pathlib import Path
from dotenv import load_dotenv

# Ensure project root is on sys.path so standard package imports work
script_dir = Path(__file__).resolve().parent
project_root = script_dir.parent
sys.path.insert(0, str(project_root))

# Must run before the config loader is imported; it reads the environment once
load_dotenv(dotenv_path=project_root / ".env")

from checker.cli import main  # noqa: E402


if __name__ == "__main__":
    sys.exit(main())
