"""Application settings."""

import os
from pathlib import Path

# Database
DB_PATH = os.getenv("VIS_DB_PATH", "visualizations.duckdb")

# Logging
LOG_DIR = Path(os.getenv("VIS_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("VIS_LOG_LEVEL", "INFO")
LOG_FILE = "visualizations_{time:YYYY-MM-DD}.log"
LOG_RETENTION = "7 days"

# Language
DEFAULT_LANG = os.getenv("VIS_DEFAULT_LANG", "en_us")
