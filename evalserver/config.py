"""
Runtime configuration for the Teacher Evaluation Server.

All settings come from environment variables so the server can be configured
without touching code. Values are read once at import time.
"""

import os
import sys
import logging

# Determine if we're in test mode
IS_TEST = "EVALSERVER_TEST_MODE" in os.environ or "pytest" in sys.modules

# Database location; tests default to an in-memory database
if "EVALSERVER_DB_PATH" in os.environ:
    DB_PATH = os.environ.get("EVALSERVER_DB_PATH")
elif IS_TEST:
    DB_PATH = ":memory:"
else:
    DB_PATH = "./data/evaluations.db"

PORT = int(os.environ.get("EVALSERVER_PORT", 8000))

LOG_LEVEL = os.environ.get("EVALSERVER_LOG_LEVEL", "INFO").upper()

# Evaluation period used until an administrator saves settings
DEFAULT_SEMESTER = os.environ.get("EVALSERVER_DEFAULT_SEMESTER", "1st Semester")
DEFAULT_SCHOOL_YEAR = os.environ.get("EVALSERVER_DEFAULT_SCHOOL_YEAR", "2024-2025")

# Mirror writes into an in-process cache and read from it when the database fails
ENABLE_FALLBACK = os.environ.get("EVALSERVER_ENABLE_FALLBACK", "true").lower() in ("true", "yes", "1", "y")


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Configure root logging for the server process."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
