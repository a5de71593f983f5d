"""Root conftest — shared test configuration."""

import os

# Module-level app in main.py reads settings at import time
os.environ.setdefault("LOG_LEVEL", "INFO")
os.environ.setdefault("LOG_FORMAT", "json")
