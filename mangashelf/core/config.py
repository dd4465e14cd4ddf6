import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parents[2]
LIBRARY_DIR = Path(os.environ.get("MANGASHELF_LIBRARY_DIR", BASE_DIR / "local"))

HOST = os.environ.get("MANGASHELF_HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", 3000))

BASIC_AUTH_USERNAME = os.environ.get("BASIC_AUTH_USERNAME") or None
BASIC_AUTH_PASSWORD = os.environ.get("BASIC_AUTH_PASSWORD") or None

LOG_LEVEL = os.environ.get("MANGASHELF_LOG_LEVEL", "INFO")
