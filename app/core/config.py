# /app/core/config.py

import os
from dotenv import load_dotenv

# Load a local .env file (if present) before any setting is read.
load_dotenv()

# --- Storage Backend Selection ---
# One of "json" (local files), "sql" (SQLAlchemy table) or "memory".
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "json").lower()

# Directory used by the JSON file store.
DATA_DIR = os.getenv("DATA_DIR", "app/data")

# Connection string used by the SQL store.
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./school.db")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
