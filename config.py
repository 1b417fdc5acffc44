# config.py
import os
import dotenv
from pathlib import Path

# ========== Load environment ==========
dotenv.load_dotenv()

HOST = os.getenv("LIBRARY_HOST", "0.0.0.0")
PORT = int(os.getenv("LIBRARY_PORT", "6969") or "6969")
DEBUG = os.getenv("FLASK_DEBUG", "").strip().lower() in {"1", "true", "yes", "on"}
LOG_LEVEL = (os.getenv("LOG_LEVEL", "INFO") or "INFO").upper()

# Whole collection lives in this one document
DATA_FILE = Path(os.getenv("LIBRARY_DATA_FILE", "data.json")).resolve()
