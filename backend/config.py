# config.py
import os

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./social_media.db")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE") or None

PORT = int(os.getenv("PORT", "5000"))
DEBUG = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
