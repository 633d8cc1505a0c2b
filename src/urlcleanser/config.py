"""Configuration management with environment variables."""

import os
from dotenv import load_dotenv

# Load .env file
load_dotenv()


def _split_list(raw: str) -> list:
    return [item.strip() for item in raw.split(",") if item.strip()]


# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Parameter names the service and CLI always keep (e.g. "source,ref")
DEFAULT_WHITELIST = frozenset(_split_list(os.getenv("URLCLEANSER_WHITELIST", "")))

# HTTP service
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8000"))
CORS_ALLOW_ORIGINS = _split_list(os.getenv("CORS_ALLOW_ORIGINS", "*"))

# Maximum URLs per /clean/batch request
MAX_BATCH_SIZE = 1000
