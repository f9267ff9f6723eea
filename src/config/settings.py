"""
Configuration settings for the Employee Records Backend
"""

import os
import logging

# Environment configuration
ENV = os.getenv("ENV", "DEV")  # DEV or PROD
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Configure logging
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

DATABASE_URL = os.getenv("DATABASE_URL")
PORT = int(os.getenv("PORT", 8080))

# Connection pool sizing
DB_POOL_MIN_SIZE = int(os.getenv("DB_POOL_MIN_SIZE", 2))
DB_POOL_MAX_SIZE = int(os.getenv("DB_POOL_MAX_SIZE", 10))
DB_COMMAND_TIMEOUT = int(os.getenv("DB_COMMAND_TIMEOUT", 60))


def _env_flag(name: str, default: bool) -> bool:
    """Read a boolean flag from the environment"""
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


# Seed data is loaded on first run outside production unless overridden
SEED_DATABASE = _env_flag("SEED_DATABASE", ENV != "PROD")

logger.info(f"Environment: {ENV}")
if not DATABASE_URL:
    logger.warning("DATABASE_URL not set - database initialization will fail")

# CORS settings
ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.getenv("ALLOWED_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]
