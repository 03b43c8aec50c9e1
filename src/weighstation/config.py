"""Configuration settings for weighstation."""

import os


class Config:
    """Application configuration."""

    APP_NAME = "Caravan Freight Control"
    VERSION = "0.1.0"

    # Logging
    LOG_LEVEL = os.environ.get("WEIGHSTATION_LOG_LEVEL", "WARNING")
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Display
    CURRENCY = "UZS"

    # The log lives for one session only; the default engine is in-memory SQLite.
    DATABASE_URL = "sqlite://"
