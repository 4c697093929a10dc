"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts without any configuration at all.  There is no config
file and nothing is persisted between runs.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Risk Registry API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # ``json`` emits one JSON object per log record; ``text`` emits
    # human-readable lines for local development.
    log_format: str = os.getenv("LOG_FORMAT", "json")

    # Listening address.  ``APP_PORT`` is the only override most
    # deployments need.
    host: str = os.getenv("APP_HOST", "0.0.0.0")
    port: int = int(os.getenv("APP_PORT", "8080"))

    # Seconds in-flight requests are given to finish once the process
    # has been asked to stop.
    shutdown_grace_seconds: int = int(os.getenv("SHUTDOWN_GRACE_SECONDS", "5"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables should
# be set before importing this module.
settings = Settings()
