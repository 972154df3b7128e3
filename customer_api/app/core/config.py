"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any environment set up.  The listening address
only matters to the entrypoint in ``run.py``; the application itself
only needs the snapshot path, the body size limit and the log
settings.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Customer API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # JSON array of customers used to seed the store at startup.  A
    # relative path is resolved against the current working directory,
    # matching how the service is normally launched from the project
    # root.  The file is read once and never written.
    data_file: str = os.getenv("CUSTOMERS_FILE", "./data/customers.json")

    # Upper bound for POST/PUT request bodies.
    max_body_bytes: int = 16 * 1024

    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = int(os.getenv("PORT", "3000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class creation time, environment variables should
# be set before importing this module.
settings = Settings()
