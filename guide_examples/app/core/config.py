"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from environment
variables.  Defaults are provided for all fields so the examples run
without any setup; override them via environment variables when serving
the application elsewhere.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Guide Examples")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When empty only the console handler
    # is attached.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Bind address used by ``run.py`` when serving the application.
    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = int(os.getenv("PORT", "8000"))

    # Body of ``GET /`` and the template used by ``GET /greet/{name}``.
    # The template must contain a ``{name}`` placeholder.
    welcome_message: str = os.getenv("WELCOME_MESSAGE", "ASP.NET Core is running!")
    greeting_template: str = os.getenv(
        "GREETING_TEMPLATE", "Hello, {name}! Welcome to ASP.NET Core."
    )

    # Base URL the bundled HTTP client talks to by default.
    api_base_url: str = os.getenv("API_BASE_URL", "http://127.0.0.1:8000")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables should
# be set before importing this module.
settings = Settings()
