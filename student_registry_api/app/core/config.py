"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API starts without any configuration at all.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Student Registry API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    debug: bool = field(default_factory=lambda: _env_bool("DEBUG", "false"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)

    # When the application builds its own store it loads the fixed seed
    # dataset (three students, three courses) unless this is disabled.
    seed_on_startup: bool = field(default_factory=lambda: _env_bool("SEED_ON_STARTUP", "true"))

    # Maximum number of students enrolled in a single course.
    course_capacity: int = field(default_factory=lambda: int(os.getenv("COURSE_CAPACITY", "3")))

    # Bind address used by ``run.py``.
    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8000")))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module; tests construct their
# own ``Settings()`` after patching the environment.
settings = Settings()
