"""Core package - Configuration, logging, exceptions.

This package provides foundational infrastructure for the host layer.

Modules:
    - config: Environment and configuration management
    - logging: Structured JSON logging
    - exceptions: Custom exception hierarchy
"""

from src.core.exceptions import (
    ConfigurationError,
    TimeKeeperError,
    ValidationError,
    WorkbookError,
)

__all__ = [
    "TimeKeeperError",
    "ConfigurationError",
    "ValidationError",
    "WorkbookError",
]
