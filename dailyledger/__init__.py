"""Mini README: Core package initializer for the dailyledger expense tracker.

This module exposes convenience imports so the entry point and tests can
reach the logging helpers without knowing the exact module structure. The
file stays lightweight so importing the package never starts the console.
"""

from .logging_utils import configure_root_logger, get_logger

__all__ = ["configure_root_logger", "get_logger"]
