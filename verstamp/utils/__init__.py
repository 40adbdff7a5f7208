"""Utility modules for VERSTAMP.

This package contains:
- console: Rich-based terminal output utilities
- errors: Custom exceptions and exit codes
- logging: Logging configuration
"""

from verstamp.utils.console import (
    console,
    err_console,
    print_error,
    print_info,
    print_step,
    print_success,
    print_warning,
    show_version,
)
from verstamp.utils.errors import (
    ConfigReadError,
    ExitCode,
    MissingFieldError,
    VerstampError,
    WriteError,
)
from verstamp.utils.logging import get_logger, log_message, setup_logging

__all__ = [
    # Console
    "console",
    "err_console",
    "print_error",
    "print_info",
    "print_step",
    "print_success",
    "print_warning",
    "show_version",
    # Errors
    "ExitCode",
    "VerstampError",
    "ConfigReadError",
    "MissingFieldError",
    "WriteError",
    # Logging
    "setup_logging",
    "get_logger",
    "log_message",
]
