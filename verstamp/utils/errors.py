"""Custom exceptions and exit codes for VERSTAMP.

Every failure the stamper can hit maps to one exception class, and every
exception class carries the process exit code the CLI should use for it.
"""

from enum import IntEnum
from pathlib import Path


class ExitCode(IntEnum):
    """Process exit codes."""

    SUCCESS = 0
    GENERAL_ERROR = 1
    CONFIG_READ_ERROR = 2
    MISSING_FIELD = 3
    WRITE_ERROR = 4


class VerstampError(Exception):
    """Base exception for all VERSTAMP errors.

    Subclasses set ``_default_exit_code``; callers may still override it
    per instance via the ``exit_code`` keyword.
    """

    _default_exit_code = ExitCode.GENERAL_ERROR

    def __init__(self, message: str, exit_code: ExitCode | None = None) -> None:
        super().__init__(message)
        self.exit_code = exit_code if exit_code is not None else self._default_exit_code


class ConfigReadError(VerstampError):
    """Raised when the manifest or a config file is missing or malformed.

    Attributes:
        path: The file that could not be read, if known
    """

    _default_exit_code = ExitCode.CONFIG_READ_ERROR

    def __init__(
        self,
        message: str,
        path: Path | None = None,
        exit_code: ExitCode | None = None,
    ) -> None:
        self.path = path
        super().__init__(message, exit_code=exit_code)


class MissingFieldError(VerstampError):
    """Raised when the manifest parses but declares no version.

    Attributes:
        field: Name of the missing field
        path: The manifest that was read, if known
    """

    _default_exit_code = ExitCode.MISSING_FIELD

    def __init__(
        self,
        field: str,
        path: Path | None = None,
        message: str | None = None,
        exit_code: ExitCode | None = None,
    ) -> None:
        self.field = field
        self.path = path
        if message is None:
            where = f" in {path}" if path is not None else ""
            message = f"No '{field}' field found{where}"
        super().__init__(message, exit_code=exit_code)


class WriteError(VerstampError):
    """Raised when the generated artifact cannot be written."""

    _default_exit_code = ExitCode.WRITE_ERROR

    def __init__(
        self,
        message: str,
        path: Path | None = None,
        exit_code: ExitCode | None = None,
    ) -> None:
        self.path = path
        super().__init__(message, exit_code=exit_code)
