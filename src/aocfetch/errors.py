"""Error types and the process exit codes they map to."""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit codes reported by the CLI."""

    OK = 0
    COOKIE_NOT_SET = 1
    DESTINATION_EXISTS = 2
    FETCH_FAILED = 3
    WRITE_FAILED = 4
    CONFIG_INVALID = 5
    NO_WORKING_DIRECTORY = 255


class AocFetchError(RuntimeError):
    """Base class for failures that terminate a run with a fixed exit code."""

    exit_code: ExitCode = ExitCode.FETCH_FAILED


class CredentialNotSetError(AocFetchError):
    """Raised when the session cookie cannot be loaded."""

    exit_code = ExitCode.COOKIE_NOT_SET


class DestinationExistsError(AocFetchError):
    """Raised when the output file is already present."""

    exit_code = ExitCode.DESTINATION_EXISTS


class FetchError(AocFetchError):
    """Raised on transport failures or non-success responses."""

    exit_code = ExitCode.FETCH_FAILED


class OutputWriteError(AocFetchError):
    """Raised when the downloaded input cannot be written."""

    exit_code = ExitCode.WRITE_FAILED


class WorkingDirectoryError(AocFetchError):
    exit_code = ExitCode.NO_WORKING_DIRECTORY


class ConfigError(AocFetchError):
    """Raised when configuration files cannot be loaded or validated."""

    exit_code = ExitCode.CONFIG_INVALID


class InvalidArgumentError(ValueError):
    """Raised when a day or year argument is out of range or not a number."""


__all__ = [
    "AocFetchError",
    "ConfigError",
    "CredentialNotSetError",
    "DestinationExistsError",
    "ExitCode",
    "FetchError",
    "InvalidArgumentError",
    "OutputWriteError",
    "WorkingDirectoryError",
]
