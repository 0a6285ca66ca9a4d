"""
Centralized exception hierarchy for ockit.

This module defines the custom exceptions used across the codebase so that
callers (mainly the CLI) can handle them uniformly.
"""


# ============================================================================
# Base Exceptions
# ============================================================================


class OcKitError(Exception):
    """Base exception for all ockit errors."""

    pass


class ConfigError(OcKitError):
    """Configuration parsing or validation error."""

    pass


# ============================================================================
# Install-related Exceptions
# ============================================================================


class InstallError(OcKitError):
    """Base exception for oc installation errors."""

    pass


class OcInstallError(InstallError):
    """Raised when the oc CLI cannot be resolved, downloaded or extracted."""

    pass


class DownloadDirectoryError(InstallError):
    """Raised when the download directory is missing."""

    def __init__(self, directory: str):
        self.directory = directory
        super().__init__(f"{directory} does not exist.")


class DownloadError(InstallError):
    """Raised when an archive download fails."""

    pass


class OcUtilsError(InstallError):
    """Raised when the bundled oc-utils.json cannot be loaded."""

    pass


# ============================================================================
# Execution Exceptions
# ============================================================================


class ExecutionError(OcKitError):
    """Base exception for command execution errors."""

    pass


class OcExecutionError(ExecutionError):
    """Raised when an oc invocation exits with a non-zero status."""

    def __init__(self, command: str, exit_code: int):
        self.command = command
        self.exit_code = exit_code
        super().__init__(f"{command} failed with exit code {exit_code}")
