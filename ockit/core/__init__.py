"""
Core functionality for ockit.

This package contains the foundational modules that the install and run
components depend on.
"""

from .directory import (
    get_download_dir,
    ensure_download_dir,
)

from .interpolate import interpolate

from .platform import (
    LINUX,
    DARWIN,
    WINDOWS,
    detect_os_type,
    clear_platform_cache,
)

from .exceptions import (
    OcKitError,
    ConfigError,
    InstallError,
    OcInstallError,
    DownloadDirectoryError,
    DownloadError,
    OcUtilsError,
    ExecutionError,
    OcExecutionError,
)

__all__ = [
    "get_download_dir",
    "ensure_download_dir",
    "interpolate",
    "LINUX",
    "DARWIN",
    "WINDOWS",
    "detect_os_type",
    "clear_platform_cache",
    "OcKitError",
    "ConfigError",
    "InstallError",
    "OcInstallError",
    "DownloadDirectoryError",
    "DownloadError",
    "OcUtilsError",
    "ExecutionError",
    "OcExecutionError",
]
