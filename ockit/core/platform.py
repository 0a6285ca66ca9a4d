"""
Platform detection for ockit.

oc bundles are selected by an OS identifier in the form Node.js reports it
(``Linux``, ``Darwin``, ``Windows_NT``). This module maps the current Python
platform onto those identifiers and carries the per-OS constants.
"""

import functools
import platform

LINUX = "Linux"
DARWIN = "Darwin"
WINDOWS = "Windows_NT"

SUPPORTED_OS_TYPES = (LINUX, DARWIN, WINDOWS)


@functools.lru_cache(maxsize=1)
def detect_os_type() -> str:
    """
    Detect the OS identifier of the current machine.

    This function is cached - it only runs detection once per process.

    Returns:
        ``Linux``, ``Darwin``, ``Windows_NT`` or the raw ``platform.system()``
        value for anything else
    """
    system = platform.system()
    if system == "Windows":
        return WINDOWS
    return system


def is_windows(os_type: str) -> bool:
    """Return True if the OS identifier denotes Windows."""
    return os_type == WINDOWS


def path_separator(os_type: str) -> str:
    """Return the PATH list separator for the OS identifier."""
    return ";" if is_windows(os_type) else ":"


def oc_binary_name(os_type: str) -> str:
    """Return the oc executable file name for the OS identifier."""
    return "oc.exe" if is_windows(os_type) else "oc"


def clear_platform_cache():
    """Clear the cached OS detection (used by tests)."""
    detect_os_type.cache_clear()
