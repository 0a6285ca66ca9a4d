"""
File system utilities for ockit.

This module provides the platform-aware file operations the installer needs:
- Executable lookup on PATH
- Archive extraction (zip, tar.gz, tar) with traversal checks
- Permission handling for extracted binaries
"""

import os
import sys
import tarfile
import zipfile
from pathlib import Path
from typing import Optional, Union

# Platform detection
IS_WINDOWS = os.name == "nt"

ARCHIVE_ZIP = ".zip"
ARCHIVE_TAR_GZ = ".tar.gz"
ARCHIVE_TGZ = ".tgz"
ARCHIVE_TAR = ".tar"

SUPPORTED_ARCHIVE_TYPES = (ARCHIVE_ZIP, ARCHIVE_TAR_GZ, ARCHIVE_TGZ, ARCHIVE_TAR)


# ============================================================================
# Error Handling
# ============================================================================


class FilesystemError(Exception):
    """Base exception for filesystem operations."""

    pass


class ArchiveExtractionError(FilesystemError):
    """Failed to extract an archive."""

    pass


class UnsupportedArchiveFormat(ArchiveExtractionError):
    """Archive format is not supported."""

    pass


class InsecureArchiveError(ArchiveExtractionError):
    """Archive contains insecure paths (directory traversal attempt)."""

    pass


# ============================================================================
# Path Utilities
# ============================================================================


def is_relative_to(path: Path, parent: Path) -> bool:
    """
    Check if path is relative to (under) parent directory.

    Args:
        path: Path to check
        parent: Parent directory

    Returns:
        True if path is under parent directory
    """
    try:
        path.relative_to(parent)
        return True
    except ValueError:
        return False


def find_executable(
    name: str, search_paths: Optional[list[Path]] = None
) -> Optional[Path]:
    """
    Find an executable in the system PATH or provided search paths.

    Args:
        name: Executable name (e.g., 'oc')
        search_paths: Optional list of directories to search

    Returns:
        Path to executable if found, None otherwise

    Example:
        >>> find_executable('oc')
        PosixPath('/usr/local/bin/oc')
    """
    extensions = [""] if not IS_WINDOWS else ["", ".exe", ".bat", ".cmd"]

    if search_paths is None:
        path_env = os.environ.get("PATH", "")
        search_paths = [Path(p) for p in path_env.split(os.pathsep) if p]

    for directory in search_paths:
        for ext in extensions:
            exe_path = directory / f"{name}{ext}"
            if exe_path.is_file() and os.access(exe_path, os.X_OK):
                return exe_path

    return None


def make_executable(path: Union[str, Path], mode: int = 0o755) -> None:
    """
    Set permission bits on a file so it can be executed.

    Args:
        path: File to update
        mode: Permission mode (default: 0755)
    """
    os.chmod(path, mode)


# ============================================================================
# Archive Extraction
# ============================================================================


def archive_type(archive_name: str) -> str:
    """
    Determine the archive type from a file name.

    The type is the last extension, except that ``.gz`` preceded by ``.tar``
    yields ``.tar.gz``.

    Args:
        archive_name: Archive file name (e.g., 'oc.tar.gz')

    Returns:
        Archive type such as '.zip' or '.tar.gz' ('' if there is no extension)
    """
    stem, ext = os.path.splitext(archive_name)
    if os.path.splitext(stem)[1] == ".tar":
        return ARCHIVE_TAR_GZ if ext == ".gz" else f".tar{ext}"
    return ext


def _validate_archive_path(path: str, destination: Path) -> None:
    """
    Validate that an archive member path is safe to extract.

    Args:
        path: Member path from archive
        destination: Extraction destination

    Raises:
        InsecureArchiveError: If path attempts directory traversal
    """
    member_path = (destination / path).resolve()

    if not is_relative_to(member_path, destination.resolve()):
        raise InsecureArchiveError(
            f"Archive member '{path}' attempts directory traversal. "
            "This is a security risk and extraction has been blocked."
        )


def extract_archive(
    archive_path: Union[str, Path],
    destination: Union[str, Path],
    kind: Optional[str] = None,
) -> None:
    """
    Extract an archive to a destination directory.

    Validates all member paths to prevent directory traversal attacks.

    Supported formats: .zip, .tar.gz / .tgz, .tar

    Args:
        archive_path: Path to the archive file
        destination: Directory to extract to
        kind: Archive type; detected from the file name if None

    Raises:
        UnsupportedArchiveFormat: If archive format is not recognized
        ArchiveExtractionError: If extraction fails
        InsecureArchiveError: If archive contains malicious paths

    Example:
        >>> extract_archive('oc.tar.gz', '/tmp/oc')
    """
    archive_path = Path(archive_path)
    destination = Path(destination)

    if not archive_path.exists():
        raise ArchiveExtractionError(f"Archive not found: {archive_path}")

    destination.mkdir(parents=True, exist_ok=True)

    kind = (kind or archive_type(archive_path.name)).lower()

    try:
        if kind == ARCHIVE_ZIP:
            _extract_zip(archive_path, destination)
        elif kind in (ARCHIVE_TAR_GZ, ARCHIVE_TGZ):
            _extract_tar(archive_path, destination, "r:gz")
        elif kind == ARCHIVE_TAR:
            _extract_tar(archive_path, destination, "r:")
        else:
            raise UnsupportedArchiveFormat(
                f"Unsupported archive format: {kind or archive_path.name}. "
                f"Supported: {', '.join(SUPPORTED_ARCHIVE_TYPES)}"
            )
    except (InsecureArchiveError, UnsupportedArchiveFormat):
        raise
    except Exception as e:
        raise ArchiveExtractionError(f"Failed to extract {archive_path}: {e}") from e


def _extract_zip(archive_path: Path, destination: Path) -> None:
    """Extract a ZIP archive."""
    with zipfile.ZipFile(archive_path, "r") as zf:
        members = zf.namelist()

        for member in members:
            _validate_archive_path(member, destination)

        zf.extractall(destination)


def _extract_tar(archive_path: Path, destination: Path, mode: str) -> None:
    """Extract a tar archive with specified compression."""
    with tarfile.open(archive_path, mode) as tar:
        for member in tar.getmembers():
            _validate_archive_path(member.name, destination)

        # Paths are validated above for interpreters without extraction filters
        if sys.version_info >= (3, 12):
            tar.extractall(destination, filter="data")
        else:
            tar.extractall(destination)
