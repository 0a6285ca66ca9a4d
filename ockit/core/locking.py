"""
Concurrent access control for the download directory.

Build agents can run several jobs against one working directory. A file lock
per archive keeps two processes from downloading or extracting the same
archive at the same time.

Usage:
    from ockit.core.locking import archive_lock

    with archive_lock(download_dir, "oc.tar.gz", timeout=300):
        # Download and extract
        pass
"""

import logging
from contextlib import contextmanager
from pathlib import Path

from filelock import FileLock, Timeout as LockTimeout

logger = logging.getLogger(__name__)

DEFAULT_LOCK_TIMEOUT = 300


@contextmanager
def archive_lock(
    download_dir: Path, archive_name: str, timeout: int = DEFAULT_LOCK_TIMEOUT
):
    """
    Acquire lock for a specific archive in the download directory.

    Args:
        download_dir: Directory holding the archive
        archive_name: Archive file name (e.g., 'oc.tar.gz')
        timeout: Maximum wait time in seconds (default: 300 for long downloads)

    Yields:
        None

    Raises:
        LockTimeout: If lock can't be acquired within timeout
    """
    safe_name = archive_name.replace("/", "-").replace("\\", "-").replace(":", "-")
    lock_path = Path(download_dir) / f".{safe_name}.lock"
    lock = FileLock(lock_path, timeout=timeout)

    try:
        with lock:
            logger.debug(f"Acquired archive lock: {lock_path}")
            yield
            logger.debug(f"Released archive lock: {lock_path}")
    except LockTimeout as e:
        logger.error(
            f"Could not acquire archive lock for {archive_name} after {timeout}s. "
            "Another process may be downloading this archive."
        )
        raise LockTimeout(
            f"Could not acquire archive lock for {archive_name} after {timeout}s. "
            "Another process may be downloading this archive."
        ) from e
