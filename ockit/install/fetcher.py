"""
Download and extraction of oc release archives.

The archive is cached in the download directory by file name: if a file with
the archive's name is already present it is reused instead of downloaded.
"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

from ockit.core import download
from ockit.core.exceptions import DownloadDirectoryError
from ockit.core.filesystem import archive_type, extract_archive, make_executable
from ockit.core.locking import archive_lock
from ockit.core.platform import is_windows, oc_binary_name

logger = logging.getLogger(__name__)


def archive_name_from_url(url: str) -> str:
    """Return the last path segment of a download URL."""
    return url.split("/")[-1]


def download_and_extract(
    url: Optional[str],
    download_dir: Union[str, Path],
    os_type: str,
    proxy: Optional[str] = None,
    timeout: int = download.DEFAULT_TIMEOUT,
) -> Optional[Path]:
    """
    Download and extract the oc release archive.

    It is the responsibility of the caller to ensure that the directory exists.

    Args:
        url: The oc release download URL
        download_dir: The directory into which to extract the archive
        os_type: One of 'Linux', 'Darwin' or 'Windows_NT'
        proxy: Proxy to use to download oc
        timeout: Request timeout in seconds

    Returns:
        Path to the oc executable, or None if the URL is empty or the
        executable is missing after extraction

    Raises:
        DownloadDirectoryError: If download_dir does not exist
        DownloadError: If the download fails
        ArchiveExtractionError: If the archive cannot be extracted
    """
    if not url:
        return None

    download_dir = os.path.normpath(str(download_dir))

    if not os.path.exists(download_dir):
        raise DownloadDirectoryError(download_dir)

    archive = archive_name_from_url(url)
    archive_path = Path(download_dir) / archive

    with archive_lock(Path(download_dir), archive):
        if not archive_path.exists():
            download.download_file(url, archive_path, proxy=proxy, timeout=timeout)
        else:
            logger.info(f"Using cached archive {archive_path}")

        logger.debug(f"expanding {archive_path} into {download_dir}")
        extract_archive(archive_path, download_dir, kind=archive_type(archive))

    oc_binary = Path(download_dir) / oc_binary_name(os_type)
    if not oc_binary.exists():
        logger.debug(f"oc binary not found at {oc_binary}")
        return None

    if not is_windows(os_type):
        make_executable(oc_binary, 0o755)

    return oc_binary
