"""
oc installation flow.

``install_oc`` ties the pieces together: reuse a local oc if requested,
resolve a download URL for the requested version, probe it, fall back to the
latest patch release of the same line, then download and extract the archive.
"""

import logging
import re
from pathlib import Path
from typing import Mapping, Optional
from urllib.parse import urlparse

from requests.exceptions import RequestException

from ockit.core import download
from ockit.core.directory import ensure_download_dir
from ockit.core.exceptions import OcInstallError
from ockit.core.filesystem import find_executable
from ockit.install import fetcher, resolver
from ockit.run import runner

logger = logging.getLogger(__name__)

_OC_VERSION_RE = re.compile(r"v[0-9]+.[0-9]+.[0-9]+")


def is_web_url(value: Optional[str]) -> bool:
    """Return True if value is an absolute http(s) URL."""
    if not value:
        return False
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def install_oc(
    download_version: Optional[str],
    os_type: str,
    use_local_oc: bool = False,
    proxy: Optional[str] = None,
    timeout: int = download.DEFAULT_TIMEOUT,
    env: Optional[Mapping[str, str]] = None,
    oc_utils: Optional[Mapping[str, str]] = None,
) -> Path:
    """
    Download the specified version of the oc CLI and return the path to the executable.

    Args:
        download_version: The version of oc to install, or a direct archive URL.
            Empty means the latest stable release.
        os_type: The OS type. One of 'Linux', 'Darwin' or 'Windows_NT'
        use_local_oc: Prefer an oc already installed on this machine
        proxy: Proxy to use to download oc
        timeout: Request timeout in seconds
        env: Environment snapshot used to locate the working directory
        oc_utils: Base URL and latest-patch table (embedded table if None)

    Returns:
        The full path to the installed executable

    Raises:
        OcInstallError: If no URL can be determined or the binary cannot be
            downloaded or extracted
        DownloadError: If the download fails
    """
    if use_local_oc:
        local_oc_path = get_local_oc_path(download_version)
        if local_oc_path:
            logger.info(f"Using local oc at {local_oc_path}")
            return local_oc_path

    if not download_version:
        download_version = resolver.latest_stable(os_type, oc_utils)
        if download_version is None:
            raise OcInstallError("Unable to determine latest oc download URL")

    logger.debug("creating download directory")
    download_dir = ensure_download_dir(env)

    if is_web_url(download_version):
        url = download_version
    else:
        url = resolver.bundle_url(download_version, os_type, False, oc_utils)
        # take the latest patch of the same line if the exact release is not on the mirror
        if url is None or not _url_available(url, proxy, timeout):
            url = resolver.bundle_url(download_version, os_type, True, oc_utils)

    if url is None:
        raise OcInstallError("Unable to determine oc download URL.")

    logger.debug(f"downloading: {url}")
    oc_binary = fetcher.download_and_extract(
        url, download_dir, os_type, proxy, timeout=timeout
    )
    if oc_binary is None:
        raise OcInstallError("Unable to download or extract oc binary.")

    logger.info(f"oc installed at {oc_binary}")
    return oc_binary


def _url_available(url: str, proxy: Optional[str], timeout: int) -> bool:
    try:
        return download.probe_url(url, proxy=proxy, timeout=timeout)
    except RequestException as e:
        logger.warning(f"Unable to reach {url}: {e}")
        return False


def get_local_oc_path(version: Optional[str] = None) -> Optional[Path]:
    """
    Retrieve the path of the oc CLI installed on the machine.

    Args:
        version: The version of oc to be used. If not specified any oc
            version, if found, will be used.

    Returns:
        The full path to the executable, or None if oc (in the requested
        version) is not found
    """
    oc_path = find_executable("oc")
    if oc_path is None:
        logger.debug("oc has not been found on this machine")
        return None

    logger.debug(f"found oc at {oc_path}")

    if version:
        local_version = get_oc_version(oc_path)
        logger.debug(f"local oc version {local_version}, requested {version}")
        if not local_version or local_version.lower() != version.lower():
            return None

    return oc_path


def get_oc_version(oc_path: Path) -> Optional[str]:
    """
    Determine the version of an oc binary.

    Args:
        oc_path: Path to the oc binary

    Returns:
        Version string such as 'v4.11.0', or None if it cannot be determined
    """
    result = runner.exec_oc_sync(oc_path, "version --short=true --client=true")

    if not result or result.stderr:
        logger.debug(f"error {result.stderr if result else ''}")
        # oc < 4.1 does not know --short
        result = runner.exec_oc_sync(oc_path, "version")

    if not result or not result.stdout:
        logger.debug("stdout empty")
        return None

    logger.debug(f"stdout {result.stdout}")
    match = _OC_VERSION_RE.search(result.stdout)
    return match.group(0) if match else None
