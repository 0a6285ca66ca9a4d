"""
Network access for ockit.

This module provides the two HTTP operations the installer performs:
- A HEAD probe to check whether a candidate download URL exists
- A streaming download of a release archive, optionally through a proxy

Downloads are written to a ``.part`` file first and renamed into place once
complete, so an interrupted transfer never leaves a file under the final
archive name.
"""

import logging
from pathlib import Path
from typing import Dict, Optional

import requests
from requests.exceptions import RequestException

from ockit.core.exceptions import DownloadError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30
CHUNK_SIZE = 8192


def proxy_settings(proxy: Optional[str]) -> Optional[Dict[str, str]]:
    """
    Build a requests ``proxies`` mapping from a proxy string.

    Args:
        proxy: Proxy address such as 'host:port' or 'http://host:port'

    Returns:
        Mapping applying the proxy to http and https, or None if no proxy
    """
    if not proxy:
        return None
    return {"http": proxy, "https": proxy}


def probe_url(
    url: str, proxy: Optional[str] = None, timeout: int = DEFAULT_TIMEOUT
) -> bool:
    """
    Check whether a URL answers a HEAD request with a success status.

    Args:
        url: URL to probe
        proxy: Optional proxy address
        timeout: Request timeout in seconds

    Returns:
        True if the response status is OK (2xx after redirects)

    Raises:
        RequestException: If the request itself fails (DNS, connection, ...)
    """
    logger.debug(f"Probing {url}")
    response = requests.head(
        url, proxies=proxy_settings(proxy), timeout=timeout, allow_redirects=True
    )
    logger.debug(f"Probe of {url} returned HTTP {response.status_code}")
    return response.ok


def download_file(
    url: str,
    destination: Path,
    proxy: Optional[str] = None,
    timeout: int = DEFAULT_TIMEOUT,
) -> Path:
    """
    Download file from URL to destination.

    Args:
        url: URL to download from
        destination: Local path to save file
        proxy: Optional proxy address
        timeout: Request timeout in seconds

    Returns:
        Path to downloaded file

    Raises:
        DownloadError: If the request fails or returns an error status
        ValueError: If URL or destination is empty

    Example:
        >>> download_file(
        ...     "https://mirror.openshift.com/pub/openshift-v4/clients/oc/latest/linux/oc.tar.gz",
        ...     Path(".download/oc.tar.gz"),
        ... )
    """
    if not url:
        raise ValueError("URL cannot be empty")

    if not destination:
        raise ValueError("Destination path cannot be empty")

    destination = Path(destination)
    partial = destination.with_name(destination.name + ".part")

    logger.info(f"Downloading from {url}")
    if proxy:
        logger.debug(f"Using proxy {proxy}")

    try:
        response = requests.get(
            url,
            proxies=proxy_settings(proxy),
            stream=True,
            timeout=timeout,
            allow_redirects=True,
        )
        response.raise_for_status()

        with open(partial, "wb") as f:
            for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                if chunk:
                    f.write(chunk)
    except RequestException as e:
        partial.unlink(missing_ok=True)
        raise DownloadError(f"Failed to download {url}: {e}") from e
    except OSError:
        partial.unlink(missing_ok=True)
        raise

    partial.replace(destination)
    logger.info(f"Download complete: {destination}")
    return destination
