"""
oc version resolution.

This module turns a requested oc version and an OS identifier into a download
URL on the OpenShift mirror. Base URLs and the latest patch release of each
``major.minor`` line come from the bundled ``oc-utils.json``.

Resolution failures are reported by returning None; callers decide whether
that is fatal.
"""

import functools
import json
import logging
import re
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional

from ockit.core.exceptions import OcUtilsError
from ockit.core.platform import DARWIN, LINUX, WINDOWS

logger = logging.getLogger(__name__)

# Bundle path segments on the mirror
LINUX_DIR = "linux"
MACOSX_DIR = "macosx"
WIN_DIR = "windows"
OC_TAR_GZ = "oc.tar.gz"
OC_ZIP = "oc.zip"
LATEST = "latest"

V3_BASE_URL_KEY = "openshiftV3BaseUrl"
V4_BASE_URL_KEY = "openshiftV4BaseUrl"

_BUNDLES = {
    LINUX: f"{LINUX_DIR}/{OC_TAR_GZ}",
    DARWIN: f"{MACOSX_DIR}/{OC_TAR_GZ}",
    WINDOWS: f"{WIN_DIR}/{OC_ZIP}",
}

_MAJOR_RE = re.compile(r"\d+(?=\.)")
_RELEASE_RE = re.compile(r"\d+\.\d+")


# ============================================================================
# oc-utils.json
# ============================================================================


def _get_default_oc_utils_path() -> Path:
    """Get path to the embedded oc-utils.json."""
    return Path(__file__).parent.parent / "data" / "oc-utils.json"


def load_oc_utils(path: Optional[Path] = None) -> Mapping[str, str]:
    """
    Load base URLs and the latest-patch table.

    Args:
        path: Optional path to a JSON file; uses the embedded oc-utils.json if None

    Returns:
        Read-only mapping of the file contents

    Raises:
        OcUtilsError: If the file cannot be read or is not a JSON object
    """
    path = Path(path) if path else _get_default_oc_utils_path()

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise OcUtilsError(f"oc utils file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise OcUtilsError(f"Invalid JSON in oc utils file: {e}\nFile: {path}") from e

    if not isinstance(data, dict):
        raise OcUtilsError(f"Invalid oc utils structure: expected an object\nFile: {path}")

    for key in (V3_BASE_URL_KEY, V4_BASE_URL_KEY):
        if key not in data:
            raise OcUtilsError(f"Invalid oc utils structure: missing '{key}'\nFile: {path}")

    return MappingProxyType({str(k): str(v) for k, v in data.items()})


@functools.lru_cache(maxsize=1)
def default_oc_utils() -> Mapping[str, str]:
    """Return the embedded oc-utils table, loaded once per process."""
    return load_oc_utils()


# ============================================================================
# Resolution
# ============================================================================


def bundle_for_os(os_type: str) -> Optional[str]:
    """
    Get the bundle path for an OS identifier.

    Args:
        os_type: One of 'Linux', 'Darwin' or 'Windows_NT'

    Returns:
        Relative bundle path (e.g., 'linux/oc.tar.gz'), or None for unknown OS

    Example:
        >>> bundle_for_os("Darwin")
        'macosx/oc.tar.gz'
    """
    return _BUNDLES.get(os_type)


def latest_stable(
    os_type: str, oc_utils: Optional[Mapping[str, str]] = None
) -> Optional[str]:
    """
    Determine the URL of the latest stable oc release on the mirror.

    Args:
        os_type: OS identifier
        oc_utils: Base URL table (embedded table if None)

    Returns:
        URL of the latest oc archive, or None if the OS is not supported
    """
    logger.debug("determining latest oc version")

    bundle = bundle_for_os(os_type)
    if not bundle:
        logger.debug("Unable to find bundle url")
        return None

    oc_utils = oc_utils if oc_utils is not None else default_oc_utils()
    url = f"{oc_utils[V4_BASE_URL_KEY]}/{LATEST}/{bundle}"

    logger.debug(f"latest stable oc version: {url}")
    return url


def bundle_url(
    version: Optional[str],
    os_type: str,
    latest: bool = False,
    oc_utils: Optional[Mapping[str, str]] = None,
) -> Optional[str]:
    """
    Get the download URL for a given oc version (e.g., v3.11.0).

    Args:
        version: oc version, optionally prefixed with 'v'
        os_type: OS identifier selecting the archive variant
        latest: Resolve to the latest known patch release of the
            version's major.minor line
        oc_utils: Base URL and latest-patch table (embedded table if None)

    Returns:
        URL of the archive, or None if no URL can be determined

    Example:
        >>> bundle_url("v3.11.0", "Linux")
        'https://mirror.openshift.com/pub/openshift-v3/clients/3.11.0/linux/oc.tar.gz'
    """
    logger.debug(f"determining tarball URL for version {version}")

    if not version:
        return None

    if version.startswith("v"):
        version = version[1:]

    major_match = _MAJOR_RE.search(version)
    if not major_match:
        logger.debug("Error retrieving version major")
        return None
    major = int(major_match.group(0))

    oc_utils = oc_utils if oc_utils is not None else default_oc_utils()

    if latest:
        release_match = _RELEASE_RE.search(version)
        if not release_match:
            logger.debug(
                "Error retrieving version release - unable to find latest version"
            )
            return None
        release = release_match.group(0)
        patch = oc_utils.get(f"oc{release}")
        if not patch:
            logger.debug(f"Error retrieving latest patch for oc version {release}")
            return None
        version = patch

    if major == 3:
        url = f"{oc_utils[V3_BASE_URL_KEY]}/{version}/"
    elif major == 4:
        url = f"{oc_utils[V4_BASE_URL_KEY]}/{version}/"
    else:
        logger.debug("Invalid version")
        return None

    bundle = bundle_for_os(os_type)
    if not bundle:
        logger.debug("Unable to find bundle url")
        return None

    url += bundle

    logger.debug(f"archive URL: {url}")
    return url
