"""
Directory layout for ockit.

Release archives are downloaded into ``.download`` under the pipeline working
directory (``SYSTEM_DEFAULTWORKINGDIRECTORY``), falling back to the current
directory when the variable is not set.
"""

import logging
import os
from pathlib import Path
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

WORKING_DIRECTORY_VARIABLE = "SYSTEM_DEFAULTWORKINGDIRECTORY"
DOWNLOAD_DIR_NAME = ".download"


def get_download_dir(env: Optional[Mapping[str, str]] = None) -> Path:
    """
    Get the download directory for oc archives.

    Args:
        env: Environment snapshot (defaults to ``os.environ``)

    Returns:
        Path to the download directory (not created)
    """
    if env is None:
        env = os.environ

    root = env.get(WORKING_DIRECTORY_VARIABLE) or os.getcwd()
    return Path(root) / DOWNLOAD_DIR_NAME


def ensure_download_dir(env: Optional[Mapping[str, str]] = None) -> Path:
    """
    Get the download directory, creating it if missing.

    Args:
        env: Environment snapshot (defaults to ``os.environ``)

    Returns:
        Path to the existing download directory
    """
    download_dir = get_download_dir(env)
    if not download_dir.exists():
        logger.debug(f"Creating download directory {download_dir}")
        download_dir.mkdir(parents=True, exist_ok=True)
    return download_dir
