"""Publishing the installed oc directory on PATH."""

import logging
import os
from pathlib import Path
from typing import MutableMapping, Optional, Union

from ockit.core.platform import is_windows, path_separator

logger = logging.getLogger(__name__)


def add_oc_to_path(
    oc_path: Optional[Union[str, Path]],
    os_type: str,
    env: Optional[MutableMapping[str, str]] = None,
) -> str:
    """
    Add the directory of the oc binary to the PATH environment variable.

    Args:
        oc_path: The full path to the oc binary. Must be non-empty.
        os_type: One of 'Linux', 'Darwin' or 'Windows_NT'
        env: Environment to update (defaults to ``os.environ``)

    Returns:
        The directory that was prepended

    Raises:
        ValueError: If oc_path is None or empty
    """
    if oc_path is None or str(oc_path) == "":
        raise ValueError("path cannot be null or empty")

    if env is None:
        env = os.environ

    oc_path = str(oc_path)
    separator = "\\" if is_windows(os_type) else "/"
    directory = oc_path[: oc_path.rfind(separator)] if separator in oc_path else ""

    current = env.get("PATH", "")
    env["PATH"] = (
        f"{directory}{path_separator(os_type)}{current}" if current else directory
    )

    logger.debug(f"Prepended {directory} to PATH")
    return directory
