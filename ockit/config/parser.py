"""YAML configuration parser for ockit.

This module provides parsing and validation for ockit.yaml configuration files.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ockit.core.download import DEFAULT_TIMEOUT
from ockit.core.exceptions import ConfigError
from ockit.core.platform import SUPPORTED_OS_TYPES

DEFAULT_CONFIG_FILE = "ockit.yaml"


@dataclass
class OcConfig:
    """Settings for installing oc."""

    version: Optional[str] = None  # version, direct URL, or None for latest
    os_type: Optional[str] = None  # 'Linux', 'Darwin', 'Windows_NT'; detected if None
    use_local_oc: bool = False
    proxy: Optional[str] = None
    timeout: int = DEFAULT_TIMEOUT


def parse_config(config_path: Path) -> OcConfig:
    """
    Parse ockit.yaml configuration file.

    Args:
        config_path: Path to ockit.yaml

    Returns:
        Parsed and validated configuration

    Raises:
        ConfigError: If configuration is invalid
    """
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax: {e}")

    if data is None:
        return OcConfig()

    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a mapping")

    return _parse_oc_section(data.get("oc") or {})


def _parse_oc_section(section: Any) -> OcConfig:
    if not isinstance(section, dict):
        raise ConfigError("'oc' must be a mapping")

    unknown = set(section) - {"version", "os", "use_local_oc", "proxy", "timeout"}
    if unknown:
        raise ConfigError(f"Unknown keys in 'oc': {', '.join(sorted(unknown))}")

    version = section.get("version")
    if version is not None and not isinstance(version, str):
        # YAML reads 4.10 as the float 4.1
        raise ConfigError("'oc.version' must be a string (quote it, e.g. \"4.10\")")

    os_type = _optional_str(section, "os")
    if os_type is not None and os_type not in SUPPORTED_OS_TYPES:
        raise ConfigError(
            f"'oc.os' must be one of {', '.join(SUPPORTED_OS_TYPES)}, got '{os_type}'"
        )

    use_local_oc = section.get("use_local_oc", False)
    if not isinstance(use_local_oc, bool):
        raise ConfigError("'oc.use_local_oc' must be true or false")

    timeout = section.get("timeout", DEFAULT_TIMEOUT)
    if not isinstance(timeout, int) or isinstance(timeout, bool) or timeout <= 0:
        raise ConfigError("'oc.timeout' must be a positive integer")

    return OcConfig(
        version=version,
        os_type=os_type,
        use_local_oc=use_local_oc,
        proxy=_optional_str(section, "proxy"),
        timeout=timeout,
    )


def _optional_str(section: Dict[str, Any], key: str) -> Optional[str]:
    value = section.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(f"'oc.{key}' must be a string")
    return value


def load_config(config_file: Optional[Path], project_root: Path) -> OcConfig:
    """
    Load configuration from an explicit file or the default ockit.yaml.

    Args:
        config_file: Explicit configuration file (must exist if given)
        project_root: Directory searched for the default file

    Returns:
        Parsed configuration, or defaults if no file is present

    Raises:
        ConfigError: If the file is missing (explicit only) or invalid
    """
    if config_file is not None:
        return parse_config(Path(config_file))

    default = Path(project_root) / DEFAULT_CONFIG_FILE
    if default.exists():
        return parse_config(default)

    return OcConfig()
