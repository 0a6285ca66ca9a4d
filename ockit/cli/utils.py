"""
Shared utilities for CLI commands.

Provides the install step every command starts with, so that configuration
merging and PATH publishing behave the same everywhere.
"""

import logging
from pathlib import Path

from ockit.config.parser import OcConfig, load_config
from ockit.core.platform import detect_os_type
from ockit.install.handler import install_oc
from ockit.install.path import add_oc_to_path

logger = logging.getLogger(__name__)


def resolve_settings(args) -> OcConfig:
    """
    Merge the configuration file with command-line overrides.

    Args:
        args: Parsed arguments (install options plus global config options)

    Returns:
        Effective settings; the OS type is always filled in
    """
    config = load_config(args.config, args.project_root)

    if args.oc_version is not None:
        config.version = args.oc_version
    if args.os_type is not None:
        config.os_type = args.os_type
    if args.use_local_oc is not None:
        config.use_local_oc = args.use_local_oc
    if args.proxy is not None:
        config.proxy = args.proxy
    if args.timeout is not None:
        config.timeout = args.timeout

    if not config.os_type:
        config.os_type = detect_os_type()

    logger.debug(f"Effective settings: {config}")
    return config


def install_and_publish(args) -> Path:
    """
    Install oc according to args and prepend its directory to PATH.

    Args:
        args: Parsed arguments

    Returns:
        Path to the oc executable
    """
    settings = resolve_settings(args)
    oc_path = install_oc(
        settings.version,
        settings.os_type,
        use_local_oc=settings.use_local_oc,
        proxy=settings.proxy,
        timeout=settings.timeout,
    )
    add_oc_to_path(oc_path, settings.os_type)
    return oc_path
