"""
Install command implementation.

Installs oc, adds it to PATH and prints the path of the executable.
"""

import logging

from ockit.cli.utils import install_and_publish

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the install command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    logger.debug(f"Arguments: {args}")

    oc_path = install_and_publish(args)
    print(oc_path)

    return 0
