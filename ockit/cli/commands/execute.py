"""
Exec command implementation.

Installs oc and runs it with an interpolated argument line.
"""

import logging

from ockit.cli.utils import install_and_publish
from ockit.core.exceptions import OcExecutionError
from ockit.run.runner import exec_oc

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the exec command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code of oc
    """
    logger.debug(f"Arguments: {args}")

    oc_path = install_and_publish(args)

    try:
        return exec_oc(oc_path, args.arg_line)
    except OcExecutionError as e:
        logger.error(str(e))
        return e.exit_code
