"""
ConfigMap command implementation.

Builds an ``oc patch configmap`` command from flag-style properties and runs
it, or prints it with --print-only.
"""

import logging

from ockit.cli.utils import install_and_publish
from ockit.core.exceptions import OcExecutionError
from ockit.run.config_map import ConfigMap
from ockit.run.runner import exec_oc_args

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the configmap command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, oc's exit code on failure)
    """
    logger.debug(f"Arguments: {args}")

    config_map = ConfigMap(args.name, args.properties)

    if args.print_only:
        print(f"oc {config_map.patch_cmd(args.namespace)}")
        return 0

    oc_path = install_and_publish(args)

    try:
        return exec_oc_args(
            oc_path,
            config_map.patch_args(args.namespace),
            display=f"{oc_path} patch configmap {config_map.name}",
        )
    except OcExecutionError as e:
        logger.error(str(e))
        return e.exit_code
