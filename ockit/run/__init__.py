"""
Running the oc CLI.

This package prepares oc argument lines, executes oc and builds ConfigMap
patch commands.
"""

from ockit.run.arguments import prepare_oc_arguments
from ockit.run.config_map import ConfigMap, parse_properties
from ockit.run.runner import ExecResult, exec_oc, exec_oc_args, exec_oc_sync

__all__ = [
    "prepare_oc_arguments",
    "ConfigMap",
    "parse_properties",
    "ExecResult",
    "exec_oc",
    "exec_oc_args",
    "exec_oc_sync",
]
