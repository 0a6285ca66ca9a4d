"""
Preparation of oc command-line arguments.

An argument line is a single string as a user types it in a pipeline
definition. It is interpolated against the environment and then split with
shell-like rules, so quoted substrings stay single arguments.
"""

import shlex
from typing import List, Mapping, Optional

from ockit.core.interpolate import interpolate


def prepare_oc_arguments(
    arg_line: Optional[str], env: Optional[Mapping[str, str]] = None
) -> List[str]:
    """
    Split an argument line into tokens, interpolating environment variables.

    Args:
        arg_line: The command line arguments as a single string
        env: Environment snapshot (defaults to ``os.environ``)

    Returns:
        List of arguments with ``${NAME}`` references interpolated

    Example:
        >>> prepare_oc_arguments('get pods -n ${NS} -l "app=web"', {"NS": "dev"})
        ['get', 'pods', '-n', 'dev', '-l', 'app=web']
    """
    if not arg_line:
        return []

    return shlex.split(interpolate(arg_line, env))
