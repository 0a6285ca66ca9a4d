"""
Execution of the oc binary.

``exec_oc`` runs a user command and streams its output to the console;
``exec_oc_sync`` captures output for internal probes such as version checks.
"""

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Mapping, Optional, Union

from ockit.core.exceptions import OcExecutionError
from ockit.run.arguments import prepare_oc_arguments

logger = logging.getLogger(__name__)


@dataclass
class ExecResult:
    """Captured result of an oc invocation."""

    code: int
    stdout: str
    stderr: str


def build_command(
    oc_path: Union[str, Path],
    arg_line: Optional[str],
    env: Optional[Mapping[str, str]] = None,
) -> List[str]:
    """Return the argv list for running oc with an argument line."""
    return [str(oc_path)] + prepare_oc_arguments(arg_line, env)


def exec_oc(
    oc_path: Union[str, Path],
    arg_line: Optional[str],
    env: Optional[Mapping[str, str]] = None,
) -> int:
    """
    Run oc with the specified argument line.

    Output is not captured; it goes to the console of the calling process.

    Args:
        oc_path: Absolute path to the oc binary
        arg_line: The command to run (e.g., 'get pods -n ${NAMESPACE}')
        env: Environment used for interpolation (defaults to ``os.environ``)

    Returns:
        Exit code (always 0, non-zero exits raise)

    Raises:
        OcExecutionError: If oc exits with a non-zero status
    """
    return exec_oc_args(
        oc_path,
        prepare_oc_arguments(arg_line, env),
        display=f"{oc_path} {arg_line or ''}".rstrip(),
    )


def exec_oc_args(
    oc_path: Union[str, Path], args: List[str], display: Optional[str] = None
) -> int:
    """
    Run oc with an already split argument list.

    Only ``display`` (or the oc subcommand) is logged and put into errors;
    the interpolated arguments are not.

    Args:
        oc_path: Absolute path to the oc binary
        args: Arguments passed to oc as-is
        display: Command shown in logs and errors (default: oc and its
            first argument)

    Returns:
        Exit code (always 0, non-zero exits raise)

    Raises:
        OcExecutionError: If oc exits with a non-zero status
    """
    cmd = [str(oc_path)] + list(args)
    if display is None:
        display = " ".join(cmd[:2])
    logger.info(f"Running: {display}")

    result = subprocess.run(cmd)

    if result.returncode != 0:
        raise OcExecutionError(display, result.returncode)

    return result.returncode


def exec_oc_sync(
    oc_path: Union[str, Path], arg_line: Optional[str], timeout: int = 60
) -> Optional[ExecResult]:
    """
    Run oc and capture its output.

    Args:
        oc_path: Path to the oc binary
        arg_line: The command to run
        timeout: Maximum run time in seconds

    Returns:
        ExecResult, or None if the process could not be started or timed out
    """
    cmd = build_command(oc_path, arg_line)
    logger.debug(f"Running: {' '.join(cmd)}")

    try:
        result = subprocess.run(cmd, capture_output=True, text=True, timeout=timeout)
    except (OSError, subprocess.TimeoutExpired) as e:
        logger.debug(f"Failed to run {cmd[0]}: {e}")
        return None

    return ExecResult(code=result.returncode, stdout=result.stdout, stderr=result.stderr)
