"""
Tests for oc execution.
"""

import logging
import subprocess
from unittest.mock import Mock, patch

import pytest

from ockit.core.exceptions import OcExecutionError
from ockit.run.runner import ExecResult, build_command, exec_oc, exec_oc_args, exec_oc_sync


class TestBuildCommand:
    """Test build_command function."""

    def test_prepends_binary(self):
        assert build_command("/opt/oc", "get pods", {}) == ["/opt/oc", "get", "pods"]

    def test_empty_arguments(self):
        assert build_command("/opt/oc", "", {}) == ["/opt/oc"]


class TestExecOc:
    """Test exec_oc and exec_oc_args."""

    def test_runs_interpolated_command(self):
        with patch(
            "ockit.run.runner.subprocess.run", return_value=Mock(returncode=0)
        ) as run_mock:
            result = exec_oc("/opt/oc", "get pods -n ${NS}", {"NS": "dev"})

        assert result == 0
        run_mock.assert_called_once_with(["/opt/oc", "get", "pods", "-n", "dev"])

    def test_non_zero_exit_raises(self):
        with patch("ockit.run.runner.subprocess.run", return_value=Mock(returncode=3)):
            with pytest.raises(OcExecutionError) as exc_info:
                exec_oc("/opt/oc", "whoami", {})

        assert exc_info.value.exit_code == 3
        assert "/opt/oc whoami" in str(exc_info.value)

    def test_interpolated_values_not_logged(self, caplog):
        env = {"TOKEN": "s3cret"}
        with patch("ockit.run.runner.subprocess.run", return_value=Mock(returncode=1)):
            with caplog.at_level(logging.DEBUG, logger="ockit.run.runner"):
                with pytest.raises(OcExecutionError) as exc_info:
                    exec_oc("/opt/oc", "login --token ${TOKEN}", env)

        assert "s3cret" not in caplog.text
        assert "s3cret" not in str(exc_info.value)
        assert "login --token ${TOKEN}" in str(exc_info.value)

    def test_default_display_is_subcommand(self):
        with patch("ockit.run.runner.subprocess.run", return_value=Mock(returncode=2)):
            with pytest.raises(OcExecutionError) as exc_info:
                exec_oc_args("/opt/oc", ["patch", "configmap", "foo", "-p", "{}"])

        assert exc_info.value.command == "/opt/oc patch"

    def test_args_passed_unchanged(self):
        payload = '{"data":{"k": "it\'s ${X}"}}'
        with patch(
            "ockit.run.runner.subprocess.run", return_value=Mock(returncode=0)
        ) as run_mock:
            exec_oc_args("/opt/oc", ["patch", "configmap", "foo", "-p", payload])

        assert run_mock.call_args.args[0][-1] == payload


class TestExecOcSync:
    """Test exec_oc_sync function."""

    def test_captures_output(self):
        completed = Mock(returncode=0, stdout="Client Version: v4.6.0", stderr="")
        with patch(
            "ockit.run.runner.subprocess.run", return_value=completed
        ) as run_mock:
            result = exec_oc_sync("/opt/oc", "version")

        assert result == ExecResult(code=0, stdout="Client Version: v4.6.0", stderr="")
        assert run_mock.call_args.kwargs["capture_output"] is True

    def test_missing_binary_returns_none(self):
        with patch(
            "ockit.run.runner.subprocess.run", side_effect=FileNotFoundError("oc")
        ):
            assert exec_oc_sync("/missing/oc", "version") is None

    def test_timeout_returns_none(self):
        with patch(
            "ockit.run.runner.subprocess.run",
            side_effect=subprocess.TimeoutExpired(cmd="oc", timeout=1),
        ):
            assert exec_oc_sync("/opt/oc", "version", timeout=1) is None
