"""
Tests for shared CLI utilities.
"""

import argparse
from pathlib import Path
from unittest.mock import patch

import pytest

from ockit.cli.parser import CLI
from ockit.cli.utils import install_and_publish, resolve_settings
from ockit.core.exceptions import ConfigError


def make_args(project_root: Path, **overrides) -> argparse.Namespace:
    values = {
        "config": None,
        "project_root": project_root,
        "oc_version": None,
        "os_type": None,
        "use_local_oc": None,
        "proxy": None,
        "timeout": None,
    }
    values.update(overrides)
    return argparse.Namespace(**values)


class TestResolveSettings:
    """Test resolve_settings function."""

    def test_defaults_detect_os(self, temp_dir):
        with patch("ockit.cli.utils.detect_os_type", return_value="Darwin"):
            settings = resolve_settings(make_args(temp_dir))

        assert settings.os_type == "Darwin"
        assert settings.version is None
        assert settings.use_local_oc is False
        assert settings.timeout == 30

    def test_config_file_values(self, temp_dir):
        (temp_dir / "ockit.yaml").write_text(
            "oc:\n  version: '4.6'\n  os: Linux\n  proxy: p:1\n"
        )

        settings = resolve_settings(make_args(temp_dir))

        assert settings.version == "4.6"
        assert settings.os_type == "Linux"
        assert settings.proxy == "p:1"

    def test_command_line_overrides_file(self, temp_dir):
        (temp_dir / "ockit.yaml").write_text(
            "oc:\n  version: '4.6'\n  use_local_oc: true\n  timeout: 10\n"
        )

        settings = resolve_settings(
            make_args(
                temp_dir,
                oc_version="3.11",
                os_type="Windows_NT",
                use_local_oc=False,
                timeout=120,
            )
        )

        assert settings.version == "3.11"
        assert settings.os_type == "Windows_NT"
        assert settings.use_local_oc is False
        assert settings.timeout == 120

    def test_invalid_config_raises(self, temp_dir):
        (temp_dir / "ockit.yaml").write_text("oc:\n  timeout: never\n")

        with pytest.raises(ConfigError):
            resolve_settings(make_args(temp_dir))


class TestInstallAndPublish:
    """Test install_and_publish function."""

    def test_installs_and_prepends_path(self, temp_dir):
        oc_path = temp_dir / ".download" / "oc"
        with patch(
            "ockit.cli.utils.install_oc", return_value=oc_path
        ) as install_mock, patch("ockit.cli.utils.add_oc_to_path") as path_mock:
            result = install_and_publish(
                make_args(temp_dir, oc_version="4.6", os_type="Linux", proxy="p:1")
            )

        assert result == oc_path
        install_mock.assert_called_once_with(
            "4.6", "Linux", use_local_oc=False, proxy="p:1", timeout=30
        )
        path_mock.assert_called_once_with(oc_path, "Linux")


class TestUseLocalOcOverride:
    """Test turning off use_local_oc from the command line."""

    def test_no_use_local_oc_overrides_file(self, temp_dir):
        (temp_dir / "ockit.yaml").write_text("oc:\n  use_local_oc: true\n")
        args = CLI().parse_args(
            ["--project-root", str(temp_dir), "install", "--no-use-local-oc"]
        )

        assert resolve_settings(args).use_local_oc is False

    def test_file_value_kept_without_flag(self, temp_dir):
        (temp_dir / "ockit.yaml").write_text("oc:\n  use_local_oc: true\n")
        args = CLI().parse_args(["--project-root", str(temp_dir), "install"])

        assert resolve_settings(args).use_local_oc is True
