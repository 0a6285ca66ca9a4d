"""
Tests for download directory resolution.
"""

from pathlib import Path

from ockit.core.directory import (
    DOWNLOAD_DIR_NAME,
    WORKING_DIRECTORY_VARIABLE,
    ensure_download_dir,
    get_download_dir,
)


class TestGetDownloadDir:
    """Test get_download_dir function."""

    def test_uses_working_directory_variable(self, temp_dir):
        env = {WORKING_DIRECTORY_VARIABLE: str(temp_dir)}
        assert get_download_dir(env) == temp_dir / DOWNLOAD_DIR_NAME

    def test_falls_back_to_cwd(self, temp_dir, monkeypatch):
        monkeypatch.chdir(temp_dir)
        assert get_download_dir({}) == Path.cwd() / ".download"

    def test_empty_variable_falls_back_to_cwd(self, temp_dir, monkeypatch):
        monkeypatch.chdir(temp_dir)
        env = {WORKING_DIRECTORY_VARIABLE: ""}
        assert get_download_dir(env) == Path.cwd() / ".download"

    def test_reads_process_environment(self, working_dir):
        assert get_download_dir() == working_dir / ".download"

    def test_does_not_create(self, temp_dir):
        env = {WORKING_DIRECTORY_VARIABLE: str(temp_dir)}
        assert not get_download_dir(env).exists()


class TestEnsureDownloadDir:
    """Test ensure_download_dir function."""

    def test_creates_directory(self, temp_dir):
        env = {WORKING_DIRECTORY_VARIABLE: str(temp_dir / "nested" / "root")}

        download_dir = ensure_download_dir(env)

        assert download_dir.is_dir()
        assert download_dir.name == ".download"

    def test_existing_directory_kept(self, temp_dir):
        existing = temp_dir / ".download"
        existing.mkdir()
        (existing / "oc.tar.gz").write_bytes(b"cached")

        download_dir = ensure_download_dir({WORKING_DIRECTORY_VARIABLE: str(temp_dir)})

        assert (download_dir / "oc.tar.gz").read_bytes() == b"cached"
