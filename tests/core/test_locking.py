"""
Tests for archive locking.
"""

import threading

import pytest
from filelock import FileLock, Timeout

from ockit.core.locking import archive_lock


class TestArchiveLock:
    """Test archive_lock context manager."""

    def test_creates_lock_file_in_download_dir(self, temp_dir):
        with archive_lock(temp_dir, "oc.tar.gz"):
            assert (temp_dir / ".oc.tar.gz.lock").exists()

    def test_unsafe_characters_replaced(self, temp_dir):
        with archive_lock(temp_dir, "a/b:c.zip"):
            assert (temp_dir / ".a-b-c.zip.lock").exists()

    def test_reacquire_after_release(self, temp_dir):
        with archive_lock(temp_dir, "oc.zip"):
            pass
        with archive_lock(temp_dir, "oc.zip", timeout=1):
            pass

    def test_timeout_when_held(self, temp_dir):
        held = threading.Event()
        release = threading.Event()

        def holder():
            with FileLock(temp_dir / ".oc.tar.gz.lock"):
                held.set()
                release.wait(5)

        thread = threading.Thread(target=holder)
        thread.start()
        try:
            assert held.wait(5)
            with pytest.raises(Timeout, match="Could not acquire archive lock"):
                with archive_lock(temp_dir, "oc.tar.gz", timeout=0.1):
                    pass
        finally:
            release.set()
            thread.join()
