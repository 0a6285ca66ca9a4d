"""
Pytest configuration and shared fixtures for ockit tests.
"""

import io
import tarfile
import tempfile
import zipfile
from pathlib import Path
from typing import Generator

import pytest

from ockit.core.platform import clear_platform_cache
from ockit.install.resolver import default_oc_utils


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--integration",
        action="store_true",
        default=False,
        help="run integration tests that require network access",
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless --integration flag is provided."""
    if not config.getoption("--integration"):
        skip_integration = pytest.mark.skip(reason="need --integration option to run")
        for item in items:
            if "integration" in item.keywords:
                item.add_marker(skip_integration)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (requires --integration)",
    )


# ============================================================================
# Shared Test Fixtures
# ============================================================================


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create temporary directory for test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def working_dir(temp_dir: Path, monkeypatch) -> Path:
    """Point SYSTEM_DEFAULTWORKINGDIRECTORY at a temporary directory."""
    workspace = temp_dir / "workspace"
    workspace.mkdir()
    monkeypatch.setenv("SYSTEM_DEFAULTWORKINGDIRECTORY", str(workspace))
    return workspace


@pytest.fixture
def oc_utils():
    """The embedded base URL and latest-patch table."""
    return default_oc_utils()


@pytest.fixture(autouse=True)
def _reset_platform_cache():
    clear_platform_cache()
    yield
    clear_platform_cache()


def make_oc_tar_gz(binary_name: str = "oc", content: bytes = b"#!/bin/sh\necho oc\n") -> bytes:
    """Build an in-memory oc.tar.gz holding a single binary."""
    buf = io.BytesIO()
    with tarfile.open(fileobj=buf, mode="w:gz") as tar:
        info = tarfile.TarInfo(name=binary_name)
        info.size = len(content)
        info.mode = 0o644
        tar.addfile(info, io.BytesIO(content))
    return buf.getvalue()


def make_oc_zip(binary_name: str = "oc.exe", content: bytes = b"MZ") -> bytes:
    """Build an in-memory oc.zip holding a single binary."""
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w") as zf:
        zf.writestr(binary_name, content)
    return buf.getvalue()


@pytest.fixture
def oc_tar_gz():
    """Factory for in-memory oc.tar.gz archives."""
    return make_oc_tar_gz


@pytest.fixture
def oc_zip():
    """Factory for in-memory oc.zip archives."""
    return make_oc_zip
