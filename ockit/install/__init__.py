"""
Installation of the oc CLI.

Available Components:
--------------------
- resolver: version and OS to mirror download URL
- fetcher: download-or-reuse plus extraction of a release archive
- path: publishing the installed binary directory on PATH
- handler: the complete install flow

Example Usage:
-------------
    from ockit.install import install_oc, add_oc_to_path

    oc_path = install_oc("4.11", "Linux")
    add_oc_to_path(oc_path, "Linux")
"""

from ockit.install.fetcher import download_and_extract
from ockit.install.handler import get_local_oc_path, get_oc_version, install_oc
from ockit.install.path import add_oc_to_path
from ockit.install.resolver import (
    bundle_for_os,
    bundle_url,
    latest_stable,
    load_oc_utils,
)

__all__ = [
    "download_and_extract",
    "get_local_oc_path",
    "get_oc_version",
    "install_oc",
    "add_oc_to_path",
    "bundle_for_os",
    "bundle_url",
    "latest_stable",
    "load_oc_utils",
]
