"""Service version string from the installed distribution's metadata."""

import json
from importlib import metadata
from typing import Callable, Optional

import structlog
from typing_extensions import TypedDict

DISTRIBUTION_NAME = "text-mirror"
# Default version when the build info has none.
SERVICE_VERSION = "(devel)"
# Short revision length for display.
REVISION_LEN = 7

logger = structlog.getLogger(__name__)


class BuildInfo(TypedDict):
    """Build metadata of the running service."""

    version: str
    """Distribution version, empty if unknown."""
    revision: str
    """VCS commit the distribution was installed from, empty if unknown."""


BuildInfoReader = Callable[[], Optional[BuildInfo]]
"""Anything returning the build info, or None when it is unavailable."""


def read_build_info() -> Optional[BuildInfo]:
    """Read the build info of the installed ``text-mirror`` distribution.

    The revision is only known for installs from a VCS URL, where pip records
    the commit in ``direct_url.json``.
    """
    try:
        dist = metadata.distribution(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        return None

    revision = ""
    direct_url = dist.read_text("direct_url.json")
    if direct_url:
        try:
            vcs_info = json.loads(direct_url).get("vcs_info", {})
        except ValueError:
            logger.warning("Malformed direct_url.json", distribution=DISTRIBUTION_NAME)
        else:
            revision = vcs_info.get("commit_id", "")

    return {"version": dist.version or "", "revision": revision}


def get_service_version(reader: BuildInfoReader = read_build_info) -> str:
    """Return the service version string, e.g. ``1.0.0 (abcdef0)``.

    Without a version the revision comes first, e.g. ``abcdef0 (devel)``;
    without build info at all it is ``unknown (devel)``.
    """
    version = SERVICE_VERSION
    revision = "unknown"

    info = reader()
    if info is not None:
        if info.get("version"):
            version = info["version"]
        if info.get("revision"):
            revision = info["revision"]

        if version != SERVICE_VERSION:
            return f"{version} ({revision[:REVISION_LEN]})"

    return f"{revision[:REVISION_LEN]} {version}"
