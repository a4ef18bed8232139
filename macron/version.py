"""Build metadata, read once at import."""

from __future__ import annotations

import json
from dataclasses import dataclass
from importlib import metadata

from macron import __version__

DISTRIBUTION = "macron"


@dataclass(frozen=True)
class BuildInfo:
    """Version and VCS details of the running build.

    Commit times are not recorded for pip installs, so only the revision is
    known, and only for installs from a VCS URL.
    """

    version: str
    revision: str = "unknown"
    dirty_tree: bool = True

    def describe(self) -> str:
        """Multi-line description for ``macron version``."""
        lines = [f"macron version {self.version}"]
        if self.revision != "unknown":
            lines.append(f"revision: {self.revision}{' (dirty)' if self.dirty_tree else ''}")
        return "\n".join(lines)


def read_build_info(distribution: str = DISTRIBUTION, fallback_version: str = __version__) -> BuildInfo:
    """Read build metadata from the installed distribution.

    The revision is only known when the package was installed from a VCS URL,
    in which case pip records the commit in ``direct_url.json``.
    """
    try:
        dist = metadata.distribution(distribution)
    except metadata.PackageNotFoundError:
        return BuildInfo(version=fallback_version)

    version = dist.version or fallback_version

    direct_url = dist.read_text("direct_url.json")
    if not direct_url:
        return BuildInfo(version=version)

    try:
        vcs_info = json.loads(direct_url).get("vcs_info") or {}
    except (ValueError, AttributeError):
        return BuildInfo(version=version)

    commit = vcs_info.get("commit_id")
    if not commit:
        return BuildInfo(version=version)

    # A pinned VCS install is a clean checkout of that commit
    return BuildInfo(version=version, revision=commit, dirty_tree=False)


BUILD_INFO = read_build_info()
