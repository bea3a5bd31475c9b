"""Version and build information."""

from __future__ import annotations

import os
import platform
import sys
from dataclasses import asdict, dataclass
from typing import Any

VERSION = "0.0.1"
BUILD_METADATA = "unreleased"


def get_version() -> str:
    """Semver string, with build metadata when there is any."""

    if not BUILD_METADATA:
        return VERSION
    return f"{VERSION}+{BUILD_METADATA}"


@dataclass
class BuildInfo:
    version: str
    build_metadata: str
    git_commit: str
    git_branch: str
    git_tag: str
    git_tree_state: str
    build_date: str
    python_version: str
    python_implementation: str
    platform: str
    cpu_count: int
    executable: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def get_build_info() -> BuildInfo:
    """Collect version, git metadata from ``SAK_*`` variables and runtime details."""

    return BuildInfo(
        version=get_version(),
        build_metadata=BUILD_METADATA,
        git_commit=os.getenv("SAK_GIT_COMMIT", ""),
        git_branch=os.getenv("SAK_GIT_BRANCH", ""),
        git_tag=os.getenv("SAK_GIT_TAG", ""),
        git_tree_state=os.getenv("SAK_GIT_TREE_STATE", ""),
        build_date=os.getenv("SAK_BUILD_DATE", ""),
        python_version=platform.python_version(),
        python_implementation=platform.python_implementation(),
        platform=f"{sys.platform}/{platform.machine()}",
        cpu_count=os.cpu_count() or 0,
        executable=sys.executable,
    )


def build_info_items(info: BuildInfo) -> list[tuple[str, str]]:
    """Label/value pairs for display; empty git and build fields are left out."""

    items = [("Version", info.version)]
    optional = [
        ("Build Date", info.build_date),
        ("Git Commit", info.git_commit),
        ("Git Branch", info.git_branch),
        ("Git Tag", info.git_tag),
        ("Git Tree State", info.git_tree_state),
    ]
    items.extend((label, value) for label, value in optional if value)
    items.extend(
        [
            ("Python Version", f"{info.python_implementation} {info.python_version}"),
            ("Platform", info.platform),
            ("CPU Count", str(info.cpu_count)),
        ]
    )
    if info.executable:
        items.append(("Executable Path", info.executable))
    return items


def format_build_info(info: BuildInfo) -> str:
    items = build_info_items(info)
    width = max(len(label) for label, _ in items)
    return "\n".join(f"{label:<{width}}: {value}" for label, value in items) + "\n"
