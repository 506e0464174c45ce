"""Bump type detection and version arithmetic.

The bump type comes from the title of the most recent commit. The
arithmetic helpers only predict the version the package manager is about
to write, for the job log.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

import semver

from .exceptions import NoCommitsAvailableError
from .models import BumpType, Commit
from .rules import CommitType

VERSION_PATTERN = re.compile(r"^v?(\d+(?:\.\d+){0,2})([-+].*)?$")


def detect_bump_type(commits: Sequence[Commit]) -> BumpType:
    """Pick the bump type from the last (most recent) commit.

    A title containing "minor" or "feat", or starting with the feature
    gitmoji, gives a minor bump. Anything else is a patch. Major bumps are
    never detected automatically.

    Raises:
        NoCommitsAvailableError: If commits is empty.
    """
    if not commits:
        raise NoCommitsAvailableError("Failed to access commits")

    title = commits[-1].title
    if "minor" in title or "feat" in title or title.startswith(CommitType.FEATURE.value):
        return BumpType.MINOR
    return BumpType.PATCH


def parse_version(version_str: str) -> semver.Version:
    """Parse a version string into a semver.Version object.

    Handles incomplete versions by padding with zeros:
    - "1" → "1.0.0"
    - "1.2-rc.1" → "1.2.0-rc.1"

    A leading "v" is ignored. Prerelease and build parts are kept.

    Raises:
        ValueError: If the string is not a version.
    """
    match = VERSION_PATTERN.match(version_str.strip())
    if not match:
        raise ValueError(f"{version_str!r} is not valid SemVer string")
    parts = match.group(1).split(".")
    while len(parts) < 3:
        parts.append("0")
    return semver.Version.parse(".".join(parts) + (match.group(2) or ""))


def next_version(version_str: str, bump_type: BumpType) -> str:
    """Return the version yarn writes after applying bump_type.

    A prerelease is released as is when the bump would not go past it,
    as npm's semver.inc does.

    Examples:
        next_version("1.2.3", BumpType.PATCH) → "1.2.4"
        next_version("1.2.3", BumpType.MINOR) → "1.3.0"
        next_version("1.2.3", BumpType.MAJOR) → "2.0.0"
        next_version("1.2.3-rc.1", BumpType.PATCH) → "1.2.3"
        next_version("1.3.0-rc.1", BumpType.MINOR) → "1.3.0"
    """
    version = parse_version(version_str)
    release = version.finalize_version()
    if version.prerelease:
        if bump_type is BumpType.PATCH:
            return str(release)
        if bump_type is BumpType.MINOR and version.patch == 0:
            return str(release)
        if bump_type is BumpType.MAJOR and version.minor == 0 and version.patch == 0:
            return str(release)
    if bump_type is BumpType.MAJOR:
        return str(release.bump_major())
    if bump_type is BumpType.MINOR:
        return str(release.bump_minor())
    return str(release.bump_patch())
