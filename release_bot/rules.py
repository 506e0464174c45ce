"""Classification rules for commits and changed files.

The release policy is data: commit markers, the merge and dependency-bump
patterns, and the table of files that never justify a release on their
own. Each rule can be checked in isolation.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from .models import Commit, FileChange
from .shell import info, warning


class CommitType(str, Enum):
    """Gitmoji prefixes used in commit titles."""

    DEPENDENCY_UPDATE = ":arrow_up:"
    FEATURE = ":sparkles:"
    BUG = ":bug:"
    MERGE = ":twisted_rightwards_arrows:"
    VERSION = ":bookmark:"
    OTHER = ":card_file_box:"


DEPENDENCIES_LABEL = "dependencies"

MERGE_MESSAGE_PATTERN = re.compile(r"merge", re.IGNORECASE)

# Dependabot style: ":arrow_up: Bump eslint from 7.18.0 to 7.19.0"
DEPENDENCY_BUMP_PATTERN = re.compile(r"^.*Bump (.*) from .*")


@dataclass(frozen=True)
class FileRule:
    """A file is unworthy of a release when its name matches `pattern`
    and `check` (if any) also accepts it."""

    name: str
    pattern: re.Pattern[str]
    check: Callable[[FileChange], bool] | None = None

    def matches(self, file: FileChange) -> bool:
        if not self.pattern.search(file.filename):
            return False
        return self.check(file) if self.check else True


def _is_version_patch(file: FileChange) -> bool:
    return "version" in file.patch if file.patch else False


UNWORTHY_RELEASE_FILE_RULES: tuple[FileRule, ...] = (
    FileRule(
        name="manifest version bump",
        pattern=re.compile(r"package\.json"),
        check=_is_version_patch,
    ),
    FileRule(
        name="tooling config",
        pattern=re.compile(
            r"^\.?(github|husky|eslintignore|eslintrc|gitignore|yarnrc"
            r"|LICENCE|LICENSE|README|tsconfig)"
        ),
    ),
    FileRule(
        name="test file",
        pattern=re.compile(r"\.spec\.[jt]sx?$"),
    ),
)


def is_merge_commit(commit: Commit) -> bool:
    return MERGE_MESSAGE_PATTERN.search(commit.message) is not None


def is_dependency_update(commit: Commit) -> bool:
    return commit.message.startswith(CommitType.DEPENDENCY_UPDATE.value)


def extract_dependency(commit: Commit) -> str:
    """Extract the dependency name from a dependency bump commit.

    Returns an empty string (which never names a real dependency) when the
    message does not follow the "Bump <name> from ..." convention.
    """
    match = DEPENDENCY_BUMP_PATTERN.match(commit.message)
    if not match:
        warning(f"⚠️ Malformed bump commit message : {commit.message}")
        return ""
    dependency = match.group(1)
    info(f"📦 Retrieved {dependency} from message: {commit.title}")
    return dependency


def is_unworthy_file(file: FileChange) -> bool:
    """True when any exclusion rule matches the file."""
    return any(rule.matches(file) for rule in UNWORTHY_RELEASE_FILE_RULES)
