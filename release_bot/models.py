"""Data models for release-bot.

These Pydantic models represent the data flowing through one pipeline run:
what the GitHub API returns, what package.json declares, and how the run
was invoked.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class BumpType(str, Enum):
    """Semantic version component to increment."""

    PATCH = "patch"
    MINOR = "minor"
    MAJOR = "major"


class Outcome(str, Enum):
    """Terminal state of a pipeline run."""

    RELEASED = "released"
    SKIPPED_BOT_COMMIT = "skipped-bot-commit"
    SKIPPED_FLAG_DISABLED = "skipped-flag-disabled"
    SKIPPED_WRONG_BRANCH = "skipped-wrong-branch"
    SKIPPED_PENDING_DEPENDENCY_PRS = "skipped-pending-dependency-prs"
    SKIPPED_NO_COMMITS = "skipped-no-commits"
    SKIPPED_NOT_WORTHY = "skipped-not-worthy"
    SKIPPED_BRANCH_BEHIND = "skipped-branch-behind"
    FAILED = "failed"


class Commit(BaseModel):
    """A commit as listed by the GitHub API.

    Attributes:
        sha: Content hash identifying the commit.
        message: Full commit message; only the first line is significant
                 for classification.
    """

    model_config = ConfigDict(frozen=True)

    sha: str
    message: str

    @property
    def title(self) -> str:
        """First line of the commit message."""
        return self.message.split("\n", 1)[0].rstrip("\r")

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Commit:
        """Build from a GitHub commit object ({"sha": ..., "commit": {"message": ...}})."""
        return cls(sha=data["sha"], message=data.get("commit", {}).get("message", ""))


class FileChange(BaseModel):
    """A file touched between two refs, with its patch when GitHub provides one."""

    model_config = ConfigDict(frozen=True)

    filename: str
    patch: str | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> FileChange:
        return cls(filename=data["filename"], patch=data.get("patch"))


class Comparison(BaseModel):
    """Commits (oldest first) and changed files between a base and head ref."""

    commits: list[Commit] = Field(default_factory=list)
    files: list[FileChange] = Field(default_factory=list)


class PullRequestSummary(BaseModel):
    """Just enough of a pull request to inspect its labels."""

    model_config = ConfigDict(frozen=True)

    number: int
    labels: frozenset[str] = frozenset()

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> PullRequestSummary:
        return cls(
            number=data["number"],
            labels=frozenset(label["name"] for label in data.get("labels", [])),
        )


class Manifest(BaseModel):
    """The parts of package.json release-bot cares about.

    Attributes:
        version: Current version string, None when not declared.
        dev_dependencies: Map of dev dependency name → version range.
    """

    version: str | None = None
    dev_dependencies: dict[str, str] = Field(default_factory=dict)


class RunOptions(BaseModel):
    """How the pipeline was invoked.

    Attributes:
        github_ref: Ref that triggered the run (e.g. "refs/heads/master").
        github_token: Token used for the GitHub API; required to release.
        github_email: Committer email for the version commit.
        github_user: Committer name, also the bot login used for loop
                     prevention.
        version_enabled: Value of the "version" action input.
        base_branch: Only pushes to this branch are released.
    """

    github_ref: str | None = None
    github_token: str | None = None
    github_email: str
    github_user: str
    version_enabled: bool = False
    base_branch: str = "master"


class EventContext(BaseModel):
    """The push event that triggered the run.

    Attributes:
        repository: Repository slug "owner/repo".
        actor: Login of the user (or bot) that pushed.
        commits: Messages of the commits included in the push.
    """

    repository: str
    actor: str = ""
    commits: list[str] = Field(default_factory=list)
