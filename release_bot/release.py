"""Local git and package manager operations for cutting a release."""

from __future__ import annotations

import re

from .exceptions import MalformedRefError
from .models import BumpType
from .shell import error, git, info, run

REF_PATTERN = re.compile(r"refs/[a-zA-Z]+/(.+)")


def get_current_branch(github_ref: str | None) -> str:
    """Extract the branch name from a ref such as "refs/heads/master".

    Raises:
        MalformedRefError: If the ref is missing or not refs/<kind>/<name>.
    """
    if not github_ref:
        raise MalformedRefError("Failed to detect branch")

    match = REF_PATTERN.fullmatch(github_ref)
    if not match:
        error(f"🙊 Malformed branch {github_ref}")
        raise MalformedRefError("Cannot retrieve branch name from GITHUB_REF")

    return match.group(1)


def is_branch_behind() -> bool:
    """True if the local branch is behind its upstream tracking branch."""
    return "is behind" in git("status", "-uno")


def version(bump_type: BumpType, github_email: str, github_user: str) -> bool:
    """Bump the version with yarn, then push the commit and tag.

    yarn creates the version commit and tag itself. Nothing is pushed when
    the branch turns out to be behind its upstream, since pushing would
    publish a tag on a diverged history.

    Returns:
        True if the release was pushed, False if skipped.

    Raises:
        subprocess.CalledProcessError: If any command fails.
    """
    info("📒 Setting git config")
    git("config", "user.name", github_user)
    git("config", "user.email", github_email)

    info(f"🔖 Version {bump_type.value}")
    run("yarn", "version", f"--{bump_type.value}")

    if is_branch_behind():
        return False

    info("📌 Pushing release commit message and tag")
    git("push")
    git("push", "--tags")
    return True
