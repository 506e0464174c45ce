"""Release pipeline: gate → history → classify → bump → push.

This module orchestrates one release-bot run, triggered by a push:
1. Refuse to run without a token
2. Ignore the bot's own version commit (avoids release loops)
3. Honour the "version" input flag
4. Release only from the base branch
5. Wait while dependency update PRs are open
6. Collect commits and files since the last release
7. Skip changes that only touch tooling, docs, tests or dev dependencies
8. Pick the bump type from the latest commit
9. Let yarn bump the version, then push commit and tag

Every stage may end the run early. Skips are normal outcomes; errors are
reported as a failed run.
"""

from __future__ import annotations

from .changes import are_changes_worth_release
from .exceptions import ManifestUnreadableError, MissingCredentialError
from .github import (
    DEFAULT_API_URL,
    GitHubClient,
    has_pending_dependency_prs_open,
    retrieve_changes_since_last_release,
)
from .manifest import get_current_version
from .models import EventContext, Outcome, RunOptions
from .release import get_current_branch, version
from .rules import CommitType
from .shell import debug, info, set_failed, step, warning
from .versions import detect_bump_type, next_version


def is_bot_version_commit(options: RunOptions, context: EventContext) -> bool:
    """True when the push is exactly one version commit made by the bot."""
    return (
        len(context.commits) == 1
        and context.commits[0].startswith(CommitType.VERSION.value)
        and context.actor == options.github_user
    )


def run(
    options: RunOptions,
    context: EventContext,
    client: GitHubClient | None = None,
    api_url: str = DEFAULT_API_URL,
) -> Outcome:
    """Execute the full release pipeline.

    Args:
        options: Invocation options (token, identity, inputs).
        context: The push event being handled.
        client: GitHub client to use. Built from the token and closed at
                the end of the run when not given.
        api_url: API root used when building the client.

    Returns:
        The terminal outcome. Errors never escape: they are reported
        through set_failed and give Outcome.FAILED.
    """
    owned_client: GitHubClient | None = None
    try:
        if not options.github_token:
            raise MissingCredentialError("⛔️ Missing GITHUB_TOKEN")

        if is_bot_version_commit(options, context):
            info(f"🤖 Skipping, version commit pushed by {options.github_user}")
            return Outcome.SKIPPED_BOT_COMMIT

        if not options.version_enabled:
            warning("🚩 Skipping version (flag false)")
            return Outcome.SKIPPED_FLAG_DISABLED

        current_branch = get_current_branch(options.github_ref)
        if current_branch != options.base_branch:
            warning(
                f"🚫 Current branch: {current_branch}, "
                f"releasing only from {options.base_branch}"
            )
            return Outcome.SKIPPED_WRONG_BRANCH

        if client is None:
            client = owned_client = GitHubClient(
                options.github_token, context.repository, api_url=api_url
            )

        if has_pending_dependency_prs_open(client):
            warning("🚧 Skipping, dependencies PRs found open")
            return Outcome.SKIPPED_PENDING_DEPENDENCY_PRS

        step("✏️ Retrieving commits since last release")
        comparison = retrieve_changes_since_last_release(client)
        if not comparison.commits:
            info("⏩ No commit found since last release")
            return Outcome.SKIPPED_NO_COMMITS

        step("✏️ Checking if changes worth a release")
        if not are_changes_worth_release(comparison):
            info("⏩ Skipping the release")
            return Outcome.SKIPPED_NOT_WORTHY

        step("⬆️ Detecting bump type given branch/commit")
        bump_type = detect_bump_type(comparison.commits)
        try:
            current = get_current_version()
            expected = next_version(current, bump_type)
        except (ManifestUnreadableError, ValueError) as e:
            debug(f"Cannot predict the next version: {e}")
            info(f"🔖 Versioning a {bump_type.value}")
        else:
            info(f"🔖 Versioning a {bump_type.value}: {current} → {expected}")

        if not version(bump_type, options.github_email, options.github_user):
            info(f"⏩ Skipping this release, branch behind {options.base_branch}")
            return Outcome.SKIPPED_BRANCH_BEHIND

        info("🚀 Release pushed")
        return Outcome.RELEASED
    except Exception as e:
        set_failed(str(e))
        return Outcome.FAILED
    finally:
        if owned_client is not None:
            owned_client.close()
