"""CLI entry point for release-bot."""

from __future__ import annotations

import click

from release_bot.config import (
    DEFAULT_BASE_BRANCH,
    DEFAULT_BOT_EMAIL,
    DEFAULT_BOT_USER,
    is_truthy,
    load_event_context,
)
from release_bot.exceptions import ConfigurationError
from release_bot.github import DEFAULT_API_URL
from release_bot.models import Outcome, RunOptions
from release_bot.pipeline import run
from release_bot.shell import set_failed


@click.group()
@click.version_option(package_name="release-bot")
def cli() -> None:
    """Cut a release when the last push deserves one."""


@cli.command("run")
@click.option("--ref", envvar="GITHUB_REF", help="Ref that triggered the run.")
@click.option("--token", envvar="GITHUB_TOKEN", help="GitHub token.")
@click.option(
    "--email",
    envvar="GITHUB_EMAIL",
    default=DEFAULT_BOT_EMAIL,
    show_default=True,
    help="Committer email for the version commit.",
)
@click.option(
    "--user",
    envvar="GITHUB_USER",
    default=DEFAULT_BOT_USER,
    show_default=True,
    help="Committer name, also the bot login ignored for loop prevention.",
)
@click.option(
    "--version-flag",
    envvar="INPUT_VERSION",
    default="false",
    show_default=True,
    help='Release only when "true".',
)
@click.option(
    "--base-branch",
    envvar="INPUT_BASEBRANCH",
    default=DEFAULT_BASE_BRANCH,
    show_default=True,
    help="Branch releases are cut from.",
)
@click.option(
    "--api-url",
    envvar="GITHUB_API_URL",
    default=DEFAULT_API_URL,
    show_default=True,
    help="GitHub API root.",
)
def run_command(
    ref: str | None,
    token: str | None,
    email: str,
    user: str,
    version_flag: str,
    base_branch: str,
    api_url: str,
) -> None:
    """Run the release pipeline (usually called from CI)."""
    options = RunOptions(
        github_ref=ref or None,
        github_token=token or None,
        github_email=email,
        github_user=user,
        version_enabled=is_truthy(version_flag),
        base_branch=base_branch.strip() or DEFAULT_BASE_BRANCH,
    )
    try:
        context = load_event_context()
    except ConfigurationError as e:
        set_failed(str(e))
        raise SystemExit(1) from e

    if run(options, context, api_url=api_url) is Outcome.FAILED:
        raise SystemExit(1)
