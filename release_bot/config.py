"""Run configuration read from the GitHub Actions environment.

The push event is read here once, up front, into an EventContext. The CLI
maps the GITHUB_* variables and action inputs onto RunOptions itself.
"""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from pathlib import Path

from .exceptions import ConfigurationError
from .models import EventContext

DEFAULT_BOT_USER = "github-actions[bot]"
DEFAULT_BOT_EMAIL = "41898282+github-actions[bot]@users.noreply.github.com"
DEFAULT_BASE_BRANCH = "master"


def is_truthy(value: str) -> bool:
    """Only "true", in any letter case, enables releasing."""
    return value.strip().lower() == "true"


def split_repository(slug: str) -> tuple[str, str]:
    """Split "owner/repo" into its parts.

    Raises:
        ConfigurationError: If the slug is not owner/repo.
    """
    parts = slug.split("/")
    if len(parts) != 2 or not all(parts):
        raise ConfigurationError(f"Repository must be in format 'owner/repo', got {slug!r}")
    return parts[0], parts[1]


def load_event_commits(event_path: str | None) -> list[str]:
    """Return the messages of the commits in a push event payload.

    Missing path or a payload without commits (e.g. workflow_dispatch)
    yields an empty list.

    Raises:
        ConfigurationError: If the payload file cannot be read or parsed, or
            a commit entry carries no message text.
    """
    if not event_path:
        return []
    try:
        payload = json.loads(Path(event_path).read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Cannot read event payload {event_path}: {e}") from e
    commits = payload.get("commits") if isinstance(payload, dict) else None
    if not commits:
        return []
    if not isinstance(commits, list):
        raise ConfigurationError(f"Malformed event payload {event_path}: commits is not a list")
    messages = []
    for commit in commits:
        message = commit.get("message", "") if isinstance(commit, dict) else None
        if not isinstance(message, str):
            raise ConfigurationError(
                f"Malformed event payload {event_path}: commit without a message: {commit!r}"
            )
        messages.append(message)
    return messages


def load_event_context(env: Mapping[str, str] | None = None) -> EventContext:
    """Build the EventContext from GITHUB_REPOSITORY, GITHUB_ACTOR and GITHUB_EVENT_PATH."""
    env = os.environ if env is None else env
    return EventContext(
        repository=env.get("GITHUB_REPOSITORY", ""),
        actor=env.get("GITHUB_ACTOR", ""),
        commits=load_event_commits(env.get("GITHUB_EVENT_PATH")),
    )
