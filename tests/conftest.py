"""Shared test fixtures."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from release_bot.models import Commit, EventContext, FileChange, RunOptions


def make_commit(message: str, sha: str = "bac6aee2d316d65025022f9e84f12eb2ffcb34ac") -> Commit:
    return Commit(sha=sha, message=message)


@pytest.fixture
def tmp_package_json(tmp_path: Path) -> Path:
    """Create a temporary package.json with eslint as dev dependency."""
    content = {
        "name": "@acme/super-server",
        "version": "1.6.12",
        "dependencies": {"express": "^4.17.1"},
        "devDependencies": {"eslint": "^7.18.0", "jest": "^26.6.3"},
    }
    package_json = tmp_path / "package.json"
    package_json.write_text(json.dumps(content, indent=2))
    return package_json


@pytest.fixture
def source_files() -> list[FileChange]:
    """A change set touching shipped code alongside tooling."""
    return [
        FileChange(filename=".github/workflows/ci.yml", patch="@@ -1 +1 @@"),
        FileChange(filename="src/index.ts", patch="+export const answer = 42;"),
        FileChange(filename="src/__tests__/index.spec.ts", patch="+it('works')"),
    ]


@pytest.fixture
def run_options() -> RunOptions:
    return RunOptions(
        github_ref="refs/heads/master",
        github_token="github.token",
        github_email="john@doe.co",
        github_user="release-bot",
        version_enabled=True,
        base_branch="master",
    )


@pytest.fixture
def event_context() -> EventContext:
    return EventContext(
        repository="jdoe/foo",
        actor="jdoe",
        commits=[":sparkles: add answer"],
    )
