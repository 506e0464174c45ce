"""Tests for release_bot.config."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from release_bot.config import (
    is_truthy,
    load_event_commits,
    load_event_context,
    split_repository,
)
from release_bot.exceptions import ConfigurationError


class TestIsTruthy:
    @pytest.mark.parametrize("value", ["true", "True", " TRUE "])
    def test_true(self, value: str) -> None:
        assert is_truthy(value)

    @pytest.mark.parametrize("value", ["", "false", "1", "yes"])
    def test_false(self, value: str) -> None:
        assert not is_truthy(value)


class TestSplitRepository:
    def test_valid(self) -> None:
        assert split_repository("jdoe/foo") == ("jdoe", "foo")

    @pytest.mark.parametrize("slug", ["", "foo", "jdoe/", "/foo", "a/b/c"])
    def test_invalid(self, slug: str) -> None:
        with pytest.raises(ConfigurationError):
            split_repository(slug)


class TestLoadEventCommits:
    def test_without_path(self) -> None:
        assert load_event_commits(None) == []

    def test_push_payload(self, tmp_path: Path) -> None:
        event = tmp_path / "event.json"
        event.write_text(
            json.dumps({"commits": [{"id": "abc", "message": ":bookmark: v0.0.1"}]})
        )
        assert load_event_commits(str(event)) == [":bookmark: v0.0.1"]

    def test_payload_without_commits(self, tmp_path: Path) -> None:
        event = tmp_path / "event.json"
        event.write_text(json.dumps({"inputs": {}}))
        assert load_event_commits(str(event)) == []

    def test_unreadable_payload(self, tmp_path: Path) -> None:
        event = tmp_path / "event.json"
        event.write_text("{")
        with pytest.raises(ConfigurationError, match="Cannot read event payload"):
            load_event_commits(str(event))

    def test_missing_payload(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError):
            load_event_commits(str(tmp_path / "missing.json"))

    @pytest.mark.parametrize(
        "commits",
        [["not a commit"], [{"id": "abc", "message": None}], {"message": "x"}],
    )
    def test_malformed_commits(self, tmp_path: Path, commits: object) -> None:
        event = tmp_path / "event.json"
        event.write_text(json.dumps({"commits": commits}))
        with pytest.raises(ConfigurationError, match="Malformed event payload"):
            load_event_commits(str(event))

    def test_commit_without_message(self, tmp_path: Path) -> None:
        event = tmp_path / "event.json"
        event.write_text(json.dumps({"commits": [{"id": "abc"}]}))
        assert load_event_commits(str(event)) == [""]


def test_load_event_context(tmp_path: Path) -> None:
    event = tmp_path / "event.json"
    event.write_text(json.dumps({"commits": [{"message": ":bug: fix"}]}))

    context = load_event_context(
        {
            "GITHUB_REPOSITORY": "jdoe/foo",
            "GITHUB_ACTOR": "jdoe",
            "GITHUB_EVENT_PATH": str(event),
        }
    )

    assert context.repository == "jdoe/foo"
    assert context.actor == "jdoe"
    assert context.commits == [":bug: fix"]


def test_load_event_context_reads_os_environ(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("GITHUB_REPOSITORY", "acme/bar")
    monkeypatch.delenv("GITHUB_ACTOR", raising=False)
    monkeypatch.delenv("GITHUB_EVENT_PATH", raising=False)

    context = load_event_context()

    assert context.repository == "acme/bar"
    assert context.actor == ""
    assert context.commits == []
