"""Tests for release_bot.versions."""

from __future__ import annotations

import pytest
from conftest import make_commit

from release_bot.exceptions import NoCommitsAvailableError
from release_bot.models import BumpType
from release_bot.versions import detect_bump_type, next_version, parse_version


class TestDetectBumpType:
    def test_no_commits(self) -> None:
        with pytest.raises(NoCommitsAvailableError, match="Failed to access commits"):
            detect_bump_type([])

    @pytest.mark.parametrize(
        "message",
        [
            ":sparkles: feat something",
            ":sparkles: minor something else",
            ":sparkles: something else",
            "feat: add login",
            "chore: minor cleanup",
        ],
    )
    def test_minor(self, message: str) -> None:
        assert detect_bump_type([make_commit(message)]) is BumpType.MINOR

    @pytest.mark.parametrize(
        "message",
        [":arrow_up: bump bar@1.0", ":bug: fix crash", "Merge pull request #4"],
    )
    def test_patch(self, message: str) -> None:
        assert detect_bump_type([make_commit(message)]) is BumpType.PATCH

    def test_only_last_commit_counts(self) -> None:
        commits = [make_commit(":sparkles: new api"), make_commit(":bug: fix crash")]
        assert detect_bump_type(commits) is BumpType.PATCH

    def test_only_first_line_counts(self) -> None:
        commit = make_commit(":bug: fix crash\n\nfound while adding a feature")
        assert detect_bump_type([commit]) is BumpType.PATCH

    def test_never_major(self) -> None:
        commit = make_commit(":boom: BREAKING CHANGE: drop node 10")
        assert detect_bump_type([commit]) is BumpType.PATCH


class TestParseVersion:
    def test_full_semver(self) -> None:
        v = parse_version("1.2.3")
        assert (v.major, v.minor, v.patch) == (1, 2, 3)

    def test_two_part_version(self) -> None:
        v = parse_version("1.2")
        assert (v.major, v.minor, v.patch) == (1, 2, 0)

    def test_leading_v(self) -> None:
        v = parse_version("v3.0.1")
        assert (v.major, v.minor, v.patch) == (3, 0, 1)

    def test_prerelease_is_kept(self) -> None:
        v = parse_version("2.0-beta.1")
        assert str(v) == "2.0.0-beta.1"

    def test_invalid(self) -> None:
        with pytest.raises(ValueError):
            parse_version("next")


class TestNextVersion:
    def test_patch(self) -> None:
        assert next_version("1.6.12", BumpType.PATCH) == "1.6.13"

    def test_minor(self) -> None:
        assert next_version("1.6.12", BumpType.MINOR) == "1.7.0"

    def test_major(self) -> None:
        assert next_version("1.6.12", BumpType.MAJOR) == "2.0.0"

    def test_short_version(self) -> None:
        assert next_version("1", BumpType.PATCH) == "1.0.1"

    @pytest.mark.parametrize(
        ("current", "bump_type", "expected"),
        [
            ("1.2.3-rc.1", BumpType.PATCH, "1.2.3"),
            ("1.3.0-rc.1", BumpType.MINOR, "1.3.0"),
            ("1.2.3-rc.1", BumpType.MINOR, "1.3.0"),
            ("2.0.0-beta.2", BumpType.MAJOR, "2.0.0"),
            ("2.1.0-beta.2", BumpType.MAJOR, "3.0.0"),
            ("1.2.3+build.5", BumpType.PATCH, "1.2.4"),
        ],
    )
    def test_prerelease(self, current: str, bump_type: BumpType, expected: str) -> None:
        assert next_version(current, bump_type) == expected
