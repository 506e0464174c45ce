"""GitHub REST API access.

GitHubClient wraps the handful of endpoints the pipeline needs. The two
functions below it (release history and the dependency PR gate) take a
client so tests can hand in one backed by httpx.MockTransport.
"""

from __future__ import annotations

from typing import Any

import httpx

from .config import split_repository
from .models import Commit, Comparison, FileChange, PullRequestSummary
from .rules import DEPENDENCIES_LABEL
from .shell import info, warning

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_TIMEOUT = 30.0


class GitHubClient:
    """Minimal GitHub client bound to one repository.

    Args:
        token: Token sent as a bearer credential.
        repository: Repository slug "owner/repo".
        api_url: API root, overridable for GitHub Enterprise.
        transport: Optional httpx transport (used by tests).
    """

    def __init__(
        self,
        token: str,
        repository: str,
        api_url: str = DEFAULT_API_URL,
        transport: httpx.BaseTransport | None = None,
    ):
        self.owner, self.repo = split_repository(repository)
        self._http = httpx.Client(
            base_url=api_url.rstrip("/"),
            headers={
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
            },
            timeout=DEFAULT_TIMEOUT,
            transport=transport,
        )

    def __enter__(self) -> GitHubClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    @property
    def _repo_path(self) -> str:
        return f"/repos/{self.owner}/{self.repo}"

    def _get(self, path: str, params: dict[str, Any] | None = None) -> httpx.Response:
        response = self._http.get(path, params=params)
        response.raise_for_status()
        return response

    def list_tags(self, per_page: int = 30) -> list[dict[str, Any]]:
        """List tags, most recent first."""
        return self._get(f"{self._repo_path}/tags", {"per_page": per_page}).json()

    def list_commits(self) -> list[dict[str, Any]]:
        """List the first page of commits on the default branch, newest first."""
        return self._get(f"{self._repo_path}/commits").json()

    def compare_commits(self, base: str, head: str) -> dict[str, Any]:
        """Compare two refs; the response holds commits, files and diff_url."""
        return self._get(f"{self._repo_path}/compare/{base}...{head}").json()

    def list_pull_requests(self, state: str = "open") -> list[dict[str, Any]]:
        """List every pull request in the given state, following pagination."""
        pulls: list[dict[str, Any]] = []
        url: str | None = f"{self._repo_path}/pulls"
        params: dict[str, Any] | None = {"state": state, "per_page": 100}
        while url:
            response = self._get(url, params)
            pulls.extend(response.json())
            url = response.links.get("next", {}).get("url")
            # The next link already carries the query string
            params = None
        return pulls


def retrieve_changes_since_last_release(client: GitHubClient) -> Comparison:
    """Fetch the commits and files changed since the last release.

    The base is the most recent tag. Without any tag it falls back to the
    oldest commit of the first page of history, which is not necessarily
    the root commit of a long history.

    Args:
        client: Client bound to the repository being released.

    Returns:
        Comparison between the base and the newest commit.
    """
    tags = client.list_tags(per_page=1)
    last_commits = client.list_commits()
    if not last_commits:
        warning("🙈 No commit found on the default branch")
        return Comparison()

    head = last_commits[0]["sha"]
    base = tags[0]["name"] if tags else last_commits[-1]["sha"]

    info(f"🏷 Retrieving commits since {base}")
    data = client.compare_commits(base, head)
    info(f"🔗 Diff url : {data.get('diff_url')}")
    return Comparison(
        commits=[Commit.from_api(c) for c in data.get("commits") or []],
        files=[FileChange.from_api(f) for f in data.get("files") or []],
    )


def has_pending_dependency_prs_open(client: GitHubClient) -> bool:
    """True if any open pull request carries the "dependencies" label."""
    open_prs = [PullRequestSummary.from_api(pr) for pr in client.list_pull_requests("open")]
    return any(DEPENDENCIES_LABEL in pr.labels for pr in open_prs)
