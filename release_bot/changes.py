"""Decide whether the changes since the last release deserve a new version.

Two independent gates can suppress a release:
1. Commit level: every non-merge commit is a dev dependency bump.
2. File level: every changed file is tooling, docs, tests, or a bare
   version bump of package.json.
The file gate is only evaluated once the commit gate has let the change
set through.
"""

from __future__ import annotations

from collections.abc import Iterable

from .manifest import get_dev_dependencies
from .models import Comparison
from .rules import (
    extract_dependency,
    is_dependency_update,
    is_merge_commit,
    is_unworthy_file,
)
from .shell import debug, info


def are_changes_worth_release(
    comparison: Comparison,
    dev_dependencies: Iterable[str] | None = None,
) -> bool:
    """Check whether a comparison contains release-worthy changes.

    Args:
        comparison: Commits and files between the last release and HEAD.
        dev_dependencies: Names of dev dependencies. Read from package.json
                          when not given.

    Returns:
        True if at least one changed file falls outside the exclusion rules
        and the commits are not exclusively dev dependency bumps.
    """
    commits = comparison.commits
    non_merge_commits = [c for c in commits if not is_merge_commit(c)]
    info(f"↩️ Non merge commits found {len(non_merge_commits)}")
    for commit in commits:
        info(f"📦 {commit.title}")

    dev_deps = set(get_dev_dependencies() if dev_dependencies is None else dev_dependencies)
    info(f"📦👨‍💻 Dev dependencies : {','.join(sorted(dev_deps))}")

    dev_dependency_updates = [
        dependency
        for dependency in (
            extract_dependency(c) for c in non_merge_commits if is_dependency_update(c)
        )
        if dependency in dev_deps
    ]
    for dependency in dev_dependency_updates:
        info(f"📦👨‍💻 {dependency}")

    if len(dev_dependency_updates) == len(non_merge_commits):
        info("👨‍💻 Commits contain only dev dependencies update")
        return False

    files = comparison.files
    if not files:
        return False

    worthy_files = [f for f in files if not is_unworthy_file(f)]
    debug(f"📄 Updated files: {','.join(f.filename for f in files)}")
    debug(f"📄 Worthy release files: {','.join(f.filename for f in worthy_files)}")
    return len(worthy_files) > 0
