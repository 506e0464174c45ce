"""package.json reading utilities.

The manifest is read once per run from the working tree root. Only the
current version and the dev dependency names matter to the pipeline.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from .exceptions import ManifestUnreadableError
from .models import Manifest
from .shell import debug

MANIFEST_NAME = "package.json"


def load_manifest(root: Path | None = None) -> Manifest:
    """Load and parse package.json from the given directory.

    Args:
        root: Directory holding package.json. Defaults to the current
              working directory.

    Raises:
        ManifestUnreadableError: If the file is missing, is not valid JSON,
            or has fields of the wrong type.
    """
    path = (root or Path.cwd()).resolve() / MANIFEST_NAME
    debug(f"📦 package.json path: {path}")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ManifestUnreadableError(f"Cannot read {path}: {e}") from e

    if not isinstance(data, dict):
        raise ManifestUnreadableError(f"{path} does not contain a JSON object")

    try:
        return Manifest(
            version=data.get("version"),
            dev_dependencies=data.get("devDependencies") or {},
        )
    except ValidationError as e:
        raise ManifestUnreadableError(f"Malformed {path}: {e}") from e


def get_current_version(root: Path | None = None) -> str:
    """Return the version declared in package.json.

    Raises:
        ManifestUnreadableError: If package.json has no version.
    """
    manifest = load_manifest(root)
    if manifest.version is None:
        raise ManifestUnreadableError(f"No version declared in {MANIFEST_NAME}")
    return manifest.version


def get_dev_dependencies(root: Path | None = None) -> set[str]:
    """Return the names of the dev dependencies, empty if none are declared."""
    return set(load_manifest(root).dev_dependencies)
