"""Read the release list out of a helmfile."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from helmfile_next.errors import ManifestNotFoundError, ManifestParseError
from helmfile_next.models.release import ReleaseDeclaration

logger = logging.getLogger(__name__)

_REQUIRED_KEYS = ("name", "chart")


def load_helmfile(path: str | Path) -> list[ReleaseDeclaration]:
    """Parse ``path`` into release declarations, in document order."""
    path = Path(path)
    if not path.is_file():
        raise ManifestNotFoundError(f"file {path} does not exist")

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ManifestNotFoundError(f"failed to read file {path}: {e}") from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ManifestParseError(f"failed to parse YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ManifestParseError(f"{path}: expected a mapping at the top level")

    raw_releases = data.get("releases") or []
    if not isinstance(raw_releases, list):
        raise ManifestParseError(f"{path}: 'releases' must be a list")

    releases = [_parse_release(path, i, raw) for i, raw in enumerate(raw_releases)]
    logger.debug("Loaded %d release(s) from %s", len(releases), path)
    return releases


def _parse_release(path: Path, index: int, raw: object) -> ReleaseDeclaration:
    if not isinstance(raw, dict):
        raise ManifestParseError(f"{path}: releases[{index}] must be a mapping")
    for key in _REQUIRED_KEYS:
        value = raw.get(key)
        if value is None or isinstance(value, (dict, list)):
            raise ManifestParseError(f"{path}: releases[{index}] is missing a scalar '{key}'")
    # an omitted version is kept as "" and never reports an update
    if isinstance(raw.get("version"), (dict, list)):
        raise ManifestParseError(f"{path}: releases[{index}].version must be a scalar")
    installed = raw.get("installed")
    if installed is not None and not isinstance(installed, bool):
        raise ManifestParseError(f"{path}: releases[{index}].installed must be a boolean")
    return ReleaseDeclaration.from_dict(raw)
