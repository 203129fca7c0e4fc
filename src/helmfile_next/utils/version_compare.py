"""Semver comparison utilities."""

from __future__ import annotations

import logging

import semver

from helmfile_next.models import UpdateType

logger = logging.getLogger(__name__)


def strip_marker(v: str) -> str:
    """Remove a single leading ``v`` marker."""
    return v[1:] if v.startswith("v") else v


def parse_version(v: str) -> semver.Version | None:
    """Parse a semver string, returning None on failure.

    Missing minor and patch parts read as zero (``1.2`` is ``1.2.0``).
    Build metadata is kept but never affects ordering.
    """
    try:
        return semver.Version.parse(strip_marker(v.strip()), optional_minor_and_patch=True)
    except (ValueError, TypeError):
        return None


def has_newer(current: str, latest: str, release: str = "") -> bool:
    """Return True if latest is strictly newer than current.

    Unparseable versions never count as an update; they are logged against
    ``release`` and otherwise ignored.
    """
    cur_text = strip_marker(current)
    lat_text = strip_marker(latest)
    if cur_text == lat_text:
        return False

    cur = parse_version(cur_text)
    if cur is None:
        logger.warning("Failed to parse current version %s %s", release, current)
        return False
    lat = parse_version(lat_text)
    if lat is None:
        logger.warning("Failed to parse latest version %s %s", release, latest)
        return False
    return cur < lat


def classify_update(current: str, latest: str) -> UpdateType:
    """Classify the update between two version strings."""
    if strip_marker(current) == strip_marker(latest):
        return UpdateType.UP_TO_DATE
    cur = parse_version(current)
    lat = parse_version(latest)

    if cur is None or lat is None:
        return UpdateType.UNKNOWN
    if lat <= cur:
        return UpdateType.UP_TO_DATE
    if lat.major > cur.major:
        return UpdateType.MAJOR
    if lat.minor > cur.minor:
        return UpdateType.MINOR
    return UpdateType.PATCH
