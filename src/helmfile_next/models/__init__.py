"""Data models for helmfile-next-version."""

from __future__ import annotations

import enum


class StatusFilter(enum.Enum):
    ALL = "all"
    OUTDATED = "outdated"
    LATEST = "latest"

    @classmethod
    def from_str(cls, s: str) -> StatusFilter:
        for member in cls:
            if member.value == s.lower():
                return member
        valid = "|".join(m.value for m in cls)
        raise ValueError(f"invalid status filter {s!r}, expected one of [{valid}]")


class UpdateType(enum.Enum):
    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    UP_TO_DATE = "up-to-date"
    UNKNOWN = "unknown"
