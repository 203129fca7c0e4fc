"""Application configuration and defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass, field


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "")
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_int(name: str) -> int | None:
    raw = os.environ.get(name, "")
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        return None
    return value if value > 0 else None


@dataclass
class Settings:
    helm_binary: str = field(default_factory=lambda: os.environ.get("HELM_BIN", "") or "helm")
    manifest_path: str = field(
        default_factory=lambda: os.environ.get("HELMFILE_FILE", "") or "helmfile.yaml"
    )
    # seconds per helm call; 0 waits forever
    lookup_timeout: float = field(default_factory=lambda: _env_float("HELMFILE_NEXT_TIMEOUT", 60.0))
    # None launches one worker per release
    max_workers: int | None = field(default_factory=lambda: _env_int("HELMFILE_NEXT_MAX_WORKERS"))
    default_output: str = "table"

    @property
    def timeout_or_none(self) -> float | None:
        return self.lookup_timeout if self.lookup_timeout > 0 else None


# Global singleton
settings = Settings()
