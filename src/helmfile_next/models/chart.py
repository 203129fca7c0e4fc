"""Chart records returned by ``helm search repo``."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ChartLookupResult:
    name: str
    version: str
    installed: bool | None = None
    app_version: str = ""

    @classmethod
    def from_dict(cls, d: dict) -> ChartLookupResult:
        installed = d.get("installed")
        return cls(
            name=str(d.get("name", "")),
            version=str(d.get("version", "")),
            installed=None if installed is None else bool(installed),
            app_version=str(d.get("app_version", "") or ""),
        )
