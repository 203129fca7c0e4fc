"""Helmfile release declarations."""

from __future__ import annotations

from dataclasses import dataclass, replace

LOCAL_CHART_PREFIXES = ("/", "./", "../")


@dataclass(frozen=True)
class ReleaseDeclaration:
    """One entry of the helmfile ``releases`` list, exactly as written.

    ``installed`` stays ``None`` when the key is absent; use
    :meth:`with_installed_default` at the point of use.
    """

    name: str
    chart: str
    version: str
    installed: bool | None = None

    @property
    def is_local_chart(self) -> bool:
        return self.chart.startswith(LOCAL_CHART_PREFIXES)

    def with_installed_default(self) -> ReleaseDeclaration:
        """Return a copy whose ``installed`` defaults to True when unset."""
        if self.installed is not None:
            return self
        return replace(self, installed=True)

    @classmethod
    def from_dict(cls, d: dict) -> ReleaseDeclaration:
        installed = d.get("installed")
        return cls(
            name=_as_text(d.get("name")),
            chart=_as_text(d.get("chart")),
            version=_as_text(d.get("version")),
            installed=None if installed is None else bool(installed),
        )


def _as_text(value: object) -> str:
    # YAML turns unquoted ``1.0`` into a float
    if value is None:
        return ""
    return str(value)
