"""Current-versus-latest comparisons for helmfile releases."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from helmfile_next.models import StatusFilter, UpdateType
from helmfile_next.models.chart import ChartLookupResult
from helmfile_next.models.release import ReleaseDeclaration
from helmfile_next.utils.version_compare import classify_update, has_newer


@dataclass(frozen=True)
class ReleaseComparison:
    current: ReleaseDeclaration
    latest: ReleaseDeclaration
    latest_app_version: str = ""

    @property
    def name(self) -> str:
        return self.current.name

    @property
    def has_update(self) -> bool:
        return has_newer(self.current.version, self.latest.version, release=self.name)

    @property
    def update_type(self) -> UpdateType:
        return classify_update(self.current.version, self.latest.version)

    @classmethod
    def from_lookup(cls, current: ReleaseDeclaration, chart: ChartLookupResult) -> ReleaseComparison:
        """Pair a release with its lookup result, keeping the release's own name."""
        return cls(
            current=current,
            latest=ReleaseDeclaration(
                name=current.name,
                chart=chart.name,
                version=chart.version,
                installed=chart.installed,
            ),
            latest_app_version=chart.app_version,
        )


@dataclass
class ComparisonSet:
    """Comparisons in manifest order.

    A ``None`` slot marks a release whose lookup failed; the matching
    failure is reported in the run's :class:`~helmfile_next.errors.UpdateCheckError`.
    """

    slots: list[ReleaseComparison | None] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.slots)

    def __getitem__(self, index: int) -> ReleaseComparison | None:
        return self.slots[index]

    def __iter__(self) -> Iterator[ReleaseComparison | None]:
        return iter(self.slots)

    @property
    def comparisons(self) -> list[ReleaseComparison]:
        """The populated slots, gaps dropped."""
        return [c for c in self.slots if c is not None]

    @property
    def has_gaps(self) -> bool:
        return any(c is None for c in self.slots)

    @property
    def has_updates(self) -> bool:
        return any(c.has_update for c in self.comparisons)

    def filter(self, status: StatusFilter) -> list[ReleaseComparison]:
        """Select comparisons for display without changing the set."""
        if status is StatusFilter.OUTDATED:
            return [c for c in self.comparisons if c.has_update]
        if status is StatusFilter.LATEST:
            return [c for c in self.comparisons if not c.has_update]
        return self.comparisons
