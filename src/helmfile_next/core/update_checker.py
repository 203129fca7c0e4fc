"""Compare pinned chart versions against the newest versions in the helm repos."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, Sequence

from helmfile_next.core.helm_cli import HelmCli
from helmfile_next.errors import ReleaseFailure, UpdateCheckError
from helmfile_next.models.comparison import ComparisonSet, ReleaseComparison
from helmfile_next.models.release import ReleaseDeclaration

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int, str], None]


def check_updates(
    releases: Sequence[ReleaseDeclaration],
    gateway: HelmCli | None = None,
    max_workers: int | None = None,
    on_progress: ProgressCallback | None = None,
) -> tuple[ComparisonSet, UpdateCheckError | None]:
    """Look up every release concurrently and compare versions.

    One lookup is started per release; ``max_workers`` caps the pool when
    set. Every lookup runs to completion. Failed releases leave a ``None``
    slot at their manifest index and are collected into the returned
    :class:`UpdateCheckError`.
    """
    total = len(releases)
    slots: list[ReleaseComparison | None] = [None] * total
    if total == 0:
        return ComparisonSet(slots), None

    gateway = gateway or HelmCli()
    workers = min(max_workers, total) if max_workers else total
    logger.debug("Checking %d release(s) with %d worker(s)", total, workers)

    failures: list[ReleaseFailure] = []
    # Results are gathered here, in the calling thread, so slots and
    # failures have a single writer.
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="lookup") as executor:
        futures = {
            executor.submit(_compare_release, gateway, release): i
            for i, release in enumerate(releases)
        }
        for done, future in enumerate(as_completed(futures), 1):
            i = futures[future]
            release = releases[i]
            try:
                slots[i] = future.result()
            except Exception as e:
                logger.warning("Failed to get release comparison for release %s: %s", release.name, e)
                failures.append(ReleaseFailure(index=i, name=release.name, error=e))
            if on_progress:
                on_progress(done, total, release.name)

    error = UpdateCheckError(failures) if failures else None
    return ComparisonSet(slots), error


def has_updates(comparisons: ComparisonSet) -> bool:
    """True if any populated comparison has a newer chart version."""
    return comparisons.has_updates


def _compare_release(gateway: HelmCli, release: ReleaseDeclaration) -> ReleaseComparison:
    current = release.with_installed_default()
    chart = gateway.lookup(current)
    return ReleaseComparison.from_lookup(current, chart)
