"""Exception hierarchy for helmfile-next-version."""

from __future__ import annotations

from dataclasses import dataclass


class HelmfileNextError(Exception):
    """Base class for every error raised by this package."""


class ManifestNotFoundError(HelmfileNextError):
    """The helmfile path does not point at a readable file."""


class ManifestParseError(HelmfileNextError):
    """The helmfile is not a mapping with a ``releases`` sequence."""


class ChartNotFoundError(HelmfileNextError):
    """A registry search returned no chart for the reference."""


class RegistryResponseError(HelmfileNextError):
    """The registry search output could not be parsed."""


class LookupFailedError(HelmfileNextError):
    """An external helm command failed to run or exited non-zero."""


@dataclass(frozen=True)
class ReleaseFailure:
    """A lookup failure pinned to the release's position in the manifest."""

    index: int
    name: str
    error: Exception

    def __str__(self) -> str:
        return f"release {self.name!r}: {self.error}"


class UpdateCheckError(HelmfileNextError):
    """Aggregate of every per-release lookup failure from one run."""

    def __init__(self, failures: list[ReleaseFailure]):
        self.failures = sorted(failures, key=lambda f: f.index)
        lines = "\n".join(f"  - {f}" for f in self.failures)
        super().__init__(f"{len(self.failures)} release lookup(s) failed:\n{lines}")

    @property
    def release_names(self) -> list[str]:
        return [f.name for f in self.failures]
