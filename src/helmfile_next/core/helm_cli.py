"""Thin wrapper around the ``helm`` binary for repository lookups."""

from __future__ import annotations

import logging
import os
import signal
import subprocess
import threading
from typing import Callable

import yaml

from helmfile_next.config.settings import settings
from helmfile_next.errors import ChartNotFoundError, LookupFailedError, RegistryResponseError
from helmfile_next.models.chart import ChartLookupResult
from helmfile_next.models.release import ReleaseDeclaration

logger = logging.getLogger(__name__)

LineCallback = Callable[[str], None]


class HelmCli:
    """Runs ``helm repo update`` and ``helm search repo`` as subprocesses.

    Each call is synchronous and independent, so one instance can be shared
    by concurrent lookups.
    """

    def __init__(self, binary: str | None = None, timeout: float | None = None):
        self.binary = binary or settings.helm_binary
        if timeout is None:
            timeout = settings.timeout_or_none
        # 0 (or less) waits forever
        self.timeout = timeout if timeout and timeout > 0 else None

    def refresh_repositories(self, on_line: LineCallback | None = None) -> None:
        """Run ``helm repo update``, passing each stdout line to ``on_line`` as it arrives.

        The timeout covers the whole run, streaming included; on expiry the
        process is killed.
        """
        cmd = [self.binary, "repo", "update"]
        logger.debug("Running %s", " ".join(cmd))
        try:
            proc = subprocess.Popen(
                cmd,
                stdout=subprocess.PIPE,
                text=True,
                start_new_session=True,
            )
        except OSError as e:
            raise LookupFailedError(f"failed to start command {' '.join(cmd)}: {e}") from e

        expired = threading.Event()

        def _kill() -> None:
            expired.set()
            # children of helm (plugins) share the stdout pipe
            try:
                if hasattr(os, "killpg"):
                    os.killpg(proc.pid, signal.SIGKILL)
                else:
                    proc.kill()
            except ProcessLookupError:
                pass

        timer = threading.Timer(self.timeout, _kill) if self.timeout else None
        with proc:
            if timer:
                timer.start()
            try:
                assert proc.stdout is not None
                for line in proc.stdout:
                    if on_line:
                        on_line(line.rstrip("\n"))
                proc.wait()
            finally:
                if timer:
                    timer.cancel()

        if expired.is_set():
            raise LookupFailedError(f"'{' '.join(cmd)}' timed out after {self.timeout}s")
        if proc.returncode != 0:
            raise LookupFailedError(
                f"'{' '.join(cmd)}' exited with code {proc.returncode}"
            )

    def search(self, chart: str) -> list[ChartLookupResult]:
        """Return ``helm search repo`` hits for ``chart``, best match first."""
        cmd = [self.binary, "search", "repo", chart, "--output", "yaml"]
        logger.debug("Running %s", " ".join(cmd))
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            raise LookupFailedError(f"search for chart {chart} timed out after {self.timeout}s") from e
        except OSError as e:
            raise LookupFailedError(f"failed to search for chart {chart}: {e}") from e

        if result.returncode != 0:
            raise LookupFailedError(
                f"failed to search for chart {chart}: {result.stderr.strip() or f'exit code {result.returncode}'}"
            )
        return parse_search_output(chart, result.stdout)

    def lookup(self, release: ReleaseDeclaration) -> ChartLookupResult:
        """Find the newest chart available for ``release``.

        Local chart paths are never searched; they report their own version.
        """
        release = release.with_installed_default()
        if release.is_local_chart:
            return ChartLookupResult(
                name=release.chart,
                version=release.version,
                installed=release.installed,
            )

        charts = self.search(release.chart)
        if not charts:
            raise ChartNotFoundError(f"chart {release.chart} not found")
        return charts[0]


def parse_search_output(chart: str, output: str) -> list[ChartLookupResult]:
    """Parse the YAML list printed by ``helm search repo --output yaml``."""
    try:
        data = yaml.safe_load(output)
    except yaml.YAMLError as e:
        raise RegistryResponseError(f"failed to parse search output for chart {chart}: {e}") from e

    if data is None:
        return []
    if not isinstance(data, list) or not all(isinstance(d, dict) for d in data):
        raise RegistryResponseError(f"unexpected search output for chart {chart}: expected a list of charts")
    return [ChartLookupResult.from_dict(d) for d in data]
