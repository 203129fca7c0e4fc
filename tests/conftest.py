"""Shared fixtures: a fake helm gateway and a helmfile writer."""

import threading
import time
from pathlib import Path

import pytest

from helmfile_next.core.helm_cli import HelmCli
from helmfile_next.errors import LookupFailedError
from helmfile_next.models.chart import ChartLookupResult


class FakeHelm(HelmCli):
    """HelmCli whose search answers from a dict instead of running helm."""

    def __init__(self, charts=None, delays=None, broken=()):
        super().__init__(binary="helm", timeout=1)
        self.charts = charts or {}
        self.delays = delays or {}
        self.broken = set(broken)
        self.searched = []
        self.completed = []
        self.refreshed = 0
        self._lock = threading.Lock()

    def search(self, chart):
        with self._lock:
            self.searched.append(chart)
        time.sleep(self.delays.get(chart, 0))
        with self._lock:
            self.completed.append(chart)
        if chart in self.broken:
            raise LookupFailedError(f"failed to search for chart {chart}: boom")
        return [ChartLookupResult(name=name, version=version) for name, version in self.charts.get(chart, [])]

    def refresh_repositories(self, on_line=None):
        self.refreshed += 1
        if on_line:
            on_line("Hang tight while we grab the latest from your chart repositories...")
            on_line("Update Complete. ⎈Happy Helming!⎈")


@pytest.fixture
def fake_helm():
    return FakeHelm(charts={"repoA/a": [("repoA/a", "1.1.0"), ("repoA/a-extra", "0.1.0")]})


@pytest.fixture
def write_helmfile(tmp_path):
    def _write(content: str) -> Path:
        path = tmp_path / "helmfile.yaml"
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def example_helmfile(write_helmfile):
    return write_helmfile(
        """
releases:
  - name: a
    chart: repoA/a
    version: 1.0.0
  - name: b
    chart: ./local/b
    version: 2.0.0
"""
    )
