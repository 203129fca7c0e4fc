"""Table / JSON / YAML output dispatch."""

from __future__ import annotations

import json
from typing import Any

import yaml
from rich.console import Console

from helmfile_next.errors import UpdateCheckError
from helmfile_next.models import StatusFilter
from helmfile_next.models.comparison import ComparisonSet, ReleaseComparison
from helmfile_next.models.release import ReleaseDeclaration

console = Console()
err_console = Console(stderr=True)


def _comparison_to_dict(c: ReleaseComparison) -> dict[str, Any]:
    return {
        "name": c.name,
        "chart": c.current.chart,
        "current_version": c.current.version,
        "latest_chart": c.latest.chart,
        "latest_version": c.latest.version,
        "latest_app_version": c.latest_app_version,
        "update_type": c.update_type.value,
        "has_update": c.has_update,
    }


def _release_to_dict(r: ReleaseDeclaration) -> dict[str, Any]:
    return {
        "name": r.name,
        "chart": r.chart,
        "version": r.version,
        "installed": r.installed,
    }


def _failures_to_list(error: UpdateCheckError | None) -> list[dict[str, str]]:
    if error is None:
        return []
    return [{"name": f.name, "error": str(f.error)} for f in error.failures]


def output_comparisons(
    comparisons: ComparisonSet,
    status: StatusFilter,
    fmt: str,
    error: UpdateCheckError | None = None,
) -> None:
    selected = comparisons.filter(status)
    if fmt in ("json", "yaml"):
        data = {
            "has_updates": comparisons.has_updates,
            "releases": [_comparison_to_dict(c) for c in selected],
            "failures": _failures_to_list(error),
        }
        if fmt == "json":
            console.print_json(json.dumps(data, indent=2))
        else:
            console.print(yaml.safe_dump(data, default_flow_style=False, sort_keys=False), markup=False)
        return

    from helmfile_next.output.tables import comparison_table, failure_table

    if comparisons.has_updates:
        console.print(comparison_table(selected))
    elif comparisons.comparisons:
        console.print("[green]Charts are up-to-date 🎉[/green]")

    if error is not None:
        err_console.print(failure_table(error.failures))


def output_releases(releases: list[ReleaseDeclaration], fmt: str) -> None:
    if fmt == "json":
        data = [_release_to_dict(r) for r in releases]
        console.print_json(json.dumps(data, indent=2))
    elif fmt == "yaml":
        data = [_release_to_dict(r) for r in releases]
        console.print(yaml.safe_dump(data, default_flow_style=False, sort_keys=False), markup=False)
    else:
        from helmfile_next.output.tables import release_list_table
        console.print(release_list_table(releases))
