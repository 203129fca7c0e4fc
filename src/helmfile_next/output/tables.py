"""Rich table builders for each command."""

from __future__ import annotations

from rich.table import Table

from helmfile_next.errors import ReleaseFailure
from helmfile_next.models.comparison import ReleaseComparison
from helmfile_next.models.release import ReleaseDeclaration
from helmfile_next.output.themes import STATUS_CURRENT, STATUS_UPDATE, styled_update_type


def comparison_table(comparisons: list[ReleaseComparison]) -> Table:
    table = Table(title="Chart Updates", expand=True)
    table.add_column("Release", style="bold white", no_wrap=True)
    table.add_column("Chart", style="magenta", no_wrap=True)
    table.add_column("Current", style="dim")
    table.add_column("Latest", style="bold")
    table.add_column("Update Type", no_wrap=True)
    table.add_column("Status", justify="center", no_wrap=True)

    for c in comparisons:
        table.add_row(
            c.name,
            c.current.chart,
            c.current.version,
            c.latest.version,
            styled_update_type(c.update_type),
            STATUS_UPDATE if c.has_update else STATUS_CURRENT,
        )
    return table


def release_list_table(releases: list[ReleaseDeclaration]) -> Table:
    table = Table(title="Helmfile Releases", expand=True)
    table.add_column("Release", style="bold white", no_wrap=True)
    table.add_column("Chart", style="magenta", no_wrap=True)
    table.add_column("Version", style="cyan")
    table.add_column("Installed", style="dim")

    for r in releases:
        installed = "-" if r.installed is None else str(r.installed).lower()
        table.add_row(r.name, r.chart, r.version, installed)
    return table


def failure_table(failures: list[ReleaseFailure]) -> Table:
    table = Table(title="Failed Lookups", title_style="red bold", expand=True)
    table.add_column("Release", style="bold white", no_wrap=True)
    table.add_column("Error", style="red")
    for f in failures:
        table.add_row(f.name, str(f.error))
    return table
