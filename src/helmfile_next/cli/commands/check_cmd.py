"""helmfile-next-version check - Compare pinned chart versions with the helm repos."""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console

from helmfile_next.cli.options import OutputOption, PathOption, TimeoutOption
from helmfile_next.config.settings import settings
from helmfile_next.core.helm_cli import HelmCli
from helmfile_next.core.manifest_loader import load_helmfile
from helmfile_next.core.update_checker import check_updates
from helmfile_next.errors import HelmfileNextError
from helmfile_next.models import StatusFilter
from helmfile_next.output.formatters import output_comparisons

app = typer.Typer()
console = Console()
err_console = Console(stderr=True)


@app.callback(invoke_without_command=True)
def check(
    path: str = PathOption,
    status: str = typer.Option("all", "--status", "-s", help="Filter releases by status: all, latest, outdated"),
    update_repos: bool = typer.Option(False, "--update-repos", "-u", help="Run 'helm repo update' first"),
    output: str = OutputOption,
    timeout: Optional[float] = TimeoutOption,
    max_workers: Optional[int] = typer.Option(
        None, "--max-workers", min=1, help="Cap concurrent lookups (default: one per release)",
    ),
) -> None:
    """Report releases whose chart has a newer version available."""
    try:
        status_filter = StatusFilter.from_str(status)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--status")

    try:
        releases = load_helmfile(path)
    except HelmfileNextError as e:
        err_console.print(f"[red]Failed to load helmfile:[/red] {e}")
        raise typer.Exit(code=1)

    helm = HelmCli(timeout=timeout)

    if update_repos:
        try:
            helm.refresh_repositories(on_line=lambda line: console.print(line, markup=False, highlight=False))
        except HelmfileNextError as e:
            err_console.print(f"[red]Failed to update repositories:[/red] {e}")
            raise typer.Exit(code=1)
        console.print()

    if not releases:
        console.print("[dim]No releases found.[/dim]")
        return

    with err_console.status("[bold cyan]Comparing release versions…") as spinner:

        def on_progress(i: int, total: int, name: str) -> None:
            spinner.update(f"[bold cyan]Comparing release versions… [dim]({i}/{total})[/dim] {name}")

        comparisons, error = check_updates(
            releases,
            gateway=helm,
            max_workers=max_workers or settings.max_workers,
            on_progress=on_progress,
        )

    output_comparisons(comparisons, status_filter, output, error=error)

    if error is not None:
        raise typer.Exit(code=1)
