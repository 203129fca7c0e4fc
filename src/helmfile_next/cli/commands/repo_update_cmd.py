"""helmfile-next-version repo-update - Refresh the local helm repository index."""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console

from helmfile_next.cli.options import TimeoutOption
from helmfile_next.core.helm_cli import HelmCli
from helmfile_next.errors import HelmfileNextError

app = typer.Typer()
console = Console()
err_console = Console(stderr=True)


@app.callback(invoke_without_command=True)
def repo_update(timeout: Optional[float] = TimeoutOption) -> None:
    """Run 'helm repo update', streaming its output."""
    try:
        HelmCli(timeout=timeout).refresh_repositories(
            on_line=lambda line: console.print(line, markup=False, highlight=False),
        )
    except HelmfileNextError as e:
        err_console.print(f"[red]Failed to update repositories:[/red] {e}")
        raise typer.Exit(code=1)
