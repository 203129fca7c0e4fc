"""helmfile-next-version releases - List releases declared in a helmfile."""

from __future__ import annotations

import typer
from rich.console import Console

from helmfile_next.cli.options import OutputOption, PathOption
from helmfile_next.core.manifest_loader import load_helmfile
from helmfile_next.errors import HelmfileNextError
from helmfile_next.output.formatters import output_releases

app = typer.Typer()
err_console = Console(stderr=True)


@app.callback(invoke_without_command=True)
def list_releases(
    path: str = PathOption,
    output: str = OutputOption,
) -> None:
    """List the releases pinned in the helmfile without querying any repository."""
    try:
        releases = load_helmfile(path)
    except HelmfileNextError as e:
        err_console.print(f"[red]Failed to load helmfile:[/red] {e}")
        raise typer.Exit(code=1)
    output_releases(releases, output)
