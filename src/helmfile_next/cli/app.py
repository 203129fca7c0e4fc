"""Root Typer application, mounts sub-commands."""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from helmfile_next import __version__

app = typer.Typer(
    name="helmfile-next-version",
    help="Find newer chart versions for the releases pinned in a helmfile.",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback()
def root(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit",
    ),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _register_commands() -> None:
    from helmfile_next.cli.commands.check_cmd import app as check_app
    from helmfile_next.cli.commands.releases_cmd import app as releases_app
    from helmfile_next.cli.commands.repo_update_cmd import app as repo_update_app

    app.add_typer(check_app, name="check", help="Check releases for newer chart versions")
    app.add_typer(releases_app, name="releases", help="List releases declared in the helmfile")
    app.add_typer(repo_update_app, name="repo-update", help="Refresh the local helm repository index")


_register_commands()


def main() -> None:
    app()
