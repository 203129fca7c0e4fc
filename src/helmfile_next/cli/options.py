"""Shared CLI options."""

from __future__ import annotations

import typer

from helmfile_next.config.settings import settings

OutputOption = typer.Option(settings.default_output, "--output", "-o", help="Output format: table, json, yaml")
PathOption = typer.Option(settings.manifest_path, "--path", "-p", help="Path to helmfile.yaml")
TimeoutOption = typer.Option(
    None, "--timeout", help="Seconds to wait for each helm command (0 waits forever)"
)
