"""Command line entry point using Typer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from textual.logging import TextualHandler

from kubeconsole import __version__
from kubeconsole.app import KubeConsoleApp

app = typer.Typer(
    name="kubeconsole",
    help="Browse and manage the nodes of a Kubernetes cluster",
    add_completion=False,
)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(debug: bool = False, log_file: Optional[Path] = None) -> None:
    """Route logs to a file, or to the Textual devtools console.

    Writing to stderr would corrupt the terminal UI.
    """
    handler: logging.Handler
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = TextualHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.DEBUG if debug else logging.INFO)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"kubeconsole {__version__}")
        raise typer.Exit()


@app.command()
def main(
    context: Optional[str] = typer.Option(
        None, "--context", "-c", help="Kubernetes context to use (default: current context)"
    ),
    project: Optional[str] = typer.Option(
        None, "--project", "-p", help="Project id used for permission lookups"
    ),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Write logs to this file"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
) -> None:
    """Launch the node console."""
    configure_logging(debug, log_file)
    KubeConsoleApp(context=context, project_id=project).run()


if __name__ == "__main__":
    app()
