"""Command line entry point: create-files-batch."""

import asyncio
import os
from pathlib import Path
from typing import List, Optional

import typer

from batchwizard.commands import CreateFromCommandPaletteCommand, CreateFromMenuCommand
from batchwizard.engine.loader import TemplateLoader
from batchwizard.engine.runner import RealActionRunner
from batchwizard.engine.schema import WorkspaceFolder
from batchwizard.utils.logging_setup import configure_logging

app = typer.Typer(help="Create a batch of files from a template, one question at a time.")


def _setup(verbose: bool) -> bool:
    verbose = verbose or bool(os.environ.get('CREATE_FILES_BATCH_VERBOSE'))
    configure_logging("DEBUG" if verbose else "WARNING")
    return verbose


def _workspaces(paths: Optional[List[Path]]) -> List[WorkspaceFolder]:
    paths = paths or [Path.cwd()]
    return [WorkspaceFolder.from_path(path) for path in paths]


def _run_wizard(coro):
    # asyncio.run() installs its own SIGINT handler, which would leave a
    # blocking input() waiting; a plain loop lets Ctrl-C raise at the prompt
    loop = asyncio.new_event_loop()
    try:
        return loop.run_until_complete(coro)
    finally:
        loop.close()


def _run(build_command) -> None:
    """Build and run a command; any error is reported and exits with status 1."""
    try:
        command = build_command()
        _run_wizard(command.execute())
    except KeyboardInterrupt:
        # Ctrl-C ends the wizard like closing the prompt
        return
    except Exception as e:
        typer.echo(f"Error creating files: {e}", err=True)
        raise typer.Exit(code=1)


@app.command()
def create(
    workspace: Optional[List[Path]] = typer.Option(
        None, "--workspace", "-w", help="Workspace root (repeatable, default: current directory)"
    ),
    config: Optional[Path] = typer.Option(None, "--config", help="User level template settings file"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    """Pick workspace, template, folder and prefix, then create the files."""
    verbose = _setup(verbose)
    _run(lambda: CreateFromCommandPaletteCommand(
        RealActionRunner(verbose=verbose), _workspaces(workspace), TemplateLoader(config)
    ))


@app.command("create-here")
def create_here(
    folder: Path = typer.Argument(..., help="Folder the files are created in"),
    workspace: Optional[List[Path]] = typer.Option(
        None, "--workspace", "-w", help="Workspace root (repeatable, default: current directory)"
    ),
    config: Optional[Path] = typer.Option(None, "--config", help="User level template settings file"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    """Pick template and prefix, then create the files inside FOLDER."""
    verbose = _setup(verbose)
    _run(lambda: CreateFromMenuCommand(
        RealActionRunner(verbose=verbose), folder, _workspaces(workspace), TemplateLoader(config)
    ))


def main():
    app()


if __name__ == "__main__":
    main()
