"""Command-line interface for image-triage."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from image_triage import __version__
from image_triage.core.session import TriageApp
from image_triage.core.tracker import scan as scan_folder
from image_triage.ui.triage import TriageUI
from image_triage.utils.config import Config
from image_triage.utils.logger import setup_logger

console = Console()
logger = setup_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="image-triage")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--config",
    "-c",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=Config.DEFAULT_CONFIG_FILE,
    show_default=True,
    help="Configuration file",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_file: Path) -> None:
    """
    Image Triage - sort a folder of images one at a time.

    Move each image into a destination folder or the trash folder, and undo
    mistakes as you go.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config_file"] = config_file

    if verbose:
        setup_logger(level=logging.DEBUG)


def _load_config(ctx: click.Context) -> Config:
    return Config(ctx.obj["config_file"])


def _exit_save_failed(error: OSError) -> None:
    console.print(f"[red]✗ Could not save configuration:[/red] {error}")
    sys.exit(1)


@cli.command()
@click.pass_context
def run(ctx: click.Context) -> None:
    """
    Start the interactive triage session.

    Opens on the configuration screen; start triage from there.
    """
    app = TriageApp(_load_config(ctx))

    console.print(f"\n[bold cyan]Image Triage v{__version__}[/bold cyan]\n")
    TriageUI(app, console).run()


@cli.command(name="show-config")
@click.pass_context
def show_config(ctx: click.Context) -> None:
    """Show the configured folders."""
    config = _load_config(ctx)

    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value")

    table.add_row("Config file", str(config.config_file))
    table.add_row("Input folder", str(config.input_folder or "-"))
    table.add_row("Trash folder", str(config.trash_folder or "-"))
    for i, folder in enumerate(config.destination_folders, 1):
        table.add_row(f"Destination {i}", str(folder))

    console.print(table)


@cli.command(name="set-input")
@click.argument("folder", type=click.Path(file_okay=False, path_type=Path))
@click.pass_context
def set_input(ctx: click.Context, folder: Path) -> None:
    """Set the folder whose images are triaged."""
    try:
        _load_config(ctx).set_input_folder(folder)
    except OSError as e:
        _exit_save_failed(e)
    console.print(f"[green]✓ Input folder set:[/green] {folder}")


@cli.command(name="set-trash")
@click.argument("folder", type=click.Path(file_okay=False, path_type=Path))
@click.pass_context
def set_trash(ctx: click.Context, folder: Path) -> None:
    """Set the trash folder (created on first delete if missing)."""
    try:
        _load_config(ctx).set_trash_folder(folder)
    except OSError as e:
        _exit_save_failed(e)
    console.print(f"[green]✓ Trash folder set:[/green] {folder}")


@cli.command(name="add-destination")
@click.argument("folder", type=click.Path(file_okay=False, path_type=Path))
@click.pass_context
def add_destination(ctx: click.Context, folder: Path) -> None:
    """Add a destination folder to the end of the list."""
    config = _load_config(ctx)
    try:
        config.add_destination_folder(folder)
    except OSError as e:
        _exit_save_failed(e)

    console.print(f"[green]✓ Destination folder added:[/green] {folder}")
    console.print("\n[cyan]Current destination folders:[/cyan]")
    for i, dest in enumerate(config.destination_folders, 1):
        console.print(f"  {i}. {dest}")


@cli.command(name="remove-destination")
@click.argument("number", type=int)
@click.pass_context
def remove_destination(ctx: click.Context, number: int) -> None:
    """
    Remove a destination folder.

    NUMBER: Position of the folder as listed by show-config (starting at 1)
    """
    config = _load_config(ctx)
    try:
        removed = config.remove_destination_folder(number - 1)
    except IndexError:
        console.print(f"[red]✗ No destination folder numbered {number}[/red]")
        sys.exit(1)
    except OSError as e:
        _exit_save_failed(e)

    console.print(f"[green]✓ Destination folder removed:[/green] {removed}")


@cli.command()
@click.option(
    "--folder",
    "-f",
    type=click.Path(file_okay=False, path_type=Path),
    help="Folder to scan (default: configured input folder)",
)
@click.pass_context
def scan(ctx: click.Context, folder: Optional[Path]) -> None:
    """List the images waiting to be triaged."""
    target = folder or _load_config(ctx).input_folder
    images = scan_folder(target)

    if not images:
        console.print("[yellow]No images found.[/yellow]")
        return

    table = Table(title=str(target), show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim")
    table.add_column("File")
    table.add_column("Size", justify="right")
    for i, path in enumerate(images, 1):
        table.add_row(str(i), path.name, f"{path.stat().st_size / 1024:.1f} KB")

    console.print(table)
    console.print(f"\n[green]Total images found:[/green] {len(images)}")


def main() -> None:
    """Main entry point for the CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
