"""
Terminal interface for configuring folders and triaging images.

Shows the configuration screen and the triage screen with Rich and turns
single-line commands into calls on the triage app.
"""

import logging
from pathlib import Path
from typing import Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from image_triage.core.engine import ActionResult, TriageEngine
from image_triage.core.session import TriageApp

logger = logging.getLogger(__name__)

CONFIG_HELP = (
    "[dim]Commands: [I]nput folder, [T]rash folder, [A]dd destination, "
    "[R]emove destination N, [S]tart triage, [Q]uit[/dim]"
)
TRIAGE_HELP = (
    "[dim]Commands: 1-9 move to destination, [N]ext, [D]elete, [U]ndo, "
    "[B]ack to configuration, [Q]uit[/dim]"
)


def pick_folder(console: Console, label: str = "Folder") -> Optional[Path]:
    """
    Ask the user for a folder path.

    Args:
        console: Rich console to prompt on
        label: What the folder is for

    Returns:
        The entered path, or None if the user left the prompt blank
    """
    try:
        answer = console.input(f"[cyan]{label} path[/cyan] (blank to cancel): ").strip()
    except EOFError:
        return None
    if not answer:
        return None
    return Path(answer).expanduser()


class TriageUI:
    """Rich-based front end driving a TriageApp."""

    def __init__(self, app: TriageApp, console: Optional[Console] = None):
        """
        Initialize triage UI.

        Args:
            app: Triage app holding config and state
            console: Rich console instance (creates new one if None)
        """
        self.app = app
        self.console = console or Console()

    def run(self) -> None:
        """Show screens and process commands until the user quits."""
        while True:
            self.show_screen()
            try:
                command = self.console.input("[bold]> [/bold]")
            except EOFError:
                break
            if not self.handle_command(command):
                break

    def show_screen(self) -> None:
        if self.app.is_triaging:
            self.show_triage_screen(self.app.engine)
        else:
            self.show_config_screen()

    def handle_command(self, command: str) -> bool:
        """
        Dispatch one command for the current mode.

        Args:
            command: Raw input line

        Returns:
            False if the user asked to quit, True otherwise
        """
        command = command.strip().lower()
        logger.debug(f"Command: {command!r}")
        if command == "q":
            return False
        if self.app.is_triaging:
            self._handle_triage_command(command)
        else:
            try:
                self._handle_config_command(command)
            except OSError as e:
                self.console.print(f"[red]✗ Could not save configuration: {e}[/red]")
        return True

    def show_config_screen(self) -> None:
        """Show configured folders."""
        config = self.app.config

        table = Table(title="Configuration", box=box.ROUNDED, show_header=False)
        table.add_column("Setting", style="cyan")
        table.add_column("Value")
        table.add_row("Input Folder", str(config.input_folder or "[dim]not set[/dim]"))
        table.add_row("Trash Folder", str(config.trash_folder or "[dim]not set[/dim]"))
        self.console.print(table)

        destinations = Table(title="Destination Folders", box=box.ROUNDED)
        destinations.add_column("#", style="dim", width=3)
        destinations.add_column("Folder", style="cyan")
        for i, folder in enumerate(config.destination_folders, 1):
            destinations.add_row(str(i), str(folder))
        self.console.print(destinations)
        self.console.print(CONFIG_HELP)

    def show_triage_screen(self, engine: TriageEngine) -> None:
        """Show the current image and the available destinations."""
        path = engine.current_path
        if path is None:
            self.console.print(
                Panel(
                    "[green]No images left to triage.[/green]",
                    title="Triage",
                    box=box.DOUBLE,
                )
            )
        else:
            image = engine.load_current()
            if image is not None:
                detail = f"Resolution: {image.resolution}"
            else:
                detail = f"[red]Could not display image:[/red] {engine.decode_error}"

            self.console.print(
                Panel(
                    f"[bold]{path.name}[/bold]\n"
                    f"[dim]{path.parent}[/dim]\n\n"
                    f"{detail}",
                    title=f"Image {engine.tracker.index + 1}/{len(engine.tracker)}",
                    box=box.DOUBLE,
                )
            )

        table = Table(box=box.SIMPLE, show_header=True, header_style="bold magenta")
        table.add_column("Key", style="dim", width=3)
        table.add_column("Destination", style="cyan")
        for i, folder in enumerate(self.app.config.destination_folders, 1):
            table.add_row(str(i), folder.name or str(folder))
        table.add_row("d", f"Trash ({self.app.config.trash_folder or 'not set'})")
        self.console.print(table)

        self.console.print(f"[dim]Undo available: {engine.undo_depth}[/dim]")
        self.console.print(TRIAGE_HELP)

    def _handle_config_command(self, command: str) -> None:
        config = self.app.config

        if command == "i":
            folder = pick_folder(self.console, "Input folder")
            if folder is not None:
                config.set_input_folder(folder)
        elif command == "t":
            folder = pick_folder(self.console, "Trash folder")
            if folder is not None:
                config.set_trash_folder(folder)
        elif command == "a":
            folder = pick_folder(self.console, "Destination folder")
            if folder is not None:
                config.add_destination_folder(folder)
        elif command.startswith("r"):
            self._remove_destination(command[1:].strip())
        elif command == "s":
            engine = self.app.start_triage()
            self.console.print(f"[green]Loaded {len(engine.tracker)} images.[/green]")
        else:
            self.console.print(f"[yellow]Unknown command:[/yellow] {command}")

    def _remove_destination(self, argument: str) -> None:
        try:
            position = int(argument)
            self.app.config.remove_destination_folder(position - 1)
        except (ValueError, IndexError):
            self.console.print(
                f"[red]No destination folder numbered {argument or '?'}[/red]"
            )

    def _handle_triage_command(self, command: str) -> None:
        engine = self.app.engine

        if command.isdigit():
            destinations = self.app.config.destination_folders
            position = int(command)
            if not 1 <= position <= len(destinations):
                self.console.print(f"[red]No destination folder numbered {command}[/red]")
                return
            self._report(engine.move_to(destinations[position - 1]))
        elif command == "n":
            self._report(engine.skip())
        elif command == "d":
            self._report(engine.delete_current())
        elif command == "u":
            self._report(engine.undo())
        elif command == "b":
            self.app.back_to_config()
        else:
            self.console.print(f"[yellow]Unknown command:[/yellow] {command}")

    def _report(self, result: ActionResult) -> None:
        if not result.success:
            self.console.print(f"[red]✗ {result.message}[/red]")
        elif result.changed:
            self.console.print(f"[green]✓ {result.message}[/green]")
        else:
            self.console.print(f"[dim]{result.message}[/dim]")
