"""Rich-based terminal output for VERSTAMP.

Progress goes to stdout; errors and warnings go to stderr. A dry run
prints nothing here, so its stdout is the artifact text alone.
"""

from rich.console import Console

from verstamp import SCRIPT_NAME, __version__

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def print_error(message: str) -> None:
    err_console.print(f"[bold red]✗[/bold red] {message}")


def print_warning(message: str) -> None:
    err_console.print(f"[bold yellow]⚠[/bold yellow] {message}")


def print_success(message: str) -> None:
    console.print(f"[bold green]✓[/bold green] {message}")


def print_info(message: str) -> None:
    console.print(f"[cyan]ℹ[/cyan] {message}")


def print_step(message: str) -> None:
    console.print(f"[bold blue]→[/bold blue] {message}")


def show_version() -> None:
    """Print the tool name and version."""
    console.print(f"{SCRIPT_NAME} version {__version__}")
