"""Console output helpers for the CLI."""

from __future__ import annotations

from rich.console import Console


class Output:
    """Styled messages on stdout/stderr."""

    def __init__(self) -> None:
        self.console = Console()
        self.err_console = Console(stderr=True)

    def info(self, msg: str) -> None:
        self.console.print(msg)

    def success(self, msg: str) -> None:
        self.console.print(f"[green]✓[/green] {msg}")

    def dim(self, msg: str) -> None:
        self.console.print(f"[dim]{msg}[/dim]")

    def error(self, msg: str) -> None:
        self.err_console.print(f"[bold red]Error:[/bold red] {msg}", highlight=False)

    def hint(self, msg: str) -> None:
        self.err_console.print(f"[yellow]Hint:[/yellow] {msg}")


out = Output()
