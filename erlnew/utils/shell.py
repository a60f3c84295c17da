from __future__ import annotations
from pathlib import Path
from typing import Callable, Optional
from rich.console import Console
from rich.markup import escape

Confirm = Callable[[str], bool]

YES_ANSWERS = {"", "y", "yes"}

# One notice per line, however long the path
console = Console(soft_wrap=True, highlight=False)
err_console = Console(stderr=True, soft_wrap=True, highlight=False)


def yes(message: str, input_func: Optional[Callable[[str], str]] = None) -> bool:
    """Ask a yes/no question on stdin. An empty answer counts as yes."""
    try:
        answer = (input_func or input)(f"{message} [Yn] ")
    except EOFError:
        return False
    return answer.strip().lower() in YES_ANSWERS


def creating(path: Path) -> None:
    console.print(f"[green]* creating[/] {escape(Path(path).as_posix())}")


def error(message: str) -> None:
    err_console.print(f"[red]error:[/] {escape(message)}")
