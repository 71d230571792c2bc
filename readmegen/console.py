"""Rich-based console output for readmegen."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

custom_theme = Theme(
    {
        "error": "bold red",
        "success": "bold green",
    }
)

console = Console(theme=custom_theme)
console_err = Console(theme=custom_theme, stderr=True)

log = logging.getLogger(__name__)


def print_success(message: str) -> None:
    console.print(f"[success]{escape(message)}[/success]", highlight=False, soft_wrap=True)
    log.info(message)


def print_error(message: str) -> None:
    # Messages can carry user input and paths.
    console_err.print(f"[error]Error:[/error] {escape(message)}", highlight=False, soft_wrap=True)
    log.debug("Reported error: %s", message)
