# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
Shared helper functions for the CLI
"""

from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from jirapr.constants import WORKFLOW_STATUS_ORDER

# Emoji shortcodes and highlighting are off so tracker text prints verbatim
console = Console(emoji=False, highlight=False)
err_console = Console(stderr=True, emoji=False, highlight=False)


def print_error(message: str) -> None:
    """Print a standardized error message to stderr."""
    err_console.print(f'[red]✗[/red] {escape(message)}', soft_wrap=True)


def parse_status_order(value: Optional[str]) -> List[str]:
    """Parse a comma-separated workflow ordering, falling back to the default one."""
    if not value:
        return list(WORKFLOW_STATUS_ORDER)
    order = [status.strip() for status in value.split(',') if status.strip()]
    return order or list(WORKFLOW_STATUS_ORDER)
