"""Operator confirmation gates consulted before each license removal."""
import logging
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from ..models.license import LicenseReportRow

logger = logging.getLogger(__name__)


def describe(row: LicenseReportRow) -> str:
    name = row.friendly_name or row.sku_part_number
    return f"Remove license '{name}' from {row.display_name} <{row.user_principal_name}>"


class ConsoleConfirmation:
    """Interactive yes / no / all / quit prompt.

    Answering ``all`` approves the current item and every later one;
    ``quit`` declines the current item and every later one.
    """

    CHOICES = ["y", "n", "a", "q"]

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()
        self.accept_all = False
        self.declined_all = False

    def __call__(self, row: LicenseReportRow) -> bool:
        if self.accept_all:
            return True
        if self.declined_all:
            return False

        answer = Prompt.ask(
            f"[bold]{escape(describe(row))}?[/bold] [dim](y=yes, n=no, a=all, q=quit)[/dim]",
            choices=self.CHOICES,
            default="n",
            console=self.console,
            show_choices=False,
        )
        if answer == "a":
            self.accept_all = True
            return True
        if answer == "q":
            self.declined_all = True
            return False
        return answer == "y"


class WhatIfConfirmation:
    """Simulation gate: records what would happen and declines every item."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console
        self.simulated: List[LicenseReportRow] = []

    def __call__(self, row: LicenseReportRow) -> bool:
        self.simulated.append(row)
        message = f"What if: {describe(row)}"
        logger.info(message)
        if self.console is not None:
            self.console.print(f"[yellow]{escape(message)}[/yellow]")
        return False
