import argparse
import asyncio
import csv
import inspect
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config.settings import close_graph_client, get_settings
from .core.removal import LicenseRemovalDriver, auto_confirm
from .data.sku_names import resolve_sku_name
from .exceptions import LicenseGuardianError
from .integrations.confirmation import ConsoleConfirmation, WhatIfConfirmation
from .integrations.directory import DirectoryService, get_directory_service
from .models.license import REMOVABLE_PATHS, AssignmentPath, LicenseReportRow, RemovalOutcome, RemovalStatus
from .services.license_report import LicenseReportService
from .utils.csv_text import text_to_csv
from .utils.encoding import decode_base64, encode_base64
from .utils.telemetry import setup_logging, setup_telemetry

console = Console()

REPORT_COLUMNS = [
    "DisplayName",
    "UserPrincipalName",
    "AccountEnabled",
    "OnPremisesSyncEnabled",
    "CreatedDateTime",
    "SkuPartNumber",
    "ProductName",
    "AssignmentPath",
    "AssignedByGroups",
    "LastUpdatedDateTime",
]


def _report_record(row: LicenseReportRow) -> List[str]:
    return [
        row.display_name,
        row.user_principal_name,
        str(row.account_enabled),
        str(row.sync_enabled),
        row.created_at.isoformat() if row.created_at else "",
        row.sku_part_number,
        row.friendly_name,
        row.path.value,
        ";".join(row.group_ids),
        row.last_updated.isoformat() if row.last_updated else "",
    ]


def write_report_csv(rows: Sequence[LicenseReportRow], path: Path) -> None:
    with path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.writer(handle)
        writer.writerow(REPORT_COLUMNS)
        for row in rows:
            writer.writerow(_report_record(row))


class LicenseGuardianCLI:
    def __init__(self, directory: Optional[DirectoryService] = None):
        self.settings = get_settings()
        self.logger = setup_logging(self.settings.log_level)
        if self.settings.enable_tracing:
            setup_telemetry()
        self._directory = directory

    async def _get_directory(self) -> DirectoryService:
        if self._directory is None:
            self._directory = await get_directory_service()
        return self._directory

    def encode(self, args) -> int:
        console.print(encode_base64(args.text, args.encoding), highlight=False, soft_wrap=True)
        return 0

    def decode(self, args) -> int:
        console.print(decode_base64(args.value, args.encoding), highlight=False, markup=False, soft_wrap=True)
        return 0

    def to_csv(self, args) -> int:
        text = Path(args.input).read_text(encoding="utf-8") if args.input else sys.stdin.read()
        result = text_to_csv(text, args.header)
        if args.output:
            Path(args.output).write_text(result + "\n", encoding="utf-8")
            console.print(f"[green]CSV written to {escape(args.output)}[/green]")
        else:
            console.print(result, highlight=False, markup=False, soft_wrap=True)
        return 0

    def sku_name(self, args) -> int:
        name = resolve_sku_name(args.code)
        if name is None:
            console.print(f"[yellow]No product name known for {escape(args.code)}[/yellow]")
            return 0
        console.print(name, highlight=False, markup=False)
        return 0

    async def skus(self, args) -> int:
        service = LicenseReportService(await self._get_directory())
        skus = await service.list_skus()

        table = Table(title="Subscribed Licenses", show_header=True, header_style="bold magenta")
        table.add_column("Product", style="cyan")
        table.add_column("SKU", style="dim")
        table.add_column("Consumed", justify="right", style="green")
        table.add_column("Available", justify="right", style="yellow")
        table.add_column("Enabled", justify="right")
        for sku in skus:
            table.add_row(
                escape(sku.display_name),
                escape(sku.part_number),
                str(sku.consumed_units),
                str(sku.available_units),
                str(sku.total_units),
            )
        console.print(table)
        return 0

    async def report(self, args) -> int:
        service = LicenseReportService(await self._get_directory())
        path = AssignmentPath(args.path)
        rows = await service.get_report(path, sku=args.sku, check_all=args.all)

        table = Table(title=f"Licenses assigned {path.value}", show_header=True, header_style="bold magenta")
        table.add_column("Display Name", style="cyan")
        table.add_column("User Principal Name")
        table.add_column("Product", style="green")
        table.add_column("Enabled")
        table.add_column("Synced")
        table.add_column("Last Updated", style="dim")
        for row in rows:
            table.add_row(
                escape(row.display_name),
                escape(row.user_principal_name),
                escape(row.friendly_name or row.sku_part_number),
                "yes" if row.account_enabled else "no",
                "yes" if row.sync_enabled else "no",
                row.last_updated.strftime("%Y-%m-%d %H:%M") if row.last_updated else "",
            )
        console.print(table)
        console.print(f"[bold]{len(rows)}[/bold] assignments")

        if args.output:
            write_report_csv(rows, Path(args.output))
            console.print(f"[green]Report written to {escape(args.output)}[/green]")
        return 0

    async def remove(self, args) -> int:
        directory = await self._get_directory()
        if args.what_if:
            confirm = WhatIfConfirmation(console)
        elif args.yes:
            confirm = auto_confirm
        else:
            confirm = ConsoleConfirmation(console)

        delay = self.settings.throttle_delay_seconds if args.delay is None else args.delay
        driver = LicenseRemovalDriver(directory, throttle_delay_seconds=delay)
        outcomes = await driver.remove_licenses(
            AssignmentPath(args.path),
            sku=args.sku,
            check_all=args.all,
            confirm=confirm,
        )
        self.show_outcomes(outcomes)
        return 1 if any(outcome.status == RemovalStatus.FAILED for outcome in outcomes) else 0

    def show_outcomes(self, outcomes: Sequence[RemovalOutcome]) -> None:
        table = Table(title="License Removal", show_header=True, header_style="bold magenta")
        table.add_column("User", style="cyan")
        table.add_column("Product", style="green")
        table.add_column("Result")
        table.add_column("Error", style="red")
        styles = {
            RemovalStatus.REMOVED: "[green]removed[/green]",
            RemovalStatus.SKIPPED: "[yellow]skipped[/yellow]",
            RemovalStatus.FAILED: "[red]failed[/red]",
        }
        for outcome in outcomes:
            table.add_row(
                escape(outcome.row.user_principal_name or outcome.row.user_id),
                escape(outcome.row.friendly_name or outcome.row.sku_part_number),
                styles[outcome.status],
                escape(outcome.error or ""),
            )
        console.print(table)

    async def run_async(self, args) -> int:
        try:
            return await getattr(self, args.handler)(args)
        finally:
            await close_graph_client()

    def run(self, args) -> int:
        handler = getattr(self, args.handler)
        try:
            if inspect.iscoroutinefunction(handler):
                return asyncio.run(self.run_async(args))
            return handler(args)
        except (LicenseGuardianError, ValueError, OSError) as exc:
            console.print(f"[red]Error: {escape(str(exc))}[/red]")
            self.logger.debug("Command %s failed", args.command, exc_info=True)
            return 1


def _add_scope_arguments(parser: argparse.ArgumentParser) -> None:
    scope = parser.add_mutually_exclusive_group(required=True)
    scope.add_argument("--sku", help="SKU part number or SKU id to check")
    scope.add_argument("--all", action="store_true", help="Check every SKU with consumed units")


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError("must be a non-negative integer")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="license-guardian",
        description="Microsoft Entra ID license assignment helpers",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    encode = sub.add_parser("encode", help="Base64-encode a string")
    encode.add_argument("text")
    encode.add_argument("--encoding", default="utf-8", help="Character encoding (utf-8, unicode, ascii)")
    encode.set_defaults(handler="encode")

    decode = sub.add_parser("decode", help="Decode a Base64 string")
    decode.add_argument("value")
    decode.add_argument("--encoding", default="utf-8", help="Character encoding (utf-8, unicode, ascii)")
    decode.set_defaults(handler="decode")

    to_csv = sub.add_parser("to-csv", help="Convert one-value-per-line text to CSV")
    to_csv.add_argument("--header", default="Value", help="Column header")
    to_csv.add_argument("--input", help="Input file (defaults to stdin)")
    to_csv.add_argument("--output", help="Output file (defaults to stdout)")
    to_csv.set_defaults(handler="to_csv")

    sku_name = sub.add_parser("sku-name", help="Look up the product name of a SKU part number")
    sku_name.add_argument("code")
    sku_name.set_defaults(handler="sku_name")

    skus = sub.add_parser("skus", help="Show subscribed SKUs with usage")
    skus.set_defaults(handler="skus")

    report = sub.add_parser("report", help="List license assignments by assignment path")
    report.add_argument("--path", required=True, choices=[path.value for path in AssignmentPath])
    _add_scope_arguments(report)
    report.add_argument("--output", help="Export the report to a CSV file")
    report.set_defaults(handler="report")

    remove = sub.add_parser("remove", help="Remove directly assigned licenses")
    remove.add_argument("--path", required=True, choices=[path.value for path in REMOVABLE_PATHS])
    _add_scope_arguments(remove)
    remove.add_argument("--delay", type=_non_negative_int, help="Seconds to wait before each removal")
    confirmation = remove.add_mutually_exclusive_group()
    confirmation.add_argument("--what-if", action="store_true", help="Show what would be removed")
    confirmation.add_argument("--yes", action="store_true", help="Remove without prompting")
    remove.set_defaults(handler="remove")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cli = LicenseGuardianCLI()
    return cli.run(args)


if __name__ == "__main__":
    sys.exit(main())
