"""Throttled removal of directly assigned licenses."""
import asyncio
import logging
from typing import Awaitable, Callable, List, Optional, Sequence

from opentelemetry import trace

from ..integrations.directory import DirectoryService
from ..models.license import (
    REMOVABLE_PATHS,
    AssignmentPath,
    LicenseReportRow,
    RemovalOutcome,
    RemovalStatus,
)
from ..services.license_report import LicenseReportService

logger = logging.getLogger(__name__)
_tracer = trace.get_tracer(__name__)

ConfirmFn = Callable[[LicenseReportRow], bool]
"""Per-row approval gate. Called synchronously from the removal loop, so an
interactive gate blocks the event loop until the operator answers."""

SleepFn = Callable[[float], Awaitable[None]]


def auto_confirm(_row: LicenseReportRow) -> bool:
    return True


def _validate_path(path) -> AssignmentPath:
    try:
        path = AssignmentPath(path)
    except ValueError:
        raise ValueError(f"Unknown assignment path: {path!r}") from None
    if path not in REMOVABLE_PATHS:
        raise ValueError(
            f"Licenses assigned via {path.value} cannot be removed directly; "
            "remove the user from the licensing group instead"
        )
    return path


def _validate_delay(delay) -> int:
    if isinstance(delay, bool) or not isinstance(delay, int) or delay < 0:
        raise ValueError(f"throttle_delay_seconds must be a non-negative integer, got {delay!r}")
    return delay


class LicenseRemovalDriver:
    def __init__(
        self,
        directory: DirectoryService,
        report_service: Optional[LicenseReportService] = None,
        sleep: SleepFn = asyncio.sleep,
        throttle_delay_seconds: int = 1,
    ):
        self.directory = directory
        self.report_service = report_service or LicenseReportService(directory)
        self.sleep = sleep
        self.throttle_delay_seconds = _validate_delay(throttle_delay_seconds)

    async def remove_licenses(
        self,
        path: AssignmentPath,
        sku: Optional[str] = None,
        check_all: bool = False,
        throttle_delay_seconds: Optional[int] = None,
        confirm: Optional[ConfirmFn] = None,
    ) -> List[RemovalOutcome]:
        """Remove the target SKU from every user whose assignment matches ``path``.

        Only ``Directly`` and ``DirectlyAndGroup`` are accepted; group-only
        assignments are rejected before anything is fetched. A
        ``DirectlyAndGroup`` user keeps the license through the group, only the
        direct assignment is dropped.
        """
        path = _validate_path(path)
        delay = self.throttle_delay_seconds if throttle_delay_seconds is None else _validate_delay(throttle_delay_seconds)

        rows = await self.report_service.get_report(path, sku=sku, check_all=check_all)
        logger.info("Found %s %s license assignments to process", len(rows), path.value)
        return await self.remove_rows(rows, throttle_delay_seconds=delay, confirm=confirm)

    async def remove_rows(
        self,
        rows: Sequence[LicenseReportRow],
        throttle_delay_seconds: Optional[int] = None,
        confirm: Optional[ConfirmFn] = None,
    ) -> List[RemovalOutcome]:
        for row in rows:
            _validate_path(row.path)
        delay = self.throttle_delay_seconds if throttle_delay_seconds is None else _validate_delay(throttle_delay_seconds)
        confirm = confirm or auto_confirm

        outcomes: List[RemovalOutcome] = []
        for row in rows:
            outcomes.append(await self._remove_row(row, delay, confirm))

        removed = sum(1 for outcome in outcomes if outcome.status == RemovalStatus.REMOVED)
        failed = sum(1 for outcome in outcomes if outcome.status == RemovalStatus.FAILED)
        logger.info(
            "License removal finished: %s removed, %s skipped, %s failed",
            removed,
            len(outcomes) - removed - failed,
            failed,
        )
        return outcomes

    async def _remove_row(self, row: LicenseReportRow, delay: int, confirm: ConfirmFn) -> RemovalOutcome:
        target = f"{row.sku_part_number} from {row.user_principal_name or row.user_id}"
        if not confirm(row):
            logger.info("Skipped removing %s", target)
            return RemovalOutcome(row=row, status=RemovalStatus.SKIPPED)

        await self.sleep(delay)
        with _tracer.start_as_current_span("license.remove") as span:
            span.set_attribute("license.sku_id", row.sku_id)
            span.set_attribute("license.path", row.path.value)
            try:
                await self.directory.remove_license(row.user_id, row.sku_id)
            except Exception as exc:
                logger.error("Failed to remove %s: %s", target, exc, exc_info=True)
                return RemovalOutcome(row=row, status=RemovalStatus.FAILED, error=str(exc))

        logger.info("Removed %s", target)
        return RemovalOutcome(row=row, status=RemovalStatus.REMOVED)
