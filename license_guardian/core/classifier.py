"""Classify how each user received a license: directly, from a group, or both."""
from typing import Dict, Iterable, List, Optional, Sequence

from ..data.sku_names import SkuNameResolver
from ..models.license import (
    AssignmentPath,
    AssignmentState,
    LicenseReportRow,
    LicenseSku,
    UserLicenseState,
)


def classify_assignment(states: Iterable[AssignmentState], sku_id: str) -> Optional[AssignmentPath]:
    """Derive the assignment path for one SKU from all of a user's assignment states.

    A user can carry several entries for the same SKU (one per contributing
    group plus an optional direct one), so every matching entry is inspected.
    Returns ``None`` when no entry refers to ``sku_id``.
    """
    has_direct = False
    has_group = False
    for state in states:
        if state.sku_id != sku_id:
            continue
        if state.assigned_by_group:
            has_group = True
        else:
            has_direct = True

    if has_direct and has_group:
        return AssignmentPath.DIRECTLY_AND_GROUP
    if has_group:
        return AssignmentPath.FROM_GROUP
    if has_direct:
        return AssignmentPath.DIRECTLY
    return None


def _sort_key(row: LicenseReportRow):
    return (row.display_name.casefold(), row.user_principal_name.casefold())


def _build_row(
    user: UserLicenseState,
    sku: LicenseSku,
    path: AssignmentPath,
    friendly_name: str,
) -> LicenseReportRow:
    matching = [state for state in user.assignment_states if state.sku_id == sku.id]
    timestamps = [state.last_updated for state in matching if state.last_updated is not None]
    return LicenseReportRow(
        user_id=user.user_id,
        display_name=user.display_name,
        user_principal_name=user.user_principal_name,
        account_enabled=user.account_enabled,
        sync_enabled=user.sync_enabled,
        created_at=user.created_at,
        sku_id=sku.id,
        sku_part_number=sku.part_number,
        friendly_name=friendly_name,
        path=path,
        group_ids=[state.assigned_by_group for state in matching if state.assigned_by_group],
        last_updated=max(timestamps) if timestamps else None,
    )


def classify(
    users: Sequence[UserLicenseState],
    target_skus: Sequence[LicenseSku],
    resolver: Optional[SkuNameResolver] = None,
) -> Dict[AssignmentPath, List[LicenseReportRow]]:
    """Partition the holders of each target SKU by assignment path.

    SKUs are processed in the order given; within a SKU, rows are sorted by
    display name. Every path is present in the result, possibly empty.
    """
    resolver = resolver or SkuNameResolver()
    result: Dict[AssignmentPath, List[LicenseReportRow]] = {path: [] for path in AssignmentPath}

    for sku in target_skus:
        friendly_name = sku.friendly_name or resolver.friendly_name(sku.part_number)
        per_sku: Dict[AssignmentPath, List[LicenseReportRow]] = {path: [] for path in AssignmentPath}
        seen = set()

        for user in users:
            if sku.id not in user.assigned_licenses or user.user_id in seen:
                continue
            seen.add(user.user_id)
            # Graph always records direct assignments, an absent entry means no group contributed.
            path = classify_assignment(user.assignment_states, sku.id) or AssignmentPath.DIRECTLY
            per_sku[path].append(_build_row(user, sku, path, friendly_name))

        for path, rows in per_sku.items():
            result[path].extend(sorted(rows, key=_sort_key))

    return result
