from datetime import datetime
from enum import Enum
from typing import List, Optional, Set

from pydantic import BaseModel, ConfigDict, Field


class AssignmentPath(str, Enum):
    DIRECTLY = "Directly"
    FROM_GROUP = "FromGroup"
    DIRECTLY_AND_GROUP = "DirectlyAndGroup"


REMOVABLE_PATHS = (AssignmentPath.DIRECTLY, AssignmentPath.DIRECTLY_AND_GROUP)


class LicenseSku(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    part_number: str
    friendly_name: str = ""
    total_units: int = 0
    consumed_units: int = 0

    @property
    def available_units(self) -> int:
        return self.total_units - self.consumed_units

    @property
    def display_name(self) -> str:
        return self.friendly_name or self.part_number


class AssignmentState(BaseModel):
    sku_id: str
    assigned_by_group: Optional[str] = None
    last_updated: Optional[datetime] = None
    state: Optional[str] = None
    error: Optional[str] = None


class UserLicenseState(BaseModel):
    user_id: str
    display_name: str = ""
    user_principal_name: str = ""
    created_at: Optional[datetime] = None
    sync_enabled: bool = False
    account_enabled: bool = True
    assigned_licenses: Set[str] = Field(default_factory=set)
    assignment_states: List[AssignmentState] = Field(default_factory=list)


class LicenseReportRow(BaseModel):
    user_id: str
    display_name: str
    user_principal_name: str
    account_enabled: bool
    sync_enabled: bool
    created_at: Optional[datetime] = None
    sku_id: str
    sku_part_number: str
    friendly_name: str = ""
    path: AssignmentPath
    group_ids: List[str] = Field(default_factory=list)
    last_updated: Optional[datetime] = None


class RemovalStatus(str, Enum):
    REMOVED = "removed"
    SKIPPED = "skipped"
    FAILED = "failed"


class RemovalOutcome(BaseModel):
    row: LicenseReportRow
    status: RemovalStatus
    error: Optional[str] = None
