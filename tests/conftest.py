import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from license_guardian.config import settings as settings_module
from license_guardian.integrations import directory as directory_module
from license_guardian.integrations.directory import MockDirectoryService
from license_guardian.models.license import AssignmentState, LicenseSku, UserLicenseState

E3 = "6fd2c87f-b296-42f0-b197-1e91e994b900"
E5 = "c7df2760-2c81-4ef7-b578-5b5392b571df"
FLOW = "f30db892-07e9-47e9-837c-80727f46fd3d"
GROUP_A = "group-a"
GROUP_B = "group-b"


def make_user(user_id, display_name, states, assigned=None, **kwargs):
    """Build a user whose assigned licenses default to the SKUs named in ``states``."""
    assignment_states = [
        AssignmentState(sku_id=sku_id, assigned_by_group=group) for sku_id, group in states
    ]
    if assigned is None:
        assigned = {state.sku_id for state in assignment_states}
    return UserLicenseState(
        user_id=user_id,
        display_name=display_name,
        user_principal_name=f"{user_id}@contoso.com",
        created_at=datetime(2023, 1, 1, tzinfo=timezone.utc),
        assigned_licenses=set(assigned),
        assignment_states=assignment_states,
        **kwargs,
    )


@pytest.fixture
def skus():
    return [
        LicenseSku(id=E3, part_number="ENTERPRISEPACK", total_units=10, consumed_units=4),
        LicenseSku(id=E5, part_number="ENTERPRISEPREMIUM", total_units=5, consumed_units=1),
        LicenseSku(id=FLOW, part_number="FLOW_FREE", total_units=100, consumed_units=0),
    ]


@pytest.fixture
def users():
    return [
        make_user("zoe", "Zoe Direct", [(E3, None)]),
        make_user("adam", "adam Both", [(E3, None), (E3, GROUP_A), (E5, None)]),
        make_user("mia", "Mia Group", [(E3, GROUP_A), (E3, GROUP_B)]),
        make_user("carl", "Carl Direct", [(E3, None)], sync_enabled=True),
    ]


@pytest.fixture
def directory(skus, users):
    return MockDirectoryService(skus=skus, users=users)


@pytest.fixture(autouse=True)
def _reset_cached_clients(monkeypatch):
    monkeypatch.delenv("DIRECTORY_PROVIDER", raising=False)
    settings_module.reset_settings()
    monkeypatch.setattr(directory_module, "_directory_instance", None)
    yield
    settings_module.reset_settings()
