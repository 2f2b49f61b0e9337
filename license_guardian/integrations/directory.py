import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional
from uuid import UUID

from kiota_abstractions.base_request_configuration import RequestConfiguration
from msgraph.generated.users.item.assign_license.assign_license_post_request_body import (
    AssignLicensePostRequestBody,
)
from msgraph.generated.users.users_request_builder import UsersRequestBuilder
from opentelemetry import trace

from ..config.settings import get_graph_client, get_settings
from ..exceptions import DirectoryServiceError
from ..models.license import AssignmentState, LicenseSku, UserLicenseState

logger = logging.getLogger(__name__)
_tracer = trace.get_tracer(__name__)

USER_LICENSE_PROPERTIES = [
    "id",
    "displayName",
    "userPrincipalName",
    "createdDateTime",
    "onPremisesSyncEnabled",
    "accountEnabled",
    "assignedLicenses",
    "licenseAssignmentStates",
]


class DirectoryService(ABC):
    @abstractmethod
    async def list_subscribed_skus(self) -> List[LicenseSku]:
        pass

    @abstractmethod
    async def list_licensed_users(self, sku_id: str) -> List[UserLicenseState]:
        """Return every user that holds ``sku_id``, across all result pages."""
        pass

    @abstractmethod
    async def remove_license(self, user_id: str, sku_id: str) -> None:
        """Remove exactly ``sku_id`` from the user, leaving other licenses untouched."""
        pass


class MockDirectoryService(DirectoryService):
    def __init__(
        self,
        skus: Optional[Iterable[LicenseSku]] = None,
        users: Optional[Iterable[UserLicenseState]] = None,
    ):
        self.skus: Dict[str, LicenseSku] = {
            sku.id: sku for sku in (skus if skus is not None else self._create_mock_skus())
        }
        self.users: Dict[str, UserLicenseState] = {
            user.user_id: user for user in (users if users is not None else self._create_mock_users())
        }
        self.remove_calls: List[Dict[str, Any]] = []
        self.failing_users: set = set()

    def _create_mock_skus(self) -> List[LicenseSku]:
        return [
            LicenseSku(
                id="6fd2c87f-b296-42f0-b197-1e91e994b900",
                part_number="ENTERPRISEPACK",
                total_units=25,
                consumed_units=3,
            ),
            LicenseSku(
                id="c7df2760-2c81-4ef7-b578-5b5392b571df",
                part_number="ENTERPRISEPREMIUM",
                total_units=5,
                consumed_units=1,
            ),
            LicenseSku(
                id="f30db892-07e9-47e9-837c-80727f46fd3d",
                part_number="FLOW_FREE",
                total_units=10000,
                consumed_units=0,
            ),
        ]

    def _create_mock_users(self) -> List[UserLicenseState]:
        e3 = "6fd2c87f-b296-42f0-b197-1e91e994b900"
        e5 = "c7df2760-2c81-4ef7-b578-5b5392b571df"
        sales_group = "8d0f6c2a-51f3-4b4e-9a0e-3c1d2f7e5b11"
        updated = datetime(2024, 3, 1, tzinfo=timezone.utc)
        return [
            UserLicenseState(
                user_id="user001",
                display_name="John Doe",
                user_principal_name="john.doe@company.com",
                created_at=datetime(2022, 1, 15, tzinfo=timezone.utc),
                sync_enabled=True,
                assigned_licenses={e3},
                assignment_states=[AssignmentState(sku_id=e3, last_updated=updated, state="Active")],
            ),
            UserLicenseState(
                user_id="user002",
                display_name="Jane Smith",
                user_principal_name="jane.smith@company.com",
                created_at=datetime(2021, 6, 1, tzinfo=timezone.utc),
                assigned_licenses={e3, e5},
                assignment_states=[
                    AssignmentState(sku_id=e3, last_updated=updated, state="Active"),
                    AssignmentState(
                        sku_id=e3, assigned_by_group=sales_group, last_updated=updated, state="Active"
                    ),
                    AssignmentState(sku_id=e5, last_updated=updated, state="Active"),
                ],
            ),
            UserLicenseState(
                user_id="user003",
                display_name="Bob Wilson",
                user_principal_name="bob.wilson@company.com",
                created_at=datetime(2020, 3, 10, tzinfo=timezone.utc),
                account_enabled=False,
                assigned_licenses={e3},
                assignment_states=[
                    AssignmentState(
                        sku_id=e3, assigned_by_group=sales_group, last_updated=updated, state="Active"
                    ),
                ],
            ),
        ]

    async def list_subscribed_skus(self) -> List[LicenseSku]:
        return list(self.skus.values())

    async def list_licensed_users(self, sku_id: str) -> List[UserLicenseState]:
        return [user for user in self.users.values() if sku_id in user.assigned_licenses]

    async def remove_license(self, user_id: str, sku_id: str) -> None:
        self.remove_calls.append({"user_id": user_id, "add_licenses": [], "remove_licenses": [sku_id]})

        if user_id in self.failing_users:
            raise DirectoryServiceError(f"Throttled while updating licenses for {user_id}")
        user = self.users.get(user_id)
        if user is None:
            raise DirectoryServiceError(f"User {user_id} not found")
        if sku_id not in user.assigned_licenses:
            raise DirectoryServiceError(f"User {user_id} does not hold license {sku_id}")

        remaining = [
            state
            for state in user.assignment_states
            if state.sku_id != sku_id or state.assigned_by_group
        ]
        if len(remaining) == len(user.assignment_states) and any(
            state.sku_id == sku_id for state in remaining
        ):
            raise DirectoryServiceError(
                f"License {sku_id} is inherited from a group for {user_id} and cannot be removed directly"
            )
        user.assignment_states = remaining
        if not any(state.sku_id == sku_id for state in remaining):
            user.assigned_licenses.discard(sku_id)
            sku = self.skus.get(sku_id)
            if sku is not None:
                self.skus[sku_id] = sku.model_copy(update={"consumed_units": max(sku.consumed_units - 1, 0)})


class GraphDirectoryService(DirectoryService):
    def __init__(self, page_size: Optional[int] = None) -> None:
        self._logger = logging.getLogger(f"{__name__}.GraphDirectoryService")
        self._page_size = page_size or get_settings().graph_page_size

    async def _get_client(self):
        client = await get_graph_client()
        if client is None:
            raise DirectoryServiceError("Graph client not initialized")
        return client

    async def list_subscribed_skus(self) -> List[LicenseSku]:
        client = await self._get_client()
        with _tracer.start_as_current_span("directory.list_subscribed_skus"):
            try:
                response = await client.subscribed_skus.get()
            except Exception as exc:
                self._logger.error("Error listing subscribed SKUs: %s", exc, exc_info=True)
                raise DirectoryServiceError(f"Failed to list subscribed SKUs: {exc}") from exc

        return [self._map_sku(item) for item in (getattr(response, "value", None) or [])]

    async def list_licensed_users(self, sku_id: str) -> List[UserLicenseState]:
        client = await self._get_client()
        query = UsersRequestBuilder.UsersRequestBuilderGetQueryParameters(
            select=USER_LICENSE_PROPERTIES,
            filter=f"assignedLicenses/any(x:x/skuId eq {sku_id})",
            top=self._page_size,
            count=True,
        )
        config = RequestConfiguration(query_parameters=query)
        config.headers.add("ConsistencyLevel", "eventual")
        # nextLink already carries the query, only the header has to travel along.
        page_config = RequestConfiguration()
        page_config.headers.add("ConsistencyLevel", "eventual")

        users: List[UserLicenseState] = []
        with _tracer.start_as_current_span("directory.list_licensed_users") as span:
            span.set_attribute("license.sku_id", sku_id)
            try:
                response = await client.users.get(request_configuration=config)
                while response is not None:
                    for item in getattr(response, "value", None) or []:
                        user = self._map_user(item)
                        if user.user_id:
                            users.append(user)
                    next_link = getattr(response, "odata_next_link", None)
                    if not next_link:
                        break
                    response = await client.users.with_url(next_link).get(request_configuration=page_config)
            except Exception as exc:
                self._logger.error("Error listing users licensed for %s: %s", sku_id, exc, exc_info=True)
                raise DirectoryServiceError(f"Failed to list users for SKU {sku_id}: {exc}") from exc
            span.set_attribute("license.user_count", len(users))

        self._logger.debug("Fetched %s users holding %s", len(users), sku_id)
        return users

    async def remove_license(self, user_id: str, sku_id: str) -> None:
        client = await self._get_client()
        body = AssignLicensePostRequestBody(add_licenses=[], remove_licenses=[UUID(sku_id)])
        with _tracer.start_as_current_span("directory.remove_license") as span:
            span.set_attribute("license.sku_id", sku_id)
            span.set_attribute("user.id", user_id)
            await client.users.by_user_id(user_id).assign_license.post(body)
        self._logger.info("Removed license %s from %s via Graph API", sku_id, user_id)

    def _map_sku(self, item: Any) -> LicenseSku:
        prepaid = _field(item, "prepaid_units", "prepaidUnits")
        return LicenseSku(
            id=str(_field(item, "sku_id", "skuId") or ""),
            part_number=_field(item, "sku_part_number", "skuPartNumber") or "",
            total_units=_field(prepaid, "enabled") or 0,
            consumed_units=_field(item, "consumed_units", "consumedUnits") or 0,
        )

    def _map_user(self, item: Any) -> UserLicenseState:
        assigned = _field(item, "assigned_licenses", "assignedLicenses") or []
        states = _field(item, "license_assignment_states", "licenseAssignmentStates") or []
        return UserLicenseState(
            user_id=_field(item, "id") or "",
            display_name=_field(item, "display_name", "displayName") or "",
            user_principal_name=_field(item, "user_principal_name", "userPrincipalName") or "",
            created_at=_parse_datetime(_field(item, "created_date_time", "createdDateTime")),
            sync_enabled=bool(_field(item, "on_premises_sync_enabled", "onPremisesSyncEnabled")),
            account_enabled=_field(item, "account_enabled", "accountEnabled") is not False,
            assigned_licenses={
                str(_field(license, "sku_id", "skuId")) for license in assigned if _field(license, "sku_id", "skuId")
            },
            assignment_states=[
                AssignmentState(
                    sku_id=str(_field(state, "sku_id", "skuId") or ""),
                    assigned_by_group=_field(state, "assigned_by_group", "assignedByGroup") or None,
                    last_updated=_parse_datetime(_field(state, "last_updated_date_time", "lastUpdatedDateTime")),
                    state=_field(state, "state"),
                    error=_field(state, "error"),
                )
                for state in states
            ],
        )


def _field(graph_object: Any, *names: str) -> Any:
    """Read the first populated attribute or key from a Graph model or a plain dict."""
    if graph_object is None:
        return None
    for name in names:
        if isinstance(graph_object, dict):
            value = graph_object.get(name)
        else:
            value = getattr(graph_object, name, None)
        if value is not None:
            return value
    return None


def _parse_datetime(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str) and value:
        candidate = value
        if candidate.endswith("Z"):
            candidate = candidate[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(candidate)
        except ValueError:
            return None
    return None


_directory_instance: Optional[DirectoryService] = None


async def get_directory_service(force_refresh: bool = False) -> DirectoryService:
    """Return the configured directory service instance."""
    global _directory_instance

    if not force_refresh and _directory_instance is not None:
        return _directory_instance

    provider_type = get_settings().directory_provider
    if provider_type == "azure":
        _directory_instance = GraphDirectoryService()
        logger.info("Using Microsoft Graph directory integration")
    else:
        _directory_instance = MockDirectoryService()
        logger.info("Using mock directory integration")

    return _directory_instance
