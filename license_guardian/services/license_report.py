import logging
from typing import Dict, List, Optional

from ..core.classifier import classify
from ..data.sku_names import SkuNameResolver
from ..exceptions import SkuNotFoundError
from ..integrations.directory import DirectoryService
from ..models.license import AssignmentPath, LicenseReportRow, LicenseSku, UserLicenseState

logger = logging.getLogger(__name__)


class LicenseReportService:
    """Fetches SKUs and license holders, then classifies them by assignment path."""

    def __init__(self, directory: DirectoryService, resolver: Optional[SkuNameResolver] = None):
        self.directory = directory
        self.resolver = resolver or SkuNameResolver()

    def _with_name(self, sku: LicenseSku) -> LicenseSku:
        if sku.friendly_name:
            return sku
        return sku.model_copy(update={"friendly_name": self.resolver.friendly_name(sku.part_number)})

    async def list_skus(self) -> List[LicenseSku]:
        """Subscribed SKUs with product names filled in, sorted by display name."""
        skus = [self._with_name(sku) for sku in await self.directory.list_subscribed_skus()]
        return sorted(skus, key=lambda sku: sku.display_name.casefold())

    async def get_target_skus(self, sku: Optional[str] = None, check_all: bool = False) -> List[LicenseSku]:
        if bool(sku) == bool(check_all):
            raise ValueError("Specify exactly one of a SKU or check_all")

        skus = await self.list_skus()
        if check_all:
            consumed = [item for item in skus if item.consumed_units > 0]
            logger.debug("Checking %s of %s SKUs with consumed units", len(consumed), len(skus))
            return consumed

        for item in skus:
            if sku == item.part_number or sku.lower() == item.id.lower():
                return [item]
        raise SkuNotFoundError(sku)

    async def _fetch_users(self, skus: List[LicenseSku]) -> List[UserLicenseState]:
        users: Dict[str, UserLicenseState] = {}
        for item in skus:
            for user in await self.directory.list_licensed_users(item.id):
                users.setdefault(user.user_id, user)
        return list(users.values())

    async def get_classification(
        self, sku: Optional[str] = None, check_all: bool = False
    ) -> Dict[AssignmentPath, List[LicenseReportRow]]:
        target_skus = await self.get_target_skus(sku=sku, check_all=check_all)
        users = await self._fetch_users(target_skus)
        logger.info("Classifying %s users across %s SKUs", len(users), len(target_skus))
        return classify(users, target_skus, resolver=self.resolver)

    async def get_report(
        self, path: AssignmentPath, sku: Optional[str] = None, check_all: bool = False
    ) -> List[LicenseReportRow]:
        path = AssignmentPath(path)
        classification = await self.get_classification(sku=sku, check_all=check_all)
        return classification[path]
