"""Exception types raised by License Guardian."""


class LicenseGuardianError(Exception):
    """Base class for all License Guardian errors."""


class DirectoryServiceError(LicenseGuardianError):
    """A query against the directory service failed."""


class SkuNotFoundError(LicenseGuardianError):
    """The requested SKU is not subscribed in the tenant."""

    def __init__(self, sku: str):
        super().__init__(f"SKU '{sku}' is not subscribed in this tenant")
        self.sku = sku
