"""
Storage service registry.
Maps an account name to the storage service that acts on its behalf.
"""

from typing import Iterable

from canary_storage.core.exceptions import StorageServiceNotConfiguredException
from canary_storage.storage.base import StorageService


class StorageServiceRepository:
    """Read-only list of storage services, registered once at startup."""

    def __init__(self, services: Iterable[StorageService] = ()):
        self._services = tuple(services)

    def get_one(self, account_name: str) -> StorageService | None:
        """First registered service that services `account_name`, if any."""
        return next(
            (service for service in self._services if service.services_account(account_name)),
            None,
        )

    def get_required_one(self, account_name: str, action: str = "access object storage") -> StorageService:
        service = self.get_one(account_name)
        if service is None:
            raise StorageServiceNotConfiguredException(account_name, action)
        return service

    def get_all(self) -> list[StorageService]:
        return list(self._services)
