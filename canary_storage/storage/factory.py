"""
Registry factory.
Builds the account and storage service registries from configuration.
"""

import logging
from functools import lru_cache

from canary_storage.config import Settings, get_settings
from canary_storage.security.credentials import AccountType
from canary_storage.security.repository import AccountCredentialsRepository
from canary_storage.storage.azure import AzureStorageService
from canary_storage.storage.base import StorageService
from canary_storage.storage.local import LocalStorageService
from canary_storage.storage.memory import InMemoryStorageService
from canary_storage.storage.registry import StorageServiceRepository
from canary_storage.storage.s3 import S3StorageService

logger = logging.getLogger(__name__)


def build_storage_services(accounts: AccountCredentialsRepository) -> list[StorageService]:
    """
    Create one storage service per backend kind in use.

    Only accounts supporting OBJECT_STORE are bound to a storage service.

    Raises:
        ConfigurationException: If an account's backend settings are incomplete
    """
    by_backend: dict[str, list] = {}
    for account in accounts.get_all_of(AccountType.OBJECT_STORE):
        by_backend.setdefault(account.backend, []).append(account)

    services: list[StorageService] = []
    for backend, backend_accounts in by_backend.items():
        if backend == "memory":
            services.append(InMemoryStorageService(backend_accounts))
        elif backend == "local":
            services.append(LocalStorageService(backend_accounts))
        elif backend == "s3":
            services.append(S3StorageService(backend_accounts))
        elif backend == "azure":
            services.append(AzureStorageService(backend_accounts))
        else:
            raise ValueError(f"Unknown storage backend: {backend}")

        logger.info(
            f"Storage backend {backend} bound to accounts: "
            f"{', '.join(a.name for a in backend_accounts)}"
        )

    return services


def build_registries(settings: Settings) -> tuple[AccountCredentialsRepository, StorageServiceRepository]:
    accounts = AccountCredentialsRepository(settings.ACCOUNTS)
    return accounts, StorageServiceRepository(build_storage_services(accounts))


@lru_cache
def get_registries() -> tuple[AccountCredentialsRepository, StorageServiceRepository]:
    """
    Get the process-wide registries.

    Uses LRU cache to ensure they are built only once.
    """
    return build_registries(get_settings())


def get_account_repository() -> AccountCredentialsRepository:
    """Dependency function for FastAPI."""
    return get_registries()[0]


def get_storage_service_repository() -> StorageServiceRepository:
    """Dependency function for FastAPI."""
    return get_registries()[1]
