"""
FastAPI dependency injection functions.
Provides common dependencies used across endpoints.
"""

from typing import Annotated

from fastapi import Depends

from canary_storage.security.repository import AccountCredentialsRepository
from canary_storage.services.metric_set_pair_list_service import MetricSetPairListService
from canary_storage.storage import (
    StorageServiceRepository,
    get_account_repository,
    get_storage_service_repository,
)


# Type aliases for cleaner endpoint signatures
Accounts = Annotated[AccountCredentialsRepository, Depends(get_account_repository)]
StorageServices = Annotated[StorageServiceRepository, Depends(get_storage_service_repository)]


def get_metric_set_pair_list_service(
    accounts: Accounts,
    storage_services: StorageServices,
) -> MetricSetPairListService:
    return MetricSetPairListService(accounts, storage_services)


MetricSetPairLists = Annotated[MetricSetPairListService, Depends(get_metric_set_pair_list_service)]
