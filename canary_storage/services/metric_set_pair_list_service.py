"""
Metric set pair list service - orchestration for the object endpoints.

Each operation resolves the account, looks up its storage service and
performs exactly one storage call. Failures propagate unchanged.
"""

import logging

from canary_storage.security.credentials import AccountType
from canary_storage.security.repository import AccountCredentialsRepository
from canary_storage.security.resolver import resolve_account_by_name_or_type
from canary_storage.storage.base import ObjectKey, ObjectPayload, ObjectType, StorageService
from canary_storage.storage.registry import StorageServiceRepository

logger = logging.getLogger(__name__)

OBJECT_TYPE = ObjectType.METRIC_SET_PAIR_LIST


class MetricSetPairListService:
    """Service class for metric set pair list operations."""

    def __init__(
        self,
        accounts: AccountCredentialsRepository,
        storage_services: StorageServiceRepository,
    ):
        self.accounts = accounts
        self.storage_services = storage_services

    def _resolve(self, account_name: str | None, action: str) -> tuple[str, StorageService]:
        resolved_account_name = resolve_account_by_name_or_type(
            account_name,
            AccountType.OBJECT_STORE,
            self.accounts,
        )
        storage_service = self.storage_services.get_required_one(resolved_account_name, action)
        return resolved_account_name, storage_service

    async def load(self, metric_set_pair_list_id: str, account_name: str | None = None) -> ObjectPayload:
        resolved_account_name, storage_service = self._resolve(
            account_name, "read metric set pair list from bucket"
        )
        logger.debug(f"Loading metric set pair list {metric_set_pair_list_id} from {resolved_account_name}")
        return await storage_service.load_object(
            resolved_account_name, OBJECT_TYPE, metric_set_pair_list_id
        )

    async def store(self, metric_set_pair_list: ObjectPayload, account_name: str | None = None) -> str:
        """
        Store a new metric set pair list.

        Returns:
            The generated metric set pair list id
        """
        resolved_account_name, storage_service = self._resolve(
            account_name, "write metric set pair list to bucket"
        )
        metric_set_pair_list_id = await storage_service.store_object(
            resolved_account_name, OBJECT_TYPE, metric_set_pair_list
        )
        logger.info(
            f"Stored metric set pair list {metric_set_pair_list_id} "
            f"({len(metric_set_pair_list)} pairs) in {resolved_account_name}"
        )
        return metric_set_pair_list_id

    async def delete(self, metric_set_pair_list_id: str, account_name: str | None = None) -> None:
        resolved_account_name, storage_service = self._resolve(
            account_name, "delete metric set pair list"
        )
        await storage_service.delete_object(resolved_account_name, OBJECT_TYPE, metric_set_pair_list_id)
        logger.info(f"Deleted metric set pair list {metric_set_pair_list_id} from {resolved_account_name}")

    async def list_all(self, account_name: str | None = None) -> list[ObjectKey]:
        resolved_account_name, storage_service = self._resolve(
            account_name, "list all metric set pair lists"
        )
        keys = await storage_service.list_object_keys(resolved_account_name, OBJECT_TYPE)
        logger.debug(f"Listed {len(keys)} metric set pair lists in {resolved_account_name}")
        return keys
