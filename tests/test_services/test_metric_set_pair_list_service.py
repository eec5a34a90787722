"""
Tests for the metric set pair list service.
"""

import pytest

from canary_storage.core.exceptions import (
    AmbiguousAccountException,
    BackendUnavailableException,
    NoAccountConfiguredException,
    ObjectNotFoundException,
)
from canary_storage.security.credentials import AccountType
from canary_storage.security.repository import AccountCredentialsRepository
from canary_storage.services import MetricSetPairListService
from canary_storage.storage import InMemoryStorageService, ObjectType, StorageServiceRepository
from conftest import make_account


class RecordingStorageService(InMemoryStorageService):
    """In-memory storage that records every call and can be made to fail."""

    def __init__(self, accounts):
        super().__init__(accounts)
        self.calls: list[str] = []
        self.failure: Exception | None = None

    def _record(self, name: str):
        self.calls.append(name)
        if self.failure is not None:
            raise self.failure

    async def store_object(self, account_name, object_type, payload, object_id=None):
        self._record("store_object")
        return await super().store_object(account_name, object_type, payload, object_id)

    async def load_object(self, account_name, object_type, object_id):
        self._record("load_object")
        return await super().load_object(account_name, object_type, object_id)

    async def delete_object(self, account_name, object_type, object_id):
        self._record("delete_object")
        return await super().delete_object(account_name, object_type, object_id)

    async def list_object_keys(self, account_name, object_type):
        self._record("list_object_keys")
        return await super().list_object_keys(account_name, object_type)


def _service(*accounts) -> tuple[MetricSetPairListService, RecordingStorageService]:
    storage = RecordingStorageService(accounts)
    service = MetricSetPairListService(
        AccountCredentialsRepository(accounts),
        StorageServiceRepository([storage]),
    )
    return service, storage


@pytest.mark.asyncio
async def test_each_operation_issues_one_storage_call():
    """Test every operation makes exactly one storage call."""
    service, storage = _service(make_account("store", AccountType.OBJECT_STORE))

    object_id = await service.store([{"a": 1}])
    assert await service.load(object_id) == [{"a": 1}]
    assert [key.id for key in await service.list_all()] == [object_id]
    await service.delete(object_id)

    assert storage.calls == ["store_object", "load_object", "list_object_keys", "delete_object"]


@pytest.mark.asyncio
async def test_stores_under_metric_set_pair_list_type():
    """Test objects are stored as metric set pair lists."""
    service, storage = _service(make_account("store", AccountType.OBJECT_STORE))

    object_id = await service.store([{"a": 1}], account_name="store")

    keys = await storage.list_object_keys("store", ObjectType.METRIC_SET_PAIR_LIST)
    assert [key.id for key in keys] == [object_id]


@pytest.mark.asyncio
async def test_resolution_failure_skips_storage():
    """Test resolution failures make no storage call."""
    service, storage = _service(
        make_account("one", AccountType.OBJECT_STORE),
        make_account("two", AccountType.OBJECT_STORE),
    )

    with pytest.raises(AmbiguousAccountException):
        await service.store([{"a": 1}])
    with pytest.raises(AmbiguousAccountException):
        await service.list_all()

    assert storage.calls == []


@pytest.mark.asyncio
async def test_no_object_store_account():
    """Test loading without any object store account."""
    service, storage = _service(make_account("metrics", AccountType.METRICS_STORE))

    with pytest.raises(NoAccountConfiguredException):
        await service.load("some-id")

    assert storage.calls == []


@pytest.mark.asyncio
async def test_not_found_propagates():
    """Test not found errors reach the caller."""
    service, _ = _service(make_account("store", AccountType.OBJECT_STORE))

    with pytest.raises(ObjectNotFoundException):
        await service.load("missing")


@pytest.mark.asyncio
async def test_backend_failure_propagates_without_retry():
    """Test backend failures are raised after a single attempt."""
    service, storage = _service(make_account("store", AccountType.OBJECT_STORE))
    storage.failure = BackendUnavailableException("disk on fire")

    with pytest.raises(BackendUnavailableException):
        await service.store([{"a": 1}])

    assert storage.calls == ["store_object"]
