"""
Pytest configuration and fixtures for Canary Storage API tests.
"""

from collections.abc import AsyncGenerator
from typing import Any

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from canary_storage.main import app
from canary_storage.security.credentials import AccountCredentials, AccountType
from canary_storage.security.repository import AccountCredentialsRepository
from canary_storage.storage import (
    InMemoryStorageService,
    StorageServiceRepository,
    get_account_repository,
    get_storage_service_repository,
)


def make_account(name: str, *types: AccountType, **kwargs) -> AccountCredentials:
    return AccountCredentials(name=name, supported_types=frozenset(types), **kwargs)


@pytest.fixture
def object_store_account() -> AccountCredentials:
    return make_account("my-object-store", AccountType.OBJECT_STORE)


@pytest.fixture
def accounts(object_store_account) -> AccountCredentialsRepository:
    """One object store account plus a metrics-only account."""
    return AccountCredentialsRepository([
        object_store_account,
        make_account("my-metrics", AccountType.METRICS_STORE),
    ])


@pytest.fixture
def memory_storage(object_store_account) -> InMemoryStorageService:
    return InMemoryStorageService([object_store_account])


@pytest.fixture
def storage_services(memory_storage) -> StorageServiceRepository:
    return StorageServiceRepository([memory_storage])


@pytest_asyncio.fixture(scope="function")
async def client(accounts, storage_services) -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client."""

    app.dependency_overrides[get_account_repository] = lambda: accounts
    app.dependency_overrides[get_storage_service_repository] = lambda: storage_services

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def sample_metric_set_pair_list() -> list[dict[str, Any]]:
    """Sample metric set pair records for testing."""
    return [
        {
            "name": "cpu",
            "id": "7b3c9a6e-0d64-4c67-9a2b-0e1f3d1e6a11",
            "tags": {"region": "us-west-2"},
            "values": {"control": [1.0, 2.0, 3.0], "experiment": [1.5, 2.5, 3.5]},
            "attributes": {"control": {"query": "cpu"}, "experiment": {"query": "cpu"}},
        },
        {
            "name": "latency",
            "id": "c16e4c7d-5b8b-4f7e-8b2a-4a4b1d8f4c02",
            "tags": {},
            "values": {"control": [10.0], "experiment": [12.0]},
        },
    ]
