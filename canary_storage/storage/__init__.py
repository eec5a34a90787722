"""
Storage abstraction layer for the Canary Storage API.
Supports multiple backends: in-memory, local filesystem, S3/MinIO, Azure Blob.
"""

from canary_storage.storage.base import (
    ObjectKey,
    ObjectPayload,
    ObjectType,
    StorageService,
    generate_object_id,
)
from canary_storage.storage.memory import InMemoryStorageService
from canary_storage.storage.local import LocalStorageService
from canary_storage.storage.s3 import S3StorageService
from canary_storage.storage.azure import AzureStorageService
from canary_storage.storage.registry import StorageServiceRepository
from canary_storage.storage.factory import (
    build_registries,
    get_account_repository,
    get_registries,
    get_storage_service_repository,
)

__all__ = [
    "ObjectKey",
    "ObjectPayload",
    "ObjectType",
    "StorageService",
    "generate_object_id",
    "InMemoryStorageService",
    "LocalStorageService",
    "S3StorageService",
    "AzureStorageService",
    "StorageServiceRepository",
    "build_registries",
    "get_account_repository",
    "get_registries",
    "get_storage_service_repository",
]
