"""
Azure Blob Storage service.
Supports Azure Blob Storage for Azure-based deployments.
"""

import asyncio
import logging

from azure.core.exceptions import AzureError, ResourceExistsError, ResourceNotFoundError
from azure.storage.blob import BlobServiceClient, ContentSettings

from canary_storage.core.exceptions import (
    BackendUnavailableException,
    ConfigurationException,
    ObjectNotFoundException,
)
from canary_storage.security.credentials import AccountCredentials
from canary_storage.storage.base import (
    ObjectKey,
    ObjectPayload,
    ObjectType,
    StorageService,
    deserialize_payload,
    generate_object_id,
    serialize_payload,
)

logger = logging.getLogger(__name__)


def create_blob_service_client(account: AccountCredentials) -> BlobServiceClient:
    return BlobServiceClient.from_connection_string(
        account.connection_string.get_secret_value()
    )


class AzureStorageService(StorageService):
    """
    Azure Blob Storage implementation.

    Each account names its own connection string and container.
    """

    def __init__(self, accounts, client_factory=create_blob_service_client):
        super().__init__(accounts)

        for account in self.accounts.values():
            if not account.connection_string or not account.container:
                raise ConfigurationException(
                    message=f"Azure account {account.name} is missing its connection string or container",
                    details={"accountName": account.name, "required": ["connection_string", "container"]},
                )

        self.clients = {name: client_factory(account) for name, account in self.accounts.items()}
        self._known_containers: set[str] = set()

    def _container_client(self, account_name: str):
        container = self._get_account(account_name).container
        return self.clients[account_name].get_container_client(container)

    def _ensure_container_exists(self, account_name: str):
        """Create container if it doesn't exist."""
        container_client = self._container_client(account_name)
        if container_client.container_name in self._known_containers:
            return

        if not container_client.exists():
            logger.info(f"Creating container {container_client.container_name} for account {account_name}")
            try:
                container_client.create_container()
            except ResourceExistsError:
                pass

        self._known_containers.add(container_client.container_name)

    async def store_object(
        self,
        account_name: str,
        object_type: ObjectType,
        payload: ObjectPayload,
        object_id: str | None = None,
    ) -> str:
        object_id = object_id or generate_object_id()
        key = self._object_key(account_name, object_type, object_id)
        body = serialize_payload(payload)

        def _store():
            self._ensure_container_exists(account_name)
            self._container_client(account_name).upload_blob(
                key,
                body,
                overwrite=True,
                content_settings=ContentSettings(content_type="application/json"),
            )

        try:
            await asyncio.to_thread(_store)
        except AzureError as e:
            raise BackendUnavailableException(
                message=f"Failed to store object in Azure: {str(e)}",
                details={"key": key, "container": self._get_account(account_name).container},
            )

        return object_id

    async def load_object(
        self,
        account_name: str,
        object_type: ObjectType,
        object_id: str,
    ) -> ObjectPayload:
        key = self._object_key(account_name, object_type, object_id)

        def _load() -> bytes:
            return self._container_client(account_name).download_blob(key).readall()

        try:
            data = await asyncio.to_thread(_load)
        except ResourceNotFoundError:
            raise ObjectNotFoundException(object_type.name, object_id, account_name)
        except AzureError as e:
            raise BackendUnavailableException(
                message=f"Failed to load object from Azure: {str(e)}",
                details={"key": key, "container": self._get_account(account_name).container},
            )

        return deserialize_payload(data, object_type, object_id)

    async def delete_object(
        self,
        account_name: str,
        object_type: ObjectType,
        object_id: str,
    ) -> None:
        key = self._object_key(account_name, object_type, object_id)

        try:
            await asyncio.to_thread(self._container_client(account_name).delete_blob, key)
        except ResourceNotFoundError:
            return
        except AzureError as e:
            raise BackendUnavailableException(
                message=f"Failed to delete object from Azure: {str(e)}",
                details={"key": key, "container": self._get_account(account_name).container},
            )

    async def list_object_keys(
        self,
        account_name: str,
        object_type: ObjectType,
    ) -> list[ObjectKey]:
        prefix = self._key_prefix(account_name, object_type)

        def _list() -> list[ObjectKey]:
            keys = []
            blobs = self._container_client(account_name).list_blobs(name_starts_with=f"{prefix}/")
            for blob in blobs:
                object_id = self._object_id_from_key(prefix, blob.name, object_type)
                if object_id is not None:
                    keys.append(ObjectKey(id=object_id, last_modified=blob.last_modified))
            return keys

        try:
            return await asyncio.to_thread(_list)
        except ResourceNotFoundError:
            return []
        except AzureError as e:
            raise BackendUnavailableException(
                message=f"Failed to list objects in Azure: {str(e)}",
                details={"prefix": prefix, "container": self._get_account(account_name).container},
            )
