"""
Abstract storage service interface.
Defines the contract for all storage implementations.
"""

import enum
import json
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Iterable
from uuid import uuid4

from pydantic import BaseModel, ConfigDict

from canary_storage.core.exceptions import BackendUnavailableException, UnknownAccountException
from canary_storage.security.credentials import AccountCredentials

# A stored object: an ordered sequence of opaque JSON records
ObjectPayload = list[dict[str, Any]]


class ObjectType(enum.Enum):
    """
    Kinds of stored objects.

    Each type namespaces its objects under `group` and is written to a
    file named `filename` inside its per-id directory.
    """

    METRIC_SET_PAIR_LIST = ("metric_pairs", "metric_set_pairs.json")

    def __init__(self, group: str, filename: str):
        self.group = group
        self.filename = filename


class ObjectKey(BaseModel):
    """Listing entry for one stored object."""

    model_config = ConfigDict(frozen=True)

    id: str
    last_modified: datetime


def generate_object_id() -> str:
    """Fresh 128-bit random object id."""
    return str(uuid4())


def serialize_payload(payload: ObjectPayload) -> bytes:
    return json.dumps(payload, separators=(",", ":")).encode("utf-8")


def deserialize_payload(data: bytes, object_type: ObjectType, object_id: str) -> ObjectPayload:
    try:
        return json.loads(data)
    except ValueError as e:
        raise BackendUnavailableException(
            message=f"Stored object is not valid JSON: {str(e)}",
            details={"objectType": object_type.name, "id": object_id},
        )


class StorageService(ABC):
    """
    Abstract base class for storage services.

    A storage service is bound to one or more accounts and performs typed
    object operations for them. All implementations (memory, local, S3,
    Azure) must implement these methods to ensure consistent behavior
    across backends.

    Any I/O failure is raised as BackendUnavailableException and is never
    retried here.
    """

    def __init__(self, accounts: Iterable[AccountCredentials]):
        self.accounts = {account.name: account for account in accounts}

    def services_account(self, account_name: str) -> bool:
        """Whether this service can act on behalf of `account_name`."""
        return account_name in self.accounts

    def _get_account(self, account_name: str) -> AccountCredentials:
        account = self.accounts.get(account_name)
        if account is None:
            raise UnknownAccountException(account_name)
        return account

    def _key_prefix(self, account_name: str, object_type: ObjectType) -> str:
        """Object key prefix `{root_folder}/{account}/{group}` for key-value backends."""
        account = self._get_account(account_name)
        parts = [account.root_folder.strip("/"), account_name, object_type.group]
        return "/".join(part for part in parts if part)

    def _object_key(self, account_name: str, object_type: ObjectType, object_id: str) -> str:
        prefix = self._key_prefix(account_name, object_type)
        return f"{prefix}/{object_id}/{object_type.filename}"

    def _object_id_from_key(self, prefix: str, key: str, object_type: ObjectType) -> str | None:
        """Inverse of _object_key; None for keys that are not object files."""
        relative = key[len(prefix) + 1:]
        object_id, _, filename = relative.partition("/")
        if not object_id or filename != object_type.filename:
            return None
        return object_id

    @abstractmethod
    async def store_object(
        self,
        account_name: str,
        object_type: ObjectType,
        payload: ObjectPayload,
        object_id: str | None = None,
    ) -> str:
        """
        Persist a payload.

        Args:
            account_name: Account the object belongs to
            object_type: Object type namespace
            payload: Records to store
            object_id: Id to store under; a fresh one is generated if omitted

        Returns:
            The id the payload was stored under

        Raises:
            BackendUnavailableException: If the write fails
        """
        pass

    @abstractmethod
    async def load_object(
        self,
        account_name: str,
        object_type: ObjectType,
        object_id: str,
    ) -> ObjectPayload:
        """
        Load a complete payload.

        Raises:
            ObjectNotFoundException: If no object exists under the id
            BackendUnavailableException: If the read fails
        """
        pass

    @abstractmethod
    async def delete_object(
        self,
        account_name: str,
        object_type: ObjectType,
        object_id: str,
    ) -> None:
        """
        Delete an object.

        Deleting an id that does not exist succeeds silently.

        Raises:
            BackendUnavailableException: If the deletion fails
        """
        pass

    @abstractmethod
    async def list_object_keys(
        self,
        account_name: str,
        object_type: ObjectType,
    ) -> list[ObjectKey]:
        """
        List every stored object of a type, unordered and unpaginated.

        Returns:
            One ObjectKey per stored object; empty if there are none

        Raises:
            BackendUnavailableException: If the listing fails
        """
        pass
