"""
In-memory storage service.
Keeps objects in process memory; intended for development and tests.
"""

import copy
from datetime import datetime, timezone
from threading import Lock

from canary_storage.core.exceptions import ObjectNotFoundException
from canary_storage.storage.base import (
    ObjectKey,
    ObjectPayload,
    ObjectType,
    StorageService,
    generate_object_id,
)


class InMemoryStorageService(StorageService):
    """
    Storage held in a dict keyed by (account, object type, id).

    Payloads are deep-copied on the way in and out so callers never share
    state with the store.
    """

    def __init__(self, accounts):
        super().__init__(accounts)
        self._lock = Lock()
        self._objects: dict[tuple[str, ObjectType, str], tuple[ObjectPayload, datetime]] = {}

    async def store_object(
        self,
        account_name: str,
        object_type: ObjectType,
        payload: ObjectPayload,
        object_id: str | None = None,
    ) -> str:
        self._get_account(account_name)
        object_id = object_id or generate_object_id()
        entry = (copy.deepcopy(payload), datetime.now(timezone.utc))
        with self._lock:
            self._objects[(account_name, object_type, object_id)] = entry
        return object_id

    async def load_object(
        self,
        account_name: str,
        object_type: ObjectType,
        object_id: str,
    ) -> ObjectPayload:
        self._get_account(account_name)
        with self._lock:
            entry = self._objects.get((account_name, object_type, object_id))
        if entry is None:
            raise ObjectNotFoundException(object_type.name, object_id, account_name)
        return copy.deepcopy(entry[0])

    async def delete_object(
        self,
        account_name: str,
        object_type: ObjectType,
        object_id: str,
    ) -> None:
        self._get_account(account_name)
        with self._lock:
            self._objects.pop((account_name, object_type, object_id), None)

    async def list_object_keys(
        self,
        account_name: str,
        object_type: ObjectType,
    ) -> list[ObjectKey]:
        self._get_account(account_name)
        with self._lock:
            return [
                ObjectKey(id=key[2], last_modified=entry[1])
                for key, entry in self._objects.items()
                if key[0] == account_name and key[1] is object_type
            ]
