"""
Local filesystem storage service.
Stores objects on the local filesystem for development and simple deployments.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from uuid import uuid4

import aiofiles
import aiofiles.os

from canary_storage.core.exceptions import BackendUnavailableException, ObjectNotFoundException
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


class LocalStorageService(StorageService):
    """
    Local filesystem storage implementation.

    Objects live at `{root_folder}/{account}/{group}/{id}/{filename}`, with
    `root_folder` taken from each account's configuration.
    """

    def _group_path(self, account_name: str, object_type: ObjectType) -> Path:
        account = self._get_account(account_name)
        return Path(account.root_folder) / account_name / object_type.group

    def _object_path(self, account_name: str, object_type: ObjectType, object_id: str) -> Path:
        # Ids are single path segments; anything else cannot name a stored object
        if object_id in ("", ".", "..") or "/" in object_id or "\\" in object_id:
            raise ObjectNotFoundException(object_type.name, object_id, account_name)
        return self._group_path(account_name, object_type) / object_id / object_type.filename

    async def store_object(
        self,
        account_name: str,
        object_type: ObjectType,
        payload: ObjectPayload,
        object_id: str | None = None,
    ) -> str:
        object_id = object_id or generate_object_id()
        full_path = self._object_path(account_name, object_type, object_id)
        # Write beside the target and rename so readers never see a partial file
        tmp_path = full_path.with_name(f".{full_path.name}.{uuid4().hex}.tmp")

        try:
            full_path.parent.mkdir(parents=True, exist_ok=True)

            async with aiofiles.open(tmp_path, "wb") as f:
                await f.write(serialize_payload(payload))
            await aiofiles.os.replace(tmp_path, full_path)

        except OSError as e:
            raise BackendUnavailableException(
                message=f"Failed to store object: {str(e)}",
                details={"path": str(full_path)},
            )

        logger.debug(f"Wrote {object_type.name} {object_id} to {full_path}")
        return object_id

    async def load_object(
        self,
        account_name: str,
        object_type: ObjectType,
        object_id: str,
    ) -> ObjectPayload:
        full_path = self._object_path(account_name, object_type, object_id)

        try:
            async with aiofiles.open(full_path, "rb") as f:
                data = await f.read()

        except FileNotFoundError:
            raise ObjectNotFoundException(object_type.name, object_id, account_name)
        except OSError as e:
            raise BackendUnavailableException(
                message=f"Failed to load object: {str(e)}",
                details={"path": str(full_path)},
            )

        return deserialize_payload(data, object_type, object_id)

    async def delete_object(
        self,
        account_name: str,
        object_type: ObjectType,
        object_id: str,
    ) -> None:
        try:
            full_path = self._object_path(account_name, object_type, object_id)
        except ObjectNotFoundException:
            return

        try:
            await aiofiles.os.remove(full_path)
        except FileNotFoundError:
            return
        except OSError as e:
            raise BackendUnavailableException(
                message=f"Failed to delete object: {str(e)}",
                details={"path": str(full_path)},
            )

        # Remove the per-id directory if nothing else is left in it
        try:
            full_path.parent.rmdir()
        except OSError:
            pass

    async def list_object_keys(
        self,
        account_name: str,
        object_type: ObjectType,
    ) -> list[ObjectKey]:
        group_path = self._group_path(account_name, object_type)

        try:
            object_ids = await aiofiles.os.listdir(group_path)
        except FileNotFoundError:
            return []
        except OSError as e:
            raise BackendUnavailableException(
                message=f"Failed to list objects: {str(e)}",
                details={"path": str(group_path)},
            )

        keys = []
        for object_id in object_ids:
            try:
                stat = await aiofiles.os.stat(group_path / object_id / object_type.filename)
            except (FileNotFoundError, NotADirectoryError):
                # Entry without an object file, e.g. a delete in progress
                continue
            except OSError as e:
                raise BackendUnavailableException(
                    message=f"Failed to list objects: {str(e)}",
                    details={"path": str(group_path)},
                )
            keys.append(
                ObjectKey(
                    id=object_id,
                    last_modified=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
                )
            )

        return keys
