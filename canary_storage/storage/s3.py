"""
S3-compatible storage service.
Supports AWS S3 and S3-compatible services like MinIO.
"""

import asyncio
import logging

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

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


def create_s3_client(account: AccountCredentials):
    """Build a boto3 S3 client from an account's settings."""
    # max_attempts counts the initial call, so failures surface without retries
    config = Config(
        signature_version="s3v4",
        retries={"max_attempts": 1, "mode": "standard"},
    )

    return boto3.client(
        "s3",
        endpoint_url=account.endpoint_url,
        aws_access_key_id=account.access_key.get_secret_value() if account.access_key else None,
        aws_secret_access_key=account.secret_key.get_secret_value() if account.secret_key else None,
        region_name=account.region,
        config=config,
    )


class S3StorageService(StorageService):
    """
    S3-compatible object storage implementation.

    Each account names its own bucket and, optionally, endpoint and keys.
    boto3 is synchronous, so every call runs in a worker thread.
    """

    def __init__(self, accounts, client_factory=create_s3_client):
        super().__init__(accounts)

        for account in self.accounts.values():
            if not account.bucket:
                raise ConfigurationException(
                    message=f"S3 account {account.name} has no bucket configured",
                    details={"accountName": account.name, "required": "bucket"},
                )

        self.clients = {name: client_factory(account) for name, account in self.accounts.items()}
        self._known_buckets: set[str] = set()

    def _bucket(self, account_name: str) -> str:
        return self._get_account(account_name).bucket

    def _ensure_bucket_exists(self, account_name: str):
        """Create the account's bucket if it doesn't exist."""
        bucket = self._bucket(account_name)
        if bucket in self._known_buckets:
            return

        client = self.clients[account_name]
        region = self._get_account(account_name).region
        try:
            client.head_bucket(Bucket=bucket)
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code")
            if error_code not in ("404", "NoSuchBucket"):
                raise
            logger.info(f"Creating bucket {bucket} for account {account_name}")
            if region and region != "us-east-1":
                client.create_bucket(
                    Bucket=bucket,
                    CreateBucketConfiguration={"LocationConstraint": region},
                )
            else:
                client.create_bucket(Bucket=bucket)

        self._known_buckets.add(bucket)

    async def store_object(
        self,
        account_name: str,
        object_type: ObjectType,
        payload: ObjectPayload,
        object_id: str | None = None,
    ) -> str:
        object_id = object_id or generate_object_id()
        bucket = self._bucket(account_name)
        key = self._object_key(account_name, object_type, object_id)
        body = serialize_payload(payload)

        def _store():
            self._ensure_bucket_exists(account_name)
            self.clients[account_name].put_object(
                Bucket=bucket,
                Key=key,
                Body=body,
                ContentType="application/json",
            )

        try:
            await asyncio.to_thread(_store)
        except (ClientError, BotoCoreError) as e:
            raise BackendUnavailableException(
                message=f"Failed to store object in S3: {str(e)}",
                details={"key": key, "bucket": bucket},
            )

        return object_id

    async def load_object(
        self,
        account_name: str,
        object_type: ObjectType,
        object_id: str,
    ) -> ObjectPayload:
        bucket = self._bucket(account_name)
        key = self._object_key(account_name, object_type, object_id)

        def _load() -> bytes:
            response = self.clients[account_name].get_object(Bucket=bucket, Key=key)
            return response["Body"].read()

        try:
            data = await asyncio.to_thread(_load)
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code")
            if error_code in ("NoSuchKey", "NoSuchBucket", "404"):
                raise ObjectNotFoundException(object_type.name, object_id, account_name)
            raise BackendUnavailableException(
                message=f"Failed to load object from S3: {str(e)}",
                details={"key": key, "bucket": bucket},
            )
        except BotoCoreError as e:
            raise BackendUnavailableException(
                message=f"Failed to load object from S3: {str(e)}",
                details={"key": key, "bucket": bucket},
            )

        return deserialize_payload(data, object_type, object_id)

    async def delete_object(
        self,
        account_name: str,
        object_type: ObjectType,
        object_id: str,
    ) -> None:
        bucket = self._bucket(account_name)
        key = self._object_key(account_name, object_type, object_id)

        # S3 reports success for missing keys but NoSuchBucket before the first store
        try:
            await asyncio.to_thread(
                self.clients[account_name].delete_object,
                Bucket=bucket,
                Key=key,
            )
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code")
            if error_code in ("NoSuchKey", "NoSuchBucket", "404"):
                return
            raise BackendUnavailableException(
                message=f"Failed to delete object from S3: {str(e)}",
                details={"key": key, "bucket": bucket},
            )
        except BotoCoreError as e:
            raise BackendUnavailableException(
                message=f"Failed to delete object from S3: {str(e)}",
                details={"key": key, "bucket": bucket},
            )

    async def list_object_keys(
        self,
        account_name: str,
        object_type: ObjectType,
    ) -> list[ObjectKey]:
        bucket = self._bucket(account_name)
        prefix = self._key_prefix(account_name, object_type)

        def _list() -> list[ObjectKey]:
            keys = []
            paginator = self.clients[account_name].get_paginator("list_objects_v2")
            for page in paginator.paginate(Bucket=bucket, Prefix=f"{prefix}/"):
                for obj in page.get("Contents", []):
                    object_id = self._object_id_from_key(prefix, obj["Key"], object_type)
                    if object_id is not None:
                        keys.append(ObjectKey(id=object_id, last_modified=obj["LastModified"]))
            return keys

        try:
            return await asyncio.to_thread(_list)
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code")
            if error_code == "NoSuchBucket":
                return []
            raise BackendUnavailableException(
                message=f"Failed to list objects in S3: {str(e)}",
                details={"prefix": prefix, "bucket": bucket},
            )
        except BotoCoreError as e:
            raise BackendUnavailableException(
                message=f"Failed to list objects in S3: {str(e)}",
                details={"prefix": prefix, "bucket": bucket},
            )
