"""
Account credentials model.

An account is a named configuration entry granting access to one backend,
tagged with the account types (capabilities) it supports.
"""

import enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, SecretStr


class AccountType(str, enum.Enum):
    """Categories of backend service an account can provide."""

    METRICS_STORE = "METRICS_STORE"
    OBJECT_STORE = "OBJECT_STORE"
    CONFIGURATION_STORE = "CONFIGURATION_STORE"
    REMOTE_JUDGE = "REMOTE_JUDGE"


StorageBackendKind = Literal["memory", "local", "s3", "azure"]


class AccountCredentials(BaseModel):
    """
    Immutable account entry loaded from configuration.

    Only the fields relevant to the account's backend need to be set:
    `root_folder` for local storage, `bucket`/`region`/`endpoint_url` and
    keys for S3, `connection_string`/`container` for Azure.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., min_length=1)
    supported_types: frozenset[AccountType] = Field(default_factory=frozenset)
    backend: StorageBackendKind = "memory"

    # Key prefix inside the bucket/container, or base directory for local storage
    root_folder: str = "canary"

    # S3 / MinIO
    bucket: str | None = None
    region: str | None = None
    endpoint_url: str | None = None
    access_key: SecretStr | None = None
    secret_key: SecretStr | None = None

    # Azure Blob
    connection_string: SecretStr | None = None
    container: str | None = None

    def supports(self, account_type: AccountType) -> bool:
        return account_type in self.supported_types
