"""
Pydantic schemas for account listing. Secrets are never exposed.
"""

from pydantic import BaseModel, ConfigDict, Field

from canary_storage.security.credentials import AccountCredentials, AccountType


class AccountResponse(BaseModel):
    """Response schema for a single configured account."""

    name: str
    supported_types: list[AccountType] = Field(alias="supportedTypes")
    backend: str

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_credentials(cls, account: AccountCredentials) -> "AccountResponse":
        return cls(
            name=account.name,
            supported_types=sorted(account.supported_types, key=lambda t: t.value),
            backend=account.backend,
        )
