"""
Account credentials registry.

Populated once at startup from configuration and never mutated afterwards,
so concurrent lookups need no locking.
"""

from typing import Iterable

from canary_storage.core.exceptions import ConfigurationException, UnknownAccountException
from canary_storage.security.credentials import AccountCredentials, AccountType


class AccountCredentialsRepository:
    """Read-only mapping from account name to its credentials."""

    def __init__(self, accounts: Iterable[AccountCredentials] = ()):
        by_name: dict[str, AccountCredentials] = {}
        for account in accounts:
            if account.name in by_name:
                raise ConfigurationException(
                    message=f"Duplicate account name: {account.name}",
                    details={"accountName": account.name},
                )
            by_name[account.name] = account
        self._accounts = by_name

    def get_one(self, account_name: str) -> AccountCredentials | None:
        return self._accounts.get(account_name)

    def get_required_one(self, account_name: str) -> AccountCredentials:
        account = self.get_one(account_name)
        if account is None:
            raise UnknownAccountException(account_name)
        return account

    def get_all(self) -> list[AccountCredentials]:
        return list(self._accounts.values())

    def get_all_of(self, account_type: AccountType) -> list[AccountCredentials]:
        """Accounts supporting `account_type`, in configuration order."""
        return [a for a in self._accounts.values() if a.supports(account_type)]

    def __len__(self) -> int:
        return len(self._accounts)
