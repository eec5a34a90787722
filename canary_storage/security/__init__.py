"""
Account credentials and resolution.
"""

from canary_storage.security.credentials import AccountCredentials, AccountType
from canary_storage.security.repository import AccountCredentialsRepository
from canary_storage.security.resolver import resolve_account_by_name_or_type

__all__ = [
    "AccountCredentials",
    "AccountType",
    "AccountCredentialsRepository",
    "resolve_account_by_name_or_type",
]
