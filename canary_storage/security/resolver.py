"""
Account resolution by explicit name or by required account type.
"""

import logging

from canary_storage.core.exceptions import (
    AmbiguousAccountException,
    CapabilityMismatchException,
    NoAccountConfiguredException,
    UnknownAccountException,
)
from canary_storage.security.credentials import AccountType
from canary_storage.security.repository import AccountCredentialsRepository

logger = logging.getLogger(__name__)


def resolve_account_by_name_or_type(
    account_name: str | None,
    account_type: AccountType,
    repository: AccountCredentialsRepository,
) -> str:
    """
    Pick exactly one usable account.

    An explicit name must refer to a configured account that supports
    `account_type`. Without a name, the single account supporting the type
    is chosen; several candidates are never tie-broken.

    Raises:
        UnknownAccountException: Named account is not configured
        CapabilityMismatchException: Named account lacks the account type
        NoAccountConfiguredException: No account supports the type
        AmbiguousAccountException: More than one account supports the type
    """
    if account_name is not None and account_name.strip():
        account = repository.get_one(account_name)
        if account is None:
            raise UnknownAccountException(account_name)
        if not account.supports(account_type):
            raise CapabilityMismatchException(account_name, account_type.value)
        return account.name

    candidates = repository.get_all_of(account_type)
    if not candidates:
        raise NoAccountConfiguredException(account_type.value)
    if len(candidates) > 1:
        raise AmbiguousAccountException(account_type.value, [a.name for a in candidates])

    logger.debug(f"Resolved {account_type.value} account: {candidates[0].name}")
    return candidates[0].name
