"""
Tests for account resolution by name or type.
"""

import pytest

from canary_storage.core.exceptions import (
    AmbiguousAccountException,
    CapabilityMismatchException,
    NoAccountConfiguredException,
    UnknownAccountException,
)
from canary_storage.security.credentials import AccountType
from canary_storage.security.repository import AccountCredentialsRepository
from canary_storage.security.resolver import resolve_account_by_name_or_type
from conftest import make_account


@pytest.fixture
def repository() -> AccountCredentialsRepository:
    return AccountCredentialsRepository([
        make_account("store-a", AccountType.OBJECT_STORE, AccountType.CONFIGURATION_STORE),
        make_account("metrics-a", AccountType.METRICS_STORE),
        make_account("metrics-b", AccountType.METRICS_STORE),
    ])


def test_resolves_single_account_by_type(repository):
    """Test resolving the only account of a type."""
    assert resolve_account_by_name_or_type(None, AccountType.OBJECT_STORE, repository) == "store-a"


def test_resolves_explicit_name(repository):
    """Test resolving an explicit account name."""
    name = resolve_account_by_name_or_type("store-a", AccountType.CONFIGURATION_STORE, repository)

    assert name == "store-a"


def test_explicit_name_wins_over_ambiguity(repository):
    """Test an explicit name avoids ambiguity."""
    name = resolve_account_by_name_or_type("metrics-b", AccountType.METRICS_STORE, repository)

    assert name == "metrics-b"


def test_blank_name_falls_back_to_type(repository):
    """Test a blank name counts as absent."""
    assert resolve_account_by_name_or_type("  ", AccountType.OBJECT_STORE, repository) == "store-a"


def test_unknown_account(repository):
    """Test an unknown account name."""
    with pytest.raises(UnknownAccountException) as exc_info:
        resolve_account_by_name_or_type("missing", AccountType.OBJECT_STORE, repository)

    assert exc_info.value.status_code == 400
    assert exc_info.value.error == "unknown_account"


def test_capability_mismatch(repository):
    """Test a named account lacking the type."""
    with pytest.raises(CapabilityMismatchException) as exc_info:
        resolve_account_by_name_or_type("metrics-a", AccountType.OBJECT_STORE, repository)

    assert exc_info.value.details == {"accountName": "metrics-a", "accountType": "OBJECT_STORE"}


def test_no_account_configured(repository):
    """Test no account of the requested type."""
    with pytest.raises(NoAccountConfiguredException):
        resolve_account_by_name_or_type(None, AccountType.REMOTE_JUDGE, repository)


def test_no_account_configured_on_empty_registry():
    """Test resolving against an empty registry."""
    with pytest.raises(NoAccountConfiguredException):
        resolve_account_by_name_or_type(None, AccountType.OBJECT_STORE, AccountCredentialsRepository())


def test_ambiguous_account_is_not_tie_broken(repository):
    """Test several candidates fail without a tie-break."""
    with pytest.raises(AmbiguousAccountException) as exc_info:
        resolve_account_by_name_or_type(None, AccountType.METRICS_STORE, repository)

    assert exc_info.value.details["candidates"] == ["metrics-a", "metrics-b"]
