"""
Tests for the account credentials registry.
"""

import pytest
from pydantic import ValidationError

from canary_storage.core.exceptions import ConfigurationException, UnknownAccountException
from canary_storage.security.credentials import AccountCredentials, AccountType
from canary_storage.security.repository import AccountCredentialsRepository
from conftest import make_account


def test_lookup_by_name_and_type():
    """Test lookups by name and by type."""
    store = make_account("store", AccountType.OBJECT_STORE)
    metrics = make_account("metrics", AccountType.METRICS_STORE)
    repository = AccountCredentialsRepository([store, metrics])

    assert repository.get_one("store") is store
    assert repository.get_one("nope") is None
    assert repository.get_all() == [store, metrics]
    assert repository.get_all_of(AccountType.METRICS_STORE) == [metrics]
    assert repository.get_all_of(AccountType.REMOTE_JUDGE) == []
    assert len(repository) == 2


def test_get_required_one_raises_for_unknown():
    """Test get_required_one with an unknown name."""
    repository = AccountCredentialsRepository()

    with pytest.raises(UnknownAccountException):
        repository.get_required_one("missing")


def test_duplicate_names_rejected():
    """Test duplicate account names are rejected."""
    with pytest.raises(ConfigurationException):
        AccountCredentialsRepository([
            make_account("dup", AccountType.OBJECT_STORE),
            make_account("dup", AccountType.METRICS_STORE),
        ])


def test_credentials_are_immutable():
    """Test account credentials cannot be modified."""
    account = make_account("store", AccountType.OBJECT_STORE)

    with pytest.raises(ValidationError):
        account.name = "other"


def test_credentials_parse_from_config_dict():
    """Test parsing credentials from a config dict."""
    account = AccountCredentials.model_validate({
        "name": "s3-main",
        "supported_types": ["OBJECT_STORE", "CONFIGURATION_STORE"],
        "backend": "s3",
        "bucket": "canary",
        "secret_key": "shh",
    })

    assert account.supports(AccountType.OBJECT_STORE)
    assert not account.supports(AccountType.METRICS_STORE)
    assert "shh" not in repr(account)
