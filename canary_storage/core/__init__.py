"""Core exceptions for the Canary Storage API."""

from canary_storage.core.exceptions import (
    CanaryStorageException,
    AccountResolutionException,
    UnknownAccountException,
    CapabilityMismatchException,
    NoAccountConfiguredException,
    AmbiguousAccountException,
    StorageServiceNotConfiguredException,
    ObjectNotFoundException,
    BackendUnavailableException,
    ConfigurationException,
)

__all__ = [
    "CanaryStorageException",
    "AccountResolutionException",
    "UnknownAccountException",
    "CapabilityMismatchException",
    "NoAccountConfiguredException",
    "AmbiguousAccountException",
    "StorageServiceNotConfiguredException",
    "ObjectNotFoundException",
    "BackendUnavailableException",
    "ConfigurationException",
]
