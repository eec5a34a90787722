"""
Custom exceptions for the Canary Storage API.

Every failure raised by the account resolver, the registries and the
storage backends derives from CanaryStorageException and carries the
HTTP status it is surfaced with.
"""

from typing import Any


class CanaryStorageException(Exception):
    """Base exception for all Canary Storage API errors."""

    def __init__(
        self,
        error: str,
        message: str,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        self.error = error
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to response dictionary."""
        response = {
            "error": self.error,
            "message": self.message,
        }
        if self.details:
            response["details"] = self.details
        return response


class AccountResolutionException(CanaryStorageException):
    """400 - Common parent of the account resolution failures."""

    def __init__(self, error: str, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            error=error,
            message=message,
            status_code=400,
            details=details,
        )


class UnknownAccountException(AccountResolutionException):
    """400 - Explicitly named account is not configured."""

    def __init__(self, account_name: str):
        super().__init__(
            error="unknown_account",
            message=f"Unable to resolve account {account_name}.",
            details={"accountName": account_name},
        )


class CapabilityMismatchException(AccountResolutionException):
    """400 - Named account does not support the required account type."""

    def __init__(self, account_name: str, account_type: str):
        super().__init__(
            error="capability_mismatch",
            message=f"Account {account_name} does not support {account_type}.",
            details={"accountName": account_name, "accountType": account_type},
        )


class NoAccountConfiguredException(AccountResolutionException):
    """400 - No account supports the required account type."""

    def __init__(self, account_type: str):
        super().__init__(
            error="no_account_configured",
            message=f"No account of type {account_type} was configured.",
            details={"accountType": account_type},
        )


class AmbiguousAccountException(AccountResolutionException):
    """400 - Several accounts support the type and none was named."""

    def __init__(self, account_type: str, candidates: list[str]):
        super().__init__(
            error="ambiguous_account",
            message=(
                f"More than one account of type {account_type} is configured; "
                "specify accountName explicitly."
            ),
            details={"accountType": account_type, "candidates": candidates},
        )


class StorageServiceNotConfiguredException(CanaryStorageException):
    """400 - Resolved account has no storage service bound to it."""

    def __init__(self, account_name: str, action: str):
        super().__init__(
            error="storage_service_not_configured",
            message=f"No storage service was configured; unable to {action}.",
            status_code=400,
            details={"accountName": account_name},
        )


class ObjectNotFoundException(CanaryStorageException):
    """404 - No object stored under (account, type, id)."""

    def __init__(self, object_type: str, object_id: str, account_name: str | None = None):
        details = {"objectType": object_type, "id": object_id}
        if account_name:
            details["accountName"] = account_name
        super().__init__(
            error="not_found",
            message=f"Object {object_id} of type {object_type} not found",
            status_code=404,
            details=details,
        )


class BackendUnavailableException(CanaryStorageException):
    """503 - Storage backend I/O failure (network, permission, disk)."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            error="backend_unavailable",
            message=message,
            status_code=503,
            details=details,
        )


class ConfigurationException(CanaryStorageException):
    """500 - Invalid account or backend configuration detected at startup."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            error="configuration_error",
            message=message,
            status_code=500,
            details=details,
        )
