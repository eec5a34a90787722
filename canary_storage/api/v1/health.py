"""
Health and account listing endpoints.
"""

from fastapi import APIRouter

from canary_storage.dependencies import Accounts, StorageServices
from canary_storage.schemas.credentials import AccountResponse
from canary_storage.security.credentials import AccountType

router = APIRouter()


@router.get("/health")
async def health_check(accounts: Accounts, storage_services: StorageServices):
    """
    Service health check endpoint.

    Returns:
        {"status": "ok", ...} when at least one storage service is configured
        {"status": "degraded", "issues": [...]} otherwise
    """
    issues = []

    if not storage_services.get_all():
        issues.append("No storage service is configured")

    unbound = [
        account.name
        for account in accounts.get_all_of(AccountType.OBJECT_STORE)
        if storage_services.get_one(account.name) is None
    ]
    if unbound:
        issues.append(f"Object store accounts without a storage service: {', '.join(unbound)}")

    response = {
        "status": "degraded" if issues else "ok",
        "accounts": len(accounts),
        "storageServices": len(storage_services.get_all()),
    }
    if issues:
        response["issues"] = issues

    return response


@router.get("/credentials", response_model=list[AccountResponse])
async def list_credentials(accounts: Accounts):
    """List configured accounts and the account types they support."""
    return [AccountResponse.from_credentials(account) for account in accounts.get_all()]
