"""
Metric set pair list endpoints.
Create, read, list and delete metric set pair lists in object storage.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Query, Response, status

from canary_storage.dependencies import MetricSetPairLists
from canary_storage.schemas.error import ErrorResponse
from canary_storage.schemas.metric_set_pair_list import MetricSetPairListCreated, ObjectKeyResponse

router = APIRouter()

AccountName = Annotated[
    str | None,
    Query(description="Object store account; may be omitted when exactly one is configured"),
]

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Account could not be resolved"},
    503: {"model": ErrorResponse, "description": "Storage backend unavailable"},
}


@router.get(
    "/{metricSetPairListId}",
    responses={**ERROR_RESPONSES, 404: {"model": ErrorResponse}},
)
async def load_metric_set_pair_list(
    metricSetPairListId: str,
    service: MetricSetPairLists,
    accountName: AccountName = None,
) -> list[dict[str, Any]]:
    """Retrieve a metric set pair list from object storage."""
    return await service.load(metricSetPairListId, account_name=accountName)


@router.post(
    "",
    response_model=MetricSetPairListCreated,
    responses=ERROR_RESPONSES,
)
async def store_metric_set_pair_list(
    service: MetricSetPairLists,
    metric_set_pair_list: list[dict[str, Any]] = Body(...),
    accountName: AccountName = None,
):
    """
    Write a metric set pair list to object storage.

    The body is a JSON array of metric set pair records; a new id is
    generated for every call.
    """
    metric_set_pair_list_id = await service.store(metric_set_pair_list, account_name=accountName)
    return MetricSetPairListCreated(metric_set_pair_list_id=metric_set_pair_list_id)


@router.delete(
    "/{metricSetPairListId}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=ERROR_RESPONSES,
)
async def delete_metric_set_pair_list(
    metricSetPairListId: str,
    service: MetricSetPairLists,
    accountName: AccountName = None,
):
    """Delete a metric set pair list. Succeeds when it is already absent."""
    await service.delete(metricSetPairListId, account_name=accountName)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "",
    response_model=list[ObjectKeyResponse],
    responses=ERROR_RESPONSES,
)
async def list_all_metric_set_pair_lists(
    service: MetricSetPairLists,
    accountName: AccountName = None,
):
    """Retrieve a list of metric set pair list ids and timestamps."""
    keys = await service.list_all(account_name=accountName)
    return [ObjectKeyResponse.from_object_key(key) for key in keys]
