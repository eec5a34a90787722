"""
Pydantic schemas for request/response validation.
"""

from canary_storage.schemas.metric_set_pair_list import MetricSetPairListCreated, ObjectKeyResponse
from canary_storage.schemas.credentials import AccountResponse
from canary_storage.schemas.error import ErrorResponse

__all__ = [
    "MetricSetPairListCreated",
    "ObjectKeyResponse",
    "AccountResponse",
    "ErrorResponse",
]
