"""
Business logic services for the Canary Storage API.
Services handle core operations separate from API endpoints.
"""

from canary_storage.services.metric_set_pair_list_service import MetricSetPairListService

__all__ = [
    "MetricSetPairListService",
]
