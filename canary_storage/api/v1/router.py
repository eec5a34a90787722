"""
API v1 Router - Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from canary_storage.api.v1 import health, metric_set_pair_list

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(health.router, tags=["health"])
api_router.include_router(
    metric_set_pair_list.router,
    prefix="/metricSetPairList",
    tags=["metricSetPairList"],
)
