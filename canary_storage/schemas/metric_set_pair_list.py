"""
Pydantic schemas for metric set pair list responses.
"""

from pydantic import BaseModel, ConfigDict, Field

from canary_storage.storage.base import ObjectKey


class MetricSetPairListCreated(BaseModel):
    """Response schema for a stored metric set pair list."""

    metric_set_pair_list_id: str = Field(alias="metricSetPairListId")

    model_config = ConfigDict(populate_by_name=True)


class ObjectKeyResponse(BaseModel):
    """Response schema for one object listing entry."""

    id: str
    last_modified_timestamp: int = Field(
        alias="lastModifiedTimestamp",
        description="Last modification time in epoch milliseconds",
    )
    last_modified_timestamp_iso: str = Field(alias="lastModifiedTimestampIso")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_object_key(cls, key: ObjectKey) -> "ObjectKeyResponse":
        return cls(
            id=key.id,
            last_modified_timestamp=int(key.last_modified.timestamp() * 1000),
            last_modified_timestamp_iso=key.last_modified.isoformat(),
        )
