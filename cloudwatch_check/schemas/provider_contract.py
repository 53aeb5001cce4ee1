"""
Provider Contract Schemas

Request/response envelopes of the two operations the check engine consumes
from a metrics provider:

1. ``list_series`` - paginated listing of series matching a narrowing filter
2. ``fetch_datapoints`` - batch retrieval of statistic values over a window

Adapters translate these envelopes to a concrete backend (CloudWatch
``ListMetrics`` / ``GetMetricData``); the engine only ever sees these models.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from ..domain.models import (
    DataQuery,
    DataResult,
    DimensionFilter,
    MessageData,
    MetricSeries,
    TimeWindow,
)


class ListSeriesRequest(BaseModel):
    """Narrowing filter for one listing page"""

    namespace: Optional[str] = Field(None, description="Restrict to a namespace")
    metric_name: Optional[str] = Field(
        None, description="Restrict to a single metric name"
    )
    dimensions: List[DimensionFilter] = Field(default_factory=list)
    recently_active: bool = Field(
        False, description="Only series with datapoints in the last three hours"
    )
    next_token: Optional[str] = Field(
        None, description="Continuation token from the previous page"
    )


class ListSeriesResponse(BaseModel):
    """One listing page"""

    series: List[MetricSeries] = Field(default_factory=list)
    next_token: Optional[str] = None


class FetchDatapointsRequest(BaseModel):
    """One batch of queries over a time window"""

    queries: List[DataQuery] = Field(..., max_length=500)
    window: TimeWindow


class FetchDatapointsResponse(BaseModel):
    """Results of one batch"""

    results: List[DataResult] = Field(default_factory=list)
    next_token: Optional[str] = Field(
        None, description="Must be unset; paginated batches are not supported"
    )
    messages: List[MessageData] = Field(default_factory=list)
