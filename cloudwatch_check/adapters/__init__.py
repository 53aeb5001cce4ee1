"""Metrics provider interfaces."""

from __future__ import annotations

from typing import Protocol

from ..schemas.provider_contract import (
    FetchDatapointsRequest,
    FetchDatapointsResponse,
    ListSeriesRequest,
    ListSeriesResponse,
)


class MetricsProvider(Protocol):
    """Protocol for metrics provider adapters.

    Implementations translate the provider contract to the underlying backend
    (e.g., CloudWatch via boto3) and return validated responses. Both calls are
    synchronous and any failure surfaces as ``TransportError``.
    """

    def list_series(self, req: ListSeriesRequest) -> ListSeriesResponse:
        """List one page of series matching the request's narrowing."""
        raise NotImplementedError

    def fetch_datapoints(self, req: FetchDatapointsRequest) -> FetchDatapointsResponse:
        """Fetch statistic values for one batch of queries."""
        raise NotImplementedError
