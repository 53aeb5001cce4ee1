"""CloudWatch metrics provider adapter.

This adapter translates the provider contract into boto3 ``cloudwatch``
client calls: ``list_series`` maps to ``ListMetrics`` and
``fetch_datapoints`` maps to ``GetMetricData``. It encapsulates client
construction concerns (region, profile, shared config files) and exposes a
typed interface returning validated Pydantic models.

Notes
-----
- Calls are issued one at a time and never retried by this adapter; any
  ``botocore`` failure is wrapped in ``TransportError`` and aborts the run.
- The client's own retry policy (botocore defaults) still applies below us.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from ..domain.models import DataResult, Dimension, MessageData, MetricSeries
from ..errors import CredentialError, TransportError
from ..schemas.provider_contract import (
    FetchDatapointsRequest,
    FetchDatapointsResponse,
    ListSeriesRequest,
    ListSeriesResponse,
)

logger = logging.getLogger(__name__)

# ListMetrics only supports a three hour "recently active" window
RECENTLY_ACTIVE = "PT3H"


def create_session(
    region: str = "",
    profile: str = "",
    config_file: str = "",
    credentials_file: str = "",
) -> boto3.session.Session:
    """Build a boto3 session and make sure credentials resolve.

    Parameters
    ----------
    region: str
        Region name; empty defers to the environment / shared config.
    profile: str
        Named profile from the shared config files.
    config_file: str
        Alternative shared config file path.
    credentials_file: str
        Alternative shared credentials file path.

    Raises
    ------
    CredentialError
        If a given file does not exist, the profile is unknown, or no
        credentials can be resolved.
    """
    for label, path in (("Config", config_file), ("Credential", credentials_file)):
        if path and not os.path.isfile(path):
            raise CredentialError(f"{label} file missing: {path}")

    # boto3 reads alternative shared files from the environment only
    if config_file:
        os.environ["AWS_CONFIG_FILE"] = config_file
    if credentials_file:
        os.environ["AWS_SHARED_CREDENTIALS_FILE"] = credentials_file

    try:
        session = boto3.session.Session(
            region_name=region or None, profile_name=profile or None
        )
        credentials = session.get_credentials()
    except BotoCoreError as exc:
        raise CredentialError(f"unable to load AWS configuration: {exc}") from exc
    if credentials is None:
        raise CredentialError("no AWS credentials could be resolved")
    logger.debug(
        "cloudwatch.session",
        extra={
            "region": session.region_name,
            "profile": profile or "default",
            "credential_method": getattr(credentials, "method", ""),
        },
    )
    return session


class CloudWatchAdapter:
    """Adapter for the CloudWatch API.

    Parameters
    ----------
    client: Any
        A boto3 ``cloudwatch`` client (or a compatible test double exposing
        ``list_metrics`` and ``get_metric_data``).
    """

    def __init__(self, client: Any) -> None:
        self._client = client
        logger.info(
            "cloudwatch.adapter.init",
            extra={"region": getattr(getattr(client, "meta", None), "region_name", "")},
        )

    @classmethod
    def from_session(cls, session: boto3.session.Session) -> "CloudWatchAdapter":
        """Create an adapter backed by a fresh client from ``session``.

        Raises
        ------
        CredentialError
            If the client cannot be built, e.g. no region is configured.
        """
        try:
            client = session.client("cloudwatch")
        except BotoCoreError as exc:
            raise CredentialError(f"unable to create CloudWatch client: {exc}") from exc
        return cls(client)

    @property
    def region(self) -> str:
        """Region the underlying client talks to (empty when unknown)."""
        meta = getattr(self._client, "meta", None)
        return getattr(meta, "region_name", "") or ""

    def list_series(self, req: ListSeriesRequest) -> ListSeriesResponse:
        """List one page of metrics via ``ListMetrics``."""
        params: Dict[str, Any] = {}
        if req.namespace:
            params["Namespace"] = req.namespace
        if req.metric_name:
            params["MetricName"] = req.metric_name
        if req.dimensions:
            params["Dimensions"] = [self._dimension_filter(f) for f in req.dimensions]
        if req.recently_active:
            params["RecentlyActive"] = RECENTLY_ACTIVE
        if req.next_token:
            params["NextToken"] = req.next_token

        logger.debug(
            "cloudwatch.list_metrics",
            extra={
                "namespace": req.namespace,
                "metric_name": req.metric_name,
                "dimensions": len(req.dimensions),
                "continued": bool(req.next_token),
            },
        )
        try:
            data = self._client.list_metrics(**params)
        except (ClientError, BotoCoreError) as exc:
            logger.error("cloudwatch.list_metrics.error", extra={"error": str(exc)})
            raise TransportError("ListMetrics", exc) from exc

        series = [self._series(m) for m in data.get("Metrics", [])]
        logger.debug("cloudwatch.list_metrics.page", extra={"series": len(series)})
        return ListSeriesResponse(series=series, next_token=data.get("NextToken"))

    def fetch_datapoints(self, req: FetchDatapointsRequest) -> FetchDatapointsResponse:
        """Fetch one batch of statistic values via ``GetMetricData``."""
        queries = [
            {
                "Id": q.id,
                "Label": q.label,
                "MetricStat": {
                    "Metric": {
                        "Namespace": q.series.namespace,
                        "MetricName": q.series.metric_name,
                        "Dimensions": [
                            {"Name": d.name, "Value": d.value} for d in q.series.dimensions
                        ],
                    },
                    "Period": q.period,
                    "Stat": q.stat,
                },
            }
            for q in req.queries
        ]
        logger.debug(
            "cloudwatch.get_metric_data",
            extra={
                "queries": len(queries),
                "start": req.window.start.isoformat(),
                "end": req.window.end.isoformat(),
            },
        )
        try:
            data = self._client.get_metric_data(
                MetricDataQueries=queries,
                StartTime=req.window.start,
                EndTime=req.window.end,
            )
        except (ClientError, BotoCoreError) as exc:
            logger.error("cloudwatch.get_metric_data.error", extra={"error": str(exc)})
            raise TransportError("GetMetricData", exc) from exc

        results = [self._result(r) for r in data.get("MetricDataResults", [])]
        messages = [self._message(m) for m in data.get("Messages", [])]
        return FetchDatapointsResponse(
            results=results, next_token=data.get("NextToken"), messages=messages
        )

    @staticmethod
    def _dimension_filter(f: Any) -> Dict[str, str]:
        out = {"Name": f.name}
        if f.value is not None:
            out["Value"] = f.value
        return out

    @staticmethod
    def _series(metric: Dict[str, Any]) -> MetricSeries:
        return MetricSeries(
            namespace=metric.get("Namespace", ""),
            metric_name=metric.get("MetricName", ""),
            dimensions=tuple(
                Dimension(name=d.get("Name", ""), value=d.get("Value", ""))
                for d in metric.get("Dimensions", [])
            ),
        )

    @staticmethod
    def _message(message: Dict[str, Any]) -> MessageData:
        return MessageData(code=message.get("Code", ""), value=message.get("Value", ""))

    @classmethod
    def _result(cls, result: Dict[str, Any]) -> DataResult:
        messages: List[MessageData] = [
            cls._message(m) for m in result.get("Messages", [])
        ]
        status: Optional[str] = result.get("StatusCode")
        return DataResult(
            id=result["Id"],
            label=result.get("Label", ""),
            timestamps=list(result.get("Timestamps", [])),
            values=list(result.get("Values", [])),
            status_code=status or "",
            messages=messages,
        )
