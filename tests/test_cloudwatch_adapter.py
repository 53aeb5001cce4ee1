"""Tests for the CloudWatch adapter using a mocked boto3 client."""

from __future__ import annotations

from datetime import datetime, timezone
from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError, NoRegionError

from cloudwatch_check.adapters.cloudwatch import (
    RECENTLY_ACTIVE,
    CloudWatchAdapter,
    create_session,
)
from cloudwatch_check.domain.models import (
    DataQuery,
    Dimension,
    DimensionFilter,
    MetricSeries,
    TimeWindow,
)
from cloudwatch_check.errors import CredentialError, TransportError
from cloudwatch_check.schemas.provider_contract import (
    FetchDatapointsRequest,
    ListSeriesRequest,
)

START = datetime(2024, 1, 1, 0, 0, tzinfo=timezone.utc)
END = datetime(2024, 1, 1, 0, 5, tzinfo=timezone.utc)


def _client() -> MagicMock:
    client = MagicMock()
    client.meta.region_name = "us-east-1"
    return client


def test_list_series_translates_request_and_response():
    """Narrowing maps to ListMetrics parameters and metrics to series."""
    client = _client()
    client.list_metrics.return_value = {
        "Metrics": [
            {
                "Namespace": "AWS/EC2",
                "MetricName": "CPUUtilization",
                "Dimensions": [{"Name": "InstanceId", "Value": "i-1"}],
            }
        ],
        "NextToken": "tok2",
    }
    adapter = CloudWatchAdapter(client)
    resp = adapter.list_series(
        ListSeriesRequest(
            namespace="AWS/EC2",
            metric_name="CPUUtilization",
            dimensions=[DimensionFilter(name="InstanceId"), DimensionFilter(name="A", value="b")],
            recently_active=True,
            next_token="tok1",
        )
    )

    client.list_metrics.assert_called_once_with(
        Namespace="AWS/EC2",
        MetricName="CPUUtilization",
        Dimensions=[{"Name": "InstanceId"}, {"Name": "A", "Value": "b"}],
        RecentlyActive=RECENTLY_ACTIVE,
        NextToken="tok1",
    )
    assert resp.next_token == "tok2"
    assert resp.series == [
        MetricSeries(
            namespace="AWS/EC2",
            metric_name="CPUUtilization",
            dimensions=(Dimension(name="InstanceId", value="i-1"),),
        )
    ]


def test_list_series_omits_unset_parameters():
    """An empty request sends no narrowing at all."""
    client = _client()
    client.list_metrics.return_value = {"Metrics": []}
    resp = CloudWatchAdapter(client).list_series(ListSeriesRequest())
    client.list_metrics.assert_called_once_with()
    assert resp.series == []
    assert resp.next_token is None


def test_fetch_datapoints_translates_queries_and_results():
    """Queries map to MetricDataQueries; results and messages come back typed."""
    client = _client()
    series = MetricSeries(
        namespace="AWS/EC2",
        metric_name="CPUUtilization",
        dimensions=(Dimension(name="InstanceId", value="i-1"),),
    )
    query = DataQuery(id="aws_1", label="cpu", series=series, stat="Average", period=60)
    client.get_metric_data.return_value = {
        "MetricDataResults": [
            {
                "Id": "aws_1",
                "Label": "cpu",
                "Timestamps": [END],
                "Values": [12.5],
                "StatusCode": "Complete",
            }
        ],
        "Messages": [{"Code": "Warn", "Value": "partial"}],
    }
    resp = CloudWatchAdapter(client).fetch_datapoints(
        FetchDatapointsRequest(queries=[query], window=TimeWindow(start=START, end=END))
    )

    client.get_metric_data.assert_called_once_with(
        MetricDataQueries=[
            {
                "Id": "aws_1",
                "Label": "cpu",
                "MetricStat": {
                    "Metric": {
                        "Namespace": "AWS/EC2",
                        "MetricName": "CPUUtilization",
                        "Dimensions": [{"Name": "InstanceId", "Value": "i-1"}],
                    },
                    "Period": 60,
                    "Stat": "Average",
                },
            }
        ],
        StartTime=START,
        EndTime=END,
    )
    (result,) = resp.results
    assert result.points() == [(END, 12.5)]
    assert result.status_code == "Complete"
    assert resp.messages[0].code == "Warn"
    assert resp.next_token is None


@pytest.mark.parametrize(
    "error",
    [
        ClientError({"Error": {"Code": "Throttling", "Message": "slow down"}}, "ListMetrics"),
        EndpointConnectionError(endpoint_url="https://monitoring.example"),
    ],
)
def test_list_series_errors_become_transport_errors(error):
    """Every botocore failure is wrapped, never retried."""
    client = _client()
    client.list_metrics.side_effect = error
    with pytest.raises(TransportError) as exc_info:
        CloudWatchAdapter(client).list_series(ListSeriesRequest())
    assert exc_info.value.operation == "ListMetrics"
    assert exc_info.value.cause is error
    assert client.list_metrics.call_count == 1


def test_fetch_errors_become_transport_errors():
    """GetMetricData failures are wrapped as well."""
    client = _client()
    client.get_metric_data.side_effect = ClientError(
        {"Error": {"Code": "AccessDenied", "Message": "no"}}, "GetMetricData"
    )
    query = DataQuery(
        id="aws_1", label="x", series=MetricSeries(metric_name="M"), stat="Sum", period=60
    )
    with pytest.raises(TransportError, match="GetMetricData failed"):
        CloudWatchAdapter(client).fetch_datapoints(
            FetchDatapointsRequest(queries=[query], window=TimeWindow(start=START, end=END))
        )


def test_region_from_client():
    """The adapter reports the client's region."""
    assert CloudWatchAdapter(_client()).region == "us-east-1"


def test_create_session_missing_files(tmp_path):
    """Missing shared files are credential errors."""
    with pytest.raises(CredentialError, match="Config file missing"):
        create_session(config_file=str(tmp_path / "nope"))
    with pytest.raises(CredentialError, match="Credential file missing"):
        create_session(credentials_file=str(tmp_path / "nope"))


def test_create_session_without_credentials():
    """A session that resolves no credentials is rejected."""
    with patch("cloudwatch_check.adapters.cloudwatch.boto3.session.Session") as session_cls:
        session_cls.return_value.get_credentials.return_value = None
        with pytest.raises(CredentialError, match="no AWS credentials"):
            create_session(region="us-east-1")
        session_cls.assert_called_once_with(region_name="us-east-1", profile_name=None)


def test_create_session_uses_shared_files(tmp_path, monkeypatch):
    """Alternative shared files are exported for the SDK."""
    # Registered so the exported variables are removed after the test
    monkeypatch.setenv("AWS_CONFIG_FILE", "")
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", "")
    config_file = tmp_path / "config"
    config_file.write_text("[default]\nregion = eu-west-1\n")
    creds_file = tmp_path / "credentials"
    creds_file.write_text(
        "[default]\naws_access_key_id = AKIDEXAMPLE\n"
        "aws_secret_access_key = secret\n"
    )
    session = create_session(
        config_file=str(config_file), credentials_file=str(creds_file)
    )
    assert session.region_name == "eu-west-1"
    assert session.get_credentials().access_key == "AKIDEXAMPLE"


def test_from_session_client_errors_become_credential_errors():
    """Client construction failures, e.g. a missing region, are credential errors."""
    session = MagicMock()
    session.client.side_effect = NoRegionError()
    with pytest.raises(CredentialError, match="unable to create CloudWatch client"):
        CloudWatchAdapter.from_session(session)
    session.client.assert_called_once_with("cloudwatch")
