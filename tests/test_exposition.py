"""Tests for output line formatting."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from cloudwatch_check.check.exposition import (
    format_dry_run_line,
    format_metadata_lines,
    format_point_line,
    format_value,
)
from cloudwatch_check.domain.models import DataQuery, Dimension, MetricSeries


def _query(label: str = "aws.alb.request_count") -> DataQuery:
    series = MetricSeries(
        namespace="AWS/ApplicationELB",
        metric_name="RequestCount",
        dimensions=(
            Dimension(name="LoadBalancer", value="app/web/1"),
            Dimension(name="AvailabilityZone", value="us-east-1a"),
        ),
    )
    return DataQuery(id="aws_1", label=label, series=series, stat="Sum", period=300)


@pytest.mark.parametrize(
    "value, expected",
    [
        (0.0, "0"),
        (-0.0, "0"),
        (42.0, "42"),
        (12.5, "12.5"),
        (0.1, "0.1"),
        (float("inf"), "inf"),
        (float("nan"), "nan"),
    ],
)
def test_format_value(value, expected):
    """Integral values lose the fraction, others keep the shortest repr."""
    assert format_value(value) == expected


def test_format_point_line_keeps_dimension_order():
    """Dimensions are comma-joined in received order without spaces."""
    ts = datetime(2023, 10, 15, 12, 0, 0, tzinfo=timezone.utc)
    assert format_point_line(_query(), ts, 7.0) == (
        'aws.alb.request_count{LoadBalancer="app/web/1",'
        'AvailabilityZone="us-east-1a"} 7 1697371200000'
    )


def test_format_point_line_with_region():
    """A region adds a trailing Region pair."""
    ts = datetime(2023, 10, 15, 12, 0, 0, tzinfo=timezone.utc)
    line = format_point_line(_query(), ts, 1.5, region="us-east-1")
    assert '"us-east-1a",Region="us-east-1"} 1.5 ' in line


def test_format_point_line_without_dimensions():
    """A dimensionless series renders empty braces."""
    query = DataQuery(
        id="aws_2",
        label="x",
        series=MetricSeries(namespace="AWS/X", metric_name="M"),
        stat="Sum",
        period=60,
    )
    ts = datetime(1970, 1, 1, 0, 0, 1, tzinfo=timezone.utc)
    assert format_point_line(query, ts, 3.0) == "x{} 3 1000"


def test_format_dry_run_line():
    """Dry-run placeholders describe the query instead of a value."""
    assert format_dry_run_line(_query()) == (
        '# dry-run: aws.alb.request_count{LoadBalancer="app/web/1",'
        'AvailabilityZone="us-east-1a"} stat=Sum period=300'
    )


def test_format_metadata_lines():
    """HELP and TYPE use the label base."""
    assert format_metadata_lines(_query(), region="us-east-1") == [
        "# HELP aws.alb.request Namespace:AWS/ApplicationELB "
        "MetricName:RequestCount Region:us-east-1",
        "# TYPE aws.alb.request gauge",
    ]
