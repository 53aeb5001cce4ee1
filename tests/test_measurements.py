"""Tests for the measurement configuration model."""

from __future__ import annotations

import orjson
import pytest

from cloudwatch_check.domain.measurements import MeasurementConfiguration
from cloudwatch_check.domain.models import (
    Dimension,
    DimensionFilter,
    MetricSeries,
    StatConfig,
)
from cloudwatch_check.errors import ConfigParseError

DOC = {
    "namespace": "AWS/Test",
    "period-minutes": 5,
    "region": "us-west-2",
    "metric-filter": "RequestCount",
    "dimension-filters": ["LoadBalancer", "AvailabilityZone=us-west-2a", "LoadBalancer"],
    "measurements": [
        {
            "metric": "RequestCount",
            "config": [
                {"stat": "Sum", "measurement": "aws.test.request_count"},
                {"stat": "Average", "measurement": "aws.test.request_count_avg"},
            ],
        },
        {"metric": "Latency", "config": [{"stat": "p90", "measurement": "lat_p90"}]},
    ],
}


def _text(doc=DOC) -> str:
    return orjson.dumps(doc).decode()


def test_load_from_text_populates_every_field():
    """Every document key lands on the configuration."""
    cfg = MeasurementConfiguration.from_text(_text())
    assert cfg.namespace == "AWS/Test"
    assert cfg.period_minutes == 5
    assert cfg.region == "us-west-2"
    assert cfg.metric_filter == "RequestCount"
    assert cfg.dimension_filters[1] == DimensionFilter(
        name="AvailabilityZone", value="us-west-2a"
    )
    assert len(cfg.dimension_filters) == 3
    assert cfg.accepts_metric("RequestCount")
    assert not cfg.accepts_metric("Other")
    assert [s.stat for s in cfg.stats_for("RequestCount")] == ["Sum", "Average"]
    assert cfg.stats_for("Other") == []


def test_round_trip_compact_and_pretty():
    """Serializing and re-loading reproduces the configuration."""
    cfg = MeasurementConfiguration.from_text(_text())
    for pretty in (False, True):
        again = MeasurementConfiguration.from_text(cfg.to_text(pretty=pretty))
        assert again == cfg
        assert again.stat_map == cfg.stat_map


def test_to_text_dedupes_filters_and_omits_empty_keys():
    """Filters are de-duplicated; unset scalars are left out."""
    cfg = MeasurementConfiguration.from_text(_text())
    doc = orjson.loads(cfg.to_text())
    assert doc["dimension-filters"] == ["LoadBalancer", "AvailabilityZone=us-west-2a"]

    minimal = orjson.loads(MeasurementConfiguration(namespace="AWS/X").to_text())
    assert minimal == {"namespace": "AWS/X"}


def test_to_text_pretty_indents():
    """Pretty output is indented by two spaces."""
    text = MeasurementConfiguration(namespace="AWS/X").to_text(pretty=True)
    assert text == '{\n  "namespace": "AWS/X"\n}'


def test_partial_document_keeps_prior_values():
    """Absent keys keep the values already configured."""
    cfg = MeasurementConfiguration.from_text(_text())
    cfg.load_from_text('{"period-minutes": 10}')
    assert cfg.period_minutes == 10
    assert cfg.namespace == "AWS/Test"
    assert cfg.accepts_metric("Latency")
    assert len(cfg.dimension_filters) == 3


def test_measurements_replace_prior_mapping():
    """A non-empty measurements list replaces the whole mapping."""
    cfg = MeasurementConfiguration.from_text(_text())
    cfg.load_from_text(
        '{"measurements": [{"metric": "Other", "config": '
        '[{"stat": "Sum", "measurement": "other"}]}]}'
    )
    assert list(cfg.stat_map) == ["Other"]


@pytest.mark.parametrize(
    "text",
    [
        "not json",
        "[1, 2]",
        '{"period-minutes": "soon"}',
        '{"measurements": [{"config": []}]}',
        '{"measurements": [{"metric": "A", "config": [{"stat": "", "measurement": "a"}]}]}',
        '{"measurements": [{"metric": "A"}, {"metric": "A"}]}',
        '{"dimension-filters": ["a=b=c"]}',
    ],
)
def test_malformed_documents_raise_without_partial_application(text):
    """Any malformed document raises and leaves the configuration untouched."""
    cfg = MeasurementConfiguration.from_text(_text())
    before = MeasurementConfiguration.from_text(_text())
    with pytest.raises(ConfigParseError):
        cfg.load_from_text(text)
    assert cfg == before


def test_adopt_series_only_in_adhoc_mode():
    """Ad-hoc mode adopts unknown metrics with synthesized labels."""
    series = MetricSeries(
        namespace="AWS/EC2",
        metric_name="CPUUtilization",
        dimensions=(Dimension(name="InstanceId", value="i-1"),),
    )
    strict = MeasurementConfiguration(namespace="AWS/EC2")
    assert not strict.adhoc
    assert strict.adopt_series(series) is False

    adhoc = MeasurementConfiguration(namespace="AWS/EC2", default_stats=["Average", " Sum "])
    assert adhoc.adopt_series(series) is True
    assert adhoc.stats_for("CPUUtilization") == [
        StatConfig(stat="Average", measurement="aws.ec2.cpu_utilization.average"),
        StatConfig(stat="Sum", measurement="aws.ec2.cpu_utilization.sum"),
    ]
    # Already known metrics are not adopted twice
    assert adhoc.adopt_series(series) is False


def test_equality_compares_filters_as_set():
    """Filter order and duplicates do not affect equality."""
    a = MeasurementConfiguration(
        dimension_filters=[DimensionFilter(name="a"), DimensionFilter(name="b")]
    )
    b = MeasurementConfiguration(
        dimension_filters=[
            DimensionFilter(name="b"),
            DimensionFilter(name="a"),
            DimensionFilter(name="a"),
        ]
    )
    assert a == b
    assert a != MeasurementConfiguration()
