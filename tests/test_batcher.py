"""Tests for query expansion and batching."""

from __future__ import annotations

import math

import pytest

from cloudwatch_check.domain.batcher import BATCH_SIZE, batched, build_queries
from cloudwatch_check.domain.measurements import MeasurementConfiguration
from cloudwatch_check.domain.models import Dimension, MetricSeries, StatConfig


def _working_set(n: int, name: str = "RequestCount") -> list[MetricSeries]:
    return [
        MetricSeries(
            namespace="AWS/Test",
            metric_name=name,
            dimensions=(Dimension(name="Id", value=str(i)),),
        )
        for i in range(n)
    ]


def _config(k: int) -> MeasurementConfiguration:
    stats = [StatConfig(stat=f"p{i}", measurement=f"label_p{i}") for i in range(k)]
    return MeasurementConfiguration(stat_map={"RequestCount": stats})


@pytest.mark.parametrize("n, k", [(1, 1), (3, 2), (250, 3), (501, 1)])
def test_query_and_batch_counts(n, k):
    """N series with K stats give N*K queries in ceil(N*K/500) batches."""
    queries = build_queries(_working_set(n), _config(k), period_minutes=1)
    assert len(queries) == n * k
    batches = list(batched(queries))
    assert len(batches) == math.ceil(n * k / BATCH_SIZE)
    assert all(len(b) <= BATCH_SIZE for b in batches)
    assert [q for b in batches for q in b] == queries


def test_query_fields_and_order():
    """Queries follow series order then stat order, period in seconds."""
    working_set = _working_set(2)
    queries = build_queries(working_set, _config(2), period_minutes=5)
    assert [(q.series.dimensions[0].value, q.stat) for q in queries] == [
        ("0", "p0"),
        ("0", "p1"),
        ("1", "p0"),
        ("1", "p1"),
    ]
    assert {q.period for q in queries} == {300}
    assert queries[1].label == "label_p1"
    assert queries[0].series is working_set[0]


def test_query_ids_unique_and_provider_safe():
    """Identifiers are unique, start with a letter and contain no dashes."""
    queries = build_queries(_working_set(50), _config(2), period_minutes=1)
    ids = [q.id for q in queries]
    assert len(set(ids)) == len(ids)
    assert all(i.startswith("aws_") and "-" not in i for i in ids)


def test_no_queries_for_unconfigured_or_empty_stats():
    """Metrics without statistics never produce queries."""
    cfg = MeasurementConfiguration(stat_map={"RequestCount": []})
    assert build_queries(_working_set(3), cfg, 1) == []
    assert build_queries(_working_set(3, name="Other"), _config(1), 1) == []


def test_adhoc_labels_are_synthesized():
    """Ad-hoc mode labels come from the series and the statistic."""
    cfg = MeasurementConfiguration(default_stats=["SampleCount"])
    series = _working_set(1)
    cfg.adopt_series(series[0])
    (query,) = build_queries(series, cfg, 1)
    assert query.label == "aws.test.request_count.sample_count"


def test_batched_rejects_non_positive_size():
    """A batch size below one is a programming error."""
    with pytest.raises(ValueError):
        list(batched([], size=0))
