"""Query batcher: expands the working set into fetch-sized query batches."""

from __future__ import annotations

import logging
import uuid
from typing import Iterator, List, Sequence

from .measurements import MeasurementConfiguration
from .models import DataQuery, MetricSeries
from .utils.labels import synthesize_label

logger = logging.getLogger(__name__)

# GetMetricData accepts at most 500 queries per call
BATCH_SIZE = 500


def new_query_id() -> str:
    """Provider ids must start with a lowercase letter and avoid dashes."""
    return "aws_" + str(uuid.uuid4()).replace("-", "_")


def build_queries(
    working_set: Sequence[MetricSeries],
    config: MeasurementConfiguration,
    period_minutes: int,
) -> List[DataQuery]:
    """
    Emit one query per (series, configured statistic).

    Ordering follows the working set, then each metric's statistic order.
    Metrics with no configured statistics produce no queries. In ad-hoc mode
    the label is synthesized from each series instead of taken from the
    mapping, since adopted entries are keyed by metric name only.

    Parameters
    ----------
    working_set: Sequence[MetricSeries]
        Accepted series in acceptance order.
    config: MeasurementConfiguration
        Configuration supplying statistics and labels.
    period_minutes: int
        Aggregation period; queries carry it in seconds.
    """
    period = 60 * period_minutes
    queries: List[DataQuery] = []
    for series in working_set:
        for stat_config in config.stats_for(series.metric_name):
            label = stat_config.measurement
            if config.adhoc:
                label = synthesize_label(series, stat_config.stat)
            queries.append(
                DataQuery(
                    id=new_query_id(),
                    label=label,
                    series=series,
                    stat=stat_config.stat,
                    period=period,
                )
            )
    logger.debug(
        "batcher.build",
        extra={"series": len(working_set), "queries": len(queries), "period": period},
    )
    return queries


def batched(
    queries: Sequence[DataQuery], size: int = BATCH_SIZE
) -> Iterator[List[DataQuery]]:
    """Yield consecutive chunks of at most ``size`` queries."""
    if size < 1:
        raise ValueError("batch size must be positive")
    for start in range(0, len(queries), size):
        yield list(queries[start : start + size])
