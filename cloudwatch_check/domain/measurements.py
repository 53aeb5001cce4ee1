"""Measurement configuration model.

A :class:`MeasurementConfiguration` decides which listed series are relevant
(``metric name -> [StatConfig]`` mapping) and carries the listing narrowing
(namespace, metric filter, dimension filters), the aggregation period and an
optional region. It round-trips through a JSON document:

.. code-block:: json

    {
      "namespace": "AWS/EC2",
      "period-minutes": 5,
      "dimension-filters": ["InstanceId"],
      "measurements": [
        {"metric": "CPUUtilization",
         "config": [{"stat": "Average",
                     "measurement": "aws.ec2.cpu_utilization.average"}]}
      ]
    }

Documents may be partial: absent (or empty) keys keep their prior values, so a
custom document can be layered over an existing configuration.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

import orjson
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..errors import ConfigParseError, InvalidFilterSyntax
from .models import DimensionFilter, MetricSeries, StatConfig
from .utils.filters import dedupe_expressions, parse_dimension_filters
from .utils.labels import synthesize_label

logger = logging.getLogger(__name__)


class MeasurementEntry(BaseModel):
    """One ``measurements`` item: a metric name and its statistics."""

    metric: str = Field(..., min_length=1)
    config: List[StatConfig] = Field(default_factory=list)


class MeasurementDocument(BaseModel):
    """Schema of the declarative configuration document."""

    model_config = ConfigDict(populate_by_name=True)

    namespace: str = ""
    period_minutes: int = Field(0, ge=0, alias="period-minutes")
    region: str = ""
    metric_filter: str = Field("", alias="metric-filter")
    dimension_filters: List[str] = Field(
        default_factory=list, alias="dimension-filters"
    )
    measurements: List[MeasurementEntry] = Field(default_factory=list)


class MeasurementConfiguration:
    """Which metrics to accept and which statistics to request for each.

    Parameters
    ----------
    namespace: str
        Target namespace; empty means any.
    metric_filter: str
        Optional single metric-name override.
    period_minutes: int
        Aggregation period in minutes; 0 defers to the run's default.
    region: str
        Optional region hint.
    dimension_filters: Iterable[DimensionFilter]
        Listing narrowing predicates.
    stat_map: Dict[str, List[StatConfig]]
        Metric name to ordered statistics.
    default_stats: Iterable[str]
        Ad-hoc mode statistics. When set, listed metrics without an entry are
        adopted with one synthesized-label entry per statistic.
    """

    def __init__(
        self,
        namespace: str = "",
        metric_filter: str = "",
        period_minutes: int = 0,
        region: str = "",
        dimension_filters: Optional[Iterable[DimensionFilter]] = None,
        stat_map: Optional[Dict[str, List[StatConfig]]] = None,
        default_stats: Optional[Iterable[str]] = None,
    ) -> None:
        self.namespace = namespace
        self.metric_filter = metric_filter
        self.period_minutes = period_minutes
        self.region = region
        self.dimension_filters: List[DimensionFilter] = list(dimension_filters or [])
        self.stat_map: Dict[str, List[StatConfig]] = dict(stat_map or {})
        self.default_stats: List[str] = [
            s.strip() for s in (default_stats or []) if s.strip()
        ]

    @classmethod
    def from_text(cls, text: str) -> "MeasurementConfiguration":
        """Build a fresh configuration from a document."""
        config = cls()
        config.load_from_text(text)
        return config

    @property
    def adhoc(self) -> bool:
        """True when unknown metrics are adopted with default statistics."""
        return bool(self.default_stats)

    def load_from_text(self, text: str) -> None:
        """Apply a declarative document on top of the current values.

        Raises
        ------
        ConfigParseError
            If the text is not valid JSON, does not match the schema, repeats a
            metric name, or carries a malformed dimension filter. Nothing is
            applied in that case.
        """
        try:
            raw = orjson.loads(text)
        except orjson.JSONDecodeError as exc:
            raise ConfigParseError(f"invalid measurement configuration: {exc}") from exc
        if not isinstance(raw, dict):
            raise ConfigParseError(
                "invalid measurement configuration: top level must be an object"
            )
        try:
            doc = MeasurementDocument.model_validate(raw)
        except ValidationError as exc:
            raise ConfigParseError(
                f"invalid measurement configuration: {exc.error_count()} "
                f"validation error(s): {exc.errors()[0]['msg']}"
            ) from exc

        stat_map: Dict[str, List[StatConfig]] = {}
        for entry in doc.measurements:
            if entry.metric in stat_map:
                raise ConfigParseError(
                    f"invalid measurement configuration: metric {entry.metric!r} "
                    "listed more than once"
                )
            stat_map[entry.metric] = list(entry.config)
        try:
            filters = parse_dimension_filters(doc.dimension_filters)
        except InvalidFilterSyntax as exc:
            raise ConfigParseError(
                f"invalid measurement configuration: {exc}"
            ) from exc

        if doc.namespace:
            self.namespace = doc.namespace
        if doc.period_minutes > 0:
            self.period_minutes = doc.period_minutes
        if doc.region:
            self.region = doc.region
        if doc.metric_filter:
            self.metric_filter = doc.metric_filter
        if filters:
            self.dimension_filters = filters
        if stat_map:
            self.stat_map = stat_map
        logger.debug(
            "measurements.load",
            extra={
                "namespace": self.namespace,
                "metrics": len(self.stat_map),
                "dimension_filters": len(self.dimension_filters),
            },
        )

    def to_document(self) -> Dict[str, object]:
        """Return the configuration as a JSON-ready dictionary."""
        data: Dict[str, object] = {"namespace": self.namespace}
        if self.period_minutes > 0:
            data["period-minutes"] = self.period_minutes
        if self.region:
            data["region"] = self.region
        if self.metric_filter:
            data["metric-filter"] = self.metric_filter
        filters = dedupe_expressions(self.dimension_filters)
        if filters:
            data["dimension-filters"] = filters
        if self.stat_map:
            data["measurements"] = [
                {"metric": name, "config": [s.model_dump() for s in stats]}
                for name, stats in self.stat_map.items()
            ]
        return data

    def to_text(self, pretty: bool = False) -> str:
        """Serialize to the declarative schema; ``pretty`` indents by two."""
        option = orjson.OPT_INDENT_2 if pretty else 0
        return orjson.dumps(self.to_document(), option=option).decode("utf-8")

    def accepts_metric(self, name: str) -> bool:
        """True iff ``name`` has a mapping entry."""
        return name in self.stat_map

    def stats_for(self, name: str) -> List[StatConfig]:
        """Configured statistics for ``name`` (empty when absent)."""
        return list(self.stat_map.get(name, []))

    def add_dimension_filters(self, filters: Iterable[DimensionFilter]) -> None:
        """Append listing filters (e.g. CLI filters on top of a preset)."""
        self.dimension_filters.extend(filters)

    def adopt_series(self, series: MetricSeries) -> bool:
        """Add a synthesized entry for an unknown metric in ad-hoc mode.

        Returns True when an entry was added.
        """
        if not self.adhoc or series.metric_name in self.stat_map:
            return False
        self.stat_map[series.metric_name] = [
            StatConfig(stat=stat, measurement=synthesize_label(series, stat))
            for stat in self.default_stats
        ]
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MeasurementConfiguration):
            return NotImplemented
        return (
            self.namespace == other.namespace
            and self.metric_filter == other.metric_filter
            and self.period_minutes == other.period_minutes
            and self.region == other.region
            and set(dedupe_expressions(self.dimension_filters))
            == set(dedupe_expressions(other.dimension_filters))
            and self.stat_map == other.stat_map
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"MeasurementConfiguration(namespace={self.namespace!r}, "
            f"metrics={len(self.stat_map)}, period_minutes={self.period_minutes})"
        )
