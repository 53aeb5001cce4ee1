"""Canonical data model shared by the matcher, batcher and run engine.

These Pydantic models represent provider series, the statistics requested for
them, and the datapoint results that come back. Series and queries are frozen:
a series is immutable once listed and every query derived from it references
the same instance.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Dimension(BaseModel):
    """A single (name, value) dimension of a series."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: str


class MetricSeries(BaseModel):
    """One time series at the provider.

    Attributes
    ----------
    namespace: str
        Provider namespace (e.g., "AWS/EC2"). May be empty when unknown.
    metric_name: str
        Provider metric name (e.g., "CPUUtilization").
    dimensions: Tuple[Dimension, ...]
        Dimensions in the order the provider returned them. Order does not
        affect identity but is preserved for output formatting.
    """

    model_config = ConfigDict(frozen=True)

    namespace: str = ""
    metric_name: str
    dimensions: Tuple[Dimension, ...] = ()

    def identity(self) -> Tuple[str, str, frozenset]:
        """Order-insensitive identity of the series."""
        return (
            self.namespace,
            self.metric_name,
            frozenset((d.name, d.value) for d in self.dimensions),
        )

    def dimension_string(self, region: str = "") -> str:
        """Render dimensions as ``name="value"`` pairs joined by commas.

        A synthetic ``Region`` pair is appended when ``region`` is set.
        """
        pairs = [f'{d.name}="{d.value}"' for d in self.dimensions]
        if region:
            pairs.append(f'Region="{region}"')
        return ",".join(pairs)


class DimensionFilter(BaseModel):
    """Narrowing predicate for the series listing.

    ``value`` unset means any value for the dimension name.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    value: Optional[str] = None

    def to_expression(self) -> str:
        """Return the ``name`` / ``name=value`` form of this filter."""
        name = self.name.strip()
        if self.value is None:
            return name
        return f"{name}={self.value.strip()}"


class StatConfig(BaseModel):
    """A statistic to request and the label its values are emitted under."""

    stat: str = Field(..., min_length=1, description="Provider statistic name")
    measurement: str = Field(..., min_length=1, description="Output label")


class DataQuery(BaseModel):
    """One fully specified request unit.

    Attributes
    ----------
    id: str
        Opaque identifier, unique within the run.
    label: str
        Output label for the query's datapoints.
    series: MetricSeries
        Source series (shared with the working set, not copied).
    stat: str
        Provider statistic name.
    period: int
        Aggregation period in seconds.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    series: MetricSeries
    stat: str
    period: int = Field(..., ge=1)


class MessageData(BaseModel):
    """Diagnostic message attached by the provider to a response."""

    code: str = ""
    value: str = ""


class DataResult(BaseModel):
    """Datapoints returned for one query identifier."""

    id: str
    label: str = ""
    timestamps: List[datetime] = Field(default_factory=list)
    values: List[float] = Field(default_factory=list)
    status_code: str = ""
    messages: List[MessageData] = Field(default_factory=list)

    def points(self) -> List[Tuple[datetime, float]]:
        """Pair timestamps with values in provider order.

        Raises ``ValueError`` when the two lists differ in length.
        """
        return list(zip(self.timestamps, self.values, strict=True))


class TimeWindow(BaseModel):
    """Closed time range a fetch call covers."""

    start: datetime
    end: datetime
