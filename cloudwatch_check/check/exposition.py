"""
Output line formatting.

Data lines follow the text exposition shape::

    <label>{<name>="<value>",...} <value> <timestamp_ms>

Comment lines start with ``#``.
"""

from __future__ import annotations

import math
from datetime import datetime
from typing import List

from ..domain.models import DataQuery
from ..domain.utils.labels import label_base
from ..domain.utils.timestamps import to_epoch_ms


def format_value(value: float) -> str:
    """
    Render a datapoint value.

    Integral finite values print without a fractional part, everything else
    uses the shortest round-tripping representation.

    Examples
    --------
    >>> format_value(0.0)
    '0'
    >>> format_value(12.5)
    '12.5'
    """
    if math.isfinite(value) and value == int(value):
        return str(int(value))
    return repr(float(value))


def format_point_line(
    query: DataQuery, timestamp: datetime, value: float, region: str = ""
) -> str:
    """Render one datapoint of ``query``."""
    dims = query.series.dimension_string(region)
    return f"{query.label}{{{dims}}} {format_value(value)} {to_epoch_ms(timestamp)}"


def format_dry_run_line(query: DataQuery, region: str = "") -> str:
    """Placeholder emitted instead of fetching in dry-run mode."""
    dims = query.series.dimension_string(region)
    return f"# dry-run: {query.label}{{{dims}}} stat={query.stat} period={query.period}"


def format_metadata_lines(query: DataQuery, region: str = "") -> List[str]:
    """HELP and TYPE lines for the label base of ``query``."""
    base = label_base(query.label)
    return [
        f"# HELP {base} Namespace:{query.series.namespace} "
        f"MetricName:{query.series.metric_name} Region:{region}",
        f"# TYPE {base} gauge",
    ]
