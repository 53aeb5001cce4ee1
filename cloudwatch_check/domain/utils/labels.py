"""
Metric label normalization.

Turns provider identifiers such as ``AWS/ApplicationELB`` + ``HTTPCode_ELB_5XX``
into stable lowercase labels (``aws.application_elb.http_code_elb_5_xx``).
"""

import re

from ..models import MetricSeries

# Boundary before a capitalized word ("HTTPRequest" -> "HTTP_Request")
_FIRST_CAP = re.compile(r"(.)([A-Z][a-z]+)")
# Boundary after a lowercase letter or digit ("id0Value" -> "id0_Value")
_ALL_CAP = re.compile(r"([a-z0-9])([A-Z])")

UNKNOWN_NAMESPACE = "Unknown/Namespace"
DEFAULT_DELIMITER = "."


def normalize(raw: str) -> str:
    """
    Convert a mixed or camel-case identifier to snake_case.

    Separators are only inserted at word boundaries and never removed. The
    transform is idempotent.

    Examples
    --------
    >>> normalize("HTTPRequest")
    'http_request'
    >>> normalize("ID0Value")
    'id0_value'
    >>> normalize("already_snake")
    'already_snake'
    """
    snake = _FIRST_CAP.sub(r"\1_\2", raw)
    snake = _ALL_CAP.sub(r"\1_\2", snake)
    return snake.lower()


def build_label_base(series: MetricSeries, delimiter: str = DEFAULT_DELIMITER) -> str:
    """
    Build the base label of a series from its namespace and metric name.

    The namespace is split on ``/`` and each segment normalized; the segments
    and the normalized metric name are joined with ``delimiter``.
    """
    namespace = series.namespace or UNKNOWN_NAMESPACE
    segments = [normalize(s) for s in namespace.split("/")]
    segments.append(normalize(series.metric_name))
    return delimiter.join(segments)


def synthesize_label(series: MetricSeries, stat: str) -> str:
    """Label used for a statistic when no configuration supplies one."""
    return f"{build_label_base(series)}.{normalize(stat)}"


def label_base(label: str) -> str:
    """Strip the trailing ``_suffix`` of a label (used for HELP/TYPE lines)."""
    last = label.rfind("_")
    if last > 0:
        return label[:last]
    return label
