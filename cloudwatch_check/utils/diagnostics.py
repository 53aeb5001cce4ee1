"""
Non-fatal diagnostics collected during a check run.

A run keeps producing output when some series are rejected, the listing hits
its page limit, or the provider attaches messages to a fetch response. These
conditions are collected here and surfaced after all batches: as ``#`` comment
lines on the output stream and as a summary in the logs.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..domain.models import DataQuery, MessageData
from ..errors import (
    CloudWatchCheckError,
    PaginationCapExceeded,
    ProviderDiagnostic,
    Rejection,
)

logger = logging.getLogger(__name__)

NO_QUERIES = "no metric data queries to process"
PROVIDER_MESSAGES = "some calls to GetMetricData returned messages"


@dataclass
class RunDiagnostics:
    """
    Accumulator for non-fatal conditions of one run.

    Attributes
    ----------
    rejections : List[Rejection]
        Listed series that did not match the configuration
    page_cap : Optional[PaginationCapExceeded]
        Set when the listing stopped at the page limit with pages remaining
    provider_messages : List[MessageData]
        Messages attached to fetch responses, across all batches
    no_queries : bool
        True when the working set expanded to zero queries
    """

    rejections: List[Rejection] = field(default_factory=list)
    page_cap: Optional[PaginationCapExceeded] = None
    provider_messages: List[MessageData] = field(default_factory=list)
    no_queries: bool = False

    @property
    def degraded(self) -> bool:
        """True when the run result must be downgraded to WARNING."""
        return self.no_queries or bool(self.warnings())

    def warnings(self) -> List[CloudWatchCheckError]:
        """The recorded conditions that degrade the run result."""
        found: List[CloudWatchCheckError] = []
        if self.page_cap is not None:
            found.append(self.page_cap)
        found.extend(
            ProviderDiagnostic(m.code, m.value) for m in self.provider_messages
        )
        return found

    def comment_lines(self) -> List[str]:
        """Render the output-stream comment lines for recorded warnings."""
        lines: List[str] = []
        if self.no_queries:
            lines.append(f"# Warning: {NO_QUERIES}")
        diagnostics: List[ProviderDiagnostic] = []
        for warning in self.warnings():
            if isinstance(warning, ProviderDiagnostic):
                diagnostics.append(warning)
            else:
                lines.append(f"# Warning: {warning.message}")
        if diagnostics:
            lines.append(f"# Warning: {PROVIDER_MESSAGES}")
            lines.extend(f"# GetMetricData:: {d.message}" for d in diagnostics)
        return lines


def describe_unused(query: DataQuery, region: str = "") -> str:
    """One summary entry for a query that returned no datapoints."""
    return (
        f"{query.label} Namespace:{query.series.namespace} "
        f"MetricName:{query.series.metric_name} Region:{region} "
        f"Dimensions:{{{query.series.dimension_string()}}}"
    )


def format_run_summary(
    queries: Dict[str, DataQuery],
    results: int,
    unused: List[str],
    diagnostics: RunDiagnostics,
    region: str = "",
) -> str:
    """
    Format a human-readable summary of a run.

    Parameters
    ----------
    queries : Dict[str, DataQuery]
        Every submitted query by identifier
    results : int
        Number of results the provider returned
    unused : List[str]
        Identifiers of queries without datapoints
    diagnostics : RunDiagnostics
        Non-fatal conditions of the run
    region : str
        Region reported for unused queries

    Returns
    -------
    str
        Formatted summary string
    """
    lines = [
        f"Queries: {len(queries)} submitted, {results} results, "
        f"{len(queries) - len(unused)} with data, {len(unused)} unused",
    ]

    # Group rejections by reason
    by_reason: Dict[str, List[Rejection]] = {}
    for rejection in diagnostics.rejections:
        by_reason.setdefault(rejection.reason, []).append(rejection)

    for reason, rejected in by_reason.items():
        lines.append(f"  - {len(rejected)} rejected: {reason}")
        names = [r.series.metric_name for r in rejected[:3]]
        if len(rejected) > 3:
            names.append(f"... and {len(rejected) - 3} more")
        lines.append(f"    Affected: {', '.join(names)}")

    if unused:
        lines.append("  Unused queries:")
        lines.extend(f"    {describe_unused(queries[i], region)}" for i in unused)

    return "\n".join(lines)
